# === portfolio_api/api/endpoints/projects.py ===
from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio_api.core.errors import NotFoundError
from portfolio_api.db.database import get_db
from portfolio_api.schemas.project import ProjectRead
from portfolio_api.services.portfolio_repository import PortfolioRepository

router = APIRouter()

@router.get("", response_model=List[ProjectRead])
async def list_projects(db: AsyncSession = Depends(get_db)):
    return await PortfolioRepository(db).list_projects()

# the int convertor only matches digits, anything else is a routing miss
@router.get("/{project_id:int}", response_model=ProjectRead)
async def get_project(project_id: int, db: AsyncSession = Depends(get_db)):
    project = await PortfolioRepository(db).get_project(project_id)
    if not project:
        raise NotFoundError("Project not found")
    return project
