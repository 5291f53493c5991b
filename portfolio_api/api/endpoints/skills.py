# === portfolio_api/api/endpoints/skills.py ===
from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio_api.db.database import get_db
from portfolio_api.schemas.skill import SkillRead
from portfolio_api.services.portfolio_repository import PortfolioRepository

router = APIRouter()

@router.get("", response_model=List[SkillRead])
async def list_skills(db: AsyncSession = Depends(get_db)):
    return await PortfolioRepository(db).list_skills()
