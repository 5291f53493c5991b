# === portfolio_api/services/portfolio_repository.py ===
from typing import List, Optional, Sequence
from sqlalchemy import func, insert
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from portfolio_api.models.message import Message
from portfolio_api.models.project import Project
from portfolio_api.models.skill import Skill
from portfolio_api.schemas.message import MessageCreate
from portfolio_api.schemas.project import ProjectCreate
from portfolio_api.schemas.skill import SkillCreate

# ids are stored in a 32-bit INTEGER column
MAX_ID = 2**31 - 1


class PortfolioRepository:
    """All reads and writes of portfolio rows go through here.

    Every method issues a single statement. Store errors are not caught;
    they surface at the HTTP boundary as a 500.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_projects(self) -> List[Project]:
        result = await self.session.execute(select(Project).order_by(Project.id))
        return list(result.scalars().all())

    async def get_project(self, project_id: int) -> Optional[Project]:
        if project_id < 0 or project_id > MAX_ID:
            return None
        result = await self.session.execute(
            select(Project).where(Project.id == project_id)
        )
        return result.scalar_one_or_none()

    async def list_skills(self) -> List[Skill]:
        result = await self.session.execute(select(Skill).order_by(Skill.id))
        return list(result.scalars().all())

    async def create_message(self, payload: MessageCreate) -> Message:
        result = await self.session.execute(
            insert(Message).values(**payload.model_dump()).returning(Message)
        )
        message = result.scalar_one()
        await self.session.commit()
        return message

    # seed-only writes; callers own the commit

    async def insert_projects(self, batch: Sequence[ProjectCreate]) -> None:
        if not batch:
            return
        await self.session.execute(insert(Project), [p.model_dump() for p in batch])

    async def insert_skills(self, batch: Sequence[SkillCreate]) -> None:
        if not batch:
            return
        await self.session.execute(insert(Skill), [s.model_dump() for s in batch])

    async def count_projects(self) -> int:
        result = await self.session.execute(select(func.count(Project.id)))
        return result.scalar() or 0

    async def count_skills(self) -> int:
        result = await self.session.execute(select(func.count(Skill.id)))
        return result.scalar() or 0
