# === portfolio_api/db/database.py ===

from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from fastapi import Request
from typing import AsyncGenerator

Base = declarative_base()


class Database:
    """Engine and session factory for one application instance."""

    def __init__(self, url: str, echo: bool = False):
        self.url = url
        self.engine = create_async_engine(url, echo=echo)
        self.async_session = sessionmaker(
            self.engine, expire_on_commit=False, class_=AsyncSession
        )

    async def create_db_and_tables(self):
        # tables only land on Base.metadata once their models are imported
        from portfolio_api.models import message, project, skill  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self):
        await self.engine.dispose()


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    async with request.app.state.db.async_session() as session:
        yield session
