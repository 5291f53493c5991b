# === portfolio_api/schemas/skill.py ===
from pydantic import Field
from typing import Optional
from portfolio_api.schemas.base import CamelModel


class SkillCreate(CamelModel):
    name: str = Field(min_length=1)
    category: str = Field(min_length=1)
    proficiency: int = Field(ge=0, le=100)
    icon: Optional[str] = None


class SkillRead(CamelModel):
    id: int
    name: str
    category: str
    proficiency: int
    icon: Optional[str]
