# === portfolio_api/schemas/project.py ===
from pydantic import Field
from typing import List, Optional
from portfolio_api.schemas.base import CamelModel


class ProjectCreate(CamelModel):
    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    image_url: str = Field(min_length=1)
    live_link: Optional[str] = None
    github_link: Optional[str] = None
    tags: List[str] = Field(min_length=1)
    category: str = Field(min_length=1)
    featured: bool = False


class ProjectRead(CamelModel):
    id: int
    title: str
    description: str
    image_url: str
    live_link: Optional[str]
    github_link: Optional[str]
    tags: List[str]
    category: str
    featured: bool
