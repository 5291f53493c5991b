# === portfolio_api/db/seed.py ===
"""
Default catalogue for the reference tables.

Projects and skills are only ever written here. The catalogue runs through the
same creation schemas as any other input, so a bad edit to it fails at startup
instead of landing in the store.
"""

import logging
from typing import List, Tuple
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio_api.schemas.project import ProjectCreate
from portfolio_api.schemas.skill import SkillCreate
from portfolio_api.services.portfolio_repository import PortfolioRepository

logger = logging.getLogger(__name__)

PROJECT_CATALOGUE = [
    {
        "title": "E-Commerce Platform",
        "description": "A full-featured Shopify store with custom theme development and app integration.",
        "imageUrl": "https://images.unsplash.com/photo-1557821552-17105176677c?w=800&q=80",
        "tags": ["Shopify", "Liquid", "JavaScript"],
        "category": "Shopify",
        "liveLink": "https://example.com",
        "featured": True,
    },
    {
        "title": "Corporate Website",
        "description": "Custom WordPress theme development for a corporate client with heavy traffic.",
        "imageUrl": "https://images.unsplash.com/photo-1460925895917-afdab827c52f?w=800&q=80",
        "tags": ["WordPress", "PHP", "MySQL"],
        "category": "WordPress",
        "featured": True,
    },
    {
        "title": "SaaS Dashboard",
        "description": "A Laravel-based dashboard for managing user subscriptions and analytics.",
        "imageUrl": "https://images.unsplash.com/photo-1551288049-bebda4e38f71?w=800&q=80",
        "tags": ["Laravel", "Vue.js", "Tailwind"],
        "category": "Laravel",
        "featured": True,
    },
    {
        "title": "Portfolio v1",
        "description": "My previous portfolio built with pure HTML/CSS and JavaScript.",
        "imageUrl": "https://images.unsplash.com/photo-1507238691740-187a5b1d37b8?w=800&q=80",
        "tags": ["HTML", "CSS", "JavaScript"],
        "category": "Frontend",
        "featured": False,
    },
]

SKILL_CATALOGUE = [
    {"name": "HTML/CSS", "category": "Frontend", "proficiency": 95},
    {"name": "JavaScript", "category": "Frontend", "proficiency": 90},
    {"name": "React", "category": "Frontend", "proficiency": 75, "icon": "SiReact"},
    {"name": "Next.js", "category": "Frontend", "proficiency": 70, "icon": "SiNextdotjs"},
    {"name": "PHP", "category": "Backend", "proficiency": 85, "icon": "SiPhp"},
    {"name": "Laravel", "category": "Backend", "proficiency": 80, "icon": "SiLaravel"},
    {"name": "Node.js", "category": "Backend", "proficiency": 60, "icon": "SiNodedotjs"},
    {"name": "WordPress", "category": "CMS", "proficiency": 95, "icon": "SiWordpress"},
    {"name": "Shopify", "category": "E-commerce", "proficiency": 85, "icon": "SiShopify"},
]


def project_catalogue() -> List[ProjectCreate]:
    return [ProjectCreate.model_validate(item) for item in PROJECT_CATALOGUE]


def skill_catalogue() -> List[SkillCreate]:
    return [SkillCreate.model_validate(item) for item in SKILL_CATALOGUE]


async def ensure_seeded(session: AsyncSession) -> Tuple[int, int]:
    """Fill whichever reference tables are empty.

    Returns the number of (projects, skills) inserted; (0, 0) on a store that
    is already seeded.
    """
    repo = PortfolioRepository(session)
    projects_added = 0
    skills_added = 0

    if await repo.count_projects() == 0:
        projects = project_catalogue()
        await repo.insert_projects(projects)
        projects_added = len(projects)

    if await repo.count_skills() == 0:
        skills = skill_catalogue()
        await repo.insert_skills(skills)
        skills_added = len(skills)

    await session.commit()

    if projects_added or skills_added:
        logger.info(f"Seeded {projects_added} projects and {skills_added} skills")
    else:
        logger.info("Reference tables already seeded")
    return projects_added, skills_added
