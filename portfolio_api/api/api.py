# === portfolio_api/api/api.py ===
from fastapi import APIRouter
from .endpoints import projects, skills, contact

api_router = APIRouter()
api_router.include_router(projects.router, prefix="/projects", tags=["Projects"])
api_router.include_router(skills.router, prefix="/skills", tags=["Skills"])
api_router.include_router(contact.router, prefix="/contact", tags=["Contact"])
