# === portfolio_api/models/project.py ===
from sqlalchemy import Column, Integer, String, Text, Boolean, JSON
from portfolio_api.db.database import Base

class Project(Base):
    __tablename__ = "projects"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    image_url = Column(String, nullable=False)
    live_link = Column(String, nullable=True)
    github_link = Column(String, nullable=True)
    tags = Column(JSON, nullable=False)  # ordered list of strings
    category = Column(String, nullable=False)  # WordPress, Laravel, Shopify, Frontend...
    featured = Column(Boolean, nullable=False, default=False)
