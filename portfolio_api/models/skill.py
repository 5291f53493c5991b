# === portfolio_api/models/skill.py ===
from sqlalchemy import Column, Integer, String
from portfolio_api.db.database import Base

class Skill(Base):
    __tablename__ = "skills"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    category = Column(String, nullable=False)  # Frontend, Backend, CMS, E-commerce
    proficiency = Column(Integer, nullable=False)  # 0-100
    icon = Column(String, nullable=True)  # opaque icon name, resolved by the UI
