# === portfolio_api/api/endpoints/contact.py ===
import logging
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio_api.db.database import get_db
from portfolio_api.schemas.message import MessageCreate, MessageRead
from portfolio_api.services.portfolio_repository import PortfolioRepository

logger = logging.getLogger(__name__)

router = APIRouter()

@router.post("", response_model=MessageRead, status_code=status.HTTP_201_CREATED)
async def submit_contact(payload: MessageCreate, db: AsyncSession = Depends(get_db)):
    """Store a contact form submission"""
    message = await PortfolioRepository(db).create_message(payload)
    logger.info(f"Contact message {message.id} received")
    return message
