# === portfolio_api/schemas/message.py ===
from pydantic import EmailStr, Field
from datetime import datetime
from portfolio_api.schemas.base import CamelModel


class MessageCreate(CamelModel):
    name: str = Field(min_length=1)
    email: EmailStr
    message: str = Field(min_length=1)


class MessageRead(CamelModel):
    id: int
    name: str
    email: str
    message: str
    created_at: datetime
