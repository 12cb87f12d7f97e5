from typing import Optional
from enum import Enum
from pydantic import BaseModel, Field
from uuid import UUID
from datetime import datetime

class QuoteCounter(str, Enum):
    LIKES = "likes"
    SHARES = "shares"

class QuoteBase(BaseModel):
    text: str = Field(..., min_length=1)
    active: bool = True
    order: int = 0

class QuoteCreate(QuoteBase):
    profile_image: Optional[str] = None

class QuoteUpdate(BaseModel):
    text: Optional[str] = Field(None, min_length=1)
    active: Optional[bool] = None
    order: Optional[int] = None
    profile_image: Optional[str] = None

class QuoteResponse(QuoteBase):
    id: UUID
    profile_image: Optional[str] = None
    likes: int
    shares: int
    created_at: datetime

    class Config:
        from_attributes = True
