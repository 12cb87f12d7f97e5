from typing import Optional
from pydantic import BaseModel, Field
from uuid import UUID
from datetime import datetime

class HobbyBase(BaseModel):
    category: str = Field(..., min_length=1, max_length=100)
    headline: str = Field(..., min_length=1, max_length=255)
    order: int = 0

class HobbyCreate(HobbyBase):
    image: str

class HobbyUpdate(BaseModel):
    category: Optional[str] = Field(None, min_length=1, max_length=100)
    headline: Optional[str] = Field(None, min_length=1, max_length=255)
    order: Optional[int] = None
    image: Optional[str] = None

class HobbyResponse(HobbyBase):
    id: UUID
    image: str
    created_at: datetime

    class Config:
        from_attributes = True
