from pydantic import BaseModel
from datetime import datetime
from uuid import UUID

class CVBase(BaseModel):
    filename: str
    filepath: str
    version: str = "1.0"

class CVCreate(CVBase):
    pass

class CVUpdate(BaseModel):
    pass

class CVResponse(CVBase):
    id: UUID
    active: bool
    uploaded_at: datetime

    class Config:
        from_attributes = True
