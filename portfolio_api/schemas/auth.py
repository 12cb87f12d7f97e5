from pydantic import BaseModel, Field
from typing import Optional

class LoginRequest(BaseModel):
    # Plain string: the configured admin email may use a reserved domain like .local
    email: str = Field(..., min_length=1, max_length=255)
    password: str

class LoginResponse(BaseModel):
    token: str
    email: str
    token_type: str = "bearer"

class TokenData(BaseModel):
    admin_id: Optional[str] = None
    email: Optional[str] = None

class AdminInfoResponse(BaseModel):
    id: str
    email: str

class MessageResponse(BaseModel):
    message: str
