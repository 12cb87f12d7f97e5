from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from portfolio_api.schemas.auth import LoginRequest, LoginResponse, AdminInfoResponse, TokenData
from portfolio_api.core.auth import create_access_token, get_current_admin
from portfolio_api.core.database import get_db
from portfolio_api.core.exceptions import handle_database_errors, ValidationError
from portfolio_api.services.admin_service import admin_service

router = APIRouter()


@router.post(
    "/login",
    response_model=LoginResponse,
    summary="Admin login",
    description="Exchange the admin email and password for a 7-day bearer token",
    tags=["Authentication"]
)
@handle_database_errors
async def login(credentials: LoginRequest, db: AsyncSession = Depends(get_db)):
    """Sign in the admin"""
    admin = await admin_service.authenticate(db, credentials.email, credentials.password)
    if admin is None:
        raise ValidationError("Invalid credentials")

    token = create_access_token(admin_id=str(admin.id), email=admin.email)
    return LoginResponse(token=token, email=admin.email)


@router.get(
    "/me",
    response_model=AdminInfoResponse,
    summary="Get current admin info",
    tags=["Authentication"]
)
async def get_current_admin_info(current_admin: TokenData = Depends(get_current_admin)):
    """Get the identity carried by the bearer token"""
    return AdminInfoResponse(id=current_admin.admin_id, email=current_admin.email or "")
