from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import JWTError, jwt
from passlib.context import CryptContext
from datetime import datetime, timedelta, timezone
from typing import Optional
from portfolio_api.schemas.auth import TokenData
from portfolio_api.core.config import settings
from portfolio_api.core.exceptions import UnauthorizedError
import logging

logger = logging.getLogger(__name__)

# pbkdf2_sha256 needs no native bcrypt build
pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")

security = HTTPBearer(auto_error=False)

def hash_password(password: str) -> str:
    return pwd_context.hash(password)

def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)

def create_access_token(admin_id: str, email: str, expires_delta: Optional[timedelta] = None) -> str:
    """Sign a bearer token for the admin, valid for jwt_expire_days by default"""
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(days=settings.jwt_expire_days))
    to_encode = {"sub": admin_id, "email": email, "exp": expire}
    return jwt.encode(to_encode, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)

def decode_access_token(token: str) -> TokenData:
    try:
        payload = jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
    except JWTError as e:
        logger.warning(f"⚠️ Rejected bearer token: {e}")
        raise UnauthorizedError("Invalid token")

    admin_id = payload.get("sub")
    if not admin_id:
        raise UnauthorizedError("Invalid token")
    return TokenData(admin_id=admin_id, email=payload.get("email"))

async def get_current_admin(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security)
) -> TokenData:
    """Verify the bearer token guarding every admin route"""
    if credentials is None or not credentials.credentials:
        raise UnauthorizedError("Not authenticated")
    return decode_access_token(credentials.credentials)
