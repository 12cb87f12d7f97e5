from fastapi import HTTPException, status
from functools import wraps
from typing import Callable
import logging

logger = logging.getLogger(__name__)

class DatabaseError(HTTPException):
    """Custom exception for database errors"""
    def __init__(self, detail: str = "Database operation failed"):
        super().__init__(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)

class NotFoundError(HTTPException):
    """Custom exception for not found errors"""
    def __init__(self, resource: str = "Resource", detail: str = None):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail or f"{resource} not found")

class UnauthorizedError(HTTPException):
    """Custom exception for missing or invalid credentials"""
    def __init__(self, detail: str = "Could not validate credentials"):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )

class ValidationError(HTTPException):
    """Custom exception for validation errors"""
    def __init__(self, detail: str = "Validation failed"):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)

class PayloadTooLargeError(HTTPException):
    """Custom exception for uploads over the per-resource size limit"""
    def __init__(self, limit_bytes: int):
        super().__init__(
            status_code=status.HTTP_413_CONTENT_TOO_LARGE,
            detail=f"File too large (limit {limit_bytes // (1024 * 1024)} MB)",
        )

def handle_database_errors(func: Callable) -> Callable:
    """Decorator mapping any non-HTTP failure to a 500 carrying the raw message"""
    @wraps(func)
    async def wrapper(*args, **kwargs):
        try:
            return await func(*args, **kwargs)
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"❌ {func.__name__} failed: {e}")
            raise DatabaseError(str(e))
    return wrapper
