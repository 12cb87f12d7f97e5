from sqlalchemy.orm import declarative_base
from sqlalchemy import Column, DateTime
from datetime import datetime, timezone

Base = declarative_base()

def utcnow() -> datetime:
    # Python-side so sibling rows created within the same second still sort
    return datetime.now(timezone.utc)

class TimestampMixin:
    """Mixin to add a created_at timestamp to models"""
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False, index=True)
