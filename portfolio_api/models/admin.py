from sqlalchemy import Column, String, Uuid
import uuid
from .base import Base, TimestampMixin

class Admin(Base, TimestampMixin):
    """The single administrative account"""
    __tablename__ = "admins"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
