from sqlalchemy import Column, String, Text, Boolean, DateTime, JSON, Uuid
import uuid
from .base import Base, TimestampMixin, utcnow

class Blog(Base, TimestampMixin):
    __tablename__ = "blogs"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    title = Column(String(255), nullable=False)
    content = Column(Text, nullable=False)
    excerpt = Column(Text, nullable=True)
    image = Column(String(500), nullable=True)
    category = Column(String(100), nullable=False, default="DevOps")
    tags = Column(JSON, nullable=False, default=list)
    published = Column(Boolean, nullable=False, default=False, index=True)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)
