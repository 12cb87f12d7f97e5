from sqlalchemy import Column, String, Text, Integer, Boolean, Uuid
import uuid
from .base import Base, TimestampMixin

class Quote(Base, TimestampMixin):
    __tablename__ = "quotes"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    text = Column(Text, nullable=False)
    profile_image = Column(String(500), nullable=True)
    likes = Column(Integer, nullable=False, default=0)
    shares = Column(Integer, nullable=False, default=0)
    # Visibility filter only; any number of quotes can be active
    active = Column(Boolean, nullable=False, default=True, index=True)
    order = Column(Integer, nullable=False, default=0)
