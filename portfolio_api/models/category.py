from sqlalchemy import Column, String, Integer, Uuid
import uuid
from .base import Base, TimestampMixin

class Category(Base, TimestampMixin):
    __tablename__ = "categories"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    name = Column(String(255), nullable=False)
    order = Column(Integer, nullable=False, default=0)
