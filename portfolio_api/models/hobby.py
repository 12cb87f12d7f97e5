from sqlalchemy import Column, String, Integer, Uuid
import uuid
from .base import Base, TimestampMixin

class Hobby(Base, TimestampMixin):
    __tablename__ = "hobbies"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    category = Column(String(100), nullable=False)
    headline = Column(String(255), nullable=False)
    image = Column(String(500), nullable=False)
    order = Column(Integer, nullable=False, default=0)
