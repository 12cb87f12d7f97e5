from sqlalchemy import Column, String, Boolean, DateTime, Index, Uuid, text
import uuid
from .base import Base, utcnow

class CV(Base):
    __tablename__ = "cvs"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    filename = Column(String(255), nullable=False)
    filepath = Column(String(500), nullable=False)
    version = Column(String(50), nullable=False, default="1.0")
    active = Column(Boolean, nullable=False, default=True)
    uploaded_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, index=True)

    __table_args__ = (
        # At most one active CV; a second active row is an integrity error
        Index(
            "uq_cvs_single_active",
            "active",
            unique=True,
            postgresql_where=text("active"),
            sqlite_where=text("active"),
        ),
    )
