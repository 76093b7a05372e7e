"""ORM model for post categories (read-only from the authoring flow)."""

import uuid

from sqlalchemy import Column, DateTime, String, Text, Uuid

from inkwell.models.base import Base, utcnow


class Category(Base):
    __tablename__ = "categories"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String(100), nullable=False)
    slug = Column(String(120), nullable=False, unique=True, index=True)
    description = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
