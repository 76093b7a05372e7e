"""ORM model for blog posts."""

import uuid

from sqlalchemy import (
    JSON,
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Index,
    String,
    Text,
    Uuid,
)
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import relationship

from inkwell.models.base import Base, utcnow


class Post(Base):
    """
    A post owned by its author.

    author_id is set once at creation and never reassigned. slug is unique at
    the storage layer; services look for a free slug first so the constraint
    only fires when two writers race.
    """

    __tablename__ = "posts"
    __table_args__ = (
        Index("ix_posts_author_created", "author_id", "created_at"),
        Index("ix_posts_category_created", "category_id", "created_at"),
    )

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    title = Column(String(200), nullable=False)
    content = Column(Text, nullable=False)
    slug = Column(String(255), nullable=False, unique=True, index=True)
    tags = Column(JSON().with_variant(JSONB, "postgresql"), nullable=False, default=list)
    published = Column(Boolean, nullable=False, default=True)
    author_id = Column(Uuid, ForeignKey("users.id"), nullable=False)
    category_id = Column(Uuid, ForeignKey("categories.id"), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(
        DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow
    )

    author = relationship("User", lazy="joined")
    category = relationship("Category", lazy="joined")

    def __repr__(self) -> str:
        return f"<Post id={self.id} slug={self.slug!r}>"
