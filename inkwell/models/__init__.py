"""SQLAlchemy ORM models."""

from inkwell.models.base import Base
from inkwell.models.category import Category
from inkwell.models.post import Post
from inkwell.models.user import User

__all__ = ["Base", "Category", "Post", "User"]
