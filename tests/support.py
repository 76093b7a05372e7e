"""Shared fixtures for tests that need a real (in-memory) database."""

import unittest

from inkwell.core.database import SessionLocal, engine
from inkwell.models import Base, Category, User
from inkwell.schemas.posts import PostCreate
from inkwell.services.posts import create_post
from inkwell.services.users import create_user


def reset_database() -> None:
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)


def add_category(name: str = "Technology", slug: str | None = None) -> Category:
    """Insert a category in its own session and return the detached row."""
    with SessionLocal() as db:
        category = Category(name=name, slug=slug or name.lower())
        db.add(category)
        db.commit()
        db.refresh(category)
        db.expunge(category)
        return category


class DatabaseTestCase(unittest.TestCase):
    """Fresh schema per test plus a session in self.db."""

    def setUp(self) -> None:
        reset_database()
        self.db = SessionLocal()

    def tearDown(self) -> None:
        self.db.close()

    def make_user(
        self,
        username: str = "alice",
        email: str = "alice@example.com",
        password: str = "password123",
    ) -> User:
        return create_user(self.db, username, email, password)

    def make_category(self, name: str = "Technology") -> Category:
        category = Category(name=name, slug=name.lower())
        self.db.add(category)
        self.db.commit()
        return category

    def make_post(self, author: User, category: Category, title: str = "My Title", **kwargs):
        data = PostCreate(
            title=title,
            content=kwargs.pop("content", "Some content"),
            category=str(category.id),
            **kwargs,
        )
        return create_post(self.db, data, author_id=author.id)
