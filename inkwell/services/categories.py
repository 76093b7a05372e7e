"""Read-only category lookups."""

import uuid

from sqlalchemy.orm import Session

from inkwell.models import Category


def get_category(db: Session, category_id: uuid.UUID) -> Category | None:
    return db.get(Category, category_id)


def list_categories(db: Session) -> list[Category]:
    return db.query(Category).order_by(Category.name).all()
