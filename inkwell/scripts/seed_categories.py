"""
Seed the default post categories. Run from project root:
  python -m inkwell.scripts.seed_categories
Existing categories (matched by slug) are left untouched, so it is safe to rerun.
"""
import argparse
import logging
import sys

from sqlalchemy.orm import Session

from inkwell.core.config import get_settings
from inkwell.core.database import SessionLocal, init_db
from inkwell.core.logging import configure_logging
from inkwell.models import Category

logger = logging.getLogger(__name__)

DEFAULT_CATEGORIES = (
    ("Technology", "technology", "Posts about technology"),
    ("Lifestyle", "lifestyle", "Posts about lifestyle"),
    ("Travel", "travel", "Posts about travel"),
    ("Food", "food", "Posts about food"),
)


def seed_categories(db: Session) -> int:
    """Insert any missing default categories; return how many were created."""
    existing = {slug for (slug,) in db.query(Category.slug).all()}
    created = 0
    for name, slug, description in DEFAULT_CATEGORIES:
        if slug in existing:
            continue
        db.add(Category(name=name, slug=slug, description=description))
        created += 1
    db.commit()
    return created


def main() -> int:
    parser = argparse.ArgumentParser(description="Seed default Inkwell categories.")
    parser.add_argument(
        "--create-tables",
        action="store_true",
        help="Create missing tables before seeding",
    )
    args = parser.parse_args()

    configure_logging(get_settings().LOG_LEVEL)
    if args.create_tables:
        init_db()

    db = SessionLocal()
    try:
        created = seed_categories(db)
        logger.info("Seeded categories: created=%s", created)
        return 0
    except Exception as e:
        db.rollback()
        logger.exception("Category seeding failed: %s", e)
        return 1
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
