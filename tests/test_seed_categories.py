"""Tests for the category seeding command."""

from inkwell.models import Category
from inkwell.scripts.seed_categories import DEFAULT_CATEGORIES, seed_categories
from tests.support import DatabaseTestCase


class TestSeedCategories(DatabaseTestCase):
    def test_creates_defaults_once(self) -> None:
        self.assertEqual(seed_categories(self.db), len(DEFAULT_CATEGORIES))
        self.assertEqual(seed_categories(self.db), 0)
        slugs = sorted(slug for (slug,) in self.db.query(Category.slug).all())
        self.assertEqual(slugs, ["food", "lifestyle", "technology", "travel"])

    def test_keeps_existing_rows(self) -> None:
        self.make_category("Travel")
        self.assertEqual(seed_categories(self.db), len(DEFAULT_CATEGORIES) - 1)
        self.assertEqual(self.db.query(Category).filter(Category.slug == "travel").count(), 1)
