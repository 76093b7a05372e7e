"""Tests for inkwell.services.users: registration, duplicates and password handling."""

import unittest
import uuid

from inkwell.core.errors import DuplicateError, FieldValidationError
from inkwell.models import User
from inkwell.schemas.auth import UserPublic
from inkwell.services.users import (
    DUPLICATE_EMAIL,
    DUPLICATE_USERNAME,
    authenticate,
    check_password,
    create_user,
    get_user,
    validate_login,
)
from tests.support import DatabaseTestCase


class TestCreateUser(DatabaseTestCase):
    def test_stores_hash_not_plaintext(self) -> None:
        user = self.make_user(password="password123")
        self.assertNotEqual(user.password_hash, "password123")
        self.assertTrue(user.password_hash.startswith("$2"))

    def test_email_is_normalized(self) -> None:
        user = self.make_user(email="  Alice@Example.COM ")
        self.assertEqual(user.email, "alice@example.com")

    def test_duplicate_email_is_case_insensitive(self) -> None:
        self.make_user(username="user1", email="test@example.com")
        with self.assertRaises(DuplicateError) as ctx:
            create_user(self.db, "user2", "TEST@example.com", "password123")
        self.assertEqual(ctx.exception.message, DUPLICATE_EMAIL)
        self.assertIn("already exists", ctx.exception.message)

    def test_duplicate_username(self) -> None:
        self.make_user(username="testuser", email="user1@example.com")
        with self.assertRaises(DuplicateError) as ctx:
            create_user(self.db, "testuser", "user2@example.com", "password123")
        self.assertEqual(ctx.exception.message, DUPLICATE_USERNAME)

    def test_invalid_fields_are_all_reported(self) -> None:
        with self.assertRaises(FieldValidationError) as ctx:
            create_user(self.db, "ab", "invalid-email", "123")
        fields = {e["field"] for e in ctx.exception.errors}
        self.assertEqual(fields, {"username", "email", "password"})
        self.assertEqual(self.db.query(User).count(), 0)

    def test_unencodable_fields_are_reported_not_raised(self) -> None:
        with self.assertRaises(FieldValidationError) as ctx:
            create_user(self.db, "user\ud800", "a\udc00@example.com", "secret\ud800")
        fields = [e["field"] for e in ctx.exception.errors]
        self.assertEqual(fields, ["username", "email", "password"])
        self.assertEqual(self.db.query(User).count(), 0)


class TestPasswordLifecycle(DatabaseTestCase):
    def test_unrelated_update_keeps_hash(self) -> None:
        user = self.make_user()
        original = user.password_hash
        user.username = "updateduser"
        self.db.commit()
        self.db.refresh(user)
        self.assertEqual(user.password_hash, original)

    def test_assigning_password_rehashes(self) -> None:
        user = self.make_user(password="password123")
        original = user.password_hash
        user.password = "another-secret"
        self.db.commit()
        self.assertNotEqual(user.password_hash, original)
        self.assertTrue(check_password(user, "another-secret"))
        self.assertFalse(check_password(user, "password123"))

    def test_password_is_write_only(self) -> None:
        user = self.make_user()
        with self.assertRaises(AttributeError):
            _ = user.password

    def test_check_password(self) -> None:
        user = self.make_user(password="password123")
        self.assertTrue(check_password(user, "password123"))
        self.assertFalse(check_password(user, "wrongpassword"))


class TestAuthenticate(DatabaseTestCase):
    def test_valid_credentials(self) -> None:
        user = self.make_user()
        found = authenticate(self.db, "ALICE@example.com", "password123")
        self.assertIsNotNone(found)
        self.assertEqual(found.id, user.id)

    def test_wrong_password_and_unknown_email_return_none(self) -> None:
        self.make_user()
        self.assertIsNone(authenticate(self.db, "alice@example.com", "nope-nope"))
        self.assertIsNone(authenticate(self.db, "nobody@example.com", "password123"))

    def test_get_user(self) -> None:
        user = self.make_user()
        self.assertEqual(get_user(self.db, user.id).username, "alice")
        self.assertIsNone(get_user(self.db, uuid.uuid4()))


class TestValidateLogin(unittest.TestCase):
    def test_bad_email_and_missing_password(self) -> None:
        with self.assertRaises(FieldValidationError) as ctx:
            validate_login("invalid-email", "")
        self.assertEqual(
            [e["field"] for e in ctx.exception.errors], ["email", "password"]
        )

    def test_valid_input_passes(self) -> None:
        validate_login("test@example.com", "password123")


class TestUserSerialization(DatabaseTestCase):
    def test_public_representation_has_no_password_fields(self) -> None:
        user = self.make_user()
        body = UserPublic.model_validate(user).model_dump(by_alias=True, mode="json")
        self.assertEqual(set(body), {"id", "username", "email", "createdAt"})
        self.assertNotIn(user.password_hash, str(body))


if __name__ == "__main__":
    unittest.main()
