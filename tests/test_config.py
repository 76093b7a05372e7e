"""Unit tests for settings validation."""

import os
import unittest
from unittest.mock import patch

from pydantic import ValidationError

from inkwell.core.config import DEFAULT_JWT_SECRET, MIN_PROD_JWT_SECRET_BYTES, Settings


class TestSettingsValidation(unittest.TestCase):
    def test_rejects_unsupported_database_url(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(DATABASE_URL="mysql://localhost/inkwell")

    def test_accepts_sqlite_url(self) -> None:
        self.assertEqual(Settings(DATABASE_URL="sqlite:///./x.db").DATABASE_URL, "sqlite:///./x.db")

    def test_rejects_blank_jwt_secret(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(JWT_SECRET="   ")

    def test_expiry_bounds(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(JWT_EXPIRE_MINUTES=0)
        with self.assertRaises(ValidationError):
            Settings(JWT_EXPIRE_MINUTES=10081)

    def test_bcrypt_rounds_bounds(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(BCRYPT_ROUNDS=3)

    def test_normalizes_prefix_and_log_level(self) -> None:
        s = Settings(API_PREFIX="/api/", LOG_LEVEL="debug")
        self.assertEqual(s.API_PREFIX, "/api")
        self.assertEqual(s.LOG_LEVEL, "DEBUG")


class TestProdSecret(unittest.TestCase):
    def test_default_secret_rejected_in_prod(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(APP_ENV="prod", JWT_SECRET=DEFAULT_JWT_SECRET)

    def test_unset_secret_rejected_in_prod(self) -> None:
        with patch.dict(os.environ, {"APP_ENV": "prod"}):
            os.environ.pop("JWT_SECRET", None)
            with self.assertRaises(ValidationError):
                Settings(_env_file=None)

    def test_short_secret_rejected_in_prod(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(APP_ENV="prod", JWT_SECRET="x" * (MIN_PROD_JWT_SECRET_BYTES - 1))

    def test_long_secret_accepted_in_prod(self) -> None:
        secret = "k" * MIN_PROD_JWT_SECRET_BYTES
        s = Settings(APP_ENV="prod", JWT_SECRET=secret)
        self.assertEqual(s.JWT_SECRET.get_secret_value(), secret)

    def test_default_secret_allowed_outside_prod(self) -> None:
        s = Settings(APP_ENV="dev", JWT_SECRET=DEFAULT_JWT_SECRET)
        self.assertEqual(s.JWT_SECRET.get_secret_value(), DEFAULT_JWT_SECRET)


if __name__ == "__main__":
    unittest.main()
