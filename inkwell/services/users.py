"""Credential store: registration, password verification and user lookup."""

import logging
import uuid

from email_validator import EmailNotValidError, validate_email
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from inkwell.core.errors import DuplicateError, FieldValidationError
from inkwell.core.security import (
    PASSWORD_MAX_LEN,
    PASSWORD_MIN_LEN,
    USERNAME_MAX_LEN,
    USERNAME_MIN_LEN,
)
from inkwell.models import User
from inkwell.services.validation import field_error, is_storable_text

logger = logging.getLogger(__name__)

DUPLICATE_EMAIL = "User with this email already exists"
DUPLICATE_USERNAME = "User with this username already exists"


def normalize_email(email: str) -> str:
    """Emails compare case-insensitively; store and query them lowercased."""
    return email.strip().lower()


def _email_is_valid(email: str) -> bool:
    if not is_storable_text(email):
        return False
    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def validate_registration(username: str, email: str, password: str) -> None:
    """Raise FieldValidationError listing every invalid registration field."""
    errors: list[dict[str, str]] = []
    if not is_storable_text(username):
        errors.append(field_error("username", "Username contains invalid characters"))
    elif not (USERNAME_MIN_LEN <= len(username.strip()) <= USERNAME_MAX_LEN):
        errors.append(
            field_error(
                "username",
                f"Username must be between {USERNAME_MIN_LEN} and {USERNAME_MAX_LEN} characters",
            )
        )
    if not _email_is_valid(email.strip()):
        errors.append(field_error("email", "Please provide a valid email"))
    if not is_storable_text(password):
        errors.append(field_error("password", "Password contains invalid characters"))
    elif not (PASSWORD_MIN_LEN <= len(password) <= PASSWORD_MAX_LEN):
        errors.append(
            field_error(
                "password",
                f"Password must be between {PASSWORD_MIN_LEN} and {PASSWORD_MAX_LEN} characters",
            )
        )
    if errors:
        raise FieldValidationError(errors)


def validate_login(email: str, password: str) -> None:
    errors: list[dict[str, str]] = []
    if not _email_is_valid(email.strip()):
        errors.append(field_error("email", "Please provide a valid email"))
    if not password:
        errors.append(field_error("password", "Password is required"))
    if errors:
        raise FieldValidationError(errors)


def create_user(db: Session, username: str, email: str, password: str) -> User:
    """
    Validate, hash and persist a new user.

    The duplicate pre-check only exists to produce a specific message; the
    unique indexes on users.email and users.username are what actually
    prevent duplicates, and their violation maps to the same DuplicateError.
    """
    validate_registration(username, email, password)
    username = username.strip()
    email = normalize_email(email)

    existing = (
        db.query(User)
        .filter((User.email == email) | (User.username == username))
        .first()
    )
    if existing is not None:
        raise DuplicateError(DUPLICATE_EMAIL if existing.email == email else DUPLICATE_USERNAME)

    user = User(username=username, email=email)
    user.password = password
    db.add(user)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.warning("Registration conflict at commit for username=%s", username)
        raise DuplicateError("User with this email or username already exists") from e
    db.refresh(user)
    logger.info("Registered user id=%s username=%s", user.id, user.username)
    return user


def check_password(user: User, password: str) -> bool:
    """True if password matches the user's stored hash. Never raises on mismatch."""
    return user.check_password(password)


def authenticate(db: Session, email: str, password: str) -> User | None:
    """Return the user for these credentials, or None. Callers must not reveal which part failed."""
    user = db.query(User).filter(User.email == normalize_email(email)).first()
    if user is None or not check_password(user, password):
        return None
    return user


def get_user(db: Session, user_id: uuid.UUID) -> User | None:
    return db.get(User, user_id)
