"""Shared input checks used by services before any storage call."""

import uuid

from inkwell.core.errors import MalformedIdError


def field_error(field: str, msg: str) -> dict[str, str]:
    """One entry of a FieldValidationError payload."""
    return {"field": field, "msg": msg}


def is_valid_id(raw: object) -> bool:
    """True if raw is a UUID or a string in UUID form."""
    if isinstance(raw, uuid.UUID):
        return True
    if not isinstance(raw, str) or not raw.strip():
        return False
    try:
        uuid.UUID(raw.strip())
    except ValueError:
        return False
    return True


def parse_id(raw: str | uuid.UUID, message: str = "Invalid ID") -> uuid.UUID:
    """Return raw as a UUID or raise MalformedIdError(message)."""
    if isinstance(raw, uuid.UUID):
        return raw
    if not is_valid_id(raw):
        raise MalformedIdError(message)
    return uuid.UUID(raw.strip())


def is_storable_text(value: str) -> bool:
    """False if value holds characters UTF-8 cannot encode (lone surrogates)."""
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True
