"""Domain errors raised by services and translated to JSON responses in inkwell.main."""

from typing import Any


class ApiError(Exception):
    """Base for errors that map onto a fixed HTTP status and a client-safe message."""

    status_code: int = 500
    default_message: str = "Something went wrong!"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_body(self) -> dict[str, Any]:
        return {"error": self.message}


class FieldValidationError(ApiError):
    """One or more input fields failed validation."""

    status_code = 400
    default_message = "Validation failed"

    def __init__(self, errors: list[dict[str, str]]) -> None:
        self.errors = errors
        super().__init__(self.default_message)

    def to_body(self) -> dict[str, Any]:
        return {"errors": self.errors}


class DuplicateError(ApiError):
    status_code = 400
    default_message = "Resource already exists"


class NoTokenError(ApiError):
    status_code = 401
    default_message = "Access denied. No token provided."


class InvalidTokenError(ApiError):
    """Bad signature, malformed payload, expiry or vanished user; callers cannot tell which."""

    status_code = 401
    default_message = "Token is not valid"


class InvalidCredentialsError(ApiError):
    status_code = 401
    default_message = "Invalid credentials"


class ForbiddenError(ApiError):
    status_code = 403
    default_message = "Not authorized"


class NotFoundError(ApiError):
    status_code = 404
    default_message = "Not found"


class MalformedIdError(ApiError):
    status_code = 400
    default_message = "Invalid ID"


class InvalidCategoryError(ApiError):
    status_code = 400
    default_message = "Invalid category"
