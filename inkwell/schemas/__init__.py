"""Pydantic request/response schemas."""

from inkwell.schemas.auth import (
    AuthResponse,
    CurrentUser,
    LoginRequest,
    ProfileResponse,
    RegisterRequest,
    UserPublic,
)
from inkwell.schemas.categories import CategoriesResponse, CategoryItem
from inkwell.schemas.health import HealthResponse
from inkwell.schemas.posts import (
    MessageResponse,
    Pagination,
    PostCreate,
    PostFilters,
    PostListResponse,
    PostResponse,
    PostUpdate,
)

__all__ = [
    "AuthResponse",
    "CategoriesResponse",
    "CategoryItem",
    "CurrentUser",
    "HealthResponse",
    "LoginRequest",
    "MessageResponse",
    "Pagination",
    "PostCreate",
    "PostFilters",
    "PostListResponse",
    "PostResponse",
    "PostUpdate",
    "ProfileResponse",
    "RegisterRequest",
    "UserPublic",
]
