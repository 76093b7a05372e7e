"""Request/response schemas for post endpoints."""

import uuid
from datetime import datetime

from pydantic import BaseModel, Field

from inkwell.schemas.base import CamelModel


class PostCreate(BaseModel):
    """
    Body for creating a post.

    Fields default to empty values so that missing input reaches the posts
    service, which reports every invalid field in one response.
    """

    model_config = {"extra": "ignore"}

    title: str = Field(default="", description="Post title (1-200 chars)")
    content: str = Field(default="", description="Post body (required)")
    category: str = Field(default="", description="Category ID")
    tags: list[str] = Field(default_factory=list, description="Ordered list of tags")
    published: bool = Field(default=True, description="Whether the post is listed publicly")


class PostUpdate(BaseModel):
    """Body for updating a post. tags and published are left untouched when omitted."""

    model_config = {"extra": "ignore"}

    title: str = Field(default="", description="Post title (1-200 chars)")
    content: str = Field(default="", description="Post body (required)")
    category: str = Field(default="", description="Category ID")
    tags: list[str] | None = None
    published: bool | None = None


class PostFilters(BaseModel):
    """Optional list filters; ids arrive as raw strings and are parsed by the service."""

    category: str | None = None
    author: str | None = None
    search: str | None = None


class AuthorSummary(CamelModel):
    id: uuid.UUID
    username: str


class CategorySummary(CamelModel):
    id: uuid.UUID
    name: str


class PostResponse(CamelModel):
    """A post with author and category joined to display fields only."""

    id: uuid.UUID
    title: str
    content: str
    slug: str
    tags: list[str]
    published: bool
    author: AuthorSummary
    category: CategorySummary
    created_at: datetime
    updated_at: datetime


class Pagination(CamelModel):
    current_page: int
    total_pages: int
    total_posts: int
    has_next: bool
    has_prev: bool


class PostListResponse(BaseModel):
    posts: list[PostResponse]
    pagination: Pagination


class MessageResponse(BaseModel):
    message: str
