"""Post endpoints: public listing and reads, author-only writes."""

from typing import Annotated

from fastapi import APIRouter, Query, status

from inkwell.api.deps import CurrentUserDep, DbDep
from inkwell.schemas.posts import (
    MessageResponse,
    PostCreate,
    PostFilters,
    PostListResponse,
    PostResponse,
    PostUpdate,
)
from inkwell.services import posts as post_service

router = APIRouter()

# Keeps the row offset (page - 1) * limit inside a 64-bit integer.
MAX_PAGE = 1_000_000
MAX_LIMIT = 100


@router.get("", response_model=PostListResponse)
def list_posts(
    db: DbDep,
    page: Annotated[int, Query(ge=1, le=MAX_PAGE)] = 1,
    limit: Annotated[int, Query(ge=1, le=MAX_LIMIT)] = 10,
    category: str | None = None,
    author: str | None = None,
    search: str | None = None,
) -> PostListResponse:
    """
    Published posts, newest first.

    Filter by category or author id, and search title or content
    (case-insensitive substring). Pagination is offset-based.
    """
    filters = PostFilters(category=category, author=author, search=search)
    posts, pagination = post_service.list_posts(db, filters, page=page, limit=limit)
    return PostListResponse(
        posts=[PostResponse.model_validate(p) for p in posts],
        pagination=pagination,
    )


@router.get("/{post_id}", response_model=PostResponse)
def get_post(post_id: str, db: DbDep) -> PostResponse:
    return PostResponse.model_validate(post_service.get_post(db, post_id))


@router.post("", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
def create_post(body: PostCreate, db: DbDep, current_user: CurrentUserDep) -> PostResponse:
    """Create a post authored by the caller. The slug is derived from the title."""
    post = post_service.create_post(db, body, author_id=current_user.id)
    return PostResponse.model_validate(post)


@router.put("/{post_id}", response_model=PostResponse)
def update_post(
    post_id: str,
    body: PostUpdate,
    db: DbDep,
    current_user: CurrentUserDep,
) -> PostResponse:
    """Update a post. Only its author may do this."""
    post = post_service.update_post(db, post_id, body, user_id=current_user.id)
    return PostResponse.model_validate(post)


@router.delete("/{post_id}", response_model=MessageResponse)
def delete_post(post_id: str, db: DbDep, current_user: CurrentUserDep) -> MessageResponse:
    post_service.delete_post(db, post_id, user_id=current_user.id)
    return MessageResponse(message="Post deleted successfully")
