"""Post repository operations: list, get, create, update and delete with ownership checks."""

import logging
import math
import uuid
from dataclasses import dataclass

from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from inkwell.core.errors import (
    DuplicateError,
    FieldValidationError,
    InvalidCategoryError,
    NotFoundError,
)
from inkwell.models import Post
from inkwell.models.base import utcnow
from inkwell.schemas.posts import Pagination, PostCreate, PostFilters, PostUpdate
from inkwell.services.authorization import assert_owner
from inkwell.services.categories import get_category
from inkwell.services.slugs import unique_slug
from inkwell.services.validation import field_error, is_storable_text, is_valid_id, parse_id

logger = logging.getLogger(__name__)

TITLE_MAX_LEN = 200
INVALID_POST_ID = "Invalid post ID"
POST_NOT_FOUND = "Post not found"


@dataclass
class _PostFields:
    title: str
    content: str
    category_id: uuid.UUID


def _validate_post_fields(title: str, content: str, category: str) -> _PostFields:
    """Trim and check title/content/category; raise FieldValidationError listing every bad field."""
    title = title.strip()
    content = content.strip()
    errors: list[dict[str, str]] = []
    if not is_storable_text(title):
        errors.append(field_error("title", "Title contains invalid characters"))
    elif not (1 <= len(title) <= TITLE_MAX_LEN):
        errors.append(field_error("title", f"Title must be between 1 and {TITLE_MAX_LEN} characters"))
    if not is_storable_text(content):
        errors.append(field_error("content", "Content contains invalid characters"))
    elif not content:
        errors.append(field_error("content", "Content is required"))
    if not is_valid_id(category):
        errors.append(field_error("category", "Valid category ID is required"))
    if errors:
        raise FieldValidationError(errors)
    return _PostFields(title=title, content=content, category_id=uuid.UUID(category.strip()))


def _clean_tags(tags: list[str]) -> list[str]:
    return [t.strip() for t in tags if t and t.strip()]


def _require_category(db: Session, category_id: uuid.UUID) -> None:
    if get_category(db, category_id) is None:
        raise InvalidCategoryError()


def _commit(db: Session) -> None:
    """Commit, turning a slug unique-constraint race into a DuplicateError."""
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.warning("Post write rejected by unique constraint: %s", e.orig)
        raise DuplicateError("A post with this slug already exists") from e


def _load(db: Session, post_id: str | uuid.UUID) -> Post:
    pid = parse_id(post_id, INVALID_POST_ID)
    post = db.get(Post, pid)
    if post is None:
        raise NotFoundError(POST_NOT_FOUND)
    return post


def build_pagination(page: int, limit: int, total: int) -> Pagination:
    """Offset pagination metadata for a 1-based page."""
    return Pagination(
        current_page=page,
        total_pages=math.ceil(total / limit) if limit else 0,
        total_posts=total,
        has_next=page * limit < total,
        has_prev=page > 1,
    )


def _escape_like(term: str) -> str:
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def list_posts(
    db: Session,
    filters: PostFilters,
    page: int = 1,
    limit: int = 10,
) -> tuple[list[Post], Pagination]:
    """
    Published posts, newest first, filtered by category/author ids and a
    case-insensitive substring search over title or content.
    """
    query = db.query(Post).filter(Post.published.is_(True))
    if filters.category:
        query = query.filter(Post.category_id == parse_id(filters.category, "Invalid category ID"))
    if filters.author:
        query = query.filter(Post.author_id == parse_id(filters.author, "Invalid author ID"))
    if filters.search and filters.search.strip():
        pattern = f"%{_escape_like(filters.search.strip())}%"
        query = query.filter(
            or_(
                Post.title.ilike(pattern, escape="\\"),
                Post.content.ilike(pattern, escape="\\"),
            )
        )

    total = query.count()
    posts = (
        query.order_by(Post.created_at.desc(), Post.id)
        .offset((page - 1) * limit)
        .limit(limit)
        .all()
    )
    return posts, build_pagination(page, limit, total)


def get_post(db: Session, post_id: str | uuid.UUID) -> Post:
    return _load(db, post_id)


def create_post(db: Session, data: PostCreate, author_id: uuid.UUID) -> Post:
    """Validate, resolve a unique slug and persist a post owned by author_id."""
    fields = _validate_post_fields(data.title, data.content, data.category)
    _require_category(db, fields.category_id)

    post = Post(
        title=fields.title,
        content=fields.content,
        category_id=fields.category_id,
        author_id=author_id,
        slug=unique_slug(db, fields.title),
        tags=_clean_tags(data.tags),
        published=data.published,
    )
    db.add(post)
    _commit(db)
    db.refresh(post)
    logger.info("Created post id=%s slug=%s author=%s", post.id, post.slug, author_id)
    return post


def update_post(
    db: Session,
    post_id: str | uuid.UUID,
    data: PostUpdate,
    user_id: uuid.UUID,
) -> Post:
    """
    Replace title, content and category of the caller's own post.

    The slug is regenerated only when the title changes; tags and published
    are replaced only when supplied. updated_at is bumped even if nothing
    else changed.
    """
    pid = parse_id(post_id, INVALID_POST_ID)
    fields = _validate_post_fields(data.title, data.content, data.category)
    post = _load(db, pid)
    assert_owner(post, user_id, "update")
    _require_category(db, fields.category_id)

    if fields.title != post.title:
        post.slug = unique_slug(db, fields.title, exclude_id=post.id)
    post.title = fields.title
    post.content = fields.content
    post.category_id = fields.category_id
    if data.tags is not None:
        post.tags = _clean_tags(data.tags)
    if data.published is not None:
        post.published = data.published
    post.updated_at = utcnow()

    _commit(db)
    db.refresh(post)
    logger.info("Updated post id=%s slug=%s", post.id, post.slug)
    return post


def delete_post(db: Session, post_id: str | uuid.UUID, user_id: uuid.UUID) -> None:
    post = _load(db, post_id)
    assert_owner(post, user_id, "delete")
    db.delete(post)
    db.commit()
    logger.info("Deleted post id=%s by user=%s", post_id, user_id)
