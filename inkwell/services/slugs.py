"""URL slugs derived from post titles, made unique by numeric suffixes."""

import re
import uuid

from sqlalchemy.orm import Session

from inkwell.models import Post

_DISALLOWED = re.compile(r"[^\w\s-]", re.ASCII)
_SEPARATORS = re.compile(r"[\s_-]+", re.ASCII)

FALLBACK_SLUG = "post"


def slugify(title: str) -> str:
    """
    Lowercase, drop everything but ASCII word chars, whitespace and hyphens,
    collapse whitespace/underscore/hyphen runs to one hyphen, trim hyphens.

    >>> slugify("  Hello, World -- again_and again ")
    'hello-world-again-and-again'
    """
    slug = _DISALLOWED.sub("", title.lower())
    slug = _SEPARATORS.sub("-", slug)
    return slug.strip("-") or FALLBACK_SLUG


def _slug_taken(db: Session, slug: str, exclude_id: uuid.UUID | None) -> bool:
    query = db.query(Post.id).filter(Post.slug == slug)
    if exclude_id is not None:
        query = query.filter(Post.id != exclude_id)
    return query.first() is not None


def unique_slug(db: Session, title: str, exclude_id: uuid.UUID | None = None) -> str:
    """
    Return the first free slug among base, base-1, base-2, ...

    exclude_id lets a post keep or reclaim its own slug on update. This lookup is
    advisory: a concurrent writer can still take the same slug, in which case
    the unique index on posts.slug rejects the second insert.
    """
    base = slugify(title)
    candidate = base
    counter = 1
    while _slug_taken(db, candidate, exclude_id):
        candidate = f"{base}-{counter}"
        counter += 1
    return candidate
