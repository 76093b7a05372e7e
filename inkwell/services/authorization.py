"""Ownership guard for mutating operations. Ownership is the only authorization axis."""

import uuid
from typing import Protocol

from inkwell.core.errors import ForbiddenError


class Owned(Protocol):
    author_id: uuid.UUID


def assert_owner(resource: Owned, user_id: uuid.UUID, action: str = "modify") -> None:
    """Raise ForbiddenError unless user_id authored resource."""
    if resource.author_id != user_id:
        raise ForbiddenError(f"Not authorized to {action} this post")
