"""Response schemas for the category listing."""

import uuid

from pydantic import BaseModel


class CategoryItem(BaseModel):
    model_config = {"from_attributes": True}

    id: uuid.UUID
    name: str
    slug: str
    description: str | None = None


class CategoriesResponse(BaseModel):
    categories: list[CategoryItem]
