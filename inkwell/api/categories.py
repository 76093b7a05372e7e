"""Category listing used by the client to populate its post form."""

from fastapi import APIRouter

from inkwell.api.deps import DbDep
from inkwell.schemas.categories import CategoriesResponse, CategoryItem
from inkwell.services.categories import list_categories

router = APIRouter()


@router.get("", response_model=CategoriesResponse)
def get_categories(db: DbDep) -> CategoriesResponse:
    return CategoriesResponse(
        categories=[CategoryItem.model_validate(c) for c in list_categories(db)]
    )
