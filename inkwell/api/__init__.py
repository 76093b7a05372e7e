"""HTTP routes, mounted under settings.API_PREFIX."""

from fastapi import APIRouter

from inkwell.api import auth, categories, health, posts

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(posts.router, prefix="/posts", tags=["posts"])
router.include_router(categories.router, prefix="/categories", tags=["categories"])
