"""
Top‑level router.

The catalog routes are served from the application root without a
version prefix because clients address them by fixed paths.
"""

from fastapi import APIRouter

from .endpoints import recipes

router = APIRouter()

router.include_router(recipes.router, tags=["recipes"])
