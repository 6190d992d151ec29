"""
Service layer for catalog statistics.

Counts are computed from a single store snapshot so ``total`` and
``cooked`` always describe the same moment.
"""

from __future__ import annotations

from typing import Iterable

from recipe_catalog_api.app.schemas.recipe import Recipe, RecipeStats


class StatisticsService:
    """Aggregations over recipe snapshots."""

    @classmethod
    def summarize(cls, recipes: Iterable[Recipe]) -> RecipeStats:
        total = 0
        cooked = 0
        for recipe in recipes:
            total += 1
            if recipe.cooked:
                cooked += 1
        return RecipeStats(total=total, cooked=cooked)
