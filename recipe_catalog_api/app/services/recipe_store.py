"""
In‑memory recipe store.

The store owns the authoritative, append‑only list of recipes and the
identifier counter.  Every mutation runs under the exclusive side of a
``ReadWriteLock`` and every read under the shared side, so concurrent
request threads observe operations in a single total order: ids are
never duplicated or skipped and readers never see a half‑appended
record.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Protocol, Tuple

from recipe_catalog_api.app.core.locks import ReadWriteLock
from recipe_catalog_api.app.schemas.recipe import Recipe, RecipeCreate

logger = logging.getLogger(__name__)


class RecipeStore(Protocol):
    """Capabilities the HTTP layer needs from a recipe store."""

    def add(self, candidate: RecipeCreate) -> Recipe:
        ...

    def list(self) -> List[Recipe]:
        ...

    def get(self, recipe_id: int) -> Tuple[Optional[Recipe], bool]:
        ...


class MemoryRecipeStore:
    """Thread‑safe recipe store kept in process memory."""

    def __init__(self) -> None:
        self._lock = ReadWriteLock()
        self._recipes: List[Recipe] = []
        self._next_id = 0

    def add(self, candidate: RecipeCreate) -> Recipe:
        """Assign the next id to ``candidate`` and append it.

        The payload is assumed to be validated already.  Returns the
        stored record.
        """
        with self._lock.write_locked():
            self._next_id += 1
            recipe = Recipe(id=self._next_id, name=candidate.name, cooked=bool(candidate.cooked))
            self._recipes.append(recipe)
        logger.info("Stored recipe %s", recipe.id)
        return recipe

    def list(self) -> List[Recipe]:
        """Return a snapshot of all recipes in insertion order.

        The returned list belongs to the caller.  Records are frozen,
        so sharing them with the store is safe.
        """
        with self._lock.read_locked():
            return list(self._recipes)

    def get(self, recipe_id: int) -> Tuple[Optional[Recipe], bool]:
        """Look up a recipe by id; ``(None, False)`` when absent."""
        with self._lock.read_locked():
            for recipe in self._recipes:
                if recipe.id == recipe_id:
                    return recipe, True
        return None, False

    def __len__(self) -> int:
        with self._lock.read_locked():
            return len(self._recipes)
