"""
Shared fixtures for the Recipe Catalog API tests.
"""
from __future__ import annotations

import sys
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import pytest
from fastapi.testclient import TestClient

# Make the package importable when the tests run from a plain checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from recipe_catalog_api.app.main import create_app
from recipe_catalog_api.app.schemas.recipe import Recipe, RecipeCreate
from recipe_catalog_api.app.services.recipe_store import MemoryRecipeStore


class RecordingStore:
    """Store double that returns canned data and records every call."""

    def __init__(self, recipes: Optional[List[Recipe]] = None) -> None:
        self.recipes = list(recipes or [])
        self.calls: List[Tuple[str, object]] = []

    def add(self, candidate: RecipeCreate) -> Recipe:
        self.calls.append(("add", candidate))
        return Recipe(id=len(self.recipes) + 1, name=candidate.name, cooked=bool(candidate.cooked))

    def list(self) -> List[Recipe]:
        self.calls.append(("list", None))
        return list(self.recipes)

    def get(self, recipe_id: int) -> Tuple[Optional[Recipe], bool]:
        self.calls.append(("get", recipe_id))
        by_id: Dict[int, Recipe] = {r.id: r for r in self.recipes}
        if recipe_id in by_id:
            return by_id[recipe_id], True
        return None, False


@pytest.fixture()
def store() -> MemoryRecipeStore:
    return MemoryRecipeStore()


@pytest.fixture()
def client(store):
    """Client bound to a fresh application backed by ``store``."""
    with TestClient(create_app(store=store)) as test_client:
        yield test_client


@pytest.fixture()
def recording_store() -> RecordingStore:
    return RecordingStore(
        [
            Recipe(id=1, name="Soup", cooked=True),
            Recipe(id=2, name="Salad", cooked=False),
        ]
    )


@pytest.fixture()
def recording_client(recording_store):
    with TestClient(create_app(store=recording_store)) as test_client:
        yield test_client
