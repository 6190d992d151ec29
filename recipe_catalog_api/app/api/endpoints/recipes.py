"""
Recipe endpoints.

Four fixed routes back the catalog: ``/list``, ``/add``,
``/item/{id}`` and ``/stats``.  Each route accepts exactly one HTTP
method; any other method is answered with 405 by the router before
the store is touched.  Handlers are plain functions, so FastAPI runs
them in its worker thread pool and the store's lock is what keeps
concurrent requests consistent.
"""

import re
from typing import List

from fastapi import APIRouter, Depends

from recipe_catalog_api.app.api.deps import get_store, read_recipe_payload
from recipe_catalog_api.app.core.errors import InvalidID, NotFound
from recipe_catalog_api.app.schemas.recipe import ErrorResponse, Recipe, RecipeCreate, RecipeStats
from recipe_catalog_api.app.services.recipe_store import RecipeStore
from recipe_catalog_api.app.services.statistics_service import StatisticsService

router = APIRouter()

_ID_PATTERN = re.compile(r"[+-]?[0-9]+")

# Ids are signed 64-bit integers; longer digit strings are not ids.
_ID_MIN, _ID_MAX = -(2**63), 2**63 - 1

_ERRORS = {
    400: {"model": ErrorResponse},
    405: {"model": ErrorResponse},
}


def parse_recipe_id(raw_id: str) -> int:
    """Convert the trailing path segment to an integer id.

    Only an optional sign followed by ASCII digits is accepted, so
    ``"1/2"``, ``" 3"`` and ``"4_0"`` are all rejected, as are values
    outside the signed 64-bit range.
    """
    if not _ID_PATTERN.fullmatch(raw_id):
        raise InvalidID()
    recipe_id = int(raw_id)
    if not _ID_MIN <= recipe_id <= _ID_MAX:
        raise InvalidID()
    return recipe_id


@router.get("/list", response_model=List[Recipe], responses={405: _ERRORS[405]})
def list_recipes(store: RecipeStore = Depends(get_store)) -> List[Recipe]:
    """Return every recipe in insertion order."""
    return store.list()


@router.post("/add", response_model=Recipe, responses=_ERRORS)
def add_recipe(
    recipe_in: RecipeCreate = Depends(read_recipe_payload),
    store: RecipeStore = Depends(get_store),
) -> Recipe:
    """Store a new recipe and return it with its assigned id."""
    return store.add(recipe_in)


# ``path`` keeps empty and multi‑segment suffixes on this route so they
# are reported as an invalid id rather than an unknown path.
@router.get(
    "/item/{raw_id:path}",
    response_model=Recipe,
    responses={**_ERRORS, 404: {"model": ErrorResponse}},
)
def get_recipe(raw_id: str, store: RecipeStore = Depends(get_store)) -> Recipe:
    """Return a single recipe by id."""
    recipe_id = parse_recipe_id(raw_id)
    recipe, found = store.get(recipe_id)
    if not found:
        raise NotFound()
    return recipe


@router.get("/stats", response_model=RecipeStats, responses={405: _ERRORS[405]})
def recipe_stats(store: RecipeStore = Depends(get_store)) -> RecipeStats:
    """Return the total number of recipes and how many are cooked."""
    return StatisticsService.summarize(store.list())
