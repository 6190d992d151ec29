"""
Pydantic schemas for recipes.

A recipe is a named record with a boolean ``cooked`` flag.  Clients
submit ``RecipeCreate`` payloads; the store assigns an ``id`` and
returns an immutable ``Recipe``.  ``RecipeStats`` is derived on demand
and never stored.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr, field_validator


class RecipeCreate(BaseModel):
    """Schema for adding a recipe.

    Only an empty ``name`` is rejected; whitespace is kept as given.
    A missing or ``null`` ``cooked`` flag means the recipe has not been
    cooked.  Unknown keys, including ``id``, are ignored because
    identifiers are always assigned by the store.
    """

    name: StrictStr = Field(..., min_length=1, description="Recipe name")
    cooked: Optional[StrictBool] = Field(False, description="Whether the recipe has been cooked")

    @field_validator("cooked")
    @classmethod
    def default_cooked(cls, v: Optional[bool]) -> bool:
        return bool(v)


class Recipe(BaseModel):
    """Schema for a stored recipe."""

    id: int
    name: str
    cooked: bool = False

    model_config = ConfigDict(frozen=True)


class RecipeStats(BaseModel):
    """Aggregate counts over the whole catalog."""

    total: int
    cooked: int


class ErrorResponse(BaseModel):
    """Envelope used for every error body."""

    error: str
