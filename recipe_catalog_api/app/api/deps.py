"""FastAPI dependencies shared by the endpoints."""

from fastapi import Request
from pydantic import ValidationError

from recipe_catalog_api.app.core.errors import InvalidInput
from recipe_catalog_api.app.schemas.recipe import RecipeCreate
from recipe_catalog_api.app.services.recipe_store import RecipeStore


def get_store(request: Request) -> RecipeStore:
    """Return the store attached to the running application."""
    return request.app.state.store


async def read_recipe_payload(request: Request) -> RecipeCreate:
    """Decode the request body as a ``RecipeCreate`` payload.

    The body is parsed as JSON whatever ``Content-Type`` the client
    sent, so ``curl -d`` and ``text/plain`` posts are accepted.  Any
    decode or validation failure becomes ``InvalidInput``.
    """
    raw = await request.body()
    try:
        return RecipeCreate.model_validate_json(raw)
    except ValidationError as exc:
        raise InvalidInput() from exc
