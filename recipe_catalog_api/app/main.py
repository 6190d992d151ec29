"""
Main entrypoint for the Recipe Catalog API.

This module assembles the FastAPI application, sets up logging,
attaches the recipe store and includes the router.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``, e.g.::

    uvicorn recipe_catalog_api.app.main:app

Each ``create_app`` call gets its own store, so tests can build
isolated applications or inject a store of their own.
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .api.router import router
from .core.config import settings
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .services.recipe_store import MemoryRecipeStore, RecipeStore

logger = logging.getLogger(__name__)


def create_app(store: Optional[RecipeStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[RecipeStore]
        Store backing the endpoints.  A new empty ``MemoryRecipeStore``
        is created when omitted.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings.log_level, settings.log_file or None)

    # Paths are exact; a trailing slash mismatch is a 404, not a redirect.
    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        redirect_slashes=False,
    )
    app.state.store = store if store is not None else MemoryRecipeStore()

    register_exception_handlers(app)
    app.include_router(router)

    logger.debug("Application created with %s", type(app.state.store).__name__)
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
