"""
Main entrypoint for the User Store API.

This module assembles the FastAPI application: it sets up logging,
creates and seeds the user store, and includes the versioned routers.
The ``create_app`` function builds and configures the app, which is
then instantiated at module import time as ``app``, e.g.::

    uvicorn user_store_api.app.main:app --reload
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .services.user_service import UserNotFoundError, UserService

logger = logging.getLogger(__name__)


async def user_not_found_handler(request: Request, exc: UserNotFoundError) -> JSONResponse:
    logger.info("%s %s: user %s not found", request.method, request.url.path, exc.user_id)
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"message": "not found"})


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Every call builds a new, freshly seeded ``UserService`` and stores
    it on ``app.state`` where the routes pick it up through
    ``get_user_service``.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the settings read from the
        environment at import time.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.settings = settings
    app.state.user_service = UserService(
        seed_name=settings.seed_user_name,
        id_strategy=settings.id_strategy,
    )

    app.add_exception_handler(UserNotFoundError, user_not_found_handler)
    app.include_router(v1_router, prefix=settings.api_prefix)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
