"""
Main entrypoint for the User Registry API.

This module assembles the FastAPI application, sets up logging, creates
the user store and includes the versioned router.  The ``create_app``
function builds and configures the app, which is then instantiated at
module import time as ``app``, e.g.::

    uvicorn users_api.app.main:app --reload
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .api.v1.router import router as v1_router
from .services.user_service import SEED_USERS, UserService, UserStore, make_id_generator


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Each call builds its own store, so separate applications (for
    example one per test) never share records.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the settings read from the
        environment at import time.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.

    Raises
    ------
    ValueError
        If ``settings.id_strategy`` names no known id generator.
    """
    settings = settings or default_settings
    # Logging first, so that everything below can log.
    setup_logging(settings.log_level, settings.log_file or None)

    store = UserStore(SEED_USERS if settings.seed_users else ())
    service = UserService(store, make_id_generator(settings.id_strategy))

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.user_service = service

    app.include_router(v1_router, prefix=settings.api_prefix.rstrip("/"))

    logging.getLogger(__name__).info(
        "User store ready with %d users (id strategy: %s)", len(store), settings.id_strategy
    )
    return app


# Create the application instance at import time so that uvicorn can
# discover it without calling create_app manually.
app = create_app()
