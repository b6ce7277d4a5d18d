"""
Main entrypoint for the Fundraiser Tracker API.

This module assembles the FastAPI application, sets up logging and
includes the API router.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time
as ``app``.  Importing the app here makes it easy to run with uvicorn
or another ASGI server, e.g.::

    uvicorn fundraiser_api.app.main:app --reload

The application title and version are provided via ``Settings`` from
``core.config``.
"""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.router import router as api_router
from .core.config import Settings, settings
from .core.errors import register_error_handlers
from .core.logging_config import setup_logging
from .core.rate_limit import RateLimiter
from .core.storage import DataStore

logger = logging.getLogger(__name__)


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    app_settings : Optional[Settings]
        Settings to use instead of the module level ``settings``;
        tests pass their own to point the store at a temporary file.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    app_settings = app_settings or settings
    setup_logging(app_settings.log_level, app_settings.log_file or None)

    app = FastAPI(title=app_settings.project_name, version=app_settings.api_version)

    # The dashboard may be hosted on another origin than the API.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.get_cors_origins(),
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)

    app.state.settings = app_settings
    app.state.store = DataStore(app_settings.get_data_file_path())
    app.state.rate_limiter = RateLimiter(
        window_seconds=app_settings.rate_limit_window_seconds,
        max_attempts=app_settings.rate_limit_max_attempts,
    )

    app.include_router(api_router, prefix="/api")

    @app.on_event("startup")
    async def startup_event() -> None:
        # Create the data document or backfill fields added since it
        # was written.
        app.state.store.ensure_initialized()
        logger.info(
            "%s listening on http://%s:%s (data: %s)",
            app_settings.project_name,
            app_settings.host,
            app_settings.port,
            app.state.store.path,
        )
        if app_settings.uses_default_token:
            logger.warning("ADMIN_TOKEN is still the default placeholder; set it before going live!")

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
