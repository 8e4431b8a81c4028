"""
Main entrypoint for the Dog API.

This module assembles the FastAPI application: it sets up logging,
creates the record stores, registers the error handlers and includes
the versioned routers.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time
as ``app``, e.g.::

    uvicorn dog_api.app.main:app --reload

The OpenAPI document is served at ``/openapi`` and the Swagger UI at
``/swagger``.
"""

import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .core.store import DataStores, build_stores

logger = logging.getLogger(__name__)


def create_app(stores: Optional[DataStores] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    stores : Optional[DataStores]
        Record stores to serve.  When omitted, fresh stores are built
        and loaded with the demo dataset if ``settings.seed_data`` is
        enabled.

    Returns
    -------
    FastAPI
        A configured FastAPI instance ready to be served.
    """
    # Initialise logging before anything else so that store seeding is logged.
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        description=settings.description,
        debug=settings.debug,
        openapi_url="/openapi",
        docs_url="/swagger",
        redoc_url=None,
    )
    app.state.stores = stores if stores is not None else build_stores(seed=settings.seed_data)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    @app.get("/", summary="Welcome to Dog API", tags=["Info"])
    async def root() -> Dict[str, Any]:
        return {
            "message": "Welcome to the Dog API! 🐕",
            "version": settings.api_version,
            "docs": app.docs_url,
        }

    app.include_router(v1_router)

    logger.info("%s %s ready (docs at %s)", settings.project_name, settings.api_version, app.docs_url)
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
