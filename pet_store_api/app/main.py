"""
Main entrypoint for the Pet Store API.

This module assembles the FastAPI application: it sets up logging,
builds the storage backend, registers the error handler and the
request logging middleware, and mounts the pet routes.  The
``create_app`` function does the work and is called once at import
time to provide ``app`` for ASGI servers, e.g.::

    uvicorn pet_store_api.app.main:app

Tests pass their own store to ``create_app`` so that every test starts
from an empty one.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from .api.router import include_routers
from .core.config import settings
from .core.errors import PetServiceError, status_for_error
from .core.logging_config import log_requests, setup_logging
from .core.store import PetStorer, create_store
from .services.pet_service import PetService

logger = logging.getLogger(__name__)


async def render_service_error(request: Request, exc: PetServiceError) -> PlainTextResponse:
    """Render a ``PetServiceError`` as a plain‑text response.

    Only ``exc.message`` goes to the client; the full error including
    its cause is logged.
    """
    logger.info("Error serving request %s %s. %s", request.method, request.url.path, exc)
    return PlainTextResponse(exc.message, status_code=status_for_error(exc))


def create_app(store: Optional[PetStorer] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[PetStorer]
        Backend to serve pets from.  When omitted the backend named
        by ``settings.datastore`` is built.

    Raises
    ------
    StoreConfigError
        If no store is given and the configured backend is unusable.
    """
    setup_logging(settings.log_level, settings.log_file or None)

    if store is None:
        store = create_store(settings.datastore)

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.pet_service = PetService(store)

    app.add_exception_handler(PetServiceError, render_service_error)
    app.middleware("http")(log_requests)
    include_routers(app)

    logger.info("%s ready using %s", settings.project_name, type(store).__name__)
    return app


app = create_app()
