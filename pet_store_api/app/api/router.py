"""
Top‑level routing for the API.

The pet router is mounted twice.  Older clients address pets under
``/api/pet`` while the current form is plain ``/api``; both prefixes
expose identical endpoints (e.g. ``GET /api/1000`` and
``GET /api/pet/1000`` return the same pet).  The ``/api/pet`` prefix
is registered first so that ``POST /api/pet`` is never mistaken for an
``id`` of ``"pet"``.
"""

from fastapi import FastAPI

from .endpoints import pets

PET_PREFIXES = ("/api/pet", "/api")


def include_routers(app: FastAPI) -> None:
    """Attach every API router to ``app``."""
    for prefix in PET_PREFIXES:
        app.include_router(pets.router, prefix=prefix, tags=["pets"])
