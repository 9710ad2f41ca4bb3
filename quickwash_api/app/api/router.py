"""
Top‑level API router.

This router aggregates the domain routers.  Each endpoint module
declares its full path (``/services``, ``/bookings/{id}`` ...), so no
prefix is added here; the ``/api`` base path is applied in
``main.create_app``.
"""

from fastapi import APIRouter

from .endpoints import bookings, catalog, statistics, users

router = APIRouter()

router.include_router(catalog.router, tags=["services"])
router.include_router(users.router, tags=["users"])
router.include_router(bookings.router, tags=["bookings"])
router.include_router(statistics.router, tags=["statistics"])
