"""
Top‑level router for version 1 of the API.

This router aggregates the catalog routers.  Each endpoint module
defines its full path internally (``/items``, ``/update-order`` and
so on), so no prefixes are given here.
"""

from fastapi import APIRouter

from .endpoints import items, order, selection, state

router = APIRouter()

router.include_router(items.router, tags=["items"])
router.include_router(order.router, tags=["order"])
router.include_router(selection.router, tags=["selection"])
router.include_router(state.router, tags=["state"])
