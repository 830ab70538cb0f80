"""
Item listing endpoint for API v1.

``GET /items`` returns one page of the virtual catalog.  Query
parameters are lenient: ``page`` and ``limit`` are taken
as raw strings and coerced by the catalog service, so a request such
as ``?page=abc&limit=5000`` is answered with page 1 and the maximum
page size instead of a validation error.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from virtual_catalog_api.app.core.deps import get_catalog
from virtual_catalog_api.app.schemas.catalog import ItemsPage
from virtual_catalog_api.app.services.catalog_service import CatalogService

router = APIRouter()


@router.get("/items", response_model=ItemsPage)
async def list_items(
    page: Optional[str] = Query(None, description="1-based page number"),
    limit: Optional[str] = Query(None, description="Items per page, clamped to 1..100"),
    search: Optional[str] = Query(None, description="Substring of the item id"),
    catalog: CatalogService = Depends(get_catalog),
) -> ItemsPage:
    """Return a page of items, filtered by ``search`` when given.

    Without a search term the custom order applies if one is set.
    Search results are always in ascending id order.
    """
    return catalog.list_items(page=page, limit=limit, search=search)
