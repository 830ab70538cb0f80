"""State endpoint for API v1."""

from fastapi import APIRouter, Depends

from virtual_catalog_api.app.core.deps import get_catalog
from virtual_catalog_api.app.schemas.catalog import CatalogStateRead
from virtual_catalog_api.app.services.catalog_service import CatalogService

router = APIRouter()


@router.get("/state", response_model=CatalogStateRead)
async def get_state(catalog: CatalogService = Depends(get_catalog)) -> CatalogStateRead:
    """Return the selected ids and whether a custom order is active."""
    return catalog.get_state()
