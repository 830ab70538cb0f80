"""
Selection endpoints for API v1.

``POST /update-selection`` toggles one item; ``GET /selection`` returns
the selected ids.  Selecting an already selected item (or deselecting
one that is not selected) is accepted and changes nothing.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from virtual_catalog_api.app.core.deps import get_catalog
from virtual_catalog_api.app.core.errors import CatalogValidationError
from virtual_catalog_api.app.schemas.catalog import (
    SelectionRead,
    SelectionUpdate,
    SelectionUpdateResult,
)
from virtual_catalog_api.app.services.catalog_service import CatalogService

router = APIRouter()


@router.post("/update-selection", response_model=SelectionUpdateResult)
async def update_selection(
    selection_in: SelectionUpdate,
    catalog: CatalogService = Depends(get_catalog),
) -> SelectionUpdateResult:
    """Select or deselect a single item.

    Returns HTTP 400 if ``id`` is not an integer within the catalog.
    """
    try:
        count = catalog.set_selected(selection_in.id, selection_in.selected)
    except CatalogValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    return SelectionUpdateResult(success=True, selected=selection_in.selected, selected_count=count)


@router.get("/selection", response_model=SelectionRead)
async def get_selection(catalog: CatalogService = Depends(get_catalog)) -> SelectionRead:
    snapshot = catalog.get_selection()
    return SelectionRead(selected_ids=list(snapshot.selected_ids), count=snapshot.count)
