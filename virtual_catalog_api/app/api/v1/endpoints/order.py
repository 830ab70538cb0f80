"""
Custom order endpoints for API v1.

``POST /update-order`` replaces the custom order wholesale.  An order
containing a non-integer, out-of-range or duplicate id is rejected
with HTTP 400 and the previous order stays in effect.
``POST /reset-order`` returns the catalog to natural ascending order.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from virtual_catalog_api.app.core.deps import get_catalog
from virtual_catalog_api.app.core.errors import CatalogValidationError
from virtual_catalog_api.app.schemas.catalog import OperationResult, OrderUpdate
from virtual_catalog_api.app.services.catalog_service import CatalogService

router = APIRouter()


@router.post("/update-order", response_model=OperationResult)
async def update_order(
    order_in: OrderUpdate,
    catalog: CatalogService = Depends(get_catalog),
) -> OperationResult:
    """Replace the custom order."""
    try:
        count = catalog.set_order(order_in.order)
    except CatalogValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    return OperationResult(success=True, message=f"Order updated: {count} items")


@router.post("/reset-order", response_model=OperationResult)
async def reset_order(catalog: CatalogService = Depends(get_catalog)) -> OperationResult:
    """Drop the custom order."""
    catalog.reset_order()
    return OperationResult(success=True, message="Order reset")
