"""
Pydantic schemas for the virtual catalog.

Field names follow Python conventions; the JSON representation uses
the camelCase aliases expected by existing web clients (``hasMore``,
``selectedCount`` and so on).  FastAPI serializes response models by
alias, and ``populate_by_name`` lets services build the models with
the Python field names.
"""

from typing import Any, List

from pydantic import BaseModel, Field


class ItemRead(BaseModel):
    """A single synthesized catalog item."""

    id: int = Field(..., example=42)
    text: str = Field(..., example="Item 42")
    selected: bool = Field(False, example=False)


class ItemsPage(BaseModel):
    """One page of the effective id sequence."""

    items: List[ItemRead]
    total: int
    has_more: bool = Field(..., alias="hasMore")
    page: int
    limit: int

    model_config = {
        "populate_by_name": True,
    }


class OrderUpdate(BaseModel):
    """Request body for replacing the custom order.

    Elements are validated by the catalog service so that the error
    message can name the offending value.
    """

    order: List[Any] = Field(..., example=[5, 3, 9])


class OperationResult(BaseModel):
    success: bool = True
    message: str


class SelectionUpdate(BaseModel):
    """Request body for toggling the selection of one item."""

    id: Any = Field(..., example=42)
    selected: bool = Field(..., example=True)


class SelectionUpdateResult(BaseModel):
    success: bool = True
    selected: bool
    selected_count: int = Field(..., alias="selectedCount")

    model_config = {
        "populate_by_name": True,
    }


class SelectionRead(BaseModel):
    """Read-only snapshot of the selection."""

    selected_ids: List[int] = Field(..., alias="selectedIds")
    count: int

    model_config = {
        "populate_by_name": True,
    }


class CatalogStateRead(BaseModel):
    """Summary of the mutable catalog state."""

    selected: List[int]
    selected_count: int = Field(..., alias="selectedCount")
    has_custom_order: bool = Field(..., alias="hasCustomOrder")

    model_config = {
        "populate_by_name": True,
    }
