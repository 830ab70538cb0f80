"""
Selection state for catalog items.

The store is a plain set of ids.  It is independent of ordering and
search: selecting an item never moves it, and a selected item that is
not on the current page simply stays selected.
"""

from dataclasses import dataclass
from typing import Tuple

from virtual_catalog_api.app.core.errors import CatalogValidationError


@dataclass(frozen=True)
class SelectionSnapshot:
    selected_ids: Tuple[int, ...]
    count: int


def validate_item_id(value, size: int) -> int:
    """Return ``value`` if it is an integer id within ``1..size``."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise CatalogValidationError(f"Invalid item id: {value!r} is not an integer", value)
    if value < 1 or value > size:
        raise CatalogValidationError(f"Invalid item id: {value} is outside 1..{size}", value)
    return value


class SelectionStore:
    """Mutable set of selected item ids."""

    def __init__(self, size: int) -> None:
        self._size = size
        self._selected = set()

    def set_selected(self, item_id, selected: bool) -> int:
        """Add or remove ``item_id`` and return the resulting count.

        Adding an id that is already selected, or removing one that is
        not, leaves the set unchanged.
        """
        item_id = validate_item_id(item_id, self._size)
        if selected:
            self._selected.add(item_id)
        else:
            self._selected.discard(item_id)
        return len(self._selected)

    def snapshot(self) -> SelectionSnapshot:
        """Return the selected ids in ascending order."""
        ids = tuple(sorted(self._selected))
        return SelectionSnapshot(selected_ids=ids, count=len(ids))

    def __contains__(self, item_id) -> bool:
        return item_id in self._selected

    def __len__(self) -> int:
        return len(self._selected)
