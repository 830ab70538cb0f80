"""
Service layer for the virtual catalog.

:class:`CatalogService` owns the only mutable state of the
application: the custom order, the selection and the search cache,
grouped in :class:`CatalogState`.  One instance is created per
application and stored on ``app.state.catalog``.

Every public method runs entirely under a single lock, so a reader
never observes a new custom order together with search results cached
for the old one.  Page and limit values are coerced and clamped rather
than rejected; invalid ids and orders raise
:class:`CatalogValidationError`, and any other fault is logged and
re-raised as :class:`CatalogInternalError`.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Any, Optional, Sequence, Tuple

from virtual_catalog_api.app.core.config import Settings
from virtual_catalog_api.app.core.errors import CatalogError, CatalogInternalError
from virtual_catalog_api.app.schemas.catalog import CatalogStateRead, ItemsPage
from virtual_catalog_api.app.services.item_synthesizer import synthesize
from virtual_catalog_api.app.services.order_resolver import (
    CustomOrderedRange,
    resolve_order,
    validate_order,
)
from virtual_catalog_api.app.services.search_index import SearchIndex
from virtual_catalog_api.app.services.selection_store import SelectionSnapshot, SelectionStore


logger = logging.getLogger(__name__)


@dataclass
class CatalogState:
    """Custom order, selection and search cache, updated as one unit."""

    selection: SelectionStore
    search_index: SearchIndex
    custom_order: Optional[Tuple[int, ...]] = None
    lock: threading.RLock = field(default_factory=threading.RLock, repr=False)


def _coerce_int(value: Any, default: int) -> int:
    """Convert ``value`` to ``int``, falling back to ``default``."""
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except ValueError:
        try:
            return int(float(value))
        except (TypeError, ValueError, OverflowError):
            return default


class CatalogService:
    """Answers paginated catalog queries and applies order/selection changes."""

    def __init__(
        self,
        size: int = 1_000_000,
        *,
        search_result_cap: int = 1000,
        search_cache_size: int = 0,
        default_page_limit: int = 20,
        max_page_limit: int = 100,
        search_respects_custom_order: bool = False,
    ) -> None:
        self.size = size
        self.default_page_limit = default_page_limit
        self.max_page_limit = max_page_limit
        self.search_respects_custom_order = search_respects_custom_order
        self._state = CatalogState(
            selection=SelectionStore(size),
            search_index=SearchIndex(size, result_cap=search_result_cap, max_entries=search_cache_size),
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "CatalogService":
        return cls(
            settings.catalog_size,
            search_result_cap=settings.search_result_cap,
            search_cache_size=settings.search_cache_size,
            default_page_limit=settings.default_page_limit,
            max_page_limit=settings.max_page_limit,
            search_respects_custom_order=settings.search_respects_custom_order,
        )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def list_items(self, page: Any = 1, limit: Any = None, search: Optional[str] = None) -> ItemsPage:
        """Return one page of the effective id sequence.

        ``page`` is clamped to at least 1 and ``limit`` to
        ``1..max_page_limit``; values that are not numbers fall back to
        the defaults.  A non-empty ``search`` restricts the catalog to
        matching ids; otherwise the custom order (if any) or the natural
        ascending order applies.  A page beyond the end is empty.
        """
        page_number = max(_coerce_int(page, 1), 1)
        page_limit = min(max(_coerce_int(limit, self.default_page_limit), 1), self.max_page_limit)
        term = SearchIndex.normalize_term(search)

        state = self._state
        with state.lock:
            try:
                ids, total = self._effective_ids(term)
                start = (page_number - 1) * page_limit
                end = start + page_limit
                items = [synthesize(item_id, state.selection) for item_id in ids[start:end]]
            except CatalogError:
                raise
            except Exception as exc:
                logger.exception("Failed to list items (page=%s, limit=%s, search=%r)", page_number, page_limit, term)
                raise CatalogInternalError("Failed to fetch items", str(exc)) from exc

        logger.debug("Returning items %s-%s of %s", start, end, total)
        return ItemsPage(items=items, total=total, has_more=end < total, page=page_number, limit=page_limit)

    def _effective_ids(self, term: str) -> Tuple[Sequence[int], int]:
        state = self._state
        if term:
            result = state.search_index.search(term)
            ids: Sequence[int] = result.matching_ids
            if self.search_respects_custom_order and state.custom_order:
                ids = resolve_order(ids, state.custom_order)
            return ids, result.total
        if state.custom_order:
            return CustomOrderedRange(self.size, state.custom_order), self.size
        return range(1, self.size + 1), self.size

    def get_selection(self) -> SelectionSnapshot:
        with self._state.lock:
            return self._state.selection.snapshot()

    def get_state(self) -> CatalogStateRead:
        """Return the selected ids and whether a custom order is active."""
        with self._state.lock:
            snapshot = self._state.selection.snapshot()
            has_custom_order = bool(self._state.custom_order)
        return CatalogStateRead(
            selected=list(snapshot.selected_ids),
            selected_count=snapshot.count,
            has_custom_order=has_custom_order,
        )

    @property
    def custom_order(self) -> Optional[Tuple[int, ...]]:
        return self._state.custom_order

    def search_cache_info(self) -> dict:
        index = self._state.search_index
        with self._state.lock:
            return {"entries": len(index), "hits": index.hits, "misses": index.misses}

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------
    def set_order(self, order) -> int:
        """Replace the custom order and clear the search cache.

        Raises :class:`CatalogValidationError` for a non-integer,
        out-of-range or duplicate id; the current order is then left
        untouched.  Returns the length of the new order.
        """
        validated = validate_order(order, self.size)
        with self._state.lock:
            self._state.custom_order = validated
            dropped = self._state.search_index.invalidate()
        logger.info("Order updated: %s ids (dropped %s cached searches)", len(validated), dropped)
        return len(validated)

    def reset_order(self) -> None:
        """Return to natural ascending order."""
        with self._state.lock:
            self._state.custom_order = None
            dropped = self._state.search_index.invalidate()
        logger.info("Order reset (dropped %s cached searches)", dropped)

    def set_selected(self, item_id, selected: bool) -> int:
        """Select or deselect ``item_id`` and return the selection size."""
        with self._state.lock:
            count = self._state.selection.set_selected(item_id, selected)
        logger.info("Selection updated: id=%s selected=%s (total %s)", item_id, selected, count)
        return count
