"""
On-demand item synthesis.

Catalog items are never stored.  Each one is derived from its id at
the moment it is requested; only the ``selected`` flag depends on
mutable state, and it is read from the selection passed in by the
caller.  Ids must already be validated to lie within the catalog.
"""

from typing import Container

from virtual_catalog_api.app.schemas.catalog import ItemRead


def render_text(item_id: int) -> str:
    """Return the display label for ``item_id``."""
    return f"Item {item_id}"


def synthesize(item_id: int, selection: Container[int]) -> ItemRead:
    """Build the item for ``item_id``.

    ``selection`` is anything supporting ``in``; a
    :class:`SelectionStore` or a plain set both work.
    """
    return ItemRead(id=item_id, text=render_text(item_id), selected=item_id in selection)
