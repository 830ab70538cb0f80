"""
Custom ordering of catalog ids.

A custom order is a sequence of distinct ids chosen by the client.
Ids named in it come first, in the given order; every other id keeps
its original relative position after them.  :func:`resolve_order`
applies this rule to an arbitrary candidate sequence (for example a
list of search matches), while :class:`CustomOrderedRange` applies it
to the whole catalog without building a million element list.
"""

from bisect import bisect_right
from collections import Counter
from collections.abc import Sequence
from typing import Iterable, List, Optional, Tuple

from virtual_catalog_api.app.core.errors import CatalogValidationError


def resolve_order(candidate_ids: Iterable[int], custom_order: Optional[Sequence] = None) -> List[int]:
    """Arrange ``candidate_ids`` according to ``custom_order``.

    Returns the candidates unchanged when ``custom_order`` is ``None``.
    Otherwise ids from ``custom_order`` that are also candidates come
    first, in custom order, followed by the remaining candidates in
    their original order.  The result is always a permutation of the
    candidates.
    """
    candidates = list(candidate_ids)
    if custom_order is None:
        return candidates

    counts = Counter(candidates)
    ordered = set(custom_order)
    head: List[int] = []
    for item_id in custom_order:
        # ``pop`` so an id repeated in the custom order is emitted once
        head.extend([item_id] * counts.pop(item_id, 0))
    tail = [item_id for item_id in candidates if item_id not in ordered]
    return head + tail


def validate_order(order: Iterable, size: int) -> Tuple[int, ...]:
    """Check a proposed custom order and return it as a tuple.

    Every element must be an integer id between 1 and ``size`` and no
    id may appear twice.  The first offending element is reported in
    the raised :class:`CatalogValidationError`.
    """
    seen = set()
    validated = []
    for value in order:
        if isinstance(value, bool) or not isinstance(value, int):
            raise CatalogValidationError(f"Invalid id in order: {value!r} is not an integer", value)
        if value < 1 or value > size:
            raise CatalogValidationError(f"Invalid id in order: {value} is outside 1..{size}", value)
        if value in seen:
            raise CatalogValidationError(f"Duplicate id in order: {value}", value)
        seen.add(value)
        validated.append(value)
    return tuple(validated)


class CustomOrderedRange(Sequence):
    """The ids ``1..size`` arranged by a custom order, computed lazily.

    Equivalent to ``resolve_order(range(1, size + 1), custom_order)``.
    ``custom_order`` must already be validated against ``size``.
    Slicing costs O(log size + slice length) regardless of where the
    slice starts.
    """

    def __init__(self, size: int, custom_order: Sequence) -> None:
        self._size = size
        self._head = tuple(custom_order)
        self._head_set = frozenset(self._head)
        self._excluded = sorted(self._head)

    def __len__(self) -> int:
        return self._size

    def __getitem__(self, index):
        if isinstance(index, slice):
            start, stop, step = index.indices(self._size)
            if step != 1:
                return [self[i] for i in range(start, stop, step)]
            return self._window(start, stop)
        if index < 0:
            index += self._size
        if not 0 <= index < self._size:
            raise IndexError("CustomOrderedRange index out of range")
        return self._window(index, index + 1)[0]

    def _window(self, start: int, stop: int) -> List[int]:
        if start >= stop:
            return []
        head_len = len(self._head)
        result = list(self._head[start:min(stop, head_len)])
        if stop > head_len:
            first = max(start, head_len)
            result.extend(self._tail(first - head_len, stop - first))
        return result

    def _tail(self, offset: int, count: int) -> List[int]:
        """Return ``count`` ascending ids not in the head, skipping ``offset``."""
        remaining = self._size - len(self._head)
        if offset >= remaining:
            return []
        item_id = self._nth_unordered(offset)
        result: List[int] = []
        while len(result) < count and item_id <= self._size:
            if item_id not in self._head_set:
                result.append(item_id)
            item_id += 1
        return result

    def _nth_unordered(self, offset: int) -> int:
        # Smallest id x with x - |{head ids <= x}| == offset + 1.
        low, high = 1, self._size
        while low < high:
            mid = (low + high) // 2
            if mid - bisect_right(self._excluded, mid) >= offset + 1:
                high = mid
            else:
                low = mid + 1
        return low
