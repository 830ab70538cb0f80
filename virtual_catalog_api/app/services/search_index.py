"""
Memoized substring search over catalog ids.

Only the numeral of an item is searchable: an id matches a term when
its decimal representation contains the term.  Ids are scanned in
ascending order and the scan stops after ``result_cap`` matches, so a
broad term such as ``"1"`` returns a bounded, incomplete result.

Results are memoized per normalized term.  The cache has no time
based expiry; the catalog service clears it whenever the custom order
changes.  With ``max_entries`` greater than zero the least recently
used term is evicted once the cache is full.
"""

import logging
from collections import OrderedDict
from dataclasses import dataclass
from typing import Optional, Tuple


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchResult:
    """Matching ids in ascending order, bounded by the result cap."""

    matching_ids: Tuple[int, ...]
    total: int


EMPTY_RESULT = SearchResult(matching_ids=(), total=0)


class SearchIndex:
    """Bounded id scanner with a per-term result cache."""

    def __init__(self, size: int, result_cap: int = 1000, max_entries: int = 0) -> None:
        self._size = size
        self._result_cap = result_cap
        self._max_entries = max_entries
        self._cache: "OrderedDict[str, SearchResult]" = OrderedDict()
        self.hits = 0
        self.misses = 0

    @staticmethod
    def normalize_term(term: Optional[str]) -> str:
        """Strip surrounding whitespace and case-fold ``term``."""
        if term is None:
            return ""
        return str(term).strip().casefold()

    def search(self, term: Optional[str]) -> SearchResult:
        """Return the ids matching ``term``.

        An empty term means "no search" and yields an empty result that
        is not cached.  A cached term returns the stored result object
        itself without rescanning.
        """
        normalized = self.normalize_term(term)
        if not normalized:
            return EMPTY_RESULT

        cached = self._cache.get(normalized)
        if cached is not None:
            self.hits += 1
            self._cache.move_to_end(normalized)
            return cached

        self.misses += 1
        result = self._scan(normalized)
        self._store(normalized, result)
        logger.debug("Search %r matched %s ids (cache size %s)", normalized, result.total, len(self._cache))
        return result

    def invalidate(self) -> int:
        """Drop every cached term and return how many were removed."""
        dropped = len(self._cache)
        self._cache.clear()
        return dropped

    def __contains__(self, term) -> bool:
        return self.normalize_term(term) in self._cache

    def __len__(self) -> int:
        return len(self._cache)

    def _scan(self, term: str) -> SearchResult:
        # Decimal ids only contain ASCII digits.
        if not (term.isascii() and term.isdigit()):
            return EMPTY_RESULT
        matches = []
        for item_id in range(1, self._size + 1):
            if term in str(item_id):
                matches.append(item_id)
                if len(matches) >= self._result_cap:
                    break
        return SearchResult(matching_ids=tuple(matches), total=len(matches))

    def _store(self, term: str, result: SearchResult) -> None:
        self._cache[term] = result
        if self._max_entries > 0:
            while len(self._cache) > self._max_entries:
                evicted, _ = self._cache.popitem(last=False)
                logger.debug("Evicted search term %r from cache", evicted)
