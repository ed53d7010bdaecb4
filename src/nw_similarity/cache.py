"""DistanceCache: LRU-backed memo of edit distances.

Keys are the ordered pair ``(tuple(a), tuple(b))``, so ``"abc"`` and
``["a", "b", "c"]`` share an entry.  Sequences holding unhashable symbols
cannot be keyed; ``get`` reports a miss and ``put`` is a no-op for them.
LRU eviction occurs silently when ``max_size`` is exceeded.

Each ``DistanceCache`` instance maintains its own ``LRUCache``; there is
no class-level shared state.

Example::

    from nw_similarity.cache import DistanceCache

    cache = DistanceCache(max_size=512)
    cache.put("kitten", "sitting", 3)
    cache.get("kitten", "sitting")   # 3
    cache.get("sitting", "kitten")   # None (pairs are ordered)
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from cachetools import LRUCache


class DistanceCache:
    """LRU-backed cache of edit distances keyed on sequence pairs.

    Args:
        max_size: Maximum number of pairs to hold in memory.  Defaults to 512.
    """

    def __init__(self, max_size: int = 512) -> None:
        self._cache: LRUCache[tuple[tuple[Any, ...], tuple[Any, ...]], int] = (
            LRUCache(maxsize=max_size)
        )

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def max_size(self) -> int:
        """The maximum number of entries this cache can hold."""
        return int(self._cache.maxsize)

    @property
    def curr_size(self) -> int:
        """The current number of entries stored in the cache."""
        return int(self._cache.currsize)

    # ------------------------------------------------------------------
    # Lookup / store
    # ------------------------------------------------------------------

    def get(self, a: Sequence[Any], b: Sequence[Any]) -> int | None:
        """Return the cached distance for ``(a, b)``, or None on a miss."""
        key = self._key(a, b)
        if key is None:
            return None
        return self._cache.get(key)

    def put(self, a: Sequence[Any], b: Sequence[Any], distance: int) -> None:
        """Store ``distance`` for ``(a, b)`` unless the pair is unhashable."""
        key = self._key(a, b)
        if key is not None:
            self._cache[key] = distance

    @staticmethod
    def _key(
        a: Sequence[Any], b: Sequence[Any]
    ) -> tuple[tuple[Any, ...], tuple[Any, ...]] | None:
        key = (tuple(a), tuple(b))
        try:
            hash(key)
        except TypeError:
            return None
        return key
