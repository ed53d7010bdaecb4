"""SequenceComparator: orchestrator that wires config, engines and cache.

This is the wiring layer between the raw engines and the public API.  It
converts a raw distance into an ``AlignmentResult`` with the normalized
percentage, input lengths, engine mode and timing data.

Architecture:
- compare() starts a wall-clock timer and validates both inputs.
- Identical inputs short-circuit to distance 0 / 100% without an engine run.
- Otherwise the per-instance ``DistanceCache`` is consulted; on a miss the
  engine selected by ``config.mode`` computes the distance and the cache is
  populated.
- The distance is normalized via ``normalize_distance``.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Sequence
from typing import Any

from nw_similarity.algorithm.config import AlignmentConfig, EngineMode
from nw_similarity.algorithm.costs import validate_sequences
from nw_similarity.algorithm.normalizer import is_identical, normalize_distance
from nw_similarity.algorithm.parallel import edit_distance_parallel
from nw_similarity.algorithm.sequential import edit_distance
from nw_similarity.cache import DistanceCache
from nw_similarity.result import AlignmentResult

__all__ = ["SequenceComparator"]

logger = logging.getLogger(__name__)


class SequenceComparator:
    """Orchestrator for sequence comparison.

    Distances are cached per instance; a repeated ``compare()`` on the same
    ordered pair is served from the cache without re-running the engine.
    Two separate ``SequenceComparator`` instances never share cache state.

    Example::

        from nw_similarity.comparator import SequenceComparator

        cmp = SequenceComparator()
        result = cmp.compare("kitten", "sitting")
        print(result.distance)                # 3
        print(result.similarity_percentage)   # 57.142857...
    """

    def __init__(
        self,
        config: AlignmentConfig | None = None,
        max_cache_size: int = 512,
    ) -> None:
        """Initialise the comparator.

        Args:
            config: Engine selection and parallel tuning.  Defaults to
                ``AlignmentConfig()`` (sequential engine).
            max_cache_size: Maximum number of sequence pairs held in the
                per-instance LRU cache.  This is an infrastructure parameter,
                not part of ``AlignmentConfig``.
        """
        self._config: AlignmentConfig = (
            config if config is not None else AlignmentConfig()
        )
        self._cache = DistanceCache(max_size=max_cache_size)

    @property
    def config(self) -> AlignmentConfig:
        """The configuration this comparator was built with."""
        return self._config

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def compare(self, a: Sequence[Any], b: Sequence[Any]) -> AlignmentResult:
        """Compare two sequences and return an AlignmentResult.

        Args:
            a: First sequence.
            b: Second sequence.

        Returns:
            An ``AlignmentResult`` with all fields populated.

        Raises:
            TypeError: If either argument is None or not a sequence.
        """
        t0 = time.perf_counter()
        validate_sequences(a, b)

        if is_identical(a, b):
            distance = 0
            percentage = 100.0
        else:
            distance = self.distance(a, b)
            percentage = normalize_distance(distance, len(a), len(b))

        elapsed_ms = (time.perf_counter() - t0) * 1000.0

        return AlignmentResult(
            distance=distance,
            similarity_percentage=percentage,
            len_a=len(a),
            len_b=len(b),
            mode=self._config.mode,
            computation_time_ms=elapsed_ms,
        )

    def distance(self, a: Sequence[Any], b: Sequence[Any]) -> int:
        """Return the edit distance for ``(a, b)``, using the cache when possible."""
        validate_sequences(a, b)
        cached = self._cache.get(a, b)
        if cached is not None:
            logger.debug("distance cache hit: len_a=%d len_b=%d", len(a), len(b))
            return cached

        if self._config.mode == EngineMode.PARALLEL:
            result = edit_distance_parallel(a, b, config=self._config)
        else:
            result = edit_distance(a, b)

        self._cache.put(a, b, result)
        return result
