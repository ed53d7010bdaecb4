"""Public API functions for nw-similarity.

This module provides the user-facing functions: edit_distance,
edit_distance_parallel, similarity_percentage, compare and is_similar.
compare() and is_similar() create a fresh SequenceComparator per call to
guarantee zero global state between calls.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from nw_similarity.algorithm.config import AlignmentConfig
from nw_similarity.algorithm.normalizer import similarity_percentage
from nw_similarity.algorithm.parallel import edit_distance_parallel
from nw_similarity.algorithm.sequential import edit_distance
from nw_similarity.comparator import SequenceComparator
from nw_similarity.result import AlignmentResult

__all__ = [
    "compare",
    "edit_distance",
    "edit_distance_parallel",
    "is_similar",
    "similarity_percentage",
]


def compare(
    a: Sequence[Any],
    b: Sequence[Any],
    config: AlignmentConfig | None = None,
) -> AlignmentResult:
    """Compare two sequences and return an AlignmentResult.

    Args:
        a:      First sequence.
        b:      Second sequence.
        config: Engine selection.  Defaults to ``AlignmentConfig()`` when None.

    Returns:
        An ``AlignmentResult`` with distance, similarity_percentage, len_a,
        len_b, mode and computation_time_ms populated.
    """
    comparator = SequenceComparator(config=config)
    return comparator.compare(a, b)


def is_similar(
    a: Sequence[Any],
    b: Sequence[Any],
    threshold: float | None = None,
    config: AlignmentConfig | None = None,
) -> bool:
    """Return True if the two sequences are at least ``threshold`` percent similar.

    Args:
        a:         First sequence.
        b:         Second sequence.
        threshold: Minimum percentage in [0, 100].  Defaults to
                   ``config.similarity_threshold`` (75.0).
        config:    Engine selection.  Defaults to ``AlignmentConfig()`` when None.

    Returns:
        True if ``compare(a, b, config).similarity_percentage >= threshold``.

    Raises:
        ValueError: If ``threshold`` is outside [0, 100].
    """
    config = config if config is not None else AlignmentConfig()
    if threshold is None:
        threshold = config.similarity_threshold
    if not 0.0 <= threshold <= 100.0:
        msg = f"threshold must be in [0, 100], got {threshold}"
        raise ValueError(msg)
    result = compare(a, b, config=config)
    return result.similarity_percentage >= threshold
