"""Similarity normalizer: edit distance -> percentage in [0, 100].

Formula::

    similarity = (1 - distance / max(len(a), len(b))) * 100

Identical sequences short-circuit to 100 before any engine runs, which also
covers the both-empty case where ``max(len(a), len(b)) == 0``.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from nw_similarity.algorithm.config import AlignmentConfig
from nw_similarity.algorithm.costs import validate_sequences
from nw_similarity.algorithm.parallel import edit_distance_parallel
from nw_similarity.algorithm.sequential import edit_distance


def normalize_distance(distance: int, len_a: int, len_b: int) -> float:
    """Convert a raw edit distance into a similarity percentage.

    Args:
        distance: Edit distance between the two sequences.
        len_a:    Length of the first sequence.
        len_b:    Length of the second sequence.

    Returns:
        Float in [0.0, 100.0].  100.0 when both lengths are 0.
    """
    longest = float(max(len_a, len_b))
    if longest == 0.0:
        return 100.0
    return (1.0 - distance / longest) * 100.0


def is_identical(a: Sequence[Any], b: Sequence[Any]) -> bool:
    """True when *a* and *b* have the same length and equal symbols in order."""
    return len(a) == len(b) and all(x == y for x, y in zip(a, b, strict=True))


def similarity_percentage(
    a: Sequence[Any],
    b: Sequence[Any],
    use_parallel: bool = False,
    config: AlignmentConfig | None = None,
) -> float:
    """Return how similar *a* and *b* are, as a percentage.

    Args:
        a:            First sequence.
        b:            Second sequence.
        use_parallel: Use the wavefront engine instead of the sequential one.
        config:       Passed to the parallel engine.

    Returns:
        Float in [0.0, 100.0]; 100.0 means identical.
    """
    validate_sequences(a, b)
    if is_identical(a, b):
        return 100.0

    if use_parallel:
        distance = edit_distance_parallel(a, b, config=config)
    else:
        distance = edit_distance(a, b)
    return normalize_distance(distance, len(a), len(b))
