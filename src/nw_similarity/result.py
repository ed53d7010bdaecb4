"""AlignmentResult dataclass for sequence comparison output.

This module provides the result type returned by compare() calls.
"""

from __future__ import annotations

from dataclasses import dataclass

from nw_similarity.algorithm.config import EngineMode

__all__ = ["AlignmentResult"]


@dataclass(frozen=True, slots=True)
class AlignmentResult:
    """Result of a compare() call.

    Attributes:
        distance: Unit-cost edit distance between the two sequences.
        similarity_percentage: ``(1 - distance / max(len_a, len_b)) * 100``,
            in [0.0, 100.0].  100.0 is identical.
        len_a: Length of the first sequence.
        len_b: Length of the second sequence.
        mode: Engine that was selected for the comparison.
        computation_time_ms: Wall-clock duration of the comparison in milliseconds.
    """

    distance: int
    similarity_percentage: float
    len_a: int
    len_b: int
    mode: EngineMode
    computation_time_ms: float
