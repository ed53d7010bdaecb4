"""nw-similarity - unit-cost edit distance and similarity percentages for sequences."""

from __future__ import annotations

from nw_similarity.algorithm.config import AlignmentConfig, EngineMode
from nw_similarity.api import (
    compare,
    edit_distance,
    edit_distance_parallel,
    is_similar,
    similarity_percentage,
)
from nw_similarity.comparator import SequenceComparator
from nw_similarity.result import AlignmentResult

__version__: str = "0.1.0"
__all__: list[str] = [
    "AlignmentConfig",
    "AlignmentResult",
    "EngineMode",
    "SequenceComparator",
    "compare",
    "edit_distance",
    "edit_distance_parallel",
    "is_similar",
    "similarity_percentage",
]
