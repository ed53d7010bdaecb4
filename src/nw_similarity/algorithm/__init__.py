"""algorithm subpackage - public API for the edit-distance engines.

Provides the sequential and wavefront-parallel matrix-fill engines, the
percentage normalizer and engine configuration.  Import from this module
(not from sub-modules directly) to stay on the stable public interface.

Example::

    from nw_similarity.algorithm import edit_distance, edit_distance_parallel

    edit_distance("kitten", "sitting")            # 3
    edit_distance_parallel("kitten", "sitting")   # 3
"""

from __future__ import annotations

from nw_similarity.algorithm.config import AlignmentConfig, EngineMode
from nw_similarity.algorithm.normalizer import (
    normalize_distance,
    similarity_percentage,
)
from nw_similarity.algorithm.parallel import edit_distance_parallel
from nw_similarity.algorithm.sequential import cost_matrix, edit_distance

__all__ = [
    "AlignmentConfig",
    "EngineMode",
    "cost_matrix",
    "edit_distance",
    "edit_distance_parallel",
    "normalize_distance",
    "similarity_percentage",
]
