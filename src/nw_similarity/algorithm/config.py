"""AlignmentConfig and EngineMode for edit-distance engine configuration.

AlignmentConfig is a frozen (immutable) dataclass holding the engine
parameters.  EngineMode selects how the cost matrix is filled:
row by row on the calling thread, or wavefront by wavefront on a
thread pool.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto


class EngineMode(StrEnum):
    """Which matrix-fill engine computes the edit distance.

    - SEQUENTIAL: Row-major fill on the calling thread.
    - PARALLEL:   Anti-diagonal wavefront fill on a worker pool.
    """

    SEQUENTIAL = auto()
    PARALLEL = auto()


@dataclass(frozen=True, slots=True)
class AlignmentConfig:
    """Immutable configuration for the edit-distance engines.

    Attributes:
        mode: Engine used by ``SequenceComparator`` and ``compare()``.
        max_workers: Thread-pool size for the parallel engine.  None lets
            ``ThreadPoolExecutor`` pick its default.
        chunk_size: Maximum number of wavefront cells handed to one worker.
            Wavefronts no longer than this are filled inline.
        similarity_threshold: Default percentage used by ``is_similar()``,
            in [0, 100].
    """

    mode: EngineMode = EngineMode.SEQUENTIAL
    max_workers: int | None = None
    chunk_size: int = 4096
    similarity_threshold: float = 75.0

    def __post_init__(self) -> None:
        if self.max_workers is not None and self.max_workers < 1:
            msg = f"max_workers must be >= 1, got {self.max_workers}"
            raise ValueError(msg)
        if self.chunk_size < 1:
            msg = f"chunk_size must be >= 1, got {self.chunk_size}"
            raise ValueError(msg)
        if not 0.0 <= self.similarity_threshold <= 100.0:
            msg = (
                f"similarity_threshold must be in [0, 100], "
                f"got {self.similarity_threshold}"
            )
            raise ValueError(msg)
