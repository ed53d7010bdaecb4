"""Parallel edit-distance engine: anti-diagonal wavefront sweep.

The cost matrix lives in a flat int64 buffer of size (m+1) * (n+1), cell
(i, j) at offset ``i * (n + 1) + j``.  Cells with ``i + j == k`` form
wavefront k.  Every cell on wavefront k reads only wavefronts k-1 and k-2,
so the cells of one wavefront are independent of each other.

Sweep:
- Wavefronts are processed in increasing k.
- A wavefront longer than ``config.chunk_size`` is split into chunks that
  run concurrently on a ``ThreadPoolExecutor``; each chunk is a vectorized
  numpy update over its slice of the diagonal.
- All chunk futures of wavefront k are joined before wavefront k+1 is
  dispatched.  That join is the only synchronization point: no chunk ever
  reads a cell another chunk is still writing.

Row-parallel filling (one worker per row over a shared buffer) is not used
because row i would race with the writes of row i-1.
"""

from __future__ import annotations

import itertools
import logging
from collections.abc import Sequence
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any

import numpy as np

from nw_similarity.algorithm.config import AlignmentConfig
from nw_similarity.algorithm.costs import validate_sequences

logger = logging.getLogger(__name__)


def edit_distance_parallel(
    a: Sequence[Any],
    b: Sequence[Any],
    config: AlignmentConfig | None = None,
) -> int:
    """Return the unit-cost edit distance between *a* and *b*.

    Produces exactly the same result as ``edit_distance`` for every input.

    Args:
        a:      First sequence (length m).  Symbols must be hashable.
        b:      Second sequence (length n).  Symbols must be hashable.
        config: Worker count and chunk size.  Defaults to ``AlignmentConfig()``.

    Returns:
        Non-negative int in [|m - n|, max(m, n)].

    Raises:
        TypeError: If either argument is None, not a sequence, or holds
            unhashable symbols.
    """
    validate_sequences(a, b)
    config = config if config is not None else AlignmentConfig()

    m = len(a)
    n = len(b)
    # Only the boundary row/column exists; no interior cells to fill.
    if m == 0 or n == 0:
        return max(m, n)

    codes_a, codes_b = _encode(a, b)
    width = n + 1
    buffer = np.empty((m + 1) * width, dtype=np.int64)
    buffer[:width] = np.arange(width)
    buffer[np.arange(m + 1) * width] = np.arange(m + 1)

    longest = min(m, n)
    logger.debug(
        "wavefront fill: shape=(%d, %d) wavefronts=%d longest=%d chunk_size=%d "
        "max_workers=%s",
        m + 1,
        width,
        m + n - 1,
        longest,
        config.chunk_size,
        config.max_workers,
    )

    if longest <= config.chunk_size:
        # Every wavefront fits in one chunk; a pool would only add overhead.
        for k in range(2, m + n + 1):
            lo, hi = _wavefront_rows(k, m, n)
            _fill_chunk(buffer, codes_a, codes_b, width, k, lo, hi)
        return int(buffer[-1])

    with ThreadPoolExecutor(max_workers=config.max_workers) as executor:
        for k in range(2, m + n + 1):
            lo, hi = _wavefront_rows(k, m, n)
            if hi - lo <= config.chunk_size:
                _fill_chunk(buffer, codes_a, codes_b, width, k, lo, hi)
                continue
            futures: list[Future[None]] = [
                executor.submit(
                    _fill_chunk,
                    buffer,
                    codes_a,
                    codes_b,
                    width,
                    k,
                    start,
                    min(start + config.chunk_size, hi),
                )
                for start in range(lo, hi, config.chunk_size)
            ]
            # Barrier: wavefront k must be complete before k+1 reads it.
            for future in futures:
                future.result()

    return int(buffer[-1])


def _wavefront_rows(k: int, m: int, n: int) -> tuple[int, int]:
    """Half-open row range ``[lo, hi)`` of interior cells with ``i + j == k``."""
    return max(1, k - n), min(m, k - 1) + 1


def _fill_chunk(
    buffer: np.ndarray,
    codes_a: np.ndarray,
    codes_b: np.ndarray,
    width: int,
    k: int,
    row_start: int,
    row_stop: int,
) -> None:
    """Fill cells (i, k - i) for ``row_start <= i < row_stop`` in place."""
    rows = np.arange(row_start, row_stop)
    cols = k - rows
    idx = rows * width + cols

    top = buffer[idx - width]
    left = buffer[idx - 1]
    diagonal = buffer[idx - width - 1]
    substitution = (codes_a[rows - 1] != codes_b[cols - 1]).astype(np.int64)

    buffer[idx] = np.minimum(np.minimum(top, left) + 1, diagonal + substitution)


def _encode(a: Sequence[Any], b: Sequence[Any]) -> tuple[np.ndarray, np.ndarray]:
    """Intern symbols of both sequences to shared integer codes.

    Equal symbols map to equal codes, so code inequality is substitution cost.
    A symbol unequal to itself (e.g. NaN) gets a fresh code per occurrence,
    since dict lookup would otherwise match it by identity.
    """
    table: dict[Any, int] = {}
    fresh = itertools.count()

    def code(symbol: Any) -> int:
        hash(symbol)
        if symbol != symbol:
            return next(fresh)
        if symbol not in table:
            table[symbol] = next(fresh)
        return table[symbol]

    codes_a = np.fromiter((code(s) for s in a), dtype=np.int64, count=len(a))
    codes_b = np.fromiter((code(s) for s in b), dtype=np.int64, count=len(b))
    return codes_a, codes_b
