"""Sequential edit-distance engine.

Fills the (m+1) x (n+1) cost matrix in row-major order on the calling
thread.  Row i only reads row i-1 and the cells to its left in row i, all
of which are complete by the time they are read.

``edit_distance`` keeps two rolling rows; ``cost_matrix`` keeps the whole
matrix so the boundary row and column can be inspected.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import numpy as np

from nw_similarity.algorithm.costs import (
    cell_value,
    cost_delete,
    cost_insert,
    cost_substitute,
    validate_sequences,
)


def edit_distance(a: Sequence[Any], b: Sequence[Any]) -> int:
    """Return the unit-cost edit distance between *a* and *b*.

    Args:
        a: First sequence (length m).  Never mutated.
        b: Second sequence (length n).  Never mutated.

    Returns:
        Non-negative int in [|m - n|, max(m, n)].

    Raises:
        TypeError: If either argument is None or not a sequence.
    """
    validate_sequences(a, b)

    # Row 0: j insertions from the empty prefix of a
    previous = [0]
    for j in range(1, len(b) + 1):
        previous.append(previous[j - 1] + cost_insert(b[j - 1]))

    for i in range(1, len(a) + 1):
        symbol_a = a[i - 1]
        # Column 0: i deletions down to the empty prefix of b
        current = [previous[0] + cost_delete(symbol_a)]
        for j in range(1, len(b) + 1):
            current.append(
                cell_value(
                    previous[j],
                    current[j - 1],
                    previous[j - 1],
                    cost_substitute(symbol_a, b[j - 1]),
                )
            )
        previous = current

    return previous[-1]


def cost_matrix(a: Sequence[Any], b: Sequence[Any]) -> np.ndarray:
    """Return the full (m+1) x (n+1) cost matrix for *a* and *b*.

    ``matrix[i, j]`` is the edit distance between ``a[:i]`` and ``b[:j]``;
    ``matrix[m, n]`` equals ``edit_distance(a, b)``.
    """
    validate_sequences(a, b)
    m = len(a)
    n = len(b)

    matrix = np.zeros((m + 1, n + 1), dtype=np.int64)
    matrix[:, 0] = np.arange(m + 1)
    matrix[0, :] = np.arange(n + 1)

    for i in range(1, m + 1):
        for j in range(1, n + 1):
            matrix[i, j] = cell_value(
                int(matrix[i - 1, j]),
                int(matrix[i, j - 1]),
                int(matrix[i - 1, j - 1]),
                cost_substitute(a[i - 1], b[j - 1]),
            )

    return matrix
