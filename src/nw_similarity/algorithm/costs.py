"""Unit cost functions and the single-cell recurrence.

Every edit operation costs 1; a substitution between equal symbols costs 0.
Both engines fill each matrix cell with the same recurrence::

    D[i][j] = min(D[i-1][j] + 1, D[i][j-1] + 1, D[i-1][j-1] + cost(a[i-1], b[j-1]))
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def cost_insert(symbol: Any) -> int:
    """Unit cost for inserting a symbol."""
    return 1


def cost_delete(symbol: Any) -> int:
    """Unit cost for deleting a symbol."""
    return 1


def cost_substitute(symbol_a: Any, symbol_b: Any) -> int:
    """0 when the symbols are equal, 1 otherwise."""
    return 0 if symbol_a == symbol_b else 1


def cell_value(top: int, left: int, diagonal: int, substitution: int) -> int:
    """Fill one cell from its top, left and top-left neighbours.

    Args:
        top:          ``D[i-1][j]`` (reached by deleting ``a[i-1]``).
        left:         ``D[i][j-1]`` (reached by inserting ``b[j-1]``).
        diagonal:     ``D[i-1][j-1]``.
        substitution: Cost of aligning ``a[i-1]`` with ``b[j-1]``.

    Returns:
        The minimum of the three candidate costs.
    """
    deletion = top + 1
    insertion = left + 1
    return min(deletion, insertion, diagonal + substitution)


def validate_sequences(a: Any, b: Any) -> None:
    """Reject absent or non-sequence inputs with ``TypeError``."""
    for name, value in (("a", a), ("b", b)):
        if value is None:
            raise TypeError(f"Sequence {name!r} must not be None")
        if not isinstance(value, Sequence):
            raise TypeError(
                f"Sequence {name!r} must be an ordered sequence, got {type(value)!r}"
            )
