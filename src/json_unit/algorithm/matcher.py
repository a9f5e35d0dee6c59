"""Optimal pairing of array elements for unordered comparison.

Wraps scipy's ``linear_sum_assignment``.  The cost of pairing expected
element i with actual element j is the number of differences that comparing
them would record, so a perfect permutation costs zero.
"""

from __future__ import annotations

import numpy as np
from scipy.optimize import linear_sum_assignment  # type: ignore[import-untyped]

__all__ = ["hungarian_match"]


def hungarian_match(cost_matrix: np.ndarray) -> list[tuple[int, int]]:
    """Compute a minimum-cost assignment of rows to columns.

    Args:
        cost_matrix: 2-D cost matrix of shape ``(m, n)``; may be
            rectangular, in which case ``min(m, n)`` pairs are returned.

    Returns:
        List of ``(row, col)`` pairs sorted by row index.  Empty when the
        matrix has no cells.
    """
    if cost_matrix.size == 0:
        return []

    cost = np.asarray(cost_matrix, dtype=float)
    row_ind, col_ind = linear_sum_assignment(cost)
    return sorted(zip(row_ind.tolist(), col_ind.tolist(), strict=True))
