# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Elementary row operations shared by RREF, determinant and solve.

The working state is a plain list of 1-D row buffers. Each buffer is owned
by exactly one list slot, so a swap only exchanges references and never
copies row contents.
"""

from typing import List, Optional

import numpy as np

from .utils import EPSILON

Rows = List[np.ndarray]


def working_rows(A: np.ndarray) -> Rows:
    """Independent float64 copies of the rows of `A`."""
    return [np.array(row, dtype=float) for row in A]


def stack_rows(rows: Rows) -> np.ndarray:
    return np.vstack(rows)


def swap_rows(rows: Rows, i: int, j: int) -> None:
    if i != j:
        rows[i], rows[j] = rows[j], rows[i]


def scale_row(rows: Rows, i: int, divisor: float) -> None:
    """Divide row `i` by `divisor`; dividing by the pivot leaves it at exactly 1."""
    rows[i] /= divisor


def combine_rows(
    rows: Rows, target: int, source: int, factor: float, start: int = 0
) -> None:
    """rows[target] -= factor * rows[source], touching columns >= `start`."""
    rows[target][start:] -= factor * rows[source][start:]


def partial_pivot(rows: Rows, col: int, start: int) -> int:
    """
    Index of the row at or below `start` with the largest magnitude in
    column `col`. Ties go to the topmost row.
    """
    column = np.abs([rows[k][col] for k in range(start, len(rows))])
    return start + int(column.argmax())


def first_nonzero(
    rows: Rows, col: int, start: int, tol: float = EPSILON
) -> Optional[int]:
    """First row at or below `start` whose entry in `col` exceeds `tol`."""
    for k in range(start, len(rows)):
        if abs(rows[k][col]) > tol:
            return k
    return None
