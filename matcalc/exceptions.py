# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Exception hierarchy for matcalc.

Every error raised by the package inherits from `MatrixError`, so callers
can catch the whole family at once. The concrete classes also inherit from
the matching built-in (`ValueError` / `IndexError`) so code written against
plain NumPy-style errors keeps working.
"""

from typing import Optional, Tuple


class MatrixError(Exception):
    """Base exception for all matcalc errors."""


class DimensionError(MatrixError, ValueError):
    """
    Matrix dimensions are invalid or incompatible.

    Raised for non-positive dimensions, ragged row data, and operand
    shapes that do not fit the requested operation.

    Attributes
    ----------
    shapes : tuple of (rows, cols) pairs involved, when known
    """

    def __init__(self, message: str, *shapes: Tuple[int, int]):
        super().__init__(message)
        self.shapes = shapes


class NotSquareError(DimensionError):
    """An operation defined only for square matrices got a rectangular one."""

    def __init__(self, operation: str, shape: Tuple[int, int]):
        super().__init__(
            f"{operation} requires a square matrix, got {shape[0]}x{shape[1]}",
            shape,
        )
        self.operation = operation


class MatrixIndexError(MatrixError, IndexError):
    """
    Element index outside ``[0, rows) x [0, cols)``.

    Negative indices are rejected rather than wrapped.
    """

    def __init__(self, row: int, col: int, shape: Tuple[int, int]):
        super().__init__(
            f"index ({row}, {col}) out of bounds for {shape[0]}x{shape[1]} matrix"
        )
        self.row = row
        self.col = col
        self.shape = shape


class SingularMatrixError(MatrixError, ValueError):
    """
    Forward elimination met a pivot below tolerance.

    Attributes
    ----------
    step  : elimination step (column) where the pivot vanished
    pivot : the offending pivot value, when available
    """

    def __init__(
        self,
        message: str,
        step: Optional[int] = None,
        pivot: Optional[float] = None,
    ):
        super().__init__(message)
        self.step = step
        self.pivot = pivot
