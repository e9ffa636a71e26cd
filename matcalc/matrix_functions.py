# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import logging

import numpy as np

from .elimination import forward_eliminate
from .exceptions import DimensionError, NotSquareError, SingularMatrixError
from .utils import EPSILON, as_float_matrix

logger = logging.getLogger(__name__)


def matmul(A: np.ndarray, B: np.ndarray) -> np.ndarray:
    """
    Matrix product with a fixed reduction order.

    Every output cell is accumulated over the shared dimension in
    ascending index order, ((a0*b0 + a1*b1) + a2*b2) + ..., so results are
    bit-for-bit reproducible regardless of the BLAS NumPy is linked to.
    """
    A = as_float_matrix(A)
    B = as_float_matrix(B, name="B")
    m, n = A.shape
    if B.shape[0] != n:
        raise DimensionError(
            f"cannot multiply {m}x{n} by {B.shape[0]}x{B.shape[1]}: "
            "inner dimensions differ",
            A.shape,
            B.shape,
        )

    C = np.zeros((m, B.shape[1]))
    for k in range(n):
        # rank-1 update: adds term k to every cell at once
        C += np.outer(A[:, k], B[k, :])
    return C


def trace(A: np.ndarray) -> float:
    """Sum of the diagonal of a square matrix, in row order."""
    A = as_float_matrix(A)
    m, n = A.shape
    if m != n:
        raise NotSquareError("trace", A.shape)
    total = 0.0
    for i in range(n):
        total += A[i, i]
    return float(total)


def determinant(A: np.ndarray, tol: float = EPSILON) -> float:
    """
    Calculate the determinant of n-by-n matrix A using elimination

    The determinant is the signed product of the pivots left by partial
    pivoting. A pivot below `tol` means A is singular and 0.0 is returned
    straight away; this is a result, not an error.
    """
    A = as_float_matrix(A)
    m, n = A.shape
    if m != n:
        raise NotSquareError("determinant", A.shape)

    try:
        U, _c, _perm, swaps = forward_eliminate(A, tol=tol)
    except SingularMatrixError as e:
        logger.debug("determinant: singular at step %s, returning 0.0", e.step)
        return 0.0

    det = 1.0
    for i in range(n):
        det *= U[i, i]
    return float(-det if swaps & 1 else det)
