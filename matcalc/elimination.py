# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import logging
from typing import List, Optional, Tuple

import numpy as np

from .exceptions import DimensionError, NotSquareError, SingularMatrixError
from .rowops import (
    combine_rows,
    first_nonzero,
    partial_pivot,
    scale_row,
    stack_rows,
    swap_rows,
    working_rows,
)
from .utils import EPSILON, as_float_matrix, snap_to_zero

logger = logging.getLogger(__name__)


def forward_eliminate(
    A: np.ndarray,
    b: Optional[np.ndarray] = None,
    tol: float = EPSILON,
) -> Tuple[np.ndarray, Optional[np.ndarray], List[int], int]:
    """
    Row-echelon reduction with partial pivoting on an n by n matrix A.

    When `b` is given the elimination runs on the augmented matrix [A | b]
    so the right-hand side sees exactly the same row operations.

    Parameters
    ----------
    A : np.ndarray               (n, n)
        Coefficient matrix (MUST be ndarray).
    b : np.ndarray | None        (n, k)
        Optional right-hand side columns.
    tol : float
        A pivot with magnitude below `tol` stops the elimination.

    Returns
    -------
    U      : np.ndarray          (n, n)
        Upper-triangular factor.
    c      : np.ndarray | None   (n, k)
        b after identical row ops (None if b was None).
    perm   : list[int]
        Final row order: row i of U comes from original row perm[i].
    swaps  : int
        Number of row exchanges actually performed.

    Raises
    ------
    SingularMatrixError : a pivot magnitude fell below `tol`.
    """
    U = as_float_matrix(A)
    n, m = U.shape
    if n != m:
        raise NotSquareError("forward elimination", U.shape)

    if b is not None:
        c = as_float_matrix(b, name="b")
        if c.shape[0] != n:
            raise DimensionError(
                f"right-hand side has {c.shape[0]} rows, expected {n}",
                U.shape,
                c.shape,
            )
        rows = working_rows(np.hstack([U, c]))
    else:
        rows = working_rows(U)

    perm = list(range(n))
    swaps = 0

    for i in range(n):
        # The computation is more stable if we pick the largest
        # magnitude in column i, row i and below, as the pivot.
        p = partial_pivot(rows, i, i)
        if p != i:
            swap_rows(rows, i, p)
            perm[i], perm[p] = perm[p], perm[i]
            swaps += 1

        pivot = rows[i][i]
        if abs(pivot) < tol:
            raise SingularMatrixError(
                f"pivot {pivot:.3e} in column {i} is below tolerance {tol:g}; "
                "matrix is singular or the system has no unique solution",
                step=i,
                pivot=float(pivot),
            )

        # Eliminate entries below the pivot
        for k in range(i + 1, n):
            combine_rows(rows, k, i, rows[k][i] / pivot, start=i)

    reduced = stack_rows(rows)
    if b is not None:
        return reduced[:, :n], reduced[:, n:], perm, swaps
    return reduced, None, perm, swaps


def back_substitute(U: np.ndarray, c: np.ndarray, tol: float = EPSILON) -> np.ndarray:
    """
    Parameters
    ----------
    U : (n, n) ndarray
        Upper-triangular matrix (output of forward_eliminate).
    c : (n,) or (n,k) ndarray
        RHS after identical row operations.
    Returns
    -------
    x : ndarray, same shape as c
        Solution(s) of Ux = c, computed from the last row upward.
    Raises
    ------
    SingularMatrixError : if a diagonal entry of U is below `tol`.
    """
    U = np.asarray(U, dtype=float)
    c = np.asarray(c, dtype=float)

    flat = c.ndim == 1
    if flat:
        # (n,)  ->  (n,1)
        c = c[:, None]
    n, k = c.shape
    x = np.zeros((n, k), dtype=float)

    for i in reversed(range(n)):
        pivot = U[i, i]
        if abs(pivot) < tol:
            raise SingularMatrixError(
                f"zero pivot {pivot:.3e} at row {i} during back substitution",
                step=i,
                pivot=float(pivot),
            )
        s = c[i] - U[i, i + 1 :] @ x[i + 1 :]
        x[i] = s / pivot

    return x.ravel() if flat else x


def gaussian_solve(A: np.ndarray, b: np.ndarray, tol: float = EPSILON) -> np.ndarray:
    """
    Solve Ax = b for square A by Gaussian elimination with partial
    pivoting followed by back substitution.

    `b` may be a vector (n,) or a single column (n, 1); x comes back in
    the same shape. Unlike `determinant`, a vanishing pivot is an error
    here: there is no meaningful fallback answer.
    """
    A = as_float_matrix(A)
    n, m = A.shape
    if n != m:
        raise NotSquareError("solve", A.shape)

    b = np.asarray(b, dtype=float)
    flat = b.ndim == 1
    column = b[:, None] if flat else b
    if column.ndim != 2 or column.shape != (n, 1):
        raise DimensionError(
            f"right-hand side must be a single column with {n} rows, "
            f"got shape {b.shape}",
            A.shape,
            column.shape if column.ndim == 2 else (b.size, 1),
        )

    U, c, _perm, _swaps = forward_eliminate(A, column, tol=tol)
    x = back_substitute(U, c, tol=tol)
    return x.ravel() if flat else x


def rref(
    A: np.ndarray, tol: float = EPSILON, return_pivots: bool = False
):
    """
    Reduced row-echelon form of A by Gauss-Jordan elimination.

    The first entry (from the current row downward) whose magnitude
    exceeds `tol` is used as the pivot; no magnitude-based pivoting.

    Parameters
    ----------
    A   : (m,n) ndarray
    tol : float
        Entries at or below `tol` never become pivots. Once every row has
        been visited (or the columns run out at the top of a row) entries
        below `tol` are snapped to 0; a pivot search that walks off the
        last column returns the rows as they stand.
    return_pivots : bool
        Also return the list of pivot column indices.

    Returns
    -------
    R       : (m,n) ndarray  (RREF)
    pivots  : list[int]      pivot column indices (only if return_pivots)
    """
    R = as_float_matrix(A)
    m, n = R.shape
    rows = working_rows(R)
    pivots: List[int] = []

    lead = 0
    for r in range(m):
        if lead >= n:
            break

        # walk right past columns that are zero from row r down
        i = first_nonzero(rows, lead, r, tol)
        while i is None:
            lead += 1
            if lead == n:
                break
            i = first_nonzero(rows, lead, r, tol)
        if i is None:
            # out of pivot columns mid-search: hand back as is, no cleanup
            logger.debug("rref: no pivot columns left at row %d", r)
            R = stack_rows(rows)
            return (R, pivots) if return_pivots else R

        swap_rows(rows, i, r)

        pivot = rows[r][lead]
        if abs(pivot) > tol:
            scale_row(rows, r, pivot)

        # zero out column `lead` in every other row
        for k in range(m):
            if k != r:
                combine_rows(rows, k, r, rows[k][lead])

        pivots.append(lead)
        lead += 1

    # zero out tiny noise
    R = snap_to_zero(stack_rows(rows), tol)
    return (R, pivots) if return_pivots else R
