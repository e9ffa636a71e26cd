# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import logging

import numpy as np

from .exceptions import NotSquareError
from .matrix_functions import matmul
from .qr import gram_schmidt
from .utils import EPSILON, as_float_matrix

logger = logging.getLogger(__name__)

MAX_ITERATIONS = 1000


def off_diagonal_converged(A: np.ndarray, tol: float = EPSILON) -> bool:
    """True when every off-diagonal entry has magnitude <= tol."""
    off = A - np.diag(np.diag(A))
    return bool(np.all(np.abs(off) <= tol))


def qr_algorithm(
    A: np.ndarray,
    max_iter: int = MAX_ITERATIONS,
    tol: float = EPSILON,
    full_output: bool = False,
):
    """
    Estimate all eigenvalues of a square matrix with the unshifted QR
    algorithm.

    Repeats A_{k+1} = R_k Q_k, where A_k = Q_k R_k is a classical
    Gram-Schmidt factorisation, until every off-diagonal entry is within
    `tol` or `max_iter` iterations have run. The diagonal is returned in
    row order either way, so without convergence the values are only
    estimates.

    Works for matrices whose eigenvalues are real and distinct in
    magnitude (e.g. symmetric ones). Complex-conjugate pairs leave a 2x2
    block that never vanishes; they are not detected.

    Parameters
    ----------
    A : (n,n) ndarray
        Real square matrix.
    max_iter : int
        Maximum number of QR steps.
    tol : float
        Convergence tolerance on the off-diagonal entries.
    full_output : bool
        If True, also return (iterations, converged).

    Returns
    -------
    eigenvalues : (n,) ndarray
        Final diagonal entries.
    (iters, converged) : optional
        Number of QR steps taken and whether the off-diagonal vanished.
    """
    Ak = as_float_matrix(A)
    m, n = Ak.shape
    if m != n:
        raise NotSquareError("eigenvalues", Ak.shape)

    converged = False
    iters = 0
    for iters in range(1, max_iter + 1):
        Q, R = gram_schmidt(Ak, tol=tol)
        Ak = matmul(R, Q)
        if off_diagonal_converged(Ak, tol):
            converged = True
            break

    if converged:
        logger.debug("qr_algorithm: converged after %d iterations", iters)
    else:
        logger.debug(
            "qr_algorithm: no convergence in %d iterations, returning estimates",
            max_iter,
        )

    eigenvalues = np.diag(Ak).copy()
    return (eigenvalues, iters, converged) if full_output else eigenvalues
