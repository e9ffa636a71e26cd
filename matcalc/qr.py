# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import logging
from typing import NamedTuple

import numpy as np

from .utils import EPSILON, as_float_matrix

logger = logging.getLogger(__name__)


class QRPair(NamedTuple):
    """Factors of A = QR. Internal to the eigenvalue pipeline."""

    q: np.ndarray
    r: np.ndarray


def gram_schmidt(
    A: np.ndarray, tol: float = EPSILON, modified: bool = False
) -> QRPair:
    """
    Gram-Schmidt orthogonalization (QR decomposition)
    Parameters:
    A : ndarray
        (m, n) input matrix.
    tol : float
        Columns whose orthogonal remainder has norm <= tol are treated as
        linearly dependent: R[j, j] keeps the norm, Q[:, j] stays zero.
    modified : bool
        Project each new direction out of the running vector (modified
        Gram-Schmidt) instead of the original column (classical).
    Returns:
    q : ndarray
        (m, n) matrix with orthonormal (or zero) columns
    r : ndarray
        (n, n) upper-triangular matrix
    """
    A = as_float_matrix(A)
    m, n = A.shape
    Q = np.zeros_like(A)
    R = np.zeros((n, n))

    for j in range(n):
        v = A[:, j].copy()
        for k in range(j):
            R[k, j] = Q[:, k] @ (v if modified else A[:, j])
            v -= R[k, j] * Q[:, k]
        R[j, j] = np.linalg.norm(v)
        if R[j, j] > tol:
            Q[:, j] = v / R[j, j]
        else:
            logger.debug("gram_schmidt: column %d is numerically dependent", j)

    return QRPair(Q, R)


def random_nonsingular_qr(n, seed=None) -> np.ndarray:
    """
    QR trick (random orthogonal × random non-zero scale)

    Returns
    -------
    Matrix with float64 dtype
    """
    rng = np.random.default_rng(seed)
    A = rng.standard_normal((n, n))
    Q, _R = gram_schmidt(A, modified=True)  # Q is orthogonal, det ≠ 0
    scales = rng.uniform(0.5, 10.0, size=n)  # strictly non-zero
    return np.asarray(Q * scales)  # broadcast scales into columns
