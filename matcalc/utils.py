# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import numpy as np

from .exceptions import DimensionError

# Threshold for treating a value as zero in pivoting, convergence and
# cleanup. Every algorithm takes `tol=` defaulting to this.
EPSILON: float = 1e-10


def snap_to_zero(A: np.ndarray, tol: float = EPSILON) -> np.ndarray:
    """Set every entry with magnitude below `tol` to exactly 0.0 (in place)."""
    A[np.abs(A) < tol] = 0.0
    return A


def as_float_matrix(A, name: str = "A") -> np.ndarray:
    """Return a float64 copy of `A`, which must be two dimensional."""
    if not isinstance(A, np.ndarray):
        raise TypeError(f"{name} must be a NumPy ndarray")
    if A.ndim != 2:
        raise DimensionError(f"{name} must be 2-D, got {A.ndim}-D")
    return A.astype(float, copy=True)


def random_nonsingular_upper(n, low=-100, high=100, seed=None) -> np.ndarray:
    """
    Build a matrix U that is upper-triangular with random entries
    above the diagonal and only non-zero values on its diagonal

    Returns
    -------
    Matrix with float64 dtype
    """
    rng = np.random.default_rng(seed)
    U = np.triu(rng.uniform(low, high, size=(n, n)))
    # diagonal magnitudes are kept away from zero
    diag = rng.uniform(1.0, max(abs(low), abs(high)), size=n)
    diag *= rng.choice([-1.0, 1.0], size=n)
    U[np.diag_indices(n)] = diag
    return np.asarray(U)


def random_symmetric(n, seed=None) -> np.ndarray:
    """Symmetric matrix with well separated eigenvalues 1, 2, ..., n."""
    rng = np.random.default_rng(seed)
    Q, _ = np.linalg.qr(rng.standard_normal((n, n)))
    A = (Q * np.arange(1.0, n + 1.0)) @ Q.T
    return 0.5 * (A + A.T)
