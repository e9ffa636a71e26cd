#!/usr/bin/python3
# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Accuracy and timing report for the core algorithms against NumPy.
"""

import platform
import time

import numpy as np
import pandas as pd

from .eigen import qr_algorithm
from .elimination import gaussian_solve
from .matrix_functions import determinant
from .qr import random_nonsingular_qr
from .utils import random_symmetric

REPEATS = 5  # best of 5 runs leads to stable numbers
SIZES = (4, 8, 16)
COLUMNS = ["kernel", "size", "sec", "sec/NumPy", "error"]


def wall(f, *args, **kwargs):
    t0 = time.perf_counter()
    f(*args, **kwargs)
    return time.perf_counter() - t0


def best_of(repeats, f, *args, **kwargs):
    return min(wall(f, *args, **kwargs) for _ in range(repeats))


def run_benchmark(sizes=SIZES, repeats=REPEATS, seed=0) -> pd.DataFrame:
    """
    Time `gaussian_solve`, `determinant` and `qr_algorithm` next to their
    NumPy counterparts on n x n inputs.

    error is the infinity-norm residual for GE, the relative difference
    for DET and the largest eigenvalue difference for QR-EIG.
    """
    rng = np.random.default_rng(seed)
    records = []
    for n in sizes:
        A = random_nonsingular_qr(n, seed=rng.integers(2**32))
        b = rng.standard_normal((n, 1))

        # Gaussian elimination
        t_np = best_of(repeats, np.linalg.solve, A, b)
        t_ge = best_of(repeats, gaussian_solve, A, b)
        x = gaussian_solve(A, b)
        r_ge = float(np.linalg.norm(A @ x - b, np.inf))
        records.append(("GE", f"{n}x{n}", t_ge, t_ge / t_np, r_ge))

        # Determinant
        t_np = best_of(repeats, np.linalg.det, A)
        t_det = best_of(repeats, determinant, A)
        d_np = np.linalg.det(A)
        d_err = abs(determinant(A) - d_np) / max(1.0, abs(d_np))
        records.append(("DET", f"{n}x{n}", t_det, t_det / t_np, d_err))

        # ---------- unshifted QR iteration (symmetric input) ------------
        S = random_symmetric(n, seed=rng.integers(2**32))
        t_np = best_of(repeats, np.linalg.eigvalsh, S)
        t_eig = best_of(repeats, qr_algorithm, S)
        ours = np.sort(qr_algorithm(S))
        e_err = float(np.max(np.abs(ours - np.linalg.eigvalsh(S))))
        records.append(("QR-EIG", f"{n}x{n}", t_eig, t_eig / t_np, e_err))

    return pd.DataFrame(records, columns=COLUMNS)


def main():
    df = run_benchmark(sizes=SIZES, repeats=REPEATS)
    print(f"# {platform.python_implementation()} {platform.python_version()}, "
          f"NumPy {np.__version__}")
    print(df.to_string(index=False))
    df.to_csv("bench_results.csv", index=False)


if __name__ == "__main__":
    main()
