# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import math

import numpy as np
import pytest

from matcalc.elimination import gaussian_solve
from matcalc.exceptions import DimensionError, NotSquareError, SingularMatrixError
from matcalc.matrix_functions import determinant, matmul, trace


def test_determinants():
    rng = np.random.default_rng(0)
    A = rng.standard_normal((30, 30))
    our_det = determinant(A)
    numpy_det = np.linalg.det(A)
    assert math.isclose(our_det, numpy_det, rel_tol=1e-8)


def test_determinant_singular_is_zero():
    A = np.array([[4.0, 3.0, 2.0], [3.0, 2.0, 1.0], [1.0, 2.0, 3.0]])
    assert determinant(A) == 0.0


def test_determinant_identity():
    assert determinant(np.eye(5)) == 1.0


def test_determinant_row_swap_flips_sign():
    assert determinant(np.array([[0.0, 1.0], [1.0, 0.0]])) == -1.0


def test_determinant_small():
    assert math.isclose(determinant(np.array([[1.0, 2.0], [3.0, 4.0]])), -2.0)


def test_determinant_tolerance_override():
    A = np.array([[1e-12, 0.0], [0.0, 1.0]])
    assert determinant(A) == 0.0
    assert math.isclose(determinant(A, tol=1e-15), 1e-12)


def test_determinant_zero_where_solve_fails():
    A = np.array([[1.0, 2.0], [2.0, 4.0]])
    assert determinant(A) == 0.0
    with pytest.raises(SingularMatrixError):
        gaussian_solve(A, np.array([[1.0], [1.0]]))


def test_determinant_non_square_raises():
    with pytest.raises(NotSquareError):
        determinant(np.ones((2, 3)))


def test_determinant_does_not_touch_input():
    A = np.array([[0.0, 2.0], [3.0, 4.0]])
    before = A.copy()
    determinant(A)
    np.testing.assert_array_equal(A, before)


def test_trace():
    A = np.array([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0], [7.0, 8.0, 9.0]])
    assert trace(A) == 15.0


def test_trace_non_square_raises():
    with pytest.raises(NotSquareError):
        trace(np.ones((3, 2)))


def test_matmul_matches_numpy():
    rng = np.random.default_rng(1)
    A = rng.standard_normal((4, 6))
    B = rng.standard_normal((6, 3))
    np.testing.assert_allclose(matmul(A, B), A @ B, rtol=1e-12, atol=1e-12)


def test_matmul_reduction_order_is_fixed():
    rng = np.random.default_rng(2)
    A = rng.standard_normal((5, 7))
    B = rng.standard_normal((7, 4))

    # reference: row-major cells, inner sum in ascending k
    expected = np.zeros((5, 4))
    for i in range(5):
        for j in range(4):
            total = 0.0
            for k in range(7):
                total += float(A[i, k]) * float(B[k, j])
            expected[i, j] = total

    np.testing.assert_array_equal(matmul(A, B), expected)


def test_matmul_identity_is_exact():
    rng = np.random.default_rng(3)
    A = rng.standard_normal((3, 4))
    np.testing.assert_array_equal(matmul(A, np.eye(4)), A)
    np.testing.assert_array_equal(matmul(np.eye(3), A), A)


def test_matmul_inner_mismatch_raises():
    with pytest.raises(DimensionError):
        matmul(np.ones((2, 3)), np.ones((2, 3)))
