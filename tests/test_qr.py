# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import logging

import numpy as np
import pytest

from matcalc.qr import QRPair, gram_schmidt, random_nonsingular_qr

TEST_ITERATIONS = 20
logger = logging.getLogger(__name__)


@pytest.mark.parametrize("modified", [False, True])
def test_reconstruction_qr(modified):
    rng = np.random.default_rng(0)
    A = rng.standard_normal((8, 5))
    Q, R = gram_schmidt(A, modified=modified)
    assert Q.shape == (8, 5)
    assert R.shape == (5, 5)
    assert np.allclose(Q @ R, A, atol=1e-12)
    # strictly upper-triangular R, exactly
    np.testing.assert_array_equal(np.tril(R, -1), 0.0)


def test_orthogonality_classical_qr():
    rng = np.random.default_rng(1)
    V = rng.standard_normal((100, 10))
    Q, _ = gram_schmidt(V)
    identity = Q.T @ Q
    assert np.allclose(identity, np.eye(10), atol=1e-10)


def test_orthogonality_modified_qr():
    rng = np.random.default_rng(2)
    V = rng.standard_normal((100, 10))
    Q, _ = gram_schmidt(V, modified=True)
    identity = Q.T @ Q
    assert np.allclose(identity, np.eye(10), atol=1e-10)


def test_classical_projects_against_original_column():
    # Läuchli matrix: classical Gram-Schmidt takes R[k, j] from the original
    # column and loses orthogonality; the modified form does not
    eps = 1e-8
    A = np.array(
        [
            [1.0, 1.0, 1.0],
            [eps, 0.0, 0.0],
            [0.0, eps, 0.0],
            [0.0, 0.0, eps],
        ]
    )
    Q_cgs, R_cgs = gram_schmidt(A)
    Q_mgs, _ = gram_schmidt(A, modified=True)

    cgs_err = np.max(np.abs(Q_cgs.T @ Q_cgs - np.eye(3)))
    mgs_err = np.max(np.abs(Q_mgs.T @ Q_mgs - np.eye(3)))
    logger.debug(f"orthogonality error: classical {cgs_err}, modified {mgs_err}")
    assert cgs_err > 0.1
    assert mgs_err < 1e-6
    # the projection of column 2 onto q1 uses A[:, 2], which is orthogonal to it
    assert R_cgs[1, 2] == 0.0


def test_qr_returns_named_pair():
    pair = gram_schmidt(np.eye(3))
    assert isinstance(pair, QRPair)
    np.testing.assert_array_equal(pair.q, np.eye(3))
    np.testing.assert_array_equal(pair.r, np.eye(3))


def test_dependent_column_leaves_zero_q_column():
    A = np.array([[1.0, 2.0], [2.0, 4.0], [3.0, 6.0]])
    Q, R = gram_schmidt(A)
    np.testing.assert_array_equal(Q[:, 1], 0.0)
    assert abs(R[1, 1]) <= 1e-10
    assert np.isclose(R[0, 1], 2.0 * np.sqrt(14.0))
    # the factorisation still reproduces A
    assert np.allclose(Q @ R, A, atol=1e-10)


def test_zero_matrix():
    Q, R = gram_schmidt(np.zeros((3, 3)))
    np.testing.assert_array_equal(Q, 0.0)
    np.testing.assert_array_equal(R, 0.0)


def test_does_not_touch_input():
    rng = np.random.default_rng(3)
    A = rng.standard_normal((4, 4))
    before = A.copy()
    gram_schmidt(A)
    np.testing.assert_array_equal(A, before)


def test_random_nonsingular_qr():
    for i in range(TEST_ITERATIONS):
        A = random_nonsingular_qr(10, seed=i)
        logger.debug(f"\nRandom Nonsingular:\n{A}\n")
        assert np.linalg.matrix_rank(A) == 10
