# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
matcalc
=======

A small dense-matrix calculator core for introductory linear algebra:
arithmetic, row reduction, determinant, trace, linear solving and
eigenvalue estimation.

Public API
~~~~~~~~~~
- Container
    - `Matrix` (add, subtract, multiply, scale, transpose, copy,
      rref, determinant, trace, solve, eigenvalues, identity)
    - `column`
- Array-level algorithms
    - `rref`, `determinant`, `trace`, `matmul`
    - `gaussian_solve`, `forward_eliminate`, `back_substitute`
    - `qr_algorithm`
- Errors
    - `MatrixError`, `DimensionError`, `NotSquareError`,
      `MatrixIndexError`, `SingularMatrixError`

The QR factorisation used by the eigenvalue iterator lives in
`matcalc.qr` and is **not** considered part of the stable interface.

Example
-------
>>> import matcalc as mc
>>> A = mc.Matrix([[2, 1, -1], [-3, -1, 2], [-2, 1, 2]])
>>> x = A.solve(mc.column([8, -11, -3]))
>>> A.multiply(x).allclose(mc.column([8, -11, -3]))
True
"""

from importlib.metadata import version as _pkg_version

from .eigen import qr_algorithm
from .elimination import (
    back_substitute,
    forward_eliminate,
    gaussian_solve,
    rref,
)
from .exceptions import (
    DimensionError,
    MatrixError,
    MatrixIndexError,
    NotSquareError,
    SingularMatrixError,
)
from .matrix import Matrix, column
from .matrix_functions import determinant, matmul, trace
from .utils import EPSILON

__all__ = [
    "Matrix",
    "column",
    "EPSILON",
    "rref",
    "determinant",
    "trace",
    "matmul",
    "gaussian_solve",
    "forward_eliminate",
    "back_substitute",
    "qr_algorithm",
    "MatrixError",
    "DimensionError",
    "NotSquareError",
    "MatrixIndexError",
    "SingularMatrixError",
]

# ---------------------------------------------------------------------
# Version string (helps “pip show matcalc”, Sphinx, etc.)
# ---------------------------------------------------------------------
try:  # installed via pip / build backend
    __version__ = _pkg_version(__name__)
except Exception:  # running from a checkout
    __version__ = "0.0.0.dev0"

# ---------------------------------------------------------------------
# Library logging stays silent unless the application configures it.
# ---------------------------------------------------------------------
import logging as _logging

_logging.getLogger(__name__).addHandler(_logging.NullHandler())
