# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Dense real matrix with value semantics.

`Matrix` owns a rows x cols float64 buffer. Every operation except `set`
leaves the receiver untouched and hands back a newly allocated result;
the heavy lifting is done by the ndarray-level functions in the sibling
modules.
"""

import numbers
from collections.abc import Iterable
from typing import Iterator, List, Sequence, Tuple, Union

import numpy as np

from .eigen import MAX_ITERATIONS, qr_algorithm
from .elimination import gaussian_solve, rref
from .exceptions import DimensionError, MatrixIndexError
from .matrix_functions import determinant, matmul, trace
from .utils import EPSILON


def _check_dimension(value, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise DimensionError(f"{name} must be an integer, got {value!r}")
    if value <= 0:
        raise DimensionError(f"{name} must be positive, got {value}")
    return int(value)


def _rectangular(data) -> np.ndarray:
    """Validate row data and return it as a fresh float64 array."""
    if isinstance(data, np.ndarray):
        if data.ndim != 2:
            raise DimensionError(f"matrix data must be 2-D, got {data.ndim}-D")
        rows = list(data)
    else:
        if isinstance(data, (str, bytes)) or not isinstance(data, Iterable):
            raise TypeError(
                f"matrix data must be a sequence of rows, got {type(data).__name__}; "
                "use Matrix(rows, cols) for a zero matrix"
            )
        rows = []
        for i, row in enumerate(data):
            if isinstance(row, (str, bytes)) or not isinstance(row, Iterable):
                raise TypeError(
                    f"row {i} must be a sequence of numbers, got {type(row).__name__}"
                )
            rows.append(list(row))

    if len(rows) == 0 or len(rows[0]) == 0:
        raise DimensionError("matrix data cannot be empty")
    cols = len(rows[0])
    for i, row in enumerate(rows):
        if len(row) != cols:
            raise DimensionError(
                f"all rows must have the same length: row 0 has {cols}, "
                f"row {i} has {len(row)}"
            )

    try:
        return np.array(rows, dtype=float)
    except (TypeError, ValueError) as e:
        raise TypeError(f"matrix entries must be real numbers: {e}") from e


class Matrix:
    """
    A dense rows x cols matrix of real numbers.

    ``Matrix(rows, cols)`` builds a zero matrix; ``Matrix(data)`` copies a
    rectangular sequence of rows (or a 2-D ndarray).

    >>> A = Matrix([[1, 2], [3, 4]])
    >>> A.determinant()
    -2.0
    >>> A.multiply(Matrix.identity(2)) == A
    True
    """

    __slots__ = ("_data",)

    def __init__(self, data, cols=None):
        if cols is not None:
            rows = _check_dimension(data, "rows")
            cols = _check_dimension(cols, "cols")
            self._data = np.zeros((rows, cols))
        else:
            self._data = _rectangular(data)

    @classmethod
    def _wrap(cls, array: np.ndarray) -> "Matrix":
        """Adopt `array` as the buffer of a new matrix without copying."""
        out = cls.__new__(cls)
        out._data = array
        return out

    # ----- factories ----------------------------------------------------

    @classmethod
    def identity(cls, n: int) -> "Matrix":
        return cls._wrap(np.eye(_check_dimension(n, "n")))

    @classmethod
    def zeros(cls, rows: int, cols: int) -> "Matrix":
        return cls(rows, cols)

    @classmethod
    def from_numpy(cls, array: np.ndarray) -> "Matrix":
        return cls(np.asarray(array))

    # ----- shape & access -----------------------------------------------

    @property
    def rows(self) -> int:
        return self._data.shape[0]

    @property
    def cols(self) -> int:
        return self._data.shape[1]

    @property
    def shape(self) -> Tuple[int, int]:
        return self._data.shape

    def _check_index(self, row: int, col: int) -> None:
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise MatrixIndexError(row, col, self.shape)

    def get(self, row: int, col: int) -> float:
        self._check_index(row, col)
        return float(self._data[row, col])

    def set(self, row: int, col: int, value: float) -> None:
        self._check_index(row, col)
        self._data[row, col] = value

    # ----- arithmetic ---------------------------------------------------

    def _check_same_shape(self, other: "Matrix", operation: str) -> None:
        if not isinstance(other, Matrix):
            raise TypeError(f"other must be a Matrix, got {type(other).__name__}")
        if self.shape != other.shape:
            raise DimensionError(
                f"cannot {operation} {self.rows}x{self.cols} and "
                f"{other.rows}x{other.cols}: shapes differ",
                self.shape,
                other.shape,
            )

    def add(self, other: "Matrix") -> "Matrix":
        self._check_same_shape(other, "add")
        return Matrix._wrap(self._data + other._data)

    def subtract(self, other: "Matrix") -> "Matrix":
        self._check_same_shape(other, "subtract")
        return Matrix._wrap(self._data - other._data)

    def multiply(self, other: "Matrix") -> "Matrix":
        if not isinstance(other, Matrix):
            raise TypeError(f"other must be a Matrix, got {type(other).__name__}")
        return Matrix._wrap(matmul(self._data, other._data))

    def scale(self, scalar: float) -> "Matrix":
        return Matrix._wrap(self._data * float(scalar))

    def transpose(self) -> "Matrix":
        return Matrix._wrap(self._data.T.copy())

    def copy(self) -> "Matrix":
        return Matrix._wrap(self._data.copy())

    # ----- algorithms ---------------------------------------------------

    def rref(self, tol: float = EPSILON) -> "Matrix":
        """Reduced row-echelon form (Gauss-Jordan elimination)."""
        return Matrix._wrap(rref(self._data, tol=tol))

    def determinant(self, tol: float = EPSILON) -> float:
        """Determinant by partial-pivoted elimination; 0.0 when singular."""
        return determinant(self._data, tol=tol)

    def trace(self) -> float:
        return trace(self._data)

    def solve(self, b: "Matrix", tol: float = EPSILON) -> "Matrix":
        """
        Solve self @ x = b for a single-column `b`; returns x as a column.

        Raises SingularMatrixError when elimination meets a near-zero pivot.
        """
        if not isinstance(b, Matrix):
            raise TypeError(f"b must be a Matrix, got {type(b).__name__}")
        return Matrix._wrap(gaussian_solve(self._data, b._data, tol=tol))

    def eigenvalues(
        self, max_iter: int = MAX_ITERATIONS, tol: float = EPSILON
    ) -> List[float]:
        """
        Eigenvalue estimates from the unshifted QR algorithm, in diagonal
        order. Returned even if the iteration cap is hit first.
        """
        eigs = qr_algorithm(self._data, max_iter=max_iter, tol=tol)
        return [float(v) for v in eigs]

    # ----- presentation -------------------------------------------------

    def elements(self) -> Iterator[float]:
        """All entries in row-major order."""
        for value in self._data.flat:
            yield float(value)

    def to_list(self) -> List[List[float]]:
        return self._data.tolist()

    def to_numpy(self) -> np.ndarray:
        return self._data.copy()

    def allclose(self, other: "Matrix", atol: float = 1e-9) -> bool:
        return self.shape == other.shape and bool(
            np.allclose(self._data, other._data, rtol=0.0, atol=atol)
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(
            np.array_equal(self._data, other._data)
        )

    __hash__ = None

    def __add__(self, other: "Matrix") -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: "Matrix") -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.subtract(other)

    def __matmul__(self, other: "Matrix") -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.multiply(other)

    def __mul__(self, scalar: Union[int, float]) -> "Matrix":
        if isinstance(scalar, bool) or not isinstance(scalar, numbers.Real):
            return NotImplemented
        return self.scale(scalar)

    __rmul__ = __mul__

    def __repr__(self) -> str:
        return f"Matrix({self.to_list()!r})"


def column(values: Sequence[float]) -> Matrix:
    """Build an n x 1 column matrix from a flat sequence."""
    return Matrix([[v] for v in values])
