################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""
Variable-size rectangular matrix

The matrix is built from a list of columns that must all have the same
height. Entries are stored column-major, element (r, c) at
``data[c * height + r]``, matching the fixed-size modules.

Operations return a new matrix unless an ``out`` matrix of the right shape
is supplied, in which case the result is written into it. The result is
computed in full before ``out`` is written, so ``out`` may be an operand.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np
from numpy.typing import ArrayLike
from numpy.typing import NDArray

from oasis_math.config.math_params import EPSILON
from oasis_math.math_utils.approx import seq_approx_relative
from oasis_math.math_utils.approx import seq_exact
from oasis_math.math_utils.errors import MatrixSizeError
from oasis_math.math_utils.errors import PartialMatrixError


class DenseMatrix:
    """Column-major matrix of arbitrary width and height."""

    def __init__(self, *columns: Sequence[float]) -> None:
        """Create a matrix from its columns.

        Args:
            columns: Columns of the matrix, each of the same length

        Raises:
            PartialMatrixError: If the columns have different lengths
        """
        width: int = len(columns)
        height: int = len(columns[0]) if columns else 0
        for column in columns:
            if len(column) != height:
                raise PartialMatrixError()

        self._width: int = width
        self._height: int = height
        self._data: list[float] = [
            float(value) for column in columns for value in column
        ]

    @classmethod
    def _accepts(cls, width: int, height: int) -> bool:
        """Return True when ``cls`` can represent a ``width`` x ``height`` result."""
        return True

    @classmethod
    def from_array(cls, array: ArrayLike) -> DenseMatrix:
        """Create a matrix from a 2-D array indexed ``[row, col]``.

        Raises:
            MatrixSizeError: If the array is not two-dimensional
        """
        values: NDArray[np.float64] = np.asarray(array, dtype=np.float64)
        if values.ndim != 2:
            raise MatrixSizeError("array must be two-dimensional")
        return cls(*(values[:, col].tolist() for col in range(values.shape[1])))

    @property
    def width(self) -> int:
        """Number of columns."""
        return self._width

    @property
    def height(self) -> int:
        """Number of rows."""
        return self._height

    @property
    def data(self) -> list[float]:
        """Copy of the entries in column-major order."""
        return list(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(width={self._width}, height={self._height}, "
            f"data={self._data})"
        )

    def get(self, row: int, col: int) -> float:
        """Return the entry at ``row``, ``col``.

        Raises:
            IndexError: If the position is outside the matrix
        """
        if not (0 <= row < self._height and 0 <= col < self._width):
            raise IndexError(
                f"({row}, {col}) is outside a {self._height}x{self._width} matrix"
            )
        return self._data[col * self._height + row]

    def as_array(self) -> NDArray[np.float64]:
        """Return a ``(height, width)`` array indexed ``[row, col]``."""
        return np.asarray(self._data, dtype=np.float64).reshape(
            (self._height, self._width), order="F"
        )

    def _emit(
        self, width: int, height: int, data: list[float], out: DenseMatrix | None
    ) -> DenseMatrix:
        """Wrap a computed result, writing it into ``out`` when given."""
        if out is not None:
            if out.width != width or out.height != height:
                raise MatrixSizeError("out has the wrong dimensions")
            out._data[:] = data
            return out

        matrix_type: type[DenseMatrix] = (
            type(self) if type(self)._accepts(width, height) else DenseMatrix
        )
        return matrix_type(
            *(data[col * height : (col + 1) * height] for col in range(width))
        )

    def _require_same_shape(self, other: DenseMatrix) -> None:
        if self._width != other.width or self._height != other.height:
            raise MatrixSizeError("matrices must have the same dimensions")

    def _same_shape(self, other: DenseMatrix) -> bool:
        return self._width == other.width and self._height == other.height

    def add(self, other: DenseMatrix, out: DenseMatrix | None = None) -> DenseMatrix:
        """Return ``self + other``."""
        self._require_same_shape(other)
        data: list[float] = [a + b for a, b in zip(self._data, other._data)]
        return self._emit(self._width, self._height, data, out)

    def subtract(
        self, other: DenseMatrix, out: DenseMatrix | None = None
    ) -> DenseMatrix:
        """Return ``self - other``."""
        self._require_same_shape(other)
        data: list[float] = [a - b for a, b in zip(self._data, other._data)]
        return self._emit(self._width, self._height, data, out)

    def multiply(
        self, other: DenseMatrix, out: DenseMatrix | None = None
    ) -> DenseMatrix:
        """Return the matrix product ``self @ other``.

        Raises:
            MatrixSizeError: If ``self.width`` differs from ``other.height``
        """
        if self._width != other.height:
            raise MatrixSizeError("inner dimensions must agree")

        n: int = self._height
        m: int = self._width
        p: int = other.width
        data: list[float] = [0.0] * (n * p)
        for col in range(p):
            for row in range(n):
                data[col * n + row] = math.fsum(
                    self._data[k * n + row] * other._data[col * m + k] for k in range(m)
                )
        return self._emit(p, n, data, out)

    def multiply_scalar(
        self, scalar: float, out: DenseMatrix | None = None
    ) -> DenseMatrix:
        """Multiply every entry by ``scalar``."""
        data: list[float] = [value * scalar for value in self._data]
        return self._emit(self._width, self._height, data, out)

    def multiply_scalar_and_add(
        self, other: DenseMatrix, scalar: float, out: DenseMatrix | None = None
    ) -> DenseMatrix:
        """Return ``self + other * scalar``."""
        self._require_same_shape(other)
        data: list[float] = [a + b * scalar for a, b in zip(self._data, other._data)]
        return self._emit(self._width, self._height, data, out)

    def transpose(self, out: DenseMatrix | None = None) -> DenseMatrix:
        """Return the transpose."""
        height: int = self._height
        width: int = self._width
        data: list[float] = [
            self._data[col * height + row]
            for row in range(height)
            for col in range(width)
        ]
        return self._emit(height, width, data, out)

    def frob(self) -> float:
        """Return the Frobenius norm."""
        return math.hypot(*self._data)

    def clone(self) -> DenseMatrix:
        """Return an independent copy."""
        return self._emit(self._width, self._height, list(self._data), None)

    def copy(self, other: DenseMatrix) -> DenseMatrix:
        """Overwrite this matrix with the entries of ``other``.

        Raises:
            MatrixSizeError: If the matrices have different dimensions
        """
        self._require_same_shape(other)
        self._data[:] = other._data
        return self

    def equals(self, other: DenseMatrix, eps: float = EPSILON) -> bool:
        """Return True when the matrices have the same shape and close entries."""
        return self._same_shape(other) and seq_approx_relative(
            self._data, other._data, eps
        )

    def exact_equals(self, other: DenseMatrix) -> bool:
        """Return True when the matrices have the same shape and entries."""
        return self._same_shape(other) and seq_exact(self._data, other._data)
