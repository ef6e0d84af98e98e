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
Variable-size square matrix

Inversion uses Gauss-Jordan elimination on the matrix augmented with the
identity. The determinant, minors and cofactors use recursive Laplace
expansion, which is exponential in the dimension and intended for small
matrices.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import cast

from oasis_math.linalg.dense_matrix import DenseMatrix
from oasis_math.math_utils.errors import MatrixSizeError
from oasis_math.math_utils.errors import SingularMatrixError


_LOG: logging.Logger = logging.getLogger(__name__)


class SquareMatrix(DenseMatrix):
    """Column-major matrix whose width equals its height."""

    def __init__(self, *columns: Sequence[float]) -> None:
        """Create a square matrix from its columns.

        Raises:
            PartialMatrixError: If the columns have different lengths
            MatrixSizeError: If the number of columns differs from their length
        """
        super().__init__(*columns)
        if self.width != self.height:
            raise MatrixSizeError("A square matrix needs as many columns as rows")

    @classmethod
    def _accepts(cls, width: int, height: int) -> bool:
        return width == height

    @classmethod
    def identity(cls, size: int) -> SquareMatrix:
        """Return the ``size`` x ``size`` identity matrix."""
        return cls(
            *(
                [1.0 if row == col else 0.0 for row in range(size)]
                for col in range(size)
            )
        )

    def _columns(self) -> list[list[float]]:
        n: int = self.width
        return [self._data[col * n : (col + 1) * n] for col in range(n)]

    def submatrix(self, row: int, col: int) -> SquareMatrix:
        """Return a copy without the given row and column."""
        return SquareMatrix(
            *(
                [value for r, value in enumerate(column) if r != row]
                for c, column in enumerate(self._columns())
                if c != col
            )
        )

    def determinant(self) -> float:
        """Return the determinant by Laplace expansion along the first column.

        Raises:
            MatrixSizeError: If the matrix is empty
        """
        n: int = self.width
        if n == 0:
            raise MatrixSizeError("An empty matrix has no determinant")
        if n == 1:
            return self._data[0]

        det: float = 0.0
        for row in range(n):
            entry: float = self._data[row]
            if entry == 0.0:
                continue
            sign: float = -1.0 if row % 2 else 1.0
            det += entry * sign * self.minor(row, 0)
        return det

    def minor(self, row: int, col: int) -> float:
        """Return the determinant of ``submatrix(row, col)``."""
        return self.submatrix(row, col).determinant()

    def cofactor(self) -> SquareMatrix:
        """Return the matrix of signed minors."""
        n: int = self.width
        return SquareMatrix(
            *(
                [
                    (-1.0 if (row + col) % 2 else 1.0) * self.minor(row, col)
                    for row in range(n)
                ]
                for col in range(n)
            )
        )

    def adjoint(self) -> SquareMatrix:
        """Return the adjugate, the transpose of the cofactor matrix."""
        return cast(SquareMatrix, self.cofactor().transpose())

    def invert(self, out: SquareMatrix | None = None) -> SquareMatrix:
        """Invert by Gauss-Jordan elimination with partial pivoting.

        For each pivot column, a zero diagonal entry is swapped with the first
        row below holding a non-zero entry in that column. The pivot column is
        then eliminated from every other row, applying each row operation to
        the working copy and to the augmented identity in lockstep. Finally
        every row is divided by its pivot, leaving the inverse in the
        augmented matrix.

        Args:
            out: Optional destination of the same size, may be ``self``

        Returns:
            The inverse

        Raises:
            SingularMatrixError: If a pivot column has no non-zero entry on or
                below the diagonal
        """
        n: int = self.width
        work: list[float] = list(self._data)
        augmented: list[float] = SquareMatrix.identity(n).data

        for i in range(n):
            if work[i * n + i] == 0.0:
                for candidate in range(i + 1, n):
                    if work[i * n + candidate] != 0.0:
                        _LOG.debug("Swapping rows %d and %d for pivot", i, candidate)
                        _swap_rows(work, n, i, candidate)
                        _swap_rows(augmented, n, i, candidate)
                        break

                if work[i * n + i] == 0.0:
                    _LOG.debug("No non-zero pivot in column %d", i)
                    raise SingularMatrixError()

            pivot: float = work[i * n + i]
            for row in range(n):
                if row == i:
                    continue
                factor: float = work[i * n + row] / pivot
                if factor == 0.0:
                    continue
                for col in range(n):
                    work[col * n + row] -= factor * work[col * n + i]
                    augmented[col * n + row] -= factor * augmented[col * n + i]

        for row in range(n):
            diagonal: float = work[row * n + row]
            for col in range(n):
                augmented[col * n + row] /= diagonal

        return cast(SquareMatrix, self._emit(n, n, augmented, out))


def _swap_rows(data: list[float], n: int, a: int, b: int) -> None:
    """Swap two rows of a column-major ``n`` x ``n`` matrix in place."""
    for col in range(n):
        data[col * n + a], data[col * n + b] = data[col * n + b], data[col * n + a]
