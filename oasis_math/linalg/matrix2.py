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
2x2 matrix operations

Matrices are column-major lists of four floats. Element (r, c) is stored at
``data[c * 2 + r]``, so ``[a, b, c, d]`` is the matrix

    | a  c |
    | b  d |

Every operation that produces a matrix takes an optional ``out`` destination.
When ``out`` is omitted a new list is allocated. ``out`` may alias an operand:
all operand reads happen before ``out`` is written.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray

from oasis_math.config.math_params import EPSILON
from oasis_math.math_utils.approx import seq_approx_relative
from oasis_math.math_utils.approx import seq_exact
from oasis_math.math_utils.errors import SingularMatrixError
from oasis_math.math_utils.validation import matrix_out
from oasis_math.math_utils.validation import require_matrix_size
from oasis_math.math_utils.validation import require_vector_size


Matrix2 = list[float]

# Number of entries in a 2x2 matrix
SIZE: int = 4


def create() -> Matrix2:
    """Return a zero-filled 2x2 matrix."""
    return [0.0] * SIZE


def from_values(
    c0r0: float,
    c0r1: float,
    c1r0: float,
    c1r1: float,
    out: Matrix2 | None = None,
) -> Matrix2:
    """Build a matrix from its entries in column-major order."""
    out = matrix_out(out, SIZE)
    out[:] = [c0r0, c0r1, c1r0, c1r1]
    return out


def identity(out: Matrix2 | None = None) -> Matrix2:
    """Reset a matrix to identity."""
    return from_values(1.0, 0.0, 0.0, 1.0, out)


def copy(matrix: Sequence[float], out: Matrix2 | None = None) -> Matrix2:
    """Copy a matrix into ``out``."""
    require_matrix_size(matrix, SIZE, "matrix")
    return from_values(matrix[0], matrix[1], matrix[2], matrix[3], out)


def from_rotation(radians: float, out: Matrix2 | None = None) -> Matrix2:
    """Create a counter-clockwise rotation by ``radians``."""
    s: float = math.sin(radians)
    c: float = math.cos(radians)
    return from_values(c, s, -s, c, out)


def from_scaling(vector: Sequence[float], out: Matrix2 | None = None) -> Matrix2:
    """Create a scaling by the given 2-vector."""
    require_vector_size(vector, 2, "vector")
    return from_values(vector[0], 0.0, 0.0, vector[1], out)


def add(
    a: Sequence[float], b: Sequence[float], out: Matrix2 | None = None
) -> Matrix2:
    """Add two matrices."""
    require_matrix_size(a, SIZE, "a")
    require_matrix_size(b, SIZE, "b")
    return from_values(a[0] + b[0], a[1] + b[1], a[2] + b[2], a[3] + b[3], out)


def subtract(
    a: Sequence[float], b: Sequence[float], out: Matrix2 | None = None
) -> Matrix2:
    """Subtract ``b`` from ``a``."""
    require_matrix_size(a, SIZE, "a")
    require_matrix_size(b, SIZE, "b")
    return from_values(a[0] - b[0], a[1] - b[1], a[2] - b[2], a[3] - b[3], out)


def multiply(
    a: Sequence[float], b: Sequence[float], out: Matrix2 | None = None
) -> Matrix2:
    """Return the product ``a @ b``."""
    require_matrix_size(a, SIZE, "a")
    require_matrix_size(b, SIZE, "b")
    a0: float = a[0]
    a1: float = a[1]
    a2: float = a[2]
    a3: float = a[3]
    b0: float = b[0]
    b1: float = b[1]
    b2: float = b[2]
    b3: float = b[3]
    return from_values(
        a0 * b0 + a2 * b1,
        a1 * b0 + a3 * b1,
        a0 * b2 + a2 * b3,
        a1 * b2 + a3 * b3,
        out,
    )


def multiply_scalar(
    matrix: Sequence[float], scalar: float, out: Matrix2 | None = None
) -> Matrix2:
    """Multiply every entry by ``scalar``."""
    require_matrix_size(matrix, SIZE, "matrix")
    return from_values(
        matrix[0] * scalar,
        matrix[1] * scalar,
        matrix[2] * scalar,
        matrix[3] * scalar,
        out,
    )


def multiply_scalar_and_add(
    a: Sequence[float],
    b: Sequence[float],
    scalar: float,
    out: Matrix2 | None = None,
) -> Matrix2:
    """Return ``a + b * scalar``."""
    require_matrix_size(a, SIZE, "a")
    require_matrix_size(b, SIZE, "b")
    return from_values(
        a[0] + b[0] * scalar,
        a[1] + b[1] * scalar,
        a[2] + b[2] * scalar,
        a[3] + b[3] * scalar,
        out,
    )


def transpose(matrix: Sequence[float], out: Matrix2 | None = None) -> Matrix2:
    """Transpose a matrix."""
    require_matrix_size(matrix, SIZE, "matrix")
    return from_values(matrix[0], matrix[2], matrix[1], matrix[3], out)


def determinant(matrix: Sequence[float]) -> float:
    """Return the determinant ``a * d - c * b``."""
    require_matrix_size(matrix, SIZE, "matrix")
    return matrix[0] * matrix[3] - matrix[2] * matrix[1]


def _cofactors(matrix: Sequence[float]) -> tuple[float, float, float, float]:
    # Transposed cofactor matrix, shared by adjoint() and invert()
    return (matrix[3], -matrix[1], -matrix[2], matrix[0])


def adjoint(matrix: Sequence[float], out: Matrix2 | None = None) -> Matrix2:
    """Return the adjugate ``[d, -b, -c, a]``."""
    require_matrix_size(matrix, SIZE, "matrix")
    c0, c1, c2, c3 = _cofactors(matrix)
    return from_values(c0, c1, c2, c3, out)


def invert(matrix: Sequence[float], out: Matrix2 | None = None) -> Matrix2:
    """Invert a 2x2 matrix.

    The determinant is tested for exact zero; nearly singular matrices are
    inverted and may produce very large entries.

    Args:
        matrix: Matrix to invert
        out: Optional destination, may alias ``matrix``

    Returns:
        The inverse, written to ``out``

    Raises:
        SingularMatrixError: If the determinant is exactly zero
    """
    det: float = determinant(matrix)
    if det == 0.0:
        raise SingularMatrixError()
    inv_det: float = 1.0 / det
    c0, c1, c2, c3 = _cofactors(matrix)
    return from_values(c0 * inv_det, c1 * inv_det, c2 * inv_det, c3 * inv_det, out)


def rotate(
    matrix: Sequence[float], radians: float, out: Matrix2 | None = None
) -> Matrix2:
    """Post-multiply a matrix by a rotation of ``radians``."""
    require_matrix_size(matrix, SIZE, "matrix")
    a0: float = matrix[0]
    a1: float = matrix[1]
    a2: float = matrix[2]
    a3: float = matrix[3]
    s: float = math.sin(radians)
    c: float = math.cos(radians)
    return from_values(
        a0 * c + a2 * s,
        a1 * c + a3 * s,
        a2 * c - a0 * s,
        a3 * c - a1 * s,
        out,
    )


def scale(
    matrix: Sequence[float], vector: Sequence[float], out: Matrix2 | None = None
) -> Matrix2:
    """Post-multiply a matrix by a scaling by ``vector``."""
    require_matrix_size(matrix, SIZE, "matrix")
    require_vector_size(vector, 2, "vector")
    x: float = vector[0]
    y: float = vector[1]
    return from_values(matrix[0] * x, matrix[1] * x, matrix[2] * y, matrix[3] * y, out)


def frob(matrix: Sequence[float]) -> float:
    """Return the Frobenius norm."""
    require_matrix_size(matrix, SIZE, "matrix")
    return math.hypot(*matrix)


def equals(a: Sequence[float], b: Sequence[float], eps: float = EPSILON) -> bool:
    """Return True when two matrices are approximately equal."""
    return seq_approx_relative(a, b, eps)


def exact_equals(a: Sequence[float], b: Sequence[float]) -> bool:
    """Return True when two matrices are exactly equal."""
    return seq_exact(a, b)


def to_array(matrix: Sequence[float]) -> NDArray[np.float64]:
    """Return a (2, 2) array, undoing the column-major layout."""
    require_matrix_size(matrix, SIZE, "matrix")
    return np.asarray(matrix, dtype=np.float64).reshape((2, 2), order="F")
