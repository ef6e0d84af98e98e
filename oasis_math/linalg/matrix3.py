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
3x3 matrix operations

Matrices are column-major lists of nine floats. Element (r, c) is stored at
``data[c * 3 + r]``. A 3x3 matrix is used either as a 3D linear map (rotation
basis, normal matrix) or as a 2D homogeneous transform, where the third column
holds the translation.

Every operation that produces a matrix takes an optional ``out`` destination
that may alias an operand. Operand entries are read into locals before ``out``
is written.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray

from oasis_math.config.math_params import EPSILON
from oasis_math.linalg import matrix4
from oasis_math.math_utils.approx import seq_approx_relative
from oasis_math.math_utils.approx import seq_exact
from oasis_math.math_utils.errors import SingularMatrixError
from oasis_math.math_utils.validation import matrix_out
from oasis_math.math_utils.validation import require_matrix_size
from oasis_math.math_utils.validation import require_vector_size


Matrix3 = list[float]

# Number of entries in a 3x3 matrix
SIZE: int = 9


def create() -> Matrix3:
    """Return a zero-filled 3x3 matrix."""
    return [0.0] * SIZE


def from_values(
    c0r0: float,
    c0r1: float,
    c0r2: float,
    c1r0: float,
    c1r1: float,
    c1r2: float,
    c2r0: float,
    c2r1: float,
    c2r2: float,
    out: Matrix3 | None = None,
) -> Matrix3:
    """Build a matrix from its entries in column-major order."""
    out = matrix_out(out, SIZE)
    out[:] = [c0r0, c0r1, c0r2, c1r0, c1r1, c1r2, c2r0, c2r1, c2r2]
    return out


def identity(out: Matrix3 | None = None) -> Matrix3:
    """Reset a matrix to identity."""
    return from_values(1.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0, out)


def copy(matrix: Sequence[float], out: Matrix3 | None = None) -> Matrix3:
    """Copy a matrix into ``out``."""
    require_matrix_size(matrix, SIZE, "matrix")
    out = matrix_out(out, SIZE)
    out[:] = list(matrix)
    return out


def from_rotation(radians: float, out: Matrix3 | None = None) -> Matrix3:
    """Create a 2D homogeneous rotation by ``radians``."""
    s: float = math.sin(radians)
    c: float = math.cos(radians)
    return from_values(c, s, 0.0, -s, c, 0.0, 0.0, 0.0, 1.0, out)


def from_scaling(vector: Sequence[float], out: Matrix3 | None = None) -> Matrix3:
    """Create a 2D homogeneous scaling by a 2-vector."""
    require_vector_size(vector, 2, "vector")
    return from_values(vector[0], 0.0, 0.0, 0.0, vector[1], 0.0, 0.0, 0.0, 1.0, out)


def from_translation(
    vector: Sequence[float], out: Matrix3 | None = None
) -> Matrix3:
    """Create a 2D homogeneous translation by a 2-vector."""
    require_vector_size(vector, 2, "vector")
    return from_values(1.0, 0.0, 0.0, 0.0, 1.0, 0.0, vector[0], vector[1], 1.0, out)


def from_quaternion(
    quaternion: Sequence[float], out: Matrix3 | None = None
) -> Matrix3:
    """Create a rotation matrix from a quaternion in xyzw order.

    A non-unit quaternion is not rejected. The result is then the rotation
    composed with a uniform scale by the squared magnitude.

    Args:
        quaternion: Quaternion ``(x, y, z, w)``
        out: Optional destination

    Returns:
        The rotation matrix, written to ``out``
    """
    require_vector_size(quaternion, 4, "quaternion")
    x: float = quaternion[0]
    y: float = quaternion[1]
    z: float = quaternion[2]
    w: float = quaternion[3]

    x2: float = x + x
    y2: float = y + y
    z2: float = z + z

    xx: float = x * x2
    yx: float = y * x2
    yy: float = y * y2
    zx: float = z * x2
    zy: float = z * y2
    zz: float = z * z2
    wx: float = w * x2
    wy: float = w * y2
    wz: float = w * z2

    return from_values(
        1.0 - yy - zz,
        yx + wz,
        zx - wy,
        yx - wz,
        1.0 - xx - zz,
        zy + wx,
        zx + wy,
        zy - wx,
        1.0 - xx - yy,
        out,
    )


def from_matrix4(matrix: Sequence[float], out: Matrix3 | None = None) -> Matrix3:
    """Return the upper-left 3x3 block of a 4x4 matrix."""
    require_matrix_size(matrix, matrix4.SIZE, "matrix")
    return from_values(
        matrix[0],
        matrix[1],
        matrix[2],
        matrix[4],
        matrix[5],
        matrix[6],
        matrix[8],
        matrix[9],
        matrix[10],
        out,
    )


def normal_from_matrix4(
    matrix: Sequence[float], out: Matrix3 | None = None
) -> Matrix3:
    """Return the normal matrix of a 4x4 transform.

    The normal matrix is the upper-left 3x3 block of the inverse-transpose,
    which keeps surface normals perpendicular under non-uniform scaling.

    Raises:
        SingularMatrixError: If the 4x4 matrix is singular
    """
    inv: list[float] = matrix4.invert(matrix)
    return from_values(
        inv[0],
        inv[4],
        inv[8],
        inv[1],
        inv[5],
        inv[9],
        inv[2],
        inv[6],
        inv[10],
        out,
    )


def projection(width: float, height: float, out: Matrix3 | None = None) -> Matrix3:
    """Create a 2D projection from pixel space to clip space.

    The y axis is flipped so that the origin is the top-left corner.
    """
    return from_values(
        2.0 / width, 0.0, 0.0, 0.0, -2.0 / height, 0.0, -1.0, 1.0, 1.0, out
    )


def add(
    a: Sequence[float], b: Sequence[float], out: Matrix3 | None = None
) -> Matrix3:
    """Add two matrices."""
    require_matrix_size(a, SIZE, "a")
    require_matrix_size(b, SIZE, "b")
    out = matrix_out(out, SIZE)
    out[:] = [ai + bi for ai, bi in zip(a, b)]
    return out


def subtract(
    a: Sequence[float], b: Sequence[float], out: Matrix3 | None = None
) -> Matrix3:
    """Subtract ``b`` from ``a``."""
    require_matrix_size(a, SIZE, "a")
    require_matrix_size(b, SIZE, "b")
    out = matrix_out(out, SIZE)
    out[:] = [ai - bi for ai, bi in zip(a, b)]
    return out


def multiply(
    a: Sequence[float], b: Sequence[float], out: Matrix3 | None = None
) -> Matrix3:
    """Return the product ``a @ b``."""
    require_matrix_size(a, SIZE, "a")
    require_matrix_size(b, SIZE, "b")
    a00: float = a[0]
    a01: float = a[1]
    a02: float = a[2]
    a10: float = a[3]
    a11: float = a[4]
    a12: float = a[5]
    a20: float = a[6]
    a21: float = a[7]
    a22: float = a[8]

    b00: float = b[0]
    b01: float = b[1]
    b02: float = b[2]
    b10: float = b[3]
    b11: float = b[4]
    b12: float = b[5]
    b20: float = b[6]
    b21: float = b[7]
    b22: float = b[8]

    return from_values(
        b00 * a00 + b01 * a10 + b02 * a20,
        b00 * a01 + b01 * a11 + b02 * a21,
        b00 * a02 + b01 * a12 + b02 * a22,
        b10 * a00 + b11 * a10 + b12 * a20,
        b10 * a01 + b11 * a11 + b12 * a21,
        b10 * a02 + b11 * a12 + b12 * a22,
        b20 * a00 + b21 * a10 + b22 * a20,
        b20 * a01 + b21 * a11 + b22 * a21,
        b20 * a02 + b21 * a12 + b22 * a22,
        out,
    )


def multiply_scalar(
    matrix: Sequence[float], scalar: float, out: Matrix3 | None = None
) -> Matrix3:
    """Multiply every entry by ``scalar``."""
    require_matrix_size(matrix, SIZE, "matrix")
    out = matrix_out(out, SIZE)
    out[:] = [value * scalar for value in matrix]
    return out


def multiply_scalar_and_add(
    a: Sequence[float],
    b: Sequence[float],
    scalar: float,
    out: Matrix3 | None = None,
) -> Matrix3:
    """Return ``a + b * scalar``."""
    require_matrix_size(a, SIZE, "a")
    require_matrix_size(b, SIZE, "b")
    out = matrix_out(out, SIZE)
    out[:] = [ai + bi * scalar for ai, bi in zip(a, b)]
    return out


def transpose(matrix: Sequence[float], out: Matrix3 | None = None) -> Matrix3:
    """Transpose a matrix."""
    require_matrix_size(matrix, SIZE, "matrix")
    return from_values(
        matrix[0],
        matrix[3],
        matrix[6],
        matrix[1],
        matrix[4],
        matrix[7],
        matrix[2],
        matrix[5],
        matrix[8],
        out,
    )


def _adjugate(matrix: Sequence[float]) -> list[float]:
    a00: float = matrix[0]
    a01: float = matrix[1]
    a02: float = matrix[2]
    a10: float = matrix[3]
    a11: float = matrix[4]
    a12: float = matrix[5]
    a20: float = matrix[6]
    a21: float = matrix[7]
    a22: float = matrix[8]

    # First-row minors, reused by determinant()
    b01: float = a22 * a11 - a12 * a21
    b11: float = -a22 * a10 + a12 * a20
    b21: float = a21 * a10 - a11 * a20

    return [
        b01,
        -a22 * a01 + a02 * a21,
        a12 * a01 - a02 * a11,
        b11,
        a22 * a00 - a02 * a20,
        -a12 * a00 + a02 * a10,
        b21,
        -a21 * a00 + a01 * a20,
        a11 * a00 - a01 * a10,
    ]


def _determinant_from(matrix: Sequence[float], adjugate: Sequence[float]) -> float:
    return matrix[0] * adjugate[0] + matrix[1] * adjugate[3] + matrix[2] * adjugate[6]


def determinant(matrix: Sequence[float]) -> float:
    """Return the determinant by cofactor expansion along the first row."""
    require_matrix_size(matrix, SIZE, "matrix")
    return _determinant_from(matrix, _adjugate(matrix))


def adjoint(matrix: Sequence[float], out: Matrix3 | None = None) -> Matrix3:
    """Return the adjugate, the transpose of the cofactor matrix."""
    require_matrix_size(matrix, SIZE, "matrix")
    out = matrix_out(out, SIZE)
    out[:] = _adjugate(matrix)
    return out


def invert(matrix: Sequence[float], out: Matrix3 | None = None) -> Matrix3:
    """Invert a 3x3 matrix by cofactor expansion.

    Args:
        matrix: Matrix to invert
        out: Optional destination, may alias ``matrix``

    Returns:
        The inverse, written to ``out``

    Raises:
        SingularMatrixError: If the determinant is exactly zero
    """
    require_matrix_size(matrix, SIZE, "matrix")
    adj: list[float] = _adjugate(matrix)
    det: float = _determinant_from(matrix, adj)
    if det == 0.0:
        raise SingularMatrixError()
    inv_det: float = 1.0 / det
    out = matrix_out(out, SIZE)
    out[:] = [value * inv_det for value in adj]
    return out


def rotate(
    matrix: Sequence[float], radians: float, out: Matrix3 | None = None
) -> Matrix3:
    """Post-multiply a 2D homogeneous matrix by a rotation."""
    require_matrix_size(matrix, SIZE, "matrix")
    a00: float = matrix[0]
    a01: float = matrix[1]
    a02: float = matrix[2]
    a10: float = matrix[3]
    a11: float = matrix[4]
    a12: float = matrix[5]
    s: float = math.sin(radians)
    c: float = math.cos(radians)
    return from_values(
        c * a00 + s * a10,
        c * a01 + s * a11,
        c * a02 + s * a12,
        c * a10 - s * a00,
        c * a11 - s * a01,
        c * a12 - s * a02,
        matrix[6],
        matrix[7],
        matrix[8],
        out,
    )


def scale(
    matrix: Sequence[float], vector: Sequence[float], out: Matrix3 | None = None
) -> Matrix3:
    """Post-multiply a 2D homogeneous matrix by a scaling."""
    require_matrix_size(matrix, SIZE, "matrix")
    require_vector_size(vector, 2, "vector")
    x: float = vector[0]
    y: float = vector[1]
    return from_values(
        matrix[0] * x,
        matrix[1] * x,
        matrix[2] * x,
        matrix[3] * y,
        matrix[4] * y,
        matrix[5] * y,
        matrix[6],
        matrix[7],
        matrix[8],
        out,
    )


def translate(
    matrix: Sequence[float], vector: Sequence[float], out: Matrix3 | None = None
) -> Matrix3:
    """Post-multiply a 2D homogeneous matrix by a translation."""
    require_matrix_size(matrix, SIZE, "matrix")
    require_vector_size(vector, 2, "vector")
    a00: float = matrix[0]
    a01: float = matrix[1]
    a02: float = matrix[2]
    a10: float = matrix[3]
    a11: float = matrix[4]
    a12: float = matrix[5]
    a20: float = matrix[6]
    a21: float = matrix[7]
    a22: float = matrix[8]
    x: float = vector[0]
    y: float = vector[1]
    return from_values(
        a00,
        a01,
        a02,
        a10,
        a11,
        a12,
        x * a00 + y * a10 + a20,
        x * a01 + y * a11 + a21,
        x * a02 + y * a12 + a22,
        out,
    )


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
    """Return a (3, 3) array, undoing the column-major layout."""
    require_matrix_size(matrix, SIZE, "matrix")
    return np.asarray(matrix, dtype=np.float64).reshape((3, 3), order="F")
