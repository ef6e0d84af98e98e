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
4-vector operations

Vectors are lists of four floats ``[x, y, z, w]``. Every operation that
produces a vector takes an optional ``out`` destination that may alias an
operand.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np

from oasis_math.config.math_params import EPSILON
from oasis_math.math_utils.approx import seq_approx_relative
from oasis_math.math_utils.approx import seq_exact
from oasis_math.math_utils.sampling import resolve_generator
from oasis_math.math_utils.validation import ieee_divide
from oasis_math.math_utils.validation import require_matrix_size
from oasis_math.math_utils.validation import require_vector_size
from oasis_math.math_utils.validation import vector_out


Vector4 = list[float]

# Number of components in a 4-vector
SIZE: int = 4


def create() -> Vector4:
    """Return the zero vector."""
    return [0.0] * SIZE


def from_values(
    x: float, y: float, z: float, w: float, out: Vector4 | None = None
) -> Vector4:
    """Build a vector from its components."""
    out = vector_out(out, SIZE)
    out[:] = [x, y, z, w]
    return out


def _write(values: list[float], out: Vector4 | None) -> Vector4:
    out = vector_out(out, SIZE)
    out[:] = values
    return out


def _pair(a: Sequence[float], b: Sequence[float]) -> None:
    require_vector_size(a, SIZE, "a")
    require_vector_size(b, SIZE, "b")


def copy(vector: Sequence[float], out: Vector4 | None = None) -> Vector4:
    """Copy a vector into ``out``."""
    require_vector_size(vector, SIZE, "vector")
    return _write(list(vector), out)


def zero(out: Vector4 | None = None) -> Vector4:
    """Reset a vector to zero."""
    return from_values(0.0, 0.0, 0.0, 0.0, out)


def add(
    a: Sequence[float], b: Sequence[float], out: Vector4 | None = None
) -> Vector4:
    """Add two vectors."""
    _pair(a, b)
    return _write([ai + bi for ai, bi in zip(a, b)], out)


def subtract(
    a: Sequence[float], b: Sequence[float], out: Vector4 | None = None
) -> Vector4:
    """Subtract ``b`` from ``a``."""
    _pair(a, b)
    return _write([ai - bi for ai, bi in zip(a, b)], out)


def multiply(
    a: Sequence[float], b: Sequence[float], out: Vector4 | None = None
) -> Vector4:
    """Multiply two vectors component-wise."""
    _pair(a, b)
    return _write([ai * bi for ai, bi in zip(a, b)], out)


def divide(
    a: Sequence[float], b: Sequence[float], out: Vector4 | None = None
) -> Vector4:
    """Divide two vectors component-wise, with IEEE-754 division by zero."""
    _pair(a, b)
    return _write([ieee_divide(ai, bi) for ai, bi in zip(a, b)], out)


def scale(
    vector: Sequence[float], scalar: float, out: Vector4 | None = None
) -> Vector4:
    """Multiply a vector by a scalar."""
    require_vector_size(vector, SIZE, "vector")
    return _write([value * scalar for value in vector], out)


def scale_and_add(
    a: Sequence[float],
    b: Sequence[float],
    scalar: float,
    out: Vector4 | None = None,
) -> Vector4:
    """Return ``a + b * scalar``."""
    _pair(a, b)
    return _write([ai + bi * scalar for ai, bi in zip(a, b)], out)


def negate(vector: Sequence[float], out: Vector4 | None = None) -> Vector4:
    """Negate every component."""
    require_vector_size(vector, SIZE, "vector")
    return _write([-value for value in vector], out)


def invert(vector: Sequence[float], out: Vector4 | None = None) -> Vector4:
    """Return the component-wise reciprocal."""
    require_vector_size(vector, SIZE, "vector")
    return _write([ieee_divide(1.0, value) for value in vector], out)


def abs(vector: Sequence[float], out: Vector4 | None = None) -> Vector4:
    """Return the component-wise absolute value."""
    require_vector_size(vector, SIZE, "vector")
    return _write([math.fabs(value) for value in vector], out)


def ceil(vector: Sequence[float], out: Vector4 | None = None) -> Vector4:
    """Round every component up."""
    require_vector_size(vector, SIZE, "vector")
    return _write([float(math.ceil(value)) for value in vector], out)


def floor(vector: Sequence[float], out: Vector4 | None = None) -> Vector4:
    """Round every component down."""
    require_vector_size(vector, SIZE, "vector")
    return _write([float(math.floor(value)) for value in vector], out)


def round(vector: Sequence[float], out: Vector4 | None = None) -> Vector4:
    """Round every component to the nearest integer, ties to even."""
    require_vector_size(vector, SIZE, "vector")
    return _write([float(np.rint(value)) for value in vector], out)


def min(
    a: Sequence[float], b: Sequence[float], out: Vector4 | None = None
) -> Vector4:
    """Return the component-wise minimum."""
    _pair(a, b)
    return _write([ai if ai <= bi else bi for ai, bi in zip(a, b)], out)


def max(
    a: Sequence[float], b: Sequence[float], out: Vector4 | None = None
) -> Vector4:
    """Return the component-wise maximum."""
    _pair(a, b)
    return _write([ai if ai >= bi else bi for ai, bi in zip(a, b)], out)


def distance(a: Sequence[float], b: Sequence[float]) -> float:
    """Return the Euclidean distance between two points."""
    _pair(a, b)
    return math.dist(a, b)


def squared_distance(a: Sequence[float], b: Sequence[float]) -> float:
    """Return the squared Euclidean distance between two points."""
    _pair(a, b)
    return sum((bi - ai) * (bi - ai) for ai, bi in zip(a, b))


def get_magnitude(vector: Sequence[float]) -> float:
    """Return the length of a vector."""
    require_vector_size(vector, SIZE, "vector")
    return math.hypot(*vector)


def get_squared_magnitude(vector: Sequence[float]) -> float:
    """Return the squared length of a vector."""
    require_vector_size(vector, SIZE, "vector")
    return sum(value * value for value in vector)


def normalize(vector: Sequence[float], out: Vector4 | None = None) -> Vector4:
    """Scale a vector to unit length.

    A zero vector has no direction and normalizes to all ``nan``.
    """
    inv_length: float = ieee_divide(1.0, get_magnitude(vector))
    return _write([value * inv_length for value in vector], out)


def dot(a: Sequence[float], b: Sequence[float]) -> float:
    """Return the dot product."""
    _pair(a, b)
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2] + a[3] * b[3]


def cross(
    a: Sequence[float],
    b: Sequence[float],
    c: Sequence[float],
    out: Vector4 | None = None,
) -> Vector4:
    """Return the 4D cross product of three vectors.

    The result is orthogonal to ``a``, ``b`` and ``c``. It is the cofactor
    expansion of the formal determinant whose rows are the basis vectors
    followed by the three operands.
    """
    _pair(a, b)
    require_vector_size(c, SIZE, "c")
    d: float = b[0] * c[1] - b[1] * c[0]
    e: float = b[0] * c[2] - b[2] * c[0]
    f: float = b[0] * c[3] - b[3] * c[0]
    g: float = b[1] * c[2] - b[2] * c[1]
    h: float = b[1] * c[3] - b[3] * c[1]
    i: float = b[2] * c[3] - b[3] * c[2]
    return from_values(
        a[1] * i - a[2] * h + a[3] * g,
        -(a[0] * i) + a[2] * f - a[3] * e,
        a[0] * h - a[1] * f + a[3] * d,
        -(a[0] * g) + a[1] * e - a[2] * d,
        out,
    )


def lerp(
    a: Sequence[float], b: Sequence[float], t: float, out: Vector4 | None = None
) -> Vector4:
    """Linearly interpolate from ``a`` (``t = 0``) to ``b`` (``t = 1``)."""
    _pair(a, b)
    return _write([ai + t * (bi - ai) for ai, bi in zip(a, b)], out)


def transform_matrix4(
    vector: Sequence[float], matrix: Sequence[float], out: Vector4 | None = None
) -> Vector4:
    """Return ``matrix @ vector`` for a 4x4 matrix."""
    require_vector_size(vector, SIZE, "vector")
    require_matrix_size(matrix, 16, "matrix")
    x: float = vector[0]
    y: float = vector[1]
    z: float = vector[2]
    w: float = vector[3]
    return _write(
        [
            matrix[row] * x
            + matrix[4 + row] * y
            + matrix[8 + row] * z
            + matrix[12 + row] * w
            for row in range(4)
        ],
        out,
    )


def transform_quaternion(
    vector: Sequence[float],
    quaternion: Sequence[float],
    out: Vector4 | None = None,
) -> Vector4:
    """Rotate the ``xyz`` part of a vector by a unit quaternion, keeping ``w``."""
    require_vector_size(vector, SIZE, "vector")
    require_vector_size(quaternion, 4, "quaternion")
    x: float = vector[0]
    y: float = vector[1]
    z: float = vector[2]
    qx: float = quaternion[0]
    qy: float = quaternion[1]
    qz: float = quaternion[2]
    qw: float = quaternion[3]

    tx: float = (qy * z - qz * y) * 2.0
    ty: float = (qz * x - qx * z) * 2.0
    tz: float = (qx * y - qy * x) * 2.0

    return from_values(
        x + qw * tx + qy * tz - qz * ty,
        y + qw * ty + qz * tx - qx * tz,
        z + qw * tz + qx * ty - qy * tx,
        vector[3],
        out,
    )


def random(
    magnitude: float = 1.0,
    out: Vector4 | None = None,
    rng: np.random.Generator | None = None,
) -> Vector4:
    """Return a vector with the given magnitude and a uniform random direction.

    Draws four standard normal samples and scales them to ``magnitude``,
    which is uniform on the 3-sphere.
    """
    generator: np.random.Generator = resolve_generator(rng)
    samples: list[float] = [float(value) for value in generator.standard_normal(SIZE)]
    length: float = math.hypot(*samples)
    while length == 0.0:
        samples = [float(value) for value in generator.standard_normal(SIZE)]
        length = math.hypot(*samples)
    return _write([value * magnitude / length for value in samples], out)


def equals(a: Sequence[float], b: Sequence[float], eps: float = EPSILON) -> bool:
    """Return True when two vectors are approximately equal."""
    return seq_approx_relative(a, b, eps)


def exact_equals(a: Sequence[float], b: Sequence[float]) -> bool:
    """Return True when two vectors are exactly equal."""
    return seq_exact(a, b)
