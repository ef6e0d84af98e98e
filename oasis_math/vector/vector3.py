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
3-vector operations

Vectors are lists of three floats ``[x, y, z]``. Every operation that
produces a vector takes an optional ``out`` destination that may alias an
operand.

Matrices consumed here are column-major, see ``oasis_math.linalg``.
Quaternions are ``(x, y, z, w)``.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np

from oasis_math.config.math_params import EPSILON
from oasis_math.config.math_params import ROTATION_EPSILON
from oasis_math.math_utils.approx import seq_approx_relative
from oasis_math.math_utils.approx import seq_exact
from oasis_math.math_utils.sampling import resolve_generator
from oasis_math.math_utils.validation import ieee_divide
from oasis_math.math_utils.validation import require_matrix_size
from oasis_math.math_utils.validation import require_vector_size
from oasis_math.math_utils.validation import vector_out


Vector3 = list[float]

# Number of components in a 3-vector
SIZE: int = 3


def create() -> Vector3:
    """Return the zero vector."""
    return [0.0] * SIZE


def from_values(
    x: float, y: float, z: float, out: Vector3 | None = None
) -> Vector3:
    """Build a vector from its components."""
    out = vector_out(out, SIZE)
    out[:] = [x, y, z]
    return out


def _write(values: list[float], out: Vector3 | None) -> Vector3:
    out = vector_out(out, SIZE)
    out[:] = values
    return out


def _pair(a: Sequence[float], b: Sequence[float]) -> None:
    require_vector_size(a, SIZE, "a")
    require_vector_size(b, SIZE, "b")


def copy(vector: Sequence[float], out: Vector3 | None = None) -> Vector3:
    """Copy a vector into ``out``."""
    require_vector_size(vector, SIZE, "vector")
    return _write(list(vector), out)


def zero(out: Vector3 | None = None) -> Vector3:
    """Reset a vector to zero."""
    return from_values(0.0, 0.0, 0.0, out)


def add(
    a: Sequence[float], b: Sequence[float], out: Vector3 | None = None
) -> Vector3:
    """Add two vectors."""
    _pair(a, b)
    return _write([ai + bi for ai, bi in zip(a, b)], out)


def subtract(
    a: Sequence[float], b: Sequence[float], out: Vector3 | None = None
) -> Vector3:
    """Subtract ``b`` from ``a``."""
    _pair(a, b)
    return _write([ai - bi for ai, bi in zip(a, b)], out)


def multiply(
    a: Sequence[float], b: Sequence[float], out: Vector3 | None = None
) -> Vector3:
    """Multiply two vectors component-wise."""
    _pair(a, b)
    return _write([ai * bi for ai, bi in zip(a, b)], out)


def divide(
    a: Sequence[float], b: Sequence[float], out: Vector3 | None = None
) -> Vector3:
    """Divide two vectors component-wise, with IEEE-754 division by zero."""
    _pair(a, b)
    return _write([ieee_divide(ai, bi) for ai, bi in zip(a, b)], out)


def scale(
    vector: Sequence[float], scalar: float, out: Vector3 | None = None
) -> Vector3:
    """Multiply a vector by a scalar."""
    require_vector_size(vector, SIZE, "vector")
    return _write([value * scalar for value in vector], out)


def scale_and_add(
    a: Sequence[float],
    b: Sequence[float],
    scalar: float,
    out: Vector3 | None = None,
) -> Vector3:
    """Return ``a + b * scalar``."""
    _pair(a, b)
    return _write([ai + bi * scalar for ai, bi in zip(a, b)], out)


def negate(vector: Sequence[float], out: Vector3 | None = None) -> Vector3:
    """Negate every component."""
    require_vector_size(vector, SIZE, "vector")
    return _write([-value for value in vector], out)


def invert(vector: Sequence[float], out: Vector3 | None = None) -> Vector3:
    """Return the component-wise reciprocal."""
    require_vector_size(vector, SIZE, "vector")
    return _write([ieee_divide(1.0, value) for value in vector], out)


def abs(vector: Sequence[float], out: Vector3 | None = None) -> Vector3:
    """Return the component-wise absolute value."""
    require_vector_size(vector, SIZE, "vector")
    return _write([math.fabs(value) for value in vector], out)


def ceil(vector: Sequence[float], out: Vector3 | None = None) -> Vector3:
    """Round every component up."""
    require_vector_size(vector, SIZE, "vector")
    return _write([float(math.ceil(value)) for value in vector], out)


def floor(vector: Sequence[float], out: Vector3 | None = None) -> Vector3:
    """Round every component down."""
    require_vector_size(vector, SIZE, "vector")
    return _write([float(math.floor(value)) for value in vector], out)


def round(vector: Sequence[float], out: Vector3 | None = None) -> Vector3:
    """Round every component to the nearest integer, ties to even."""
    require_vector_size(vector, SIZE, "vector")
    return _write([float(np.rint(value)) for value in vector], out)


def min(
    a: Sequence[float], b: Sequence[float], out: Vector3 | None = None
) -> Vector3:
    """Return the component-wise minimum."""
    _pair(a, b)
    return _write([ai if ai <= bi else bi for ai, bi in zip(a, b)], out)


def max(
    a: Sequence[float], b: Sequence[float], out: Vector3 | None = None
) -> Vector3:
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
    return math.hypot(vector[0], vector[1], vector[2])


def get_squared_magnitude(vector: Sequence[float]) -> float:
    """Return the squared length of a vector."""
    require_vector_size(vector, SIZE, "vector")
    return vector[0] * vector[0] + vector[1] * vector[1] + vector[2] * vector[2]


def normalize(vector: Sequence[float], out: Vector3 | None = None) -> Vector3:
    """Scale a vector to unit length.

    A zero vector has no direction and normalizes to all ``nan``.
    """
    inv_length: float = ieee_divide(1.0, get_magnitude(vector))
    return _write([value * inv_length for value in vector], out)


def dot(a: Sequence[float], b: Sequence[float]) -> float:
    """Return the dot product."""
    _pair(a, b)
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def cross(
    a: Sequence[float], b: Sequence[float], out: Vector3 | None = None
) -> Vector3:
    """Return the cross product ``a x b``."""
    _pair(a, b)
    ax: float = a[0]
    ay: float = a[1]
    az: float = a[2]
    bx: float = b[0]
    by: float = b[1]
    bz: float = b[2]
    return from_values(
        ay * bz - az * by, az * bx - ax * bz, ax * by - ay * bx, out
    )


def lerp(
    a: Sequence[float], b: Sequence[float], t: float, out: Vector3 | None = None
) -> Vector3:
    """Linearly interpolate from ``a`` (``t = 0``) to ``b`` (``t = 1``)."""
    _pair(a, b)
    return _write([ai + t * (bi - ai) for ai, bi in zip(a, b)], out)


def _clamp_unit(value: float) -> float:
    if value < -1.0:
        return -1.0
    if value > 1.0:
        return 1.0
    return value


def slerp(
    a: Sequence[float],
    b: Sequence[float],
    t: float,
    out: Vector3 | None = None,
    rotation_eps: float = ROTATION_EPSILON,
) -> Vector3:
    """Spherically interpolate between two unit vectors.

    When the vectors are nearly parallel or nearly antiparallel the arc
    degenerates and linear interpolation is used instead. Antiparallel inputs
    have no unique arc, so the result passes through the origin and is the
    zero vector at ``t = 0.5``.
    """
    theta: float = math.acos(_clamp_unit(dot(a, b)))
    s: float = math.sin(theta)
    if s < rotation_eps:
        return lerp(a, b, t, out)
    ratio_a: float = math.sin((1.0 - t) * theta) / s
    ratio_b: float = math.sin(t * theta) / s
    return _write([ratio_a * ai + ratio_b * bi for ai, bi in zip(a, b)], out)


def hermite(
    a: Sequence[float],
    b: Sequence[float],
    c: Sequence[float],
    d: Sequence[float],
    t: float,
    out: Vector3 | None = None,
) -> Vector3:
    """Hermite interpolation from ``a`` to ``d`` with control points ``b, c``."""
    _pair(a, b)
    _pair(c, d)
    t2: float = t * t
    f1: float = t2 * (2.0 * t - 3.0) + 1.0
    f2: float = t2 * (t - 2.0) + t
    f3: float = t2 * (t - 1.0)
    f4: float = t2 * (3.0 - 2.0 * t)
    return _write(
        [a[i] * f1 + b[i] * f2 + c[i] * f3 + d[i] * f4 for i in range(SIZE)], out
    )


def bezier(
    a: Sequence[float],
    b: Sequence[float],
    c: Sequence[float],
    d: Sequence[float],
    t: float,
    out: Vector3 | None = None,
) -> Vector3:
    """Cubic Bezier interpolation from ``a`` to ``d`` with control points ``b, c``."""
    _pair(a, b)
    _pair(c, d)
    inv_t: float = 1.0 - t
    inv_t2: float = inv_t * inv_t
    t2: float = t * t
    f1: float = inv_t2 * inv_t
    f2: float = 3.0 * t * inv_t2
    f3: float = 3.0 * t2 * inv_t
    f4: float = t2 * t
    return _write(
        [a[i] * f1 + b[i] * f2 + c[i] * f3 + d[i] * f4 for i in range(SIZE)], out
    )


def angle(a: Sequence[float], b: Sequence[float]) -> float:
    """Return the unsigned angle between two vectors in radians.

    If either vector is zero the angle is reported as ``pi / 2``.
    """
    magnitude_product: float = get_magnitude(a) * get_magnitude(b)
    cosine: float = dot(a, b) / magnitude_product if magnitude_product else 0.0
    return math.acos(_clamp_unit(cosine))


def rotate_x(
    vector: Sequence[float],
    origin: Sequence[float],
    radians: float,
    out: Vector3 | None = None,
) -> Vector3:
    """Rotate a point around an X-parallel axis through ``origin``."""
    _pair(vector, origin)
    p1: float = vector[1] - origin[1]
    p2: float = vector[2] - origin[2]
    c: float = math.cos(radians)
    s: float = math.sin(radians)
    return from_values(
        vector[0], p1 * c - p2 * s + origin[1], p1 * s + p2 * c + origin[2], out
    )


def rotate_y(
    vector: Sequence[float],
    origin: Sequence[float],
    radians: float,
    out: Vector3 | None = None,
) -> Vector3:
    """Rotate a point around a Y-parallel axis through ``origin``."""
    _pair(vector, origin)
    p0: float = vector[0] - origin[0]
    p2: float = vector[2] - origin[2]
    c: float = math.cos(radians)
    s: float = math.sin(radians)
    return from_values(
        p2 * s + p0 * c + origin[0], vector[1], p2 * c - p0 * s + origin[2], out
    )


def rotate_z(
    vector: Sequence[float],
    origin: Sequence[float],
    radians: float,
    out: Vector3 | None = None,
) -> Vector3:
    """Rotate a point around a Z-parallel axis through ``origin``."""
    _pair(vector, origin)
    p0: float = vector[0] - origin[0]
    p1: float = vector[1] - origin[1]
    c: float = math.cos(radians)
    s: float = math.sin(radians)
    return from_values(
        p0 * c - p1 * s + origin[0], p0 * s + p1 * c + origin[1], vector[2], out
    )


def transform_matrix3(
    vector: Sequence[float], matrix: Sequence[float], out: Vector3 | None = None
) -> Vector3:
    """Return ``matrix @ vector`` for a 3x3 matrix."""
    require_vector_size(vector, SIZE, "vector")
    require_matrix_size(matrix, 9, "matrix")
    x: float = vector[0]
    y: float = vector[1]
    z: float = vector[2]
    return from_values(
        x * matrix[0] + y * matrix[3] + z * matrix[6],
        x * matrix[1] + y * matrix[4] + z * matrix[7],
        x * matrix[2] + y * matrix[5] + z * matrix[8],
        out,
    )


def transform_matrix4(
    vector: Sequence[float], matrix: Sequence[float], out: Vector3 | None = None
) -> Vector3:
    """Transform a point by a 4x4 matrix with perspective division.

    The point is extended with ``w = 1``. A resulting ``w`` of exactly zero
    is treated as one.
    """
    require_vector_size(vector, SIZE, "vector")
    require_matrix_size(matrix, 16, "matrix")
    x: float = vector[0]
    y: float = vector[1]
    z: float = vector[2]
    w: float = matrix[3] * x + matrix[7] * y + matrix[11] * z + matrix[15]
    if w == 0.0:
        w = 1.0
    return from_values(
        (matrix[0] * x + matrix[4] * y + matrix[8] * z + matrix[12]) / w,
        (matrix[1] * x + matrix[5] * y + matrix[9] * z + matrix[13]) / w,
        (matrix[2] * x + matrix[6] * y + matrix[10] * z + matrix[14]) / w,
        out,
    )


def transform_quaternion(
    vector: Sequence[float],
    quaternion: Sequence[float],
    out: Vector3 | None = None,
) -> Vector3:
    """Rotate a vector by a unit quaternion.

    Uses ``v' = v + w t + q x t`` with ``t = 2 (q x v)``, which avoids
    building the rotation matrix.
    """
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
        out,
    )


def random(
    magnitude: float = 1.0,
    out: Vector3 | None = None,
    rng: np.random.Generator | None = None,
) -> Vector3:
    """Return a vector with the given magnitude and a uniform random direction."""
    generator: np.random.Generator = resolve_generator(rng)
    theta: float = float(generator.uniform(0.0, 2.0 * math.pi))
    z: float = float(generator.uniform(-1.0, 1.0))
    z_scale: float = math.sqrt(1.0 - z * z) * magnitude
    return from_values(
        math.cos(theta) * z_scale, math.sin(theta) * z_scale, z * magnitude, out
    )


def equals(a: Sequence[float], b: Sequence[float], eps: float = EPSILON) -> bool:
    """Return True when two vectors are approximately equal."""
    return seq_approx_relative(a, b, eps)


def exact_equals(a: Sequence[float], b: Sequence[float]) -> bool:
    """Return True when two vectors are exactly equal."""
    return seq_exact(a, b)
