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
2-vector operations

Vectors are lists of two floats ``[x, y]``. Every operation that produces a
vector takes an optional ``out`` destination that may alias an operand.
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


Vector2 = list[float]

# Number of components in a 2-vector
SIZE: int = 2


def create() -> Vector2:
    """Return the zero vector."""
    return [0.0] * SIZE


def from_values(x: float, y: float, out: Vector2 | None = None) -> Vector2:
    """Build a vector from its components."""
    out = vector_out(out, SIZE)
    out[:] = [x, y]
    return out


def _pair(a: Sequence[float], b: Sequence[float]) -> None:
    require_vector_size(a, SIZE, "a")
    require_vector_size(b, SIZE, "b")


def copy(vector: Sequence[float], out: Vector2 | None = None) -> Vector2:
    """Copy a vector into ``out``."""
    require_vector_size(vector, SIZE, "vector")
    return from_values(vector[0], vector[1], out)


def zero(out: Vector2 | None = None) -> Vector2:
    """Reset a vector to zero."""
    return from_values(0.0, 0.0, out)


def add(
    a: Sequence[float], b: Sequence[float], out: Vector2 | None = None
) -> Vector2:
    """Add two vectors."""
    _pair(a, b)
    return from_values(a[0] + b[0], a[1] + b[1], out)


def subtract(
    a: Sequence[float], b: Sequence[float], out: Vector2 | None = None
) -> Vector2:
    """Subtract ``b`` from ``a``."""
    _pair(a, b)
    return from_values(a[0] - b[0], a[1] - b[1], out)


def multiply(
    a: Sequence[float], b: Sequence[float], out: Vector2 | None = None
) -> Vector2:
    """Multiply two vectors component-wise."""
    _pair(a, b)
    return from_values(a[0] * b[0], a[1] * b[1], out)


def divide(
    a: Sequence[float], b: Sequence[float], out: Vector2 | None = None
) -> Vector2:
    """Divide two vectors component-wise, with IEEE-754 division by zero."""
    _pair(a, b)
    return from_values(ieee_divide(a[0], b[0]), ieee_divide(a[1], b[1]), out)


def scale(
    vector: Sequence[float], scalar: float, out: Vector2 | None = None
) -> Vector2:
    """Multiply a vector by a scalar."""
    require_vector_size(vector, SIZE, "vector")
    return from_values(vector[0] * scalar, vector[1] * scalar, out)


def scale_and_add(
    a: Sequence[float],
    b: Sequence[float],
    scalar: float,
    out: Vector2 | None = None,
) -> Vector2:
    """Return ``a + b * scalar``."""
    _pair(a, b)
    return from_values(a[0] + b[0] * scalar, a[1] + b[1] * scalar, out)


def negate(vector: Sequence[float], out: Vector2 | None = None) -> Vector2:
    """Negate every component."""
    require_vector_size(vector, SIZE, "vector")
    return from_values(-vector[0], -vector[1], out)


def invert(vector: Sequence[float], out: Vector2 | None = None) -> Vector2:
    """Return the component-wise reciprocal."""
    require_vector_size(vector, SIZE, "vector")
    return from_values(ieee_divide(1.0, vector[0]), ieee_divide(1.0, vector[1]), out)


def ceil(vector: Sequence[float], out: Vector2 | None = None) -> Vector2:
    """Round every component up."""
    require_vector_size(vector, SIZE, "vector")
    return from_values(float(math.ceil(vector[0])), float(math.ceil(vector[1])), out)


def floor(vector: Sequence[float], out: Vector2 | None = None) -> Vector2:
    """Round every component down."""
    require_vector_size(vector, SIZE, "vector")
    return from_values(
        float(math.floor(vector[0])), float(math.floor(vector[1])), out
    )


def round(vector: Sequence[float], out: Vector2 | None = None) -> Vector2:
    """Round every component to the nearest integer, ties to even."""
    require_vector_size(vector, SIZE, "vector")
    return from_values(float(np.rint(vector[0])), float(np.rint(vector[1])), out)


def min(
    a: Sequence[float], b: Sequence[float], out: Vector2 | None = None
) -> Vector2:
    """Return the component-wise minimum."""
    _pair(a, b)
    return from_values(
        a[0] if a[0] <= b[0] else b[0], a[1] if a[1] <= b[1] else b[1], out
    )


def max(
    a: Sequence[float], b: Sequence[float], out: Vector2 | None = None
) -> Vector2:
    """Return the component-wise maximum."""
    _pair(a, b)
    return from_values(
        a[0] if a[0] >= b[0] else b[0], a[1] if a[1] >= b[1] else b[1], out
    )


def distance(a: Sequence[float], b: Sequence[float]) -> float:
    """Return the Euclidean distance between two points."""
    _pair(a, b)
    return math.hypot(b[0] - a[0], b[1] - a[1])


def squared_distance(a: Sequence[float], b: Sequence[float]) -> float:
    """Return the squared Euclidean distance between two points."""
    _pair(a, b)
    x: float = b[0] - a[0]
    y: float = b[1] - a[1]
    return x * x + y * y


def get_magnitude(vector: Sequence[float]) -> float:
    """Return the length of a vector."""
    require_vector_size(vector, SIZE, "vector")
    return math.hypot(vector[0], vector[1])


def get_squared_magnitude(vector: Sequence[float]) -> float:
    """Return the squared length of a vector."""
    require_vector_size(vector, SIZE, "vector")
    return vector[0] * vector[0] + vector[1] * vector[1]


def normalize(vector: Sequence[float], out: Vector2 | None = None) -> Vector2:
    """Scale a vector to unit length.

    A zero vector has no direction and normalizes to ``[nan, nan]``.
    """
    inv_length: float = ieee_divide(1.0, get_magnitude(vector))
    return from_values(vector[0] * inv_length, vector[1] * inv_length, out)


def dot(a: Sequence[float], b: Sequence[float]) -> float:
    """Return the dot product."""
    _pair(a, b)
    return a[0] * b[0] + a[1] * b[1]


def cross(
    a: Sequence[float], b: Sequence[float], out: list[float] | None = None
) -> list[float]:
    """Return the cross product of two planar vectors as a 3-vector.

    The result is ``[0, 0, z]`` where ``z`` is the signed area of the
    parallelogram spanned by ``a`` and ``b``.
    """
    _pair(a, b)
    z: float = a[0] * b[1] - a[1] * b[0]
    out = vector_out(out, 3)
    out[:] = [0.0, 0.0, z]
    return out


def lerp(
    a: Sequence[float], b: Sequence[float], t: float, out: Vector2 | None = None
) -> Vector2:
    """Linearly interpolate from ``a`` (``t = 0``) to ``b`` (``t = 1``)."""
    _pair(a, b)
    ax: float = a[0]
    ay: float = a[1]
    return from_values(ax + t * (b[0] - ax), ay + t * (b[1] - ay), out)


def angle(a: Sequence[float], b: Sequence[float]) -> float:
    """Return the unsigned angle between two vectors in radians.

    If either vector is zero the angle is reported as ``pi / 2``.
    """
    magnitude_product: float = get_magnitude(a) * get_magnitude(b)
    cosine: float = dot(a, b) / magnitude_product if magnitude_product else 0.0
    return math.acos(-1.0 if cosine < -1.0 else 1.0 if cosine > 1.0 else cosine)


def rotate(
    vector: Sequence[float],
    origin: Sequence[float],
    radians: float,
    out: Vector2 | None = None,
) -> Vector2:
    """Rotate a point counter-clockwise around ``origin``."""
    require_vector_size(vector, SIZE, "vector")
    require_vector_size(origin, SIZE, "origin")
    o0: float = origin[0]
    o1: float = origin[1]
    p0: float = vector[0] - o0
    p1: float = vector[1] - o1
    s: float = math.sin(radians)
    c: float = math.cos(radians)
    return from_values(p0 * c - p1 * s + o0, p0 * s + p1 * c + o1, out)


def transform_matrix2(
    vector: Sequence[float], matrix: Sequence[float], out: Vector2 | None = None
) -> Vector2:
    """Return ``matrix @ vector`` for a 2x2 matrix."""
    require_vector_size(vector, SIZE, "vector")
    require_matrix_size(matrix, 4, "matrix")
    x: float = vector[0]
    y: float = vector[1]
    return from_values(
        matrix[0] * x + matrix[2] * y, matrix[1] * x + matrix[3] * y, out
    )


def transform_matrix3(
    vector: Sequence[float], matrix: Sequence[float], out: Vector2 | None = None
) -> Vector2:
    """Transform a point by a 3x3 homogeneous matrix, with implicit ``z = 1``."""
    require_vector_size(vector, SIZE, "vector")
    require_matrix_size(matrix, 9, "matrix")
    x: float = vector[0]
    y: float = vector[1]
    return from_values(
        matrix[0] * x + matrix[3] * y + matrix[6],
        matrix[1] * x + matrix[4] * y + matrix[7],
        out,
    )


def transform_matrix4(
    vector: Sequence[float], matrix: Sequence[float], out: Vector2 | None = None
) -> Vector2:
    """Transform a point by a 4x4 matrix, with implicit ``z = 0, w = 1``."""
    require_vector_size(vector, SIZE, "vector")
    require_matrix_size(matrix, 16, "matrix")
    x: float = vector[0]
    y: float = vector[1]
    return from_values(
        matrix[0] * x + matrix[4] * y + matrix[12],
        matrix[1] * x + matrix[5] * y + matrix[13],
        out,
    )


def random(
    magnitude: float = 1.0,
    out: Vector2 | None = None,
    rng: np.random.Generator | None = None,
) -> Vector2:
    """Return a vector with the given magnitude and a uniform random direction."""
    theta: float = float(resolve_generator(rng).uniform(0.0, 2.0 * math.pi))
    return from_values(math.cos(theta) * magnitude, math.sin(theta) * magnitude, out)


def equals(a: Sequence[float], b: Sequence[float], eps: float = EPSILON) -> bool:
    """Return True when two vectors are approximately equal."""
    return seq_approx_relative(a, b, eps)


def exact_equals(a: Sequence[float], b: Sequence[float]) -> bool:
    """Return True when two vectors are exactly equal."""
    return seq_exact(a, b)
