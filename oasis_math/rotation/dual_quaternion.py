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
Dual quaternion operations for rigid transforms

A dual quaternion is a list of eight floats: the real part ``(x, y, z, w)``
in ``[0:4]`` holds the rotation and the dual part in ``[4:8]`` holds half
the translation premultiplied by the rotation, ``dual = 0.5 * t * real``.

Magnitude, dot product and inversion are defined on the real part, which
carries the rotation.

Every operation that produces a dual quaternion takes an optional ``out``
destination that may alias an operand.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from oasis_math.config.math_params import EPSILON
from oasis_math.linalg import matrix4
from oasis_math.math_utils.approx import seq_approx_relative
from oasis_math.math_utils.approx import seq_exact
from oasis_math.math_utils.errors import MagnitudeError
from oasis_math.math_utils.validation import ieee_divide
from oasis_math.math_utils.validation import require_vector_size
from oasis_math.math_utils.validation import vector_out
from oasis_math.rotation import quaternion


DualQuaternion = list[float]

# Number of components in a dual quaternion
SIZE: int = 8


def create() -> DualQuaternion:
    """Return the identity transform."""
    return [0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 0.0]


def from_values(
    x1: float,
    y1: float,
    z1: float,
    w1: float,
    x2: float,
    y2: float,
    z2: float,
    w2: float,
    out: DualQuaternion | None = None,
) -> DualQuaternion:
    """Build a dual quaternion from its real and dual components."""
    out = vector_out(out, SIZE)
    out[:] = [x1, y1, z1, w1, x2, y2, z2, w2]
    return out


def _write(
    real: Sequence[float], dual: Sequence[float], out: DualQuaternion | None
) -> DualQuaternion:
    out = vector_out(out, SIZE)
    out[:] = [*real, *dual]
    return out


def _check(dual_quaternion: Sequence[float], name: str = "dual_quaternion") -> None:
    require_vector_size(dual_quaternion, SIZE, name)


def identity(out: DualQuaternion | None = None) -> DualQuaternion:
    """Reset a dual quaternion to the identity transform."""
    return from_values(0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 0.0, out)


def copy(
    dual_quaternion: Sequence[float], out: DualQuaternion | None = None
) -> DualQuaternion:
    """Copy a dual quaternion into ``out``."""
    _check(dual_quaternion)
    return _write(dual_quaternion[0:4], dual_quaternion[4:8], out)


def from_rotation_translation(
    rotation: Sequence[float],
    translation: Sequence[float],
    out: DualQuaternion | None = None,
) -> DualQuaternion:
    """Create a transform that rotates by a quaternion then translates."""
    require_vector_size(rotation, 4, "rotation")
    require_vector_size(translation, 3, "translation")
    x: float = rotation[0]
    y: float = rotation[1]
    z: float = rotation[2]
    w: float = rotation[3]
    ax: float = translation[0] * 0.5
    ay: float = translation[1] * 0.5
    az: float = translation[2] * 0.5
    return from_values(
        x,
        y,
        z,
        w,
        ax * w + ay * z - az * y,
        ay * w + az * x - ax * z,
        az * w + ax * y - ay * x,
        -ax * x - ay * y - az * z,
        out,
    )


def from_translation(
    translation: Sequence[float], out: DualQuaternion | None = None
) -> DualQuaternion:
    """Create a pure translation."""
    require_vector_size(translation, 3, "translation")
    return from_values(
        0.0,
        0.0,
        0.0,
        1.0,
        translation[0] * 0.5,
        translation[1] * 0.5,
        translation[2] * 0.5,
        0.0,
        out,
    )


def from_rotation(
    rotation: Sequence[float], out: DualQuaternion | None = None
) -> DualQuaternion:
    """Create a pure rotation."""
    require_vector_size(rotation, 4, "rotation")
    return _write(rotation, (0.0, 0.0, 0.0, 0.0), out)


def from_matrix4(
    matrix: Sequence[float], out: DualQuaternion | None = None
) -> DualQuaternion:
    """Create a dual quaternion from a rigid 4x4 transform."""
    return from_rotation_translation(
        matrix4.get_rotation(matrix), matrix4.get_translation(matrix), out
    )


def to_matrix4(
    dual_quaternion: Sequence[float], out: matrix4.Matrix4 | None = None
) -> matrix4.Matrix4:
    """Return the 4x4 transform of a dual quaternion."""
    return matrix4.from_dual_quaternion(dual_quaternion, out)


def get_real(
    dual_quaternion: Sequence[float], out: quaternion.Quaternion | None = None
) -> quaternion.Quaternion:
    """Return the real part, the rotation quaternion."""
    _check(dual_quaternion)
    return quaternion.copy(dual_quaternion[0:4], out)


def set_real(
    dual_quaternion: Sequence[float],
    real: Sequence[float],
    out: DualQuaternion | None = None,
) -> DualQuaternion:
    """Replace the real part."""
    _check(dual_quaternion)
    require_vector_size(real, 4, "real")
    return _write(real, dual_quaternion[4:8], out)


def get_dual(
    dual_quaternion: Sequence[float], out: quaternion.Quaternion | None = None
) -> quaternion.Quaternion:
    """Return the dual part."""
    _check(dual_quaternion)
    return quaternion.copy(dual_quaternion[4:8], out)


def set_dual(
    dual_quaternion: Sequence[float],
    dual: Sequence[float],
    out: DualQuaternion | None = None,
) -> DualQuaternion:
    """Replace the dual part."""
    _check(dual_quaternion)
    require_vector_size(dual, 4, "dual")
    return _write(dual_quaternion[0:4], dual, out)


def get_translation(
    dual_quaternion: Sequence[float], out: list[float] | None = None
) -> list[float]:
    """Return the translation ``2 * dual * conj(real)`` of a unit dual quaternion."""
    _check(dual_quaternion)
    product: quaternion.Quaternion = quaternion.multiply(
        dual_quaternion[4:8], quaternion.conjugate(dual_quaternion[0:4])
    )
    out = vector_out(out, 3)
    out[:] = [product[0] * 2.0, product[1] * 2.0, product[2] * 2.0]
    return out


def translate(
    dual_quaternion: Sequence[float],
    vector: Sequence[float],
    out: DualQuaternion | None = None,
) -> DualQuaternion:
    """Translate a transform by a 3-vector expressed in its local frame.

    The translation moves by ``vector`` rotated by the real part, giving
    ``get_translation(out) = t + rotate(real, vector)``.
    """
    _check(dual_quaternion)
    require_vector_size(vector, 3, "vector")
    ax1: float = dual_quaternion[0]
    ay1: float = dual_quaternion[1]
    az1: float = dual_quaternion[2]
    aw1: float = dual_quaternion[3]
    bx1: float = vector[0] * 0.5
    by1: float = vector[1] * 0.5
    bz1: float = vector[2] * 0.5
    ax2: float = dual_quaternion[4]
    ay2: float = dual_quaternion[5]
    az2: float = dual_quaternion[6]
    aw2: float = dual_quaternion[7]
    return from_values(
        ax1,
        ay1,
        az1,
        aw1,
        aw1 * bx1 + ay1 * bz1 - az1 * by1 + ax2,
        aw1 * by1 + az1 * bx1 - ax1 * bz1 + ay2,
        aw1 * bz1 + ax1 * by1 - ay1 * bx1 + az2,
        -ax1 * bx1 - ay1 * by1 - az1 * bz1 + aw2,
        out,
    )


def _rotate_real(
    dual_quaternion: Sequence[float],
    rotated_real: quaternion.Quaternion,
    out: DualQuaternion | None,
) -> DualQuaternion:
    # Keep the translation fixed while the rotation changes
    half_translation: quaternion.Quaternion = quaternion.multiply(
        dual_quaternion[4:8], quaternion.conjugate(dual_quaternion[0:4])
    )
    return _write(
        rotated_real, quaternion.multiply(half_translation, rotated_real), out
    )


def rotate_x(
    dual_quaternion: Sequence[float],
    radians: float,
    out: DualQuaternion | None = None,
) -> DualQuaternion:
    """Rotate around the local X axis, leaving the translation unchanged."""
    _check(dual_quaternion)
    return _rotate_real(
        dual_quaternion, quaternion.rotate_x(dual_quaternion[0:4], radians), out
    )


def rotate_y(
    dual_quaternion: Sequence[float],
    radians: float,
    out: DualQuaternion | None = None,
) -> DualQuaternion:
    """Rotate around the local Y axis, leaving the translation unchanged."""
    _check(dual_quaternion)
    return _rotate_real(
        dual_quaternion, quaternion.rotate_y(dual_quaternion[0:4], radians), out
    )


def rotate_z(
    dual_quaternion: Sequence[float],
    radians: float,
    out: DualQuaternion | None = None,
) -> DualQuaternion:
    """Rotate around the local Z axis, leaving the translation unchanged."""
    _check(dual_quaternion)
    return _rotate_real(
        dual_quaternion, quaternion.rotate_z(dual_quaternion[0:4], radians), out
    )


def rotate_by_quaternion_append(
    dual_quaternion: Sequence[float],
    rotation: Sequence[float],
    out: DualQuaternion | None = None,
) -> DualQuaternion:
    """Return ``dual_quaternion * rotation``, rotating in the local frame."""
    _check(dual_quaternion)
    return _write(
        quaternion.multiply(dual_quaternion[0:4], rotation),
        quaternion.multiply(dual_quaternion[4:8], rotation),
        out,
    )


def rotate_by_quaternion_prepend(
    rotation: Sequence[float],
    dual_quaternion: Sequence[float],
    out: DualQuaternion | None = None,
) -> DualQuaternion:
    """Return ``rotation * dual_quaternion``, rotating in the world frame."""
    _check(dual_quaternion)
    return _write(
        quaternion.multiply(rotation, dual_quaternion[0:4]),
        quaternion.multiply(rotation, dual_quaternion[4:8]),
        out,
    )


def rotate_around_axis(
    dual_quaternion: Sequence[float],
    axis: Sequence[float],
    radians: float,
    out: DualQuaternion | None = None,
) -> DualQuaternion:
    """Rotate around an arbitrary local axis.

    Raises:
        MagnitudeError: If the axis has zero length
    """
    _check(dual_quaternion)
    require_vector_size(axis, 3, "axis")
    axis_length: float = math.hypot(axis[0], axis[1], axis[2])
    if axis_length == 0.0:
        raise MagnitudeError("Rotation axis must have non-zero length")
    s: float = math.sin(radians * 0.5) / axis_length
    rotation: quaternion.Quaternion = [
        axis[0] * s,
        axis[1] * s,
        axis[2] * s,
        math.cos(radians * 0.5),
    ]
    return rotate_by_quaternion_append(dual_quaternion, rotation, out)


def add(
    a: Sequence[float], b: Sequence[float], out: DualQuaternion | None = None
) -> DualQuaternion:
    """Add two dual quaternions component-wise."""
    _check(a, "a")
    _check(b, "b")
    out = vector_out(out, SIZE)
    out[:] = [ai + bi for ai, bi in zip(a, b)]
    return out


def multiply(
    a: Sequence[float], b: Sequence[float], out: DualQuaternion | None = None
) -> DualQuaternion:
    """Return the product ``a * b``, applying ``b`` first then ``a``.

    ``real = a.real * b.real`` and ``dual = a.real * b.dual + a.dual * b.real``.
    """
    _check(a, "a")
    _check(b, "b")
    real: quaternion.Quaternion = quaternion.multiply(a[0:4], b[0:4])
    dual: quaternion.Quaternion = quaternion.add(
        quaternion.multiply(a[0:4], b[4:8]), quaternion.multiply(a[4:8], b[0:4])
    )
    return _write(real, dual, out)


def scale(
    dual_quaternion: Sequence[float],
    scalar: float,
    out: DualQuaternion | None = None,
) -> DualQuaternion:
    """Multiply every component by ``scalar``."""
    _check(dual_quaternion)
    out = vector_out(out, SIZE)
    out[:] = [value * scalar for value in dual_quaternion]
    return out


def dot(a: Sequence[float], b: Sequence[float]) -> float:
    """Return the dot product of the real parts."""
    _check(a, "a")
    _check(b, "b")
    return quaternion.dot(a[0:4], b[0:4])


def get_magnitude(dual_quaternion: Sequence[float]) -> float:
    """Return the magnitude of the real part."""
    _check(dual_quaternion)
    return quaternion.get_magnitude(dual_quaternion[0:4])


def get_squared_magnitude(dual_quaternion: Sequence[float]) -> float:
    """Return the squared magnitude of the real part."""
    _check(dual_quaternion)
    return quaternion.get_squared_magnitude(dual_quaternion[0:4])


def lerp(
    a: Sequence[float],
    b: Sequence[float],
    t: float,
    out: DualQuaternion | None = None,
) -> DualQuaternion:
    """Linearly interpolate along the shorter path, without renormalizing.

    ``b`` is weighted by ``-t`` when the real parts lie in opposite
    hemispheres.
    """
    mt: float = 1.0 - t
    if dot(a, b) < 0.0:
        t = -t
    out = vector_out(out, SIZE)
    out[:] = [ai * mt + bi * t for ai, bi in zip(a, b)]
    return out


def invert(
    dual_quaternion: Sequence[float], out: DualQuaternion | None = None
) -> DualQuaternion:
    """Return the inverse transform of a dual quaternion.

    Both parts are conjugated and divided by the squared magnitude of the
    real part. A zero real part propagates ``inf``/``nan``.
    """
    inv_sqm: float = ieee_divide(1.0, get_squared_magnitude(dual_quaternion))
    return from_values(
        -dual_quaternion[0] * inv_sqm,
        -dual_quaternion[1] * inv_sqm,
        -dual_quaternion[2] * inv_sqm,
        dual_quaternion[3] * inv_sqm,
        -dual_quaternion[4] * inv_sqm,
        -dual_quaternion[5] * inv_sqm,
        -dual_quaternion[6] * inv_sqm,
        dual_quaternion[7] * inv_sqm,
        out,
    )


def conjugate(
    dual_quaternion: Sequence[float], out: DualQuaternion | None = None
) -> DualQuaternion:
    """Conjugate both quaternion parts."""
    _check(dual_quaternion)
    return _write(
        quaternion.conjugate(dual_quaternion[0:4]),
        quaternion.conjugate(dual_quaternion[4:8]),
        out,
    )


def normalize(
    dual_quaternion: Sequence[float], out: DualQuaternion | None = None
) -> DualQuaternion:
    """Scale to a unit real part and make the dual part orthogonal to it.

    A zero real part cannot be normalized and is copied unchanged.
    """
    magnitude: float = get_magnitude(dual_quaternion)
    if magnitude == 0.0:
        return copy(dual_quaternion, out)

    real: list[float] = [value / magnitude for value in dual_quaternion[0:4]]
    dual: Sequence[float] = dual_quaternion[4:8]
    a_dot_b: float = quaternion.dot(real, dual)
    return _write(
        real,
        [(bi - ai * a_dot_b) / magnitude for ai, bi in zip(real, dual)],
        out,
    )


def equals(a: Sequence[float], b: Sequence[float], eps: float = EPSILON) -> bool:
    """Return True when two dual quaternions are approximately equal."""
    return seq_approx_relative(a, b, eps)


def exact_equals(a: Sequence[float], b: Sequence[float]) -> bool:
    """Return True when two dual quaternions are exactly equal."""
    return seq_exact(a, b)
