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
Quaternion operations

Quaternions are lists of four floats ``(x, y, z, w)`` with the scalar part
last. Rotation quaternions are unit length, but unnormalized input is
accepted everywhere and produces the algebraically consistent result.

Conventions:
    - Hamilton product, ``multiply(a, b)`` applies ``b`` first then ``a``
    - Quaternions rotate active vectors, ``v' = q * v * q^-1``
    - ``q`` and ``-q`` represent the same rotation

Every operation that produces a quaternion takes an optional ``out``
destination that may alias an operand.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from oasis_math.config.math_params import EPSILON
from oasis_math.config.math_params import ROTATION_EPSILON
from oasis_math.linalg import matrix3
from oasis_math.linalg import matrix4
from oasis_math.math_utils.approx import seq_approx_relative
from oasis_math.math_utils.approx import seq_exact
from oasis_math.math_utils.sampling import resolve_generator
from oasis_math.math_utils.validation import ieee_divide
from oasis_math.math_utils.validation import require_matrix_size
from oasis_math.math_utils.validation import require_vector_size
from oasis_math.math_utils.validation import vector_out
from oasis_math.vector import vector3


_LOG: logging.Logger = logging.getLogger(__name__)


Quaternion = list[float]

# Number of components in a quaternion
SIZE: int = 4

# Axis orders accepted by from_euler, listed in order of application
EULER_ORDERS: tuple[str, ...] = ("xyz", "xzy", "yxz", "yzx", "zxy", "zyx")


@dataclass(frozen=True)
class AxisAngle:
    """Rotation of ``angle`` radians around a unit ``axis``."""

    axis: tuple[float, float, float]
    angle: float


def create() -> Quaternion:
    """Return the identity quaternion."""
    return [0.0, 0.0, 0.0, 1.0]


def from_values(
    x: float, y: float, z: float, w: float, out: Quaternion | None = None
) -> Quaternion:
    """Build a quaternion from its components."""
    out = vector_out(out, SIZE)
    out[:] = [x, y, z, w]
    return out


def _check(quaternion: Sequence[float], name: str = "quaternion") -> None:
    require_vector_size(quaternion, SIZE, name)


def identity(out: Quaternion | None = None) -> Quaternion:
    """Reset a quaternion to the identity rotation."""
    return from_values(0.0, 0.0, 0.0, 1.0, out)


def copy(quaternion: Sequence[float], out: Quaternion | None = None) -> Quaternion:
    """Copy a quaternion into ``out``."""
    _check(quaternion)
    return from_values(quaternion[0], quaternion[1], quaternion[2], quaternion[3], out)


def add(
    a: Sequence[float], b: Sequence[float], out: Quaternion | None = None
) -> Quaternion:
    """Add two quaternions component-wise."""
    _check(a, "a")
    _check(b, "b")
    return from_values(a[0] + b[0], a[1] + b[1], a[2] + b[2], a[3] + b[3], out)


def scale(
    quaternion: Sequence[float], scalar: float, out: Quaternion | None = None
) -> Quaternion:
    """Multiply every component by ``scalar``."""
    _check(quaternion)
    return from_values(
        quaternion[0] * scalar,
        quaternion[1] * scalar,
        quaternion[2] * scalar,
        quaternion[3] * scalar,
        out,
    )


def dot(a: Sequence[float], b: Sequence[float]) -> float:
    """Return the four-component dot product."""
    _check(a, "a")
    _check(b, "b")
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2] + a[3] * b[3]


def lerp(
    a: Sequence[float], b: Sequence[float], t: float, out: Quaternion | None = None
) -> Quaternion:
    """Linearly interpolate component-wise, without renormalizing."""
    _check(a, "a")
    _check(b, "b")
    return from_values(
        a[0] + t * (b[0] - a[0]),
        a[1] + t * (b[1] - a[1]),
        a[2] + t * (b[2] - a[2]),
        a[3] + t * (b[3] - a[3]),
        out,
    )


def get_magnitude(quaternion: Sequence[float]) -> float:
    """Return the quaternion norm."""
    _check(quaternion)
    return math.hypot(*quaternion)


def get_squared_magnitude(quaternion: Sequence[float]) -> float:
    """Return the squared quaternion norm."""
    return dot(quaternion, quaternion)


def normalize(
    quaternion: Sequence[float], out: Quaternion | None = None
) -> Quaternion:
    """Scale a quaternion to unit length.

    The zero quaternion normalizes to all ``nan``.
    """
    inv_length: float = ieee_divide(1.0, get_magnitude(quaternion))
    return scale(quaternion, inv_length, out)


def multiply(
    a: Sequence[float], b: Sequence[float], out: Quaternion | None = None
) -> Quaternion:
    """Return the Hamilton product ``a * b``.

    As rotations, the product applies ``b`` first and ``a`` second.
    """
    _check(a, "a")
    _check(b, "b")
    ax: float = a[0]
    ay: float = a[1]
    az: float = a[2]
    aw: float = a[3]
    bx: float = b[0]
    by: float = b[1]
    bz: float = b[2]
    bw: float = b[3]
    return from_values(
        ax * bw + aw * bx + ay * bz - az * by,
        ay * bw + aw * by + az * bx - ax * bz,
        az * bw + aw * bz + ax * by - ay * bx,
        aw * bw - ax * bx - ay * by - az * bz,
        out,
    )


def conjugate(
    quaternion: Sequence[float], out: Quaternion | None = None
) -> Quaternion:
    """Negate the vector part."""
    _check(quaternion)
    return from_values(
        -quaternion[0], -quaternion[1], -quaternion[2], quaternion[3], out
    )


def invert(quaternion: Sequence[float], out: Quaternion | None = None) -> Quaternion:
    """Return the multiplicative inverse ``conj(q) / |q|^2``.

    The zero quaternion has no inverse and maps to the zero quaternion.
    """
    squared_magnitude: float = get_squared_magnitude(quaternion)
    if squared_magnitude == 0.0:
        return from_values(0.0, 0.0, 0.0, 0.0, out)
    inv_dot: float = 1.0 / squared_magnitude
    return from_values(
        -quaternion[0] * inv_dot,
        -quaternion[1] * inv_dot,
        -quaternion[2] * inv_dot,
        quaternion[3] * inv_dot,
        out,
    )


def rotate_x(
    quaternion: Sequence[float], radians: float, out: Quaternion | None = None
) -> Quaternion:
    """Post-multiply by a rotation around the X axis."""
    _check(quaternion)
    ax: float = quaternion[0]
    ay: float = quaternion[1]
    az: float = quaternion[2]
    aw: float = quaternion[3]
    s: float = math.sin(radians / 2.0)
    c: float = math.cos(radians / 2.0)
    return from_values(
        ax * c + aw * s, ay * c + az * s, az * c - ay * s, aw * c - ax * s, out
    )


def rotate_y(
    quaternion: Sequence[float], radians: float, out: Quaternion | None = None
) -> Quaternion:
    """Post-multiply by a rotation around the Y axis."""
    _check(quaternion)
    ax: float = quaternion[0]
    ay: float = quaternion[1]
    az: float = quaternion[2]
    aw: float = quaternion[3]
    s: float = math.sin(radians / 2.0)
    c: float = math.cos(radians / 2.0)
    return from_values(
        ax * c - az * s, ay * c + aw * s, az * c + ax * s, aw * c - ay * s, out
    )


def rotate_z(
    quaternion: Sequence[float], radians: float, out: Quaternion | None = None
) -> Quaternion:
    """Post-multiply by a rotation around the Z axis."""
    _check(quaternion)
    ax: float = quaternion[0]
    ay: float = quaternion[1]
    az: float = quaternion[2]
    aw: float = quaternion[3]
    s: float = math.sin(radians / 2.0)
    c: float = math.cos(radians / 2.0)
    return from_values(
        ax * c + ay * s, ay * c - ax * s, az * c + aw * s, aw * c - az * s, out
    )


def calculate_w(
    quaternion: Sequence[float], out: Quaternion | None = None
) -> Quaternion:
    """Recompute ``w`` from ``x, y, z`` assuming unit length, ``w >= 0``."""
    _check(quaternion)
    x: float = quaternion[0]
    y: float = quaternion[1]
    z: float = quaternion[2]
    return from_values(x, y, z, math.sqrt(math.fabs(1.0 - x * x - y * y - z * z)), out)


def exp(quaternion: Sequence[float], out: Quaternion | None = None) -> Quaternion:
    """Return the quaternion exponential."""
    _check(quaternion)
    x: float = quaternion[0]
    y: float = quaternion[1]
    z: float = quaternion[2]
    r: float = math.hypot(x, y, z)
    et: float = math.exp(quaternion[3])
    s: float = et * math.sin(r) / r if r > 0.0 else 0.0
    return from_values(x * s, y * s, z * s, et * math.cos(r), out)


def ln(quaternion: Sequence[float], out: Quaternion | None = None) -> Quaternion:
    """Return the quaternion natural logarithm.

    The logarithm of the zero quaternion has a ``-inf`` scalar part.
    """
    _check(quaternion)
    x: float = quaternion[0]
    y: float = quaternion[1]
    z: float = quaternion[2]
    w: float = quaternion[3]
    xyz2: float = x * x + y * y + z * z
    r: float = math.sqrt(xyz2)
    t: float = math.atan2(r, w) / r if r > 0.0 else 0.0
    squared_magnitude: float = xyz2 + w * w
    half_log: float = (
        math.log(squared_magnitude) / 2.0 if squared_magnitude > 0.0 else -math.inf
    )
    return from_values(x * t, y * t, z * t, half_log, out)


def pow(
    quaternion: Sequence[float], exponent: float, out: Quaternion | None = None
) -> Quaternion:
    """Raise a quaternion to a real power, ``exp(exponent * ln(q))``."""
    return exp(scale(ln(quaternion), exponent), out)


def slerp(
    a: Sequence[float],
    b: Sequence[float],
    t: float,
    out: Quaternion | None = None,
    rotation_eps: float = ROTATION_EPSILON,
) -> Quaternion:
    """Spherically interpolate along the shorter arc.

    ``b`` is negated when the quaternions lie in opposite hemispheres. Nearly
    identical rotations fall back to linear interpolation.

    Args:
        a: Start rotation, returned at ``t = 0``
        b: End rotation, returned (up to sign) at ``t = 1``
        t: Interpolation amount
        out: Optional destination
        rotation_eps: Gap below which the arc is treated as degenerate

    Returns:
        The interpolated quaternion, written to ``out``
    """
    _check(a, "a")
    _check(b, "b")
    bx: float = b[0]
    by: float = b[1]
    bz: float = b[2]
    bw: float = b[3]

    cosom: float = a[0] * bx + a[1] * by + a[2] * bz + a[3] * bw
    if cosom < 0.0:
        cosom = -cosom
        bx = -bx
        by = -by
        bz = -bz
        bw = -bw

    scale0: float
    scale1: float
    if 1.0 - cosom > rotation_eps:
        omega: float = math.acos(cosom if cosom < 1.0 else 1.0)
        sinom: float = math.sin(omega)
        scale0 = math.sin((1.0 - t) * omega) / sinom
        scale1 = math.sin(t * omega) / sinom
    else:
        scale0 = 1.0 - t
        scale1 = t

    return from_values(
        a[0] * scale0 + bx * scale1,
        a[1] * scale0 + by * scale1,
        a[2] * scale0 + bz * scale1,
        a[3] * scale0 + bw * scale1,
        out,
    )


def sqlerp(
    a: Sequence[float],
    b: Sequence[float],
    c: Sequence[float],
    d: Sequence[float],
    t: float,
    out: Quaternion | None = None,
) -> Quaternion:
    """Spherical quadrangle interpolation from ``a`` to ``d`` via ``b, c``."""
    outer: Quaternion = slerp(a, d, t)
    inner: Quaternion = slerp(b, c, t)
    return slerp(outer, inner, 2.0 * t * (1.0 - t), out)


def set_axis_angle(
    axis_angle: AxisAngle, out: Quaternion | None = None
) -> Quaternion:
    """Create a rotation from a unit axis and an angle in radians.

    The axis is used as given; pass a unit vector.
    """
    axis: Sequence[float] = axis_angle.axis
    require_vector_size(axis, 3, "axis")
    half: float = axis_angle.angle / 2.0
    s: float = math.sin(half)
    return from_values(axis[0] * s, axis[1] * s, axis[2] * s, math.cos(half), out)


def get_axis_angle(
    quaternion: Sequence[float], rotation_eps: float = ROTATION_EPSILON
) -> AxisAngle:
    """Return the axis and angle of a unit quaternion.

    The angle is in ``[0, 2 pi]``. A rotation too small to define an axis
    reports the X axis.
    """
    _check(quaternion)
    w: float = quaternion[3]
    radians: float = math.acos(-1.0 if w < -1.0 else 1.0 if w > 1.0 else w) * 2.0
    s: float = math.sin(radians / 2.0)
    if s > rotation_eps:
        return AxisAngle(
            axis=(quaternion[0] / s, quaternion[1] / s, quaternion[2] / s),
            angle=radians,
        )
    return AxisAngle(axis=(1.0, 0.0, 0.0), angle=radians)


def get_angle(a: Sequence[float], b: Sequence[float]) -> float:
    """Return the angle in radians of the rotation taking ``a`` to ``b``."""
    dp: float = dot(a, b)
    cosine: float = 2.0 * dp * dp - 1.0
    return math.acos(-1.0 if cosine < -1.0 else 1.0 if cosine > 1.0 else cosine)


def from_matrix3(
    matrix: Sequence[float], out: Quaternion | None = None
) -> Quaternion:
    """Create a quaternion from a 3x3 rotation matrix.

    Uses the trace when it is positive, otherwise the largest diagonal entry,
    so the square root argument stays away from zero.
    """
    require_matrix_size(matrix, matrix3.SIZE, "matrix")
    f_trace: float = matrix[0] + matrix[4] + matrix[8]
    result: list[float] = [0.0] * SIZE

    if f_trace > 0.0:
        f_root: float = math.sqrt(f_trace + 1.0)
        result[3] = f_root / 2.0
        f_root = 0.5 / f_root
        result[0] = (matrix[5] - matrix[7]) * f_root
        result[1] = (matrix[6] - matrix[2]) * f_root
        result[2] = (matrix[1] - matrix[3]) * f_root
    else:
        i: int = 0
        if matrix[4] > matrix[0]:
            i = 1
        if matrix[8] > matrix[i * 3 + i]:
            i = 2
        j: int = (i + 1) % 3
        k: int = (i + 2) % 3

        f_root = math.sqrt(
            matrix[i * 3 + i] - matrix[j * 3 + j] - matrix[k * 3 + k] + 1.0
        )
        result[i] = f_root / 2.0
        f_root = 0.5 / f_root
        result[3] = (matrix[j * 3 + k] - matrix[k * 3 + j]) * f_root
        result[j] = (matrix[j * 3 + i] + matrix[i * 3 + j]) * f_root
        result[k] = (matrix[k * 3 + i] + matrix[i * 3 + k]) * f_root

    out = vector_out(out, SIZE)
    out[:] = result
    return out


def from_matrix4(
    matrix: Sequence[float], out: Quaternion | None = None
) -> Quaternion:
    """Create a quaternion from the rotation of an affine 4x4 transform."""
    return matrix4.get_rotation(matrix, out)


def to_matrix3(
    quaternion: Sequence[float], out: matrix3.Matrix3 | None = None
) -> matrix3.Matrix3:
    """Return the 3x3 rotation matrix of a quaternion."""
    return matrix3.from_quaternion(quaternion, out)


def to_matrix4(
    quaternion: Sequence[float], out: matrix4.Matrix4 | None = None
) -> matrix4.Matrix4:
    """Return the 4x4 rotation matrix of a quaternion."""
    return matrix4.from_quaternion(quaternion, out)


def _axis_rotation(axis: str, degrees: float) -> Quaternion:
    half: float = math.radians(degrees) / 2.0
    s: float = math.sin(half)
    c: float = math.cos(half)
    if axis == "x":
        return [s, 0.0, 0.0, c]
    if axis == "y":
        return [0.0, s, 0.0, c]
    return [0.0, 0.0, s, c]


def from_euler(
    x: float,
    y: float,
    z: float,
    order: str = "zyx",
    out: Quaternion | None = None,
) -> Quaternion:
    """Create a rotation from Euler angles in degrees.

    ``order`` names intrinsic Tait-Bryan axes: each rotation turns around
    an axis of the frame produced by the rotations before it. The default
    ``"zyx"`` yaws around Z, pitches around the new Y, then rolls around the
    newest X, giving ``q = qz * qy * qx``. This equals applying the same
    rotations around the fixed axes in reverse order.

    Args:
        x: Rotation around the X axis in degrees
        y: Rotation around the Y axis in degrees
        z: Rotation around the Z axis in degrees
        order: One of ``EULER_ORDERS``
        out: Optional destination

    Returns:
        The rotation, written to ``out``

    Raises:
        ValueError: If ``order`` is not a permutation of ``"xyz"``
    """
    if order not in EULER_ORDERS:
        raise ValueError(f"order must be one of {EULER_ORDERS}")
    angles: dict[str, float] = {"x": x, "y": y, "z": z}
    result: Quaternion = create()
    for axis in order:
        multiply(result, _axis_rotation(axis, angles[axis]), result)
    return copy(result, out)


def from_euler_xyz(
    x: float, y: float, z: float, out: Quaternion | None = None
) -> Quaternion:
    """Create a rotation from intrinsic X-Y'-Z'' angles in degrees."""
    return from_euler(x, y, z, "xyz", out)


def from_euler_xzy(
    x: float, y: float, z: float, out: Quaternion | None = None
) -> Quaternion:
    """Create a rotation from intrinsic X-Z'-Y'' angles in degrees."""
    return from_euler(x, y, z, "xzy", out)


def from_euler_yxz(
    x: float, y: float, z: float, out: Quaternion | None = None
) -> Quaternion:
    """Create a rotation from intrinsic Y-X'-Z'' angles in degrees."""
    return from_euler(x, y, z, "yxz", out)


def from_euler_yzx(
    x: float, y: float, z: float, out: Quaternion | None = None
) -> Quaternion:
    """Create a rotation from intrinsic Y-Z'-X'' angles in degrees."""
    return from_euler(x, y, z, "yzx", out)


def from_euler_zxy(
    x: float, y: float, z: float, out: Quaternion | None = None
) -> Quaternion:
    """Create a rotation from intrinsic Z-X'-Y'' angles in degrees."""
    return from_euler(x, y, z, "zxy", out)


def from_euler_zyx(
    x: float, y: float, z: float, out: Quaternion | None = None
) -> Quaternion:
    """Create a rotation from intrinsic Z-Y'-X'' angles in degrees."""
    return from_euler(x, y, z, "zyx", out)


def from_axes(
    view: Sequence[float],
    right: Sequence[float],
    up: Sequence[float],
    out: Quaternion | None = None,
) -> Quaternion:
    """Create a rotation from a camera's view, right and up directions.

    The three directions form the rows of the basis, with the view direction
    along negative Z. The result is normalized.
    """
    require_vector_size(view, 3, "view")
    require_vector_size(right, 3, "right")
    require_vector_size(up, 3, "up")
    basis: matrix3.Matrix3 = matrix3.from_values(
        right[0],
        up[0],
        -view[0],
        right[1],
        up[1],
        -view[1],
        right[2],
        up[2],
        -view[2],
    )
    return normalize(from_matrix3(basis), out)


def from_rotation_to(
    a: Sequence[float],
    b: Sequence[float],
    out: Quaternion | None = None,
    rotation_eps: float = ROTATION_EPSILON,
) -> Quaternion:
    """Create the shortest rotation taking unit vector ``a`` to unit vector ``b``.

    Antiparallel vectors admit infinitely many shortest rotations; a half
    turn around an axis perpendicular to ``a`` is returned.
    """
    dp: float = vector3.dot(a, b)

    if dp < rotation_eps - 1.0:
        axis: vector3.Vector3 = vector3.cross((1.0, 0.0, 0.0), a)
        if vector3.get_magnitude(axis) < rotation_eps:
            vector3.cross((0.0, 1.0, 0.0), a, axis)
        _LOG.debug("Antiparallel vectors, half turn around %s", axis)
        vector3.normalize(axis, axis)
        return set_axis_angle(
            AxisAngle(axis=(axis[0], axis[1], axis[2]), angle=math.pi), out
        )

    if dp > 1.0 - rotation_eps:
        return identity(out)

    axis = vector3.cross(a, b)
    return normalize(from_values(axis[0], axis[1], axis[2], 1.0 + dp), out)


def random(
    out: Quaternion | None = None, rng: np.random.Generator | None = None
) -> Quaternion:
    """Return a uniformly distributed random unit quaternion.

    Uses Shoemake's subgroup algorithm with three uniform samples.
    """
    u1, u2, u3 = (float(value) for value in resolve_generator(rng).random(3))
    sq_inv: float = math.sqrt(1.0 - u1)
    sq: float = math.sqrt(u1)
    theta2: float = 2.0 * math.pi * u2
    theta3: float = 2.0 * math.pi * u3
    return from_values(
        sq_inv * math.sin(theta2),
        sq_inv * math.cos(theta2),
        sq * math.sin(theta3),
        sq * math.cos(theta3),
        out,
    )


def equals(a: Sequence[float], b: Sequence[float], eps: float = EPSILON) -> bool:
    """Return True when two quaternions are component-wise approximately equal."""
    return seq_approx_relative(a, b, eps)


def equals_rotation(
    a: Sequence[float], b: Sequence[float], eps: float = EPSILON
) -> bool:
    """Return True when two unit quaternions represent the same rotation.

    ``q`` and ``-q`` compare equal.
    """
    return math.fabs(dot(a, b)) >= 1.0 - eps


def exact_equals(a: Sequence[float], b: Sequence[float]) -> bool:
    """Return True when two quaternions are exactly equal."""
    return seq_exact(a, b)
