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
4x4 matrix operations

Matrices are column-major lists of sixteen floats. Element (r, c) is stored
at ``data[c * 4 + r]``, which is the layout expected by OpenGL-style graphics
APIs. For an affine transform the translation lives in entries 12, 13, 14.

Quaternions are ``(x, y, z, w)`` lists. Dual quaternions are eight floats
with the real part first.

Every operation that produces a matrix takes an optional ``out`` destination
that may alias an operand. Operand entries are read into locals before ``out``
is written, so in-place calls such as ``transpose(m, m)`` or
``rotate(m, r, axis, m)`` are safe.

Decomposition into translation, scale and rotation assumes an affine matrix
without skew and with non-zero scale on each axis. A zero-scale axis is not
rejected: ``get_rotation`` then propagates ``inf``/``nan``.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from oasis_math.config.math_params import EPSILON
from oasis_math.math_utils.approx import approx
from oasis_math.math_utils.approx import seq_approx_relative
from oasis_math.math_utils.approx import seq_exact
from oasis_math.math_utils.errors import MagnitudeError
from oasis_math.math_utils.errors import SingularMatrixError
from oasis_math.math_utils.validation import ieee_divide
from oasis_math.math_utils.validation import matrix_out
from oasis_math.math_utils.validation import require_matrix_size
from oasis_math.math_utils.validation import require_vector_size
from oasis_math.math_utils.validation import vector_out


_LOG: logging.Logger = logging.getLogger(__name__)


Matrix4 = list[float]

# Number of entries in a 4x4 matrix
SIZE: int = 16


@dataclass(frozen=True)
class FieldOfView:
    """Asymmetric field of view, as reported by VR headsets."""

    # Angle above the view direction in degrees
    up_degrees: float
    # Angle below the view direction in degrees
    down_degrees: float
    # Angle left of the view direction in degrees
    left_degrees: float
    # Angle right of the view direction in degrees
    right_degrees: float


def create() -> Matrix4:
    """Return a zero-filled 4x4 matrix."""
    return [0.0] * SIZE


def from_values(
    c0r0: float,
    c0r1: float,
    c0r2: float,
    c0r3: float,
    c1r0: float,
    c1r1: float,
    c1r2: float,
    c1r3: float,
    c2r0: float,
    c2r1: float,
    c2r2: float,
    c2r3: float,
    c3r0: float,
    c3r1: float,
    c3r2: float,
    c3r3: float,
    out: Matrix4 | None = None,
) -> Matrix4:
    """Build a matrix from its entries in column-major order."""
    out = matrix_out(out, SIZE)
    out[:] = [
        c0r0,
        c0r1,
        c0r2,
        c0r3,
        c1r0,
        c1r1,
        c1r2,
        c1r3,
        c2r0,
        c2r1,
        c2r2,
        c2r3,
        c3r0,
        c3r1,
        c3r2,
        c3r3,
    ]
    return out


def _write(values: list[float], out: Matrix4 | None) -> Matrix4:
    out = matrix_out(out, SIZE)
    out[:] = values
    return out


def identity(out: Matrix4 | None = None) -> Matrix4:
    """Reset a matrix to identity."""
    return _write([1.0 if i % 5 == 0 else 0.0 for i in range(SIZE)], out)


def copy(matrix: Sequence[float], out: Matrix4 | None = None) -> Matrix4:
    """Copy a matrix into ``out``."""
    require_matrix_size(matrix, SIZE, "matrix")
    return _write(list(matrix), out)


def from_translation(
    vector: Sequence[float], out: Matrix4 | None = None
) -> Matrix4:
    """Create a translation by a 3-vector."""
    require_vector_size(vector, 3, "vector")
    return _write(
        [
            1.0,
            0.0,
            0.0,
            0.0,
            0.0,
            1.0,
            0.0,
            0.0,
            0.0,
            0.0,
            1.0,
            0.0,
            vector[0],
            vector[1],
            vector[2],
            1.0,
        ],
        out,
    )


def from_scaling(vector: Sequence[float], out: Matrix4 | None = None) -> Matrix4:
    """Create a scaling by a 3-vector."""
    require_vector_size(vector, 3, "vector")
    return _write(
        [
            vector[0],
            0.0,
            0.0,
            0.0,
            0.0,
            vector[1],
            0.0,
            0.0,
            0.0,
            0.0,
            vector[2],
            0.0,
            0.0,
            0.0,
            0.0,
            1.0,
        ],
        out,
    )


def _unit_axis(axis: Sequence[float]) -> tuple[float, float, float]:
    require_vector_size(axis, 3, "axis")
    x: float = axis[0]
    y: float = axis[1]
    z: float = axis[2]
    length: float = math.hypot(x, y, z)
    if length == 0.0:
        raise MagnitudeError("Rotation axis must have non-zero length")
    inv_length: float = 1.0 / length
    return (x * inv_length, y * inv_length, z * inv_length)


def _rodrigues(radians: float, axis: Sequence[float]) -> list[float]:
    # Upper-left 3x3 rotation block in column-major order
    x, y, z = _unit_axis(axis)
    s: float = math.sin(radians)
    c: float = math.cos(radians)
    t: float = 1.0 - c
    return [
        x * x * t + c,
        y * x * t + z * s,
        z * x * t - y * s,
        x * y * t - z * s,
        y * y * t + c,
        z * y * t + x * s,
        x * z * t + y * s,
        y * z * t - x * s,
        z * z * t + c,
    ]


def from_rotation(
    radians: float, axis: Sequence[float], out: Matrix4 | None = None
) -> Matrix4:
    """Create a rotation of ``radians`` around an arbitrary axis.

    The axis does not need to be unit length; it is normalized before
    Rodrigues' rotation formula is applied.

    Args:
        radians: Rotation angle in radians
        axis: Rotation axis as a 3-vector
        out: Optional destination

    Returns:
        The rotation matrix, written to ``out``

    Raises:
        MagnitudeError: If the axis has zero length
    """
    r: list[float] = _rodrigues(radians, axis)
    return _write(
        [
            r[0],
            r[1],
            r[2],
            0.0,
            r[3],
            r[4],
            r[5],
            0.0,
            r[6],
            r[7],
            r[8],
            0.0,
            0.0,
            0.0,
            0.0,
            1.0,
        ],
        out,
    )


def from_x_rotation(radians: float, out: Matrix4 | None = None) -> Matrix4:
    """Create a rotation around the X axis."""
    s: float = math.sin(radians)
    c: float = math.cos(radians)
    return _write(
        [1.0, 0.0, 0.0, 0.0, 0.0, c, s, 0.0, 0.0, -s, c, 0.0, 0.0, 0.0, 0.0, 1.0],
        out,
    )


def from_y_rotation(radians: float, out: Matrix4 | None = None) -> Matrix4:
    """Create a rotation around the Y axis."""
    s: float = math.sin(radians)
    c: float = math.cos(radians)
    return _write(
        [c, 0.0, -s, 0.0, 0.0, 1.0, 0.0, 0.0, s, 0.0, c, 0.0, 0.0, 0.0, 0.0, 1.0],
        out,
    )


def from_z_rotation(radians: float, out: Matrix4 | None = None) -> Matrix4:
    """Create a rotation around the Z axis."""
    s: float = math.sin(radians)
    c: float = math.cos(radians)
    return _write(
        [c, s, 0.0, 0.0, -s, c, 0.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 0.0, 1.0],
        out,
    )


def _quaternion_basis(rotation: Sequence[float]) -> list[float]:
    # Rotation block of a quaternion in column-major order
    require_vector_size(rotation, 4, "rotation")
    x: float = rotation[0]
    y: float = rotation[1]
    z: float = rotation[2]
    w: float = rotation[3]

    x2: float = x + x
    y2: float = y + y
    z2: float = z + z
    xx: float = x * x2
    xy: float = x * y2
    xz: float = x * z2
    yy: float = y * y2
    yz: float = y * z2
    zz: float = z * z2
    wx: float = w * x2
    wy: float = w * y2
    wz: float = w * z2

    return [
        1.0 - (yy + zz),
        xy + wz,
        xz - wy,
        xy - wz,
        1.0 - (xx + zz),
        yz + wx,
        xz + wy,
        yz - wx,
        1.0 - (xx + yy),
    ]


def from_quaternion(
    quaternion: Sequence[float], out: Matrix4 | None = None
) -> Matrix4:
    """Create a rotation matrix from a quaternion in xyzw order.

    A non-unit quaternion yields a rotation composed with a uniform scale by
    its squared magnitude; this is not treated as an error.
    """
    return from_rotation_translation(quaternion, (0.0, 0.0, 0.0), out)


def from_rotation_translation(
    rotation: Sequence[float],
    translation: Sequence[float],
    out: Matrix4 | None = None,
) -> Matrix4:
    """Create a transform that rotates then translates."""
    require_vector_size(translation, 3, "translation")
    r: list[float] = _quaternion_basis(rotation)
    return _write(
        [
            r[0],
            r[1],
            r[2],
            0.0,
            r[3],
            r[4],
            r[5],
            0.0,
            r[6],
            r[7],
            r[8],
            0.0,
            translation[0],
            translation[1],
            translation[2],
            1.0,
        ],
        out,
    )


def from_rotation_translation_scale(
    rotation: Sequence[float],
    translation: Sequence[float],
    scaling: Sequence[float],
    out: Matrix4 | None = None,
) -> Matrix4:
    """Create a transform that scales, rotates, then translates."""
    return from_rotation_translation_scale_origin(
        rotation, translation, scaling, (0.0, 0.0, 0.0), out
    )


def from_rotation_translation_scale_origin(
    rotation: Sequence[float],
    translation: Sequence[float],
    scaling: Sequence[float],
    origin: Sequence[float],
    out: Matrix4 | None = None,
) -> Matrix4:
    """Create a transform that scales and rotates about ``origin``.

    Equivalent to translating by ``translation + origin``, rotating, scaling,
    and translating by ``-origin``.
    """
    require_vector_size(translation, 3, "translation")
    require_vector_size(scaling, 3, "scaling")
    require_vector_size(origin, 3, "origin")
    r: list[float] = _quaternion_basis(rotation)

    sx: float = scaling[0]
    sy: float = scaling[1]
    sz: float = scaling[2]
    ox: float = origin[0]
    oy: float = origin[1]
    oz: float = origin[2]

    o0: float = r[0] * sx
    o1: float = r[1] * sx
    o2: float = r[2] * sx
    o4: float = r[3] * sy
    o5: float = r[4] * sy
    o6: float = r[5] * sy
    o8: float = r[6] * sz
    o9: float = r[7] * sz
    o10: float = r[8] * sz

    return _write(
        [
            o0,
            o1,
            o2,
            0.0,
            o4,
            o5,
            o6,
            0.0,
            o8,
            o9,
            o10,
            0.0,
            translation[0] + ox - (o0 * ox + o4 * oy + o8 * oz),
            translation[1] + oy - (o1 * ox + o5 * oy + o9 * oz),
            translation[2] + oz - (o2 * ox + o6 * oy + o10 * oz),
            1.0,
        ],
        out,
    )


def from_dual_quaternion(
    dual_quaternion: Sequence[float], out: Matrix4 | None = None
) -> Matrix4:
    """Create a rigid transform from a dual quaternion.

    The translation is ``2 * dual * conj(real) / |real|^2``. A zero real part
    skips the division and uses the unnormalized numerator.

    Args:
        dual_quaternion: Eight floats, real part then dual part
        out: Optional destination

    Returns:
        The transform, written to ``out``
    """
    require_vector_size(dual_quaternion, 8, "dual_quaternion")
    bx: float = -dual_quaternion[0]
    by: float = -dual_quaternion[1]
    bz: float = -dual_quaternion[2]
    bw: float = dual_quaternion[3]
    ax: float = dual_quaternion[4]
    ay: float = dual_quaternion[5]
    az: float = dual_quaternion[6]
    aw: float = dual_quaternion[7]

    tx: float = (ax * bw + aw * bx + ay * bz - az * by) * 2.0
    ty: float = (ay * bw + aw * by + az * bx - ax * bz) * 2.0
    tz: float = (az * bw + aw * bz + ax * by - ay * bx) * 2.0

    magnitude: float = bx * bx + by * by + bz * bz + bw * bw
    if magnitude > 0.0:
        tx /= magnitude
        ty /= magnitude
        tz /= magnitude

    return from_rotation_translation(dual_quaternion[0:4], (tx, ty, tz), out)


def frustum(
    left: float,
    right: float,
    bottom: float,
    top: float,
    near: float,
    far: float,
    out: Matrix4 | None = None,
) -> Matrix4:
    """Create a perspective frustum with a [-1, 1] clip-space depth range.

    An infinite ``far`` produces an infinite-far projection.
    """
    rl: float = 1.0 / (right - left)
    tb: float = 1.0 / (top - bottom)
    m10: float
    m14: float
    if math.isinf(far) and far > 0.0:
        m10 = -1.0
        m14 = -2.0 * near
    else:
        nf: float = 1.0 / (near - far)
        m10 = (far + near) * nf
        m14 = 2.0 * far * near * nf
    return _write(
        [
            near * 2.0 * rl,
            0.0,
            0.0,
            0.0,
            0.0,
            near * 2.0 * tb,
            0.0,
            0.0,
            (right + left) * rl,
            (top + bottom) * tb,
            m10,
            -1.0,
            0.0,
            0.0,
            m14,
            0.0,
        ],
        out,
    )


def _perspective(
    fov: float, aspect: float, m10: float, m14: float, out: Matrix4 | None
) -> Matrix4:
    f: float = 1.0 / math.tan(fov / 2.0)
    return _write(
        [
            f / aspect,
            0.0,
            0.0,
            0.0,
            0.0,
            f,
            0.0,
            0.0,
            0.0,
            0.0,
            m10,
            -1.0,
            0.0,
            0.0,
            m14,
            0.0,
        ],
        out,
    )


def perspective(
    fov: float,
    aspect: float,
    near: float,
    far: float,
    out: Matrix4 | None = None,
) -> Matrix4:
    """Create a perspective projection with a [-1, 1] depth range (OpenGL).

    Args:
        fov: Vertical field of view in radians
        aspect: Width divided by height
        near: Distance to the near plane
        far: Distance to the far plane, may be ``math.inf``
        out: Optional destination

    Returns:
        The projection, written to ``out``
    """
    if math.isinf(far) and far > 0.0:
        return _perspective(fov, aspect, -1.0, -2.0 * near, out)
    nf: float = 1.0 / (near - far)
    return _perspective(fov, aspect, (far + near) * nf, 2.0 * far * near * nf, out)


def perspective_gpu(
    fov: float,
    aspect: float,
    near: float,
    far: float,
    out: Matrix4 | None = None,
) -> Matrix4:
    """Create a perspective projection with a [0, 1] depth range (WebGPU)."""
    if math.isinf(far) and far > 0.0:
        return _perspective(fov, aspect, -1.0, -near, out)
    fnf: float = far / (near - far)
    return _perspective(fov, aspect, fnf, near * fnf, out)


def perspective_from_field_of_view(
    fov: FieldOfView,
    near: float,
    far: float,
    out: Matrix4 | None = None,
) -> Matrix4:
    """Create a perspective projection from an asymmetric field of view."""
    up_tan: float = math.tan(math.radians(fov.up_degrees))
    down_tan: float = math.tan(math.radians(fov.down_degrees))
    left_tan: float = math.tan(math.radians(fov.left_degrees))
    right_tan: float = math.tan(math.radians(fov.right_degrees))
    x_scale: float = 2.0 / (left_tan + right_tan)
    y_scale: float = 2.0 / (up_tan + down_tan)
    nf: float = near - far
    return _write(
        [
            x_scale,
            0.0,
            0.0,
            0.0,
            0.0,
            y_scale,
            0.0,
            0.0,
            -((left_tan - right_tan) * x_scale / 2.0),
            (up_tan - down_tan) * y_scale / 2.0,
            far / nf,
            -1.0,
            0.0,
            0.0,
            far * near / nf,
            0.0,
        ],
        out,
    )


def ortho(
    left: float,
    right: float,
    bottom: float,
    top: float,
    near: float,
    far: float,
    out: Matrix4 | None = None,
) -> Matrix4:
    """Create an orthographic projection with a [-1, 1] depth range."""
    lr: float = 1.0 / (left - right)
    bt: float = 1.0 / (bottom - top)
    nf: float = 1.0 / (near - far)
    return _write(
        [
            -2.0 * lr,
            0.0,
            0.0,
            0.0,
            0.0,
            -2.0 * bt,
            0.0,
            0.0,
            0.0,
            0.0,
            2.0 * nf,
            0.0,
            (left + right) * lr,
            (top + bottom) * bt,
            (far + near) * nf,
            1.0,
        ],
        out,
    )


def ortho_gpu(
    left: float,
    right: float,
    bottom: float,
    top: float,
    near: float,
    far: float,
    out: Matrix4 | None = None,
) -> Matrix4:
    """Create an orthographic projection with a [0, 1] depth range."""
    lr: float = 1.0 / (left - right)
    bt: float = 1.0 / (bottom - top)
    nf: float = 1.0 / (near - far)
    return _write(
        [
            -2.0 * lr,
            0.0,
            0.0,
            0.0,
            0.0,
            -2.0 * bt,
            0.0,
            0.0,
            0.0,
            0.0,
            nf,
            0.0,
            (left + right) * lr,
            (top + bottom) * bt,
            near * nf,
            1.0,
        ],
        out,
    )


def _normalized_or_zero(x: float, y: float, z: float) -> tuple[float, float, float]:
    length: float = math.hypot(x, y, z)
    if length == 0.0:
        return (0.0, 0.0, 0.0)
    inv_length: float = 1.0 / length
    return (x * inv_length, y * inv_length, z * inv_length)


def look_at(
    eye: Sequence[float],
    center: Sequence[float],
    up: Sequence[float],
    out: Matrix4 | None = None,
) -> Matrix4:
    """Create a view matrix for a camera at ``eye`` looking at ``center``.

    This is the inverse of ``target_to``. If ``eye`` and ``center`` coincide
    the view direction is undefined and the identity is returned.
    """
    require_vector_size(eye, 3, "eye")
    require_vector_size(center, 3, "center")
    require_vector_size(up, 3, "up")
    eyex: float = eye[0]
    eyey: float = eye[1]
    eyez: float = eye[2]

    if approx(eyex, center[0]) and approx(eyey, center[1]) and approx(eyez, center[2]):
        _LOG.debug("look_at eye and center coincide, returning identity")
        return identity(out)

    z0, z1, z2 = _normalized_or_zero(
        eyex - center[0], eyey - center[1], eyez - center[2]
    )
    x0, x1, x2 = _normalized_or_zero(
        up[1] * z2 - up[2] * z1,
        up[2] * z0 - up[0] * z2,
        up[0] * z1 - up[1] * z0,
    )
    y0, y1, y2 = _normalized_or_zero(
        z1 * x2 - z2 * x1,
        z2 * x0 - z0 * x2,
        z0 * x1 - z1 * x0,
    )

    return _write(
        [
            x0,
            y0,
            z0,
            0.0,
            x1,
            y1,
            z1,
            0.0,
            x2,
            y2,
            z2,
            0.0,
            -(x0 * eyex + x1 * eyey + x2 * eyez),
            -(y0 * eyex + y1 * eyey + y2 * eyez),
            -(z0 * eyex + z1 * eyey + z2 * eyez),
            1.0,
        ],
        out,
    )


def target_to(
    eye: Sequence[float],
    target: Sequence[float],
    up: Sequence[float],
    out: Matrix4 | None = None,
) -> Matrix4:
    """Create a model matrix that places an object at ``eye`` facing ``target``."""
    require_vector_size(eye, 3, "eye")
    require_vector_size(target, 3, "target")
    require_vector_size(up, 3, "up")
    eyex: float = eye[0]
    eyey: float = eye[1]
    eyez: float = eye[2]

    z0, z1, z2 = _normalized_or_zero(
        eyex - target[0], eyey - target[1], eyez - target[2]
    )
    x0, x1, x2 = _normalized_or_zero(
        up[1] * z2 - up[2] * z1,
        up[2] * z0 - up[0] * z2,
        up[0] * z1 - up[1] * z0,
    )

    return _write(
        [
            x0,
            x1,
            x2,
            0.0,
            z1 * x2 - z2 * x1,
            z2 * x0 - z0 * x2,
            z0 * x1 - z1 * x0,
            0.0,
            z0,
            z1,
            z2,
            0.0,
            eyex,
            eyey,
            eyez,
            1.0,
        ],
        out,
    )


def add(
    a: Sequence[float], b: Sequence[float], out: Matrix4 | None = None
) -> Matrix4:
    """Add two matrices."""
    require_matrix_size(a, SIZE, "a")
    require_matrix_size(b, SIZE, "b")
    return _write([ai + bi for ai, bi in zip(a, b)], out)


def subtract(
    a: Sequence[float], b: Sequence[float], out: Matrix4 | None = None
) -> Matrix4:
    """Subtract ``b`` from ``a``."""
    require_matrix_size(a, SIZE, "a")
    require_matrix_size(b, SIZE, "b")
    return _write([ai - bi for ai, bi in zip(a, b)], out)


def multiply(
    a: Sequence[float], b: Sequence[float], out: Matrix4 | None = None
) -> Matrix4:
    """Return the product ``a @ b``.

    Applied to a point, the result transforms by ``b`` first and ``a``
    second.
    """
    require_matrix_size(a, SIZE, "a")
    require_matrix_size(b, SIZE, "b")
    values: list[float] = [0.0] * SIZE
    for col in range(4):
        b0: float = b[col * 4]
        b1: float = b[col * 4 + 1]
        b2: float = b[col * 4 + 2]
        b3: float = b[col * 4 + 3]
        for row in range(4):
            values[col * 4 + row] = (
                b0 * a[row] + b1 * a[4 + row] + b2 * a[8 + row] + b3 * a[12 + row]
            )
    return _write(values, out)


def multiply_scalar(
    matrix: Sequence[float], scalar: float, out: Matrix4 | None = None
) -> Matrix4:
    """Multiply every entry by ``scalar``."""
    require_matrix_size(matrix, SIZE, "matrix")
    return _write([value * scalar for value in matrix], out)


def multiply_scalar_and_add(
    a: Sequence[float],
    b: Sequence[float],
    scalar: float,
    out: Matrix4 | None = None,
) -> Matrix4:
    """Return ``a + b * scalar``."""
    require_matrix_size(a, SIZE, "a")
    require_matrix_size(b, SIZE, "b")
    return _write([ai + bi * scalar for ai, bi in zip(a, b)], out)


def transpose(matrix: Sequence[float], out: Matrix4 | None = None) -> Matrix4:
    """Transpose a matrix."""
    require_matrix_size(matrix, SIZE, "matrix")
    return _write([matrix[(i % 4) * 4 + i // 4] for i in range(SIZE)], out)


def _sub_determinants(matrix: Sequence[float]) -> tuple[float, ...]:
    """Return the twelve 2x2 sub-determinants used by cofactor expansion.

    ``b00..b05`` pair the first two columns, ``b06..b11`` the last two.
    """
    a00: float = matrix[0]
    a01: float = matrix[1]
    a02: float = matrix[2]
    a03: float = matrix[3]
    a10: float = matrix[4]
    a11: float = matrix[5]
    a12: float = matrix[6]
    a13: float = matrix[7]
    a20: float = matrix[8]
    a21: float = matrix[9]
    a22: float = matrix[10]
    a23: float = matrix[11]
    a30: float = matrix[12]
    a31: float = matrix[13]
    a32: float = matrix[14]
    a33: float = matrix[15]
    return (
        a00 * a11 - a01 * a10,
        a00 * a12 - a02 * a10,
        a00 * a13 - a03 * a10,
        a01 * a12 - a02 * a11,
        a01 * a13 - a03 * a11,
        a02 * a13 - a03 * a12,
        a20 * a31 - a21 * a30,
        a20 * a32 - a22 * a30,
        a20 * a33 - a23 * a30,
        a21 * a32 - a22 * a31,
        a21 * a33 - a23 * a31,
        a22 * a33 - a23 * a32,
    )


def _determinant_from(b: tuple[float, ...]) -> float:
    return (
        b[0] * b[11]
        - b[1] * b[10]
        + b[2] * b[9]
        + b[3] * b[8]
        - b[4] * b[7]
        + b[5] * b[6]
    )


def _adjugate(matrix: Sequence[float], b: tuple[float, ...]) -> list[float]:
    a00: float = matrix[0]
    a01: float = matrix[1]
    a02: float = matrix[2]
    a03: float = matrix[3]
    a10: float = matrix[4]
    a11: float = matrix[5]
    a12: float = matrix[6]
    a13: float = matrix[7]
    a20: float = matrix[8]
    a21: float = matrix[9]
    a22: float = matrix[10]
    a23: float = matrix[11]
    a30: float = matrix[12]
    a31: float = matrix[13]
    a32: float = matrix[14]
    a33: float = matrix[15]
    b00, b01, b02, b03, b04, b05, b06, b07, b08, b09, b10, b11 = b
    return [
        a11 * b11 - a12 * b10 + a13 * b09,
        a02 * b10 - a01 * b11 - a03 * b09,
        a31 * b05 - a32 * b04 + a33 * b03,
        a22 * b04 - a21 * b05 - a23 * b03,
        a12 * b08 - a10 * b11 - a13 * b07,
        a00 * b11 - a02 * b08 + a03 * b07,
        a32 * b02 - a30 * b05 - a33 * b01,
        a20 * b05 - a22 * b02 + a23 * b01,
        a10 * b10 - a11 * b08 + a13 * b06,
        a01 * b08 - a00 * b10 - a03 * b06,
        a30 * b04 - a31 * b02 + a33 * b00,
        a21 * b02 - a20 * b04 - a23 * b00,
        a11 * b07 - a10 * b09 - a12 * b06,
        a00 * b09 - a01 * b07 + a02 * b06,
        a31 * b01 - a30 * b03 - a32 * b00,
        a20 * b03 - a21 * b01 + a22 * b00,
    ]


def determinant(matrix: Sequence[float]) -> float:
    """Return the determinant of a 4x4 matrix."""
    require_matrix_size(matrix, SIZE, "matrix")
    return _determinant_from(_sub_determinants(matrix))


def adjoint(matrix: Sequence[float], out: Matrix4 | None = None) -> Matrix4:
    """Return the adjugate, the transpose of the cofactor matrix."""
    require_matrix_size(matrix, SIZE, "matrix")
    return _write(_adjugate(matrix, _sub_determinants(matrix)), out)


def invert(matrix: Sequence[float], out: Matrix4 | None = None) -> Matrix4:
    """Invert a 4x4 matrix by cofactor expansion.

    The twelve 2x2 sub-determinants are computed once and shared between the
    determinant and the sixteen adjugate entries.

    Args:
        matrix: Matrix to invert
        out: Optional destination, may alias ``matrix``

    Returns:
        The inverse, written to ``out``

    Raises:
        SingularMatrixError: If the determinant is exactly zero
    """
    require_matrix_size(matrix, SIZE, "matrix")
    b: tuple[float, ...] = _sub_determinants(matrix)
    det: float = _determinant_from(b)
    if det == 0.0:
        raise SingularMatrixError()
    inv_det: float = 1.0 / det
    return _write([value * inv_det for value in _adjugate(matrix, b)], out)


def scale(
    matrix: Sequence[float], vector: Sequence[float], out: Matrix4 | None = None
) -> Matrix4:
    """Post-multiply a matrix by a scaling by a 3-vector."""
    require_matrix_size(matrix, SIZE, "matrix")
    require_vector_size(vector, 3, "vector")
    factors: tuple[float, float, float, float] = (vector[0], vector[1], vector[2], 1.0)
    return _write([matrix[i] * factors[i // 4] for i in range(SIZE)], out)


def translate(
    matrix: Sequence[float], vector: Sequence[float], out: Matrix4 | None = None
) -> Matrix4:
    """Post-multiply a matrix by a translation by a 3-vector."""
    require_matrix_size(matrix, SIZE, "matrix")
    require_vector_size(vector, 3, "vector")
    x: float = vector[0]
    y: float = vector[1]
    z: float = vector[2]
    values: list[float] = list(matrix)
    for row in range(4):
        values[12 + row] = (
            matrix[row] * x
            + matrix[4 + row] * y
            + matrix[8 + row] * z
            + matrix[12 + row]
        )
    return _write(values, out)


def _rotate_block(matrix: Sequence[float], r: Sequence[float]) -> list[float]:
    # Replace the first three columns with matrix[:, :3] @ r (r is 3x3)
    values: list[float] = list(matrix)
    for col in range(3):
        r0: float = r[col * 3]
        r1: float = r[col * 3 + 1]
        r2: float = r[col * 3 + 2]
        for row in range(4):
            values[col * 4 + row] = (
                matrix[row] * r0 + matrix[4 + row] * r1 + matrix[8 + row] * r2
            )
    return values


def rotate(
    matrix: Sequence[float],
    radians: float,
    axis: Sequence[float],
    out: Matrix4 | None = None,
) -> Matrix4:
    """Post-multiply a matrix by a rotation around an arbitrary axis.

    Raises:
        MagnitudeError: If the axis has zero length
    """
    require_matrix_size(matrix, SIZE, "matrix")
    return _write(_rotate_block(matrix, _rodrigues(radians, axis)), out)


def rotate_x(
    matrix: Sequence[float], radians: float, out: Matrix4 | None = None
) -> Matrix4:
    """Post-multiply a matrix by a rotation around the X axis."""
    require_matrix_size(matrix, SIZE, "matrix")
    s: float = math.sin(radians)
    c: float = math.cos(radians)
    return _write(
        _rotate_block(matrix, (1.0, 0.0, 0.0, 0.0, c, s, 0.0, -s, c)), out
    )


def rotate_y(
    matrix: Sequence[float], radians: float, out: Matrix4 | None = None
) -> Matrix4:
    """Post-multiply a matrix by a rotation around the Y axis."""
    require_matrix_size(matrix, SIZE, "matrix")
    s: float = math.sin(radians)
    c: float = math.cos(radians)
    return _write(
        _rotate_block(matrix, (c, 0.0, -s, 0.0, 1.0, 0.0, s, 0.0, c)), out
    )


def rotate_z(
    matrix: Sequence[float], radians: float, out: Matrix4 | None = None
) -> Matrix4:
    """Post-multiply a matrix by a rotation around the Z axis."""
    require_matrix_size(matrix, SIZE, "matrix")
    s: float = math.sin(radians)
    c: float = math.cos(radians)
    return _write(
        _rotate_block(matrix, (c, s, 0.0, -s, c, 0.0, 0.0, 0.0, 1.0)), out
    )


def get_translation(
    matrix: Sequence[float], out: list[float] | None = None
) -> list[float]:
    """Return the translation component of an affine transform."""
    require_matrix_size(matrix, SIZE, "matrix")
    out = vector_out(out, 3)
    out[:] = [matrix[12], matrix[13], matrix[14]]
    return out


def set_translation(
    matrix: Sequence[float],
    translation: Sequence[float],
    out: Matrix4 | None = None,
) -> Matrix4:
    """Replace the translation component of an affine transform."""
    require_matrix_size(matrix, SIZE, "matrix")
    require_vector_size(translation, 3, "translation")
    values: list[float] = list(matrix)
    values[12] = translation[0]
    values[13] = translation[1]
    values[14] = translation[2]
    return _write(values, out)


def get_scaling(
    matrix: Sequence[float], out: list[float] | None = None
) -> list[float]:
    """Return the scale on each axis as the norm of each basis column.

    Only the magnitude is recovered; a negative scale factor comes back
    positive.
    """
    require_matrix_size(matrix, SIZE, "matrix")
    out = vector_out(out, 3)
    out[:] = [
        math.hypot(matrix[0], matrix[1], matrix[2]),
        math.hypot(matrix[4], matrix[5], matrix[6]),
        math.hypot(matrix[8], matrix[9], matrix[10]),
    ]
    return out


def get_rotation(
    matrix: Sequence[float], out: list[float] | None = None
) -> list[float]:
    """Extract the rotation of an affine transform as a quaternion.

    The scale is removed by dividing each basis column by its norm, then the
    quaternion is recovered from the resulting rotation basis. A single
    closed-form expression divides by a quantity that vanishes near
    ``w = 0``, so the extraction branches on the trace and on the largest
    diagonal entry. The chosen divisor ``s`` is then always at least one.

    Precondition: every basis column has non-zero length. A zero-scale axis
    is not rejected; the result then contains ``inf`` or ``nan``.

    Args:
        matrix: Affine transform without skew
        out: Optional quaternion destination

    Returns:
        Quaternion ``(x, y, z, w)``, written to ``out``
    """
    scaling: list[float] = get_scaling(matrix)
    is1: float = ieee_divide(1.0, scaling[0])
    is2: float = ieee_divide(1.0, scaling[1])
    is3: float = ieee_divide(1.0, scaling[2])

    # smCR is column C, row R of the normalized basis
    sm11: float = matrix[0] * is1
    sm12: float = matrix[1] * is1
    sm13: float = matrix[2] * is1
    sm21: float = matrix[4] * is2
    sm22: float = matrix[5] * is2
    sm23: float = matrix[6] * is2
    sm31: float = matrix[8] * is3
    sm32: float = matrix[9] * is3
    sm33: float = matrix[10] * is3

    trace: float = sm11 + sm22 + sm33

    s: float
    quat: list[float]
    if trace > 0.0:
        s = math.sqrt(trace + 1.0) * 2.0
        inv_s: float = ieee_divide(1.0, s)
        quat = [
            (sm23 - sm32) * inv_s,
            (sm31 - sm13) * inv_s,
            (sm12 - sm21) * inv_s,
            0.25 * s,
        ]
    elif sm11 > sm22 and sm11 > sm33:
        s = math.sqrt(max(1.0 + sm11 - sm22 - sm33, 0.0)) * 2.0
        inv_s = ieee_divide(1.0, s)
        quat = [
            0.25 * s,
            (sm12 + sm21) * inv_s,
            (sm31 + sm13) * inv_s,
            (sm23 - sm32) * inv_s,
        ]
    elif sm22 > sm33:
        s = math.sqrt(max(1.0 + sm22 - sm11 - sm33, 0.0)) * 2.0
        inv_s = ieee_divide(1.0, s)
        quat = [
            (sm12 + sm21) * inv_s,
            0.25 * s,
            (sm23 + sm32) * inv_s,
            (sm31 - sm13) * inv_s,
        ]
    else:
        s = math.sqrt(max(1.0 + sm33 - sm11 - sm22, 0.0)) * 2.0
        inv_s = ieee_divide(1.0, s)
        quat = [
            (sm31 + sm13) * inv_s,
            (sm23 + sm32) * inv_s,
            0.25 * s,
            (sm12 - sm21) * inv_s,
        ]

    out = vector_out(out, 4)
    out[:] = quat
    return out


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
    """Return a (4, 4) array, undoing the column-major layout."""
    require_matrix_size(matrix, SIZE, "matrix")
    return np.asarray(matrix, dtype=np.float64).reshape((4, 4), order="F")
