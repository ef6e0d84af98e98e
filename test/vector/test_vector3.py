################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Tests for 3-vectors."""

from __future__ import annotations

import math
from collections.abc import Callable

import numpy as np
import pytest

from oasis_math.config.math_params import MathParams
from oasis_math.config.math_params import ToleranceParams
from oasis_math.linalg import matrix3
from oasis_math.linalg import matrix4
from oasis_math.math_utils.errors import VectorSizeError
from oasis_math.rotation import quaternion
from oasis_math.vector import vector3


SQRT_HALF: float = math.sqrt(0.5)


def test_component_wise_arithmetic() -> None:
    a: list[float] = [1.0, 2.0, 3.0]
    b: list[float] = [2.0, -4.0, 0.5]

    assert vector3.add(a, b) == [3.0, -2.0, 3.5]
    assert vector3.subtract(a, b) == [-1.0, 6.0, 2.5]
    assert vector3.multiply(a, b) == [2.0, -8.0, 1.5]
    assert vector3.divide(a, b) == [0.5, -0.5, 6.0]
    assert vector3.scale_and_add(a, b, 2.0) == [5.0, -6.0, 4.0]
    assert vector3.negate(a) == [-1.0, -2.0, -3.0]
    assert vector3.invert(b) == [0.5, -0.25, 2.0]
    assert vector3.abs([-1.0, 2.0, -0.5]) == [1.0, 2.0, 0.5]


def test_rounding_and_bounds() -> None:
    assert vector3.ceil([0.1, -0.1, 2.0]) == [1.0, 0.0, 2.0]
    assert vector3.floor([0.1, -0.1, 2.0]) == [0.0, -1.0, 2.0]
    assert vector3.round([0.5, 1.5, -2.5]) == [0.0, 2.0, -2.0]
    assert vector3.min([1.0, 5.0, 0.0], [2.0, 3.0, 0.0]) == [1.0, 3.0, 0.0]
    assert vector3.max([1.0, 5.0, 0.0], [2.0, 3.0, 0.0]) == [2.0, 5.0, 0.0]


def test_lengths() -> None:
    assert math.isclose(vector3.get_magnitude([2.0, 3.0, 6.0]), 7.0)
    assert vector3.get_squared_magnitude([2.0, 3.0, 6.0]) == 49.0
    assert math.isclose(vector3.distance([1.0, 1.0, 1.0], [3.0, 4.0, 7.0]), 7.0)
    assert vector3.squared_distance([1.0, 1.0, 1.0], [3.0, 4.0, 7.0]) == 49.0


def test_normalize_zero_is_nan() -> None:
    normalized: list[float] = vector3.normalize([0.0, 0.0, 0.0])

    assert all(math.isnan(value) for value in normalized)


def test_normalize_in_place() -> None:
    vector: list[float] = [0.0, 3.0, 4.0]
    vector3.normalize(vector, vector)

    assert vector3.equals(vector, [0.0, 0.6, 0.8])


def test_cross_is_right_handed() -> None:
    assert vector3.cross([1.0, 0.0, 0.0], [0.0, 1.0, 0.0]) == [0.0, 0.0, 1.0]
    assert vector3.cross([0.0, 1.0, 0.0], [1.0, 0.0, 0.0]) == [0.0, 0.0, -1.0]


def test_cross_in_place() -> None:
    """The destination may alias the first operand."""
    a: list[float] = [0.0, 1.0, 0.0]
    vector3.cross(a, [0.0, 0.0, 1.0], a)

    assert a == [1.0, 0.0, 0.0]


def test_angle() -> None:
    assert math.isclose(
        vector3.angle([1.0, 0.0, 0.0], [0.0, 0.0, 3.0]), math.pi / 2.0
    )
    assert math.isclose(
        vector3.angle([0.0, 0.0, 0.0], [0.0, 0.0, 3.0]), math.pi / 2.0
    )
    assert vector3.angle([2.0, 0.0, 0.0], [1.0, 0.0, 0.0]) == 0.0


def test_slerp_midpoint() -> None:
    midpoint: list[float] = vector3.slerp([1.0, 0.0, 0.0], [0.0, 1.0, 0.0], 0.5)

    assert vector3.equals(midpoint, [SQRT_HALF, SQRT_HALF, 0.0])


def test_slerp_parallel_falls_back_to_lerp() -> None:
    a: list[float] = [0.0, 0.0, 1.0]

    assert vector3.equals(vector3.slerp(a, a, 0.3), a)


def test_slerp_antiparallel_passes_through_origin() -> None:
    """Opposite vectors have no unique arc, so the chord is used."""
    midpoint: list[float] = vector3.slerp([1.0, 0.0, 0.0], [-1.0, 0.0, 0.0], 0.5)

    assert midpoint == [0.0, 0.0, 0.0]


def test_slerp_rotation_eps_selects_lerp() -> None:
    a: list[float] = [1.0, 0.0, 0.0]
    b: list[float] = [math.cos(0.005), math.sin(0.005), 0.0]
    params: MathParams = MathParams.defaults().replace(
        tolerance=ToleranceParams(rotation_epsilon=1.0e-2)
    )

    arc: list[float] = vector3.slerp(a, b, 0.5)
    chord: list[float] = vector3.slerp(
        a, b, 0.5, rotation_eps=params.tolerance.rotation_epsilon
    )

    assert math.isclose(vector3.get_magnitude(arc), 1.0)
    assert vector3.equals(chord, vector3.lerp(a, b, 0.5))
    assert not math.isclose(vector3.get_magnitude(chord), 1.0)


@pytest.mark.parametrize("interpolate", [vector3.hermite, vector3.bezier])
def test_spline_endpoints(interpolate: Callable[..., list[float]]) -> None:
    a: list[float] = [0.0, 0.0, 0.0]
    b: list[float] = [1.0, 2.0, 0.0]
    c: list[float] = [3.0, 2.0, 1.0]
    d: list[float] = [4.0, 0.0, 1.0]

    assert vector3.equals(interpolate(a, b, c, d, 0.0), a)
    assert vector3.equals(interpolate(a, b, c, d, 1.0), d)


def test_bezier_midpoint() -> None:
    a: list[float] = [0.0, 0.0, 0.0]
    b: list[float] = [0.0, 4.0, 0.0]
    c: list[float] = [4.0, 4.0, 0.0]
    d: list[float] = [4.0, 0.0, 0.0]

    assert vector3.equals(vector3.bezier(a, b, c, d, 0.5), [2.0, 3.0, 0.0])


def test_axis_rotations_about_origin() -> None:
    origin: list[float] = [0.0, 0.0, 0.0]
    quarter: float = math.pi / 2.0

    assert vector3.equals(
        vector3.rotate_x([0.0, 1.0, 0.0], origin, quarter), [0.0, 0.0, 1.0]
    )
    assert vector3.equals(
        vector3.rotate_y([1.0, 0.0, 0.0], origin, quarter), [0.0, 0.0, -1.0]
    )
    assert vector3.equals(
        vector3.rotate_z([1.0, 0.0, 0.0], origin, quarter), [0.0, 1.0, 0.0]
    )


def test_rotate_z_about_offset_origin() -> None:
    rotated: list[float] = vector3.rotate_z(
        [2.0, 1.0, 5.0], [1.0, 1.0, 0.0], math.pi / 2.0
    )

    assert vector3.equals(rotated, [1.0, 2.0, 5.0])


def test_transform_matrix3() -> None:
    rotation: list[float] = matrix3.from_matrix4(matrix4.from_z_rotation(math.pi / 2.0))

    assert vector3.equals(
        vector3.transform_matrix3([1.0, 0.0, 0.0], rotation), [0.0, 1.0, 0.0]
    )


def test_transform_matrix4_translates_points() -> None:
    translation: list[float] = matrix4.from_translation([1.0, 2.0, 3.0])

    assert vector3.transform_matrix4([1.0, 1.0, 1.0], translation) == [2.0, 3.0, 4.0]


def test_transform_matrix4_divides_by_w() -> None:
    matrix: list[float] = matrix4.identity()
    matrix[15] = 2.0

    assert vector3.transform_matrix4([1.0, 2.0, 3.0], matrix) == [0.5, 1.0, 1.5]


def test_transform_matrix4_zero_w_treated_as_one() -> None:
    assert vector3.transform_matrix4([1.0, 2.0, 3.0], matrix4.create()) == [
        0.0,
        0.0,
        0.0,
    ]


def test_transform_quaternion_matches_matrix() -> None:
    rotation: list[float] = quaternion.from_euler(30.0, -45.0, 60.0)
    vector: list[float] = [0.3, -1.2, 2.5]

    assert vector3.equals(
        vector3.transform_quaternion(vector, rotation),
        vector3.transform_matrix3(vector, quaternion.to_matrix3(rotation)),
    )


def test_random_magnitude() -> None:
    rng: np.random.Generator = np.random.default_rng(5)
    for _ in range(10):
        vector: list[float] = vector3.random(3.0, rng=rng)
        assert math.isclose(vector3.get_magnitude(vector), 3.0)


def test_wrong_size_raises() -> None:
    with pytest.raises(VectorSizeError):
        vector3.dot([1.0, 2.0], [1.0, 2.0, 3.0])
