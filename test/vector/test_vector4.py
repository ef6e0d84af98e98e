################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Tests for 4-vectors."""

from __future__ import annotations

import math

import numpy as np
import pytest

from oasis_math.linalg import matrix4
from oasis_math.math_utils.errors import VectorSizeError
from oasis_math.rotation import quaternion
from oasis_math.vector import vector4


def test_component_wise_arithmetic() -> None:
    a: list[float] = [1.0, 2.0, 3.0, 4.0]
    b: list[float] = [2.0, 2.0, -1.0, 0.5]

    assert vector4.add(a, b) == [3.0, 4.0, 2.0, 4.5]
    assert vector4.subtract(a, b) == [-1.0, 0.0, 4.0, 3.5]
    assert vector4.multiply(a, b) == [2.0, 4.0, -3.0, 2.0]
    assert vector4.divide(a, b) == [0.5, 1.0, -3.0, 8.0]
    assert vector4.scale(a, -1.0) == vector4.negate(a)
    assert vector4.abs(vector4.negate(a)) == a
    assert vector4.dot(a, b) == 5.0


def test_lengths() -> None:
    assert math.isclose(vector4.get_magnitude([1.0, 1.0, 1.0, 1.0]), 2.0)
    assert vector4.get_squared_magnitude([1.0, 2.0, 2.0, 4.0]) == 25.0
    assert math.isclose(
        vector4.distance([0.0, 0.0, 0.0, 0.0], [1.0, 2.0, 2.0, 4.0]), 5.0
    )


def test_normalize() -> None:
    assert vector4.equals(
        vector4.normalize([0.0, 0.0, 3.0, 4.0]), [0.0, 0.0, 0.6, 0.8]
    )


def test_normalize_zero_is_nan() -> None:
    normalized: list[float] = vector4.normalize([0.0, 0.0, 0.0, 0.0])

    assert all(math.isnan(value) for value in normalized)


def test_cross_of_basis() -> None:
    cross: list[float] = vector4.cross(
        [1.0, 0.0, 0.0, 0.0], [0.0, 1.0, 0.0, 0.0], [0.0, 0.0, 1.0, 0.0]
    )

    assert cross == [0.0, 0.0, 0.0, -1.0]


def test_cross_is_orthogonal() -> None:
    """The 4D cross product should be orthogonal to all three operands."""
    a: list[float] = [1.0, 2.0, 3.0, 4.0]
    b: list[float] = [0.0, 1.0, 0.0, 2.0]
    c: list[float] = [3.0, 0.0, 1.0, 0.0]
    cross: list[float] = vector4.cross(a, b, c)

    assert vector4.get_magnitude(cross) > 0.0
    assert vector4.dot(cross, a) == 0.0
    assert vector4.dot(cross, b) == 0.0
    assert vector4.dot(cross, c) == 0.0


def test_lerp_and_rounding() -> None:
    a: list[float] = [0.0, 0.0, 0.0, 0.0]
    b: list[float] = [2.0, 4.0, 6.0, 8.0]

    assert vector4.lerp(a, b, 0.5) == [1.0, 2.0, 3.0, 4.0]
    assert vector4.round([0.5, 1.5, 2.5, -0.5]) == [0.0, 2.0, 2.0, -0.0]
    assert vector4.ceil([0.5, 1.5, 2.5, -0.5]) == [1.0, 2.0, 3.0, -0.0]
    assert vector4.floor([0.5, 1.5, 2.5, -0.5]) == [0.0, 1.0, 2.0, -1.0]
    assert vector4.min(a, b) == a
    assert vector4.max(a, b) == b


def test_transform_matrix4() -> None:
    """Points translate, directions do not."""
    translation: list[float] = matrix4.from_translation([1.0, 2.0, 3.0])

    assert vector4.transform_matrix4([1.0, 2.0, 3.0, 1.0], translation) == [
        2.0,
        4.0,
        6.0,
        1.0,
    ]
    assert vector4.transform_matrix4([1.0, 2.0, 3.0, 0.0], translation) == [
        1.0,
        2.0,
        3.0,
        0.0,
    ]


def test_transform_quaternion_keeps_w() -> None:
    half: float = math.pi / 4.0
    rotation: list[float] = [0.0, 0.0, math.sin(half), math.cos(half)]
    rotated: list[float] = vector4.transform_quaternion([1.0, 0.0, 0.0, 7.0], rotation)

    assert vector4.equals(rotated, [0.0, 1.0, 0.0, 7.0])


def test_transform_quaternion_matches_matrix() -> None:
    rotation: list[float] = quaternion.from_euler(10.0, 20.0, 30.0)
    vector: list[float] = [1.0, -2.0, 0.5, 1.0]

    assert vector4.equals(
        vector4.transform_quaternion(vector, rotation),
        vector4.transform_matrix4(vector, quaternion.to_matrix4(rotation)),
    )


def test_random_magnitude() -> None:
    rng: np.random.Generator = np.random.default_rng(9)
    for _ in range(10):
        vector: list[float] = vector4.random(0.5, rng=rng)
        assert math.isclose(vector4.get_magnitude(vector), 0.5)


def test_wrong_size_raises() -> None:
    with pytest.raises(VectorSizeError):
        vector4.cross([1.0, 0.0, 0.0, 0.0], [0.0, 1.0, 0.0, 0.0], [0.0, 0.0, 1.0])
