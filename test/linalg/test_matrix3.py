################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Tests for 3x3 matrices."""

from __future__ import annotations

import math

import numpy as np
import pytest
from numpy.typing import NDArray

from oasis_math.linalg import matrix3
from oasis_math.linalg import matrix4
from oasis_math.math_utils.errors import SingularMatrixError


def _sample() -> list[float]:
    return [
        1.0,
        0.0,
        5.0,
        2.0,
        1.0,
        6.0,
        3.0,
        4.0,
        0.0,
    ]


def test_repeated_column_is_singular() -> None:
    """Linearly dependent columns should be rejected by invert."""
    matrix: list[float] = [
        1.0,
        2.0,
        3.0,
        1.0,
        2.0,
        3.0,
        7.0,
        8.0,
        9.0,
    ]

    assert matrix3.determinant(matrix) == 0.0
    with pytest.raises(SingularMatrixError):
        matrix3.invert(matrix)


def test_invert_matches_numpy() -> None:
    matrix: list[float] = _sample()
    expected: NDArray[np.float64] = np.linalg.inv(matrix3.to_array(matrix))

    assert matrix3.determinant(matrix) == 1.0
    np.testing.assert_allclose(
        matrix3.to_array(matrix3.invert(matrix)), expected, atol=1.0e-12
    )


def test_invert_round_trip() -> None:
    matrix: list[float] = _sample()
    product: list[float] = matrix3.multiply(matrix, matrix3.invert(matrix))

    assert matrix3.equals(product, matrix3.identity())


def test_adjoint_product_is_scaled_identity() -> None:
    matrix: list[float] = [
        2.0,
        -1.0,
        0.0,
        1.0,
        3.0,
        2.0,
        0.0,
        1.0,
        4.0,
    ]
    det: float = matrix3.determinant(matrix)
    product: list[float] = matrix3.multiply(matrix, matrix3.adjoint(matrix))

    assert matrix3.equals(product, matrix3.multiply_scalar(matrix3.identity(), det))


def test_determinant_agrees_with_invert() -> None:
    """The inverse times the determinant should be the adjugate."""
    matrix: list[float] = [
        2.0,
        -1.0,
        0.0,
        1.0,
        3.0,
        2.0,
        0.0,
        1.0,
        4.0,
    ]
    det: float = matrix3.determinant(matrix)

    assert math.isclose(det, float(np.linalg.det(matrix3.to_array(matrix))))
    assert matrix3.equals(
        matrix3.multiply_scalar(matrix3.invert(matrix), det), matrix3.adjoint(matrix)
    )


def test_identity_quaternion() -> None:
    """The identity quaternion should produce the identity matrix."""
    matrix: list[float] = matrix3.from_quaternion([0.0, 0.0, 0.0, 1.0])

    assert matrix == matrix3.identity()


def test_quaternion_matches_z_rotation() -> None:
    half: float = math.pi / 8.0
    quaternion: list[float] = [0.0, 0.0, math.sin(half), math.cos(half)]

    assert matrix3.equals(
        matrix3.from_quaternion(quaternion),
        matrix3.from_matrix4(matrix4.from_z_rotation(math.pi / 4.0)),
    )


def test_normal_matrix_of_rotation_is_rotation() -> None:
    """For a pure rotation the inverse-transpose is the rotation itself."""
    rotation: list[float] = matrix4.from_rotation(0.7, [1.0, 2.0, 3.0])

    assert matrix3.equals(
        matrix3.normal_from_matrix4(rotation), matrix3.from_matrix4(rotation)
    )


def test_normal_matrix_of_scaling() -> None:
    scaling: list[float] = matrix4.from_scaling([2.0, 4.0, 8.0])
    expected: list[float] = [
        0.5,
        0.0,
        0.0,
        0.0,
        0.25,
        0.0,
        0.0,
        0.0,
        0.125,
    ]

    assert matrix3.equals(matrix3.normal_from_matrix4(scaling), expected)


def test_normal_matrix_singular_raises() -> None:
    with pytest.raises(SingularMatrixError):
        matrix3.normal_from_matrix4(matrix4.create())


def test_homogeneous_transforms_compose() -> None:
    """translate, rotate and scale should post-multiply."""
    base: list[float] = matrix3.from_rotation(0.3)
    vector: list[float] = [2.0, -1.0]

    assert matrix3.equals(
        matrix3.translate(base, vector),
        matrix3.multiply(base, matrix3.from_translation(vector)),
    )
    assert matrix3.equals(
        matrix3.rotate(base, 0.5),
        matrix3.multiply(base, matrix3.from_rotation(0.5)),
    )
    assert matrix3.equals(
        matrix3.scale(base, vector),
        matrix3.multiply(base, matrix3.from_scaling(vector)),
    )


def test_translate_in_place() -> None:
    matrix: list[float] = matrix3.from_rotation(0.3)
    expected: list[float] = matrix3.translate(matrix, [1.0, 2.0])
    matrix3.translate(matrix, [1.0, 2.0], matrix)

    assert matrix == expected


def test_multiply_in_place_matches_numpy() -> None:
    a: list[float] = _sample()
    b: list[float] = matrix3.transpose(_sample())
    expected: NDArray[np.float64] = matrix3.to_array(a) @ matrix3.to_array(b)
    matrix3.multiply(a, b, a)

    np.testing.assert_allclose(matrix3.to_array(a), expected)


def test_projection_maps_corners() -> None:
    projection: list[float] = matrix3.projection(200.0, 100.0)
    top_left: NDArray[np.float64] = matrix3.to_array(projection) @ np.array(
        [0.0, 0.0, 1.0]
    )
    bottom_right: NDArray[np.float64] = matrix3.to_array(projection) @ np.array(
        [200.0, 100.0, 1.0]
    )

    np.testing.assert_allclose(top_left, [-1.0, 1.0, 1.0])
    np.testing.assert_allclose(bottom_right, [1.0, -1.0, 1.0])
