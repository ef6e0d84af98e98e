################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Tests for dual quaternions."""

from __future__ import annotations

import math
from collections.abc import Callable

import pytest

from oasis_math.linalg import matrix4
from oasis_math.math_utils.errors import MagnitudeError
from oasis_math.math_utils.errors import VectorSizeError
from oasis_math.rotation import dual_quaternion
from oasis_math.rotation import quaternion
from oasis_math.vector import vector3


def _rotation() -> list[float]:
    return quaternion.from_euler(10.0, 20.0, 30.0)


def _translation() -> list[float]:
    return [1.0, -2.0, 3.0]


def _transform() -> list[float]:
    return dual_quaternion.from_rotation_translation(_rotation(), _translation())


def test_identity() -> None:
    ident: list[float] = dual_quaternion.identity()

    assert ident == [0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 0.0]
    assert dual_quaternion.create() == ident


def test_get_translation() -> None:
    assert vector3.equals(dual_quaternion.get_translation(_transform()), _translation())


def test_parts() -> None:
    transform: list[float] = _transform()

    assert dual_quaternion.get_real(transform) == _rotation()
    assert dual_quaternion.get_dual(transform) == transform[4:8]
    assert dual_quaternion.set_real(transform, [0.0, 0.0, 0.0, 1.0])[0:4] == [
        0.0,
        0.0,
        0.0,
        1.0,
    ]
    assert dual_quaternion.set_dual(transform, [1.0, 2.0, 3.0, 4.0])[4:8] == [
        1.0,
        2.0,
        3.0,
        4.0,
    ]


def test_pure_parts() -> None:
    translation: list[float] = dual_quaternion.from_translation([2.0, 4.0, 6.0])
    rotation: list[float] = dual_quaternion.from_rotation(_rotation())

    assert dual_quaternion.get_translation(translation) == [2.0, 4.0, 6.0]
    assert dual_quaternion.get_translation(rotation) == [0.0, 0.0, 0.0]


def test_to_matrix4() -> None:
    assert matrix4.equals(
        dual_quaternion.to_matrix4(_transform()),
        matrix4.from_rotation_translation(_rotation(), _translation()),
    )


def test_from_matrix4_round_trip() -> None:
    matrix: list[float] = matrix4.from_rotation_translation(_rotation(), _translation())

    assert dual_quaternion.equals(dual_quaternion.from_matrix4(matrix), _transform())


def test_multiply_composes_transforms() -> None:
    """The product should apply the right operand first."""
    a: list[float] = dual_quaternion.from_translation([1.0, 0.0, 0.0])
    b: list[float] = _transform()
    product: list[float] = dual_quaternion.multiply(a, b)

    assert matrix4.equals(
        dual_quaternion.to_matrix4(product),
        matrix4.multiply(dual_quaternion.to_matrix4(a), dual_quaternion.to_matrix4(b)),
    )


def test_invert() -> None:
    transform: list[float] = _transform()
    product: list[float] = dual_quaternion.multiply(
        transform, dual_quaternion.invert(transform)
    )

    assert dual_quaternion.equals(product, dual_quaternion.identity())


def test_conjugate() -> None:
    conjugate: list[float] = dual_quaternion.conjugate(_transform())

    assert conjugate[0:4] == quaternion.conjugate(_rotation())
    assert conjugate[4:8] == quaternion.conjugate(_transform()[4:8])


def test_translate_is_local_frame() -> None:
    """The offset should be rotated by the transform before it is applied."""
    offset: list[float] = [0.5, 0.5, 0.5]
    moved: list[float] = dual_quaternion.translate(_transform(), offset)
    expected_translation: list[float] = vector3.add(
        _translation(), vector3.transform_quaternion(offset, _rotation())
    )

    assert vector3.equals(
        dual_quaternion.get_translation(moved), expected_translation
    )
    assert dual_quaternion.equals(
        moved,
        dual_quaternion.from_rotation_translation(_rotation(), expected_translation),
    )
    assert dual_quaternion.get_real(moved) == _rotation()


def test_translate_identity_rotation_adds_offset() -> None:
    start: list[float] = dual_quaternion.from_translation(_translation())
    moved: list[float] = dual_quaternion.translate(start, [0.5, 0.5, 0.5])

    assert vector3.equals(dual_quaternion.get_translation(moved), [1.5, -1.5, 3.5])


@pytest.mark.parametrize("axis", ["x", "y", "z"])
def test_axis_rotations_keep_translation(axis: str) -> None:
    """Local rotations should change the real part only."""
    rotate: Callable[..., list[float]] = getattr(dual_quaternion, f"rotate_{axis}")
    rotate_real: Callable[..., list[float]] = getattr(quaternion, f"rotate_{axis}")
    rotated: list[float] = rotate(_transform(), 0.7)

    assert vector3.equals(dual_quaternion.get_translation(rotated), _translation())
    assert quaternion.equals(
        dual_quaternion.get_real(rotated), rotate_real(_rotation(), 0.7)
    )


def test_rotate_around_axis_matches_rotate_x() -> None:
    assert dual_quaternion.equals(
        dual_quaternion.rotate_around_axis(_transform(), [2.0, 0.0, 0.0], 0.7),
        dual_quaternion.rotate_x(_transform(), 0.7),
    )


def test_rotate_around_zero_axis_raises() -> None:
    with pytest.raises(MagnitudeError):
        dual_quaternion.rotate_around_axis(_transform(), [0.0, 0.0, 0.0], 0.7)


def test_rotate_by_quaternion() -> None:
    """Prepending rotates in the world frame, appending in the local frame."""
    turn: list[float] = [0.0, 0.0, math.sqrt(0.5), math.sqrt(0.5)]
    transform: list[float] = _transform()

    appended: list[float] = dual_quaternion.rotate_by_quaternion_append(
        transform, turn
    )
    prepended: list[float] = dual_quaternion.rotate_by_quaternion_prepend(
        turn, transform
    )

    assert vector3.equals(dual_quaternion.get_translation(appended), _translation())
    assert vector3.equals(
        dual_quaternion.get_translation(prepended),
        vector3.transform_quaternion(_translation(), turn),
    )
    assert dual_quaternion.equals(
        prepended,
        dual_quaternion.multiply(dual_quaternion.from_rotation(turn), transform),
    )


def test_add_and_scale() -> None:
    transform: list[float] = _transform()

    assert dual_quaternion.equals(
        dual_quaternion.add(transform, transform),
        dual_quaternion.scale(transform, 2.0),
    )


def test_magnitude_uses_real_part() -> None:
    transform: list[float] = dual_quaternion.scale(_transform(), 3.0)

    assert math.isclose(dual_quaternion.get_magnitude(transform), 3.0)
    assert math.isclose(dual_quaternion.get_squared_magnitude(transform), 9.0)
    assert math.isclose(dual_quaternion.dot(transform, _transform()), 3.0)


def test_normalize() -> None:
    transform: list[float] = _transform()
    normalized: list[float] = dual_quaternion.normalize(
        dual_quaternion.scale(transform, 2.0)
    )

    assert dual_quaternion.equals(normalized, transform)


def test_normalize_zero_real_is_unchanged() -> None:
    degenerate: list[float] = [0.0, 0.0, 0.0, 0.0, 1.0, 2.0, 3.0, 4.0]

    assert dual_quaternion.normalize(degenerate) == degenerate


def test_lerp_takes_shorter_path() -> None:
    """Opposite signs describe the same transform."""
    transform: list[float] = _transform()
    negated: list[float] = dual_quaternion.scale(transform, -1.0)

    assert dual_quaternion.equals(
        dual_quaternion.lerp(transform, negated, 0.5), transform
    )


def test_lerp_endpoints() -> None:
    a: list[float] = dual_quaternion.identity()
    b: list[float] = _transform()

    assert dual_quaternion.equals(dual_quaternion.lerp(a, b, 0.0), a)
    assert dual_quaternion.equals(dual_quaternion.lerp(a, b, 1.0), b)


def test_out_may_alias_operand() -> None:
    transform: list[float] = _transform()
    expected: list[float] = dual_quaternion.multiply(transform, transform)
    dual_quaternion.multiply(transform, transform, transform)

    assert dual_quaternion.exact_equals(transform, expected)


def test_wrong_size_raises() -> None:
    with pytest.raises(VectorSizeError):
        dual_quaternion.get_translation([0.0, 0.0, 0.0, 1.0])
