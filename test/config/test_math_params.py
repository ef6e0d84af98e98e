################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Tests for the math parameter schema."""

from __future__ import annotations

import dataclasses
from typing import Any

import pytest

from oasis_math.config.math_params import EPSILON
from oasis_math.config.math_params import ROTATION_EPSILON
from oasis_math.config.math_params import MathParams
from oasis_math.config.math_params import MathParamsError
from oasis_math.config.math_params import RandomParams
from oasis_math.config.math_params import ToleranceParams


def test_defaults_validate() -> None:
    """Defaults should validate successfully."""
    params: MathParams = MathParams.defaults()
    params.validate()


def test_defaults_match_module_constants() -> None:
    """Default tolerances should match the shared module constants."""
    params: MathParams = MathParams.defaults()

    assert params.tolerance.epsilon == EPSILON
    assert params.tolerance.rotation_epsilon == ROTATION_EPSILON
    assert params.random.seed is None


def test_non_positive_epsilon_rejected() -> None:
    """A zero tolerance should raise an error."""
    params: MathParams = MathParams.defaults().replace(
        tolerance=ToleranceParams(epsilon=0.0)
    )
    with pytest.raises(MathParamsError):
        params.validate()


def test_rotation_epsilon_below_one() -> None:
    """A rotation tolerance of one or more should raise an error."""
    params: MathParams = MathParams.defaults().replace(
        tolerance=dataclasses.replace(
            MathParams.defaults().tolerance, rotation_epsilon=1.0
        )
    )
    with pytest.raises(MathParamsError):
        params.validate()


@pytest.mark.parametrize("seed", [-1, 1.5, True])
def test_invalid_seed_rejected(seed: Any) -> None:
    """Seeds must be non-negative integers."""
    params: MathParams = MathParams.defaults().replace(random=RandomParams(seed=seed))
    with pytest.raises(MathParamsError):
        params.validate()


def test_valid_seed_accepted() -> None:
    params: MathParams = MathParams.defaults().replace(random=RandomParams(seed=42))
    params.validate()

    assert params.random.seed == 42


def test_as_nested_dict() -> None:
    """Nested dict should mirror the dataclass tree."""
    params: MathParams = MathParams.defaults()
    nested: dict[str, Any] = params.as_nested_dict()

    assert nested == {
        "tolerance": {
            "epsilon": EPSILON,
            "rotation_epsilon": ROTATION_EPSILON,
        },
        "random": {
            "seed": None,
        },
    }


def test_params_are_frozen() -> None:
    params: MathParams = MathParams.defaults()
    with pytest.raises(dataclasses.FrozenInstanceError):
        setattr(params.tolerance, "epsilon", 1.0e-3)
