################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Tests for shared validation helpers."""

from __future__ import annotations

import math

import numpy as np
import pytest

from oasis_math.config.math_params import RandomParams
from oasis_math.math_utils.errors import LinalgError
from oasis_math.math_utils.errors import MagnitudeError
from oasis_math.math_utils.errors import MatrixSizeError
from oasis_math.math_utils.errors import PartialMatrixError
from oasis_math.math_utils.errors import SingularMatrixError
from oasis_math.math_utils.errors import VectorSizeError
from oasis_math.math_utils.sampling import generator_from_params
from oasis_math.math_utils.sampling import resolve_generator
from oasis_math.math_utils.validation import ieee_divide
from oasis_math.math_utils.validation import matrix_out
from oasis_math.math_utils.validation import require_matrix_size
from oasis_math.math_utils.validation import require_vector_size
from oasis_math.math_utils.validation import vector_out


def test_error_hierarchy() -> None:
    """Every linear algebra error should be a ValueError."""
    assert issubclass(LinalgError, ValueError)
    assert issubclass(SingularMatrixError, LinalgError)
    assert issubclass(PartialMatrixError, MatrixSizeError)
    assert issubclass(VectorSizeError, LinalgError)
    assert issubclass(MagnitudeError, LinalgError)


def test_default_messages() -> None:
    assert str(SingularMatrixError()) == "The matrix cannot be inverted"
    assert str(PartialMatrixError()) == "The matrix is not rectangular"


def test_require_sizes() -> None:
    require_matrix_size([0.0] * 4, 4, "matrix")
    require_vector_size([0.0] * 3, 3, "vector")

    with pytest.raises(MatrixSizeError, match="matrix must have length 9"):
        require_matrix_size([0.0] * 4, 9, "matrix")
    with pytest.raises(VectorSizeError):
        require_vector_size([0.0] * 4, 3, "vector")


def test_out_allocation() -> None:
    """A missing destination should be allocated and a present one reused."""
    allocated: list[float] = matrix_out(None, 9)
    assert allocated == [0.0] * 9

    existing: list[float] = [1.0, 2.0]
    assert vector_out(existing, 2) is existing

    with pytest.raises(VectorSizeError):
        vector_out(existing, 3)
    with pytest.raises(MatrixSizeError):
        matrix_out(existing, 4)


def test_ieee_divide() -> None:
    """Division by zero should follow IEEE-754 instead of raising."""
    assert ieee_divide(3.0, 2.0) == 1.5
    assert ieee_divide(1.0, 0.0) == math.inf
    assert ieee_divide(-1.0, 0.0) == -math.inf
    assert math.isnan(ieee_divide(0.0, 0.0))


def test_resolve_generator() -> None:
    """A supplied generator should be returned unchanged."""
    rng: np.random.Generator = np.random.default_rng(3)
    assert resolve_generator(rng) is rng
    assert isinstance(resolve_generator(None), np.random.Generator)


def test_generator_from_params_uses_seed() -> None:
    """Generators built from the same random parameters should agree."""
    params: RandomParams = RandomParams(seed=11)
    first: np.random.Generator = generator_from_params(params)
    second: np.random.Generator = generator_from_params(params)

    np.testing.assert_array_equal(first.random(4), second.random(4))
    np.testing.assert_array_equal(
        generator_from_params(params).random(4), np.random.default_rng(11).random(4)
    )
