################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Tests for tolerance comparisons."""

from __future__ import annotations

from oasis_math.math_utils.approx import approx
from oasis_math.math_utils.approx import approx_relative
from oasis_math.math_utils.approx import seq_approx_relative
from oasis_math.math_utils.approx import seq_exact


def test_approx_is_absolute() -> None:
    assert approx(1.0, 1.0 + 5.0e-7)
    assert not approx(1.0e6, 1.0e6 + 0.5)


def test_approx_relative_scales_with_magnitude() -> None:
    """Large magnitudes should widen the tolerance."""
    assert approx_relative(1.0e6, 1.0e6 + 0.5)
    assert not approx_relative(1.0e6, 1.0e6 + 2.0)


def test_approx_relative_near_zero() -> None:
    """Near zero the tolerance should behave as an absolute one."""
    assert approx_relative(0.0, 5.0e-7)
    assert not approx_relative(0.0, 2.0e-6)


def test_approx_relative_custom_eps() -> None:
    assert approx_relative(1.0, 1.01, eps=0.1)
    assert not approx_relative(1.0, 1.01, eps=1.0e-3)


def test_seq_approx_relative() -> None:
    a: list[float] = [1.0, 2.0, 3.0]
    b: list[float] = [1.0, 2.0 + 1.0e-7, 3.0]
    c: list[float] = [1.0, 2.1, 3.0]

    assert seq_approx_relative(a, b)
    assert not seq_approx_relative(a, c)


def test_seq_length_mismatch() -> None:
    """Sequences of different lengths should never compare equal."""
    assert not seq_approx_relative([1.0, 2.0], [1.0, 2.0, 0.0])
    assert not seq_exact([1.0, 2.0], [1.0, 2.0, 0.0])


def test_seq_exact() -> None:
    assert seq_exact([0.5, -1.0], [0.5, -1.0])
    assert not seq_exact([0.5, -1.0], [0.5, -1.0 + 1.0e-15])
