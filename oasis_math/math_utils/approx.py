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
Tolerance comparisons for floating-point components

Every ``equals`` in the package uses the relative policy:

    |a - b| <= eps * max(1, |a|, |b|)

which behaves as an absolute tolerance near zero and as a relative tolerance
for large magnitudes. The absolute form is kept for callers that need it.
"""

from __future__ import annotations

from collections.abc import Sequence

from oasis_math.config.math_params import EPSILON


def approx(a: float, b: float, eps: float = EPSILON) -> bool:
    """Return True when ``a`` and ``b`` are no more than ``eps`` apart."""
    return abs(a - b) <= eps


def approx_relative(a: float, b: float, eps: float = EPSILON) -> bool:
    """Return True when ``a`` and ``b`` agree relative to their magnitude."""
    return abs(a - b) <= eps * max(1.0, abs(a), abs(b))


def seq_approx_relative(
    a: Sequence[float], b: Sequence[float], eps: float = EPSILON
) -> bool:
    """Return True when two sequences are component-wise approximately equal.

    Args:
        a: First sequence
        b: Second sequence
        eps: Relative tolerance

    Returns:
        False if the lengths differ or any pair of components differs by more
        than the relative tolerance
    """
    if len(a) != len(b):
        return False
    return all(approx_relative(ai, bi, eps) for ai, bi in zip(a, b))


def seq_exact(a: Sequence[float], b: Sequence[float]) -> bool:
    """Return True when two sequences have identical components."""
    if len(a) != len(b):
        return False
    return all(ai == bi for ai, bi in zip(a, b))
