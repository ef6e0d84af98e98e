################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Validation helpers shared by the fixed-size primitives."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from oasis_math.math_utils.errors import MatrixSizeError
from oasis_math.math_utils.errors import VectorSizeError


def require_matrix_size(values: Sequence[float], length: int, name: str) -> None:
    """Raise MatrixSizeError unless ``values`` has ``length`` entries."""
    if len(values) != length:
        raise MatrixSizeError(f"{name} must have length {length}")


def require_vector_size(values: Sequence[float], length: int, name: str) -> None:
    """Raise VectorSizeError unless ``values`` has ``length`` components."""
    if len(values) != length:
        raise VectorSizeError(f"{name} must have length {length}")


def matrix_out(out: list[float] | None, length: int) -> list[float]:
    """Return a validated matrix destination, allocating one if needed."""
    if out is None:
        return [0.0] * length
    require_matrix_size(out, length, "out")
    return out


def vector_out(out: list[float] | None, length: int) -> list[float]:
    """Return a validated vector destination, allocating one if needed."""
    if out is None:
        return [0.0] * length
    require_vector_size(out, length, "out")
    return out


def ieee_divide(numerator: float, denominator: float) -> float:
    """Divide with IEEE-754 semantics.

    Python floats raise ZeroDivisionError on division by zero. Degenerate
    inputs to normalization and matrix decomposition are documented to
    propagate ``inf``/``nan`` instead, so those paths divide through numpy.

    Args:
        numerator: Dividend
        denominator: Divisor, may be zero

    Returns:
        The quotient, ``+-inf`` for a non-zero numerator over zero, or ``nan``
        for zero over zero
    """
    if denominator != 0.0:
        return numerator / denominator
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(numerator) / np.float64(denominator))
