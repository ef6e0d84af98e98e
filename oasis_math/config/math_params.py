################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Structured configuration schema for the math primitives."""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import fields
from dataclasses import replace
from typing import Any


# Relative tolerance used by approximate equality checks
TOLERANCE_EPSILON: float = 1e-6
# Threshold for near-identity and near-antiparallel rotation branches
TOLERANCE_ROTATION_EPSILON: float = 1e-6

# Seed for random constructors when no generator is supplied
RANDOM_SEED: int | None = None


class MathParamsError(Exception):
    """Raised when math parameter validation fails."""


def _require_positive(value: float, name: str) -> None:
    """Require a positive value."""
    if value <= 0.0:
        raise MathParamsError(f"{name} must be positive")


def _require_below_one(value: float, name: str) -> None:
    """Require a value strictly smaller than one."""
    if value >= 1.0:
        raise MathParamsError(f"{name} must be smaller than 1")


def _validate_optional_non_negative_int(value: int | None, name: str) -> None:
    """Validate an optional non-negative integer value."""
    if value is None:
        return
    if isinstance(value, bool) or not isinstance(value, int):
        raise MathParamsError(f"{name} must be an int")
    if value < 0:
        raise MathParamsError(f"{name} must be non-negative")


@dataclass(frozen=True)
class ToleranceParams:
    """Floating-point tolerances."""

    # Relative tolerance for approximate equality
    epsilon: float = TOLERANCE_EPSILON
    # Threshold for near-degenerate rotation branches
    rotation_epsilon: float = TOLERANCE_ROTATION_EPSILON


@dataclass(frozen=True)
class RandomParams:
    """Random constructor parameters."""

    # Seed for the default numpy generator, or None for OS entropy
    seed: int | None = RANDOM_SEED


@dataclass(frozen=True)
class MathParams:
    """Complete configuration tree for the math primitives."""

    tolerance: ToleranceParams
    random: RandomParams

    @classmethod
    def defaults(cls) -> MathParams:
        """Return the default parameter tree."""
        return cls(
            tolerance=ToleranceParams(),
            random=RandomParams(),
        )

    def validate(self) -> None:
        """Validate parameter invariants and constraints."""
        _require_positive(self.tolerance.epsilon, "tolerance.epsilon")
        _require_below_one(self.tolerance.epsilon, "tolerance.epsilon")
        _require_positive(
            self.tolerance.rotation_epsilon, "tolerance.rotation_epsilon"
        )
        _require_below_one(
            self.tolerance.rotation_epsilon, "tolerance.rotation_epsilon"
        )
        _validate_optional_non_negative_int(self.random.seed, "random.seed")

    def replace(self, **namespace_overrides: Any) -> MathParams:
        """Return a modified copy of the parameters."""
        return replace(self, **namespace_overrides)

    def as_nested_dict(self) -> dict[str, Any]:
        """Return a nested dict representation for debugging."""
        return _dataclass_to_dict(self)


def _dataclass_to_dict(value: Any) -> Any:
    """Convert dataclasses into plain Python values."""
    if hasattr(value, "__dataclass_fields__"):
        return {
            field.name: _dataclass_to_dict(getattr(value, field.name))
            for field in fields(value)
        }
    return value


# Defaults shared by every module
EPSILON: float = TOLERANCE_EPSILON
ROTATION_EPSILON: float = TOLERANCE_ROTATION_EPSILON
