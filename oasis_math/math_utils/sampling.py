################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Random generator resolution for the random constructors."""

from __future__ import annotations

import numpy as np

from oasis_math.config.math_params import RandomParams


def generator_from_params(params: RandomParams) -> np.random.Generator:
    """Return a numpy generator seeded from the random parameters."""
    return np.random.default_rng(params.seed)


def resolve_generator(rng: np.random.Generator | None) -> np.random.Generator:
    """Return ``rng``, or a new generator seeded with the configured seed."""
    if rng is not None:
        return rng
    return generator_from_params(RandomParams())
