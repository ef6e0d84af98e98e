################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Shared tolerance, validation and error helpers."""

from __future__ import annotations

from oasis_math.math_utils.errors import LinalgError
from oasis_math.math_utils.errors import MagnitudeError
from oasis_math.math_utils.errors import MatrixSizeError
from oasis_math.math_utils.errors import PartialMatrixError
from oasis_math.math_utils.errors import SingularMatrixError
from oasis_math.math_utils.errors import VectorSizeError


__all__ = [
    "LinalgError",
    "MagnitudeError",
    "MatrixSizeError",
    "PartialMatrixError",
    "SingularMatrixError",
    "VectorSizeError",
]
