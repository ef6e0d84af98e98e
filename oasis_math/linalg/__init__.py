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
Matrix operations
"""

from __future__ import annotations

from oasis_math.linalg.dense_matrix import DenseMatrix
from oasis_math.linalg.square_matrix import SquareMatrix


__all__ = ["DenseMatrix", "SquareMatrix"]
