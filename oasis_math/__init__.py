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
Linear algebra primitives: vectors, matrices, quaternions and dual
quaternions stored as flat column-major float lists
"""

from __future__ import annotations


__version__: str = "0.1.0"
