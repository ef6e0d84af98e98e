################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Exceptions raised by the linear algebra primitives."""

from __future__ import annotations


class LinalgError(ValueError):
    """Base class for invalid linear algebra input."""


class SingularMatrixError(LinalgError):
    """Raised when inverting a matrix whose determinant is exactly zero."""

    def __init__(self, message: str = "The matrix cannot be inverted") -> None:
        super().__init__(message)


class MatrixSizeError(LinalgError):
    """Raised when a matrix has the wrong dimensions for an operation."""

    def __init__(self, message: str = "Invalid matrix dimensions") -> None:
        super().__init__(message)


class PartialMatrixError(MatrixSizeError):
    """Raised when matrix columns do not all have the same height."""

    def __init__(self, message: str = "The matrix is not rectangular") -> None:
        super().__init__(message)


class VectorSizeError(LinalgError):
    """Raised when a vector has the wrong number of components."""

    def __init__(self, message: str = "Invalid vector dimensions") -> None:
        super().__init__(message)


class MagnitudeError(LinalgError):
    """Raised when a rotation axis has zero magnitude."""

    def __init__(self, message: str = "The vector is too small") -> None:
        super().__init__(message)
