# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Exceptions raised by matrixa.

Everything derives from `MatrixError`, itself a `ValueError`, so callers
that only care about "bad input" can keep catching `ValueError`.
"""


class MatrixError(ValueError):
    """Base class for every matrix precondition failure."""


class EmptyMatrixError(MatrixError):
    """Thrown when an operation needs at least one row."""


class RaggedMatrixError(MatrixError):
    """Thrown when rows have inconsistent lengths."""


class InvalidRowLengthError(MatrixError):
    """Thrown when an appended row disagrees with the established row length."""


class IndexOutOfRangeError(MatrixError, IndexError):
    """Thrown when a row, column or cell index exceeds the matrix bounds."""


class NotSquareError(MatrixError):
    """Thrown when a square-only operation meets a rectangular matrix."""


class ShapeMismatchError(MatrixError):
    """Thrown when elementwise operands differ in shape."""


class DimensionMismatchError(ShapeMismatchError):
    """Thrown when a product's inner dimensions disagree."""


class SingularMatrixError(MatrixError):
    """Thrown when the determinant is zero."""


class InvalidShapeError(MatrixError):
    """Thrown when a requested shape is impossible (non-positive size, wrong array rank)."""
