# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Error taxonomy for matrix operations.

Every error derives from ``MatrixError`` which is itself a ``ValueError``,
so ``except ValueError`` keeps working for callers that treat bad matrix
input the same way numpy does.
"""

from typing import Optional, Tuple


class MatrixError(ValueError):
    """Base class for all matrix errors."""


class ShapeMismatch(MatrixError):
    """A row, column or operand does not fit the shape it is combined with."""

    def __init__(self, expected, actual, message: Optional[str] = None):
        self.expected = expected
        self.actual = actual
        if message is None:
            message = f"shape mismatch: expected {expected}, got {actual}"
        super().__init__(message)


class IndexOutOfBounds(MatrixError, IndexError):
    def __init__(self, index: int, bound: int, axis: str = "row"):
        self.index = index
        self.bound = bound
        self.axis = axis
        super().__init__(
            f"{axis} index {index} is out of bounds: must be in [0, {bound})"
        )


class NotSquare(MatrixError):
    def __init__(self, shape: Tuple[int, int], operation: str = "operation"):
        self.shape = shape
        super().__init__(
            f"{operation} is undefined for a non-square matrix of shape {shape}"
        )


class DivisionByZero(MatrixError, ZeroDivisionError):
    """Scalar or elementwise division / remainder by the additive identity."""


class NotInvertible(MatrixError):
    """The matrix has no inverse (singular, non-square or integer-valued)."""
