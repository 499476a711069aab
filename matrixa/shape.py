# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Shape validation

Pure functions over a ``(row_count, col_count)`` tuple. Every mutating
matrix operation passes its input through one of these before touching
any state, so a failed check always leaves the matrix as it was.
"""

import operator
from typing import Iterable, List, Tuple

from .exceptions import IndexOutOfBounds, NotSquare, ShapeMismatch

Shape = Tuple[int, int]


def check_row(shape: Shape, row: Iterable) -> list:
    """
    Validate a candidate row against an existing shape.

    An empty matrix accepts a row of any length, which then fixes the
    column count. Returns a fresh list holding the row's elements.
    """
    rows, cols = shape
    row = list(row)
    if rows != 0 and len(row) != cols:
        raise ShapeMismatch(
            cols,
            len(row),
            f"invalid row length: {len(row)}, expected: {cols}",
        )
    return row


def check_rows(shape: Shape, rows: Iterable[Iterable]) -> List[list]:
    """
    Validate a batch of rows as if they were appended one at a time.

    The first row of a batch on an empty matrix establishes the column
    count for the rest of the batch. Nothing is returned unless every
    row passes.
    """
    n_rows, n_cols = shape
    checked: List[list] = []
    for row in rows:
        row = check_row((n_rows, n_cols), row)
        if n_rows == 0:
            n_cols = len(row)
        n_rows += 1
        checked.append(row)
    return checked


def check_column(shape: Shape, col: Iterable) -> list:
    rows, _cols = shape
    col = list(col)
    if len(col) != rows:
        raise ShapeMismatch(
            rows,
            len(col),
            f"invalid column length: {len(col)}, expected: {rows}",
        )
    return col


def check_index(index: int, bound: int, axis: str = "row") -> int:
    try:
        index = operator.index(index)
    except TypeError:
        raise TypeError(
            f"{axis} index must be an integer, got {type(index).__name__}"
        ) from None
    if not 0 <= index < bound:
        raise IndexOutOfBounds(index, bound, axis)
    return index


def check_same_shape(lhs: Shape, rhs: Shape, operation: str = "operation") -> None:
    if tuple(lhs) != tuple(rhs):
        raise ShapeMismatch(
            tuple(lhs),
            tuple(rhs),
            f"{operation} requires equal shapes, got {tuple(lhs)} and {tuple(rhs)}",
        )


def check_product_shape(lhs: Shape, rhs: Shape) -> None:
    """The matrix product needs lhs columns == rhs rows."""
    if lhs[1] != rhs[0]:
        raise ShapeMismatch(
            lhs[1],
            rhs[0],
            f"column count of the left operand {lhs[1]} does not match "
            f"the row count of the right operand {rhs[0]}",
        )


def check_square(shape: Shape, operation: str = "operation") -> None:
    rows, cols = shape
    if rows == 0 or rows != cols:
        raise NotSquare(tuple(shape), operation)


def check_dims(rows: int, cols: int) -> None:
    if rows < 0 or cols < 0:
        raise ValueError(f"matrix dimensions must be non-negative, got {rows}x{cols}")
