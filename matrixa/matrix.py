# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Matrix container

A two-dimensional, row-major container of arbitrary Python objects.
Rows can be appended and replaced in place (every such call returns the
matrix itself so calls chain), while structural transforms and all
arithmetic return new, independently owned instances.

Example
-------
>>> from matrixa import Matrix
>>> m = Matrix().push([1, 2, 3]).push([4, 5, 6])
>>> m + 1
Matrix([[2, 3, 4], [5, 6, 7]])
>>> m.shape
(2, 3)
"""

import copy
import logging
from typing import Callable, Iterable, Iterator, List, Optional, Tuple

import numpy as np

from . import arithmetic
from .exceptions import ShapeMismatch
from .shape import (
    check_column,
    check_dims,
    check_index,
    check_row,
    check_rows,
)
from .utils import zero_like

logger = logging.getLogger(__name__)


class Matrix:
    """
    Rectangular matrix with validated, growable rows.

    Parameters
    ----------
    rows : iterable of iterables, optional
        Initial rows. Validated exactly like ``merge``: a jagged literal
        raises ``ShapeMismatch`` and no matrix is built.
    """

    # numpy must defer to our reflected operators instead of
    # broadcasting over ``__array__``
    __array_ufunc__ = None
    # mutable container
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, rows: Optional[Iterable[Iterable]] = None):
        self._rows: List[list] = []
        if rows is not None:
            self.merge(rows)

    # -----------------------------------------------------------------
    # Construction
    # -----------------------------------------------------------------
    @classmethod
    def new(cls) -> "Matrix":
        return cls()

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable]) -> "Matrix":
        return cls(rows)

    @classmethod
    def _from_checked(cls, rows: List[list]) -> "Matrix":
        # rows must already be rectangular and owned by nobody else
        res = cls()
        res._rows = rows
        return res

    @classmethod
    def full(cls, rows: int, cols: int, value) -> "Matrix":
        check_dims(rows, cols)
        return cls._from_checked([[value] * cols for _ in range(rows)])

    @classmethod
    def zeros(cls, rows: int, cols: int, zero=0) -> "Matrix":
        return cls.full(rows, cols, zero)

    @classmethod
    def identity(cls, n: int, one=1, zero=None) -> "Matrix":
        """n-by-n matrix with ``one`` on the diagonal and ``zero`` elsewhere."""
        check_dims(n, n)
        if zero is None:
            zero = zero_like(one)
        return cls._from_checked(
            [[one if i == j else zero for j in range(n)] for i in range(n)]
        )

    @classmethod
    def from_numpy(cls, array) -> "Matrix":
        array = np.asarray(array)
        if array.ndim != 2:
            raise ValueError(f"expected a 2-D array, got {array.ndim}-D")
        return cls._from_checked(array.tolist())

    # -----------------------------------------------------------------
    # Shape
    # -----------------------------------------------------------------
    @property
    def row_count(self) -> int:
        return len(self._rows)

    @property
    def col_count(self) -> int:
        return len(self._rows[0]) if self._rows else 0

    @property
    def shape(self) -> Tuple[int, int]:
        return self.row_count, self.col_count

    def is_empty(self) -> bool:
        return not self._rows

    def is_square(self) -> bool:
        """The empty matrix is not considered square."""
        return self.row_count != 0 and self.row_count == self.col_count

    # -----------------------------------------------------------------
    # Mutation (in place, chainable)
    # -----------------------------------------------------------------
    def push(self, row: Iterable) -> "Matrix":
        """Append one row; the matrix is unchanged if the length is wrong."""
        row = check_row(self.shape, row)
        self._rows.append(row)
        logger.debug("push: %r, shape is now %s", row, self.shape)
        return self

    def merge(self, rows: Iterable[Iterable]) -> "Matrix":
        """
        Append several rows, all or nothing.

        Every row is validated before any is appended, so a bad row
        anywhere in the batch leaves the matrix exactly as it was.
        """
        if isinstance(rows, Matrix):
            rows = rows.iter_rows()
        checked = check_rows(self.shape, rows)
        self._rows.extend(checked)
        logger.debug("merge: %d rows, shape is now %s", len(checked), self.shape)
        return self

    def row_replace(self, index: int, row: Iterable) -> "Matrix":
        index = check_index(index, self.row_count, "row")
        row = check_row(self.shape, row)
        self._rows[index] = row
        logger.debug("row_replace: row %d <- %r", index, row)
        return self

    def col_replace(self, index: int, col: Iterable) -> "Matrix":
        index = check_index(index, self.col_count, "column")
        col = check_column(self.shape, col)
        for row, value in zip(self._rows, col):
            row[index] = value
        logger.debug("col_replace: column %d <- %r", index, col)
        return self

    def swap_rows(self, a: int, b: int) -> "Matrix":
        a = check_index(a, self.row_count, "row")
        b = check_index(b, self.row_count, "row")
        self._rows[a], self._rows[b] = self._rows[b], self._rows[a]
        logger.debug("swap_rows: %d <-> %d", a, b)
        return self

    def swap_cols(self, a: int, b: int) -> "Matrix":
        a = check_index(a, self.col_count, "column")
        b = check_index(b, self.col_count, "column")
        for row in self._rows:
            row[a], row[b] = row[b], row[a]
        logger.debug("swap_cols: %d <-> %d", a, b)
        return self

    def __setitem__(self, key: Tuple[int, int], value) -> None:
        i, j = self._element_index(key)
        self._rows[i][j] = value

    # -----------------------------------------------------------------
    # Read access
    # -----------------------------------------------------------------
    def _element_index(self, key) -> Tuple[int, int]:
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError("matrix elements are addressed as m[row, col]")
        i, j = key
        return (
            check_index(i, self.row_count, "row"),
            check_index(j, self.col_count, "column"),
        )

    def __getitem__(self, key):
        """``m[i, j]`` is an element, ``m[i]`` a copy of row i."""
        if isinstance(key, tuple):
            i, j = self._element_index(key)
            return self._rows[i][j]
        return self.row(key)

    def row(self, index: int) -> list:
        index = check_index(index, self.row_count, "row")
        return list(self._rows[index])

    def col(self, index: int) -> list:
        index = check_index(index, self.col_count, "column")
        return [row[index] for row in self._rows]

    def tolist(self) -> List[list]:
        return copy.deepcopy(self._rows)

    def to_numpy(self, dtype=None) -> np.ndarray:
        if not self._rows:
            return np.empty((0, 0), dtype=dtype if dtype is not None else float)
        return np.array(self._rows, dtype=dtype)

    def __array__(self, dtype=None, copy=None):
        return self.to_numpy(dtype)

    def iter_rows(self) -> Iterator[list]:
        for row in self._rows:
            yield list(row)

    def __iter__(self) -> Iterator:
        """Elements in row-major order."""
        for row in self._rows:
            yield from row

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.shape != other.shape:
            return False
        return all(
            a == b
            for lhs, rhs in zip(self._rows, other._rows)
            for a, b in zip(lhs, rhs)
        )

    def allclose(self, other, rtol: float = 1e-05, atol: float = 1e-08) -> bool:
        """Numerical closeness for floating point matrices."""
        other = np.asarray(other)
        if other.ndim != 2 or other.shape != self.shape:
            if self.is_empty() and other.size == 0:
                return True
            return False
        return bool(np.allclose(self.to_numpy(), other, rtol=rtol, atol=atol))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._rows!r})"

    # -----------------------------------------------------------------
    # Structural transforms (new instances)
    # -----------------------------------------------------------------
    def copy(self) -> "Matrix":
        """Fully independent duplicate, elements included."""
        return self._from_checked(copy.deepcopy(self._rows))

    def __copy__(self) -> "Matrix":
        return self.copy()

    def __deepcopy__(self, memo) -> "Matrix":
        return self._from_checked(copy.deepcopy(self._rows, memo))

    def transpose(self) -> "Matrix":
        """
        Element (i, j) becomes (j, i).

        Rows of zero width have no columns to turn into rows, so such a
        matrix transposes to the empty matrix.
        """
        return self._from_checked([list(col) for col in zip(*self._rows)])

    @property
    def T(self) -> "Matrix":
        return self.transpose()

    def resize(self, rows: int, cols: int, fill=0) -> "Matrix":
        """
        Return a rows-by-cols copy.

        Overlapping cells keep their values, new cells get ``fill`` and
        anything outside the new bounds is dropped.
        """
        check_dims(rows, cols)
        res = []
        for i in range(rows):
            kept = self._rows[i][:cols] if i < self.row_count else []
            res.append(kept + [fill] * (cols - len(kept)))
        logger.debug("resize: %s -> %s", self.shape, (rows, cols))
        return self._from_checked(res)

    def fill_zero(self) -> "Matrix":
        return self.map(zero_like)

    def map(self, func: Callable) -> "Matrix":
        """Apply ``func`` to every element, e.g. ``m.map(float)``."""
        return self._from_checked([[func(x) for x in row] for row in self._rows])

    def minor(self, i: int, j: int) -> "Matrix":
        """The submatrix left after deleting row i and column j."""
        i = check_index(i, self.row_count, "row")
        j = check_index(j, self.col_count, "column")
        return self._from_checked(
            [row[:j] + row[j + 1 :] for k, row in enumerate(self._rows) if k != i]
        )

    # -----------------------------------------------------------------
    # Arithmetic
    # -----------------------------------------------------------------
    @staticmethod
    def _operand(other):
        """
        Matrix operands pass through, 2-D arrays become matrices and
        anything else is treated as a scalar. Arrays of any other
        dimensionality are rejected instead of being broadcast.
        """
        if isinstance(other, np.ndarray) and other.ndim >= 1:
            if other.ndim != 2:
                raise ShapeMismatch(
                    2,
                    other.ndim,
                    f"array operand must be 2-D, got {other.ndim}-D",
                )
            return Matrix.from_numpy(other)
        return other

    def add(self, other) -> "Matrix":
        other = self._operand(other)
        if isinstance(other, Matrix):
            return arithmetic.add(self, other)
        return arithmetic.scalar_add(self, other)

    def sub(self, other) -> "Matrix":
        other = self._operand(other)
        if isinstance(other, Matrix):
            return arithmetic.sub(self, other)
        return arithmetic.scalar_sub(self, other)

    def mul(self, other) -> "Matrix":
        """Scalar multiple, or the matrix product for a Matrix operand."""
        other = self._operand(other)
        if isinstance(other, Matrix):
            return arithmetic.matmul(self, other)
        return arithmetic.scalar_mul(self, other)

    def div(self, other) -> "Matrix":
        other = self._operand(other)
        if isinstance(other, Matrix):
            return arithmetic.div(self, other)
        return arithmetic.scalar_div(self, other)

    def rem(self, other) -> "Matrix":
        other = self._operand(other)
        if isinstance(other, Matrix):
            return arithmetic.rem(self, other)
        return arithmetic.scalar_rem(self, other)

    def prod(self, other: "Matrix") -> "Matrix":
        return arithmetic.matmul(self, self._operand(other))

    def hadamard(self, other: "Matrix") -> "Matrix":
        return arithmetic.hadamard(self, self._operand(other))

    __add__ = add
    __sub__ = sub
    __mul__ = mul
    __truediv__ = div
    __mod__ = rem

    def __radd__(self, other) -> "Matrix":
        other = self._operand(other)
        if isinstance(other, Matrix):
            return arithmetic.add(other, self)
        return arithmetic.scalar_add(self, other)

    def __rsub__(self, other) -> "Matrix":
        other = self._operand(other)
        if isinstance(other, Matrix):
            return arithmetic.sub(other, self)
        return arithmetic.scalar_rsub(self, other)

    def __rmul__(self, other) -> "Matrix":
        other = self._operand(other)
        if isinstance(other, Matrix):
            return arithmetic.matmul(other, self)
        return arithmetic.scalar_mul(self, other)

    def __matmul__(self, other):
        other = self._operand(other)
        if not isinstance(other, Matrix):
            return NotImplemented
        return arithmetic.matmul(self, other)

    def __rmatmul__(self, other):
        other = self._operand(other)
        if not isinstance(other, Matrix):
            return NotImplemented
        return arithmetic.matmul(other, self)

    def __neg__(self) -> "Matrix":
        return arithmetic.negate(self)

    def __and__(self, other):
        other = self._operand(other)
        if not isinstance(other, Matrix):
            return NotImplemented
        return arithmetic.logical_and(self, other)

    def __or__(self, other):
        other = self._operand(other)
        if not isinstance(other, Matrix):
            return NotImplemented
        return arithmetic.logical_or(self, other)

    def __xor__(self, other):
        other = self._operand(other)
        if not isinstance(other, Matrix):
            return NotImplemented
        return arithmetic.logical_xor(self, other)

    def __invert__(self) -> "Matrix":
        return arithmetic.logical_not(self)

    # -----------------------------------------------------------------
    # Linear algebra, see matrix_functions
    # -----------------------------------------------------------------
    def trace(self):
        from .matrix_functions import trace

        return trace(self)

    def determinant(self):
        from .matrix_functions import det

        return det(self)

    det = determinant

    def cofactor(self, i: int, j: int):
        from .matrix_functions import cofactor

        return cofactor(self, i, j)

    def is_regular(self, tol: float = 0.0) -> bool:
        from .matrix_functions import is_regular

        return is_regular(self, tol=tol)

    def adjugate(self) -> "Matrix":
        from .matrix_functions import adj

        return adj(self)

    def inverse(self, tol: float = 0.0) -> "Matrix":
        from .matrix_functions import inverse

        return inverse(self, tol=tol)
