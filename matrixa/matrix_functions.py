# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import logging

from . import arithmetic
from .exceptions import NotInvertible
from .matrix import Matrix
from .shape import check_index, check_square
from .utils import is_integral, one_like, zero_like

logger = logging.getLogger(__name__)

# Above this size cofactor expansion gets noticeably slow (O(n!))
COFACTOR_WARN_DIM = 8


def _minor_rows(rows, i, j):
    return [row[:j] + row[j + 1 :] for k, row in enumerate(rows) if k != i]


def _det(rows):
    n = len(rows)
    if n == 1:
        return rows[0][0]
    if n == 2:
        return rows[0][0] * rows[1][1] - rows[0][1] * rows[1][0]

    # Laplace expansion along the first row
    res = None
    for j, a in enumerate(rows[0]):
        term = a * _det(_minor_rows(rows, 0, j))
        if res is None:
            res = term
        elif j % 2:
            res = res - term
        else:
            res = res + term
    return res


def _warn_if_large(A: Matrix, name: str) -> None:
    if A.row_count > COFACTOR_WARN_DIM:
        logger.warning(
            "%s(): cofactor expansion on a %dx%d matrix is O(n!)",
            name,
            A.row_count,
            A.col_count,
        )


def _is_nonzero(d, tol: float) -> bool:
    if tol:
        return abs(d) > tol
    return d != zero_like(d)


def identity(n: int, one=1, zero=None) -> Matrix:
    return Matrix.identity(n, one=one, zero=zero)


def trace(A: Matrix):
    """Sum of the main diagonal."""
    check_square(A.shape, "trace")
    res = A[0, 0]
    for i in range(1, A.row_count):
        res = res + A[i, i]
    return res


def det(A: Matrix):
    """
    Determinant of an n-by-n matrix A by recursive cofactor
    (Laplace) expansion along the first row.

    The arithmetic is whatever the element type provides, so integer
    and Fraction matrices give exact results.
    """
    check_square(A.shape, "determinant")
    _warn_if_large(A, "det")
    return _det(A._rows)


def cofactor(A: Matrix, i: int, j: int):
    """(-1)^(i+j) times the determinant of the (i, j) minor."""
    check_square(A.shape, "cofactor")
    i = check_index(i, A.row_count, "row")
    j = check_index(j, A.col_count, "column")
    if A.row_count == 1:
        return one_like(A[0, 0])
    d = _det(_minor_rows(A._rows, i, j))
    return -d if (i + j) % 2 else d


def is_regular(A: Matrix, tol: float = 0.0) -> bool:
    """
    True iff A is square with a non-zero determinant.

    With ``tol`` > 0 the determinant must exceed ``tol`` in magnitude,
    which is the useful test for floating point input.
    """
    if not A.is_square():
        return False
    return _is_nonzero(det(A), tol)


def adj(A: Matrix) -> Matrix:
    """
    Adjugate (classical adjoint) of a square matrix A: the transpose
    of its cofactor matrix. The adjugate of a 1x1 matrix is [[1]].
    """
    check_square(A.shape, "adjugate")
    _warn_if_large(A, "adj")
    n = A.row_count
    if n == 1:
        return Matrix.identity(1, one=one_like(A[0, 0]))

    C = [[None] * n for _ in range(n)]
    for i in range(n):
        for j in range(n):
            d = _det(_minor_rows(A._rows, i, j))
            # store transposed
            C[j][i] = -d if (i + j) % 2 else d
    return A._from_checked(C)


adjugate = adj


def inverse(A: Matrix, tol: float = 0.0) -> Matrix:
    """
    Inverse of A as adj(A) / det(A).

    Raises
    ------
    NotInvertible : if A is not square, is singular, or holds only integers.
        An all-integer matrix is refused rather than truncated; a single
        float or Fraction element is enough to go ahead. Convert integer
        matrices first with ``A.map(float)`` or, for an exact result,
        ``A.map(fractions.Fraction)``.
    """
    if not A.is_square():
        raise NotInvertible(f"a non-square matrix of shape {A.shape} has no inverse")
    if all(is_integral(x) for x in A):
        raise NotInvertible(
            "inverse of an integer matrix is not representable; "
            "convert it with map(float) or map(Fraction) first"
        )
    d = det(A)
    if not _is_nonzero(d, tol):
        raise NotInvertible("the matrix is singular (not a regular matrix)")
    logger.debug("inverse: det = %r", d)
    return arithmetic.scalar_div(adj(A), d)
