# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Elementwise and matrix arithmetic

Every function takes its operands read-only and returns a new matrix of
the same class as the left operand. Shapes are checked before any
element is touched.
"""

import functools
import logging
import operator
from typing import TYPE_CHECKING, Callable

import numpy as np

from .exceptions import DivisionByZero
from .shape import check_product_shape, check_same_shape

if TYPE_CHECKING:
    from .matrix import Matrix

logger = logging.getLogger(__name__)


def _scalar(m: "Matrix", value, op: Callable) -> "Matrix":
    return m._from_checked([[op(x, value) for x in row] for row in m._rows])


def _elementwise(lhs: "Matrix", rhs: "Matrix", op: Callable, name: str) -> "Matrix":
    check_same_shape(lhs.shape, rhs.shape, name)
    return lhs._from_checked(
        [[op(a, b) for a, b in zip(r1, r2)] for r1, r2 in zip(lhs._rows, rhs._rows)]
    )


def _check_divisor(value) -> None:
    if value == 0:
        raise DivisionByZero("division by zero")


# ---------------------------------------------------------------------
# Scalar form
# ---------------------------------------------------------------------
def scalar_add(m: "Matrix", value) -> "Matrix":
    return _scalar(m, value, operator.add)


def scalar_sub(m: "Matrix", value) -> "Matrix":
    return _scalar(m, value, operator.sub)


def scalar_rsub(m: "Matrix", value) -> "Matrix":
    """``value - m`` for every element."""
    return _scalar(m, value, lambda x, v: v - x)


def scalar_mul(m: "Matrix", value) -> "Matrix":
    return _scalar(m, value, operator.mul)


def scalar_div(m: "Matrix", value) -> "Matrix":
    _check_divisor(value)
    return _scalar(m, value, operator.truediv)


def scalar_rem(m: "Matrix", value) -> "Matrix":
    _check_divisor(value)
    return _scalar(m, value, operator.mod)


def negate(m: "Matrix") -> "Matrix":
    return m.map(operator.neg)


# ---------------------------------------------------------------------
# Matrix-matrix form
# ---------------------------------------------------------------------
def add(lhs: "Matrix", rhs: "Matrix") -> "Matrix":
    return _elementwise(lhs, rhs, operator.add, "addition")


def sub(lhs: "Matrix", rhs: "Matrix") -> "Matrix":
    return _elementwise(lhs, rhs, operator.sub, "subtraction")


def hadamard(lhs: "Matrix", rhs: "Matrix") -> "Matrix":
    """Elementwise (Hadamard) product of two equal-shaped matrices."""
    return _elementwise(lhs, rhs, operator.mul, "hadamard product")


def div(lhs: "Matrix", rhs: "Matrix") -> "Matrix":
    check_same_shape(lhs.shape, rhs.shape, "division")
    for value in rhs:
        _check_divisor(value)
    return _elementwise(lhs, rhs, operator.truediv, "division")


def rem(lhs: "Matrix", rhs: "Matrix") -> "Matrix":
    check_same_shape(lhs.shape, rhs.shape, "remainder")
    for value in rhs:
        _check_divisor(value)
    return _elementwise(lhs, rhs, operator.mod, "remainder")


def _dot(row, col):
    return functools.reduce(operator.add, map(operator.mul, row, col))


def matmul(lhs: "Matrix", rhs: "Matrix") -> "Matrix":
    """
    Standard matrix product.

    Parameters
    ----------
    lhs : (m, k) Matrix
    rhs : (k, n) Matrix

    Returns
    -------
    (m, n) Matrix whose (i, j) entry is sum_k lhs[i, k] * rhs[k, j]
    """
    check_product_shape(lhs.shape, rhs.shape)
    cols = list(zip(*rhs._rows))
    logger.debug("matmul: %s @ %s", lhs.shape, rhs.shape)
    return lhs._from_checked([[_dot(row, col) for col in cols] for row in lhs._rows])


# ---------------------------------------------------------------------
# Bitwise / boolean logic, using each element's own & | ^ ~
# ---------------------------------------------------------------------
def logical_and(lhs: "Matrix", rhs: "Matrix") -> "Matrix":
    return _elementwise(lhs, rhs, operator.and_, "and")


def logical_or(lhs: "Matrix", rhs: "Matrix") -> "Matrix":
    return _elementwise(lhs, rhs, operator.or_, "or")


def logical_xor(lhs: "Matrix", rhs: "Matrix") -> "Matrix":
    return _elementwise(lhs, rhs, operator.xor, "xor")


def _invert(x):
    # ~True is -2 for Python bools
    if isinstance(x, (bool, np.bool_)):
        return not x
    return operator.invert(x)


def logical_not(m: "Matrix") -> "Matrix":
    return m.map(_invert)
