# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

from fractions import Fraction

import numpy as np
import pytest

from matrixa import DivisionByZero, Matrix, ShapeMismatch, hadamard, matmul
from matrixa.utils import random_matrix


def test_scalar_add_after_push():
    m = Matrix().push([1, 2, 3]).push([4, 5, 6])
    assert (m + 1).tolist() == [[2, 3, 4], [5, 6, 7]]
    assert m.add(1) == m + 1
    # operands are never mutated
    assert m.tolist() == [[1, 2, 3], [4, 5, 6]]


def test_scalar_operations():
    m = Matrix([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
    assert (m - 5).tolist() == [[-4, -3, -2], [-1, 0, 1], [2, 3, 4]]
    assert (m * 2).tolist() == [[2, 4, 6], [8, 10, 12], [14, 16, 18]]
    assert ((m * 2) / 2).tolist() == [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
    assert (2 * m) == m * 2
    assert (1 + m) == m + 1
    assert (10 - m).tolist() == [[9, 8, 7], [6, 5, 4], [3, 2, 1]]
    assert (-m).tolist() == [[-1, -2, -3], [-4, -5, -6], [-7, -8, -9]]


def test_scalar_remainder():
    m = Matrix([[1, 2, 3], [4, 5, 6], [-7, -8, -9]])
    # Python's modulo takes the sign of the divisor
    assert (m % 2).tolist() == [[1, 0, 1], [0, 1, 0], [1, 0, 1]]
    assert m.rem(3) == m % 3


def test_scalar_division_by_zero():
    m = Matrix([[1.0, 2.0]])
    with pytest.raises(DivisionByZero):
        m / 0
    with pytest.raises(DivisionByZero):
        m % 0
    with pytest.raises(ZeroDivisionError):
        m.div(0.0)


def test_scalar_ops_on_empty_matrix():
    assert Matrix() + 1 == Matrix()
    assert Matrix() * 3 == Matrix()


def test_matrix_addition_and_subtraction():
    m = Matrix([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
    n = Matrix([[2, 3, 4], [5, 6, 7], [8, 9, 10]])
    assert (m + n).tolist() == [[3, 5, 7], [9, 11, 13], [15, 17, 19]]
    assert (m - n).tolist() == [[-1, -1, -1], [-1, -1, -1], [-1, -1, -1]]
    assert m + m.fill_zero() == m


def test_elementwise_shape_mismatch():
    m = Matrix([[1, 2, 3], [4, 5, 6]])
    n = Matrix([[1, 2], [3, 4], [5, 6]])
    for op in (m.add, m.sub, m.hadamard, m.div, m.rem):
        with pytest.raises(ShapeMismatch):
            op(n)


def test_hadamard():
    m = Matrix([[1, 2], [3, 4]])
    n = Matrix([[5, 6], [7, 8]])
    assert m.hadamard(n).tolist() == [[5, 12], [21, 32]]
    assert hadamard(m, n) == m.hadamard(n)


def test_elementwise_division_and_remainder():
    m = Matrix([[1, 2, 3], [4, 5, 6], [-7, -8, -9]])
    other = Matrix([[-7, -8, -9], [6, 5, 4], [3, 2, 1]])
    assert (m % other).tolist() == [[-6, -6, -6], [4, 0, 2], [2, 0, 0]]
    assert (m / other).allclose(m.to_numpy() / other.to_numpy())
    with pytest.raises(DivisionByZero):
        m / Matrix([[1, 1, 1], [1, 0, 1], [1, 1, 1]])


def test_matrix_product():
    m = Matrix([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
    n = Matrix([[2, 3, 4], [5, 6, 7], [8, 9, 10]])
    res = [[36, 42, 48], [81, 96, 111], [126, 150, 174]]
    assert (m * n).tolist() == res
    assert (m @ n).tolist() == res
    assert m.prod(n).tolist() == res
    assert matmul(m, n).tolist() == res


def test_matrix_product_rectangular():
    A = random_matrix(3, 5, seed=1)
    B = random_matrix(5, 2, seed=2)
    C = Matrix.from_numpy(A) @ Matrix.from_numpy(B)
    assert C.shape == (3, 2)
    np.testing.assert_allclose(C.to_numpy(), A @ B, rtol=1e-12)


def test_matrix_product_shape_mismatch():
    m = Matrix([[1, 2, 3], [4, 5, 7]])
    with pytest.raises(ShapeMismatch):
        m * Matrix([[1, 0], [0, 1]])
    with pytest.raises(ShapeMismatch):
        m.prod(Matrix())


def test_identity_is_neutral_for_product():
    m = Matrix([[1, 2, 0], [3, 1, 2], [-1, 3, 1]])
    I = Matrix.identity(3)
    assert m * I == m
    assert I * m == m


def test_exact_arithmetic_with_fractions():
    m = Matrix([[1, 2], [3, 4]]).map(Fraction)
    assert (m / 3).tolist() == [[Fraction(1, 3), Fraction(2, 3)], [1, Fraction(4, 3)]]


def test_boolean_logic():
    m = Matrix([[True, True, False], [False, False, True]])
    n = Matrix([[True, False, False], [True, False, True]])
    assert (m & n).tolist() == [[True, False, False], [False, False, True]]
    assert (m | n).tolist() == [[True, True, False], [True, False, True]]
    assert (m ^ n).tolist() == [[False, True, False], [True, False, False]]
    assert (~m).tolist() == [[False, False, True], [True, True, False]]
    with pytest.raises(ShapeMismatch):
        m & Matrix([[True]])


def test_unsupported_operand():
    with pytest.raises(TypeError):
        Matrix([[1]]) @ 2


def test_ndarray_operands_are_matrices():
    m = Matrix([[1, 2], [3, 4]])
    ones = np.ones((2, 2))
    assert isinstance(m + ones, Matrix)
    assert m + ones == m + 1
    assert m - ones == m - 1
    assert m / ones == m / 1
    assert m * np.eye(2) == m
    assert m @ np.eye(2) == m
    assert m.hadamard(2 * ones) == m * 2
    # reflected forms go through the matrix, not numpy broadcasting
    assert isinstance(ones + m, Matrix)
    assert ones + m == m + 1
    assert ones - m == 1 - m
    assert np.eye(2) * m == m
    assert np.eye(2) @ m == m


def test_ndarray_operand_shape_mismatch():
    m = Matrix([[1, 2], [3, 4]])
    big = np.ones((3, 3))
    for op in (
        lambda a, b: a + b,
        lambda a, b: a - b,
        lambda a, b: a * b,
        lambda a, b: a / b,
        lambda a, b: a % b,
        lambda a, b: a @ b,
        lambda a, b: a.hadamard(b),
    ):
        with pytest.raises(ShapeMismatch):
            op(m, big)
    with pytest.raises(ShapeMismatch):
        big + m


def test_non_2d_ndarray_operand_is_rejected():
    m = Matrix([[1, 2], [3, 4]])
    with pytest.raises(ShapeMismatch):
        m / np.zeros(2)
    with pytest.raises(ShapeMismatch):
        m + np.ones(4)
    with pytest.raises(ShapeMismatch):
        m * np.ones((2, 2, 1))
    # a 0-d array is still a scalar
    assert m + np.float64(1.0) == m + 1


def test_bitwise_logic_on_integers():
    m = Matrix([[6, 5]])
    n = Matrix([[3, 4]])
    assert (m & n).tolist() == [[2, 4]]
    assert (m | n).tolist() == [[7, 5]]
    assert (m ^ n).tolist() == [[5, 1]]
    assert (~Matrix([[0, 5]])).tolist() == [[-1, -6]]
    # bools stay bools under negation
    assert (~Matrix([[True, np.bool_(False)]])).tolist() == [[False, True]]
