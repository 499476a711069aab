# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import numpy as np
import pytest

from matrixa.exceptions import IndexOutOfBounds, NotSquare, ShapeMismatch
from matrixa.shape import (
    check_column,
    check_dims,
    check_index,
    check_product_shape,
    check_row,
    check_rows,
    check_same_shape,
    check_square,
)


def test_empty_shape_accepts_any_row_length():
    assert check_row((0, 0), [1, 2, 3]) == [1, 2, 3]
    assert check_row((0, 0), []) == []


def test_row_length_must_match_columns():
    assert check_row((2, 3), (7, 8, 9)) == [7, 8, 9]
    with pytest.raises(ShapeMismatch) as info:
        check_row((2, 3), [1, 2])
    assert info.value.expected == 3
    assert info.value.actual == 2


def test_check_row_returns_a_copy():
    row = [1, 2]
    checked = check_row((0, 0), row)
    checked[0] = 99
    assert row == [1, 2]


def test_batch_first_row_fixes_column_count():
    assert check_rows((0, 0), [[1, 2], [3, 4]]) == [[1, 2], [3, 4]]
    with pytest.raises(ShapeMismatch):
        check_rows((0, 0), [[1, 2], [3, 4, 5]])
    with pytest.raises(ShapeMismatch):
        check_rows((1, 3), [[1, 2, 3], [4, 5]])


def test_batch_accepts_generators():
    rows = ((i, i + 1) for i in range(3))
    assert check_rows((0, 0), rows) == [[0, 1], [1, 2], [2, 3]]


def test_column_length_must_match_rows():
    assert check_column((2, 5), [1, 2]) == [1, 2]
    with pytest.raises(ShapeMismatch):
        check_column((2, 5), [1, 2, 3])


def test_check_index():
    assert check_index(0, 3) == 0
    assert check_index(np.int64(2), 3) == 2
    with pytest.raises(IndexOutOfBounds):
        check_index(3, 3)
    with pytest.raises(IndexOutOfBounds):
        check_index(-1, 3, "column")
    with pytest.raises(TypeError):
        check_index(1.0, 3)


def test_index_error_is_an_index_error():
    with pytest.raises(IndexError):
        check_index(0, 0)


def test_same_and_product_shapes():
    check_same_shape((2, 3), (2, 3))
    with pytest.raises(ShapeMismatch):
        check_same_shape((2, 3), (3, 2))
    check_product_shape((2, 3), (3, 4))
    with pytest.raises(ShapeMismatch):
        check_product_shape((2, 3), (2, 3))


def test_square():
    check_square((3, 3))
    with pytest.raises(NotSquare):
        check_square((2, 3))
    with pytest.raises(NotSquare):
        check_square((0, 0))


def test_errors_are_value_errors():
    with pytest.raises(ValueError):
        check_row((1, 2), [1])
    with pytest.raises(ValueError):
        check_dims(-1, 2)
