# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
matrixa
=======

A small matrix library: a generic, shape-checked 2-D container plus the
classical matrix-theory computations built on top of it.

Public API
~~~~~~~~~~
- Container
    - `Matrix` (push / merge / row_replace / col_replace / transpose /
      resize / fill_zero / map / iteration / equality)
- Arithmetic
    - scalar and elementwise `+ - / %`, `hadamard`, matrix product
      (`*`, `@`, `matmul`), boolean `& | ^ ~`
- Matrix functions
    - `det`, `adj`, `cofactor`, `inverse`, `trace`, `identity`,
      `is_regular`
- Errors
    - `ShapeMismatch`, `IndexOutOfBounds`, `NotSquare`,
      `DivisionByZero`, `NotInvertible` (all `MatrixError`)

Everything else lives in sub-modules and is **not** considered part of the
stable interface.

Example
-------
>>> from matrixa import Matrix
>>> A = Matrix([[1.0, 2.0], [3.0, 4.0]])
>>> A.det()
-2.0
>>> (A.inverse() @ A).allclose(Matrix.identity(2))
True
"""

from importlib.metadata import version as _pkg_version

from .arithmetic import hadamard, matmul
from .exceptions import (
    DivisionByZero,
    IndexOutOfBounds,
    MatrixError,
    NotInvertible,
    NotSquare,
    ShapeMismatch,
)
from .matrix import Matrix

# ---------------------------------------------------------------------
# Re-export the high-level functions users are expected to call.
# Each of these names is implemented in one of the internal sub-modules.
# ---------------------------------------------------------------------
from .matrix_functions import (
    adj,
    adjugate,
    cofactor,
    det,
    identity,
    inverse,
    is_regular,
    trace,
)
from .utils import random_matrix, random_nonsingular_upper, scale_tol

__all__ = [
    "Matrix",
    "matmul",
    "hadamard",
    "det",
    "adj",
    "adjugate",
    "cofactor",
    "inverse",
    "identity",
    "is_regular",
    "trace",
    "MatrixError",
    "ShapeMismatch",
    "IndexOutOfBounds",
    "NotSquare",
    "DivisionByZero",
    "NotInvertible",
    "scale_tol",
    "random_matrix",
    "random_nonsingular_upper",
]

# ---------------------------------------------------------------------
# Version string (helps “pip show matrixa”, Sphinx, etc.)
# ---------------------------------------------------------------------
try:  # installed via pip / build backend
    __version__ = _pkg_version(__name__)
except Exception:  # running from a checkout
    __version__ = "0.0.0.dev0"

# ---------------------------------------------------------------------
# Library logging stays silent unless the application configures it.
# ---------------------------------------------------------------------
import logging as _logging

_logging.getLogger(__name__).addHandler(_logging.NullHandler())
