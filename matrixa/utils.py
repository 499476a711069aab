# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import numbers

import numpy as np

EPS: float = 1e-12


def zero_like(x):
    """Additive identity of the type of ``x``."""
    return type(x)(0)


def one_like(x):
    """Multiplicative identity of the type of ``x``."""
    return type(x)(1)


def is_integral(x) -> bool:
    return isinstance(x, (numbers.Integral, np.integer))


def scale_tol(A) -> float:
    """Return an absolute tolerance scaled to the matrix magnitude."""
    A = np.asarray(A, dtype=float)
    if A.size == 0:
        return EPS
    return EPS * max(1.0, np.linalg.norm(np.atleast_2d(A), ord=np.inf))


def random_matrix(m, n, low=-100, high=100, seed=None) -> np.ndarray:
    """Uniformly distributed float64 matrix of shape (m, n)."""
    rng = np.random.default_rng(seed)
    return rng.uniform(low, high, size=(m, n))


def random_nonsingular_upper(n, low=-100, high=100, seed=None) -> np.ndarray:
    """
    Upper-triangular float64 matrix whose diagonal entries have magnitude
    at least 1, so the determinant (the diagonal product) never vanishes.
    """
    rng = np.random.default_rng(seed)
    U = np.triu(rng.uniform(low, high, size=(n, n)))
    magnitude = rng.uniform(1.0, max(abs(low), abs(high), 1.0), size=n)
    sign = rng.choice([-1.0, 1.0], size=n)
    np.fill_diagonal(U, sign * magnitude)
    return U
