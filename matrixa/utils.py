# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import math
import numbers

import numpy as np

EPS: float = 1e-12

# Cofactor expansion is O(n!); above this size det() warns once per call.
COFACTOR_WARN_SIZE: int = 8


def zero_like(x):
    """The additive identity of x's type (0, 0.0, Fraction(0), '', False...)."""
    return type(x)()


def one_like(x):
    """The multiplicative identity of x's type."""
    return type(x)(1)


def checkerboard(x, i: int, j: int):
    """Return x, negated when i + j is odd."""
    return -x if (i + j) % 2 else x


def _both_integral(a, b) -> bool:
    return (
        isinstance(a, numbers.Integral)
        and isinstance(b, numbers.Integral)
        and not isinstance(a, bool)
        and not isinstance(b, bool)
    )


def trunc_div(a, b):
    """
    Division that truncates toward zero for integers and is true
    division for everything else.

    >>> trunc_div(-7, 2)
    -3
    >>> trunc_div(7.0, 2)
    3.5
    """
    if _both_integral(a, b):
        q = abs(a) // abs(b)
        return q if (a < 0) == (b < 0) else -q
    return a / b


def trunc_rem(a, b):
    """
    Remainder paired with `trunc_div`: the sign follows the dividend,
    so a == b * trunc_div(a, b) + trunc_rem(a, b) for integers.

    >>> trunc_rem(-7, 2)
    -1
    """
    if _both_integral(a, b):
        return a - b * trunc_div(a, b)
    if isinstance(a, float) or isinstance(b, float):
        return math.fmod(a, b)
    # Fraction, Decimal and friends
    return a - b * math.trunc(a / b)


def random_regular(n: int, low=-10.0, high=10.0, seed=None) -> np.ndarray:
    """
    Build a random strictly diagonally dominant n-by-n matrix.

    Strict diagonal dominance guarantees a non-zero determinant
    (Levy–Desplanques), so the result is always invertible.

    Returns
    -------
    Matrix with float64 dtype
    """
    rng = np.random.default_rng(seed)
    A = rng.uniform(low, high, size=(n, n))
    off_diag = np.abs(A).sum(axis=1) - np.abs(np.diag(A))
    signs = np.where(rng.random(n) < 0.5, -1.0, 1.0)
    A[np.diag_indices(n)] = signs * (off_diag + rng.uniform(1.0, 2.0, size=n))
    return np.asarray(A)
