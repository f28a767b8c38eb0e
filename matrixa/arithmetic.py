# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Matrix-matrix arithmetic.

Every function here is pure: the operands are validated, left untouched,
and the result is a new matrix of the left operand's class.
"""

import logging
import operator

import numpy as np

from .errors import DimensionMismatchError, ShapeMismatchError
from .utils import trunc_rem, zero_like

logger = logging.getLogger(__name__)


def _check_same_shape(a, b, what: str) -> None:
    a.integrity_check()
    b.integrity_check()
    if a.shape != b.shape:
        raise ShapeMismatchError(
            f"{what} needs equal shapes, got {a.rows()}x{a.cols()} and {b.rows()}x{b.cols()}"
        )


def elementwise(a, b, func, what: str = "elementwise operation"):
    """Combine two equal-shaped matrices cell by cell with ``func(x, y)``."""
    _check_same_shape(a, b, what)
    grid = [
        [func(x, y) for x, y in zip(row_a, row_b)]
        for row_a, row_b in zip(a.dump(), b.dump())
    ]
    if a.debugging:
        logger.debug("%s -> %r", what, grid)
    return a._spawn(grid)


def add(a, b):
    return elementwise(a, b, operator.add, "addition")


def sub(a, b):
    return elementwise(a, b, operator.sub, "subtraction")


def hadamard(a, b):
    """Elementwise (Hadamard) product."""
    return elementwise(a, b, operator.mul, "hadamard product")


def modulo(a, b):
    """Elementwise remainder; the sign of each cell follows `a`."""
    return elementwise(a, b, trunc_rem, "modulo")


def product(a, b):
    """
    Matrix product C = A B.

    Parameters
    ----------
    a : (m, n) Matrix
    b : (n, p) Matrix

    Returns
    -------
    C : (m, p) Matrix
        ``C[i][k] = sum_j a[i][j] * b[j][k]``, accumulated from the
        element type's zero.

    Raises
    ------
    DimensionMismatchError : if a.cols() != b.rows()
    """
    a.integrity_check()
    b.integrity_check()
    if a.cols() != b.rows():
        raise DimensionMismatchError(
            f"column length of origin {a.cols()} is not matched to "
            f"the row length of the argument {b.rows()}"
        )
    A, B = a.dump(), b.dump()
    zero = zero_like(A[0][0])

    C = []
    for i in range(a.rows()):
        row = []
        for k in range(b.cols()):
            acc = zero
            for j in range(a.cols()):
                acc = acc + A[i][j] * B[j][k]
            row.append(acc)
        C.append(row)

    if a.debugging:
        logger.debug("product %dx%d @ %dx%d -> %r", a.rows(), a.cols(), b.rows(), b.cols(), C)
    return a._spawn(C)


# ---------------------------------------------------------------------
# Boolean facet
# ---------------------------------------------------------------------
def logical_and(a, b):
    return elementwise(a, b, operator.and_, "logical and")


def logical_or(a, b):
    return elementwise(a, b, operator.or_, "logical or")


def logical_xor(a, b):
    return elementwise(a, b, operator.xor, "logical xor")


def _invert(x):
    # ~True is -2 in Python, booleans need a logical not
    if isinstance(x, (bool, np.bool_)):
        return not x
    return ~x


def logical_not(a):
    a.integrity_check()
    return a._spawn([_invert(x) for x in row] for row in a.dump())
