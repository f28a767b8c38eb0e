# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Determinant, minors, adjugate and inverse by cofactor expansion.

No pivoting and no LU: the determinant is the textbook Laplace expansion
along the first column, so every routine here is O(n!) in the matrix
size. That is fine for the small exact matrices (ints, Fractions) this
module is meant for; use NumPy for anything large.
"""

import logging

from .errors import SingularMatrixError
from .utils import COFACTOR_WARN_SIZE, checkerboard, one_like, zero_like

logger = logging.getLogger(__name__)


def _minor_grid(grid, p, q):
    minor = [
        [x for j, x in enumerate(row) if j != q]
        for i, row in enumerate(grid)
        if i != p
    ]
    # deleting the only column leaves no cells at all
    return minor if minor and minor[0] else []


def _cofactor_expansion(grid):
    n = len(grid)
    if n == 1:
        return grid[0][0]
    if n == 2:
        return grid[0][0] * grid[1][1] - grid[0][1] * grid[1][0]

    total = zero_like(grid[0][0])
    for i, row in enumerate(grid):
        term = row[0] * _cofactor_expansion(_minor_grid(grid, i, 0))
        total = total - term if i % 2 else total + term
    return total


def _warn_if_large(A, what):
    n = A.rows()
    if n > COFACTOR_WARN_SIZE:
        logger.warning("%s(): cofactor expansion on a %dx%d matrix – O(n!)", what, n, n)


def submatrix(A, p, q):
    """
    Delete row `p` and column `q` of A.

    The remaining rows and columns keep their relative order. A 1x1
    input yields the empty matrix.
    """
    A.range_check(p, q)
    return A._spawn(_minor_grid(A.dump(), p, q))


def signed_minor(A, p, q):
    """
    The (p, q) minor with a checkerboard sign applied in its own
    coordinates: cell (i, j) of the minor is negated when i + j is odd.

    Example
    -------
    >>> signed_minor(mat([1, 2, 3], [4, 5, 7], [9, 17, 13289]), 1, 1).get()
    [[1, -3], [-9, 13289]]
    """
    A.range_check(p, q)
    grid = _minor_grid(A.dump(), p, q)
    signed = [[checkerboard(x, i, j) for j, x in enumerate(row)] for i, row in enumerate(grid)]
    return A._spawn(signed)


def det(A):
    """
    Determinant of a square matrix by cofactor expansion along column 0.

        n = 1 : a00
        n = 2 : a00 a11 - a01 a10
        n > 2 : sum_i (-1)^i a[i][0] det(minor(i, 0))

    The result has the element type (an int matrix gives an int).
    """
    A.is_square()
    _warn_if_large(A, "det")
    return _cofactor_expansion(A.dump())


def cofactor(A, i, j):
    """(-1)^(i+j) times the determinant of the (i, j) minor."""
    A.is_square()
    A.range_check(i, j)
    grid = A.dump()
    if len(grid) == 1:
        return one_like(grid[0][0])
    return checkerboard(_cofactor_expansion(_minor_grid(grid, i, j)), i, j)


def adj(A):
    """
    Adjugate (classical adjoint): the transpose of the cofactor matrix.

    Unlike `inverse` this is defined for singular matrices too, and stays
    exact for integer elements.
    """
    A.is_square()
    _warn_if_large(A, "adj")
    n = A.rows()
    C = A._spawn([cofactor(A, i, j) for j in range(n)] for i in range(n))
    return C.transpose()


def _nonzero_det(A):
    d = det(A)
    if d == zero_like(d):
        raise SingularMatrixError("the matrix is not a regular matrix")
    return d


def is_regular(A):
    """Return A if its determinant is non-zero, else raise `SingularMatrixError`."""
    _nonzero_det(A)
    return A


def inverse(A):
    """
    Inverse through the adjugate: A^{-1} = adj(A) / det(A).

    Each cofactor is divided by the determinant with true division, so
    integer input comes back as floats. Use Fraction elements for an
    exact result.

    Raises
    ------
    SingularMatrixError : if det(A) == 0
    """
    d = _nonzero_det(A)
    grid = A.dump()
    n = len(grid)
    if n == 1:
        return A._spawn([[one_like(d) / d]])

    C = A._spawn(
        [
            checkerboard(_cofactor_expansion(_minor_grid(grid, i, j)) / d, i, j)
            for j in range(n)
        ]
        for i in range(n)
    )
    # C holds the cofactors in place; transposing turns it into adj(A) / det
    return C.transpose()


def identity(A):
    """Same-shape identity: the element one on the diagonal, zeros elsewhere."""
    A.is_square()
    x = A.dump()[0][0]
    zero, one = zero_like(x), one_like(x)
    n = A.rows()
    return A._spawn([one if i == j else zero for j in range(n)] for i in range(n))


def trace(A):
    A.is_square()
    grid = A.dump()
    total = zero_like(grid[0][0])
    for i in range(len(grid)):
        total = total + grid[i][i]
    return total
