# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

from fractions import Fraction

import numpy as np
import pytest

from matrixa.arithmetic import add, hadamard, modulo, product, sub
from matrixa.errors import (
    DimensionMismatchError,
    EmptyMatrixError,
    ShapeMismatchError,
)
from matrixa.matrix import Matrix, mat


@pytest.fixture
def m():
    return mat([1, 2, 3], [4, 5, 6], [7, 8, 9])


@pytest.fixture
def n():
    return mat([2, 3, 4], [5, 6, 7], [8, 9, 10])


# ----- scalar, in place -----


def test_scalar_add_then_mul(m):
    assert m.add(1) == mat([2, 3, 4], [5, 6, 7], [8, 9, 10])
    assert m.mul(2) == mat([4, 6, 8], [10, 12, 14], [16, 18, 20])


def test_scalar_ops_return_self(m):
    assert m.add(1) is m
    assert m.add(1).mul(2).sub(3).div(1).modulo(100) is m


def test_scalar_sub(m):
    m.sub(5)
    assert m == mat([-4, -3, -2], [-1, 0, 1], [2, 3, 4])


def test_scalar_div_int_truncates():
    m = mat([2, 4, 6], [8, 10, 12], [14, 16, 18])
    m.div(2)
    assert m == mat([1, 2, 3], [4, 5, 6], [7, 8, 9])
    assert mat([7, -7]).div(2) == mat([3, -3])
    assert type(mat([7]).div(2)[0, 0]) is int


def test_scalar_div_float():
    m = mat([7.0, 1.0]).div(2)
    assert m.get() == [[3.5, 0.5]]


def test_scalar_div_fraction_is_exact():
    m = mat([1, 2], dtype=Fraction).div(Fraction(3))
    assert m.get() == [[Fraction(1, 3), Fraction(2, 3)]]


def test_scalar_modulo():
    m = mat([1, 2, 3], [4, 5, 6], [-7, -8, -9])
    m.modulo(2)
    assert m == mat([1, 0, 1], [0, 1, 0], [-1, 0, -1])


def test_scalar_div_by_zero_leaves_matrix_unchanged(m):
    with pytest.raises(ZeroDivisionError):
        m.div(0)
    assert m == mat([1, 2, 3], [4, 5, 6], [7, 8, 9])


def test_scalar_ops_require_integrity():
    with pytest.raises(EmptyMatrixError):
        Matrix().add(1)


# ----- matrix-matrix, pure -----


def test_plus(m, n):
    e = m + n
    assert e == mat([3, 5, 7], [9, 11, 13], [15, 17, 19])
    assert add(m, n) == e
    # operands untouched
    assert m == mat([1, 2, 3], [4, 5, 6], [7, 8, 9])


def test_minus(m, n):
    e = m - n
    assert e == mat([-1, -1, -1], [-1, -1, -1], [-1, -1, -1])
    assert sub(m, n) == e


def test_plus_minus_mixed_sign():
    a = mat([1, 2], [3, 4])
    b = mat([-5, 6], [7, -8])
    assert a + b == mat([-4, 8], [10, -4])
    assert a - b == mat([6, -4], [-4, 12])


def test_shape_mismatch(m):
    other = mat([1, 2, 3], [4, 5, 6])
    for op in (add, sub, hadamard, modulo):
        with pytest.raises(ShapeMismatchError):
            op(m, other)
    with pytest.raises(ShapeMismatchError):
        m + other


def test_scalar_operand_is_not_matrix_algebra(m):
    with pytest.raises(TypeError):
        m + 1
    with pytest.raises(TypeError):
        m @ 2


def test_product_square(m, n):
    e = m @ n
    assert e == mat([36, 42, 48], [81, 96, 111], [126, 150, 174])


def test_product_rectangular():
    a = mat([1, 2, 3], [4, 5, 7])
    b = mat([1, 3], [5, 7], [10, 10])
    p = a.product(b)
    assert p.shape == (2, 2)
    assert p == mat([41, 47], [99, 117])
    assert product(a, b) == p
    assert a @ b == p


def test_product_shape_follows_operands():
    a = mat([1, 2, 3])
    b = mat([1], [2], [3])
    assert (a @ b).get() == [[14]]
    assert (b @ a).shape == (3, 3)


def test_product_error_unmatched():
    a = mat([1, 2, 3], [4, 5, 7])
    b = mat([1, 0], [0, 1])
    with pytest.raises(DimensionMismatchError):
        a.product(b)
    # a product mismatch is also a shape mismatch
    with pytest.raises(ShapeMismatchError):
        a @ b


def test_product_error_zero():
    with pytest.raises(EmptyMatrixError):
        mat([1, 2, 3], [4, 5, 7]).product(Matrix())


def test_product_matches_numpy():
    rng = np.random.default_rng(7)
    A = rng.normal(size=(4, 6))
    B = rng.normal(size=(6, 3))
    P = Matrix.from_array(A) @ Matrix.from_array(B)
    np.testing.assert_allclose(P.to_array(), A @ B, rtol=1e-12, atol=1e-12)


def test_hadamard():
    a = mat([1, 2], [4, 5])
    b = mat([1, -2], [-3, 4])
    assert a.hadamard(b) == mat([1, -4], [-12, 20])
    assert a * b == mat([1, -4], [-12, 20])


def test_rem():
    a = mat([1, 2, 3], [4, 5, 6], [-7, -8, -9])
    b = mat([-7, -8, -9], [6, 5, 4], [3, 2, 1])
    assert a % b == mat([1, 2, 3], [4, 0, 2], [-1, 0, 0])


def test_result_keeps_left_class():
    a = mat(["ab", "c"], dtype=str)
    b = mat(["x", "yz"], dtype=str)
    assert type(a + b) is type(a)
    assert (a + b).get() == [["abx", "cyz"]]


# ----- boolean facet -----


@pytest.fixture
def b():
    return mat([True, True], [False, True])


@pytest.fixture
def v():
    return mat([False, True], [False, True])


def test_bitand(b, v):
    assert (b & v) == mat([False, True], [False, True])


def test_bitor(b, v):
    assert (b | v) == mat([True, True], [False, True])


def test_bitxor(b, v):
    assert (b ^ v) == mat([True, False], [False, False])


def test_not(b):
    res = ~b
    assert res == mat([False, False], [True, False])
    assert all(isinstance(x, bool) for row in res for x in row)


def test_not_numpy_bools():
    m = Matrix([[np.bool_(True), np.bool_(False)]])
    assert (~m).get() == [[False, True]]


def test_invert_integers():
    assert ~mat([0, 5]) == mat([-1, -6])
