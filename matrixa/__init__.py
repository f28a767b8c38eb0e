# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
matrixa
=======

A small dense-matrix library over plain Python elements: ints, floats,
Fractions, Decimals, strings and booleans.

Public API
~~~~~~~~~~
- Containers
    - `Matrix`, `TextMatrix`, `mat`
- Matrix-matrix arithmetic
    - `add`, `sub`, `product`, `hadamard`, `modulo`
- Determinant family (cofactor expansion, O(n!))
    - `det`, `adj`, `cofactor`, `submatrix`, `signed_minor`,
      `is_regular`, `inverse`, `identity`, `trace`
- Errors
    - `MatrixError` and its subclasses

Everything else lives in sub-modules and is **not** considered part of the
stable interface.

Example
-------
>>> import matrixa as mx
>>> m = mx.mat([1.0, 2.0, 0.0], [3.0, 1.0, 2.0], [-1.0, 3.0, 1.0])
>>> (m @ m.inverse()).allclose(m.identity())
True
"""

from importlib.metadata import version as _pkg_version

from .arithmetic import add, hadamard, modulo, product, sub
from .errors import (
    DimensionMismatchError,
    EmptyMatrixError,
    IndexOutOfRangeError,
    InvalidRowLengthError,
    InvalidShapeError,
    MatrixError,
    NotSquareError,
    RaggedMatrixError,
    ShapeMismatchError,
    SingularMatrixError,
)
from .matrix import Matrix, RowIterator, mat
from .matrix_functions import (
    adj,
    cofactor,
    det,
    identity,
    inverse,
    is_regular,
    signed_minor,
    submatrix,
    trace,
)
from .text import TextMatrix

__all__ = [
    "Matrix",
    "RowIterator",
    "TextMatrix",
    "mat",
    "add",
    "sub",
    "product",
    "hadamard",
    "modulo",
    "det",
    "adj",
    "cofactor",
    "submatrix",
    "signed_minor",
    "is_regular",
    "inverse",
    "identity",
    "trace",
    "MatrixError",
    "EmptyMatrixError",
    "RaggedMatrixError",
    "InvalidRowLengthError",
    "IndexOutOfRangeError",
    "NotSquareError",
    "ShapeMismatchError",
    "DimensionMismatchError",
    "SingularMatrixError",
    "InvalidShapeError",
]

# ---------------------------------------------------------------------
# Version string (helps “pip show matrixa”, Sphinx, etc.)
# ---------------------------------------------------------------------
try:  # installed via pip / build backend
    __version__ = _pkg_version(__name__)
except Exception:  # running from a checkout
    __version__ = "0.0.0.dev0"

# ---------------------------------------------------------------------
# Library logging stays silent unless the application configures it;
# Matrix.debug() output goes to the "matrixa.*" loggers at DEBUG level.
# ---------------------------------------------------------------------
import logging as _logging

_logging.getLogger(__name__).addHandler(_logging.NullHandler())
