# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Dense row-major matrix container.

A `Matrix` owns a list of equal-length rows. Structural operations
(swap, transpose, resize) and scalar arithmetic mutate in place and return
``self`` so calls chain::

    >>> m = mat([1, 2, 3], [4, 5, 6], [7, 8, 9])
    >>> m.add(1).mul(2).row(0)
    [4, 6, 8]

Matrix-matrix algebra (``+ - @ * %``) and the determinant family never
touch their inputs and always hand back independent matrices.
"""

import copy as _copy
import logging
import operator
from typing import Callable, Iterable, Iterator, List, Optional, Tuple

import numpy as np

from . import arithmetic, matrix_functions
from .errors import (
    EmptyMatrixError,
    IndexOutOfRangeError,
    InvalidRowLengthError,
    InvalidShapeError,
    NotSquareError,
    RaggedMatrixError,
)
from .utils import EPS, trunc_div, trunc_rem, zero_like

logger = logging.getLogger(__name__)


class RowIterator:
    """
    One-shot, forward-only iterator over copies of a matrix's rows.

    The rows are snapshotted when the iterator is created, so later
    mutation of the matrix does not affect an iteration in progress.
    """

    def __init__(self, grid: List[list]) -> None:
        self._rows = [list(row) for row in grid]
        self._pos = 0

    def __iter__(self) -> "RowIterator":
        return self

    def __next__(self) -> list:
        if self._pos >= len(self._rows):
            raise StopIteration
        row = self._rows[self._pos]
        self._pos += 1
        return row

    def __length_hint__(self) -> int:
        return len(self._rows) - self._pos


class Matrix:
    """
    Rectangular grid of elements.

    Parameters
    ----------
    rows : iterable of iterables, optional
        Initial rows, appended one by one with the same checks as
        `append`. Omit for an empty matrix.

    Invariants
    ----------
    - every row has the length of row 0
    - rows are never empty
    - the empty matrix is only a starting state; operations other than
      `append`, `set`, `rows`, `cols` and the converters reject it
    """

    __hash__ = None  # mutable container

    def __init__(self, rows: Optional[Iterable[Iterable]] = None) -> None:
        self._data: List[list] = []
        self._debug = False
        if rows is not None:
            for row in rows:
                self.append(row)

    # ------------------------------------------------------------------
    # construction
    # ------------------------------------------------------------------
    @classmethod
    def from_rows(cls, rows: Iterable[Iterable]) -> "Matrix":
        return cls(rows)

    @classmethod
    def from_array(cls, a) -> "Matrix":
        """
        Build a matrix from a 2-D array-like (ndarray, nested lists...).

        A 1-D input becomes a single row. Elements come back as plain
        Python scalars via ``ndarray.tolist``.
        """
        arr = np.asarray(a)
        if arr.ndim == 1:
            arr = arr[None, :]
        if arr.ndim != 2:
            raise InvalidShapeError(f"expected a 2-D array, got {arr.ndim} dimensions")
        if arr.size == 0:
            return cls()
        return cls(arr.tolist())

    def append(self, row: Iterable) -> "Matrix":
        """
        Append a copy of `row`.

        The first row fixes the column count; a later row of any other
        length raises `InvalidRowLengthError` and leaves the matrix as it
        was.
        """
        row = list(row)
        if not row:
            raise InvalidRowLengthError("rows must hold at least one element")
        if self._data and len(row) != len(self._data[0]):
            raise InvalidRowLengthError(
                f"invalid row length {len(row)}, expected {len(self._data[0])}"
            )
        before = self._snapshot()
        self._data.append(row)
        self._trace("append", before)
        return self

    # ------------------------------------------------------------------
    # integrity
    # ------------------------------------------------------------------
    def integrity_check(self) -> "Matrix":
        if not self._data:
            raise EmptyMatrixError("zero matrix length detected")
        width = len(self._data[0])
        for i, row in enumerate(self._data):
            if len(row) != width:
                raise RaggedMatrixError(
                    f"matrix corrupted at row {i} (length {len(row)}, expected {width})"
                )
        return self

    def _check_row(self, i: int) -> None:
        if not 0 <= i < len(self._data):
            raise IndexOutOfRangeError(
                f"row {i} is out of range: must be less than {len(self._data)}"
            )

    def _check_col(self, j: int) -> None:
        if not 0 <= j < self.cols():
            raise IndexOutOfRangeError(
                f"column {j} is out of range: must be less than {self.cols()}"
            )

    def range_check(self, row: int, col: int) -> "Matrix":
        self.integrity_check()
        self._check_row(row)
        self._check_col(col)
        return self

    def is_square(self) -> "Matrix":
        self.integrity_check()
        if self.rows() != self.cols():
            raise NotSquareError(f"not a square matrix: {self.rows()}x{self.cols()}")
        return self

    def same_shape(self, other: "Matrix") -> bool:
        return self.shape == other.shape

    # ------------------------------------------------------------------
    # access
    # ------------------------------------------------------------------
    def rows(self) -> int:
        return len(self._data)

    def cols(self) -> int:
        return len(self._data[0]) if self._data else 0

    @property
    def shape(self) -> Tuple[int, int]:
        return self.rows(), self.cols()

    def row(self, i: int) -> list:
        self.integrity_check()
        self._check_row(i)
        return list(self._data[i])

    def col(self, j: int) -> list:
        self.integrity_check()
        self._check_col(j)
        return [row[j] for row in self._data]

    def get(self) -> List[list]:
        """Return a deep copy of the grid."""
        return [list(row) for row in self._data]

    def dump(self) -> List[list]:
        """Return the grid itself. Callers must treat it as read-only."""
        return self._data

    def set(self, grid: Iterable[Iterable]) -> "Matrix":
        """
        Replace the whole grid with a copy of `grid`.

        The argument is validated before anything is replaced: an empty
        grid raises `EmptyMatrixError`, a ragged one `RaggedMatrixError`.
        """
        new = [list(row) for row in grid]
        if not new or not new[0]:
            raise EmptyMatrixError("argument has zero length")
        for i, row in enumerate(new):
            if len(row) != len(new[0]):
                raise RaggedMatrixError(
                    f"argument row {i} has length {len(row)}, expected {len(new[0])}"
                )
        before = self._snapshot()
        self._data = new
        self._trace("set", before)
        return self

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[list]:
        return RowIterator(self._data)

    def __getitem__(self, key):
        if isinstance(key, tuple):
            i, j = key
            self.range_check(i, j)
            return self._data[i][j]
        return self.row(key)

    def __setitem__(self, key, value) -> None:
        """``m[i, j] = x`` sets a cell, ``m[i] = row`` replaces a whole row."""
        if isinstance(key, tuple):
            i, j = key
            self.range_check(i, j)
            self._data[i][j] = value
            return
        if not isinstance(key, int):
            raise TypeError(
                f"matrix indices must be an int or an (int, int) pair, not {type(key).__name__}"
            )
        self.integrity_check()
        self._check_row(key)
        row = list(value)
        if len(row) != self.cols():
            raise InvalidRowLengthError(
                f"invalid row length {len(row)}, expected {self.cols()}"
            )
        before = self._snapshot()
        self._data[key] = row
        self._trace(f"set row {key}", before)

    # ------------------------------------------------------------------
    # structural mutation
    # ------------------------------------------------------------------
    def row_swap(self, src: int, dst: int) -> "Matrix":
        self.integrity_check()
        self._check_row(src)
        self._check_row(dst)
        before = self._snapshot()
        self._data[src], self._data[dst] = self._data[dst], self._data[src]
        self._trace(f"row swap {src} <-> {dst}", before)
        return self.integrity_check()

    def col_swap(self, src: int, dst: int) -> "Matrix":
        self.integrity_check()
        self._check_col(src)
        self._check_col(dst)
        before = self._snapshot()
        for row in self._data:
            row[src], row[dst] = row[dst], row[src]
        self._trace(f"column swap {src} <-> {dst}", before)
        return self.integrity_check()

    def transpose(self) -> "Matrix":
        """Replace the grid by its transpose; rectangular shapes swap."""
        self.integrity_check()
        before = self._snapshot()
        self._data = [list(col) for col in zip(*self._data)]
        self._trace("transpose", before)
        return self

    def resize(self, rows: int, cols: int) -> "Matrix":
        """
        Grow or shrink to `rows` x `cols`.

        New cells hold the zero of the element type, which is taken from
        the existing (0, 0) element, so the matrix must not be empty.
        Shrinking truncates rows and columns.
        """
        if rows <= 0:
            raise InvalidShapeError("resize error: row length must not be zero")
        if cols <= 0:
            raise InvalidShapeError("resize error: column length must not be zero")
        self.integrity_check()
        zero = zero_like(self._data[0][0])
        before = self._snapshot()
        del self._data[rows:]
        while len(self._data) < rows:
            self._data.append([])
        for row in self._data:
            del row[cols:]
            row.extend([zero] * (cols - len(row)))
        self._trace(f"resize to {rows}x{cols}", before)
        return self

    # ------------------------------------------------------------------
    # scalar arithmetic (in place)
    # ------------------------------------------------------------------
    def _scalar(self, name: str, func: Callable, value) -> "Matrix":
        self.integrity_check()
        before = self._snapshot()
        self._data = [[func(x, value) for x in row] for row in self._data]
        self._trace(f"{name} {value!r} foreach", before)
        return self

    def add(self, value) -> "Matrix":
        return self._scalar("add", operator.add, value)

    def sub(self, value) -> "Matrix":
        return self._scalar("sub", operator.sub, value)

    def mul(self, value) -> "Matrix":
        return self._scalar("mul", operator.mul, value)

    def div(self, value) -> "Matrix":
        """Divide every element; integers truncate toward zero."""
        return self._scalar("div", trunc_div, value)

    def modulo(self, value) -> "Matrix":
        """Remainder of every element; the sign follows the element."""
        return self._scalar("modulo", trunc_rem, value)

    # ------------------------------------------------------------------
    # matrix-matrix arithmetic (pure)
    # ------------------------------------------------------------------
    def product(self, other: "Matrix") -> "Matrix":
        return arithmetic.product(self, other)

    def hadamard(self, other: "Matrix") -> "Matrix":
        return arithmetic.hadamard(self, other)

    def __add__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return arithmetic.add(self, other)

    def __sub__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return arithmetic.sub(self, other)

    def __matmul__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return arithmetic.product(self, other)

    def __mul__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return arithmetic.hadamard(self, other)

    def __mod__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return arithmetic.modulo(self, other)

    def __and__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return arithmetic.logical_and(self, other)

    def __or__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return arithmetic.logical_or(self, other)

    def __xor__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return arithmetic.logical_xor(self, other)

    def __invert__(self):
        return arithmetic.logical_not(self)

    # ------------------------------------------------------------------
    # determinant / adjugate / inverse
    # ------------------------------------------------------------------
    def determinant(self):
        return matrix_functions.det(self)

    def submatrix(self, p: int, q: int) -> "Matrix":
        return matrix_functions.submatrix(self, p, q)

    def signed_minor(self, p: int, q: int) -> "Matrix":
        return matrix_functions.signed_minor(self, p, q)

    def cofactor(self, i: int, j: int):
        return matrix_functions.cofactor(self, i, j)

    def adjugate(self) -> "Matrix":
        return matrix_functions.adj(self)

    def is_regular(self) -> "Matrix":
        return matrix_functions.is_regular(self)

    def inverse(self) -> "Matrix":
        return matrix_functions.inverse(self)

    def identity(self) -> "Matrix":
        return matrix_functions.identity(self)

    def trace(self):
        return matrix_functions.trace(self)

    # ------------------------------------------------------------------
    # comparison, copying, conversion
    # ------------------------------------------------------------------
    def __eq__(self, other) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.same_shape(other) and all(
            x == y
            for ra, rb in zip(self._data, other._data)
            for x, y in zip(ra, rb)
        )

    def copy(self) -> "Matrix":
        res = type(self)()
        res._data = self.get()
        res._debug = self._debug
        return res

    __copy__ = copy

    def __deepcopy__(self, memo) -> "Matrix":
        res = type(self)()
        res._data = _copy.deepcopy(self._data, memo)
        res._debug = self._debug
        return res

    def map(self, func: Callable) -> "Matrix":
        """Return a new plain `Matrix` holding ``func(x)`` for every element."""
        return self._spawn(([func(x) for x in row] for row in self._data), Matrix)

    def astype(self, dtype: Callable) -> "Matrix":
        return self.map(dtype)

    def to_text(self):
        """Convert every element with ``str`` into a `TextMatrix`."""
        from .text import TextMatrix

        return self._spawn(([str(x) for x in row] for row in self._data), TextMatrix)

    def to_array(self, dtype=None) -> np.ndarray:
        if not self._data:
            return np.empty((0, 0), dtype=dtype if dtype is not None else float)
        self.integrity_check()
        return np.array(self._data, dtype=dtype)

    def __array__(self, dtype=None, copy=None) -> np.ndarray:
        return self.to_array(dtype)

    def allclose(self, other, rtol: float = 1e-05, atol: float = EPS) -> bool:
        """Numerical comparison through `np.allclose`; differing shapes are unequal."""
        a = self.to_array()
        b = np.asarray(other)
        if a.shape != b.shape:
            return False
        return bool(np.allclose(a, b, rtol=rtol, atol=atol))

    # ------------------------------------------------------------------
    # debugging / printing
    # ------------------------------------------------------------------
    def debug(self, enabled: bool = True) -> "Matrix":
        """Turn per-operation DEBUG logging on (or off) and return self."""
        self._debug = enabled
        if enabled:
            logger.debug("debugging for: %r", self._data)
        return self

    @property
    def debugging(self) -> bool:
        return self._debug

    def _snapshot(self) -> Optional[List[list]]:
        return self.get() if self._debug else None

    def _trace(self, what: str, before: Optional[List[list]] = None) -> None:
        if not self._debug:
            return
        if before is None:
            logger.debug("%s: %r", what, self._data)
        else:
            logger.debug("%s: %r -> %r", what, before, self._data)

    def _spawn(self, grid: Iterable[Iterable], cls: Optional[type] = None) -> "Matrix":
        """Build a derived matrix that inherits this one's debug flag."""
        res = (cls or type(self))(grid)
        res._debug = self._debug
        return res

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"

    def __str__(self) -> str:
        if not self._data:
            return "[]"
        return "\n".join(repr(row) for row in self._data)


def mat(*rows: Iterable, dtype: Optional[Callable] = None) -> Matrix:
    """
    Bulk constructor.

    >>> mat([1, 2], [3, 4]).shape
    (2, 2)
    >>> mat(dtype=float).rows()
    0

    With `dtype`, every element is passed through ``dtype(x)``; ``str``
    yields a `TextMatrix`. A row whose length disagrees with the first
    raises `InvalidRowLengthError`.
    """
    if dtype is str:
        from .text import TextMatrix

        cls = TextMatrix
    else:
        cls = Matrix
    if dtype is None:
        return cls(rows)
    return cls([dtype(x) for x in row] for row in rows)
