# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
String matrices.

`TextMatrix` adds per-element string predicates and transforms on top of
`Matrix`. Predicates return a boolean `Matrix` of the same shape;
transforms named after ``str`` mutators change the matrix in place and
return it, the rest build a new matrix.
"""

from typing import Any, Callable

from .matrix import Matrix


class TextMatrix(Matrix):
    """Matrix whose elements are ``str``."""

    def _derive(self, func: Callable[[str], Any]) -> Matrix:
        self.integrity_check()
        return self._spawn(([func(s) for s in row] for row in self._data), Matrix)

    def _transform(self, name: str, func: Callable[[str], str]) -> "TextMatrix":
        self.integrity_check()
        before = self._snapshot()
        self._data = [[func(s) for s in row] for row in self._data]
        self._trace(name, before)
        return self

    # -- predicates --------------------------------------------------------
    def contains(self, pat: str) -> Matrix:
        return self._derive(lambda s: pat in s)

    def starts_with(self, pat: str) -> Matrix:
        return self._derive(lambda s: s.startswith(pat))

    def ends_with(self, pat: str) -> Matrix:
        return self._derive(lambda s: s.endswith(pat))

    def is_empty(self) -> Matrix:
        return self._derive(lambda s: s == "")

    def is_ascii(self) -> Matrix:
        return self._derive(str.isascii)

    # -- in-place transforms -----------------------------------------------
    def pop_char(self) -> "TextMatrix":
        """Drop the last character of every element (empty strings stay empty)."""
        return self._transform("pop_char", lambda s: s[:-1])

    def push_char(self, ch: str) -> "TextMatrix":
        if len(ch) != 1:
            raise ValueError(f"push_char expects a single character, got {ch!r}")
        return self._transform("push_char", lambda s: s + ch)

    def push_str(self, suffix: str) -> "TextMatrix":
        return self._transform("push_str", lambda s: s + suffix)

    def shrink_to(self, length: int) -> "TextMatrix":
        """Truncate every element to at most `length` characters."""
        if length < 0:
            raise ValueError("length must be non-negative")
        return self._transform("shrink_to", lambda s: s[:length])

    def replace(self, old: str, new: str) -> "TextMatrix":
        return self._transform("replace", lambda s: s.replace(old, new))

    def trim_start(self) -> "TextMatrix":
        return self._transform("trim_start", str.lstrip)

    def trim_end(self) -> "TextMatrix":
        return self._transform("trim_end", str.rstrip)

    # -- derived matrices --------------------------------------------------
    def trim(self) -> "TextMatrix":
        self.integrity_check()
        return self._spawn([s.strip() for s in row] for row in self._data)

    def to_strlen(self) -> Matrix:
        """Matrix of element lengths in UTF-8 bytes, so "新宿" counts 6."""
        return self._derive(lambda s: len(s.encode("utf-8")))

    def to_charlen(self) -> Matrix:
        """Matrix of element lengths in characters."""
        return self._derive(len)

    def as_bytes(self, encoding: str = "utf-8") -> Matrix:
        return self._derive(lambda s: s.encode(encoding))
