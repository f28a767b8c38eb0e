#!/usr/bin/python3
# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Walk through the matrixa API: python -m matrixa [--debug]
"""

import argparse
import logging

from .matrix import mat


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="python -m matrixa",
        description="Short demonstration of scalar chaining, swaps, products and inverses.",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="log every mutating operation at DEBUG level",
    )
    args = parser.parse_args(argv)

    if args.debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    t = mat([1, 1, 1], [1, 7, 2], [5, 2, 3]).debug(args.debug)
    print(f"t:\n{t}")
    t.add(5).mul(2).sub(8).div(3).mul(13)
    t.col_swap(0, 2).modulo(2)
    print(f"t after chaining and transpose:\n{t.transpose()}")

    c = mat(
        [1.2, 3.4, 3.4, 4.5],
        [7.8, 9.10, 112.3, 456.78],
        [12.345, 67.89, 0.0, 0.0],
    ).debug(args.debug)
    c.row_swap(0, 1).col_swap(0, 3)
    print(f"c + 1.0:\n{c.add(1.0)}")

    m = mat([1, 2, 3], [4, 5, 7])
    n = mat([1, 3], [5, 7], [10, 10])
    print(f"m @ n:\n{m @ n}")

    d = mat([1.0, 2.0, 0.0], [3.0, 1.0, 2.0], [-1.0, 3.0, 1.0])
    print(f"det(d) = {d.determinant()}")
    print(f"inverse(d):\n{d.inverse()}")


if __name__ == "__main__":
    main()
