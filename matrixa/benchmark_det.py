#!/usr/bin/python3
# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Time cofactor-expansion det/inverse against NumPy's LU-based routines.

Run with ``python -m matrixa.benchmark_det``; writes bench_results.csv.
The sec column roughly multiplies by n at every step (O(n!)).
"""

import time

import numpy as np
import pandas as pd

from matrixa.matrix import Matrix
from matrixa.utils import random_regular

REPEATS = 5  # best of 5 runs leads to stable numbers
sizes = range(2, 9)


def wall(f, *args, **kwargs):
    t0 = time.perf_counter()
    f(*args, **kwargs)
    return time.perf_counter() - t0


def main():
    records = []
    for n in sizes:
        A = random_regular(n, seed=n)
        M = Matrix.from_array(A)

        # reference
        t_np = min(wall(np.linalg.det, A) for _ in range(REPEATS))
        d_ref = np.linalg.det(A)

        t_det = min(wall(M.determinant) for _ in range(REPEATS))
        d_err = abs(M.determinant() - d_ref) / abs(d_ref)
        records.append(("det", f"{n}x{n}", t_det, t_det / t_np, d_err))

        t_inv_np = min(wall(np.linalg.inv, A) for _ in range(REPEATS))
        t_inv = min(wall(M.inverse) for _ in range(REPEATS))
        inv_err = np.linalg.norm(M.inverse().to_array() - np.linalg.inv(A), np.inf)
        records.append(("inverse", f"{n}x{n}", t_inv, t_inv / t_inv_np, inv_err))

    df = pd.DataFrame(
        records,
        columns=["kernel", "size", "sec", "sec/NumPy", "err_vs_NumPy"],
    )
    print(df.to_markdown(index=False))

    df.to_csv("bench_results.csv", index=False)


if __name__ == "__main__":
    main()
