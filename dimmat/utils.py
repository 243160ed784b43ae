# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import operator
from typing import Any, Callable, Optional, Tuple

import numpy as np

from .errors import OutOfBoundsError

DEFAULT_DTYPE = np.float64
RANDOM_LOW: int = -100
RANDOM_HIGH: int = 100


def is_index(x) -> bool:
    return isinstance(x, (int, np.integer)) and not isinstance(x, bool)


def from_linear_index(idx: int, col_count: int) -> Tuple[int, int]:
    """Map a row-major linear index to its (row, col) pair."""
    row, col = divmod(idx, col_count)
    return row, col


def check_dims(row_count, col_count) -> Tuple[int, int]:
    """
    Validate a matrix shape and return it as plain ints.

    Raises
    ------
    TypeError  : if either dimension is not an integer
    ValueError : if either dimension is not strictly positive
    """
    if not (is_index(row_count) and is_index(col_count)):
        raise TypeError(
            f"Matrix dimensions must be integers, got ({row_count!r}, {col_count!r})"
        )
    if row_count <= 0 or col_count <= 0:
        raise ValueError(
            f"Matrix dimensions must be positive, got ({row_count}, {col_count})"
        )
    return operator.index(row_count), operator.index(col_count)


def check_position(row, col, row_count: int, col_count: int) -> Tuple[int, int]:
    """
    Validate (row, col) against the shape and return it as plain ints.

    Numpy integer indices are converted so that offset arithmetic done with
    the result cannot wrap around in a fixed-width dtype.

    Raises
    ------
    OutOfBoundsError : unless 0 <= row < row_count and 0 <= col < col_count
    """
    if not (is_index(row) and is_index(col)):
        raise OutOfBoundsError(
            f"Position ({row!r}, {col!r}) must be a pair of integers"
        )
    row, col = operator.index(row), operator.index(col)
    if not 0 <= row < row_count:
        raise OutOfBoundsError(
            f"Row index {row} out of bounds for shape ({row_count}, {col_count})"
        )
    if not 0 <= col < col_count:
        raise OutOfBoundsError(
            f"Column index {col} out of bounds for shape ({row_count}, {col_count})"
        )
    return row, col


def _default_elem_gen(dtype: np.dtype) -> Callable[[np.random.Generator], Any]:
    if dtype.kind == "b":
        return lambda rng: dtype.type(rng.integers(0, 2))
    if dtype.kind in "iu":
        info = np.iinfo(dtype)
        low, high = max(RANDOM_LOW, info.min), min(RANDOM_HIGH, info.max)
        return lambda rng: dtype.type(rng.integers(low, high))
    if dtype.kind == "c":
        return lambda rng: dtype.type(
            complex(rng.uniform(RANDOM_LOW, RANDOM_HIGH), rng.uniform(RANDOM_LOW, RANDOM_HIGH))
        )
    if dtype.kind == "O":
        return lambda rng: float(rng.uniform(RANDOM_LOW, RANDOM_HIGH))
    return lambda rng: dtype.type(rng.uniform(RANDOM_LOW, RANDOM_HIGH))


def random_matrix(
    factory,
    elem_gen: Optional[Callable[[np.random.Generator], Any]] = None,
    seed=None,
):
    """
    Build an arbitrary matrix of the factory's shape, for property tests.

    Parameters
    ----------
    factory : MatrixFactory
        Fixes shape and element type.
    elem_gen : callable(rng) -> element, optional
        Draws one element. Defaults to uniform values in
        [RANDOM_LOW, RANDOM_HIGH) of the factory's dtype.
    seed : int | np.random.Generator | None
        Passed to np.random.default_rng.

    Returns
    -------
    Matrix with the factory's shape
    """
    rng = np.random.default_rng(seed)
    if elem_gen is None:
        elem_gen = _default_elem_gen(factory.numeric.dtype)
    return factory.tabulate(lambda _row, _col: elem_gen(rng))
