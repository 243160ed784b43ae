# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import logging
from typing import Any, Callable, Iterable, Sequence

from .errors import NotSquareError, ShapeMismatchError
from .matrix import DenseBuilder, Matrix
from .numeric import Numeric
from .utils import DEFAULT_DTYPE, check_dims, from_linear_index

logger = logging.getLogger(__name__)


class MatrixFactory:
    """
    Central entry point for creating base matrices of one fixed shape.

    Parameters
    ----------
    row_count, col_count : int
        Target shape, both strictly positive.
    dtype : numpy dtype-like or Numeric
        Element type; must provide a numeric zero and one.

    Example
    -------
    >>> f = MatrixFactory(2, 3, int)
    >>> m = f.from_nested_rows([[11, 12, 13], [21, 22, 23]])
    >>> int(m.get(1, 2))
    23
    """

    def __init__(self, row_count: int, col_count: int, dtype=DEFAULT_DTYPE):
        self.row_count, self.col_count = check_dims(row_count, col_count)
        self.numeric = Numeric.of(dtype)
        logger.debug("Created %r", self)

    @property
    def shape(self):
        return (self.row_count, self.col_count)

    @property
    def size(self) -> int:
        return self.row_count * self.col_count

    def builder(self) -> DenseBuilder:
        """Return a fresh Builder for this factory's shape."""
        return DenseBuilder(self.row_count, self.col_count, self.numeric)

    def row_major(self, elements: Iterable[Any]) -> Matrix:
        """
        Matrix holding `elements` in row-major order:
        cell (r, c) is elements[r * col_count + c].

        Raises
        ------
        ShapeMismatchError : if len(elements) != row_count * col_count
        """
        elements = list(elements)
        if len(elements) != self.size:
            raise ShapeMismatchError(
                f"Size of given element collection must be {self.size}, "
                f"but was {len(elements)}"
            )
        b = self.builder()
        for idx, elem in enumerate(elements):
            row, col = from_linear_index(idx, self.col_count)
            b.set(row, col, elem)
        return b.result()

    def tabulate(self, fill_elem: Callable[[int, int], Any]) -> Matrix:
        """
        Matrix whose cell (r, c) is fill_elem(r, c).

        fill_elem is called exactly once per cell, in row-major order.
        """
        b = self.builder()
        b.iterate(lambda row, col: b.set(row, col, fill_elem(row, col)))
        return b.result()

    def zeros(self) -> Matrix:
        zero = self.numeric.zero
        return self.tabulate(lambda _row, _col: zero)

    def ones(self) -> Matrix:
        one = self.numeric.one
        return self.tabulate(lambda _row, _col: one)

    def identity(self) -> Matrix:
        """
        Identity matrix; only defined for square shapes.

        Raises
        ------
        NotSquareError : if row_count != col_count
        """
        if self.row_count != self.col_count:
            raise NotSquareError(
                f"Identity requires a square shape, got ({self.row_count}, {self.col_count})"
            )
        zero, one = self.numeric.zero, self.numeric.one
        return self.tabulate(lambda row, col: one if row == col else zero)

    def from_nested_rows(self, rows: Sequence[Sequence[Any]]) -> Matrix:
        """
        Matrix from literal row-by-row data, e.g.

            MatrixFactory(2, 3).from_nested_rows([(11, 12, 13), (21, 22, 23)])

        Every row is validated before anything is built.

        Raises
        ------
        ShapeMismatchError : on a wrong row count or a row of wrong length
        """
        rows = [list(r) for r in rows]
        if len(rows) != self.row_count:
            raise ShapeMismatchError(
                f"Expected {self.row_count} rows, but got {len(rows)}"
            )
        for row_idx, r in enumerate(rows):
            if len(r) != self.col_count:
                raise ShapeMismatchError(
                    f"Row {row_idx} must have {self.col_count} columns, "
                    f"but has {len(r)}"
                )
        return self.row_major(elem for r in rows for elem in r)

    def __repr__(self):
        return (
            f"MatrixFactory({self.row_count}, {self.col_count}, "
            f"{self.numeric.dtype})"
        )
