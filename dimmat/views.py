# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Structural views

A view is a Matrix that holds a reference to another Matrix and forwards
every element read through an index remap. No element is read or copied
when the view is created, so a view always reflects its source.
"""

import logging
import operator
from typing import Any, Tuple

import numpy as np

from .errors import WindowOutOfBoundsError
from .matrix import Matrix
from .utils import check_position, is_index

logger = logging.getLogger(__name__)


def _require_matrix(source) -> Matrix:
    if not isinstance(source, Matrix):
        raise TypeError(f"Expected a Matrix, got {type(source).__name__}")
    return source


class TransposeView(Matrix):
    """Shape (C, R) view over a (R, C) source; get(r, c) reads source.get(c, r)."""

    def __init__(self, source: Matrix):
        self._source = _require_matrix(source)

    @property
    def source(self) -> Matrix:
        return self._source

    @property
    def row_count(self) -> int:
        return self._source.col_count

    @property
    def col_count(self) -> int:
        return self._source.row_count

    @property
    def dtype(self) -> np.dtype:
        return self._source.dtype

    def get(self, row: int, col: int) -> Any:
        row, col = check_position(row, col, self.row_count, self.col_count)
        return self._source.get(col, row)

    def __repr__(self):
        return f"TransposeView({self._source!r})"


class SubmatrixView(Matrix):
    """
    Rectangular window over a source matrix.

    Parameters
    ----------
    source : Matrix                 (R, C)
    row_offset, col_offset : int
        Top-left corner of the window in source coordinates.
    window_rows, window_cols : int
        Window shape, strictly positive.

    Raises
    ------
    WindowOutOfBoundsError : if the window is empty or leaves [0, R) x [0, C)
    """

    def __init__(
        self,
        source: Matrix,
        row_offset: int,
        col_offset: int,
        window_rows: int,
        window_cols: int,
    ):
        source = _require_matrix(source)
        bounds = (row_offset, col_offset, window_rows, window_cols)
        if not all(is_index(x) for x in bounds):
            raise TypeError(f"Window bounds must be integers, got {bounds!r}")
        row_offset, col_offset, window_rows, window_cols = (
            operator.index(x) for x in bounds
        )
        if row_offset < 0 or col_offset < 0:
            raise WindowOutOfBoundsError(
                f"Top-left corner ({row_offset}, {col_offset}) must be non-negative"
            )
        if window_rows <= 0:
            raise WindowOutOfBoundsError(
                f"Window must have at least one row, got {window_rows}"
            )
        if window_cols <= 0:
            raise WindowOutOfBoundsError(
                f"Window must have at least one column, got {window_cols}"
            )
        if row_offset + window_rows > source.row_count:
            raise WindowOutOfBoundsError(
                f"Last window row {row_offset + window_rows - 1} exceeds "
                f"source rows {source.row_count}"
            )
        if col_offset + window_cols > source.col_count:
            raise WindowOutOfBoundsError(
                f"Last window column {col_offset + window_cols - 1} exceeds "
                f"source columns {source.col_count}"
            )
        self._source = source
        self._row_offset, self._col_offset = row_offset, col_offset
        self._rows, self._cols = window_rows, window_cols

    @property
    def source(self) -> Matrix:
        return self._source

    @property
    def offset(self) -> Tuple[int, int]:
        return (self._row_offset, self._col_offset)

    @property
    def row_count(self) -> int:
        return self._rows

    @property
    def col_count(self) -> int:
        return self._cols

    @property
    def dtype(self) -> np.dtype:
        return self._source.dtype

    def get(self, row: int, col: int) -> Any:
        row, col = check_position(row, col, self._rows, self._cols)
        return self._source.get(row + self._row_offset, col + self._col_offset)

    def __repr__(self):
        return (
            f"SubmatrixView({self._source!r}, offset={self.offset}, "
            f"shape={self.shape})"
        )


def transpose(m: Matrix) -> Matrix:
    """Transpose of m as a view over the same storage; O(1)."""
    view = TransposeView(m)
    logger.debug("transpose: %s -> %s", m.shape, view.shape)
    return view


def submatrix(
    m: Matrix, top_left: Tuple[int, int], bottom_right: Tuple[int, int]
) -> Matrix:
    """
    Window of m between two inclusive corners, as a view.

    window_rows = bottom_right[0] - top_left[0] + 1
    window_cols = bottom_right[1] - top_left[1] + 1

    Example
    -------
    >>> from dimmat import MatrixFactory
    >>> I3 = MatrixFactory(3, 3).identity()
    >>> submatrix(I3, (1, 1), (2, 2)) == MatrixFactory(2, 2).identity()
    True
    """
    (row_offset, col_offset), (row_end, col_end) = top_left, bottom_right
    if not all(is_index(x) for x in (row_offset, col_offset, row_end, col_end)):
        raise TypeError(
            f"Corners must be integer pairs, got {top_left!r}, {bottom_right!r}"
        )
    row_offset, col_offset, row_end, col_end = (
        operator.index(x) for x in (row_offset, col_offset, row_end, col_end)
    )
    view = SubmatrixView(
        m, row_offset, col_offset, row_end - row_offset + 1, col_end - col_offset + 1
    )
    logger.debug(
        "submatrix: %s window %s..%s -> %s", m.shape, top_left, bottom_right, view.shape
    )
    return view
