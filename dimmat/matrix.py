# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Matrix and Builder contracts, plus the dense base implementation.

A `Matrix` reports a fixed, positive (row_count, col_count) and gives
bounds-checked element reads. A `Builder` is the single-use accumulator
that produces base matrices; views (see `dimmat.views`) are the only other
way to obtain a Matrix.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Tuple

import numpy as np

from .errors import BuilderConsumedError, IncompleteBuildError
from .numeric import Numeric
from .utils import check_dims, check_position

logger = logging.getLogger(__name__)


class Matrix(ABC):
    """Read-only, dimension-aware matrix."""

    @property
    @abstractmethod
    def row_count(self) -> int: ...

    @property
    @abstractmethod
    def col_count(self) -> int: ...

    @property
    @abstractmethod
    def dtype(self) -> np.dtype: ...

    @abstractmethod
    def get(self, row: int, col: int) -> Any:
        """
        Element at (row, col).

        Raises
        ------
        OutOfBoundsError : unless 0 <= row < row_count and 0 <= col < col_count
        """

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.row_count, self.col_count)

    def __getitem__(self, pos):
        if not isinstance(pos, tuple) or len(pos) != 2:
            raise TypeError("Matrix indices must be a (row, col) pair")
        return self.get(*pos)

    def to_numpy(self) -> np.ndarray:
        """Copy the elements into a fresh (row_count, col_count) ndarray."""
        out = np.empty(self.shape, dtype=self.dtype)
        for row in range(self.row_count):
            for col in range(self.col_count):
                out[row, col] = self.get(row, col)
        return out

    def __array__(self, dtype=None, copy=None):
        arr = self.to_numpy()
        return arr if dtype is None else arr.astype(dtype)

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.shape != other.shape:
            return False
        return bool(np.array_equal(self.to_numpy(), other.to_numpy()))

    __hash__ = None


class DenseMatrix(Matrix):
    """
    Base matrix over a read-only numpy array.

    The backing array has its ``writeable`` flag cleared, so a DenseMatrix can
    be read from several threads without locking.
    """

    def __init__(self, data):
        self._data = self._freeze(np.array(data, copy=True))

    @classmethod
    def _adopt(cls, data: np.ndarray) -> "DenseMatrix":
        """Wrap an array nobody else holds a reference to, without copying."""
        m = cls.__new__(cls)
        m._data = cls._freeze(data)
        return m

    @staticmethod
    def _freeze(data: np.ndarray) -> np.ndarray:
        if data.ndim != 2:
            raise ValueError(f"DenseMatrix needs 2-D data, got {data.ndim}-D")
        check_dims(*data.shape)
        data.flags.writeable = False
        return data

    @property
    def row_count(self) -> int:
        return self._data.shape[0]

    @property
    def col_count(self) -> int:
        return self._data.shape[1]

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    def get(self, row: int, col: int) -> Any:
        row, col = check_position(row, col, self.row_count, self.col_count)
        return self._data[row, col]

    def to_numpy(self) -> np.ndarray:
        return self._data.copy()

    def __repr__(self):
        return f"DenseMatrix({self.row_count}x{self.col_count}, {self.dtype})"


class Builder(ABC):
    """
    Single-use, write-once-per-cell accumulator for a fixed shape.

    Lifecycle: created by a factory, every cell set, one `result()` call,
    then discarded.
    """

    @property
    @abstractmethod
    def row_count(self) -> int: ...

    @property
    @abstractmethod
    def col_count(self) -> int: ...

    @abstractmethod
    def set(self, row: int, col: int, value: Any) -> None: ...

    @abstractmethod
    def result(self) -> Matrix: ...

    def iterate(self, visitor: Callable[[int, int], Any]) -> None:
        """Call visitor(row, col) once per cell, in row-major order."""
        for row in range(self.row_count):
            for col in range(self.col_count):
                visitor(row, col)

    def __setitem__(self, pos, value):
        if not isinstance(pos, tuple) or len(pos) != 2:
            raise TypeError("Builder indices must be a (row, col) pair")
        self.set(pos[0], pos[1], value)


class DenseBuilder(Builder):
    """
    Builder producing a `DenseMatrix`.

    Not safe for concurrent use: keep a single owner between creation and
    `result()`.
    """

    def __init__(self, row_count: int, col_count: int, numeric: Numeric):
        self._rows, self._cols = check_dims(row_count, col_count)
        self._numeric = numeric
        self._data = np.empty((self._rows, self._cols), dtype=numeric.dtype)
        self._filled = np.zeros((self._rows, self._cols), dtype=bool)
        self._consumed = False

    @property
    def row_count(self) -> int:
        return self._rows

    @property
    def col_count(self) -> int:
        return self._cols

    def _check_open(self):
        if self._consumed:
            raise BuilderConsumedError("Builder already produced its result")

    def _coerce(self, value: Any) -> Any:
        dtype = self._numeric.dtype
        if dtype.kind == "O":
            return value
        if isinstance(value, (str, bytes)):
            raise TypeError(f"Cannot store {value!r} in a {dtype} matrix")
        if dtype.kind in "biuf" and np.iscomplexobj(value) and np.imag(value) != 0:
            raise TypeError(f"Cannot store complex {value!r} in a {dtype} matrix")
        try:
            converted = dtype.type(value)
        except OverflowError as e:
            raise ValueError(f"{value!r} does not fit in {dtype}") from e
        if dtype.kind in "biu":
            if converted != value:
                raise ValueError(
                    f"Storing {value!r} as {dtype} would change it to {converted!r}"
                )
        elif not np.isfinite(converted) and converted != value and value == value:
            # inf and nan pass through; only a finite value turning inf is an overflow
            raise ValueError(f"{value!r} overflows {dtype}")
        return converted

    def set(self, row: int, col: int, value: Any) -> None:
        """
        Write one cell.

        Setting the same cell twice before `result()` is allowed; the last
        write wins.

        Values are converted to the builder's dtype. A conversion that would
        change an integer or bool value (e.g. 1.5 into an int matrix, 300
        into int8) or overflow a float raises ValueError; floating-point
        rounding is accepted.
        """
        self._check_open()
        row, col = check_position(row, col, self._rows, self._cols)
        self._data[row, col] = self._coerce(value)
        self._filled[row, col] = True

    def result(self) -> DenseMatrix:
        """
        Freeze and return the matrix.

        Raises
        ------
        IncompleteBuildError : if any cell was never set
        BuilderConsumedError : if result() was already called
        """
        self._check_open()
        missing = np.argwhere(~self._filled)
        if len(missing):
            row, col = (int(i) for i in missing[0])
            raise IncompleteBuildError(
                f"{len(missing)} of {self._rows * self._cols} cells never set; "
                f"first missing at ({row}, {col})"
            )
        self._consumed = True
        m = DenseMatrix._adopt(self._data)
        self._data = None
        logger.debug("Built %r", m)
        return m
