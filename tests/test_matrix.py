# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import numpy as np
import pytest

from dimmat.errors import (
    BuilderConsumedError,
    IncompleteBuildError,
    OutOfBoundsError,
)
from dimmat.matrix import DenseBuilder, DenseMatrix
from dimmat.numeric import Numeric


def _builder(rows=2, cols=3, dtype=float):
    return DenseBuilder(rows, cols, Numeric.of(dtype))


def test_iterate_visits_every_cell_in_row_major_order():
    b = _builder()
    seen = []
    b.iterate(lambda r, c: seen.append((r, c)))
    assert seen == [(0, 0), (0, 1), (0, 2), (1, 0), (1, 1), (1, 2)]


def test_builder_result_holds_written_values():
    b = _builder()
    b.iterate(lambda r, c: b.set(r, c, 10 * r + c))
    m = b.result()
    assert isinstance(m, DenseMatrix)
    assert m.shape == (2, 3)
    np.testing.assert_array_equal(m.to_numpy(), [[0, 1, 2], [10, 11, 12]])


def test_builder_setitem():
    b = _builder(1, 2)
    b[0, 0] = 1.5
    b[0, 1] = 2.5
    assert b.result().get(0, 1) == 2.5


def test_builder_duplicate_set_last_write_wins():
    b = _builder(1, 1)
    b.set(0, 0, 1.0)
    b.set(0, 0, 2.0)
    assert b.result().get(0, 0) == 2.0


def test_builder_incomplete_raises():
    b = _builder()
    for r, c in [(0, 0), (0, 1), (0, 2), (1, 0), (1, 1)]:
        b.set(r, c, 0.0)
    with pytest.raises(IncompleteBuildError, match=r"1 of 6 .* \(1, 2\)"):
        b.result()


def test_builder_set_out_of_bounds():
    b = _builder()
    with pytest.raises(OutOfBoundsError):
        b.set(2, 0, 1.0)
    with pytest.raises(IndexError):
        b.set(0, -1, 1.0)


def test_builder_is_single_use():
    b = _builder(1, 1)
    b.set(0, 0, 1.0)
    b.result()
    with pytest.raises(BuilderConsumedError):
        b.set(0, 0, 2.0)
    with pytest.raises(BuilderConsumedError):
        b.result()


def test_dense_matrix_storage_is_read_only():
    A = np.arange(6.0).reshape(2, 3)
    m = DenseMatrix(A)
    A[0, 0] = 99.0  # constructor copied
    assert m.get(0, 0) == 0.0

    out = m.to_numpy()
    out[1, 1] = -1.0
    assert m.get(1, 1) == 4.0
    with pytest.raises(ValueError):
        m._data[0, 0] = 1.0
    assert A.flags.writeable


def test_built_matrix_storage_is_read_only():
    b = _builder(2, 2)
    b.iterate(lambda r, c: b.set(r, c, float(r + c)))
    m = b.result()
    assert not m._data.flags.writeable
    with pytest.raises(ValueError):
        m._data[1, 1] = 0.0
    assert m.get(1, 1) == 2.0


@pytest.mark.parametrize(
    "dtype,value",
    [(int, 1.5), (int, float("nan")), (np.int8, 300), (np.uint8, -1), (bool, 2)],
)
def test_builder_rejects_lossy_values(dtype, value):
    b = _builder(1, 1, dtype)
    with pytest.raises(ValueError):
        b.set(0, 0, value)


def test_builder_rejects_float_overflow():
    b = _builder(1, 1, np.float32)
    with pytest.raises(ValueError):
        b.set(0, 0, 1e300)


@pytest.mark.parametrize("dtype,value", [(float, 1 + 2j), (int, "3"), (float, "1.5")])
def test_builder_rejects_wrong_kind(dtype, value):
    b = _builder(1, 1, dtype)
    with pytest.raises(TypeError):
        b.set(0, 0, value)


@pytest.mark.parametrize(
    "dtype,value",
    [(int, 2.0), (int, np.int16(-7)), (np.uint8, 255), (bool, 1), (float, float("inf"))],
)
def test_builder_accepts_exact_values(dtype, value):
    b = _builder(1, 1, dtype)
    b.set(0, 0, value)
    assert b.result().get(0, 0) == value


def test_builder_keeps_nan():
    b = _builder(1, 1, float)
    b.set(0, 0, float("nan"))
    assert np.isnan(b.result().get(0, 0))


def test_builder_accepts_numpy_unsigned_indices():
    b = _builder(2, 2)
    b.iterate(lambda r, c: b.set(np.uint8(r), np.uint8(c), float(2 * r + c)))
    np.testing.assert_array_equal(b.result().to_numpy(), [[0.0, 1.0], [2.0, 3.0]])


@pytest.mark.parametrize("data", [np.zeros((0, 3)), np.zeros((2, 0)), np.zeros(3)])
def test_dense_matrix_rejects_degenerate_shapes(data):
    with pytest.raises(ValueError):
        DenseMatrix(data)


@pytest.mark.parametrize("row,col", [(-1, 0), (0, -1), (2, 0), (0, 3)])
def test_get_out_of_bounds_never_wraps(row, col):
    m = DenseMatrix(np.arange(6).reshape(2, 3))
    with pytest.raises(OutOfBoundsError):
        m.get(row, col)


def test_getitem_and_array_interop():
    A = np.arange(6).reshape(2, 3)
    m = DenseMatrix(A)
    assert m[1, 2] == 5
    with pytest.raises(TypeError):
        m[1]
    np.testing.assert_array_equal(np.asarray(m), A)
    assert np.asarray(m, dtype=float).dtype == np.float64


def test_equality():
    A = np.arange(6).reshape(2, 3)
    assert DenseMatrix(A) == DenseMatrix(A.copy())
    assert DenseMatrix(A) != DenseMatrix(A + 1)
    assert DenseMatrix(A) != DenseMatrix(A.reshape(3, 2))
    with pytest.raises(TypeError):
        hash(DenseMatrix(A))


def test_repr_does_not_dump_elements():
    m = DenseMatrix(np.zeros((2, 3)))
    assert repr(m) == "DenseMatrix(2x3, float64)"
