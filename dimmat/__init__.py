# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
dimmat
======

A small dimension-aware matrix toolkit: every matrix carries a fixed,
positive shape, and every operation either preserves it or transforms it
explicitly. Shape preconditions are checked once, when a matrix or view is
constructed.

Public API
~~~~~~~~~~
- Construction
    - `MatrixFactory` (`builder`, `row_major`, `tabulate`, `zeros`,
      `ones`, `identity`, `from_nested_rows`)
    - `random_matrix` for property tests
- Views (no copying, always reflect the source)
    - `transpose`, `submatrix`
- Contracts
    - `Matrix`, `Builder`, `Numeric`
- Errors
    - `ShapeMismatchError`, `OutOfBoundsError`, `WindowOutOfBoundsError`,
      `NotSquareError`, `IncompleteBuildError`, `BuilderConsumedError`

Example
-------
>>> import dimmat as dm
>>> m = dm.MatrixFactory(2, 3, int).row_major([11, 12, 13, 21, 22, 23])
>>> t = dm.transpose(m)
>>> t.shape, int(t.get(2, 0))
((3, 2), 13)
"""

from importlib.metadata import version as _pkg_version

from .errors import (
    BuilderConsumedError,
    IncompleteBuildError,
    MatrixError,
    NotSquareError,
    OutOfBoundsError,
    ShapeMismatchError,
    WindowOutOfBoundsError,
)
from .factory import MatrixFactory
from .matrix import Builder, DenseBuilder, DenseMatrix, Matrix
from .numeric import Numeric
from .utils import from_linear_index, random_matrix
from .views import SubmatrixView, TransposeView, submatrix, transpose

__all__ = [
    "MatrixFactory",
    "Matrix",
    "Builder",
    "DenseMatrix",
    "DenseBuilder",
    "Numeric",
    "transpose",
    "submatrix",
    "TransposeView",
    "SubmatrixView",
    "from_linear_index",
    "random_matrix",
    "MatrixError",
    "ShapeMismatchError",
    "OutOfBoundsError",
    "WindowOutOfBoundsError",
    "NotSquareError",
    "IncompleteBuildError",
    "BuilderConsumedError",
]

# ---------------------------------------------------------------------
# Version string
# ---------------------------------------------------------------------
try:  # installed via pip / build backend
    __version__ = _pkg_version(__name__)
except Exception:  # running from a checkout
    __version__ = "0.0.0.dev0"

# ---------------------------------------------------------------------
# Library logging stays silent unless the application configures it.
# ---------------------------------------------------------------------
import logging as _logging

_logging.getLogger(__name__).addHandler(_logging.NullHandler())
