# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Error taxonomy

Every error derives from `MatrixError` and from the builtin a caller would
naturally catch (``ValueError``, ``IndexError``, ``RuntimeError``).
"""


class MatrixError(Exception):
    """Base class for all dimmat errors."""


class ShapeMismatchError(MatrixError, ValueError):
    """Input element count or nesting does not match the declared shape."""


class OutOfBoundsError(MatrixError, IndexError):
    """Element position outside ``[0, row_count) x [0, col_count)``."""


class WindowOutOfBoundsError(MatrixError, ValueError):
    """Submatrix window is empty or exceeds the source shape."""


class NotSquareError(MatrixError, ValueError):
    """Operation requires ``row_count == col_count``."""


class IncompleteBuildError(MatrixError, RuntimeError):
    """Builder.result() called before every cell was set."""


class BuilderConsumedError(MatrixError, RuntimeError):
    """Builder used again after result() froze it."""
