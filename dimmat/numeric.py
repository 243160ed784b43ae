# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

from dataclasses import dataclass
from typing import Any, Optional

import numpy as np


@dataclass(frozen=True)
class Numeric:
    """
    Element-type capability: the storage dtype plus its additive and
    multiplicative identities.

    Use `Numeric.of` for any numpy dtype. For object dtypes (e.g.
    ``fractions.Fraction``) pass ``zero`` / ``one`` explicitly.
    """

    dtype: np.dtype
    zero: Any
    one: Any

    @classmethod
    def of(
        cls, dtype: Any, zero: Optional[Any] = None, one: Optional[Any] = None
    ) -> "Numeric":
        if isinstance(dtype, Numeric):
            return dtype
        dt = np.dtype(dtype)
        if dt.kind not in "biufcO":
            raise TypeError(f"dtype {dt} is not numeric")
        if dt.kind == "O":
            zero = 0 if zero is None else zero
            one = 1 if one is None else one
        else:
            zero = dt.type(0) if zero is None else dt.type(zero)
            one = dt.type(1) if one is None else dt.type(one)
        return cls(dtype=dt, zero=zero, one=one)
