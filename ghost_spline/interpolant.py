# =============================================================================
# Hukuki Başlık (AGPLv3) - Zorunlu Kısım
# =============================================================================

# Copyright (C) 2025 [Adınız Soyadınız]

# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program. If not, see <http://www.gnu.org/licenses/>.

# =============================================================================
# Modül Açıklaması (Mühendislik İçin)
# =============================================================================

"""
Closed-form natural cubic spline interpolant.

Built once from the converged coefficients and the knot spacing; holds only
host copies of the arrays. Segment ``i`` (1 <= i <= n-1) covers
``[(i-1)h, ih]`` and uses ``c[i-1]``, ``c[i]``, ``a[i]``, ``b[i]``.
"""

import math
from dataclasses import dataclass, field
from typing import Optional

import numpy as np

from .exceptions import InterpolationRangeError
from .iteration import IterationReport


def _frozen_copy(values) -> np.ndarray:
    arr = np.array(values, dtype=np.float64)
    arr.setflags(write=False)
    return arr


@dataclass(frozen=True, eq=False)
class Interpolator:
    """
    S(x) = c_i/(6h) (x - x_{i-1})^3 + c_{i-1}/(6h) (x_i - x)^3
           + b_i (x - (x_{i-1} + x_i)/2) + a_i
    """

    a: np.ndarray
    b: np.ndarray
    c: np.ndarray
    h: float
    report: Optional[IterationReport] = field(default=None, repr=False)

    def __post_init__(self):
        object.__setattr__(self, "a", _frozen_copy(self.a))
        object.__setattr__(self, "b", _frozen_copy(self.b))
        object.__setattr__(self, "c", _frozen_copy(self.c))
        object.__setattr__(self, "h", float(self.h))

        if (
            self.c.ndim != 1
            or self.a.shape != self.c.shape
            or self.b.shape != self.c.shape
        ):
            raise ValueError("a, b ve c aynı uzunlukta 1D diziler olmalı")
        if self.c.shape[0] < 2:
            raise ValueError("En az iki düğüm gerekli")
        if not self.h > 0.0:
            raise ValueError(f"h pozitif olmalı: {self.h}")

    @property
    def size(self) -> int:
        return self.c.shape[0]

    @property
    def domain(self):
        return 0.0, (self.size - 1) * self.h

    @property
    def knots(self) -> np.ndarray:
        return np.arange(self.size, dtype=np.float64) * self.h

    def _segment(self, x: float) -> int:
        lower, upper = self.domain
        if not (lower <= x <= upper):
            raise InterpolationRangeError(x, lower, upper)
        # Son düğüm son segmente aittir
        return min(int(math.floor(x / self.h)) + 1, self.size - 1)

    def _evaluate_scalar(self, x: float) -> float:
        h = self.h
        i = self._segment(x)
        lower = (i - 1) * h
        upper = lower + h

        return (self.c[i] / (6.0 * h)) * (x - lower) ** 3 + \
               (self.c[i - 1] / (6.0 * h)) * (upper - x) ** 3 + \
               self.b[i] * (x - 0.5 * (lower + upper)) + self.a[i]

    def _derivative_scalar(self, x: float) -> float:
        h = self.h
        i = self._segment(x)
        lower = (i - 1) * h
        upper = lower + h

        return (self.c[i] / (2.0 * h)) * (x - lower) ** 2 - \
               (self.c[i - 1] / (2.0 * h)) * (upper - x) ** 2 + self.b[i]

    def _second_derivative_scalar(self, x: float) -> float:
        h = self.h
        i = self._segment(x)
        lower = (i - 1) * h
        upper = lower + h

        return (self.c[i] * (x - lower) + self.c[i - 1] * (upper - x)) / h

    def _apply(self, func, x):
        if np.ndim(x) == 0:
            return float(func(float(x)))
        xs = np.asarray(x, dtype=np.float64)
        return np.array([func(float(v)) for v in xs.ravel()]).reshape(xs.shape)

    def evaluate(self, x):
        """x skaler ise float, dizi ise aynı shape'te ndarray döndürür."""
        return self._apply(self._evaluate_scalar, x)

    __call__ = evaluate

    def derivative(self, x):
        return self._apply(self._derivative_scalar, x)

    def second_derivative(self, x):
        return self._apply(self._second_derivative_scalar, x)
