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
Solver configuration for GHOST-Spline.

The two pipelines share the same bounded ping-pong loop and differ only in the
convergence threshold, so the settings object is small and immutable.
"""

from dataclasses import dataclass, replace as _replace

import numpy as np

# Cihaz MAX_THREADS_PER_BLOCK bildirmezse (ör. CUDA simülatörü) kullanılır
DEFAULT_GROUP_SIZE = 256

# Tüm cihaz tamponlarının eleman tipi
DTYPE = np.float64


@dataclass(frozen=True)
class SolverSettings:
    """
    Jacobi döngüsünün ayarları.

    Parametreler:
    -----------
    max_iterations : int
        Maksimum döngü turu (her tur iki Jacobi süpürmesi yapar)
    tolerance : float
        Ardışık iterasyonlar arasındaki kare farkı toplamı için eşik
    verbose : bool
        Konsola iterasyon tablosu yaz
    """

    max_iterations: int = 100
    tolerance: float = 1e-20
    verbose: bool = False

    def __post_init__(self):
        if self.max_iterations < 1:
            raise ValueError(
                f"max_iterations en az 1 olmalı, verilen: {self.max_iterations}"
            )
        if not self.tolerance >= 0.0:
            raise ValueError(
                f"tolerance negatif olamaz, verilen: {self.tolerance}"
            )

    def replace(self, **changes) -> "SolverSettings":
        return _replace(self, **changes)


LINEAR_SETTINGS = SolverSettings(max_iterations=100, tolerance=1e-20)
SPLINE_SETTINGS = SolverSettings(max_iterations=100, tolerance=1e-10)
