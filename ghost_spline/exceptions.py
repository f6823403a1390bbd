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
GHOST-Spline error taxonomy.

Package-specific errors derive from ``GhostSplineError`` so callers
can catch the whole family at once. Non-convergence is not an exception:
reaching the iteration cap is reported through ``IterationStatus``.
"""


class GhostSplineError(Exception):
    """GHOST-Spline hatalarının ortak taban sınıfı."""


class ConfigurationError(GhostSplineError):
    """
    CUDA cihazı (veya simülatör) kullanılamıyor ya da oturum kapatılmış.

    Başlangıçta bir kez oluşur; yeniden deneme politikası yoktur.
    """


class AllocationFailure(GhostSplineError):
    """
    Çözüm sırasında cihaz tamponu ayrılamadı.

    Çözüm çağrısı iptal edilir, o çağrıya ait tamponlar serbest bırakılır ve
    kısmi sonuç döndürülmez.
    """


class InterpolationRangeError(GhostSplineError, ValueError):
    """Değerlendirme noktası düğüm aralığının dışında."""

    def __init__(self, x, lower, upper):
        self.x = x
        self.lower = lower
        self.upper = upper
        super().__init__(
            f"x={x!r} interpolasyon aralığının dışında [{lower}, {upper}]"
        )
