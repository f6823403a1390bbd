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
Host-side convergence reduction.

The ``difference`` kernel leaves one partial sum of squared differences per
block; the block count is small, so the final sum is taken on the host.
"""

import numpy as np


def reduce_partial_sums(partial_sums) -> float:
    """
    Blok başına kısmi toplamları tek bir residual değerine indir.

    Parametreler:
    -----------
    partial_sums : dizi benzeri (k,)
        Her blok için kare farkları toplamı

    Dönüş:
    -----
    float
        Toplam (boş giriş için 0.0)
    """
    values = np.asarray(partial_sums, dtype=np.float64)
    if values.size == 0:
        return 0.0
    return float(np.sum(values))
