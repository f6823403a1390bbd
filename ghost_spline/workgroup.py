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
Work-size planning for 1D kernel launches.

The number of launched threads is padded up to a multiple of the block size
so every block is full; kernels receive the real problem size and ignore the
padding indices.
"""

from dataclasses import dataclass


def round_up(local_size: int, elements: int) -> int:
    """
    ``elements`` değerine eşit veya büyük olan en küçük ``local_size`` katı.

    >>> round_up(4, 10)
    12
    >>> round_up(5, 5)
    5
    """
    if local_size < 1:
        raise ValueError(f"local_size pozitif olmalı: {local_size}")
    r = elements % local_size
    if r == 0:
        return elements
    return elements + local_size - r


@dataclass(frozen=True)
class WorkPlan:
    """Bir problem boyutu için blok/grid yapılandırması."""

    size: int
    local_size: int
    global_size: int

    @property
    def num_groups(self) -> int:
        return self.global_size // self.local_size

    @property
    def launch(self):
        """Numba çekirdek yapılandırması: (blocks_per_grid, threads_per_block)"""
        return self.num_groups, self.local_size


def plan_work(size: int, max_group_size: int) -> WorkPlan:
    """
    Problem boyutu ve cihazın tercih ettiği blok boyutundan WorkPlan üret.

    local_size = min(size, max_group_size), global_size = round_up(local_size, size)
    """
    if size < 1:
        raise ValueError(f"Problem boyutu en az 1 olmalı: {size}")
    if max_group_size < 1:
        raise ValueError(f"max_group_size pozitif olmalı: {max_group_size}")

    local_size = min(size, max_group_size)
    return WorkPlan(
        size=size,
        local_size=local_size,
        global_size=round_up(local_size, size),
    )
