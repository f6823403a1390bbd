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

import os

# Çekirdekler gerçek GPU olmadan Numba CUDA simülatöründe çalışır
os.environ.setdefault("NUMBA_ENABLE_CUDASIM", "1")

import numpy as np
import pytest

from ghost_spline import DeviceSession


@pytest.fixture
def session():
    with DeviceSession() as s:
        yield s


@pytest.fixture
def small_block_session():
    """Birden çok blok ve dolgu elemanı oluşturmak için küçük blok boyutu."""
    with DeviceSession(max_group_size=4) as s:
        yield s


@pytest.fixture
def rng():
    return np.random.default_rng(42)
