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
Host-facing entry points.

``solve`` and ``solve_spline`` take plain in-memory arrays. When no session is
given, a ``DeviceSession`` is opened for the call and closed afterwards.
"""

from contextlib import nullcontext
from typing import Optional

from .config import SolverSettings
from .interpolant import Interpolator
from .linear import LinearSolution, LinearSolver
from .session import DeviceSession
from .spline import SplineSolver


def _session_scope(session: Optional[DeviceSession]):
    if session is None:
        return DeviceSession()
    return nullcontext(session)


def solve(
    matrix,
    vector,
    session: Optional[DeviceSession] = None,
    settings: Optional[SolverSettings] = None,
) -> LinearSolution:
    """A·x = b sistemini Jacobi yöntemiyle çöz."""
    with _session_scope(session) as active:
        return LinearSolver(active, settings).solve(matrix, vector)


def solve_spline(
    knots,
    spacing: float,
    session: Optional[DeviceSession] = None,
    settings: Optional[SolverSettings] = None,
) -> Interpolator:
    """Eşit aralıklı düğümler için doğal kübik spline interpolatörü."""
    with _session_scope(session) as active:
        return SplineSolver(active, settings).solve(knots, spacing)
