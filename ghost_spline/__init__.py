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
GHOST-Spline: GPU-Heavy Operations for Solving Tridiagonal (and dense) Systems.

Jacobi iteration on a CUDA device through Numba for dense linear systems and
for natural cubic spline coefficients.

Licensed under the AGPLv3.
"""

from .api import solve, solve_spline
from .config import LINEAR_SETTINGS, SPLINE_SETTINGS, SolverSettings
from .exceptions import (
    AllocationFailure,
    ConfigurationError,
    GhostSplineError,
    InterpolationRangeError,
)
from .interpolant import Interpolator
from .iteration import IterationReport, IterationStatus
from .linear import LinearSolution, LinearSolver
from .reduction import reduce_partial_sums
from .session import DeviceSession
from .spline import SplineSolver
from .workgroup import WorkPlan, plan_work, round_up

__version__ = "2.1.0"

__all__ = [
    "AllocationFailure",
    "ConfigurationError",
    "DeviceSession",
    "GhostSplineError",
    "InterpolationRangeError",
    "Interpolator",
    "IterationReport",
    "IterationStatus",
    "LINEAR_SETTINGS",
    "LinearSolution",
    "LinearSolver",
    "SPLINE_SETTINGS",
    "SolverSettings",
    "SplineSolver",
    "WorkPlan",
    "plan_work",
    "reduce_partial_sums",
    "round_up",
    "solve",
    "solve_spline",
]
