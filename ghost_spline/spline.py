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
Natural cubic spline coefficient orchestrator.

Solves the tridiagonal second-derivative system of a natural cubic spline
over uniformly spaced knots with the same bounded ping-pong Jacobi loop as the
linear solver, then derives the per-segment ``a``/``b`` coefficients on the
device and returns a host-side ``Interpolator``.
"""

import logging
from typing import Optional

import numpy as np

from .config import DTYPE, SPLINE_SETTINGS, SolverSettings
from .interpolant import Interpolator
from .iteration import PingPong, iterate_until_converged
from .kernels import (
    compute_ab_kernel,
    difference_kernel,
    init_kernel,
    init_rhs_kernel,
    jacobi_spline_step_kernel,
)
from .reduction import reduce_partial_sums
from .session import DeviceSession

logger = logging.getLogger(__name__)


class SplineSolver:
    """
    Düğüm değerleri y ve aralık h için doğal kübik spline katsayılarını
    GPU üzerinde Jacobi yöntemiyle hesapla.
    """

    def __init__(self, session: DeviceSession, settings: Optional[SolverSettings] = None):
        self.session = session
        self.settings = settings or SPLINE_SETTINGS

    def solve(self, y, h: float) -> Interpolator:
        y = np.asarray(y, dtype=DTYPE)
        h = float(h)

        if y.ndim != 1:
            raise ValueError(f"Düğüm değerleri 1D olmalı, verilen şekil: {y.shape}")
        if y.size < 2:
            raise ValueError(f"En az iki düğüm gerekli, verilen: {y.size}")
        if not h > 0.0:
            raise ValueError(f"h pozitif olmalı, verilen: {h}")
        if not np.all(np.isfinite(y)):
            raise ValueError("Düğüm değerleri sonlu olmalı")

        plan = self.session.plan(y.size)
        logger.debug(
            "Spline: %d düğüm, h=%g, %d blok × %d thread",
            y.size, h, plan.num_groups, plan.local_size,
        )

        with self.session.buffers() as scope:
            a, b, c, report = self._run(scope, plan, y, h)

        return Interpolator(a=a, b=b, c=c, h=h, report=report)

    def _run(self, scope, plan, y, h):
        session = self.session
        N = plan.size
        G = plan.global_size

        y_padded = np.zeros(G, dtype=DTYPE)
        y_padded[:N] = y

        y_gpu = scope.upload("y", y_padded)
        rhs = scope.allocate("rhs", G)
        c1 = scope.allocate("c1", G)
        c2 = scope.allocate("c2", G)
        a = scope.allocate("a", G)
        b = scope.allocate("b", G)
        diff = scope.allocate("diff", plan.num_groups)

        for buf in (rhs, c1, c2, a, b):
            session.launch(init_kernel, plan, buf, G)

        session.launch(init_rhs_kernel, plan, y_gpu, rhs, h, N)

        pair = PingPong(c1, c2)
        shared_bytes = plan.local_size * np.dtype(DTYPE).itemsize

        def dispatch(source, target):
            session.launch(jacobi_spline_step_kernel, plan, rhs, source, target, N)

        def measure():
            session.launch(
                difference_kernel, plan, pair.source, pair.target, diff, N,
                shared_bytes=shared_bytes,
            )
            return reduce_partial_sums(session.read(diff))

        report = iterate_until_converged(pair, dispatch, measure, self.settings, label="Spline")

        session.launch(compute_ab_kernel, plan, y_gpu, pair.source, a, b, h, N)

        return (
            session.read(a)[:N].copy(),
            session.read(b)[:N].copy(),
            session.read(pair.source)[:N].copy(),
            report,
        )
