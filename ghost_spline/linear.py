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
Jacobi linear solver orchestrator (Ax=b).

Pads the system to the launch grid, zeroes the iterate pair on the device,
runs the bounded double-sweep loop and reads back the first ``n`` entries of
the newest iterate.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from .config import DTYPE, LINEAR_SETTINGS, SolverSettings
from .iteration import IterationReport, IterationStatus, PingPong, iterate_until_converged
from .kernels import difference_kernel, init_kernel, jacobi_step_kernel
from .reduction import reduce_partial_sums
from .session import DeviceSession

logger = logging.getLogger(__name__)


# =============================================================================
# YARDIMCI FONKSİYONLAR
# =============================================================================

def compute_residual(A: np.ndarray, X: np.ndarray, B: np.ndarray) -> float:
    """
    Residual hesapla: ||Ax - B||_2
    """
    return float(np.linalg.norm(A @ X - B))


def check_diagonal_dominance(A: np.ndarray) -> Tuple[bool, float]:
    """
    Diagonal-dominant kontrol.

    Koşul: |A_ii| >= Σ_{j≠i} |A_ij| (her i için)

    Dönüş:
    -----
    Tuple[bool, float]
        (is_dd, ratio) - DD ise True, en küçük |A_ii| / Σ|A_ij| oranı
    """
    abs_A = np.abs(A)
    diag = np.diag(abs_A)
    off_diag_sum = abs_A.sum(axis=1) - diag

    mask = off_diag_sum > 0
    if not mask.any():
        return True, float("inf")

    min_ratio = float(np.min(diag[mask] / off_diag_sum[mask]))
    return min_ratio >= 1.0, min_ratio


def _validate_system(A, B) -> Tuple[np.ndarray, np.ndarray]:
    A = np.asarray(A, dtype=DTYPE)
    B = np.asarray(B, dtype=DTYPE)

    # B shape kontrolü (2D → 1D)
    if B.ndim == 2 and B.shape[1] == 1:
        B = B.ravel()

    if A.ndim != 2 or A.shape[0] != A.shape[1]:
        raise ValueError(f"A kare matris olmalı, verilen shape: {A.shape}")
    if A.shape[0] < 1:
        raise ValueError("Sistem boyutu en az 1 olmalı")
    if B.ndim != 1 or B.shape[0] != A.shape[0]:
        raise ValueError(
            f"b uzunluğu A ile uyuşmuyor: A {A.shape}, b {B.shape}"
        )
    if not (np.all(np.isfinite(A)) and np.all(np.isfinite(B))):
        raise ValueError("A ve b sonlu değerler içermeli")

    zero_rows = np.flatnonzero(np.diag(A) == 0.0)
    if zero_rows.size:
        raise ValueError(f"Köşegende sıfır eleman (satır {zero_rows[0]})")

    return A, B


# =============================================================================
# SONUÇ
# =============================================================================

@dataclass(frozen=True)
class LinearSolution:
    """
    Jacobi çözümü ve sonlanma bilgisi.

    ``iterations`` döngü turlarını sayar; her tur iki süpürme yapar ve
    ``sweeps == 2 * iterations``. Tek bilinmeyenli sistem bile bir turda,
    yani iki süpürmede yakınsar.
    """

    x: np.ndarray
    report: IterationReport
    residual_norm: float

    @property
    def iterations(self) -> int:
        return self.report.iterations

    @property
    def sweeps(self) -> int:
        return self.report.sweeps

    @property
    def residual(self) -> float:
        return self.report.residual

    @property
    def status(self) -> IterationStatus:
        return self.report.status

    @property
    def converged(self) -> bool:
        return self.report.converged


# =============================================================================
# ANA ÇÖZÜCÜ
# =============================================================================

class LinearSolver:
    """
    GHOST-Spline: GPU üzerinde Jacobi yöntemi ile lineer sistemi çöz.

    Örnek:
    -----
    >>> A = np.array([[10, -1, 2], [-1, 11, -1], [2, -1, 10]], dtype=np.float64)
    >>> B = np.array([6, 25, -11], dtype=np.float64)
    >>> with DeviceSession() as session:
    ...     solution = LinearSolver(session).solve(A, B)
    >>> print(solution.x, solution.status)
    """

    def __init__(self, session: DeviceSession, settings: Optional[SolverSettings] = None):
        self.session = session
        self.settings = settings or LINEAR_SETTINGS

    def solve(self, A, B) -> LinearSolution:
        A, B = _validate_system(A, B)
        N = A.shape[0]

        is_dd, dd_ratio = check_diagonal_dominance(A)
        if not is_dd:
            logger.warning(
                "A diagonal-dominant değil (oran %.4f); yakınsama garanti değil",
                dd_ratio,
            )

        plan = self.session.plan(N)

        if self.settings.verbose:
            print(f"\n{'='*75}")
            print(f"{'GHOST-SPLINE: Jacobi Yöntemi (GPU)':<50}")
            print(f"{'='*75}")
            print(f"Sistem boyutu: {N}×{N}")
            print(f"Tolerans: {self.settings.tolerance:.2e}")
            print(f"Max tur: {self.settings.max_iterations}")
            print(f"GPU Config: {plan.num_groups} blocks × {plan.local_size} threads")
            print(f"Diagonal-dominant: {'✓ Evet' if is_dd else '✗ Hayır'} (ratio: {dd_ratio:.4f})")

        with self.session.buffers() as scope:
            X, report = self._run(scope, plan, A, B)

        residual_norm = compute_residual(A, X, B)
        return LinearSolution(x=X, report=report, residual_norm=residual_norm)

    def _run(self, scope, plan, A, B):
        session = self.session
        N = plan.size
        G = plan.global_size

        # Dolgulu sistem: fazladan satır/sütunlar sıfır
        A_padded = np.zeros((G, G), dtype=DTYPE)
        A_padded[:N, :N] = A
        B_padded = np.zeros(G, dtype=DTYPE)
        B_padded[:N] = B

        x_old = scope.allocate("x_old", G)
        x_new = scope.allocate("x_new", G)
        diff = scope.allocate("diff", plan.num_groups)

        session.launch(init_kernel, plan, x_old, G)
        session.launch(init_kernel, plan, x_new, G)

        A_gpu = scope.upload("A", A_padded)
        B_gpu = scope.upload("b", B_padded)

        pair = PingPong(x_old, x_new)
        shared_bytes = plan.local_size * np.dtype(DTYPE).itemsize

        def dispatch(source, target):
            session.launch(jacobi_step_kernel, plan, A_gpu, B_gpu, source, target, N)

        def measure():
            session.launch(
                difference_kernel, plan, pair.source, pair.target, diff, N,
                shared_bytes=shared_bytes,
            )
            return reduce_partial_sums(session.read(diff))

        report = iterate_until_converged(pair, dispatch, measure, self.settings, label="Jacobi")

        X = session.read(pair.source)[:N].copy()
        return X, report
