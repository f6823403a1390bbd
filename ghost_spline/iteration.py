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
Bounded ping-pong iteration shared by the linear and spline pipelines.

Both pipelines run the same loop: two Jacobi sweeps that alternate between a
pair of device buffers, a device-side difference reduction, and a host-side
threshold test. The loop always stops after ``max_iterations`` passes and
reports whether the threshold was met.
"""

import enum
import logging
import math
from dataclasses import dataclass, field
from typing import Callable, Tuple

from .config import SolverSettings

logger = logging.getLogger(__name__)


class IterationStatus(enum.Enum):
    CONVERGED = "converged"
    REACHED_CAP = "reached_cap"


@dataclass(frozen=True)
class IterationReport:
    """
    Bir Jacobi çözümünün sonlanma bilgisi.

    iterations : tamamlanan döngü turu (her tur iki süpürme)
    residual   : son turda ölçülen kare farkları toplamı
    status     : CONVERGED veya REACHED_CAP
    residuals  : tur başına residual geçmişi
    """

    iterations: int
    residual: float
    status: IterationStatus
    tolerance: float
    residuals: Tuple[float, ...] = field(default=(), repr=False)

    @property
    def sweeps(self) -> int:
        return 2 * self.iterations

    @property
    def converged(self) -> bool:
        return self.status is IterationStatus.CONVERGED


class PingPong:
    """
    Jacobi için çift tampon.

    ``source`` her zaman en güncel iterasyonu tutar; ``sweep`` kaynaktan
    okuyup hedefe yazar ve rolleri değiştirir.
    """

    def __init__(self, first, second):
        if first is second:
            raise ValueError("Ping-pong tamponları aynı nesne olamaz")
        self.source = first
        self.target = second

    def swap(self):
        self.source, self.target = self.target, self.source

    def sweep(self, dispatch: Callable):
        # Aynı tampondan okuyup ona yazan süpürme Jacobi değildir
        if self.source is self.target:
            raise ValueError("Süpürme aynı tampondan okuyup yazamaz")
        dispatch(self.source, self.target)
        self.swap()


def iterate_until_converged(
    pair: PingPong,
    dispatch: Callable,
    measure: Callable[[], float],
    settings: SolverSettings,
    label: str = "Jacobi",
) -> IterationReport:
    """
    Yakınsayana veya tur sınırına ulaşana kadar çift süpürme yap.

    Parametreler:
    -----------
    pair : PingPong
        İterasyon tamponları
    dispatch : callable(source, target)
        Tek süpürmeyi cihazda çalıştırır ve senkronize eder
    measure : callable() -> float
        pair.source ile pair.target arasındaki residual
    settings : SolverSettings
        max_iterations, tolerance, verbose

    Dönüş:
    -----
    IterationReport
    """
    tolerance = settings.tolerance
    residuals = []
    residual = math.inf
    status = IterationStatus.REACHED_CAP
    iteration = 0

    if settings.verbose:
        print(f"\n{'İter':<8} {'Residual':<18} {'Durum':<15}")
        print(f"{'─'*45}")

    for iteration in range(1, settings.max_iterations + 1):
        pair.sweep(dispatch)
        pair.sweep(dispatch)

        residual = measure()
        residuals.append(residual)
        done = residual <= tolerance

        logger.debug("%s tur %d: residual=%.8e", label, iteration, residual)
        if settings.verbose:
            row_status = "CONVERGED ✓" if done else "Iterating"
            print(f"{iteration:<8} {residual:<18.8e} {row_status:<15}")

        if done:
            status = IterationStatus.CONVERGED
            break

    if status is IterationStatus.CONVERGED:
        logger.info("%s %d turda yakınsadı (residual=%.3e)", label, iteration, residual)
    else:
        logger.warning(
            "%s maksimum tura ulaştı (%d), residual=%.3e > %.1e",
            label, iteration, residual, tolerance,
        )

    if settings.verbose:
        print(f"{'─'*45}")
        if status is IterationStatus.CONVERGED:
            print(f"✓ Yakınsama sağlandı {iteration} turda!")
        else:
            print(f"✗ Maksimum tura ulaşıldı ({settings.max_iterations})")
            print(f"  Son residual: {residual:.8e}")

    return IterationReport(
        iterations=iteration,
        residual=residual,
        status=status,
        tolerance=tolerance,
        residuals=tuple(residuals),
    )
