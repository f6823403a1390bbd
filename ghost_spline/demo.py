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
GHOST-Spline console demo.

Runs the example systems (2×2, 4×4, random 32×32 and a timed 1024×1024) or a
user-given spline, printing the equations and solutions to the console.
"""

import argparse
import logging
import math
import time
from typing import Optional, Sequence

import numpy as np

from .config import LINEAR_SETTINGS, SPLINE_SETTINGS
from .linear import LinearSolver, LinearSolution
from .session import DeviceSession
from .spline import SplineSolver

RANDOM_RANGE = 100.0

_SUBSCRIPTS = str.maketrans("0123456789", "₀₁₂₃₄₅₆₇₈₉")


# =============================================================================
# YARDIMCI FONKSİYONLAR
# =============================================================================

def random_system(dimension: int, rng: Optional[np.random.Generator] = None):
    """
    Rastgele, güçlü diagonal-dominant sistem üret.

    Köşegen dışı elemanlar [0, 100), köşegen (1 + U + n²) * 100.
    """
    rng = rng or np.random.default_rng()
    A = rng.random((dimension, dimension)) * RANDOM_RANGE
    diag = (1.0 + rng.random(dimension) + dimension * dimension) * RANDOM_RANGE
    A[np.arange(dimension), np.arange(dimension)] = diag
    B = rng.random(dimension) * RANDOM_RANGE
    return A, B


def unknown_name(index: int, dimension: int) -> str:
    if dimension < 27:
        return chr(ord("a") + index)
    return "x" + str(index).translate(_SUBSCRIPTS)


def format_equation(A: np.ndarray, B: np.ndarray) -> str:
    """Sistemi satır satır 'a11 a + a12 b = b1' biçiminde yaz."""
    N = A.shape[0]
    width = int(math.ceil(math.log10((N * N + 2) * RANDOM_RANGE))) + 5
    lines = []
    for row in range(N):
        terms = [
            f"{A[row, col]:{width}.4f} {unknown_name(col, N)}" for col in range(N)
        ]
        lines.append(" + ".join(terms) + f" = {B[row]:7.4f}")
    return "\n".join(lines)


def format_solution(solution: LinearSolution) -> str:
    N = solution.x.shape[0]
    values = ", ".join(
        f"{unknown_name(i, N)} = {value:f}" for i, value in enumerate(solution.x)
    )
    state = "yakınsadı" if solution.converged else "tur sınırına ulaştı"
    return (
        f"{solution.sweeps} süpürme ({solution.iterations} tur) sonrası sonuç, {state}:\n"
        f"{values}"
    )


# =============================================================================
# ÖRNEKLER
# =============================================================================

def run_linear(session, A, B, verbose=False):
    if A.shape[0] < 64:
        print(format_equation(A, B))
    settings = LINEAR_SETTINGS.replace(verbose=verbose)
    solution = LinearSolver(session, settings).solve(A, B)
    print(format_solution(solution))
    print(f"||Ax - b|| = {solution.residual_norm:.3e}")
    return solution


def run_spline(session, knots, spacing, verbose=False, samples=9):
    settings = SPLINE_SETTINGS.replace(verbose=verbose)
    interpolator = SplineSolver(session, settings).solve(knots, spacing)
    lower, upper = interpolator.domain
    print(f"Spline: {interpolator.size} düğüm, h={interpolator.h:g}, "
          f"{interpolator.report.iterations} tur")
    for x in np.linspace(lower, upper, samples):
        print(f"  S({x:8.4f}) = {interpolator(x): .6f}")
    return interpolator


def run_examples(session, rng, verbose=False):
    A = np.array([
        [2.0, 3.0],
        [4.0, 9.0],
    ])
    B = np.array([6.0, 15.0])
    run_linear(session, A, B, verbose)

    print("\n\n############\n")

    A = np.array([
        [37.0, 2.0, -1.0, 1.0],
        [2.0, -32.0, 4.0, 2.0],
        [-1.0, 0.5, -36.0, 3.0],
        [1.0, 3.0, 1.0, 37.0],
    ])
    B = np.array([1.0, -2.0, 0.0, 1.0])
    run_linear(session, A, B, verbose)

    print("\n\n############\n")
    run_linear(session, *random_system(32, rng), verbose=verbose)

    print("\n\n############\n")
    start = time.perf_counter()
    run_linear(session, *random_system(1024, rng), verbose=verbose)
    elapsed_ms = (time.perf_counter() - start) * 1000.0
    print(f"\n1024 boyutlu denklem sistemi {elapsed_ms:.0f}ms içinde çözüldü")


# =============================================================================
# ANA PROGRAM
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ghost-spline",
        description="GHOST-Spline: GPU üzerinde Jacobi çözücü ve doğal kübik spline",
    )
    parser.add_argument("--size", type=int, help="rastgele N×N sistem çöz")
    parser.add_argument("--spline", type=float, nargs="+", metavar="Y",
                        help="düğüm değerleri için spline hesapla")
    parser.add_argument("--spacing", type=float, default=1.0,
                        help="düğümler arası mesafe (varsayılan: 1.0)")
    parser.add_argument("--seed", type=int, help="rastgele sayı tohumu")
    parser.add_argument("--max-group-size", type=int,
                        help="blok başına en fazla thread")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="iterasyon tablosunu göster")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    rng = np.random.default_rng(args.seed)

    with DeviceSession(max_group_size=args.max_group_size) as session:
        if args.spline:
            run_spline(session, args.spline, args.spacing, args.verbose)
        elif args.size:
            run_linear(session, *random_system(args.size, rng), verbose=args.verbose)
        else:
            run_examples(session, rng, args.verbose)
    return 0
