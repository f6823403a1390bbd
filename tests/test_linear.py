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

import numpy as np
import pytest
from scipy.linalg import solve as sp_solve

from ghost_spline import (
    ConfigurationError,
    DeviceSession,
    IterationStatus,
    LinearSolver,
    SolverSettings,
    solve,
)
from ghost_spline.linear import check_diagonal_dominance, compute_residual

A_4x4 = np.array([
    [37.0, 2.0, -1.0, 1.0],
    [2.0, -32.0, 4.0, 2.0],
    [-1.0, 0.5, -36.0, 3.0],
    [1.0, 3.0, 1.0, 37.0],
])
B_4x4 = np.array([1.0, -2.0, 0.0, 1.0])


def test_two_by_two_system(session):
    A = np.array([[2.0, 3.0], [4.0, 9.0]])
    B = np.array([6.0, 15.0])

    solution = LinearSolver(session).solve(A, B)

    assert solution.converged
    assert np.allclose(solution.x, [1.5, 1.0], atol=1e-8)
    assert solution.iterations <= 100
    assert solution.sweeps == 2 * solution.iterations


def test_four_by_four_system_converges_below_threshold(session):
    solution = LinearSolver(session).solve(A_4x4, B_4x4)

    assert solution.status is IterationStatus.CONVERGED
    assert solution.residual <= 1e-20
    assert solution.iterations <= 100
    assert np.allclose(solution.x, sp_solve(A_4x4, B_4x4), atol=1e-9)
    assert solution.residual_norm < 1e-8


def test_single_unknown_is_exact(session):
    solution = LinearSolver(session).solve([[4.0]], [10.0])

    assert solution.x.shape == (1,)
    assert solution.x[0] == 2.5
    assert solution.iterations == 1
    assert solution.sweeps == 2
    assert solution.converged


def test_padded_multi_block_system(small_block_session, rng):
    N = 10
    A = rng.standard_normal((N, N))
    A[np.arange(N), np.arange(N)] = 4.0 * N
    B = rng.standard_normal(N)

    solution = LinearSolver(small_block_session).solve(A, B)

    assert solution.x.shape == (N,)
    assert solution.converged
    assert np.allclose(solution.x, sp_solve(A, B), atol=1e-9)


def test_medium_system_matches_scipy(session, rng):
    N = 48
    A = rng.standard_normal((N, N)) * 0.1
    A[np.arange(N), np.arange(N)] = N * 1.5
    B = np.ones(N)

    solution = LinearSolver(session).solve(A, B)

    error = np.linalg.norm(solution.x - sp_solve(A, B))
    assert error < 1e-8


def test_repeated_solves_agree(session):
    first = LinearSolver(session).solve(A_4x4, B_4x4)
    second = LinearSolver(session).solve(A_4x4, B_4x4)

    assert np.allclose(first.x, second.x, atol=1e-14)
    assert first.iterations == second.iterations


def test_non_dominant_system_reports_cap(session, caplog):
    A = np.array([[1.0, 2.0], [3.0, 1.0]])
    B = np.array([1.0, 1.0])
    settings = SolverSettings(max_iterations=10, tolerance=1e-20)

    solution = LinearSolver(session, settings).solve(A, B)

    assert solution.status is IterationStatus.REACHED_CAP
    assert not solution.converged
    assert solution.iterations == 10
    assert solution.sweeps == 20
    assert any("maksimum" in r.getMessage() for r in caplog.records)


def test_buffers_released_after_solve(session):
    LinearSolver(session).solve(A_4x4, B_4x4)
    assert session.live_buffers == 0


@pytest.mark.parametrize(
    "A, B",
    [
        (np.ones((2, 3)), np.ones(2)),
        (np.eye(3), np.ones(2)),
        (np.array([[0.0, 1.0], [1.0, 2.0]]), np.ones(2)),
        (np.array([[1.0, np.inf], [1.0, 2.0]]), np.ones(2)),
        (np.zeros((0, 0)), np.zeros(0)),
    ],
)
def test_invalid_systems_are_rejected(session, A, B):
    with pytest.raises(ValueError):
        LinearSolver(session).solve(A, B)


def test_column_vector_rhs_is_accepted(session):
    solution = LinearSolver(session).solve(A_4x4, B_4x4.reshape(-1, 1))
    assert solution.x.shape == (4,)


def test_closed_session_raises_configuration_error():
    session = DeviceSession()
    with pytest.raises(ConfigurationError):
        LinearSolver(session).solve(A_4x4, B_4x4)


def test_module_level_solve_opens_its_own_session():
    solution = solve(A_4x4, B_4x4)
    assert solution.converged


def test_diagonal_dominance_check():
    assert check_diagonal_dominance(A_4x4)[0]
    is_dd, ratio = check_diagonal_dominance(np.array([[1.0, 2.0], [3.0, 1.0]]))
    assert not is_dd
    assert ratio == pytest.approx(1.0 / 3.0)
    assert check_diagonal_dominance(np.eye(3)) == (True, float("inf"))


def test_compute_residual():
    A = np.array([[2.0, 0.0], [0.0, 4.0]])
    assert compute_residual(A, np.array([1.0, 1.0]), np.array([2.0, 4.0])) == 0.0
