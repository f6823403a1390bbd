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
from scipy.interpolate import CubicSpline

from ghost_spline import (
    InterpolationRangeError,
    IterationStatus,
    SolverSettings,
    SplineSolver,
    solve_spline,
)

KNOTS = [0.0, 1.0, 0.0, -1.0, 0.0]


def test_interpolator_passes_through_knots(session):
    interpolator = SplineSolver(session).solve(KNOTS, 1.0)

    for i, y in enumerate(KNOTS):
        assert interpolator(float(i)) == pytest.approx(y, abs=1e-12)


def test_second_derivatives_of_symmetric_wave(session):
    interpolator = SplineSolver(session).solve(KNOTS, 1.0)

    assert np.allclose(interpolator.c, [0.0, -3.0, 0.0, 3.0, 0.0], atol=1e-4)
    assert interpolator.report.status is IterationStatus.CONVERGED
    assert interpolator.report.residual <= 1e-10


def test_continuous_at_interior_knots(session):
    interpolator = SplineSolver(session).solve(KNOTS, 1.0)
    eps = 1e-9

    for knot in interpolator.knots[1:-1]:
        assert interpolator(knot - eps) == pytest.approx(interpolator(knot + eps), abs=1e-6)
        assert interpolator.derivative(knot - eps) == pytest.approx(
            interpolator.derivative(knot + eps), abs=1e-3
        )


def test_natural_boundary(session):
    interpolator = SplineSolver(session).solve(KNOTS, 1.0)
    lower, upper = interpolator.domain

    assert interpolator.c[0] == 0.0
    assert interpolator.c[-1] == 0.0
    assert interpolator.second_derivative(lower) == pytest.approx(0.0, abs=1e-12)
    assert interpolator.second_derivative(upper) == pytest.approx(0.0, abs=1e-12)


def test_matches_scipy_natural_spline(small_block_session, rng):
    y = rng.uniform(-5.0, 5.0, size=11)
    h = 0.5
    x_knots = np.arange(y.size) * h

    interpolator = SplineSolver(small_block_session).solve(y, h)
    reference = CubicSpline(x_knots, y, bc_type="natural")

    xs = np.linspace(0.0, x_knots[-1], 41)
    assert np.allclose(interpolator(xs), reference(xs), atol=1e-4)
    assert np.allclose(interpolator.c, reference(x_knots, 2), atol=1e-3)


def test_two_knots_give_a_straight_line(session):
    interpolator = SplineSolver(session).solve([1.0, 3.0], 2.0)

    assert interpolator(1.0) == pytest.approx(2.0)
    assert interpolator(2.0) == pytest.approx(3.0)
    assert np.all(interpolator.c == 0.0)


def test_iteration_cap_is_reported(session, rng):
    y = rng.uniform(-5.0, 5.0, size=11)
    settings = SolverSettings(max_iterations=1, tolerance=1e-10)
    interpolator = SplineSolver(session, settings).solve(y, 1.0)

    report = interpolator.report
    assert report.status is IterationStatus.REACHED_CAP
    assert report.iterations == 1
    assert report.residual > settings.tolerance
    # Düğüm değerleri yakınsamadan bağımsız olarak korunur
    for i, value in enumerate(y):
        assert interpolator(float(i)) == pytest.approx(value, abs=1e-12)


def test_out_of_range_evaluation(session):
    interpolator = SplineSolver(session).solve(KNOTS, 1.0)

    with pytest.raises(InterpolationRangeError):
        interpolator(-0.1)
    with pytest.raises(ValueError):
        interpolator(4.5)


def test_buffers_released_after_spline(session):
    SplineSolver(session).solve(KNOTS, 1.0)
    assert session.live_buffers == 0


@pytest.mark.parametrize(
    "y, h",
    [
        ([1.0], 1.0),
        (KNOTS, 0.0),
        (KNOTS, -1.0),
        ([0.0, np.nan, 1.0], 1.0),
        ([[0.0, 1.0], [0.0, 2.0]], 1.0),
    ],
)
def test_invalid_input_is_rejected(session, y, h):
    with pytest.raises(ValueError):
        SplineSolver(session).solve(y, h)


def test_module_level_solve_spline():
    interpolator = solve_spline(KNOTS, 1.0)
    assert interpolator(2.0) == pytest.approx(0.0, abs=1e-12)
