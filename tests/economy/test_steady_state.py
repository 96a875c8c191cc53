"""
tests/economy/test_steady_state.py

Tests for the deterministic steady-state solve that bounds the capital grid.
"""

import types

import pytest
import numpy as np

from structural_ddp_models.economy import steady_state
from structural_ddp_models.economy.parameters import EconomicParams, ShockParams
from structural_ddp_models.exceptions import SteadyStateConvergenceFailure


@pytest.fixture
def params():
    return EconomicParams()


class TestResiduals:
    """Tests for steady_state_residuals."""

    def test_zero_at_analytic_solution(self, params):
        ss = steady_state.analytic_steady_state(0.2, params)
        residuals = steady_state.steady_state_residuals(0.2, params)

        np.testing.assert_allclose(
            residuals(np.array([ss.marginal_value, ss.log_capital])), 0.0, atol=1e-12
        )

    def test_first_equation_pins_marginal_value(self, params):
        residuals = steady_state.steady_state_residuals(0.0, params)
        # F1 = -1 - gamma + V_K, independent of log K
        assert residuals(np.array([4.0, 0.0]))[0] == pytest.approx(1.0)
        assert residuals(np.array([4.0, 5.0]))[0] == pytest.approx(1.0)


class TestSolveSteadyState:
    """Tests for solve_steady_state."""

    @pytest.mark.parametrize("z", [-0.75, 0.0, 0.0703125, 1.125])
    def test_matches_closed_form(self, params, z):
        numeric = steady_state.solve_steady_state(z, params)
        analytic = steady_state.analytic_steady_state(z, params)

        assert numeric.marginal_value == pytest.approx(1 + params.gamma, abs=1e-8)
        assert numeric.log_capital == pytest.approx(analytic.log_capital, abs=1e-8)

    def test_capital_increasing_in_productivity(self, params):
        low = steady_state.solve_steady_state(-0.5, params)
        high = steady_state.solve_steady_state(0.5, params)
        assert high.capital > low.capital > 0

    def test_deterministic(self, params):
        """Fixed seed guess: repeated solves are bit-identical."""
        first = steady_state.solve_steady_state(0.3, params)
        second = steady_state.solve_steady_state(0.3, params)
        assert first == second

    def test_root_failure_raises(self, params, monkeypatch):
        def failing_root(fun, x0, method=None, tol=None):
            return types.SimpleNamespace(success=False, message="iteration limit reached", x=x0)

        monkeypatch.setattr(steady_state.optimize, "root", failing_root)

        with pytest.raises(SteadyStateConvergenceFailure, match="iteration limit reached") as exc_info:
            steady_state.solve_steady_state(0.1, params)
        assert exc_info.value.z == 0.1

    def test_non_finite_solution_raises(self, params, monkeypatch):
        def nan_root(fun, x0, method=None, tol=None):
            return types.SimpleNamespace(success=True, message="", x=np.array([np.nan, np.nan]))

        monkeypatch.setattr(steady_state.optimize, "root", nan_root)

        with pytest.raises(SteadyStateConvergenceFailure, match="non-finite"):
            steady_state.solve_steady_state(0.0, params)

    def test_large_residual_raises(self, params, monkeypatch):
        def wrong_root(fun, x0, method=None, tol=None):
            return types.SimpleNamespace(success=True, message="", x=np.array([1.1, 1.0]))

        monkeypatch.setattr(steady_state.optimize, "root", wrong_root)

        with pytest.raises(SteadyStateConvergenceFailure, match="residual"):
            steady_state.solve_steady_state(0.0, params)

    def test_nan_residual_raises(self, params, monkeypatch):
        def finite_root(fun, x0, method=None, tol=None):
            return types.SimpleNamespace(success=True, message="", x=np.array([3.0, 1.0]))

        monkeypatch.setattr(steady_state, "steady_state_residuals",
                            lambda z, p: (lambda x: np.array([np.nan, 0.0])))
        monkeypatch.setattr(steady_state.optimize, "root", finite_root)

        with pytest.raises(SteadyStateConvergenceFailure, match="residual nan"):
            steady_state.solve_steady_state(0.0, params)


class TestCapitalBounds:
    """Tests for compute_capital_bounds."""

    def test_bounds_from_reference_levels(self, params):
        stda = ShockParams().stationary_std
        bounds = steady_state.compute_capital_bounds(params, stda)

        expected_min = steady_state.analytic_steady_state(-2 * stda, params).log_capital
        expected_max = steady_state.analytic_steady_state(3 * stda, params).log_capital
        expected_k_ss = steady_state.analytic_steady_state(stda ** 2 / 2, params).capital

        assert bounds.log_k_min == pytest.approx(expected_min, abs=1e-8)
        assert bounds.log_k_max == pytest.approx(expected_max, abs=1e-8)
        assert bounds.k_ss == pytest.approx(expected_k_ss, rel=1e-8)

    def test_k_ss_inside_bounds(self, params):
        bounds = steady_state.compute_capital_bounds(params, 0.375)
        assert np.exp(bounds.log_k_min) < bounds.k_ss < np.exp(bounds.log_k_max)

    def test_failure_propagates(self, params, monkeypatch):
        def failing_root(fun, x0, method=None, tol=None):
            return types.SimpleNamespace(success=False, message="no progress", x=x0)

        monkeypatch.setattr(steady_state.optimize, "root", failing_root)

        with pytest.raises(SteadyStateConvergenceFailure):
            steady_state.compute_capital_bounds(params, 0.375)
