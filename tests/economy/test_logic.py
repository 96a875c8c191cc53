"""
tests/economy/test_logic.py

Unit tests for the reward and law-of-motion equations.
"""

import pytest
import numpy as np
from dataclasses import replace

from structural_ddp_models.economy.parameters import EconomicParams, ShockParams
from structural_ddp_models.economy import logic


# --- Fixtures ---

@pytest.fixture
def params():
    """Default test parameters."""
    return EconomicParams()


@pytest.fixture
def params_distinct_prices():
    """Purchase and sale prices set apart so the regime is visible."""
    return EconomicParams(price_buy=1.0, price_sell=2.0, cost_fixed=0.0, cost_sales=0.0, gamma=0.0)


# === SECTION 1: Primitives ===

class TestPrimitives:

    def test_revenue(self, params):
        assert logic.revenue(2.0, 0.5, params) == pytest.approx(2.0 ** 0.67 * np.exp(0.5))

    def test_adjustment_indicator(self):
        i = np.array([-0.5, 0.0, 1e-12, 1.0])
        np.testing.assert_array_equal(logic.adjustment_indicator(i), [1.0, 0.0, 1.0, 1.0])

    def test_capital_price_regimes(self, params_distinct_prices):
        i = np.array([-0.1, 0.0, 0.1])
        np.testing.assert_array_equal(
            logic.capital_price(i, params_distinct_prices), [2.0, 1.0, 1.0]
        )

    def test_convex_cost(self, params):
        assert logic.convex_adjustment_cost(4.0, 0.5, params) == pytest.approx(2.0 / 2 * 0.25 * 4.0)


# === SECTION 2: Reward ===

class TestRewardFlow:

    def test_inaction_is_pure_revenue(self):
        """At i = 0 neither the fixed cost F*K nor any price term enters."""
        params = EconomicParams(cost_fixed=0.5, cost_sales=0.9, price_buy=3.0, price_sell=5.0)
        for k, a in [(0.1, -1.0), (1.0, 0.0), (25.0, 1.1)]:
            assert logic.reward_flow(k, a, 0.0, params) == logic.revenue(k, a, params)

    def test_inaction_independent_of_costs_and_prices(self, params):
        expensive = replace(params, cost_fixed=0.9, price_buy=7.0, price_sell=9.0)
        assert logic.reward_flow(3.0, 0.2, 0.0, params) == logic.reward_flow(3.0, 0.2, 0.0, expensive)

    def test_formula_with_adjustment(self, params):
        k, a, i = 2.0, 0.3, 0.4
        expected = (
            k ** params.theta * np.exp(a) * (1 - params.cost_sales)
            - i * k * params.price_buy
            - params.cost_fixed * k
            - params.gamma / 2 * i ** 2 * k
        )
        assert logic.reward_flow(k, a, i, params) == pytest.approx(expected, rel=1e-12)

    def test_purchase_vs_sale_price(self, params_distinct_prices):
        """
        With p_b=1, p_s=2 and no other costs the reward is revenue - i*K*p(i):
        buying at i=+eps costs eps*K, selling at i=-eps returns 2*eps*K.
        """
        k, a, eps = 4.0, 0.0, 1e-3
        base = logic.revenue(k, a, params_distinct_prices)

        r_plus = logic.reward_flow(k, a, eps, params_distinct_prices)
        r_minus = logic.reward_flow(k, a, -eps, params_distinct_prices)

        assert r_plus == pytest.approx(base - eps * k * 1.0, rel=1e-12)
        assert r_minus == pytest.approx(base + eps * k * 2.0, rel=1e-12)
        assert r_minus - base == pytest.approx(2 * (base - r_plus), rel=1e-9)

    def test_fixed_costs_create_jump_at_zero(self, params):
        k, a = 1.0, 0.0
        gap = logic.reward_flow(k, a, 0.0, params) - logic.reward_flow(k, a, 1e-9, params)
        # Losing lambda of revenue plus F*K at any nonzero i
        assert gap == pytest.approx(params.cost_sales * 1.0 + params.cost_fixed, rel=1e-6)

    def test_broadcasting(self, params):
        k = np.array([1.0, 2.0]).reshape(2, 1, 1)
        a = np.array([-0.1, 0.0, 0.1]).reshape(1, 3, 1)
        i = np.array([-0.2, 0.0, 0.2, 0.4]).reshape(1, 1, 4)

        reward = logic.reward_flow(k, a, i, params)
        assert reward.shape == (2, 3, 4)
        assert reward[1, 2, 3] == pytest.approx(logic.reward_flow(2.0, 0.1, 0.4, params))


# === SECTION 3: Law of motion ===

class TestTransition:

    def test_inaction_without_shock(self, params):
        """(1 - delta) K and rho * a exactly."""
        shock_params = ShockParams()
        k_next, a_next = logic.transition_state(3.0, 0.4, 0.0, 0.0, params, shock_params)

        assert k_next == (1 - params.delta) * 3.0
        assert a_next == shock_params.rho * 0.4

    def test_investment_rate_is_multiplicative(self, params):
        assert logic.next_capital(2.0, 0.15, params) == pytest.approx(2.0)
        assert logic.next_capital(2.0, 0.5, params) == pytest.approx(2.0 * 1.35)

    def test_shock_enters_productivity(self, params):
        shock_params = ShockParams(rho=0.5, sigma=0.2)
        _, a_next = logic.transition_state(1.0, 1.0, 0.0, -1.5, params, shock_params)
        assert a_next == pytest.approx(0.5 - 0.3)
