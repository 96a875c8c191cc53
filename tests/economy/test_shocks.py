"""
tests/economy/test_shocks.py

Tests for the innovation distribution and the AR(1) helpers.
"""

import pytest
import numpy as np

from structural_ddp_models.economy import shocks
from structural_ddp_models.economy.parameters import ShockParams
from structural_ddp_models.exceptions import InvalidParameterError


@pytest.fixture
def shock():
    return shocks.StandardNormalShock()


class TestStandardNormalShock:
    """Tests for StandardNormalShock."""

    def test_quadrature_integrates_low_moments(self, shock):
        """Gauss-Hermite weights sum to one and reproduce E[eps]=0, E[eps^2]=1."""
        nodes, weights = shock.quadrature(7)

        assert nodes.shape == (7,)
        assert weights.shape == (7,)
        assert np.isclose(weights.sum(), 1.0)
        assert np.isclose(weights @ nodes, 0.0, atol=1e-12)
        assert np.isclose(weights @ nodes ** 2, 1.0)

    def test_quadrature_nodes_symmetric(self, shock):
        nodes, _ = shock.quadrature(5)
        np.testing.assert_allclose(np.sort(nodes), -np.sort(nodes)[::-1], atol=1e-12)

    def test_quadrature_rejects_zero_nodes(self, shock):
        with pytest.raises(InvalidParameterError, match="n_nodes"):
            shock.quadrature(0)

    def test_sample_reproducible_with_seed(self, shock):
        draws_1 = shock.sample(1000, seed=7)
        draws_2 = shock.sample(1000, seed=7)

        np.testing.assert_array_equal(draws_1, draws_2)
        assert draws_1.shape == (1000,)

    def test_sample_moments(self, shock):
        draws = shock.sample(200_000, seed=0)
        assert abs(draws.mean()) < 0.01
        assert abs(draws.std() - 1.0) < 0.01

    def test_pdf_cdf(self, shock):
        assert np.isclose(shock.cdf(0.0), 0.5)
        assert np.isclose(shock.pdf(0.0), 1 / np.sqrt(2 * np.pi))

    def test_equality(self, shock):
        assert shock == shocks.StandardNormalShock()


class TestStationaryStd:
    """Tests for stationary_std and the productivity bounds."""

    def test_formula(self):
        assert np.isclose(shocks.stationary_std(0.8, 0.6), 1.0)

    @pytest.mark.parametrize("rho", [1.0, -1.0, 1.5])
    def test_unit_root_rejected(self, rho):
        with pytest.raises(InvalidParameterError, match="rho"):
            shocks.stationary_std(rho, 0.3)

    def test_ergodic_bounds_symmetric(self):
        a_min, a_max = shocks.compute_ergodic_a_bounds(ShockParams(rho=0.8, sigma=0.6), 3.0)
        assert np.isclose(a_min, -3.0)
        assert np.isclose(a_max, 3.0)


def test_next_productivity():
    shock_params = ShockParams(rho=0.6, sigma=0.3)
    assert np.isclose(shocks.next_productivity(0.5, 2.0, shock_params), 0.6 * 0.5 + 0.3 * 2.0)


def test_tauchen_chain_matches_productivity_grid():
    """Tauchen states sit on the same +/- 3 stationary std grid."""
    shock_params = ShockParams(rho=0.6, sigma=0.3)
    a_grid, prob_matrix = shocks.tauchen_chain(shock_params, a_size=5)

    stda = shock_params.stationary_std
    np.testing.assert_allclose(a_grid, np.linspace(-3 * stda, 3 * stda, 5), atol=1e-10)
    assert prob_matrix.shape == (5, 5)
    np.testing.assert_allclose(prob_matrix.sum(axis=1), 1.0, atol=1e-12)
