"""
Tests for design validation.
"""

from unittest.mock import MagicMock

import numpy as np
import pytest

from tout import tout_design
from tout.utils.validators import (
    InvalidDesignError,
    _ValidationResult,
    _validate_adjustment,
    _validate_hypotheses,
    _validate_nominal_bounds,
    _validate_search_settings,
    validate_design,
)


class TestInvalidDesignError:
    """Test InvalidDesignError exception."""

    def test_is_value_error(self):
        assert issubclass(InvalidDesignError, ValueError)

    def test_message_lists_every_error(self):
        exc = InvalidDesignError(["first problem", "second problem"])
        assert "• first problem" in str(exc)
        assert "• second problem" in str(exc)
        assert exc.errors == ["first problem", "second problem"]


class TestValidateHypotheses:
    """Test _validate_hypotheses function."""

    def test_valid_binary(self):
        assert _validate_hypotheses(0.5, 0.7, None).is_valid

    def test_equal_rates(self):
        result = _validate_hypotheses(0.5, 0.5, None)
        assert not result.is_valid
        assert "must differ" in result.errors[0]

    def test_decreasing_alternative_allowed(self):
        assert _validate_hypotheses(0.7, 0.5, None).is_valid

    def test_binary_rate_out_of_range(self):
        result = _validate_hypotheses(0.5, 1.2, None)
        assert not result.is_valid

    def test_continuous_rates_unrestricted(self):
        assert _validate_hypotheses(-3.0, 12.0, 2.0).is_valid

    def test_sigma_zero(self):
        assert not _validate_hypotheses(0.0, 0.4, 0).is_valid

    def test_sigma_negative(self):
        assert not _validate_hypotheses(0.0, 0.4, -1.0).is_valid

    def test_rate_wrong_type(self):
        result = _validate_hypotheses("0.5", 0.7, None)
        assert not result.is_valid
        assert "rho_0 must be a finite number" in result.errors[0]

    def test_numpy_scalars_accepted(self):
        assert _validate_hypotheses(np.float64(0.5), np.float64(0.7), None).is_valid


class TestValidateNominalBounds:
    """Test _validate_nominal_bounds function."""

    def test_valid(self):
        assert _validate_nominal_bounds(0.05, 0.2, 1).is_valid

    @pytest.mark.parametrize("alpha_nom", [0, 1, -0.1, 1.5])
    def test_alpha_outside_open_unit(self, alpha_nom):
        assert not _validate_nominal_bounds(alpha_nom, 0.2, 1).is_valid

    @pytest.mark.parametrize("beta_nom", [0, 1])
    def test_beta_outside_open_unit(self, beta_nom):
        assert not _validate_nominal_bounds(0.05, beta_nom, 1).is_valid

    def test_gamma_one_allowed(self):
        assert _validate_nominal_bounds(0.05, 0.2, 1).is_valid

    def test_gamma_zero_rejected(self):
        assert not _validate_nominal_bounds(0.05, 0.2, 0).is_valid

    def test_bool_rejected(self):
        assert not _validate_nominal_bounds(True, 0.2, 1).is_valid


class TestValidateAdjustment:
    """Test _validate_adjustment function."""

    def test_valid(self):
        assert _validate_adjustment((0.08, 0.12), 0.5, 0.5).is_valid

    def test_reversed_tau(self):
        result = _validate_adjustment((0.12, 0.08), 0.5, 0.5)
        assert not result.is_valid
        assert "ordered" in result.errors[0]

    def test_tau_wrong_length(self):
        assert not _validate_adjustment((0.1,), 0.5, 0.5).is_valid

    def test_tau_not_sequence(self):
        assert not _validate_adjustment(0.1, 0.5, 0.5).is_valid

    @pytest.mark.parametrize("eta", [-0.1, 1.1])
    def test_eta_out_of_range(self, eta):
        assert not _validate_adjustment((0, 0), eta, 0.5).is_valid
        assert not _validate_adjustment((0, 0), 0.5, eta).is_valid

    @pytest.mark.parametrize("eta", [0, 1])
    def test_eta_bounds_inclusive(self, eta):
        assert _validate_adjustment((0, 0), eta, eta).is_valid


class TestValidateSearchSettings:
    """Test _validate_search_settings function."""

    def test_all_none(self):
        assert _validate_search_settings(None, None, None).is_valid

    @pytest.mark.parametrize("n", [0, -5, 10.5, "10"])
    def test_bad_n(self, n):
        assert not _validate_search_settings(n, None, None).is_valid

    @pytest.mark.parametrize("max_n", [0, 2.0])
    def test_bad_max_n(self, max_n):
        assert not _validate_search_settings(None, None, max_n).is_valid

    def test_reversed_thresholds(self):
        assert not _validate_search_settings(20, (12, 8), None).is_valid

    def test_bad_n_jobs(self):
        assert not _validate_search_settings(None, None, None, n_jobs=0).is_valid


class TestValidateDesign:
    """Test the combined validate_design entry point."""

    def test_valid_reference(self):
        assert validate_design(0.5, 0.7, 0.05, 0.2).is_valid

    def test_collects_all_errors(self):
        result = validate_design(0.5, 0.5, 0.05, 0.2, tau=(0.12, 0.08))
        assert not result.is_valid
        assert len(result.errors) == 2

    def test_merge_keeps_errors_in_order(self):
        merged = _ValidationResult(True, []).merge(_ValidationResult(False, ["a"])).merge(_ValidationResult(False, ["b"]))
        assert not merged.is_valid
        assert merged.errors == ["a", "b"]

    def test_raise_if_invalid(self):
        with pytest.raises(InvalidDesignError, match="must differ"):
            validate_design(0.5, 0.5, 0.05, 0.2).raise_if_invalid()

    def test_eta_1_none_uses_eta_0(self):
        assert validate_design(0.5, 0.7, 0.05, 0.2, eta_0=0.3, eta_1=None).is_valid
        assert not validate_design(0.5, 0.7, 0.05, 0.2, eta_0=1.3, eta_1=None).is_valid


class TestNonFiniteValues:
    """NaN and infinities are rejected by every numeric check."""

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), -np.inf, np.float64("nan")])
    def test_rates(self, value):
        assert not _validate_hypotheses(value, 0.7, None).is_valid
        assert not _validate_hypotheses(0.5, value, None).is_valid
        assert not _validate_hypotheses(value, 0.4, 1.0).is_valid

    @pytest.mark.parametrize("sigma", [float("nan"), float("inf")])
    def test_sigma(self, sigma):
        result = _validate_hypotheses(0.0, 0.4, sigma)
        assert not result.is_valid
        assert "sigma" in result.errors[0]

    @pytest.mark.parametrize("value", [float("nan"), float("inf")])
    def test_nominal_bounds(self, value):
        assert not _validate_nominal_bounds(value, 0.2, 1).is_valid
        assert not _validate_nominal_bounds(0.05, value, 1).is_valid
        assert not _validate_nominal_bounds(0.05, 0.2, value).is_valid

    @pytest.mark.parametrize("tau", [(float("nan"), 0.1), (0.0, float("inf")), (-np.inf, 0.1)])
    def test_tau(self, tau):
        result = _validate_adjustment(tau, 0.5, 0.5)
        assert not result.is_valid
        assert "tau" in result.errors[0]

    def test_eta(self):
        assert not _validate_adjustment((0, 0), float("nan"), 0.5).is_valid

    def test_thresholds(self):
        assert not _validate_search_settings(20, (float("nan"), 12), None).is_valid

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"alpha_nom": float("nan")},
            {"rho_0": float("nan")},
            {"rho_0": 0.0, "rho_1": 0.4, "sigma": float("inf")},
            {"tau": (float("nan"), 0.1)},
        ],
    )
    def test_tout_design_raises_before_search(self, kwargs):
        params = dict(rho_0=0.5, rho_1=0.7, alpha_nom=0.05, beta_nom=0.2)
        params.update(kwargs)
        opt = MagicMock()
        with pytest.raises(InvalidDesignError):
            tout_design(optimizer=opt, **params)
        opt.assert_not_called()
