"""
Validation utilities for three-outcome design searches.

This module provides the structural checks that run before any numerical
search, and the ``InvalidDesignError`` raised when they fail.
"""

import math
from dataclasses import dataclass
from numbers import Integral, Real
from typing import Any, List, Optional, Sequence

__all__ = ["InvalidDesignError"]


class InvalidDesignError(ValueError):
    """Raised when design parameters violate a structural constraint."""

    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        super().__init__("Validation failed:\n" + "\n".join(f"• {err}" for err in self.errors))


@dataclass
class _ValidationResult:
    """Outcome of a validation check.

    Attributes:
        is_valid: ``True`` if no errors were found.
        errors: List of error messages (empty when valid).
    """

    is_valid: bool
    errors: List[str]

    def raise_if_invalid(self):
        """Raise ``InvalidDesignError`` if the validation failed."""
        if not self.is_valid:
            raise InvalidDesignError(self.errors)

    def merge(self, other: "_ValidationResult") -> "_ValidationResult":
        errors = self.errors + other.errors
        return _ValidationResult(len(errors) == 0, errors)


def _is_number(value: Any) -> bool:
    """Finite real number, ``bool`` excluded."""
    return isinstance(value, Real) and not isinstance(value, bool) and math.isfinite(value)


def _is_int(value: Any) -> bool:
    return isinstance(value, Integral) and not isinstance(value, bool)


def _check_open_unit(value: Any, name: str, upper_closed: bool = False) -> Optional[str]:
    """Check ``value`` lies in (0, 1), or (0, 1] when *upper_closed*."""
    upper = "1]" if upper_closed else "1)"
    if not _is_number(value):
        return f"{name} must be a finite number, got {value!r}"
    if value <= 0 or value > 1 or (value == 1 and not upper_closed):
        return f"{name} must be in (0, {upper}, got {value}"
    return None


def _check_probability(value: Any, name: str) -> Optional[str]:
    if not _is_number(value):
        return f"{name} must be a finite number, got {value!r}"
    if value < 0 or value > 1:
        return f"{name} must be in [0, 1], got {value}"
    return None


def _check_pair(value: Any, name: str) -> Optional[str]:
    """Check ``value`` is a two-element ascending numeric sequence."""
    try:
        items = list(value)
    except TypeError:
        return f"{name} must be a two-element sequence, got {type(value).__name__}"
    if len(items) != 2:
        return f"{name} must have exactly two elements, got {len(items)}"
    if not all(_is_number(v) for v in items):
        return f"{name} elements must be finite numbers, got {items}"
    if items[0] > items[1]:
        return f"{name} must be ordered (lower <= upper), got ({items[0]}, {items[1]})"
    return None


def _validate_hypotheses(rho_0: Any, rho_1: Any, sigma: Any) -> _ValidationResult:
    """Validate the null and alternative rates and the outcome scale."""
    errors = []

    for value, name in [(rho_0, "rho_0"), (rho_1, "rho_1")]:
        if not _is_number(value):
            errors.append(f"{name} must be a finite number, got {value!r}")

    if sigma is not None:
        if not _is_number(sigma):
            errors.append(f"sigma must be a finite number or None, got {sigma!r}")
        elif sigma <= 0:
            errors.append(f"sigma must be positive, got {sigma}")

    if errors:
        return _ValidationResult(False, errors)

    if rho_0 == rho_1:
        errors.append(f"rho_0 and rho_1 must differ, both are {rho_0}")

    # Binary outcomes are proportions
    if sigma is None:
        for value, name in [(rho_0, "rho_0"), (rho_1, "rho_1")]:
            if value < 0 or value > 1:
                errors.append(f"{name} must be in [0, 1] for a binary outcome, got {value}")

    return _ValidationResult(len(errors) == 0, errors)


def _validate_nominal_bounds(alpha_nom: Any, beta_nom: Any, gamma_nom: Any) -> _ValidationResult:
    """Validate the nominal upper constraints on alpha, beta and gamma."""
    errors = []
    for error in (
        _check_open_unit(alpha_nom, "alpha_nom"),
        _check_open_unit(beta_nom, "beta_nom"),
        _check_open_unit(gamma_nom, "gamma_nom", upper_closed=True),
    ):
        if error:
            errors.append(error)
    return _ValidationResult(len(errors) == 0, errors)


def _validate_adjustment(tau: Any, eta_0: Any, eta_1: Any) -> _ValidationResult:
    """Validate the adjustment-effect interval and post-pause error rates."""
    errors = []
    for error in (
        _check_pair(tau, "tau"),
        _check_probability(eta_0, "eta_0"),
        _check_probability(eta_1, "eta_1"),
    ):
        if error:
            errors.append(error)
    return _ValidationResult(len(errors) == 0, errors)


def _validate_search_settings(n: Any, x: Any, max_n: Any, n_jobs: Any = 1) -> _ValidationResult:
    """Validate the optional fixed sample size, thresholds and search ceiling."""
    errors = []

    for value, name in [(n, "n"), (max_n, "max_n")]:
        if value is not None and (not _is_int(value) or value < 1):
            errors.append(f"{name} must be a positive integer, got {value!r}")

    if x is not None:
        error = _check_pair(x, "x")
        if error:
            errors.append(error)

    if not _is_int(n_jobs) or n_jobs < 1:
        errors.append(f"n_jobs must be a positive integer, got {n_jobs!r}")

    return _ValidationResult(len(errors) == 0, errors)


def validate_design(
    rho_0: Any,
    rho_1: Any,
    alpha_nom: Any,
    beta_nom: Any,
    gamma_nom: Any = 1,
    eta_0: Any = 0.5,
    eta_1: Any = None,
    tau: Sequence = (0, 0),
    sigma: Any = None,
    n: Any = None,
    x: Any = None,
    max_n: Any = None,
    n_jobs: Any = 1,
) -> _ValidationResult:
    """Run every structural check and collect the errors.

    ``eta_1`` may be ``None``; it is checked after it has been resolved to
    ``eta_0`` by the caller, so ``None`` here means "same as ``eta_0``".

    Returns:
        _ValidationResult combining all checks.
    """
    return (
        _validate_hypotheses(rho_0, rho_1, sigma)
        .merge(_validate_nominal_bounds(alpha_nom, beta_nom, gamma_nom))
        .merge(_validate_adjustment(tau, eta_0, eta_0 if eta_1 is None else eta_1))
        .merge(_validate_search_settings(n, x, max_n, n_jobs))
    )
