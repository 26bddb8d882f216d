"""Operating characteristics of three-outcome designs.

A design with thresholds ``(x_0, x_1)`` stops when the pilot statistic is
below ``x_0``, goes ahead when it is at least ``x_1`` and pauses in
between. After a pause the final decision is wrong with probability
``eta_0`` (null true) or ``eta_1`` (alternative true).

The hypotheses describe the rate after any adjustment made following the
pilot; the pilot itself runs at a rate lower by an unknown
``t in [tau[0], tau[1]]``. All characteristics are worst cases over ``t``:
alpha at ``rho_0 - tau[0]``, beta at ``rho_1 - tau[1]``.

When ``rho_1 < rho_0`` everything is computed on the reflected scale
(failures for binary outcomes, negated means for continuous ones) and
thresholds are reported back on the original scale, so that the design
goes when the statistic is at or below ``x_0`` and stops above ``x_1``.
"""

from typing import NamedTuple, Optional, Sequence, Tuple

import numpy as np

from .distributions import upper_tail_binary, upper_tail_continuous

__all__ = ["OperatingCharacteristics", "OrientedProblem", "get_ocs", "ocs_from_tails", "orient"]


class OperatingCharacteristics(NamedTuple):
    alpha: float
    beta: float
    gamma: float


class OrientedProblem(NamedTuple):
    """A design problem rewritten so that larger statistics favour ``rho_1``."""

    n: int
    rate_null: float
    rate_alt: float
    sigma: Optional[float]
    reflected: bool

    def upper_tail(self, thresholds, rate: float) -> np.ndarray:
        if self.sigma is None:
            return upper_tail_binary(thresholds, self.n, rate)
        return upper_tail_continuous(thresholds, self.n, rate, self.sigma)

    def reflect(self, x0, x1):
        """Map thresholds between the original and the oriented scale (an involution)."""
        if not self.reflected:
            return x0, x1
        if self.sigma is None:
            return self.n - x1, self.n - x0
        return -x1, -x0

    def original_thresholds(self, x0, x1) -> Tuple[float, float]:
        """Thresholds found on the oriented scale, reported on the original one."""
        x0, x1 = self.reflect(x0, x1)
        return float(x0), float(x1)


def orient(n: int, rho_0: float, rho_1: float, tau: Sequence[float], sigma: Optional[float]) -> OrientedProblem:
    """Rewrite a design problem so that larger statistics favour the alternative."""
    reflected = rho_1 < rho_0
    if reflected:
        if sigma is None:
            rho_0, rho_1 = 1 - rho_0, 1 - rho_1
        else:
            rho_0, rho_1 = -rho_0, -rho_1

    rate_null = rho_0 - tau[0]
    rate_alt = rho_1 - tau[1]
    if sigma is None:
        rate_null = min(max(rate_null, 0.0), 1.0)
        rate_alt = min(max(rate_alt, 0.0), 1.0)

    return OrientedProblem(n, rate_null, rate_alt, sigma, reflected)


def ocs_from_tails(null_lo, null_hi, alt_lo, alt_hi, eta_0: float, eta_1: float):
    """Combine upper-tail probabilities at ``x_0`` and ``x_1`` into (alpha, beta, gamma).

    ``null_lo`` is ``P(S >= x_0)`` under the null, ``null_hi`` is
    ``P(S >= x_1)``; likewise for the alternative.
    """
    alpha = (1 - eta_0) * null_hi + eta_0 * null_lo
    beta = (1 - eta_1) * (1 - alt_lo) + eta_1 * (1 - alt_hi)
    gamma = np.maximum(null_lo - null_hi, alt_lo - alt_hi)
    return alpha, beta, gamma


def get_ocs(
    n: int,
    x: Sequence[float],
    rho_0: float,
    rho_1: float,
    tau: Sequence[float] = (0, 0),
    eta_0: float = 0.5,
    eta_1: Optional[float] = None,
    sigma: Optional[float] = None,
) -> OperatingCharacteristics:
    """Attained operating characteristics of a design with fixed thresholds.

    Args:
        n: Sample size.
        x: Decision thresholds ``(x_0, x_1)`` on the original scale.
        rho_0: Null hypothesis rate.
        rho_1: Alternative hypothesis rate.
        tau: Lower and upper limits of the adjustment effect.
        eta_0: Probability of a wrong decision after a pause, null true.
        eta_1: Same under the alternative. Defaults to ``eta_0``.
        sigma: Outcome standard deviation; ``None`` for a binary outcome.

    Returns:
        OperatingCharacteristics ``(alpha, beta, gamma)``.
    """
    if eta_1 is None:
        eta_1 = eta_0
    problem = orient(n, rho_0, rho_1, tau, sigma)
    x0, x1 = problem.reflect(x[0], x[1])
    points = np.array([x0, x1], dtype=np.float64)

    null_tail = problem.upper_tail(points, problem.rate_null)
    alt_tail = problem.upper_tail(points, problem.rate_alt)
    alpha, beta, gamma = ocs_from_tails(null_tail[0], null_tail[1], alt_tail[0], alt_tail[1], eta_0, eta_1)
    return OperatingCharacteristics(float(alpha), float(beta), float(gamma))
