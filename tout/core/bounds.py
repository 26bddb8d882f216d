"""
Default search ceiling for the sample-size sweep.

The ceiling is a heuristic: a generous multiple of the sample size that a
standard two-outcome (go/stop) design would need under a normal
approximation. It is not a guarantee that a feasible three-outcome design
exists below it.
"""

import math
from typing import Optional

from ..stats.distributions import norm_ppf

BINARY_VARIANCE = 0.25
"""Bernoulli variance at rate 0.5, the worst case for a binary outcome."""

MAX_N_MULTIPLIER = 5
"""Multiple of the two-outcome sample size used as the search ceiling."""


def two_outcome_sample_size(
    rho_0: float,
    rho_1: float,
    alpha_nom: float,
    beta_nom: float,
    sigma: Optional[float] = None,
) -> float:
    """Normal-approximation sample size of a two-outcome design.

    ``k * (z_(1-alpha) - z_beta)^2 / (rho_1 - rho_0)^2`` with ``k = 0.25``
    for a binary outcome and ``k = sigma^2`` for a continuous one.
    """
    k = BINARY_VARIANCE if sigma is None else sigma**2
    return k * (norm_ppf(1 - alpha_nom) - norm_ppf(beta_nom)) ** 2 / (rho_1 - rho_0) ** 2


def default_max_n(
    rho_0: float,
    rho_1: float,
    alpha_nom: float,
    beta_nom: float,
    sigma: Optional[float] = None,
) -> int:
    """Search ceiling used when the caller does not supply ``max_n``.

    Returns:
        ``floor(MAX_N_MULTIPLIER * n_two)`` where ``n_two`` is the
        two-outcome sample size.
    """
    n_two = two_outcome_sample_size(rho_0, rho_1, alpha_nom, beta_nom, sigma)
    return int(math.floor(MAX_N_MULTIPLIER * n_two))
