"""Distribution functions for three-outcome designs.

Normal quantiles for the sample-size bound, and upper-tail probabilities
of the pilot statistic for binary (binomial count) and continuous
(normal sample mean) outcomes.

Usage:
    from tout.stats.distributions import norm_ppf, upper_tail_binary
"""

import numpy as np
from scipy.stats import binom as _binom_dist
from scipy.stats import norm as _norm_dist


def norm_ppf(p):
    """Standard normal quantile function (inverse CDF)."""
    return float(_norm_dist.ppf(p))


def upper_tail_binary(thresholds, n: int, rate: float) -> np.ndarray:
    """Return ``P(T >= k)`` for ``T ~ Binomial(n, rate)`` at each threshold ``k``.

    Thresholds need not be integers; ``T >= k`` is evaluated as
    ``T >= ceil(k)``.
    """
    k = np.ceil(np.asarray(thresholds, dtype=np.float64))
    rate = min(max(rate, 0.0), 1.0)
    return np.asarray(_binom_dist.sf(k - 1, n, rate), dtype=np.float64)


def upper_tail_continuous(thresholds, n: int, rate: float, sigma: float) -> np.ndarray:
    """Return ``P(M >= x)`` for the sample mean ``M ~ N(rate, sigma^2 / n)``."""
    se = sigma / np.sqrt(n)
    x = np.asarray(thresholds, dtype=np.float64)
    return np.asarray(_norm_dist.sf((x - rate) / se), dtype=np.float64)


def norm_isf_array(q) -> np.ndarray:
    """Vectorised standard normal inverse survival function."""
    return np.asarray(_norm_dist.isf(q), dtype=np.float64)
