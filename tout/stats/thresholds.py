"""Per-size optimisation of progression criteria.

For a fixed sample size ``opt_pc`` chooses the pair of decision thresholds
that satisfies the alpha and beta constraints with the smallest pause
probability ``gamma``.

For every candidate lower threshold ``x_0`` only one upper threshold is
worth considering: the smallest ``x_1 >= x_0`` that keeps alpha within
its bound. Lowering ``x_1`` shrinks the pause region under both
hypotheses and moves mass from pause to go, so it can only reduce gamma
and beta while increasing alpha. Binary outcomes scan every integer
``x_0`` in ``0..n+1``; continuous outcomes scan a grid of ``x_0`` values
and solve for ``x_1`` in closed form.
"""

from typing import Optional, Sequence

import numpy as np

from ..core.results import CandidateDesign
from .distributions import norm_isf_array
from .ocs import get_ocs, ocs_from_tails, orient

__all__ = ["opt_pc", "GRID_POINTS", "GRID_SPAN"]

GRID_POINTS = 2001
"""Number of lower-threshold values scanned for continuous outcomes."""

GRID_SPAN = 5.0
"""Grid extends this many standard errors beyond both pilot rates."""

# Keeps a solved x_1 strictly on the admissible side of the alpha bound
_ALPHA_MARGIN = 1e-10


def opt_pc(
    n: int,
    rho_0: float,
    rho_1: float,
    alpha_nom: float,
    beta_nom: float,
    tau: Sequence[float] = (0, 0),
    eta_0: float = 0.5,
    eta_1: Optional[float] = None,
    x: Optional[Sequence[float]] = None,
    sigma: Optional[float] = None,
) -> CandidateDesign:
    """Find optimal progression criteria for sample size ``n``.

    Args:
        n: Sample size.
        rho_0: Null hypothesis rate.
        rho_1: Alternative hypothesis rate.
        alpha_nom: Nominal upper constraint on alpha.
        beta_nom: Nominal upper constraint on beta.
        tau: Lower and upper limits of the adjustment effect.
        eta_0: Probability of a wrong decision after a pause, null true.
        eta_1: Same under the alternative. Defaults to ``eta_0``.
        x: Optional fixed thresholds. When given they are only evaluated.
        sigma: Outcome standard deviation; ``None`` for a binary outcome.

    Returns:
        CandidateDesign. ``valid`` is ``False`` when no thresholds meet the
        alpha and beta constraints; the reported thresholds are then the
        pair closest to feasibility. Attained characteristics are always
        filled in.
    """
    if eta_1 is None:
        eta_1 = eta_0

    if x is not None:
        ocs = get_ocs(n, x, rho_0, rho_1, tau=tau, eta_0=eta_0, eta_1=eta_1, sigma=sigma)
        return CandidateDesign(
            n=n,
            valid=ocs.alpha <= alpha_nom and ocs.beta <= beta_nom,
            thresholds=(float(x[0]), float(x[1])),
            alpha=ocs.alpha,
            beta=ocs.beta,
            gamma=ocs.gamma,
        )

    problem = orient(n, rho_0, rho_1, tau, sigma)
    if sigma is None:
        x0, x1 = _binary_candidates(problem, alpha_nom, eta_0)
    else:
        x0, x1 = _continuous_candidates(problem, alpha_nom, eta_0)

    null_lo = problem.upper_tail(x0, problem.rate_null)
    null_hi = problem.upper_tail(x1, problem.rate_null)
    alt_lo = problem.upper_tail(x0, problem.rate_alt)
    alt_hi = problem.upper_tail(x1, problem.rate_alt)
    alpha, beta, gamma = ocs_from_tails(null_lo, null_hi, alt_lo, alt_hi, eta_0, eta_1)

    best, valid = _select(x0, x1, alpha, beta, gamma, alpha_nom, beta_nom)
    return CandidateDesign(
        n=n,
        valid=valid,
        thresholds=problem.original_thresholds(x0[best], x1[best]),
        alpha=float(alpha[best]),
        beta=float(beta[best]),
        gamma=float(gamma[best]),
    )


def _binary_candidates(problem, alpha_nom: float, eta_0: float):
    """Each integer ``x_0`` paired with its smallest alpha-admissible ``x_1``.

    Where no ``x_1`` is admissible the pair collapses to ``x_1 = x_0``.
    """
    n = problem.n
    x0 = np.arange(n + 2, dtype=np.float64)
    tail = problem.upper_tail(x0, problem.rate_null)

    if eta_0 >= 1:
        return x0, x0.copy()

    # Upper tail is non-increasing, so the first index meeting the bound is the smallest x_1
    limit = (alpha_nom - eta_0 * tail) / (1 - eta_0) * (1 - _ALPHA_MARGIN)
    first = np.searchsorted(-tail, -limit, side="left")
    idx = np.maximum(first, np.arange(n + 2))
    idx = np.where(idx > n + 1, np.arange(n + 2), idx)
    return x0, x0[idx]


def _continuous_candidates(problem, alpha_nom: float, eta_0: float):
    """A grid of ``x_0`` values, each with its smallest alpha-admissible ``x_1``."""
    se = problem.sigma / np.sqrt(problem.n)
    lo = min(problem.rate_null, problem.rate_alt) - GRID_SPAN * se
    hi = max(problem.rate_null, problem.rate_alt) + GRID_SPAN * se
    x0 = np.linspace(lo, hi, GRID_POINTS)

    if eta_0 >= 1:
        return x0, x0.copy()

    tail = problem.upper_tail(x0, problem.rate_null)
    limit = (alpha_nom - eta_0 * tail) / (1 - eta_0) * (1 - _ALPHA_MARGIN)
    solvable = (limit > 0) & (limit < 1)
    solved = np.full_like(x0, -np.inf)
    solved[solvable] = problem.rate_null + se * norm_isf_array(limit[solvable])
    x1 = np.where(limit > 0, np.maximum(x0, solved), x0)
    return x0, x1


def _select(x0, x1, alpha, beta, gamma, alpha_nom: float, beta_nom: float):
    """Pick the best pair index and report whether it is feasible.

    Feasible pairs are ranked by gamma, then ``alpha + beta``, then
    position. Without a feasible pair the one with the smallest worst
    excess over the nominal bounds is returned.
    """
    feasible = (alpha <= alpha_nom) & (beta <= beta_nom)
    if feasible.any():
        idx = np.flatnonzero(feasible)
        order = np.lexsort((x1[idx], x0[idx], (alpha + beta)[idx], gamma[idx]))
        return int(idx[order[0]]), True

    excess = np.maximum(alpha - alpha_nom, beta - beta_nom)
    order = np.lexsort((x1, x0, gamma, excess))
    return int(order[0]), False
