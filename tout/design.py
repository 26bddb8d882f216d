"""
TOut - three-outcome design search.

This module provides ``tout_design``, which finds the smallest sample size
whose optimised progression criteria meet nominal constraints on alpha,
beta and gamma.
"""

import warnings
from dataclasses import dataclass
from typing import Callable, Optional, Sequence, Tuple, Union

from .core import (
    EXHAUSTED_MESSAGE,
    SearchController,
    SearchExhaustedWarning,
    SweepState,
    build_design_result,
    build_failure_result,
    default_max_n,
)
from .core.results import DesignResult
from .progress import resolve_reporter
from .stats.thresholds import opt_pc
from .utils.formatters import format_design
from .utils.validators import validate_design


@dataclass(frozen=True)
class DesignInput:
    """Resolved, validated parameters of a single design search.

    ``eta_1`` left as ``None`` is set to ``eta_0`` on construction.
    """

    rho_0: float
    rho_1: float
    alpha_nom: float
    beta_nom: float
    gamma_nom: float = 1
    eta_0: float = 0.5
    eta_1: Optional[float] = None
    tau: Tuple[float, float] = (0, 0)
    sigma: Optional[float] = None
    n: Optional[int] = None
    x: Optional[Tuple[float, float]] = None
    max_n: Optional[int] = None

    def __post_init__(self):
        if self.eta_1 is None:
            object.__setattr__(self, "eta_1", self.eta_0)


def resolve_design_input(
    rho_0,
    rho_1,
    alpha_nom,
    beta_nom,
    gamma_nom=1,
    eta_0=0.5,
    eta_1=None,
    tau=(0, 0),
    max_n=None,
    n=None,
    x=None,
    sigma=None,
    n_jobs=1,
) -> DesignInput:
    """Validate the raw arguments and build a ``DesignInput``.

    Raises:
        InvalidDesignError: If any structural constraint is violated.
    """
    validate_design(
        rho_0,
        rho_1,
        alpha_nom,
        beta_nom,
        gamma_nom=gamma_nom,
        eta_0=eta_0,
        eta_1=eta_1,
        tau=tau,
        sigma=sigma,
        n=n,
        x=x,
        max_n=max_n,
        n_jobs=n_jobs,
    ).raise_if_invalid()

    return DesignInput(
        rho_0=rho_0,
        rho_1=rho_1,
        alpha_nom=alpha_nom,
        beta_nom=beta_nom,
        gamma_nom=gamma_nom,
        eta_0=eta_0,
        eta_1=eta_1,
        tau=(tau[0], tau[1]),
        sigma=sigma,
        n=None if n is None else int(n),
        x=None if x is None else (x[0], x[1]),
        max_n=None if max_n is None else int(max_n),
    )


def tout_design(
    rho_0: float,
    rho_1: float,
    alpha_nom: float,
    beta_nom: float,
    gamma_nom: float = 1,
    eta_0: float = 0.5,
    eta_1: Optional[float] = None,
    tau: Sequence[float] = (0, 0),
    max_n: Optional[int] = None,
    n: Optional[int] = None,
    x: Optional[Sequence[float]] = None,
    sigma: Optional[float] = None,
    optimizer: Callable = opt_pc,
    n_jobs: int = 1,
    print_results: bool = False,
    progress_callback: Union[None, bool, Callable[[int, int], None]] = None,
    cancel_check: Optional[Callable[[], bool]] = None,
) -> DesignResult:
    """
    Find optimal sample size and progression criteria.

    Given a null and alternative hypothesis, finds the lowest sample size
    such that a design with optimal progression criteria (as determined by
    *optimizer*) satisfies upper constraints on three operating
    characteristics.

    Args:
        rho_0: Null hypothesis.
        rho_1: Alternative hypothesis.
        alpha_nom: Nominal upper constraint on alpha.
        beta_nom: Nominal upper constraint on beta.
        gamma_nom: Nominal upper constraint on gamma (1 = unconstrained).
        eta_0: Probability of an incorrect decision under the null
            hypothesis after an intermediate result.
        eta_1: Same under the alternative. Defaults to ``eta_0``.
        tau: Lower and upper limits of the effect of adjustment.
        max_n: Upper limit of the sample-size search. Defaults to five
            times the normal-approximation two-outcome sample size.
        n: Fixed sample size. When given, thresholds are optimised for this
            ``n`` only and the result is returned as is; gamma is not
            checked against ``gamma_nom``.
        x: Fixed decision thresholds (optimised if left unspecified).
        sigma: Standard deviation of the outcome. A binary outcome is
            assumed when ``None``.
        optimizer: Per-size threshold optimizer (default ``opt_pc``).
        n_jobs: Sample sizes evaluated concurrently (needs ``joblib``).
        print_results: Print a summary of the design.
        progress_callback: Progress reporting control:
            - ``None`` (default): auto-use ``PrintReporter`` when
              *print_results* is ``True``.
            - ``False``: explicitly disable progress.
            - callable ``(n, max_n)``: custom callback, told about every
              evaluated sample size.
        cancel_check: Optional callable returning ``True`` to abort.

    Returns:
        DesignResult. When no sample size up to ``max_n`` works, ``valid``
        is ``False``, the numeric fields are ``None`` and a
        ``SearchExhaustedWarning`` is issued.

    Raises:
        InvalidDesignError: If the inputs violate a structural constraint.
        SearchCancelled: If *cancel_check* returns ``True``.

    Example:
        >>> result = tout_design(0.5, 0.7, 0.05, 0.2)
        >>> result.n, result.thresholds
    """
    design = resolve_design_input(
        rho_0,
        rho_1,
        alpha_nom,
        beta_nom,
        gamma_nom=gamma_nom,
        eta_0=eta_0,
        eta_1=eta_1,
        tau=tau,
        max_n=max_n,
        n=n,
        x=x,
        sigma=sigma,
        n_jobs=n_jobs,
    )

    ceiling = design.max_n
    if ceiling is None:
        ceiling = default_max_n(design.rho_0, design.rho_1, design.alpha_nom, design.beta_nom, design.sigma)

    reporter = resolve_reporter(progress_callback, ceiling if design.n is None else design.n, print_results)
    controller = SearchController(optimizer, n_jobs=n_jobs, progress=reporter, cancel_check=cancel_check)

    if reporter is not None:
        reporter.start()

    if design.n is not None:
        candidate = controller.evaluate(design, design.n)
        result = build_design_result(design, candidate, trace=[candidate], max_n=ceiling)
    else:
        outcome = controller.sweep(design, ceiling)
        if outcome.state is SweepState.FOUND:
            result = build_design_result(design, outcome.candidate, trace=outcome.trace, max_n=ceiling)
        else:
            result = build_failure_result(design, EXHAUSTED_MESSAGE, trace=outcome.trace, max_n=ceiling)

    if reporter is not None:
        reporter.finish()

    if not result.valid and result.message is not None:
        warnings.warn(result.message, SearchExhaustedWarning, stacklevel=2)

    if print_results:
        print(f"\n{'=' * 80}")
        print("THREE-OUTCOME DESIGN")
        print(f"{'=' * 80}")
        print(format_design(result))

    return result
