"""
Result types for the TOut framework.

This module defines the per-size candidate produced by the threshold
optimizer and the terminal ``DesignResult`` returned by ``tout_design``,
together with the builder functions that assemble them.
"""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class CandidateDesign:
    """Best design found by the threshold optimizer for one sample size.

    Attributes:
        n: Sample size the candidate was optimised for.
        valid: ``True`` if the thresholds meet the alpha and beta
            constraints at this ``n``. Gamma is not part of this flag.
        thresholds: The two decision thresholds ``(x_0, x_1)``.
        alpha: Attained alpha.
        beta: Attained beta.
        gamma: Attained gamma.
    """

    n: int
    valid: bool
    thresholds: Tuple[float, float]
    alpha: float
    beta: float
    gamma: float

    def meets(self, gamma_nom: float) -> bool:
        """Return ``True`` if valid and the pause probability is within ``gamma_nom``."""
        return bool(self.valid) and self.gamma <= gamma_nom


@dataclass(frozen=True)
class DesignResult:
    """Outcome of a three-outcome design search.

    ``n``, ``thresholds``, ``alpha``, ``beta`` and ``gamma`` are ``None``
    when no design was found. The resolved inputs are echoed so a result
    can be reported on its own.
    """

    valid: bool
    n: Optional[int]
    thresholds: Optional[Tuple[float, float]]
    alpha: Optional[float]
    beta: Optional[float]
    gamma: Optional[float]
    rho_0: float
    rho_1: float
    alpha_nom: float
    beta_nom: float
    gamma_nom: float
    eta_0: float
    eta_1: float
    tau: Tuple[float, float]
    sigma: Optional[float] = None
    max_n: Optional[int] = None
    message: Optional[str] = None
    trace: Tuple[CandidateDesign, ...] = field(default=(), repr=False, compare=False)

    @property
    def outcome(self) -> str:
        """``"binary"`` when no ``sigma`` was given, otherwise ``"continuous"``."""
        return "binary" if self.sigma is None else "continuous"

    def to_dict(self) -> Dict[str, Any]:
        """Return the result as a plain dictionary (without the trace)."""
        out = asdict(self)
        out.pop("trace")
        out["outcome"] = self.outcome
        return out

    def trace_frame(self):
        """Return the evaluated candidates as a ``pandas.DataFrame``, one row per ``n``."""
        import pandas as pd

        columns = ["n", "valid", "x_0", "x_1", "alpha", "beta", "gamma"]
        rows = [
            (c.n, c.valid, c.thresholds[0], c.thresholds[1], c.alpha, c.beta, c.gamma)
            for c in self.trace
        ]
        return pd.DataFrame(rows, columns=columns)

    def __str__(self):
        from ..utils.formatters import format_design

        return format_design(self)


def build_design_result(design, candidate: CandidateDesign, trace=(), max_n=None) -> DesignResult:
    """
    Build the result for a found (or fixed-``n``) design.

    Args:
        design: Resolved ``DesignInput``
        candidate: Candidate returned by the optimizer
        trace: Candidates evaluated on the way, in order
        max_n: Search ceiling that was in force

    Returns:
        DesignResult carrying the candidate's validity, size, thresholds
        and attained operating characteristics
    """
    return DesignResult(
        valid=bool(candidate.valid),
        n=int(candidate.n),
        thresholds=(float(candidate.thresholds[0]), float(candidate.thresholds[1])),
        alpha=float(candidate.alpha),
        beta=float(candidate.beta),
        gamma=float(candidate.gamma),
        max_n=max_n,
        trace=tuple(trace),
        **_echo_inputs(design),
    )


def build_failure_result(design, message: str, trace=(), max_n=None) -> DesignResult:
    """
    Build the result for an exhausted search.

    Args:
        design: Resolved ``DesignInput``
        message: Diagnostic explaining the failure
        trace: Every candidate evaluated by the sweep
        max_n: Search ceiling that was exhausted

    Returns:
        DesignResult with ``valid=False`` and all numeric fields ``None``
    """
    return DesignResult(
        valid=False,
        n=None,
        thresholds=None,
        alpha=None,
        beta=None,
        gamma=None,
        max_n=max_n,
        message=message,
        trace=tuple(trace),
        **_echo_inputs(design),
    )


def _echo_inputs(design) -> Dict[str, Any]:
    return {
        "rho_0": design.rho_0,
        "rho_1": design.rho_1,
        "alpha_nom": design.alpha_nom,
        "beta_nom": design.beta_nom,
        "gamma_nom": design.gamma_nom,
        "eta_0": design.eta_0,
        "eta_1": design.eta_1,
        "tau": tuple(design.tau),
        "sigma": design.sigma,
    }
