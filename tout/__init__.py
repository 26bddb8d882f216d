"""TOut - optimal three-outcome designs.

Finds the smallest sample size and the pair of progression criteria for a
stop / pause / go pilot trial design that meets upper constraints on the
operating characteristics alpha, beta and gamma. Binary and continuous
outcomes, adjustment effects and post-pause error rates are supported.

Example:
    >>> from tout import tout_design
    >>>
    >>> design = tout_design(rho_0=0.5, rho_1=0.7, alpha_nom=0.05, beta_nom=0.2)
    >>> design.n, design.thresholds
    >>>
    >>> tout_design(0.5, 0.7, 0.05, 0.2, tau=(0.08, 0.12))
    >>> tout_design(rho_0=0, rho_1=0.4, alpha_nom=0.05, beta_nom=0.2, sigma=1)
"""

from importlib.metadata import version as _get_version

from .core import CandidateDesign, DesignResult, SearchExhaustedWarning
from .design import DesignInput, tout_design
from .progress import PrintReporter, SearchCancelled, SweepProgress, TqdmReporter
from .stats.ocs import get_ocs
from .stats.thresholds import opt_pc
from .utils.validators import InvalidDesignError
from .utils.visualization import plot_sweep

__version__ = _get_version("TOut")

__all__ = [
    "tout_design",
    "opt_pc",
    "get_ocs",
    "plot_sweep",
    "DesignInput",
    "DesignResult",
    "CandidateDesign",
    "InvalidDesignError",
    "SearchExhaustedWarning",
    "SearchCancelled",
    "SweepProgress",
    "PrintReporter",
    "TqdmReporter",
]
