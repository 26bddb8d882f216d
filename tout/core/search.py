"""
Sample-size search for TOut designs.

The sweep evaluates every sample size from 1 up to the ceiling in
ascending order and stops at the first one whose optimised design meets
the alpha, beta and gamma constraints. Attained gamma is not monotone in
``n``, so no candidate size is ever skipped.
"""

import enum
import warnings
from typing import Callable, List, NamedTuple, Optional

from ..progress import SearchCancelled
from .results import CandidateDesign

EXHAUSTED_MESSAGE = "No valid design found. Consider increasing the maximum sample size (max_n)."


class SearchExhaustedWarning(UserWarning):
    """Issued when no sample size up to ``max_n`` gives a feasible design."""


class SweepState(enum.Enum):
    FOUND = "found"
    EXHAUSTED = "exhausted"


class SweepOutcome(NamedTuple):
    state: SweepState
    candidate: Optional[CandidateDesign]
    trace: List[CandidateDesign]


def _evaluate(optimizer: Callable, design, n: int) -> CandidateDesign:
    """Run the per-size optimizer for one sample size of *design*."""
    return optimizer(
        n,
        design.rho_0,
        design.rho_1,
        design.alpha_nom,
        design.beta_nom,
        tau=design.tau,
        eta_0=design.eta_0,
        eta_1=design.eta_1,
        x=design.x,
        sigma=design.sigma,
    )


class SearchController:
    """Drives the per-size optimizer over candidate sample sizes.

    Errors raised by the optimizer propagate unchanged; only "no feasible
    size up to the ceiling" is reported as a normal outcome.

    Args:
        optimizer: Callable with the ``opt_pc`` signature returning a
            ``CandidateDesign``.
        n_jobs: Number of sample sizes evaluated concurrently. ``1`` runs
            the sweep sequentially.
        progress: Optional ``SweepProgress`` told about every evaluated size.
        cancel_check: Optional callable returning ``True`` to abort.
    """

    def __init__(self, optimizer: Callable, n_jobs: int = 1, progress=None, cancel_check=None):
        self.optimizer = optimizer
        self.n_jobs = n_jobs
        self.progress = progress
        self.cancel_check = cancel_check

    def evaluate(self, design, n: int) -> CandidateDesign:
        """Single evaluation at a caller-supplied sample size."""
        self._check_cancelled()
        candidate = _evaluate(self.optimizer, design, n)
        self._visit(n)
        return candidate

    def sweep(self, design, max_n: int) -> SweepOutcome:
        """Find the smallest ``n`` in ``[1, max_n]`` with a feasible design."""
        if self.n_jobs > 1:
            try:
                from joblib import Parallel, delayed
            except ImportError:
                warnings.warn("joblib is not installed; running the sample-size sweep sequentially.", stacklevel=3)
            else:
                return self._sweep_windows(design, max_n, Parallel, delayed)
        return self._sweep_sequential(design, max_n)

    def _sweep_sequential(self, design, max_n: int) -> SweepOutcome:
        trace: List[CandidateDesign] = []
        for n in range(1, max_n + 1):
            candidate = self.evaluate(design, n)
            trace.append(candidate)
            if candidate.meets(design.gamma_nom):
                return SweepOutcome(SweepState.FOUND, candidate, trace)
        return SweepOutcome(SweepState.EXHAUSTED, None, trace)

    def _sweep_windows(self, design, max_n: int, Parallel, delayed) -> SweepOutcome:
        """Evaluate ``n_jobs`` consecutive sizes at a time, scanning each window in order."""
        trace: List[CandidateDesign] = []
        with Parallel(n_jobs=self.n_jobs, backend="loky", verbose=0) as parallel:
            for start in range(1, max_n + 1, self.n_jobs):
                self._check_cancelled()
                sizes = range(start, min(start + self.n_jobs, max_n + 1))
                window = parallel(delayed(_evaluate)(self.optimizer, design, n) for n in sizes)
                for candidate in window:
                    trace.append(candidate)
                    self._visit(candidate.n)
                    if candidate.meets(design.gamma_nom):
                        return SweepOutcome(SweepState.FOUND, candidate, trace)
        return SweepOutcome(SweepState.EXHAUSTED, None, trace)

    def _check_cancelled(self):
        if self.cancel_check is not None and self.cancel_check():
            raise SearchCancelled("Sample-size search cancelled by user")

    def _visit(self, n: int):
        if self.progress is not None:
            self.progress.visit(n)
