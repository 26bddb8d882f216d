"""Core components for the TOut framework.

Re-exports the building blocks of a design search:

- ``default_max_n``, ``two_outcome_sample_size``: search ceiling.
- ``SearchController``, ``SweepOutcome``, ``SweepState``,
  ``SearchExhaustedWarning``: the sample-size sweep.
- ``CandidateDesign``, ``DesignResult``, ``build_design_result``,
  ``build_failure_result``: result types and builders.
"""

from .bounds import default_max_n, two_outcome_sample_size
from .results import CandidateDesign, DesignResult, build_design_result, build_failure_result
from .search import EXHAUSTED_MESSAGE, SearchController, SearchExhaustedWarning, SweepOutcome, SweepState

__all__ = [
    # Bounds
    "default_max_n",
    "two_outcome_sample_size",
    # Search
    "SearchController",
    "SearchExhaustedWarning",
    "SweepOutcome",
    "SweepState",
    "EXHAUSTED_MESSAGE",
    # Results
    "CandidateDesign",
    "DesignResult",
    "build_design_result",
    "build_failure_result",
]
