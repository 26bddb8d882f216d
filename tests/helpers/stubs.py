"""Deterministic stand-ins for the per-size optimizer."""

from tout.core.results import CandidateDesign


def make_candidate(n, valid=True, gamma=0.0, alpha=0.01, beta=0.1, thresholds=(1.0, 2.0)):
    """Build a ``CandidateDesign`` with sensible defaults."""
    return CandidateDesign(n=n, valid=valid, thresholds=thresholds, alpha=alpha, beta=beta, gamma=gamma)


class StubOptimizer:
    """Per-size optimizer driven by a table of outcomes.

    ``outcomes`` maps ``n`` to ``(valid, gamma)``; sizes not in the table
    get *default*. Every call is recorded in ``calls``.
    """

    def __init__(self, outcomes=None, default=(False, 1.0)):
        self.outcomes = dict(outcomes or {})
        self.default = default
        self.calls = []

    def __call__(self, n, rho_0, rho_1, alpha_nom, beta_nom, tau=(0, 0), eta_0=0.5, eta_1=None, x=None, sigma=None):
        self.calls.append(
            {
                "n": n,
                "rho_0": rho_0,
                "rho_1": rho_1,
                "alpha_nom": alpha_nom,
                "beta_nom": beta_nom,
                "tau": tau,
                "eta_0": eta_0,
                "eta_1": eta_1,
                "x": x,
                "sigma": sigma,
            }
        )
        valid, gamma = self.outcomes.get(n, self.default)
        return make_candidate(n, valid=valid, gamma=gamma)

    @property
    def sizes(self):
        return [call["n"] for call in self.calls]
