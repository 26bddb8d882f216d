"""
Visualization utilities for TOut design searches.

This module plots the operating characteristics attained along a
sample-size sweep.
"""

__all__ = ["plot_sweep"]


def plot_sweep(result, title: str = "Operating characteristics by sample size", show: bool = True):
    """Plot attained alpha, beta and gamma against ``n`` for a design result.

    Draws one line per characteristic from ``result.trace``, a dashed
    line at each nominal bound, and marks the chosen sample size when the
    search succeeded.

    Args:
        result: ``DesignResult`` returned by ``tout_design``.
        title: Plot title.
        show: Call ``plt.show()`` when done.

    Returns:
        The matplotlib ``(fig, ax)`` pair.

    Raises:
        ValueError: If the result carries no evaluated candidates.
        ImportError: If ``matplotlib`` is not installed.
    """
    if not result.trace:
        raise ValueError("Result has no evaluated sample sizes to plot")

    try:
        import matplotlib.pyplot as plt
    except ImportError:
        raise ImportError("matplotlib required for plotting: pip install matplotlib") from None

    sizes = [c.n for c in result.trace]
    series = [
        ("alpha", [c.alpha for c in result.trace], result.alpha_nom, "tab:red"),
        ("beta", [c.beta for c in result.trace], result.beta_nom, "tab:blue"),
        ("gamma", [c.gamma for c in result.trace], result.gamma_nom, "tab:green"),
    ]

    fig, ax = plt.subplots(figsize=(12, 8))
    for name, values, nominal, color in series:
        ax.plot(sizes, values, "o-", color=color, label=name, linewidth=2, markersize=3)
        if nominal < 1:
            ax.axhline(y=nominal, color=color, linestyle="--", linewidth=1, label=f"{name} nominal ({nominal})")

    if result.valid and result.n is not None:
        ax.axvline(x=result.n, color="black", linestyle=":", linewidth=1.5)
        ax.annotate(
            f"n={result.n}",
            xy=(result.n, 1.0),
            xytext=(10, -20),
            textcoords="offset points",
            bbox={"boxstyle": "round,pad=0.3", "facecolor": "lightgrey", "alpha": 0.5},
        )

    ax.set_title(title, fontsize=14, fontweight="bold")
    ax.set_xlabel("Sample Size", fontsize=12)
    ax.set_ylabel("Probability", fontsize=12)
    ax.grid(True, alpha=0.3)
    ax.legend(bbox_to_anchor=(1.05, 1), loc="upper left")
    ax.set_ylim(0, 1.05)

    plt.tight_layout()
    if show:
        plt.show()
    return fig, ax
