"""
Text formatting of TOut design results.
"""

__all__ = []


def _fmt(value, digits: int = 3) -> str:
    if value is None:
        return "NA"
    return f"{value:.{digits}f}"


def _fmt_threshold(value, binary: bool) -> str:
    if binary and float(value).is_integer():
        return str(int(value))
    return _fmt(value)


def format_design(result) -> str:
    """Render a ``DesignResult`` as a short report.

    Shows the hypotheses and nominal constraints, then either the chosen
    sample size with its thresholds and attained operating
    characteristics, or the failure message.
    """
    binary = result.outcome == "binary"
    lines = [
        f"Outcome: {result.outcome}" + ("" if binary else f" (sigma = {result.sigma})"),
        f"Hypotheses: rho_0 = {result.rho_0}, rho_1 = {result.rho_1}",
        f"Adjustment effect: tau = [{result.tau[0]}, {result.tau[1]}]",
        f"Error after pause: eta_0 = {result.eta_0}, eta_1 = {result.eta_1}",
        "",
        f"{'':<12}{'Nominal':>10}{'Attained':>10}",
        f"{'alpha':<12}{_fmt(result.alpha_nom):>10}{_fmt(result.alpha):>10}",
        f"{'beta':<12}{_fmt(result.beta_nom):>10}{_fmt(result.beta):>10}",
        f"{'gamma':<12}{_fmt(result.gamma_nom):>10}{_fmt(result.gamma):>10}",
        "",
    ]

    if result.n is None:
        lines.append(result.message or "No valid design found.")
        if result.max_n is not None:
            lines.append(f"Sample sizes searched: 1 to {result.max_n}")
        return "\n".join(lines)

    x0, x1 = result.thresholds
    lines.append(f"Sample size: n = {result.n}")
    lines.append(f"Thresholds: x_0 = {_fmt_threshold(x0, binary)}, x_1 = {_fmt_threshold(x1, binary)}")
    if result.rho_1 < result.rho_0:
        lines.append("Decision: go if statistic <= x_0, pause up to x_1, stop above x_1")
    else:
        lines.append("Decision: stop if statistic < x_0, pause below x_1, go at or above x_1")
    lines.append(f"Nominal constraints met: {'yes' if result.valid else 'no'}")
    return "\n".join(lines)
