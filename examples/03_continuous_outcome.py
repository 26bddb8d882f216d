"""
Continuous Outcome Example
==========================

Designs for a normally distributed outcome, e.g. a standardised
adherence score, and a plot of the operating characteristics along the
sample-size search.
"""

from tout import plot_sweep, tout_design

print("=" * 60)
print("CONTINUOUS OUTCOME EXAMPLE")
print("=" * 60)

# Standardised mean of 0 under the null, 0.4 under the alternative
design = tout_design(rho_0=0, rho_1=0.4, alpha_nom=0.05, beta_nom=0.2, sigma=1, print_results=True)

# Table of every sample size evaluated
print(design.trace_frame().tail(10).to_string(index=False))

# Attained alpha, beta and gamma by n
plot_sweep(design)
