"""
Basic Three-Outcome Design Example
==================================

This example finds the smallest pilot sample size and the stop / pause / go
thresholds for a recruitment-rate progression criterion.
"""

import tout

# Example: pilot trial checking that enough invited patients consent
# Research question: is the consent rate 70% (go) rather than 50% (stop)?

print("=" * 60)
print("BASIC THREE-OUTCOME DESIGN EXAMPLE")
print("=" * 60)

# 1. Hypotheses and nominal constraints
rho_0 = 0.5  # consent rate that would make the main trial infeasible
rho_1 = 0.7  # consent rate we hope to see
alpha_nom = 0.05  # at most 5% chance of going ahead when rho = rho_0
beta_nom = 0.2  # at most 20% chance of stopping when rho = rho_1

# 2. Search for the design
design = tout.tout_design(rho_0, rho_1, alpha_nom, beta_nom, print_results=True)

# 3. Use the result programmatically
print("\nStop below", design.thresholds[0], "consents; go at or above", design.thresholds[1])
