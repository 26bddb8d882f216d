"""
Adjustment Effects and Pause Error Rates
========================================

A pause (amber) decision lets the team modify the trial before the main
phase. This example shows how allowing for the effect of such adjustments,
and for imperfect decisions after a pause, changes the required sample size.
"""

from tout import tout_design

print("=" * 60)
print("ADJUSTMENT EFFECTS EXAMPLE")
print("=" * 60)

rho_0, rho_1, alpha_nom, beta_nom = 0.5, 0.7, 0.05, 0.2

# 1. No adjustment, 50% chance of a wrong call after a pause
baseline = tout_design(rho_0, rho_1, alpha_nom, beta_nom)
print(f"\n1. BASELINE: n = {baseline.n}, thresholds = {baseline.thresholds}")

# 2. Adjustments after a pause improve the rate by 8 to 12 points
adjusted = tout_design(rho_0, rho_1, alpha_nom, beta_nom, tau=(0.08, 0.12))
print(f"2. WITH ADJUSTMENT EFFECT: n = {adjusted.n}, thresholds = {adjusted.thresholds}")

# 3. Better decisions after a pause
careful = tout_design(rho_0, rho_1, alpha_nom, beta_nom, eta_0=0.3)
print(f"3. ETA_0 = 0.3: n = {careful.n}, thresholds = {careful.thresholds}")

# 4. Limit the chance of a pause to 10%
few_pauses = tout_design(rho_0, rho_1, alpha_nom, beta_nom, gamma_nom=0.1)
print(f"4. GAMMA <= 0.1: n = {few_pauses.n}, gamma = {few_pauses.gamma:.3f}")
