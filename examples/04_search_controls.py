"""
Search Controls Example
=======================

Fixed sample sizes, explicit search ceilings, progress reporting and
parallel evaluation of candidate sample sizes.
"""

import warnings

from tout import SearchExhaustedWarning, TqdmReporter, tout_design

rho_0, rho_1, alpha_nom, beta_nom = 0.5, 0.7, 0.05, 0.2

# 1. Evaluate a sample size you are already committed to
fixed = tout_design(rho_0, rho_1, alpha_nom, beta_nom, n=30)
print(f"1. n = 30: constraints met = {fixed.valid}, alpha = {fixed.alpha:.3f}, beta = {fixed.beta:.3f}")

# 2. A ceiling that is too low gives a typed failure plus a warning
with warnings.catch_warnings():
    warnings.simplefilter("ignore", SearchExhaustedWarning)
    capped = tout_design(rho_0, rho_1, alpha_nom, beta_nom, max_n=15)
print(f"2. max_n = 15: valid = {capped.valid}, message = {capped.message!r}")

# 3. Progress bar (needs tqdm) and parallel windows of candidate sizes (needs joblib)
design = tout_design(rho_0, rho_1, alpha_nom, beta_nom, tau=(0.08, 0.12), n_jobs=4, progress_callback=TqdmReporter())
print(f"3. n = {design.n}, thresholds = {design.thresholds}")
