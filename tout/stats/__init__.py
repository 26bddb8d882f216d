"""Statistical modules: distributions, operating characteristics and threshold optimisation."""

from . import distributions as distributions
from . import ocs as ocs
from . import thresholds as thresholds
