"""
PyStatsEpi: Sample size planning for epidemiological study designs.

Closed-form sample size formulas for cross-sectional prevalence surveys,
case-control, cohort and randomized studies, and two-group comparisons of
means, plus a deterministic dot-matrix packer for visualising group sizes.

Usage:
    from pystatsepi import samplesize, grid
"""

__version__ = "0.1.0"

from pystatsepi import samplesize
from pystatsepi import grid

__all__ = [
    "__version__",
    "samplesize",
    "grid",
]
