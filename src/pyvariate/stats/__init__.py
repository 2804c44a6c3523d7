"""Running summaries of generated sequences."""

from pyvariate.stats.mean import Mean
from pyvariate.stats.variance import Variance

__all__ = [
    "Mean",
    "Variance",
]
