"""Random variable distributions for queueing systems."""

from .random_variables import (
    exponential_distribution,
    lognormal_distribution,
    deterministic_distribution,
    sequence_distribution,
    scipy_distribution,
)

__all__ = [
    'exponential_distribution',
    'lognormal_distribution',
    'deterministic_distribution',
    'sequence_distribution',
    'scipy_distribution',
]
