"""
Configuration for a simulation run.

Holds the two distribution parameterizations plus run length and seed.
"""

import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np

from .distributions import exponential_distribution, lognormal_distribution
from .system import Simulation

logger = logging.getLogger(__name__)


@dataclass
class SimulationConfig:
    """Exponential inter-arrival times, log-normal service times."""

    # Inter-arrival: Exp(rate)
    arrival_rate: float = 1.0 / 7.0

    # Service: LogNormal(mean, sigma) of the underlying normal
    service_mean: float = 1.5
    service_sigma: float = 0.5

    steps: int = 1000
    seed: Optional[int] = None
    verbose: bool = False

    def validate(self) -> None:
        if not (self.arrival_rate > 0 and np.isfinite(self.arrival_rate)):
            raise ValueError("arrival_rate must be a positive finite number")
        if not (np.isfinite(self.service_mean) and np.isfinite(self.service_sigma)):
            raise ValueError("service_mean and service_sigma must be finite")
        if self.service_sigma < 0:
            raise ValueError("service_sigma must be >= 0")
        if self.steps < 0:
            raise ValueError("steps must be >= 0")


def build_simulation(config: SimulationConfig) -> Simulation:
    """Wire the configured distributions into a fresh Simulation."""
    config.validate()
    rng = np.random.default_rng(config.seed)
    logger.info(
        "Exp(%s) inter-arrival, LogNormal(%s, %s) service, seed=%s",
        config.arrival_rate, config.service_mean, config.service_sigma, config.seed,
    )
    return Simulation(
        exponential_distribution(config.arrival_rate, rng=rng),
        lognormal_distribution(config.service_mean, config.service_sigma, rng=rng),
    )
