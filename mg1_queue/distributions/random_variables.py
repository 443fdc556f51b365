"""
Random variable generators for the queue.
Each factory returns a zero-argument sampler producing one float per call.
Compatible with scipy.stats distributions and custom generators.
"""

import itertools
from typing import Callable, Iterable, Optional

import numpy as np
from scipy import stats


def _generator(rng: Optional[np.random.Generator]) -> np.random.Generator:
    return rng if rng is not None else np.random.default_rng()


# Distribution factory functions
def exponential_distribution(rate: float,
                             rng: Optional[np.random.Generator] = None) -> Callable[[], float]:
    """Create an exponential distribution function with rate parameter ``rate``."""
    if not (rate > 0 and np.isfinite(rate)):
        raise ValueError("rate must be a positive finite number")
    gen = _generator(rng)
    scale = 1.0 / rate
    return lambda: float(gen.exponential(scale))


def lognormal_distribution(mean: float, sigma: float,
                           rng: Optional[np.random.Generator] = None) -> Callable[[], float]:
    """
    Create a log-normal distribution function.

    ``mean`` and ``sigma`` are the location and scale of the underlying
    normal, so the actual mean is exp(mean + sigma^2/2).
    """
    if not (np.isfinite(mean) and np.isfinite(sigma)):
        raise ValueError("mean and sigma must be finite")
    if sigma < 0:
        raise ValueError("sigma must be >= 0")
    gen = _generator(rng)
    return lambda: float(gen.lognormal(mean, sigma))


def deterministic_distribution(value: float) -> Callable[[], float]:
    """Create a deterministic distribution (always returns same value)."""
    return lambda: value


def sequence_distribution(values: Iterable[float], cycle: bool = True) -> Callable[[], float]:
    """
    Create a distribution that replays ``values`` in order.

    Useful for stub samplers in tests. With ``cycle=False`` drawing past the
    end raises RuntimeError.
    """
    values = list(values)
    if not values:
        raise ValueError("values must not be empty")
    source = itertools.cycle(values) if cycle else iter(values)

    def sample():
        try:
            return next(source)
        except StopIteration:
            raise RuntimeError("sequence distribution exhausted") from None

    return sample


# Advanced distributions using scipy
def scipy_distribution(dist_name: str,
                       rng: Optional[np.random.Generator] = None,
                       **params) -> Callable[[], float]:
    """
    Create a distribution function from scipy.stats.

    Examples:
        scipy_distribution('gamma', a=2, scale=1/3)  # Gamma(2, 1/3)
        scipy_distribution('weibull_min', c=1.5)     # Weibull(1.5)
    """
    dist = getattr(stats, dist_name, None)
    if dist is None or not hasattr(dist, 'rvs'):
        raise ValueError(f"unknown scipy.stats distribution: {dist_name}")
    gen = _generator(rng)
    return lambda: float(dist.rvs(random_state=gen, **params))
