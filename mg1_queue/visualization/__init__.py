"""Visualization utilities for the queue."""

from .plotting import plot_trajectory

__all__ = [
    'plot_trajectory'
]
