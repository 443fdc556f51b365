"""Simulation driver."""

from .simulation import Simulation, SimulationState

__all__ = [
    'Simulation',
    'SimulationState'
]
