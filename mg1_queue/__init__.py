"""Next-event simulation of a single-server (M/G/1) queue."""

from .errors import ContractViolation
from .core import Queue, Idle, Busy, IDLE
from .system import Simulation, SimulationState
from .config import SimulationConfig, build_simulation

__all__ = [
    'ContractViolation',
    'Queue',
    'Idle',
    'Busy',
    'IDLE',
    'Simulation',
    'SimulationState',
    'SimulationConfig',
    'build_simulation'
]
