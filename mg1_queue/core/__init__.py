"""Core components of the queueing system."""

from .status import Idle, Busy, Status, IDLE
from .queue import Queue

__all__ = [
    'Idle',
    'Busy',
    'Status',
    'IDLE',
    'Queue'
]
