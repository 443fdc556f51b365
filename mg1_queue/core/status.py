"""Occupancy states of a single-server queue."""

from dataclasses import dataclass
from typing import Union

from ..errors import ContractViolation


@dataclass(frozen=True)
class Idle:
    """No customer present."""


@dataclass(frozen=True)
class Busy:
    """One customer in service plus ``num_waiting`` queued behind it."""
    time_until_completion: float
    num_waiting: int

    def __post_init__(self):
        if not self.time_until_completion > 0:
            raise ContractViolation(
                f"invalid time_until_completion {self.time_until_completion}")
        if self.num_waiting < 0:
            raise ContractViolation(f"invalid num_waiting {self.num_waiting}")


Status = Union[Idle, Busy]

IDLE = Idle()
