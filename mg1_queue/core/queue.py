"""Queue component implementation."""

import logging
from typing import Callable, Optional

from ..errors import ContractViolation
from .status import IDLE, Busy, Idle, Status

logger = logging.getLogger(__name__)


class Queue:
    """Single server with unbounded FIFO waiting room."""

    def __init__(self,
                 job_size: Callable[[], float],
                 status: Status = IDLE):
        self.job_size = job_size
        self._status = status

    @property
    def status(self) -> Status:
        return self._status

    def is_idle(self) -> bool:
        return isinstance(self._status, Idle)

    def time_until_completion(self) -> Optional[float]:
        """Remaining service time of the customer in service, None if idle."""
        if isinstance(self._status, Busy):
            return self._status.time_until_completion
        return None

    def num_waiting(self) -> Optional[int]:
        """Customers queued behind the one in service, None if idle."""
        if isinstance(self._status, Busy):
            return self._status.num_waiting
        return None

    def num_in_system(self) -> int:
        """Total customers resident (in service or waiting)."""
        if isinstance(self._status, Busy):
            return self._status.num_waiting + 1
        return 0

    def increment(self) -> None:
        """Admit an arriving customer."""
        if isinstance(self._status, Busy):
            self._status = Busy(self._status.time_until_completion,
                                self._status.num_waiting + 1)
        else:
            # Arrival to an empty system goes straight into service
            self._status = Busy(self.job_size(), 0)

    def elapse(self, time: float) -> None:
        """
        Advance the queue by ``time``.

        ``time`` must be positive and must not overshoot the completion of
        the customer in service; a completion landing exactly on the
        boundary is resolved here.
        """
        if not time > 0:
            raise ContractViolation(f"invalid time {time}")
        if not isinstance(self._status, Busy):
            return

        remaining = self._status.time_until_completion
        num_waiting = self._status.num_waiting
        if time > remaining:
            raise ContractViolation(
                f"invalid time {time} for time_until_completion {remaining}")

        if time < remaining:
            self._status = Busy(remaining - time, num_waiting)
        elif num_waiting == 0:
            self._status = IDLE
        else:
            self._status = Busy(self.job_size(), num_waiting - 1)
            logger.debug("Service started, %d still waiting", num_waiting - 1)

    def __repr__(self) -> str:
        return f"Queue(status={self._status!r})"
