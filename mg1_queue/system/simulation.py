"""Next-event simulation driver for a single-server queue."""

import logging
from dataclasses import dataclass
from typing import Callable, Iterator, Optional

from ..core import Queue

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SimulationState:
    """Observable state reported after each step."""
    clock: float
    count: int
    num_waiting: Optional[int]  # None while the server is idle

    def to_line(self) -> str:
        """Tab-separated output line; an idle queue renders as ``None``."""
        return f"{self.clock}\t{self.count}\t{self.num_waiting!r}"


class Simulation:
    """
    Drives a Queue by jumping straight to the next event.

    Each ``step`` advances the clock to whichever comes first: the next
    external arrival or the completion of the customer in service.
    """

    def __init__(self,
                 inter_arrival_time: Callable[[], float],
                 job_size: Callable[[], float]):
        self.inter_arrival_time = inter_arrival_time
        self.clock = 0.0
        self.count = 0
        self.queue = Queue(job_size)
        self.time_until_arrival = inter_arrival_time()

    def step(self) -> None:
        """Advance the simulation by exactly one event."""
        time_until_completion = self.queue.time_until_completion()
        if time_until_completion is None:
            time = self.time_until_arrival
        else:
            time = min(time_until_completion, self.time_until_arrival)

        self.clock += time
        self.queue.elapse(time)

        # Arrival wins an exact tie with a completion
        if self.time_until_arrival == time:
            self.queue.increment()
            self.time_until_arrival = self.inter_arrival_time()
            logger.debug("Arrival after %s at clock %s", time, self.clock)
        else:
            self.count += 1
            self.time_until_arrival -= time
            logger.debug("Completion after %s at clock %s", time, self.clock)

    def snapshot(self) -> SimulationState:
        return SimulationState(self.clock, self.count, self.queue.num_waiting())

    def run(self, steps: int) -> Iterator[SimulationState]:
        """
        Yield the observable state and then step, ``steps`` times.

        The first state yielded is the one before any event has happened.
        A negative ``steps`` is rejected here, before iteration starts.
        """
        if steps < 0:
            raise ValueError("steps must be >= 0")
        return self._run(steps)

    def _run(self, steps: int) -> Iterator[SimulationState]:
        for _ in range(steps):
            yield self.snapshot()
            self.step()

    def __repr__(self) -> str:
        return (f"Simulation(clock={self.clock!r}, count={self.count!r}, "
                f"queue={self.queue!r}, "
                f"time_until_arrival={self.time_until_arrival!r})")
