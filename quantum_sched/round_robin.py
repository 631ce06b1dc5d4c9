from __future__ import annotations

import logging
from collections import deque
from random import Random

from .errors import EmptyQueue
from .jitter import UniformSource, perturbed_quantum
from .scheduler import DispatchRecord, DispatchSink, Scheduler, print_dispatch
from .thread import Thread

logger = logging.getLogger(__name__)

DEFAULT_QUANTUM = 10


class RoundRobinScheduler(Scheduler):
    """Preemptive round-robin scheduler with a jittered quantum."""

    name = "TestShed"

    def __init__(
        self,
        quantum: int = DEFAULT_QUANTUM,
        *,
        rng: UniformSource | None = None,
        sink: DispatchSink | None = None,
    ) -> None:
        if quantum <= 0:
            msg = "quantum must be strictly positive"
            raise ValueError(msg)
        self.quantum = quantum
        self._rng = rng if rng is not None else Random()
        self._sink = sink if sink is not None else print_dispatch
        self._queue: deque[Thread] = deque()
        self._now = 0
        self._history: list[DispatchRecord] = []

    def add(self, thread: Thread) -> None:
        self._queue.append(thread)

    def run(self) -> None:
        while True:
            if not self._queue:
                raise EmptyQueue()
            thread = self._queue.popleft()

            self._sink(self._now, self.get_name(), thread)
            seen = thread.snapshot()

            interval = perturbed_quantum(self.quantum, self._rng)
            start = self._now
            used = thread.consume(interval)
            self._now += used

            retired = used < interval
            self._history.append(
                DispatchRecord(
                    step=len(self._history) + 1,
                    start_time=start,
                    unit=seen,
                    requested=interval,
                    consumed=used,
                    retired=retired,
                ),
            )

            if retired:
                logger.debug("retired after %d/%d ticks at t=%d, %d queued", used, interval, self._now, len(self._queue))
                if not self._queue:
                    return
            else:
                # A unit that used exactly its quantum is requeued even with no work left.
                logger.debug("requeued after full quantum of %d ticks at t=%d", interval, self._now)
                self._queue.append(thread)

    def get_time(self) -> int:
        return self._now

    @property
    def history(self) -> list[DispatchRecord]:
        return list(self._history)

    def __len__(self) -> int:
        return len(self._queue)
