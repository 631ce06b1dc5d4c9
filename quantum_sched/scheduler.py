from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass

from .thread import Thread, UnitSnapshot


DispatchSink = Callable[[int, str, Thread], None]


def print_dispatch(now: int, scheduler_name: str, thread: Thread) -> None:
    print(f"{now:>4} {scheduler_name} scheduled {thread}")


@dataclass(frozen=True, slots=True)
class DispatchRecord:
    """One completed dispatch step."""

    step: int
    start_time: int
    unit: UnitSnapshot
    requested: int
    consumed: int
    retired: bool

    @property
    def end_time(self) -> int:
        return self.start_time + self.consumed


class Scheduler(ABC):
    """Abstract scheduler interface owning a run queue of threads."""

    name = "Scheduler"

    @abstractmethod
    def add(self, thread: Thread) -> None:
        """Append a thread to the run queue."""

    @abstractmethod
    def run(self) -> None:
        """Dispatch threads until every one of them has retired."""

    @abstractmethod
    def get_time(self) -> int:
        """Current simulated time in ticks."""

    @property
    @abstractmethod
    def history(self) -> list[DispatchRecord]:
        """Dispatch steps performed so far, in order."""

    def get_name(self) -> str:
        return self.name
