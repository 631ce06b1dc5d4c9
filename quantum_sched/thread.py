from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from .errors import InvalidInterval

MAX_UNIT_ID = 255


@dataclass(frozen=True, slots=True)
class UnitSnapshot:
    """State of a thread as seen when it was dispatched."""

    unit_id: int
    name: str
    runtime: int


class Thread(ABC):
    """Anything the scheduler can dispatch: consumes ticks and renders itself."""

    __slots__ = ()

    @abstractmethod
    def consume(self, requested: int) -> int:
        """Run for up to ``requested`` ticks and return the ticks actually used."""

    @abstractmethod
    def snapshot(self) -> UnitSnapshot:
        """Copy of the identifying fields and remaining runtime."""

    @abstractmethod
    def __str__(self) -> str:
        """Multi-line description used in the dispatch log."""


@dataclass(slots=True)
class WorkUnit(Thread):
    """Synthetic workload holding its remaining runtime in ticks."""

    unit_id: int
    name: str
    runtime: int

    def __post_init__(self) -> None:
        if not 0 <= self.unit_id <= MAX_UNIT_ID:
            msg = f"unit_id must be within [0, {MAX_UNIT_ID}]"
            raise ValueError(msg)
        if self.runtime < 0:
            msg = "runtime cannot be negative"
            raise ValueError(msg)

    def consume(self, requested: int) -> int:
        if requested <= 0:
            raise InvalidInterval()
        if self.runtime > requested:
            self.runtime -= requested
            return requested
        used = self.runtime
        self.runtime = 0
        return used

    def snapshot(self) -> UnitSnapshot:
        return UnitSnapshot(unit_id=self.unit_id, name=self.name, runtime=self.runtime)

    def __str__(self) -> str:
        return f"id: {self.unit_id}\nname: {self.name}\nruntime: {self.runtime}"
