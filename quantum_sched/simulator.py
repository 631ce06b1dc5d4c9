from __future__ import annotations

from dataclasses import dataclass
from random import Random
from typing import Sequence

from .jitter import FixedJitter, UniformSource
from .round_robin import DEFAULT_QUANTUM, RoundRobinScheduler
from .scheduler import DispatchRecord, DispatchSink
from .thread import WorkUnit


@dataclass(slots=True)
class SimulationConfig:
    quantum: int = DEFAULT_QUANTUM
    jitter: bool = True
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.quantum <= 0:
            msg = "quantum must be strictly positive"
            raise ValueError(msg)


@dataclass(slots=True)
class SimulationResult:
    dispatches: list[DispatchRecord]
    total_time: int
    initial_runtimes: dict[int, int]

    @property
    def steps(self) -> int:
        return len(self.dispatches)

    @property
    def total_work(self) -> int:
        return sum(self.initial_runtimes.values())


class Simulation:
    """Runs one round-robin scheduling pass over a fixed set of work units."""

    def __init__(
        self,
        units: Sequence[WorkUnit],
        config: SimulationConfig | None = None,
        *,
        rng: UniformSource | None = None,
        sink: DispatchSink | None = None,
    ) -> None:
        self.config = config or SimulationConfig()
        if rng is None:
            rng = Random(self.config.seed) if self.config.jitter else FixedJitter()
        self._units = list(units)
        self.scheduler = RoundRobinScheduler(self.config.quantum, rng=rng, sink=sink)

    def run(self) -> SimulationResult:
        initial = {unit.unit_id: unit.runtime for unit in self._units}
        for unit in self._units:
            self.scheduler.add(unit)
        self.scheduler.run()
        return SimulationResult(
            dispatches=self.scheduler.history,
            total_time=self.scheduler.get_time(),
            initial_runtimes=initial,
        )
