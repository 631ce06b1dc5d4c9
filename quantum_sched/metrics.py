from __future__ import annotations

from dataclasses import dataclass
from statistics import mean
from typing import Sequence

from .simulator import SimulationResult


@dataclass(slots=True)
class UnitMetrics:
    unit_id: int
    name: str
    runtime: int
    dispatches: int
    consumed: int
    first_dispatch: int
    finish_time: int
    wait_time: int

    @property
    def turnaround(self) -> int:
        return self.finish_time


@dataclass(slots=True)
class AggregateMetrics:
    count: int
    steps: int
    total_time: int
    mean_wait_time: float
    mean_turnaround: float
    mean_dispatches: float


def build_unit_metrics(result: SimulationResult) -> list[UnitMetrics]:
    """Fold the dispatch trace into one row per unit, ordered by retirement."""

    per_unit: dict[int, UnitMetrics] = {}
    for record in result.dispatches:
        unit = record.unit
        row = per_unit.get(unit.unit_id)
        if row is None:
            row = UnitMetrics(
                unit_id=unit.unit_id,
                name=unit.name,
                runtime=result.initial_runtimes.get(unit.unit_id, unit.runtime),
                dispatches=0,
                consumed=0,
                first_dispatch=record.start_time,
                finish_time=record.end_time,
                wait_time=0,
            )
            per_unit[unit.unit_id] = row
        row.dispatches += 1
        row.consumed += record.consumed
        row.finish_time = record.end_time

    rows = list(per_unit.values())
    for row in rows:
        # every unit arrives at t=0, so waiting is whatever was not spent running
        row.wait_time = row.finish_time - row.consumed
    rows.sort(key=lambda r: (r.finish_time, r.unit_id))
    return rows


def summarise(rows: Sequence[UnitMetrics], result: SimulationResult) -> AggregateMetrics:
    if not rows:
        return AggregateMetrics(
            count=0,
            steps=result.steps,
            total_time=result.total_time,
            mean_wait_time=0.0,
            mean_turnaround=0.0,
            mean_dispatches=0.0,
        )
    return AggregateMetrics(
        count=len(rows),
        steps=result.steps,
        total_time=result.total_time,
        mean_wait_time=mean(r.wait_time for r in rows),
        mean_turnaround=mean(r.turnaround for r in rows),
        mean_dispatches=mean(r.dispatches for r in rows),
    )
