from __future__ import annotations

from collections.abc import Sequence
from random import Random

from .thread import MAX_UNIT_ID, WorkUnit


def sequential_workload(
    count: int,
    min_runtime: int,
    max_runtime: int,
    *,
    rng: Random | None = None,
    seed: int | None = None,
) -> list[WorkUnit]:
    """Build ``count`` units named ``THREAD_<i>`` with runtimes drawn from [min_runtime, max_runtime]."""

    if not 0 <= count <= MAX_UNIT_ID:
        msg = f"count must be within [0, {MAX_UNIT_ID}]"
        raise ValueError(msg)
    if min_runtime < 0 or max_runtime < min_runtime:
        msg = "runtime range must satisfy 0 <= min <= max"
        raise ValueError(msg)
    rng = rng if rng is not None else Random(seed)
    return [
        WorkUnit(unit_id=i, name=f"THREAD_{i}", runtime=rng.randint(min_runtime, max_runtime))
        for i in range(1, count + 1)
    ]


def from_runtimes(runtimes: Sequence[int]) -> list[WorkUnit]:
    return [WorkUnit(unit_id=idx, name=f"THREAD_{idx}", runtime=r) for idx, r in enumerate(runtimes, start=1)]
