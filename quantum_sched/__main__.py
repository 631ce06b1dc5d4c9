from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from . import metrics, workload
from .errors import SchedError
from .simulator import Simulation, SimulationConfig, SimulationResult
from .thread import MAX_UNIT_ID


def parse_arguments(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Simulate round-robin scheduling of synthetic threads.")
    parser.add_argument("--threads", type=int, default=3, help="Number of threads to create.")
    parser.add_argument("--min-runtime", type=int, default=18, help="Smallest runtime (ticks) a thread may need.")
    parser.add_argument("--max-runtime", type=int, default=32, help="Largest runtime (ticks) a thread may need.")
    parser.add_argument("--quantum", type=int, default=10, help="Nominal time slice (ticks) before preemption.")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for runtimes and quantum jitter.")
    parser.add_argument("--no-jitter", action="store_true", help="Dispatch with the exact nominal quantum.")
    parser.add_argument("--summary", action="store_true", help="Print per-thread statistics after the run.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging on stderr.")
    args = parser.parse_args(argv)
    if not 0 <= args.threads <= MAX_UNIT_ID:
        parser.error(f"--threads must be within [0, {MAX_UNIT_ID}]")
    if args.min_runtime < 0 or args.max_runtime < args.min_runtime:
        parser.error("runtimes must satisfy 0 <= --min-runtime <= --max-runtime")
    if args.quantum <= 0:
        parser.error("--quantum must be strictly positive")
    return args


def print_summary(result: SimulationResult) -> None:
    rows = metrics.build_unit_metrics(result)
    aggregate = metrics.summarise(rows, result)
    header_fmt = "{:<4} {:<10} {:>7} {:>10} {:>6} {:>6}"
    row_fmt = "{:<4} {:<10} {:>7} {:>10} {:>6} {:>6}"
    print()
    print(header_fmt.format("Id", "Name", "Runtime", "Dispatches", "Wait", "Finish"))
    for row in rows:
        print(row_fmt.format(row.unit_id, row.name, row.runtime, row.dispatches, row.wait_time, row.finish_time))
    print(
        f"\n{aggregate.count} threads, {aggregate.steps} dispatches, total time {aggregate.total_time}, "
        f"mean wait {aggregate.mean_wait_time:.2f}, mean turnaround {aggregate.mean_turnaround:.2f}",
    )


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_arguments(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    config = SimulationConfig(quantum=args.quantum, jitter=not args.no_jitter, seed=args.seed)
    units = workload.sequential_workload(args.threads, args.min_runtime, args.max_runtime, seed=args.seed)

    try:
        result = Simulation(units, config=config).run()
    except SchedError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.summary:
        print_summary(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
