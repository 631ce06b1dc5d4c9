"""Randomised perturbation of the nominal scheduling quantum."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Protocol


class UniformSource(Protocol):
    """Source of uniformly distributed floats; ``random.Random`` satisfies it."""

    def uniform(self, a: float, b: float) -> float:
        ...


@dataclass(slots=True)
class FixedJitter:
    """Deterministic stand-in that always draws the same offset."""

    offset: float = 0.0

    def uniform(self, a: float, b: float) -> float:
        return min(max(self.offset, a), b)


def perturbed_quantum(quantum: int, source: UniformSource) -> int:
    """Return ``quantum`` shifted by a draw from [-quantum/2, +quantum/2], truncated toward zero."""

    assert quantum < sys.float_info.max
    assert quantum < sys.maxsize
    half = 0.5 * quantum
    variance = source.uniform(-half, half)
    return quantum + int(variance)
