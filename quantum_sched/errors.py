from __future__ import annotations


class SchedError(Exception):
    """Base class for failures that abort a scheduling run."""

    default_message = "scheduling error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class InvalidInterval(SchedError):
    """A work unit was asked to run for a zero-length interval."""

    default_message = "invalid scheduling interval"


class EmptyQueue(SchedError):
    """The dispatch loop tried to pop from an empty run queue."""

    default_message = "unexpectedly empty threads queue"
