"""Exception types raised by framerev."""

from typing import List, Optional

from framerev.codes import InvariantCode


class FrameRevisionError(Exception):
    """Base class for all framerev errors."""


class InvalidRecordError(FrameRevisionError):
    """Raised when a revision record violates one of its invariants.

    Always raised at construction time; no partially-valid record exists.
    Not a ValueError: pydantic validators must pass it through unwrapped.
    """

    def __init__(self, code: InvariantCode, message: str, field: Optional[str] = None):
        self.code = code
        self.field = field
        super().__init__(f"[{code.value}] {message}")


class MissingStorageLocationError(FrameRevisionError, LookupError):
    """Raised when a storage location is required but was never set.

    This signals a sequencing fault upstream (materialization assumed done
    when it was not), not a transient condition.
    """

    def __init__(self, summary: str):
        self.summary = summary
        super().__init__(f"Storage location was not defined for {summary}")


class IllegalTransitionError(FrameRevisionError, ValueError):
    """Raised when a lifecycle status change is not in the transition table."""

    def __init__(self, current, target):
        self.current = current
        self.target = target
        super().__init__(f"Illegal status transition: {current.name} -> {target.name}")


class LineageCycleError(FrameRevisionError, ValueError):
    """Raised when walking parent pointers revisits a revision."""

    def __init__(self, cycle: List[int]):
        self.cycle = cycle
        cycle_str = " -> ".join(str(i) for i in cycle)
        super().__init__(f"Cycle detected in revision lineage:\n  Cycle: {cycle_str}")
