"""Walk result value types."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class WalkResult:
    """Outcome of one walk: where it started, where it stopped, how long."""

    start: str
    end: str
    steps: int


@dataclass(frozen=True, slots=True)
class SyncResult:
    """Per-walk results and the step at which all walks coincide on goals."""

    walks: tuple[WalkResult, ...]
    steps: int  # lcm of the per-walk step counts
