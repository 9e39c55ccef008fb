"""Error taxonomy for table construction, walking, and synchronization.

Every error is fatal at the point of detection: the computation is
deterministic, so nothing is retried and no partial result is returned.
"""


class NavigationError(Exception):
    """Base class for all navigation failures."""


class MissingNodeError(NavigationError):
    """Raised when a lookup references a node with no transition record."""

    def __init__(self, node: str) -> None:
        super().__init__(f"No transition record for node {node!r}")
        self.node = node


class DuplicateNodeError(NavigationError):
    """Raised when two transition records share the same source node."""

    def __init__(self, node: str) -> None:
        super().__init__(f"Duplicate transition record for node {node!r}")
        self.node = node


class EmptyInstructionSequenceError(NavigationError):
    """Raised when an instruction sequence has zero length."""

    def __init__(self) -> None:
        super().__init__("Instruction sequence must not be empty")


class NoStartNodesError(NavigationError):
    """Raised when no node qualifies as a start node."""

    def __init__(self, pattern: str | None = None) -> None:
        if pattern is None:
            message = "No start nodes given"
        else:
            message = f"No start nodes match {pattern!r}"
        super().__init__(message)
        self.pattern = pattern


class NonTerminatingWalkError(NavigationError):
    """Raised when a walk exceeds its step ceiling without reaching a goal."""

    def __init__(self, start: str, max_steps: int) -> None:
        super().__init__(
            f"Walk from {start!r} did not reach a goal within "
            f"{max_steps} steps"
        )
        self.start = start
        self.max_steps = max_steps


class NoGoalReachableError(NavigationError):
    """Raised when no goal node is reachable from a start node at all."""

    def __init__(self, start: str) -> None:
        super().__init__(f"No goal node is reachable from {start!r}")
        self.start = start


class AperiodicWalkError(NavigationError):
    """Raised when a walk does not keep arriving at a goal once per period.

    second is None when a later lap did not reach a goal within one period.
    """

    def __init__(self, start: str, first: int, second: int | None) -> None:
        if second is None:
            detail = f"a later lap did not return to a goal within {first} steps"
        else:
            detail = f"a later lap took {second} steps"
        super().__init__(
            f"Walk from {start!r} reached a goal after {first} steps but {detail}"
        )
        self.start = start
        self.first = first
        self.second = second
