"""Path walker and goal predicates.

A walk is fully determined by its start node, the table, and the
sequencer state: every step takes the next instruction and follows the
matching edge, until the goal predicate holds.
"""

from typing import Callable

from nodewalk.errors import MissingNodeError, NonTerminatingWalkError
from nodewalk.network.table import row_of, successor_index
from nodewalk.network.types import TransitionTable
from nodewalk.walk.sequencer import InstructionSequencer
from nodewalk.walk.types import WalkResult

GoalPredicate = Callable[[str], bool]


def exact_match(node: str) -> GoalPredicate:
    """Predicate true only for the given node identifier."""

    def _is(candidate: str) -> bool:
        return candidate == node

    return _is


def suffix_match(suffix: str) -> GoalPredicate:
    """Predicate true for node identifiers ending in suffix."""

    def _ends_with(candidate: str) -> bool:
        return candidate.endswith(suffix)

    return _ends_with


def walk_path(
    start: str,
    is_goal: GoalPredicate,
    table: TransitionTable,
    sequencer: InstructionSequencer,
    max_steps: int | None = None,
) -> WalkResult:
    """Follow instructions from start until a goal node is reached.

    Consumes instructions from sequencer, so pass a fresh or copied
    sequencer when the caller's cursor must not move.

    Args:
        start: Start node identifier.
        is_goal: Goal predicate, checked before every step.
        table: Transition table.
        sequencer: Instruction source.
        max_steps: Optional ceiling on the number of steps.

    Returns:
        WalkResult with the goal node reached and the number of steps.

    Raises:
        MissingNodeError: If the walk reaches a node with no record.
        NonTerminatingWalkError: If max_steps is reached first.
    """
    steps = 0
    if is_goal(start):
        return WalkResult(start=start, end=start, steps=steps)
    row = row_of(table, start)
    while True:
        if max_steps is not None and steps >= max_steps:
            raise NonTerminatingWalkError(start, max_steps)
        instruction = sequencer.next()
        steps += 1
        try:
            row = successor_index(table, row, instruction)
        except MissingNodeError as err:
            # A goal without a record of its own still ends the walk
            if is_goal(err.node):
                return WalkResult(start=start, end=err.node, steps=steps)
            raise
        current = table.node_ids[row]
        if is_goal(current):
            return WalkResult(start=start, end=current, steps=steps)


def walk(
    start: str,
    is_goal: GoalPredicate,
    table: TransitionTable,
    sequencer: InstructionSequencer,
    max_steps: int | None = None,
) -> int:
    """Number of steps from start to the first goal node."""
    return walk_path(start, is_goal, table, sequencer, max_steps).steps
