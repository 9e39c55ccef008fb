"""Multi-path synchronization by least common multiple.

Each start node is walked independently with its own sequencer at
cursor 0. Combining the step counts with lcm gives the first step at which
every walk is on a goal node at once, provided each walk keeps re-entering
a goal exactly every `steps` steps. That precondition holds for the
structured inputs this tool targets but not for arbitrary graphs; use
verify_periodicity() to check it on a given input.
"""

from typing import Sequence

from nodewalk.errors import (
    AperiodicWalkError,
    NoStartNodesError,
    NonTerminatingWalkError,
)
from nodewalk.network.table import find_nodes, lookup
from nodewalk.network.types import Instruction, TransitionTable
from nodewalk.walk.sequencer import InstructionSequencer
from nodewalk.walk.types import SyncResult, WalkResult
from nodewalk.walk.walker import GoalPredicate, walk_path


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by the Euclidean algorithm."""
    while b:
        a, b = b, a % b
    return a


def lcm(a: int, b: int) -> int:
    """Least common multiple; lcm(0, 0) is 0."""
    divisor = gcd(a, b)
    if divisor == 0:
        return 0
    return a * b // divisor


def lcm_of(values: Sequence[int]) -> int:
    """Left fold of lcm over values, starting from the first element.

    Raises:
        ValueError: If values is empty.
    """
    if not values:
        raise ValueError("lcm_of() requires at least one value")
    result = values[0]
    for value in values[1:]:
        result = lcm(result, value)
    return result


def find_start_nodes(
    table: TransitionTable,
    is_start: GoalPredicate,
    pattern: str | None = None,
) -> list[str]:
    """Nodes satisfying is_start, in table order.

    Args:
        table: Transition table.
        is_start: Start predicate.
        pattern: Human-readable description of is_start for the error.

    Raises:
        NoStartNodesError: If no node matches.
    """
    starts = find_nodes(table, is_start)
    if not starts:
        raise NoStartNodesError(pattern)
    return starts


def walk_all(
    start_nodes: Sequence[str],
    is_goal: GoalPredicate,
    table: TransitionTable,
    instructions: Sequence[Instruction],
    max_steps: int | None = None,
) -> list[WalkResult]:
    """Walk every start node independently, each from cursor 0."""
    base = InstructionSequencer(instructions)
    return [
        walk_path(start, is_goal, table, base.restart(), max_steps)
        for start in start_nodes
    ]


def synchronize_walks(
    start_nodes: Sequence[str],
    is_goal: GoalPredicate,
    table: TransitionTable,
    instructions: Sequence[Instruction],
    max_steps: int | None = None,
) -> SyncResult:
    """Per-walk results plus the lcm of their step counts.

    Raises:
        NoStartNodesError: If start_nodes is empty.
    """
    if not start_nodes:
        raise NoStartNodesError()
    walks = walk_all(start_nodes, is_goal, table, instructions, max_steps)
    return SyncResult(
        walks=tuple(walks),
        steps=lcm_of([w.steps for w in walks]),
    )


def synchronize(
    start_nodes: Sequence[str],
    is_goal: GoalPredicate,
    table: TransitionTable,
    instructions: Sequence[Instruction],
    max_steps: int | None = None,
) -> int:
    """Step count at which every walk is simultaneously on a goal node."""
    return synchronize_walks(
        start_nodes, is_goal, table, instructions, max_steps
    ).steps


def verify_periodicity(
    result: WalkResult,
    is_goal: GoalPredicate,
    table: TransitionTable,
    instructions: Sequence[Instruction],
    max_steps: int | None = None,
) -> None:
    """Check that a walk keeps arriving at a goal exactly once per period.

    Resumes from result.end with the sequencer where the walk left it and
    walks lap after lap, each lap capped at result.steps. The walk is
    periodic once an arrival state (goal node, instruction cursor) repeats
    with every lap so far exactly one period long; from then on the laps
    cycle. A zero-step walk has no period and is accepted as is.

    Args:
        result: A walk from its start node to its first goal.
        is_goal: Goal predicate the walk was run with.
        table: Transition table.
        instructions: Instruction sequence the walk was run with.
        max_steps: Ceiling on the total steps spent across all laps.

    Raises:
        AperiodicWalkError: If a lap reaches a goal early, or not within
            one period.
        NonTerminatingWalkError: If max_steps is reached first; the error
            names result.start.
    """
    period = result.steps
    if period == 0:
        return
    state = (result.end, period % len(instructions))
    seen = {state}
    used = 0
    while True:
        budget = period if max_steps is None else min(period, max_steps - used)
        if budget <= 0:
            raise NonTerminatingWalkError(result.start, max_steps)
        node, cursor = state
        sequencer = InstructionSequencer(instructions, cursor=cursor)
        # Leave the goal node before checking the predicate again
        node = lookup(table, node, sequencer.next())
        try:
            lap = walk_path(node, is_goal, table, sequencer, budget - 1)
        except NonTerminatingWalkError:
            if budget < period:
                raise NonTerminatingWalkError(result.start, max_steps) from None
            raise AperiodicWalkError(result.start, period, None) from None
        steps = lap.steps + 1
        used += steps
        if steps != period:
            raise AperiodicWalkError(result.start, period, steps)
        state = (lap.end, sequencer.cursor)
        if state in seen:
            return
        seen.add(state)
