"""Transition table construction, lookup, and reachability validation."""

from nodewalk.network.table import (
    MISSING,
    build_transition_table,
    find_nodes,
    lookup,
    row_of,
    successor_index,
)
from nodewalk.network.types import Instruction, TransitionRecord, TransitionTable
from nodewalk.network.validation import (
    check_goal_reachable,
    dangling_targets,
    reachable_nodes,
    to_adjacency,
)

__all__ = [
    "Instruction",
    "MISSING",
    "TransitionRecord",
    "TransitionTable",
    "build_transition_table",
    "check_goal_reachable",
    "dangling_targets",
    "find_nodes",
    "lookup",
    "reachable_nodes",
    "row_of",
    "successor_index",
    "to_adjacency",
]
