"""Walking: cyclic instruction sequencing, single walks, and synchronization."""

from nodewalk.walk.sequencer import InstructionSequencer
from nodewalk.walk.synchronize import (
    find_start_nodes,
    gcd,
    lcm,
    lcm_of,
    synchronize,
    synchronize_walks,
    verify_periodicity,
    walk_all,
)
from nodewalk.walk.types import SyncResult, WalkResult
from nodewalk.walk.walker import (
    GoalPredicate,
    exact_match,
    suffix_match,
    walk,
    walk_path,
)

__all__ = [
    "GoalPredicate",
    "InstructionSequencer",
    "SyncResult",
    "WalkResult",
    "exact_match",
    "find_start_nodes",
    "gcd",
    "lcm",
    "lcm_of",
    "suffix_match",
    "synchronize",
    "synchronize_walks",
    "verify_periodicity",
    "walk",
    "walk_all",
]
