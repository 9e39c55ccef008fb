"""Structural checks on a transition table.

Walks are forced by the instruction stream, so reachability in the
underlying graph is only a necessary condition for a walk to terminate:
if no goal node is reachable from a start node by any path, no instruction
sequence can get there and walking would never finish.
"""

import logging
from typing import Callable

import numpy as np
import scipy.sparse
from scipy.sparse.csgraph import breadth_first_order

from nodewalk.errors import NoGoalReachableError
from nodewalk.network.table import MISSING, row_of
from nodewalk.network.types import Instruction, TransitionTable

log = logging.getLogger(__name__)


def to_adjacency(table: TransitionTable) -> scipy.sparse.csr_matrix:
    """Directed adjacency matrix (n x n) of the table's resolvable edges.

    Left and right edges to the same node collapse into a single entry.
    Edges into nodes without a record are dropped.
    """
    n = len(table)
    rows = np.repeat(np.arange(n, dtype=np.int64), 2)
    cols = table.successors.reshape(-1)
    keep = cols != MISSING
    data = np.ones(int(keep.sum()), dtype=np.int8)
    adj = scipy.sparse.csr_matrix(
        (data, (rows[keep], cols[keep])), shape=(n, n)
    )
    # Duplicate (row, col) pairs are summed on construction; clip to binary
    adj.data[:] = 1
    return adj


def reachable_nodes(table: TransitionTable, start: str) -> set[str]:
    """Every node reachable from start by any path, start included."""
    adj = to_adjacency(table)
    order = breadth_first_order(
        adj, row_of(table, start), directed=True, return_predecessors=False
    )
    return {table.node_ids[i] for i in order.tolist()}


def dangling_targets(table: TransitionTable) -> list[tuple[str, str]]:
    """(source, target) pairs whose target has no record of its own."""
    missing_rows, missing_cols = np.nonzero(table.successors == MISSING)
    return [
        (table.node_ids[r], table.records[r].target(Instruction(c)))
        for r, c in zip(missing_rows.tolist(), missing_cols.tolist())
    ]


def check_goal_reachable(
    table: TransitionTable,
    start: str,
    is_goal: Callable[[str], bool],
) -> None:
    """Verify at least one goal node is reachable from start.

    Args:
        table: Transition table.
        start: Start node identifier.
        is_goal: Goal predicate.

    Raises:
        MissingNodeError: If start has no record.
        NoGoalReachableError: If no reachable node satisfies is_goal.
    """
    if is_goal(start):
        return
    reachable = reachable_nodes(table, start)
    # A goal without a record of its own still ends a walk that steps onto it
    candidates = reachable | {
        table.records[table.index[node]].target(instruction)
        for node in reachable
        for instruction in Instruction
    }
    goals = sorted(node for node in candidates if is_goal(node))
    log.debug(
        "Start %s: %d reachable nodes, %d goals",
        start,
        len(reachable),
        len(goals),
    )
    if not goals:
        raise NoGoalReachableError(start)
