"""Transition table construction and lookup.

The table is built once from parsed records and never mutated afterwards;
it is shared by reference across every walk.
"""

from typing import Callable, Iterable

import numpy as np

from nodewalk.errors import DuplicateNodeError, MissingNodeError
from nodewalk.network.types import Instruction, TransitionRecord, TransitionTable

# Successor marker for a target that has no record of its own
MISSING = -1


def build_transition_table(records: Iterable[TransitionRecord]) -> TransitionTable:
    """Index transition records by source node.

    Targets without a record of their own are allowed here; walking into
    one raises MissingNodeError at that point.

    Args:
        records: Transition records in input order.

    Returns:
        Read-only TransitionTable.

    Raises:
        DuplicateNodeError: If two records share a source node.
    """
    ordered: list[TransitionRecord] = []
    index: dict[str, int] = {}
    for record in records:
        if record.source in index:
            raise DuplicateNodeError(record.source)
        index[record.source] = len(ordered)
        ordered.append(record)

    successors = np.full((len(ordered), 2), MISSING, dtype=np.int64)
    for row, record in enumerate(ordered):
        successors[row, Instruction.LEFT] = index.get(record.left, MISSING)
        successors[row, Instruction.RIGHT] = index.get(record.right, MISSING)
    successors.setflags(write=False)

    return TransitionTable(
        node_ids=tuple(r.source for r in ordered),
        index=index,
        records=tuple(ordered),
        successors=successors,
    )


def lookup(table: TransitionTable, node: str, instruction: Instruction) -> str:
    """Return the successor of node along the given edge.

    Raises:
        MissingNodeError: If node has no transition record.
    """
    row = table.index.get(node)
    if row is None:
        raise MissingNodeError(node)
    return table.records[row].target(instruction)


def row_of(table: TransitionTable, node: str) -> int:
    """Row index of node in the successor matrix."""
    row = table.index.get(node)
    if row is None:
        raise MissingNodeError(node)
    return row


def successor_index(table: TransitionTable, row: int, instruction: Instruction) -> int:
    """Advance a row index by one edge.

    Raises:
        MissingNodeError: If the successor has no transition record; the
            error names the successor's identifier.
    """
    nxt = int(table.successors[row, instruction])
    if nxt == MISSING:
        raise MissingNodeError(table.records[row].target(instruction))
    return nxt


def find_nodes(table: TransitionTable, predicate: Callable[[str], bool]) -> list[str]:
    """All node identifiers satisfying predicate, in table order."""
    return [node for node in table.node_ids if predicate(node)]
