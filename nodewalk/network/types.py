"""Network data structures: instructions, transition records, and the table."""

from dataclasses import dataclass
from enum import IntEnum

import numpy as np


class Instruction(IntEnum):
    """One binary choice of outgoing edge.

    The value is the column of the successor matrix holding that edge.
    """

    LEFT = 0
    RIGHT = 1

    @classmethod
    def from_char(cls, char: str) -> "Instruction":
        """Map 'L'/'R' to an Instruction; anything else raises ValueError."""
        if char == "L":
            return cls.LEFT
        if char == "R":
            return cls.RIGHT
        raise ValueError(f"Invalid instruction character: {char!r}")


@dataclass(frozen=True, slots=True)
class TransitionRecord:
    """A node and its two outgoing edges."""

    source: str
    left: str
    right: str

    def target(self, instruction: Instruction) -> str:
        return self.left if instruction == Instruction.LEFT else self.right


@dataclass(frozen=True)
class TransitionTable:
    """Immutable mapping from node identifier to its left/right successors.

    Keeps the records in input order alongside a dense successor matrix
    of row indices that walks advance through by integer lookup. Omits
    slots=True since numpy arrays don't interact well with __slots__.
    """

    node_ids: tuple[str, ...]  # row -> node identifier, input order
    index: dict[str, int]  # node identifier -> row
    records: tuple[TransitionRecord, ...]  # row -> record
    successors: np.ndarray  # int64 (n, 2), -1 where the target has no record

    def __len__(self) -> int:
        return len(self.node_ids)

    def __contains__(self, node: object) -> bool:
        return node in self.index
