"""Cyclic instruction sequencer.

Turns a finite, non-empty instruction sequence into an infinite periodic
stream. The sequence itself is an immutable tuple shared between copies;
only the cursor is per-sequencer state, so independent walks each get
their own copy and never observe one another's progress.
"""

from typing import Iterable, Iterator

from nodewalk.errors import EmptyInstructionSequenceError
from nodewalk.network.types import Instruction


class InstructionSequencer:
    """Infinite, restartable stream over a fixed instruction sequence."""

    __slots__ = ("_instructions", "_cursor")

    def __init__(self, instructions: Iterable[Instruction], cursor: int = 0) -> None:
        self._instructions = tuple(instructions)
        if not self._instructions:
            raise EmptyInstructionSequenceError()
        if not 0 <= cursor < len(self._instructions):
            raise ValueError(
                f"cursor ({cursor}) must be in [0, {len(self._instructions)})"
            )
        self._cursor = cursor

    @property
    def instructions(self) -> tuple[Instruction, ...]:
        return self._instructions

    @property
    def cursor(self) -> int:
        return self._cursor

    def __len__(self) -> int:
        return len(self._instructions)

    def next(self) -> Instruction:
        """Return the instruction at the cursor, then advance (wrapping)."""
        instruction = self._instructions[self._cursor]
        self._cursor += 1
        if self._cursor == len(self._instructions):
            self._cursor = 0
        return instruction

    __next__ = next

    def __iter__(self) -> Iterator[Instruction]:
        return self

    def copy(self) -> "InstructionSequencer":
        """Independent sequencer at the same cursor."""
        return InstructionSequencer._share(self._instructions, self._cursor)

    def restart(self) -> "InstructionSequencer":
        """Independent sequencer at cursor 0."""
        return InstructionSequencer._share(self._instructions, 0)

    @classmethod
    def _share(cls, instructions: tuple[Instruction, ...], cursor: int) -> "InstructionSequencer":
        # Skip re-validation; the tuple was checked when first constructed
        seq = cls.__new__(cls)
        seq._instructions = instructions
        seq._cursor = cursor
        return seq

    def __repr__(self) -> str:
        text = "".join("L" if i == Instruction.LEFT else "R" for i in self._instructions)
        return f"InstructionSequencer({text!r}, cursor={self._cursor})"
