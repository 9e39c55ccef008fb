"""Parsing of the network text format into typed records.

Format::

    LLR

    AAA = (BBB, BBB)
    BBB = (AAA, ZZZ)
    ZZZ = (ZZZ, ZZZ)

The first line is the instruction sequence; blank lines are skipped; every
other line is one transition record.
"""

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from nodewalk.network.types import Instruction, TransitionRecord

log = logging.getLogger(__name__)

RECORD_PATTERN = re.compile(
    r"^\s*([A-Z0-9]+)\s*=\s*\(\s*([A-Z0-9]+)\s*,\s*([A-Z0-9]+)\s*\)\s*$"
)


class ParseError(ValueError):
    """Raised when input text does not follow the network format."""

    def __init__(self, message: str, line_number: int | None = None) -> None:
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number


class InvalidInstructionError(ParseError):
    """Raised for a character other than 'L' or 'R' in the instruction line."""

    def __init__(self, char: str, column: int, line_number: int | None = None) -> None:
        super().__init__(
            f"invalid instruction {char!r} at column {column}", line_number
        )
        self.char = char
        self.column = column


@dataclass(frozen=True)
class ParsedNetwork:
    """Instruction sequence and transition records, in input order."""

    instructions: tuple[Instruction, ...]
    records: tuple[TransitionRecord, ...]


def parse_instructions(line: str, line_number: int | None = None) -> tuple[Instruction, ...]:
    """Parse an instruction line such as 'LLR'.

    Raises:
        ParseError: If the line is empty.
        InvalidInstructionError: On any character other than 'L' or 'R'.
    """
    text = line.strip()
    if not text:
        raise ParseError("instruction line is empty", line_number)
    instructions: list[Instruction] = []
    for column, char in enumerate(text, start=1):
        try:
            instructions.append(Instruction.from_char(char))
        except ValueError:
            raise InvalidInstructionError(char, column, line_number) from None
    return tuple(instructions)


def parse_transition_record(line: str, line_number: int | None = None) -> TransitionRecord:
    """Parse a record line such as 'AAA = (BBB, CCC)'.

    Raises:
        ParseError: If the line does not match the record format.
    """
    match = RECORD_PATTERN.match(line)
    if match is None:
        raise ParseError(f"malformed transition record {line.strip()!r}", line_number)
    source, left, right = match.groups()
    return TransitionRecord(source=source, left=left, right=right)


def parse_network(lines: Iterable[str]) -> ParsedNetwork:
    """Parse the full network text, given as lines.

    Raises:
        ParseError: On empty input or any malformed line.
    """
    instructions: tuple[Instruction, ...] | None = None
    records: list[TransitionRecord] = []
    for line_number, line in enumerate(lines, start=1):
        if instructions is None:
            instructions = parse_instructions(line, line_number)
            continue
        if not line.strip():
            continue
        records.append(parse_transition_record(line, line_number))

    if instructions is None:
        raise ParseError("input is empty")
    return ParsedNetwork(instructions=instructions, records=tuple(records))


def read_network(path: str | Path) -> ParsedNetwork:
    """Read and parse a network file.

    Raises:
        FileNotFoundError: If path does not exist.
        ParseError: If the contents are malformed.
    """
    path = Path(path)
    with open(path, encoding="utf-8") as f:
        network = parse_network(f)
    log.info(
        "Parsed %s: %d instructions, %d records",
        path,
        len(network.instructions),
        len(network.records),
    )
    return network
