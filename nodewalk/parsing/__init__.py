"""Parsing of the network text format."""

from nodewalk.parsing.parser import (
    InvalidInstructionError,
    ParsedNetwork,
    ParseError,
    parse_instructions,
    parse_network,
    parse_transition_record,
    read_network,
)

__all__ = [
    "InvalidInstructionError",
    "ParseError",
    "ParsedNetwork",
    "parse_instructions",
    "parse_network",
    "parse_transition_record",
    "read_network",
]
