"""Result schema validation, writing, and run ID generation."""

from nodewalk.results.run_id import generate_run_id
from nodewalk.results.schema import (
    build_metrics,
    file_hash,
    load_result,
    validate_result,
    write_result,
)

__all__ = [
    "build_metrics",
    "file_hash",
    "generate_run_id",
    "load_result",
    "validate_result",
    "write_result",
]
