"""Deterministic config hashing.

A config is flattened to dotted field paths ("walk.max_steps") before
hashing, so an excluded path drops either a single field or, when it names
a sub-config, every field below it.
"""

import hashlib
import json
from dataclasses import asdict
from typing import Any, Iterable

from nodewalk.config.navigation import NavigationConfig

# Fields that name or describe a run without changing what it computes
RUN_LABEL_FIELDS = ("input_path", "description", "tags")


def flatten_config(config: Any) -> dict[str, Any]:
    """Map every leaf field of a dataclass tree to its dotted path."""
    flat: dict[str, Any] = {}
    pending = [("", asdict(config))]
    while pending:
        prefix, node = pending.pop()
        for key, value in node.items():
            path = f"{prefix}{key}"
            if isinstance(value, dict):
                pending.append((f"{path}.", value))
            else:
                flat[path] = value
    return flat


def _is_excluded(path: str, excluded: Iterable[str]) -> bool:
    return any(path == e or path.startswith(f"{e}.") for e in excluded)


def config_hash(config: Any, exclude_fields: Iterable[str] | None = None) -> str:
    """SHA-256 of a config's flattened fields.

    Args:
        config: Any dataclass instance (or sub-config).
        exclude_fields: Dotted field paths to leave out; a sub-config path
            leaves out all of its fields.

    Returns:
        First 16 hex characters of the SHA-256 hash.
    """
    excluded = tuple(exclude_fields or ())
    fields = {
        path: value
        for path, value in flatten_config(config).items()
        if not _is_excluded(path, excluded)
    }
    serialized = json.dumps(fields, sort_keys=True, separators=(",", ":"))
    return hashlib.sha256(serialized.encode("utf-8")).hexdigest()[:16]


def walk_config_hash(config: NavigationConfig) -> str:
    """Hash of what a run computes, ignoring which file it reads and its labels."""
    return config_hash(config, exclude_fields=RUN_LABEL_FIELDS)


def full_config_hash(config: NavigationConfig) -> str:
    """Hash for full run identity, including input path and labels."""
    return config_hash(config)
