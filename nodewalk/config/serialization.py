"""JSON serialization and deserialization for navigation configs."""

import json
from dataclasses import asdict
from typing import Any

from dacite import from_dict, Config as DaciteConfig

from nodewalk.config.navigation import NavigationConfig

_DACITE_CONFIG = DaciteConfig(
    cast=[tuple],
    check_types=True,
    strict=True,
)


def config_to_json(config: NavigationConfig) -> str:
    """Serialize a NavigationConfig to a JSON string.

    Uses sorted keys and 2-space indent for human readability and diffability.
    """
    return json.dumps(asdict(config), indent=2, sort_keys=True)


def config_from_json(json_str: str) -> NavigationConfig:
    """Deserialize a JSON string to a NavigationConfig.

    Uses dacite with strict=True to reject unknown keys and cast=[tuple]
    to convert JSON arrays back to tuples for tags. Missing keys fall back
    to dataclass defaults.
    """
    return config_from_dict(json.loads(json_str))


def config_to_dict(config: NavigationConfig) -> dict[str, Any]:
    """Convert a NavigationConfig to a plain dictionary."""
    return asdict(config)


def config_from_dict(d: dict[str, Any]) -> NavigationConfig:
    """Reconstruct a NavigationConfig from a plain dictionary."""
    return from_dict(
        data_class=NavigationConfig,
        data=d,
        config=_DACITE_CONFIG,
    )
