"""Navigation configuration with frozen, hashable, serializable dataclasses."""

from nodewalk.config.navigation import (
    MultiPathConfig,
    NavigationConfig,
    SinglePathConfig,
    WalkConfig,
)
from nodewalk.config.defaults import DEFAULT_CONFIG
from nodewalk.config.hashing import (
    config_hash,
    flatten_config,
    full_config_hash,
    walk_config_hash,
)
from nodewalk.config.serialization import (
    config_from_dict,
    config_from_json,
    config_to_dict,
    config_to_json,
)

__all__ = [
    "DEFAULT_CONFIG",
    "MultiPathConfig",
    "NavigationConfig",
    "SinglePathConfig",
    "WalkConfig",
    "config_from_dict",
    "config_from_json",
    "config_hash",
    "config_to_dict",
    "config_to_json",
    "flatten_config",
    "full_config_hash",
    "walk_config_hash",
]
