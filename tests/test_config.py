"""Tests for the navigation configuration system."""

import json
import re

import pytest
from dataclasses import FrozenInstanceError, replace

from nodewalk.config import (
    DEFAULT_CONFIG,
    MultiPathConfig,
    NavigationConfig,
    SinglePathConfig,
    WalkConfig,
    config_from_dict,
    config_from_json,
    config_hash,
    config_to_dict,
    config_to_json,
    flatten_config,
    full_config_hash,
    walk_config_hash,
)


class TestDefaultConfig:
    """DEFAULT_CONFIG has the expected values."""

    def test_defaults(self):
        assert DEFAULT_CONFIG.input_path == "input1.txt"
        assert DEFAULT_CONFIG.single.start == "AAA"
        assert DEFAULT_CONFIG.single.goal == "ZZZ"
        assert DEFAULT_CONFIG.multi.start_suffix == "A"
        assert DEFAULT_CONFIG.multi.goal_suffix == "Z"
        assert DEFAULT_CONFIG.walk.max_steps is None
        assert DEFAULT_CONFIG.walk.check_reachability is True
        assert DEFAULT_CONFIG.walk.verify_periodicity is False


class TestConfigImmutability:
    """Frozen dataclasses prevent mutation."""

    def test_config_frozen(self):
        with pytest.raises(FrozenInstanceError):
            DEFAULT_CONFIG.input_path = "other.txt"  # type: ignore[misc]

    def test_walk_config_frozen(self):
        with pytest.raises(FrozenInstanceError):
            DEFAULT_CONFIG.walk.max_steps = 5  # type: ignore[misc]


class TestConfigRoundTrip:
    """JSON serialization round-trip preserves identity."""

    def test_round_trip_hash(self):
        restored = config_from_json(config_to_json(DEFAULT_CONFIG))
        assert config_hash(DEFAULT_CONFIG) == config_hash(restored)

    def test_round_trip_with_tags_and_max_steps(self):
        cfg = replace(
            DEFAULT_CONFIG,
            tags=("ghosts", "lcm"),
            walk=WalkConfig(max_steps=1_000_000, verify_periodicity=True),
        )
        restored = config_from_json(config_to_json(cfg))
        assert restored == cfg
        assert restored.tags == ("ghosts", "lcm")

    def test_dict_round_trip(self):
        assert config_from_dict(config_to_dict(DEFAULT_CONFIG)) == DEFAULT_CONFIG

    def test_partial_json_uses_defaults(self):
        cfg = config_from_json(json.dumps({"input_path": "day8.txt"}))
        assert cfg.input_path == "day8.txt"
        assert cfg.single == SinglePathConfig()


class TestConfigHashing:
    """Hash behavior for run identity and walk semantics."""

    def test_walk_hash_ignores_input_path(self):
        cfg2 = replace(DEFAULT_CONFIG, input_path="other.txt", description="x")
        assert walk_config_hash(DEFAULT_CONFIG) == walk_config_hash(cfg2)

    def test_full_hash_includes_input_path(self):
        cfg2 = replace(DEFAULT_CONFIG, input_path="other.txt")
        assert full_config_hash(DEFAULT_CONFIG) != full_config_hash(cfg2)

    def test_walk_hash_includes_goal(self):
        cfg2 = replace(DEFAULT_CONFIG, multi=MultiPathConfig(goal_suffix="Q"))
        assert walk_config_hash(DEFAULT_CONFIG) != walk_config_hash(cfg2)

    def test_hash_is_hex_string(self):
        h = full_config_hash(DEFAULT_CONFIG)
        assert len(h) == 16
        assert re.match(r"^[0-9a-f]{16}$", h)

    def test_hash_deterministic(self):
        assert config_hash(DEFAULT_CONFIG) == config_hash(NavigationConfig())


class TestConfigValidation:
    """Cross-field validation catches invalid configs."""

    def test_empty_start_rejected(self):
        with pytest.raises(ValueError, match="single"):
            NavigationConfig(single=SinglePathConfig(start=""))

    def test_empty_suffix_rejected(self):
        with pytest.raises(ValueError, match="suffix"):
            NavigationConfig(multi=MultiPathConfig(goal_suffix=""))

    @pytest.mark.parametrize("max_steps", [0, -5])
    def test_non_positive_max_steps_rejected(self, max_steps):
        with pytest.raises(ValueError, match="max_steps"):
            NavigationConfig(walk=WalkConfig(max_steps=max_steps))

    def test_both_parts_disabled_rejected(self):
        with pytest.raises(ValueError, match="enabled"):
            NavigationConfig(
                single=SinglePathConfig(enabled=False),
                multi=MultiPathConfig(enabled=False),
            )


class TestSerializationStrict:
    """Strict mode rejects unknown keys and wrong types."""

    def test_rejects_extra_keys(self):
        data = json.loads(config_to_json(DEFAULT_CONFIG))
        data["unknown_field"] = "sneaky"
        with pytest.raises(Exception):
            config_from_json(json.dumps(data))

    def test_rejects_wrong_type(self):
        data = json.loads(config_to_json(DEFAULT_CONFIG))
        data["walk"]["max_steps"] = "lots"
        with pytest.raises(Exception):
            config_from_json(json.dumps(data))


class TestConfigHashExclusion:
    """Excluded dotted paths drop a field or a whole sub-config."""

    def test_flatten_uses_dotted_paths(self):
        flat = flatten_config(DEFAULT_CONFIG)
        assert flat["walk.max_steps"] is None
        assert flat["single.start"] == "AAA"
        assert flat["input_path"] == "input1.txt"
        assert "walk" not in flat

    def test_exclude_nested_field(self):
        cfg2 = replace(DEFAULT_CONFIG, walk=WalkConfig(max_steps=500))
        assert config_hash(DEFAULT_CONFIG) != config_hash(cfg2)
        assert config_hash(DEFAULT_CONFIG, exclude_fields=["walk.max_steps"]) == (
            config_hash(cfg2, exclude_fields=["walk.max_steps"])
        )

    def test_exclude_nested_field_keeps_siblings(self):
        cfg2 = replace(DEFAULT_CONFIG, walk=WalkConfig(verify_periodicity=True))
        assert config_hash(DEFAULT_CONFIG, exclude_fields=["walk.max_steps"]) != (
            config_hash(cfg2, exclude_fields=["walk.max_steps"])
        )

    def test_exclude_whole_subconfig(self):
        cfg2 = replace(
            DEFAULT_CONFIG,
            walk=WalkConfig(max_steps=10, check_reachability=False),
        )
        assert config_hash(DEFAULT_CONFIG, exclude_fields=["walk"]) == (
            config_hash(cfg2, exclude_fields=["walk"])
        )

    def test_excluded_subconfig_leaves_others(self):
        cfg2 = replace(DEFAULT_CONFIG, multi=MultiPathConfig(start_suffix="B"))
        assert config_hash(DEFAULT_CONFIG, exclude_fields=["single"]) != (
            config_hash(cfg2, exclude_fields=["single"])
        )
