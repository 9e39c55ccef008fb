"""Result schema validation and writing.

Uses a Python validation function (not jsonschema) to check required
fields and types before writing result.json files.
"""

import hashlib
import json
import logging
from dataclasses import asdict
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from nodewalk.config.hashing import full_config_hash, walk_config_hash
from nodewalk.config.navigation import NavigationConfig
from nodewalk.results.run_id import generate_run_id
from nodewalk.walk.types import WalkResult

log = logging.getLogger(__name__)

SCHEMA_VERSION = "1.0"

REQUIRED_TOP_FIELDS = {
    "schema_version",
    "run_id",
    "timestamp",
    "description",
    "tags",
    "config",
    "metrics",
}

REQUIRED_METRICS_FIELDS = {"scalars", "walks"}

REQUIRED_WALK_FIELDS = ("start", "end", "steps")


def file_hash(path: str | Path) -> str:
    """First 16 hex characters of the SHA-256 of a file's bytes."""
    return hashlib.sha256(Path(path).read_bytes()).hexdigest()[:16]


def validate_result(result: dict[str, Any]) -> list[str]:
    """Validate a result dict against the project schema.

    Returns a list of error strings. An empty list means the result is valid.

    Checks:
    - All required top-level fields are present
    - metrics.scalars and metrics.walks are present
    - schema_version is a string, tags a list, config a dict
    - timestamp parses as ISO 8601
    - Step counts are non-negative integers or null
    """
    errors: list[str] = []

    missing = REQUIRED_TOP_FIELDS - set(result.keys())
    if missing:
        errors.append(f"Missing required top-level fields: {sorted(missing)}")

    if "schema_version" in result and not isinstance(result["schema_version"], str):
        errors.append("schema_version must be a string")

    if "tags" in result and not isinstance(result["tags"], list):
        errors.append("tags must be a list")

    if "config" in result and not isinstance(result["config"], dict):
        errors.append("config must be a dict")

    if "timestamp" in result:
        ts = result["timestamp"]
        if not isinstance(ts, str):
            errors.append("timestamp must be a string")
        else:
            try:
                datetime.fromisoformat(ts)
            except ValueError:
                errors.append("timestamp must be in ISO 8601 format")

    metrics = result.get("metrics")
    if metrics is None:
        return errors
    if not isinstance(metrics, dict):
        errors.append("metrics must be a dict")
        return errors

    for name in sorted(REQUIRED_METRICS_FIELDS - set(metrics.keys())):
        errors.append(f"metrics.{name} is required")

    scalars = metrics.get("scalars", {})
    if not isinstance(scalars, dict):
        errors.append("metrics.scalars must be a dict")
    else:
        for key in ["single_path_steps", "synchronized_steps"]:
            value = scalars.get(key)
            if value is not None and not (isinstance(value, int) and value >= 0):
                errors.append(
                    f"metrics.scalars.{key} must be a non-negative integer or null"
                )

    walks = metrics.get("walks", [])
    if not isinstance(walks, list):
        errors.append("metrics.walks must be a list")
    else:
        for i, w in enumerate(walks):
            if not isinstance(w, dict):
                errors.append(f"metrics.walks[{i}] must be a dict")
                continue
            for field in REQUIRED_WALK_FIELDS:
                if field not in w:
                    errors.append(f"metrics.walks[{i}] missing field: {field}")
            steps = w.get("steps")
            if steps is not None and not (isinstance(steps, int) and steps >= 0):
                errors.append(f"metrics.walks[{i}].steps must be a non-negative integer")

    return errors


def build_metrics(
    single_path_steps: int | None,
    synchronized_steps: int | None,
    walks: list[WalkResult],
) -> dict[str, Any]:
    """Assemble the metrics block from walk outcomes."""
    return {
        "scalars": {
            "single_path_steps": single_path_steps,
            "synchronized_steps": synchronized_steps,
        },
        "walks": [asdict(w) for w in walks],
    }


def write_result(
    config: NavigationConfig,
    metrics: dict[str, Any],
    metadata: dict[str, Any] | None = None,
    results_dir: str | Path = "results",
) -> str:
    """Write results/{run_id}/result.json.

    Args:
        config: The navigation configuration.
        metrics: Metrics dict (must include 'scalars' and 'walks').
        metadata: Optional additional metadata to merge into the metadata block.
        results_dir: Base directory for result output.

    Returns:
        The generated run_id string.

    Raises:
        ValueError: If the assembled result fails validation.
    """
    run_id = generate_run_id(config)
    result = {
        "schema_version": SCHEMA_VERSION,
        "run_id": run_id,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "description": config.description,
        "tags": list(config.tags),
        "config": asdict(config),
        "metrics": metrics,
        "metadata": {
            "config_hash": full_config_hash(config),
            "walk_config_hash": walk_config_hash(config),
            **(metadata or {}),
        },
    }

    errors = validate_result(result)
    if errors:
        raise ValueError(
            "Result validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
        )

    out_dir = Path(results_dir) / run_id
    out_dir.mkdir(parents=True, exist_ok=True)
    result_path = out_dir / "result.json"
    with open(result_path, "w") as f:
        json.dump(result, f, indent=2)
    log.info("Result written to %s", result_path)

    return run_id


def load_result(result_path: str | Path) -> dict[str, Any]:
    """Load and validate a result.json file.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ValueError: If the loaded result fails validation.
    """
    path = Path(result_path)
    with open(path) as f:
        result = json.load(f)

    errors = validate_result(result)
    if errors:
        raise ValueError(
            f"Result validation failed for {path}:\n"
            + "\n".join(f"  - {e}" for e in errors)
        )

    return result
