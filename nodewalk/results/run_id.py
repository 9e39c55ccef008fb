"""Run ID generation with scannable slug format."""

from datetime import datetime, timezone
from pathlib import Path

from nodewalk.config.navigation import NavigationConfig


def generate_run_id(config: NavigationConfig) -> str:
    """Generate a scannable run ID from config parameters.

    Format: {input_stem}_{start}-{goal}_{YYYYMMDD}_{HHMMSS}
    Example: input1_AAA-ZZZ_20261018_143012
    """
    ts = datetime.now(timezone.utc)
    return (
        f"{Path(config.input_path).stem}"
        f"_{config.single.start}-{config.single.goal}"
        f"_{ts.strftime('%Y%m%d_%H%M%S')}"
    )
