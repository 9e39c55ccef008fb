#!/usr/bin/env python3
"""Entry point for walking a node network with cyclic instructions.

Chains all stages into a single executable command:
parse input -> build transition table -> single-path walk ->
multi-path synchronization -> result.json.

Usage:
    python run_navigation.py --input input1.txt
    python run_navigation.py --config config.json --part 2
    python run_navigation.py --config config.json --dry-run
    python run_navigation.py --input input1.txt --max-steps 1000000 --verbose
"""

import argparse
import logging
import sys
import time
from contextlib import contextmanager
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Generator

from nodewalk.config import (
    DEFAULT_CONFIG,
    NavigationConfig,
    config_from_json,
    full_config_hash,
)
from nodewalk.errors import NavigationError
from nodewalk.parsing import ParseError
from nodewalk.results import generate_run_id
from nodewalk.walk.types import SyncResult, WalkResult

log = logging.getLogger(__name__)


@contextmanager
def stage_timer(name: str) -> Generator[None, None, None]:
    """Context manager that prints stage banners with elapsed time."""
    print(f"\n=== {name} ===")
    log.info("Starting: %s", name)
    t0 = time.monotonic()
    yield
    elapsed = time.monotonic() - t0
    print(f"... done in {elapsed:.3f}s")
    log.info("Completed: %s in %.3fs", name, elapsed)


@dataclass(frozen=True)
class NavigationOutcome:
    """Everything a run computed; parts that were disabled are None."""

    single: WalkResult | None
    sync: SyncResult | None
    run_id: str | None


def run_navigation(
    config: NavigationConfig,
    results_dir: str | Path = "results",
    save: bool = True,
) -> NavigationOutcome:
    """Execute every enabled stage for one input file.

    Args:
        config: Navigation configuration.
        results_dir: Base directory for results output.
        save: Write result.json when True.

    Returns:
        NavigationOutcome with the single-path walk, the synchronized
        walks, and the run ID (None when not saved).
    """
    from nodewalk.network import (
        build_transition_table,
        check_goal_reachable,
        dangling_targets,
    )
    from nodewalk.parsing import read_network
    from nodewalk.results import build_metrics, file_hash, write_result
    from nodewalk.walk import (
        InstructionSequencer,
        exact_match,
        find_start_nodes,
        suffix_match,
        synchronize_walks,
        verify_periodicity,
        walk_path,
    )

    max_steps = config.walk.max_steps

    # ── Stage 1: Parse ─────────────────────────────────────────────
    with stage_timer("Parse Input"):
        network = read_network(config.input_path)

    # ── Stage 2: Transition Table ──────────────────────────────────
    with stage_timer("Build Transition Table"):
        table = build_transition_table(network.records)
        sequencer = InstructionSequencer(network.instructions)
        log.info(
            "Table: %d nodes, instruction period %d",
            len(table), len(sequencer),
        )
        for source, target in dangling_targets(table):
            log.warning("Node %s points at %s, which has no record", source, target)

    # ── Stage 3: Single-Path Walk ──────────────────────────────────
    single = None
    if config.single.enabled:
        with stage_timer("Single-Path Walk"):
            start, goal = config.single.start, config.single.goal
            is_goal = exact_match(goal)
            if config.walk.check_reachability:
                check_goal_reachable(table, start, is_goal)
            single = walk_path(start, is_goal, table, sequencer.restart(), max_steps)
            print(f"Steps {start} -> {goal}: {single.steps}")

    # ── Stage 4: Multi-Path Synchronization ────────────────────────
    sync = None
    if config.multi.enabled:
        with stage_timer("Multi-Path Synchronization"):
            start_suffix = config.multi.start_suffix
            goal_suffix = config.multi.goal_suffix
            is_goal = suffix_match(goal_suffix)
            starts = find_start_nodes(
                table, suffix_match(start_suffix), pattern=f"*{start_suffix}"
            )
            log.info("Start nodes (%d): %s", len(starts), ", ".join(starts))
            if config.walk.check_reachability:
                for start in starts:
                    check_goal_reachable(table, start, is_goal)
            sync = synchronize_walks(
                starts, is_goal, table, network.instructions, max_steps
            )
            if config.walk.verify_periodicity:
                for result in sync.walks:
                    verify_periodicity(
                        result, is_goal, table, network.instructions, max_steps
                    )
                log.info("All %d walks are periodic", len(sync.walks))
            for result in sync.walks:
                print(f"  {result.start} -> {result.end}: {result.steps}")
            print(f"Synchronized steps: {sync.steps}")

    # ── Stage 5: Result JSON ───────────────────────────────────────
    run_id = None
    if save:
        with stage_timer("Write Result JSON"):
            metrics = build_metrics(
                single_path_steps=single.steps if single else None,
                synchronized_steps=sync.steps if sync else None,
                walks=list(sync.walks) if sync else [],
            )
            run_id = write_result(
                config,
                metrics,
                metadata={
                    "input_hash": file_hash(config.input_path),
                    "instruction_length": len(network.instructions),
                    "node_count": len(table),
                },
                results_dir=results_dir,
            )
            print(f"Result: {Path(results_dir) / run_id / 'result.json'}")

    return NavigationOutcome(single=single, sync=sync, run_id=run_id)


def apply_overrides(config: NavigationConfig, args: argparse.Namespace) -> NavigationConfig:
    """Fold command-line flags into the loaded config."""
    if args.input is not None:
        config = replace(config, input_path=args.input)
    if args.part is not None:
        config = replace(
            config,
            single=replace(config.single, enabled=args.part in ("1", "both")),
            multi=replace(config.multi, enabled=args.part in ("2", "both")),
        )
    if args.max_steps is not None:
        config = replace(config, walk=replace(config.walk, max_steps=args.max_steps))
    if args.verify_periodicity:
        config = replace(config, walk=replace(config.walk, verify_periodicity=True))
    if args.no_reachability_check:
        config = replace(config, walk=replace(config.walk, check_reachability=False))
    return config


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Walk a left/right node network with cyclic instructions"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to navigation config JSON file",
    )
    parser.add_argument(
        "--input",
        type=str,
        default=None,
        help="Path to the network input file (overrides config input_path)",
    )
    parser.add_argument(
        "--part",
        choices=("1", "2", "both"),
        default=None,
        help="Run the single-path walk (1), the synchronized walks (2), or both",
    )
    parser.add_argument(
        "--max-steps",
        type=int,
        default=None,
        help="Fail any walk that takes more than this many steps",
    )
    parser.add_argument(
        "--verify-periodicity",
        action="store_true",
        help="Check that every synchronized walk returns to a goal periodically",
    )
    parser.add_argument(
        "--no-reachability-check",
        action="store_true",
        help="Skip the graph reachability pre-check",
    )
    parser.add_argument(
        "--results-dir",
        type=str,
        default="results",
        help="Base directory for result.json output",
    )
    parser.add_argument(
        "--no-save",
        action="store_true",
        help="Print results without writing result.json",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show the plan without walking",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable DEBUG-level logging",
    )
    args = parser.parse_args()

    # Configure logging
    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Load config
    config = DEFAULT_CONFIG
    if args.config is not None:
        config_path = Path(args.config)
        if not config_path.exists():
            print(f"Error: config file not found: {config_path}", file=sys.stderr)
            sys.exit(1)
        try:
            config = config_from_json(config_path.read_text())
        except Exception as e:
            print(f"Error: invalid config {config_path}: {e}", file=sys.stderr)
            sys.exit(1)
    try:
        config = apply_overrides(config, args)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"Input:       {config.input_path}")
    print(f"Config hash: {full_config_hash(config)}")

    if args.dry_run:
        print(f"\nNavigation plan for run {generate_run_id(config)}:")
        print(f"  1. Parse input: {config.input_path}")
        print("  2. Build transition table")
        if config.single.enabled:
            print(f"  3. Single-path walk: {config.single.start} -> {config.single.goal}")
        if config.multi.enabled:
            print(
                f"  4. Multi-path synchronization: *{config.multi.start_suffix} -> "
                f"*{config.multi.goal_suffix}"
            )
        print(f"  Step ceiling: {config.walk.max_steps or 'none'}")
        if not args.no_save:
            print(f"\nOutput: {args.results_dir}/<run_id>/result.json")
        print("\n[dry-run] Config loaded successfully. Exiting.")
        return

    try:
        run_navigation(config, results_dir=args.results_dir, save=not args.no_save)
    except (NavigationError, ParseError, FileNotFoundError) as e:
        log.error("Navigation failed: %s", e)
        print(f"Error: {type(e).__name__}: {e}", file=sys.stderr)
        sys.exit(1)
    except Exception:
        log.exception("Navigation failed")
        sys.exit(1)


if __name__ == "__main__":
    main()
