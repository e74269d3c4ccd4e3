"""
Giftwrap CLI - Main entry point.

Runs the hull engine over a YAML point file, in batch or step-by-step mode,
and prints JSON on stdout (one snapshot per line when stepping).
"""

import argparse
import json
import sys
from typing import Any, Dict, List, Optional, Sequence

from giftwrap_hull import HullStepper, PointSet, jarvis_march_indices
from giftwrap_hull.errors import HullError
from giftwrap_hull.logging import LogEvent, create_logger

from .config import RunConfig, LoggingConfig, VALID_LOG_LEVELS


def hull_payload(point_set: PointSet, indices: Sequence[int]) -> Dict[str, Any]:
    """JSON-compatible hull description."""
    return {
        'hull': [list(point_set[index].to_tuple()) for index in indices],
        'indices': list(indices),
    }


def run_solve(config: RunConfig, level: int) -> Dict[str, Any]:
    """
    Batch solve the configured points.

    Returns:
        Hull payload

    Raises:
        InsufficientPointsError: If fewer than 3 points
    """
    logger = create_logger("solver", level=level)
    point_set = PointSet.from_points(config.points)
    indices = jarvis_march_indices(point_set, logger=logger)
    return hull_payload(point_set, indices)


def run_step(config: RunConfig, level: int) -> List[Dict[str, Any]]:
    """
    Step through the configured points.

    Returns:
        One dict per step, followed by a summary dict with the hull

    Raises:
        InsufficientPointsError: If fewer than 3 points
    """
    logger = create_logger("stepper", level=level)
    stepper = HullStepper(config.points, logger=logger)

    records: List[Dict[str, Any]] = []
    while not stepper.is_done:
        if config.max_steps is not None and stepper.step_count >= config.max_steps:
            break
        records.append(stepper.step().to_dict())

    summary = hull_payload(stepper.points, stepper.hull_indices)
    summary['steps'] = stepper.step_count
    summary['finished'] = stepper.is_done
    records.append(summary)
    return records


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Giftwrap CLI - Convex hull by gift wrapping (Jarvis March)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Hull in one call
  giftwrap solve config/points/square.yaml

  # One JSON snapshot per step (pipe into a renderer)
  giftwrap step config/points/square.yaml

  # Stop after 10 steps, verbose logs on stderr
  giftwrap --log-level DEBUG step config/points/square.yaml --max-steps 10
"""
    )

    # Global arguments
    parser.add_argument(
        "--log-level",
        choices=VALID_LOG_LEVELS,
        default=None,
        help="Override the log level from the config file"
    )

    # Subcommands
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    solve = subparsers.add_parser('solve', help='Compute the hull in one call')
    solve.add_argument('config', help='Path to points YAML')

    step = subparsers.add_parser('step', help='Print one snapshot per algorithm step')
    step.add_argument('config', help='Path to points YAML')
    step.add_argument(
        '--max-steps',
        type=int,
        default=None,
        help='Stop after this many steps (default: run to completion)'
    )

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        config = RunConfig.from_yaml(args.config)

        if args.log_level:
            level = LoggingConfig(level=args.log_level).level_value
        else:
            level = config.logging_config.level_value

        if args.command == 'solve':
            print(json.dumps(run_solve(config, level)))

        elif args.command == 'step':
            if args.max_steps is not None:
                config = RunConfig(
                    points=config.points,
                    max_steps=args.max_steps,
                    logging_config=config.logging_config,
                )
            for record in run_step(config, level):
                print(json.dumps(record))

    except HullError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except (FileNotFoundError, ValueError) as e:
        create_logger("cli").error(
            event=LogEvent.CONFIG_ERROR,
            message="Could not load run configuration",
            metadata={'config': args.config},
            exc_info=e,
        )
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
