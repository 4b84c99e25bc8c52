"""Main entry point for the creature population simulation.

The defaults reproduce the classic run: three starting creatures, rich
rules, 20 cycles. Every knob can be changed from the command line.
"""

import argparse
import logging
import sys
from typing import List, Optional

from evosim.config.simulation_config import SimulationConfig
from evosim.config.world import (
    DEFAULT_CYCLES,
    DEFAULT_FOOD_SPAWN_CHANCE,
    DEFAULT_NAMES_PATH,
    DEFAULT_ROSTER,
    DEFAULT_SPAWN_CHANCE,
    DEFAULT_VARIANT,
)
from evosim.exceptions import ConfigurationError, MissingNameResourceError
from evosim.export import export_stats_json
from evosim.logging_config import LOG_LEVELS, configure_logging
from evosim.names import NameProvider
from evosim.rulesets import RULESETS
from evosim.runner import SimulationResult, SimulationRunner
from evosim.world import World

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Creature Population Simulation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Classic run (rich rules, 20 cycles)
  python main.py

  # Reproducible run with the simple rules
  python main.py --variant simple --cycles 50 --seed 42

  # Export per-cycle stats
  python main.py --cycles 100 --export-stats results.json
        """,
    )

    parser.add_argument(
        "--cycles",
        type=int,
        default=DEFAULT_CYCLES,
        help=f"Number of cycles to simulate (default: {DEFAULT_CYCLES})",
    )

    parser.add_argument(
        "--variant",
        choices=sorted(RULESETS),
        default=DEFAULT_VARIANT,
        help=f"Rule variant (default: {DEFAULT_VARIANT})",
    )

    parser.add_argument(
        "--spawn-chance",
        type=float,
        default=DEFAULT_SPAWN_CHANCE,
        help=f"Chance of a spontaneous creature spawn per cycle (default: {DEFAULT_SPAWN_CHANCE})",
    )

    parser.add_argument(
        "--food-spawn-chance",
        type=float,
        default=DEFAULT_FOOD_SPAWN_CHANCE,
        help=f"Initial chance of a food spawn per cycle (default: {DEFAULT_FOOD_SPAWN_CHANCE})",
    )

    parser.add_argument(
        "--names",
        default=DEFAULT_NAMES_PATH,
        metavar="FILE",
        help=f"Name list, one name per line (default: {DEFAULT_NAMES_PATH})",
    )

    parser.add_argument(
        "--roster",
        nargs="+",
        default=list(DEFAULT_ROSTER),
        metavar="NAME",
        help="Names of the starting creatures (default: %(default)s)",
    )

    parser.add_argument(
        "--max-population",
        type=int,
        default=None,
        help="Override the variant's population cap (optional)",
    )

    parser.add_argument(
        "--seed", type=int, default=None, help="Random seed for deterministic behavior (optional)"
    )

    parser.add_argument(
        "--export-stats",
        type=str,
        default=None,
        metavar="FILENAME",
        help="Export per-cycle stats to a JSON file (e.g., results.json)",
    )

    parser.add_argument(
        "--log-level",
        type=str.lower,
        choices=LOG_LEVELS,
        default=None,
        help="Log level (default: EVOSIM_LOG_LEVEL env var or info)",
    )

    return parser


def config_from_args(args: argparse.Namespace) -> SimulationConfig:
    return SimulationConfig(
        spawn_chance=args.spawn_chance,
        food_spawn_chance=args.food_spawn_chance,
        cycles=args.cycles,
        roster=tuple(args.roster),
        names_path=args.names,
        variant=args.variant,
        seed=args.seed,
        max_population=args.max_population,
    )


def run_simulation(config: SimulationConfig, names: NameProvider) -> SimulationResult:
    """Build a World from ``config`` and run it to completion."""
    world = World(
        spawn_chance=config.spawn_chance,
        food_spawn_chance=config.food_spawn_chance,
        rules=config.rules(),
        rng=config.make_rng(),
        names=names,
        max_population=config.max_population,
    )
    world.populate(config.roster)
    return SimulationRunner(world).run(config.cycles)


def main(argv: Optional[List[str]] = None) -> int:
    """Parse command-line arguments and run the simulation."""
    args = build_parser().parse_args(argv)
    config = config_from_args(args)
    try:
        configure_logging(level=args.log_level)
        config.validate()
        # The name list must exist before any cycle runs.
        names = NameProvider.from_file(config.names_path, strict=True)
    except MissingNameResourceError as e:
        logger.error("Error: %s. Please ensure it exists in the project directory.", e)
        return 1
    except ConfigurationError as e:
        logger.error("Invalid configuration: %s", e)
        return 2

    result = run_simulation(config, names)

    if args.export_stats:
        export_stats_json(result, config, args.export_stats)

    return 0


if __name__ == "__main__":
    sys.exit(main())
