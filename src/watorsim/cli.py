"""Command-line entry point for the Wa-Tor simulation.

Runs either in text mode (ANSI grid in the terminal, optional CSV stats)
or in graphics mode (animated matplotlib window).
"""

import argparse
import logging
import sys

from watorsim.core.config import ConfigError, RunConfig, WorldConfig

logger = logging.getLogger(__name__)

SEPARATOR_WIDTH = 17


def build_parser() -> argparse.ArgumentParser:
    defaults_world = WorldConfig()
    defaults_run = RunConfig()

    parser = argparse.ArgumentParser(
        prog="watorsim",
        description="Wa-Tor predator-prey simulation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Default text-mode run
  watorsim

  # Bigger ocean on 4 worker threads, stats to CSV, no printing
  watorsim --grid-size 200 --num-fish 8000 --num-shark 2000 --threads 4 --print-every 0 --csv stats.csv

  # Animated window
  watorsim --graphics --steps 500
        """,
    )

    parser.add_argument("--num-shark", type=int, default=defaults_world.num_shark,
                        help="Starting population of sharks (default: %(default)s)")
    parser.add_argument("--num-fish", type=int, default=defaults_world.num_fish,
                        help="Starting population of fish (default: %(default)s)")
    parser.add_argument("--fish-breed", type=int, default=defaults_world.fish_breed,
                        help="Chronons before a fish can reproduce (default: %(default)s)")
    parser.add_argument("--shark-breed", type=int, default=defaults_world.shark_breed,
                        help="Chronons before a shark can reproduce (default: %(default)s)")
    parser.add_argument("--starve", type=int, default=defaults_world.starve,
                        help="Chronons a shark can live without food (default: %(default)s)")
    parser.add_argument("--grid-size", type=int, default=defaults_world.grid_size,
                        help="Grid dimension, NxN (default: %(default)s)")
    parser.add_argument("--threads", type=int, default=defaults_world.workers,
                        help="Number of worker threads per step (default: %(default)s)")
    parser.add_argument("--steps", type=int, default=defaults_run.steps,
                        help="Number of simulation steps (default: %(default)s)")
    parser.add_argument("--print-every", type=int, default=defaults_run.print_every,
                        help="How often to print the grid, 0 = never (default: %(default)s)")
    parser.add_argument("--csv", type=str, default=None, metavar="FILENAME",
                        help="Optional CSV file for population statistics (e.g. stats.csv)")
    parser.add_argument("--graphics", action="store_true",
                        help="Run with an animated window instead of text output")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed for reproducible runs (optional)")
    parser.add_argument("--log-level", type=str, default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging level (default: %(default)s)")
    return parser


def configs_from_args(args: argparse.Namespace) -> tuple[WorldConfig, RunConfig]:
    """Build and validate configs from parsed arguments."""
    world_config = WorldConfig(
        num_fish=args.num_fish,
        num_shark=args.num_shark,
        fish_breed=args.fish_breed,
        shark_breed=args.shark_breed,
        starve=args.starve,
        grid_size=args.grid_size,
        workers=args.threads,
    )
    run_config = RunConfig(
        steps=args.steps,
        print_every=args.print_every,
        csv_path=args.csv,
        graphics=args.graphics,
        seed=args.seed,
    )
    return world_config.validate(), run_config.validate()


def log_summary(world_config: WorldConfig, run_config: RunConfig) -> None:
    logger.info("Wa-Tor Simulation")
    logger.info("-" * SEPARATOR_WIDTH)
    logger.info("Sharks      : %d", world_config.num_shark)
    logger.info("Fish        : %d", world_config.num_fish)
    logger.info("FishBreed   : %d", world_config.fish_breed)
    logger.info("SharkBreed  : %d", world_config.shark_breed)
    logger.info("Starve      : %d", world_config.starve)
    logger.info("GridSize    : %d x %d", world_config.grid_size, world_config.grid_size)
    logger.info("Threads     : %d", world_config.workers)
    logger.info("Steps       : %d", run_config.steps)
    logger.info("PrintEvery  : %d", run_config.print_every)
    if run_config.csv_path:
        logger.info("CSV output  : %s", run_config.csv_path)
    logger.info("Mode        : %s", "graphics" if run_config.graphics else "text")


def main(argv=None) -> int:
    """Parse command-line arguments and run the simulation."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )

    try:
        world_config, run_config = configs_from_args(args)
    except ConfigError as e:
        logger.error("Error: %s", e)
        return 1

    log_summary(world_config, run_config)

    from watorsim.simulation import run_graphical, run_simulation

    if run_config.graphics:
        run_graphical(world_config, run_config)
    else:
        run_simulation(world_config, run_config)
    return 0


if __name__ == "__main__":
    sys.exit(main())
