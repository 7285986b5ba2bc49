"""
Run loop: drive a World for a number of steps in text or graphics mode.

Text mode, per step:
1. record the counts (history and optional CSV row)
2. every print_every steps, print the colored grid
3. advance one chronon (parallel when workers > 1)
"""

from __future__ import annotations
import logging
import sys
import time
from contextlib import ExitStack
from typing import TextIO

from watorsim.analysis.population import PopulationHistory
from watorsim.core.config import RunConfig, WorldConfig
from watorsim.core.world import World
from watorsim.stats import StatsWriter
from watorsim.viz.text import print_frame

logger = logging.getLogger(__name__)


def run_simulation(
    world_config: WorldConfig,
    run_config: RunConfig,
    stream: TextIO | None = None,
    world: World | None = None,
) -> PopulationHistory:
    """
    Run a text-mode simulation.

    Args:
        world_config: World parameters
        run_config: Run parameters (steps, printing, CSV, seed)
        stream: Where frames are printed (stdout if None)
        world: Existing world to drive instead of building one

    Returns:
        Population history, one entry per step before stepping
    """
    world_config.validate()
    run_config.validate()
    stream = stream if stream is not None else sys.stdout

    if world is None:
        world = World(world_config, seed=run_config.seed)
    history = PopulationHistory()

    with ExitStack() as stack:
        stats = None
        if run_config.csv_path:
            stats = stack.enter_context(StatsWriter(run_config.csv_path))
            logger.info("Writing population statistics to %s", run_config.csv_path)

        start = time.perf_counter()
        for step in range(run_config.steps):
            fish, sharks = history.record(world)
            if stats is not None:
                stats.write(step, fish, sharks)

            if run_config.print_every > 0 and step % run_config.print_every == 0:
                print_frame(world, stream=stream)
                if run_config.frame_delay > 0:
                    time.sleep(run_config.frame_delay)

            world.advance()

        elapsed = time.perf_counter() - start

    fish, sharks = world.count()
    logger.info(
        "Simulation finished in %.3fs (%d steps, fish=%d, sharks=%d)",
        elapsed, run_config.steps, fish, sharks,
    )
    return history


def run_graphical(world_config: WorldConfig, run_config: RunConfig) -> PopulationHistory:
    """Run the simulation in an animated window, recording counts per step."""
    # Imported here so text mode never needs a GUI backend
    from watorsim.viz.animation import run_graphics

    world_config.validate()
    run_config.validate()

    world = World(world_config, seed=run_config.seed)
    history = PopulationHistory()
    history.record(world)

    with ExitStack() as stack:
        stats = None
        if run_config.csv_path:
            stats = stack.enter_context(StatsWriter(run_config.csv_path))
            stats.write(0, *world.count())

        def on_step(w: World) -> None:
            fish, sharks = history.record(w)
            if stats is not None:
                stats.write(w.chronon, fish, sharks)

        run_graphics(world, run_config.steps, on_step=on_step)

    return history
