"""
Core engine primitives.

This layer knows NOTHING about plotting, terminals or CSV files.
It only knows:
- Creatures (fish, sharks) and the toroidal grid that holds them
- Update rules reading a previous grid and writing a next grid
- Steppers that apply the rules to a whole grid for one chronon
- The World that owns the live grid between chronons

Two steppers are available:
- SequentialStepper: fish pass then shark pass on one thread
- ParallelStepper: row bands on worker threads, merged shark-beats-fish
"""

from watorsim.core.creature import CellKind, Creature
from watorsim.core.grid import Grid, DIRECTIONS
from watorsim.core.config import WorldConfig, RunConfig, ConfigError
from watorsim.core.rng import (
    RandomSource,
    NumpyRandomSource,
    LockedRandomSource,
    SequenceRandomSource,
    create_random_source,
)
from watorsim.core.rules import update_fish, update_shark
from watorsim.core.sequential import Stepper, SequentialStepper, run_passes
from watorsim.core.parallel import ParallelStepper, partition_rows, merge_grids, worker_occupancy
from watorsim.core.world import World

__all__ = [
    "CellKind",
    "Creature",
    "Grid",
    "DIRECTIONS",
    "WorldConfig",
    "RunConfig",
    "ConfigError",
    "RandomSource",
    "NumpyRandomSource",
    "LockedRandomSource",
    "SequenceRandomSource",
    "create_random_source",
    "update_fish",
    "update_shark",
    "Stepper",
    "SequentialStepper",
    "run_passes",
    "ParallelStepper",
    "partition_rows",
    "merge_grids",
    "worker_occupancy",
    "World",
]
