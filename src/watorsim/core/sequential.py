"""
Sequential stepper: one chronon on a single thread.

Two ordered passes share one next grid:
1. every fish of the previous grid (row-major order)
2. every shark of the previous grid (row-major order)

Sharks look for prey in the previous grid, where fish still sit at their
pre-move positions. Fish a shark ate are removed from the next grid once
both passes are done, wherever they moved to.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from watorsim.core.creature import CellKind
from watorsim.core.grid import Grid
from watorsim.core.rules import update_fish, update_shark

if TYPE_CHECKING:
    from watorsim.core.config import WorldConfig
    from watorsim.core.rng import RandomSource

logger = logging.getLogger(__name__)


class Stepper(Protocol):
    """Protocol for anything that can advance a grid by one chronon."""

    def step(self, prev: Grid, rng: "RandomSource") -> Grid:
        """Return a brand-new grid; prev must be left untouched."""
        ...


def run_passes(
    prev: Grid,
    nxt: Grid,
    config: "WorldConfig",
    rng: "RandomSource",
    rows: range | None = None,
) -> None:
    """
    Apply the fish pass then the shark pass for the given rows.

    Shared by the sequential stepper (all rows) and by each parallel
    worker (its own row range, its own next grid).
    """
    for x, y, fish in prev.iter_creatures(CellKind.FISH, rows):
        update_fish(x, y, fish, prev, nxt, config, rng)

    for x, y, shark in prev.iter_creatures(CellKind.SHARK, rows):
        update_shark(x, y, shark, prev, nxt, config, rng)


@dataclass
class SequentialStepper:
    """Single-threaded two-pass stepper."""

    config: "WorldConfig"

    def step(self, prev: Grid, rng: "RandomSource") -> Grid:
        nxt = Grid(prev.size)
        run_passes(prev, nxt, self.config, rng)
        removed = nxt.settle()
        if removed:
            logger.debug("Removed %d eaten fish after shark pass", removed)
        return nxt
