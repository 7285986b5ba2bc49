"""
World: owns the live grid and advances it chronon by chronon.

The world exposes exactly one grid at any time. A step builds a new grid
from the current one and swaps it in only once it is complete, so
introspection between steps never sees a half-built grid. Introspection
and stepping must not run concurrently on the same world.
"""

from __future__ import annotations
import logging

import numpy as np

from watorsim.core.config import WorldConfig
from watorsim.core.creature import CellKind, Creature
from watorsim.core.grid import Grid
from watorsim.core.parallel import ParallelStepper
from watorsim.core.rng import RandomSource, create_random_source
from watorsim.core.sequential import SequentialStepper

logger = logging.getLogger(__name__)


class World:
    """
    A Wa-Tor world: fixed configuration plus the current grid.

    Construction places num_fish fish and then num_shark sharks on
    distinct random cells. Sharks start with full energy (config.starve).
    """

    def __init__(
        self,
        config: WorldConfig,
        rng: RandomSource | None = None,
        seed: int | None = None,
        grid: Grid | None = None,
    ):
        """
        Args:
            config: World parameters (validated here)
            rng: Random source for placement and movement
            seed: Seed for the default source when rng is None
            grid: Starting grid to copy instead of random placement
        """
        self.config = config.validate()
        self.rng = rng if rng is not None else create_random_source(seed)
        self.chronon = 0

        self._sequential = SequentialStepper(config)
        self._parallel = ParallelStepper(config, workers=config.workers)

        self._grid = self._populate() if grid is None else grid.copy()

    @classmethod
    def from_grid(
        cls,
        config: WorldConfig,
        grid: Grid,
        rng: RandomSource | None = None,
        seed: int | None = None,
    ) -> World:
        """
        Build a world around a hand-made grid, skipping random placement.

        config.num_fish / num_shark are not checked against the grid.
        """
        if grid.size != config.grid_size:
            raise ValueError(
                f"Grid size {grid.size} does not match config grid_size {config.grid_size}"
            )
        return cls(config, rng=rng, seed=seed, grid=grid)

    def _populate(self) -> Grid:
        cfg = self.config
        grid = Grid(cfg.grid_size)
        positions = self.rng.permutation(cfg.capacity)

        for pos in positions[:cfg.num_fish]:
            grid.put(pos % cfg.grid_size, pos // cfg.grid_size, Creature.fish())

        for pos in positions[cfg.num_fish:cfg.num_fish + cfg.num_shark]:
            grid.put(pos % cfg.grid_size, pos // cfg.grid_size, Creature.shark(cfg.starve))

        logger.debug(
            "Placed %d fish and %d sharks on a %dx%d grid",
            cfg.num_fish, cfg.num_shark, cfg.grid_size, cfg.grid_size,
        )
        return grid

    # ═══════════════════════════════════════════════════════════════
    # STEPPING
    # ═══════════════════════════════════════════════════════════════

    def step(self) -> None:
        """Advance one chronon on the calling thread."""
        self._grid = self._sequential.step(self._grid, self.rng)
        self.chronon += 1

    def step_parallel(self, workers: int | None = None) -> None:
        """
        Advance one chronon using row-partitioned workers.

        Args:
            workers: Worker count (config.workers if None); 1 means sequential
        """
        if workers is None:
            workers = self.config.workers
        if workers <= 1:
            self.step()
            return
        self._parallel.workers = workers
        self._grid = self._parallel.step(self._grid, self.rng)
        self.chronon += 1

    def advance(self) -> None:
        """Advance one chronon the way the configuration asks for."""
        if self.config.workers > 1:
            self.step_parallel(self.config.workers)
        else:
            self.step()

    def run(self, n_chronons: int) -> dict:
        """
        Advance n chronons.

        Returns:
            Statistics dictionary
        """
        for _ in range(n_chronons):
            self.advance()

        fish, sharks = self.count()
        return {
            "n_chronons": n_chronons,
            "chronon": self.chronon,
            "fish": fish,
            "sharks": sharks,
            "max_energy": self.max_shark_energy(),
        }

    # ═══════════════════════════════════════════════════════════════
    # INTROSPECTION (only between steps)
    # ═══════════════════════════════════════════════════════════════

    @property
    def size(self) -> int:
        return self.config.grid_size

    @property
    def grid(self) -> Grid:
        """A copy of the current grid."""
        return self._grid.copy()

    def cell_at(self, x: int, y: int) -> CellKind:
        """Kind of creature at (x, y); coordinates wrap."""
        return self._grid.kind_at(x % self.size, y % self.size)

    def creature_at(self, x: int, y: int) -> Creature | None:
        return self._grid.get(x % self.size, y % self.size)

    def count(self) -> tuple[int, int]:
        """Return (fish, sharks)."""
        return self._grid.counts()

    @property
    def population(self) -> dict[str, int]:
        fish, sharks = self.count()
        return {"fish": fish, "sharks": sharks}

    def is_extinct(self) -> bool:
        """True once both species are gone (further steps are no-ops)."""
        return self.count() == (0, 0)

    def snapshot(self) -> np.ndarray:
        """Copy of the [y, x] kind array (values are CellKind ints)."""
        return self._grid.kind.copy()

    def max_shark_energy(self) -> int:
        sharks = self._grid.kind == CellKind.SHARK
        if not np.any(sharks):
            return 0
        return int(self._grid.energy[sharks].max())

    @property
    def last_conflicts(self) -> int:
        """Cells contested between workers in the last parallel step."""
        return self._parallel.last_conflicts

    def __repr__(self) -> str:
        fish, sharks = self.count()
        return f"World(size={self.size}, chronon={self.chronon}, fish={fish}, sharks={sharks})"
