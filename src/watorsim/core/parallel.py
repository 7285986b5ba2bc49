"""
Parallel stepper: one chronon split by rows across workers.

Each worker:
- owns a contiguous band of rows
- owns a private next grid of full size (creatures may move one row out
  of the band, or across the wrapped top/bottom edge)
- runs the same fish and shark passes as the sequential stepper, reading
  the one shared previous grid

Workers are fresh threads for every step and are all joined before the
merge. Nothing is locked while they run: the previous grid is never
written, and each private grid has exactly one writer.

Merge policy, cell by cell, scanning workers in index order:
- shark beats fish
- same kind: the lowest worker index wins
"""

from __future__ import annotations
import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Sequence

import numpy as np

from watorsim.core.creature import CellKind
from watorsim.core.grid import Grid
from watorsim.core.sequential import SequentialStepper, run_passes

if TYPE_CHECKING:
    from watorsim.core.config import WorldConfig
    from watorsim.core.rng import RandomSource

logger = logging.getLogger(__name__)


def partition_rows(n_rows: int, workers: int) -> list[range]:
    """
    Split rows into contiguous bands, one per worker.

    Workers are capped at the row count. Bands have ceil(n_rows / workers)
    rows; trailing workers that would get no rows are dropped.

    Args:
        n_rows: Number of grid rows
        workers: Requested worker count (>= 1)

    Returns:
        List of row ranges covering [0, n_rows) without overlap
    """
    if workers < 1:
        raise ValueError(f"workers must be >= 1, got {workers}")
    workers = min(workers, n_rows)
    rows_per_worker = (n_rows + workers - 1) // workers

    bands = []
    for start in range(0, n_rows, rows_per_worker):
        bands.append(range(start, min(start + rows_per_worker, n_rows)))
    return bands


def merge_grids(grids: Sequence[Grid]) -> Grid:
    """
    Merge private next grids into one, then remove eaten fish.

    For every cell the first creature found (in worker order) is kept,
    unless a later worker wrote a shark over a kept fish.
    """
    if not grids:
        raise ValueError("Nothing to merge")
    size = grids[0].size
    merged = Grid(size)

    for grid in grids:
        free = merged.kind == CellKind.EMPTY
        upgrade = (merged.kind == CellKind.FISH) & (grid.kind == CellKind.SHARK)
        take = (free & (grid.kind != CellKind.EMPTY)) | upgrade

        merged.kind[take] = grid.kind[take]
        merged.breed[take] = grid.breed[take]
        merged.energy[take] = grid.energy[take]
        merged.origin[take] = grid.origin[take]
        merged.eaten |= grid.eaten

    removed = merged.settle()
    if removed:
        logger.debug("Removed %d eaten fish after merge", removed)
    return merged


@dataclass
class ParallelStepper:
    """Row-partitioned stepper with a deterministic merge."""

    config: "WorldConfig"
    workers: int = 2

    # Cells written by more than one worker in the last step
    last_conflicts: int = field(default=0, init=False)

    def step(self, prev: Grid, rng: "RandomSource") -> Grid:
        if self.workers <= 1:
            return SequentialStepper(self.config).step(prev, rng)

        bands = partition_rows(prev.size, self.workers)
        sources = rng.spawn(len(bands))
        private = [Grid(prev.size) for _ in bands]

        logger.debug(
            "Parallel step: %d workers, %d rows each",
            len(bands), len(bands[0]),
        )

        with ThreadPoolExecutor(max_workers=len(bands)) as pool:
            futures = [
                pool.submit(run_passes, prev, grid, self.config, source, band)
                for band, grid, source in zip(bands, private, sources)
            ]
            # Re-raises any worker exception here
            for future in futures:
                future.result()

        self.last_conflicts = int(np.count_nonzero(worker_occupancy(private) > 1))
        if self.last_conflicts:
            logger.debug("Merge resolved %d contested cells", self.last_conflicts)
        return merge_grids(private)


def worker_occupancy(grids: Sequence[Grid]) -> np.ndarray:
    """
    Count how many private grids wrote a creature into each cell.

    Values above 1 mark cells the merge had to resolve.
    """
    occupancy = np.zeros(grids[0].shape, dtype=np.int32)
    for grid in grids:
        occupancy += grid.kind != CellKind.EMPTY
    return occupancy
