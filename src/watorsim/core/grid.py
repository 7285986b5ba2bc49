"""
Grid: the toroidal ocean that holds fish and sharks.

Storage is structure-of-arrays: one small integer array per creature
field, indexed [y, x]. An empty cell has kind 0; its breed/energy entries
are meaningless and kept at 0.

A grid plays one of two roles during a step:
- previous grid: read-only snapshot every update rule reads from
- next grid: buffer the update rules write into

Next grids also carry step bookkeeping:
- origin: flat index (y * size + x) of the previous-grid cell whose
  creature wrote each entry, -1 where nothing was written
- eaten: flat indices of previous-grid fish consumed by sharks
"""

from __future__ import annotations
from typing import Iterator

import numpy as np

from watorsim.core.creature import CellKind, Creature


# Neighbor order matters: random choices index into lists built in this order
DIRECTIONS = {
    "N": (0, -1),   # North: y decreases
    "E": (1, 0),    # East: x increases
    "S": (0, 1),    # South: y increases
    "W": (-1, 0),   # West: x decreases
}

NO_ORIGIN = -1


class Grid:
    """
    A square toroidal grid of optional creatures.

    Every cell has exactly four neighbors; coordinates wrap modulo size.
    """

    def __init__(self, size: int):
        if size <= 0:
            raise ValueError(f"Grid size must be positive, got {size}")
        self.size = size

        self.kind = np.zeros((size, size), dtype=np.int8)
        self.breed = np.zeros((size, size), dtype=np.int32)
        self.energy = np.zeros((size, size), dtype=np.int32)

        # Step bookkeeping (next grids only)
        self.origin = np.full((size, size), NO_ORIGIN, dtype=np.int64)
        self.eaten: set[int] = set()

    @property
    def shape(self) -> tuple[int, int]:
        """Return (rows, cols) grid dimensions."""
        return self.size, self.size

    @property
    def directions(self) -> list[str]:
        return list(DIRECTIONS.keys())

    # ───────────────────────────────────────────────────────────────
    # Cell access
    # ───────────────────────────────────────────────────────────────

    def kind_at(self, x: int, y: int) -> CellKind:
        return CellKind(int(self.kind[y, x]))

    def is_empty(self, x: int, y: int) -> bool:
        return self.kind[y, x] == CellKind.EMPTY

    def get(self, x: int, y: int) -> Creature | None:
        """Return the creature at (x, y), or None for empty water."""
        kind = int(self.kind[y, x])
        if kind == CellKind.EMPTY:
            return None
        return Creature(
            CellKind(kind),
            breed=int(self.breed[y, x]),
            energy=int(self.energy[y, x]),
        )

    def put(
        self,
        x: int,
        y: int,
        creature: Creature,
        origin: tuple[int, int] | None = None,
    ) -> None:
        """
        Write a creature into (x, y), replacing whatever is there.

        Args:
            x, y: Destination cell
            creature: Creature to store
            origin: Previous-grid cell the writer came from (next grids only)
        """
        self.kind[y, x] = creature.kind
        self.breed[y, x] = creature.breed
        self.energy[y, x] = creature.energy
        if origin is None:
            self.origin[y, x] = NO_ORIGIN
        else:
            ox, oy = origin
            self.origin[y, x] = oy * self.size + ox

    def put_if_empty(
        self,
        x: int,
        y: int,
        creature: Creature,
        origin: tuple[int, int] | None = None,
    ) -> bool:
        """First writer wins: write only into an empty cell. Returns True if written."""
        if not self.is_empty(x, y):
            return False
        self.put(x, y, creature, origin)
        return True

    def clear(self, x: int, y: int) -> None:
        self.kind[y, x] = CellKind.EMPTY
        self.breed[y, x] = 0
        self.energy[y, x] = 0
        self.origin[y, x] = NO_ORIGIN

    # ───────────────────────────────────────────────────────────────
    # Neighbor geometry
    # ───────────────────────────────────────────────────────────────

    def get_neighbor_coords(self, x: int, y: int, direction: str) -> tuple[int, int]:
        """Coordinates of the neighbor in a direction, wrapping at the edges."""
        dx, dy = DIRECTIONS[direction]
        return (x + dx) % self.size, (y + dy) % self.size

    def neighbors(self, x: int, y: int) -> list[tuple[int, int]]:
        """The four neighbors of (x, y) in N, E, S, W order."""
        return [self.get_neighbor_coords(x, y, d) for d in DIRECTIONS]

    def empty_neighbors(self, x: int, y: int) -> list[tuple[int, int]]:
        return [(nx, ny) for nx, ny in self.neighbors(x, y) if self.kind[ny, nx] == CellKind.EMPTY]

    def fish_neighbors(self, x: int, y: int) -> list[tuple[int, int]]:
        return [(nx, ny) for nx, ny in self.neighbors(x, y) if self.kind[ny, nx] == CellKind.FISH]

    # ───────────────────────────────────────────────────────────────
    # Iteration and counts
    # ───────────────────────────────────────────────────────────────

    def iter_cells(self) -> Iterator[tuple[int, int]]:
        """Iterate over all (x, y) cell coordinates, row by row."""
        for y in range(self.size):
            for x in range(self.size):
                yield x, y

    def iter_creatures(
        self,
        kind: CellKind,
        rows: range | None = None,
    ) -> Iterator[tuple[int, int, Creature]]:
        """
        Iterate over (x, y, creature) for every creature of one kind.

        Args:
            kind: FISH or SHARK
            rows: Restrict to these row indices (all rows if None)
        """
        if rows is None:
            rows = range(self.size)
        for y in rows:
            row = self.kind[y]
            for x in np.flatnonzero(row == kind):
                x = int(x)
                yield x, y, self.get(x, y)

    def count(self, kind: CellKind) -> int:
        return int(np.count_nonzero(self.kind == kind))

    def counts(self) -> tuple[int, int]:
        """Return (fish, sharks)."""
        return self.count(CellKind.FISH), self.count(CellKind.SHARK)

    # ───────────────────────────────────────────────────────────────
    # Step bookkeeping
    # ───────────────────────────────────────────────────────────────

    def mark_eaten(self, x: int, y: int) -> None:
        """Record that the previous-grid fish at (x, y) was eaten this step."""
        self.eaten.add(y * self.size + x)

    def settle(self) -> int:
        """
        Remove fish whose previous-grid origin was eaten.

        A fish moves before sharks act, so the shark that eats it lands on
        the cell the fish just left. This removes the fish from wherever
        it went. Returns the number of fish removed.
        """
        if not self.eaten:
            return 0
        eaten = np.fromiter(self.eaten, dtype=np.int64, count=len(self.eaten))
        doomed = (self.kind == CellKind.FISH) & np.isin(self.origin, eaten)
        removed = int(np.count_nonzero(doomed))
        self.kind[doomed] = CellKind.EMPTY
        self.breed[doomed] = 0
        self.energy[doomed] = 0
        self.origin[doomed] = NO_ORIGIN
        self.eaten.clear()
        return removed

    def copy(self) -> Grid:
        result = Grid(self.size)
        result.kind = self.kind.copy()
        result.breed = self.breed.copy()
        result.energy = self.energy.copy()
        result.origin = self.origin.copy()
        result.eaten = set(self.eaten)
        return result

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return (
            self.size == other.size
            and np.array_equal(self.kind, other.kind)
            and np.array_equal(self.breed, other.breed)
            and np.array_equal(self.energy, other.energy)
        )

    def __repr__(self) -> str:
        fish, sharks = self.counts()
        return f"Grid(size={self.size}, fish={fish}, sharks={sharks})"
