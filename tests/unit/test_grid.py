"""Unit tests for Grid and Creature."""

import dataclasses

import numpy as np
import pytest

from watorsim.core.creature import CellKind, Creature
from watorsim.core.grid import Grid, NO_ORIGIN


class TestCreature:
    """Tests for the Creature value."""

    def test_fish_factory(self):
        fish = Creature.fish(breed=2)
        assert fish.kind == CellKind.FISH
        assert fish.breed == 2
        assert fish.energy == 0
        assert fish.is_fish and not fish.is_shark

    def test_shark_factory(self):
        shark = Creature.shark(energy=4, breed=1)
        assert shark.kind == CellKind.SHARK
        assert shark.energy == 4
        assert shark.breed == 1
        assert shark.is_shark

    def test_empty_kind_rejected(self):
        with pytest.raises(ValueError):
            Creature(CellKind.EMPTY)

    def test_negative_values_rejected(self):
        with pytest.raises(ValueError):
            Creature.fish(breed=-1)
        with pytest.raises(ValueError):
            Creature.shark(energy=-1)

    def test_immutable(self):
        fish = Creature.fish()
        with pytest.raises(dataclasses.FrozenInstanceError):
            fish.breed = 3


class TestGrid:
    """Tests for Grid storage."""

    def test_creation(self):
        grid = Grid(5)
        assert grid.shape == (5, 5)
        assert grid.kind.shape == (5, 5)
        assert grid.counts() == (0, 0)
        assert np.all(grid.origin == NO_ORIGIN)
        assert grid.eaten == set()

    def test_invalid_size(self):
        with pytest.raises(ValueError):
            Grid(0)

    def test_put_and_get(self):
        grid = Grid(4)
        grid.put(1, 2, Creature.shark(energy=3, breed=2))

        assert grid.get(1, 2) == Creature.shark(energy=3, breed=2)
        assert grid.kind_at(1, 2) == CellKind.SHARK
        assert grid.get(2, 1) is None
        assert grid.kind_at(2, 1) == CellKind.EMPTY

    def test_put_records_origin(self):
        grid = Grid(4)
        grid.put(1, 2, Creature.fish(), origin=(3, 1))
        assert grid.origin[2, 1] == 1 * 4 + 3

    def test_put_if_empty_first_writer_wins(self):
        grid = Grid(4)
        assert grid.put_if_empty(0, 0, Creature.fish(breed=1)) is True
        assert grid.put_if_empty(0, 0, Creature.fish(breed=7)) is False
        assert grid.get(0, 0).breed == 1

    def test_clear(self):
        grid = Grid(4)
        grid.put(3, 3, Creature.shark(energy=2), origin=(2, 3))
        grid.clear(3, 3)
        assert grid.is_empty(3, 3)
        assert grid.origin[3, 3] == NO_ORIGIN
        assert grid.energy[3, 3] == 0

    def test_counts(self):
        grid = Grid(4)
        grid.put(0, 0, Creature.fish())
        grid.put(1, 0, Creature.fish())
        grid.put(2, 0, Creature.shark(energy=1))
        assert grid.count(CellKind.FISH) == 2
        assert grid.count(CellKind.SHARK) == 1
        assert grid.counts() == (2, 1)

    def test_copy_is_independent(self):
        grid = Grid(4)
        grid.put(0, 0, Creature.fish())
        clone = grid.copy()
        clone.put(1, 1, Creature.shark(energy=2))

        assert grid.is_empty(1, 1)
        assert not clone.is_empty(1, 1)

    def test_equality_by_contents(self):
        a = Grid(3)
        b = Grid(3)
        a.put(1, 1, Creature.fish(breed=2))
        assert a != b
        b.put(1, 1, Creature.fish(breed=2))
        assert a == b


class TestNeighborLookup:
    """Tests for toroidal neighbor geometry."""

    def test_interior_neighbors_order(self):
        grid = Grid(5)
        assert grid.neighbors(2, 2) == [(2, 1), (3, 2), (2, 3), (1, 2)]

    def test_wrap_at_origin(self):
        grid = Grid(5)
        # N, E, S, W
        assert grid.neighbors(0, 0) == [(0, 4), (1, 0), (0, 1), (4, 0)]

    def test_wrap_at_far_corner(self):
        grid = Grid(5)
        assert grid.get_neighbor_coords(4, 4, "E") == (0, 4)
        assert grid.get_neighbor_coords(4, 4, "S") == (4, 0)

    def test_every_cell_has_four_neighbors(self):
        grid = Grid(3)
        for x, y in grid.iter_cells():
            assert len(grid.neighbors(x, y)) == 4

    def test_empty_and_fish_neighbors(self):
        grid = Grid(3)
        grid.put(1, 0, Creature.fish())        # north of (1, 1)
        grid.put(2, 1, Creature.shark(energy=2))  # east of (1, 1)

        assert grid.fish_neighbors(1, 1) == [(1, 0)]
        assert grid.empty_neighbors(1, 1) == [(1, 2), (0, 1)]


class TestIteration:
    """Tests for cell and creature iteration."""

    def test_iter_cells_coverage(self):
        grid = Grid(4)
        cells = list(grid.iter_cells())
        assert len(cells) == 16
        assert set(cells) == {(x, y) for x in range(4) for y in range(4)}

    def test_iter_creatures_by_kind(self):
        grid = Grid(4)
        grid.put(3, 0, Creature.fish(breed=1))
        grid.put(0, 2, Creature.fish())
        grid.put(1, 1, Creature.shark(energy=2))

        fish = list(grid.iter_creatures(CellKind.FISH))
        assert [(x, y) for x, y, _ in fish] == [(3, 0), (0, 2)]
        assert fish[0][2] == Creature.fish(breed=1)

        sharks = list(grid.iter_creatures(CellKind.SHARK))
        assert [(x, y) for x, y, _ in sharks] == [(1, 1)]

    def test_iter_creatures_restricted_rows(self):
        grid = Grid(4)
        grid.put(0, 0, Creature.fish())
        grid.put(0, 3, Creature.fish())
        rows = list(grid.iter_creatures(CellKind.FISH, rows=range(2, 4)))
        assert [(x, y) for x, y, _ in rows] == [(0, 3)]


class TestSettle:
    """Tests for removal of eaten fish."""

    def test_settle_removes_fish_from_eaten_origin(self):
        grid = Grid(3)
        grid.put(2, 1, Creature.fish(), origin=(0, 1))   # moved away from (0, 1)
        grid.put(0, 0, Creature.fish(), origin=(0, 0))   # unrelated fish
        grid.mark_eaten(0, 1)

        removed = grid.settle()

        assert removed == 1
        assert grid.is_empty(2, 1)
        assert grid.kind_at(0, 0) == CellKind.FISH
        assert grid.eaten == set()

    def test_settle_leaves_sharks(self):
        grid = Grid(3)
        grid.put(0, 1, Creature.shark(energy=3), origin=(0, 1))
        grid.mark_eaten(0, 1)

        assert grid.settle() == 0
        assert grid.kind_at(0, 1) == CellKind.SHARK

    def test_settle_without_eaten_is_noop(self):
        grid = Grid(3)
        grid.put(1, 1, Creature.fish(), origin=(1, 1))
        assert grid.settle() == 0
        assert grid.counts() == (1, 0)
