"""Unit tests for analysis module."""

import numpy as np
import pytest

from watorsim.analysis.density import density_field, occupancy_field
from watorsim.analysis.population import (
    PopulationHistory,
    compare_trajectories,
    find_oscillation_peaks,
)
from watorsim.core import CellKind, World, WorldConfig


def history_from(fish, sharks) -> PopulationHistory:
    return PopulationHistory(chronons=list(range(len(fish))), fish=list(fish), sharks=list(sharks))


class TestPopulationHistory:
    """Tests for PopulationHistory."""

    def test_record(self, small_world_config):
        world = World(small_world_config, seed=0)
        history = PopulationHistory()

        assert history.record(world) == (30, 8)
        world.step()
        history.record(world)

        assert len(history) == 2
        assert history.chronons == [0, 1]
        assert history.fish[0] == 30

    def test_as_arrays(self):
        chronons, fish, sharks = history_from([1, 2, 3], [4, 5, 6]).as_arrays()
        assert chronons.tolist() == [0, 1, 2]
        assert fish.dtype == np.int64
        assert sharks.tolist() == [4, 5, 6]

    def test_peaks_in_chronons(self):
        history = PopulationHistory(
            chronons=[10, 11, 12, 13, 14],
            fish=[0, 5, 0, 5, 0],
            sharks=[3, 3, 3, 3, 3],
        )
        peaks = history.peaks()
        assert peaks["fish"].tolist() == [11, 13]
        assert peaks["sharks"].size == 0


class TestOscillationPeaks:
    """Tests for find_oscillation_peaks."""

    def test_sine_wave(self):
        t = np.linspace(0, 6 * np.pi, 300)
        series = 100 + 50 * np.sin(t)
        assert len(find_oscillation_peaks(series)) == 3

    def test_flat_series(self):
        assert find_oscillation_peaks(np.full(20, 7)).size == 0

    def test_short_series(self):
        assert find_oscillation_peaks([1, 5]).size == 0

    def test_small_wiggles_ignored(self):
        series = np.array([0, 100, 0, 1, 0.5, 1, 0, 100, 0], dtype=float)
        assert find_oscillation_peaks(series).tolist() == [1, 7]

    def test_explicit_prominence(self):
        series = np.array([0, 100, 0, 1, 0.5, 1, 0, 100, 0], dtype=float)
        assert len(find_oscillation_peaks(series, prominence=0.1)) == 4


class TestCompareTrajectories:
    """Tests for compare_trajectories."""

    def test_identical(self):
        history = history_from([100, 200, 100, 200, 100], [10, 20, 10, 20, 10])
        result = compare_trajectories(history, history)

        assert result.fish_magnitude_gap == 0.0
        assert result.shark_magnitude_gap == 0.0
        assert result.same_order_of_magnitude
        assert result.fish_peaks == (2, 2)

    def test_magnitude_gap(self):
        a = history_from([999] * 4, [9] * 4)
        b = history_from([9] * 4, [9] * 4)
        result = compare_trajectories(a, b)

        assert result.fish_magnitude_gap == pytest.approx(2.0)
        assert not result.same_order_of_magnitude

    def test_extinct_both(self):
        a = history_from([0] * 3, [0] * 3)
        result = compare_trajectories(a, a)
        assert result.same_order_of_magnitude
        assert result.mean_sharks == (0.0, 0.0)

    def test_empty_history(self):
        with pytest.raises(ValueError):
            compare_trajectories(PopulationHistory(), history_from([1], [1]))


class TestDensity:
    """Tests for occupancy and density fields."""

    def test_occupancy(self):
        kinds = np.array([[0, 1], [2, 1]])
        assert occupancy_field(kinds, CellKind.FISH).tolist() == [[0.0, 1.0], [0.0, 1.0]]
        assert occupancy_field(kinds, CellKind.SHARK).sum() == 1.0

    def test_smoothing_preserves_total(self):
        world = World(WorldConfig(num_fish=40, num_shark=10, grid_size=12), seed=1)
        field = density_field(world.snapshot(), CellKind.FISH, sigma=2.0)
        assert field.sum() == pytest.approx(40.0)

    def test_wraps_around_edges(self):
        kinds = np.zeros((16, 16), dtype=np.int8)
        kinds[0, 0] = CellKind.SHARK
        field = density_field(kinds, CellKind.SHARK, sigma=1.0)
        # Mass spreads across the corner onto the opposite edges
        assert field[15, 15] > 0
        assert field[0, 15] == pytest.approx(field[0, 1])

    def test_zero_sigma_is_raw_occupancy(self):
        kinds = np.array([[1, 0], [0, 1]])
        assert np.array_equal(density_field(kinds, CellKind.FISH, sigma=0), occupancy_field(kinds, CellKind.FISH))
