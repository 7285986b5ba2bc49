"""
Population trajectories: recording, oscillation peaks, comparison.

Sequential and parallel runs are never bit-identical (each worker draws
from its own random stream), so they are compared statistically:
- mean population of each species
- order of magnitude of those means
- number of predator-prey oscillation peaks

IMPORTANT: This is NOT seen by the engine. One-way derivation only.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np
from scipy.signal import find_peaks

if TYPE_CHECKING:
    from watorsim.core.world import World


@dataclass
class PopulationHistory:
    """Fish and shark counts per recorded chronon."""

    chronons: list[int] = field(default_factory=list)
    fish: list[int] = field(default_factory=list)
    sharks: list[int] = field(default_factory=list)

    def record(self, world: "World") -> tuple[int, int]:
        """Append the world's current counts. Returns (fish, sharks)."""
        fish, sharks = world.count()
        self.chronons.append(world.chronon)
        self.fish.append(fish)
        self.sharks.append(sharks)
        return fish, sharks

    def __len__(self) -> int:
        return len(self.chronons)

    def as_arrays(self) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
        """Return (chronons, fish, sharks) as integer arrays."""
        return (
            np.asarray(self.chronons, dtype=np.int64),
            np.asarray(self.fish, dtype=np.int64),
            np.asarray(self.sharks, dtype=np.int64),
        )

    def peaks(self, prominence: float | None = None) -> dict[str, np.ndarray]:
        """Chronons at which each population peaks."""
        chronons, fish, sharks = self.as_arrays()
        return {
            "fish": chronons[find_oscillation_peaks(fish, prominence)],
            "sharks": chronons[find_oscillation_peaks(sharks, prominence)],
        }


def find_oscillation_peaks(series: np.ndarray, prominence: float | None = None) -> np.ndarray:
    """
    Indices of population peaks.

    Args:
        series: Population counts over time
        prominence: Minimum peak prominence; defaults to 10% of the
                    series range so sampling noise is not counted

    Returns:
        Integer index array (empty for flat or short series)
    """
    series = np.asarray(series, dtype=np.float64)
    if series.size < 3:
        return np.array([], dtype=np.int64)
    if prominence is None:
        span = float(series.max() - series.min())
        if span == 0:
            return np.array([], dtype=np.int64)
        prominence = 0.1 * span
    indices, _ = find_peaks(series, prominence=prominence)
    return indices.astype(np.int64)


@dataclass
class TrajectoryComparison:
    """Results of comparing two population trajectories."""

    mean_fish: tuple[float, float]
    mean_sharks: tuple[float, float]

    # |log10(mean_a) - log10(mean_b)| per species (0 when both are extinct)
    fish_magnitude_gap: float
    shark_magnitude_gap: float

    fish_peaks: tuple[int, int]
    shark_peaks: tuple[int, int]

    @property
    def same_order_of_magnitude(self) -> bool:
        return self.fish_magnitude_gap < 1.0 and self.shark_magnitude_gap < 1.0


def _magnitude_gap(a: float, b: float) -> float:
    # +1 keeps extinct (zero) means finite
    return abs(np.log10(a + 1.0) - np.log10(b + 1.0))


def compare_trajectories(a: PopulationHistory, b: PopulationHistory) -> TrajectoryComparison:
    """
    Compare two population trajectories statistically.

    Args:
        a, b: Histories to compare (e.g. 1 worker vs 4 workers)

    Returns:
        TrajectoryComparison
    """
    if len(a) == 0 or len(b) == 0:
        raise ValueError("Cannot compare empty population histories")

    _, fish_a, sharks_a = a.as_arrays()
    _, fish_b, sharks_b = b.as_arrays()

    mean_fish = (float(fish_a.mean()), float(fish_b.mean()))
    mean_sharks = (float(sharks_a.mean()), float(sharks_b.mean()))

    return TrajectoryComparison(
        mean_fish=mean_fish,
        mean_sharks=mean_sharks,
        fish_magnitude_gap=_magnitude_gap(*mean_fish),
        shark_magnitude_gap=_magnitude_gap(*mean_sharks),
        fish_peaks=(len(find_oscillation_peaks(fish_a)), len(find_oscillation_peaks(fish_b))),
        shark_peaks=(len(find_oscillation_peaks(sharks_a)), len(find_oscillation_peaks(sharks_b))),
    )
