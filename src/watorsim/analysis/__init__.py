"""
Analysis layer: derived quantities for visualization and comparison.

IMPORTANT: This is NOT seen by the engine. One-way derivation only.

- PopulationHistory: fish/shark counts over chronons
- find_oscillation_peaks: predator-prey cycle detection
- compare_trajectories: statistical sequential-vs-parallel comparison
- density_field: wraparound-smoothed species density
"""

from watorsim.analysis.population import (
    PopulationHistory,
    TrajectoryComparison,
    compare_trajectories,
    find_oscillation_peaks,
)
from watorsim.analysis.density import density_field, occupancy_field

__all__ = [
    "PopulationHistory",
    "TrajectoryComparison",
    "compare_trajectories",
    "find_oscillation_peaks",
    "density_field",
    "occupancy_field",
]
