"""
Smoothed population density fields.

A raw snapshot is a field of 0/1 occupancy per species. Gaussian
coarse-graining with wraparound turns it into a density map that shows
shoals of fish and packs of sharks rather than individual cells.
"""

from __future__ import annotations

import numpy as np
from scipy.ndimage import gaussian_filter

from watorsim.core.creature import CellKind


def occupancy_field(kinds: np.ndarray, kind: CellKind) -> np.ndarray:
    """1.0 where a cell holds the given kind, 0.0 elsewhere."""
    return (np.asarray(kinds) == kind).astype(np.float64)


def density_field(kinds: np.ndarray, kind: CellKind, sigma: float = 1.5) -> np.ndarray:
    """
    Gaussian-smoothed density of one species on the torus.

    Smoothing preserves the total: the field sums to the population count.

    Args:
        kinds: [y, x] kind array (World.snapshot())
        kind: FISH or SHARK
        sigma: Gaussian sigma in cells (0 = no smoothing)

    Returns:
        Density field [y, x]
    """
    field = occupancy_field(kinds, kind)
    if sigma > 0:
        # Periodic boundary
        field = gaussian_filter(field, sigma=sigma, mode="wrap")
    return field
