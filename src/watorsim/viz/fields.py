"""
2D visualization of the ocean.

Provides heatmaps and time series for:
- the grid itself: water, fish, sharks
- smoothed species densities
- population trajectories (and sequential-vs-parallel overlays)

All plots use matplotlib with sensible defaults.
"""

from __future__ import annotations
from pathlib import Path
from typing import TYPE_CHECKING

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.colors import ListedColormap, BoundaryNorm
from matplotlib.figure import Figure
from matplotlib.axes import Axes

from watorsim.analysis.density import density_field
from watorsim.core.creature import CellKind

if TYPE_CHECKING:
    from watorsim.core.world import World
    from watorsim.analysis.population import PopulationHistory


# Colors indexed by CellKind value
WATER_COLOR = (0.0, 10 / 255, 40 / 255)        # Dark "water" background
FISH_COLOR = (0.0, 200 / 255, 1.0)             # Cyan-ish fish
SHARK_COLOR = (1.0, 100 / 255, 50 / 255)       # Orange-ish shark

CMAP_OCEAN = ListedColormap([WATER_COLOR, FISH_COLOR, SHARK_COLOR], name="ocean")
NORM_OCEAN = BoundaryNorm([-0.5, 0.5, 1.5, 2.5], CMAP_OCEAN.N)

CMAP_FISH = "YlGnBu"
CMAP_SHARK = "YlOrRd"


def _kinds_of(source: "World | np.ndarray") -> np.ndarray:
    if isinstance(source, np.ndarray):
        return source
    return source.snapshot()


def plot_world(
    source: "World | np.ndarray",
    title: str | None = None,
    ax: Axes | None = None,
    figsize: tuple[float, float] = (6, 6),
) -> tuple[Figure, Axes]:
    """
    Plot the grid: water, fish and sharks in flat colors.

    Args:
        source: A World or a [y, x] kind array
        title: Plot title (defaults to chronon and counts for a World)
        ax: Existing axes to plot on (creates new figure if None)
        figsize: Figure size if creating new figure

    Returns:
        (fig, ax) tuple
    """
    kinds = _kinds_of(source)

    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    ax.imshow(kinds, cmap=CMAP_OCEAN, norm=NORM_OCEAN, interpolation="nearest")

    if title is None:
        fish = int(np.count_nonzero(kinds == CellKind.FISH))
        sharks = int(np.count_nonzero(kinds == CellKind.SHARK))
        title = f"Fish: {fish}   Sharks: {sharks}"
        if not isinstance(source, np.ndarray):
            title = f"Step {source.chronon}   " + title

    ax.set_title(title)
    ax.set_xticks([])
    ax.set_yticks([])

    return fig, ax


def plot_density(
    source: "World | np.ndarray",
    kind: CellKind,
    sigma: float = 1.5,
    title: str | None = None,
    ax: Axes | None = None,
    colorbar: bool = True,
    figsize: tuple[float, float] = (7, 6),
) -> tuple[Figure, Axes]:
    """Plot the smoothed density of one species."""
    field = density_field(_kinds_of(source), kind, sigma=sigma)

    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    cmap = CMAP_FISH if kind == CellKind.FISH else CMAP_SHARK
    im = ax.imshow(field, cmap=cmap, vmin=0, aspect="equal")
    if colorbar:
        plt.colorbar(im, ax=ax, fraction=0.046, pad=0.04)

    ax.set_title(title or f"{kind.name.capitalize()} density (σ={sigma})")
    ax.set_xlabel("x")
    ax.set_ylabel("y")

    return fig, ax


def plot_population(
    history: "PopulationHistory",
    title: str = "Population",
    ax: Axes | None = None,
    label_suffix: str = "",
    linestyle: str = "-",
    show_peaks: bool = False,
    figsize: tuple[float, float] = (10, 5),
) -> tuple[Figure, Axes]:
    """
    Plot fish and shark counts over time.

    Args:
        history: Recorded population history
        title: Plot title
        ax: Existing axes (creates new if None)
        label_suffix: Appended to legend labels (for overlays)
        linestyle: Line style for both species
        show_peaks: Mark detected oscillation peaks

    Returns:
        (fig, ax) tuple
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    chronons, fish, sharks = history.as_arrays()
    ax.plot(chronons, fish, linestyle, color=FISH_COLOR, label=f"Fish{label_suffix}")
    ax.plot(chronons, sharks, linestyle, color=SHARK_COLOR, label=f"Sharks{label_suffix}")

    if show_peaks and len(history) > 0:
        peaks = history.peaks()
        ax.scatter(peaks["fish"], fish[np.isin(chronons, peaks["fish"])],
                   color=FISH_COLOR, marker="^", zorder=3)
        ax.scatter(peaks["sharks"], sharks[np.isin(chronons, peaks["sharks"])],
                   color=SHARK_COLOR, marker="^", zorder=3)

    ax.set_xlabel("Chronon")
    ax.set_ylabel("Population")
    ax.set_title(title)
    ax.legend()
    ax.grid(True, alpha=0.3)

    return fig, ax


def plot_trajectory_comparison(
    sequential: "PopulationHistory",
    parallel: "PopulationHistory",
    workers: int,
    figsize: tuple[float, float] = (10, 5),
) -> tuple[Figure, Axes]:
    """Overlay a sequential and a parallel population trajectory."""
    fig, ax = plot_population(sequential, label_suffix=" (1 worker)", figsize=figsize)
    plot_population(
        parallel,
        ax=ax,
        label_suffix=f" ({workers} workers)",
        linestyle="--",
        title=f"Sequential vs {workers} workers",
    )
    return fig, ax


def plot_world_summary(
    world: "World",
    history: "PopulationHistory | None" = None,
    sigma: float = 1.5,
    figsize: tuple[float, float] = (16, 4),
) -> Figure:
    """
    Plot grid, fish density, shark density and optionally the trajectory.

    Returns:
        Figure with 3-4 subplots
    """
    n_plots = 4 if history is not None else 3
    fig, axes = plt.subplots(1, n_plots, figsize=figsize)

    plot_world(world, ax=axes[0])
    plot_density(world, CellKind.FISH, sigma=sigma, ax=axes[1])
    plot_density(world, CellKind.SHARK, sigma=sigma, ax=axes[2])

    if history is not None:
        plot_population(history, ax=axes[3])

    fig.tight_layout()
    return fig


def save_figure(fig: Figure, path: str | Path, dpi: int = 150, **kwargs) -> None:
    """Save figure to file."""
    fig.savefig(path, dpi=dpi, bbox_inches="tight", **kwargs)
