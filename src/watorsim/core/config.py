"""
Configuration for a world and for a run.

WorldConfig is fixed for the lifetime of a World. RunConfig only concerns
the run loop around it (how many steps, what to print, where to log).
Both validate eagerly so bad parameters fail before any chronon runs.
"""

from __future__ import annotations
from dataclasses import dataclass


class ConfigError(ValueError):
    """Invalid simulation parameters."""


@dataclass(frozen=True)
class WorldConfig:
    """Parameters of a Wa-Tor world."""

    num_fish: int = 200     # Starting fish population
    num_shark: int = 100    # Starting shark population
    fish_breed: int = 3     # Chronons before a fish can reproduce
    shark_breed: int = 5    # Chronons before a shark can reproduce
    starve: int = 3         # Chronons a shark survives without food (also its full energy)
    grid_size: int = 20     # Grid is grid_size x grid_size, toroidal
    workers: int = 1        # 1 = sequential step, >1 = row-partitioned parallel step

    @property
    def capacity(self) -> int:
        """Number of cells in the grid."""
        return self.grid_size * self.grid_size

    def validate(self) -> WorldConfig:
        """Raise ConfigError if the parameters cannot describe a world. Returns self."""
        if self.num_fish < 0 or self.num_shark < 0:
            raise ConfigError(
                f"Populations must be non-negative (fish={self.num_fish}, sharks={self.num_shark})"
            )
        if self.grid_size <= 0:
            raise ConfigError(f"Grid size must be positive, got {self.grid_size}")
        for name in ("fish_breed", "shark_breed", "starve"):
            value = getattr(self, name)
            if value <= 0:
                raise ConfigError(f"{name} must be positive, got {value}")
        if self.workers <= 0:
            raise ConfigError(f"workers must be positive, got {self.workers}")
        if self.num_fish + self.num_shark > self.capacity:
            raise ConfigError(
                f"More creatures than cells in the grid: "
                f"{self.num_fish} fish + {self.num_shark} sharks > {self.capacity} cells"
            )
        return self


@dataclass(frozen=True)
class RunConfig:
    """Parameters of a simulation run."""

    steps: int = 200                # Number of chronons to simulate
    print_every: int = 20           # Print the grid every N steps in text mode (0 = never)
    csv_path: str | None = None     # Optional CSV file for population statistics
    graphics: bool = False          # Animated matplotlib window instead of text mode
    seed: int | None = None         # Seed for the random source (None = fresh entropy)
    frame_delay: float = 0.05       # Seconds to pause after each printed frame

    def validate(self) -> RunConfig:
        if self.steps <= 0:
            raise ConfigError(f"steps must be > 0, got {self.steps}")
        if self.print_every < 0:
            raise ConfigError(f"print_every must be >= 0, got {self.print_every}")
        if self.frame_delay < 0:
            raise ConfigError(f"frame_delay must be >= 0, got {self.frame_delay}")
        return self
