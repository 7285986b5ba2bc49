"""
Creatures and cell contents.

A cell of the grid is either empty water or holds exactly one creature.
Creatures are plain values: the grid stores their fields in arrays and
hands out fresh Creature objects on read.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import IntEnum


class CellKind(IntEnum):
    """What occupies a cell. The integer values are stored in the grid."""

    EMPTY = 0
    FISH = 1
    SHARK = 2


@dataclass(frozen=True)
class Creature:
    """
    A fish or a shark.

    breed counts chronons since the last successful reproduction (or since
    birth). energy only matters for sharks; fish carry 0.
    """

    kind: CellKind
    breed: int = 0
    energy: int = 0

    def __post_init__(self):
        if self.kind == CellKind.EMPTY:
            raise ValueError("A creature cannot be of kind EMPTY")
        if self.breed < 0 or self.energy < 0:
            raise ValueError("breed and energy must be non-negative")

    @classmethod
    def fish(cls, breed: int = 0) -> Creature:
        return cls(CellKind.FISH, breed=breed, energy=0)

    @classmethod
    def shark(cls, energy: int, breed: int = 0) -> Creature:
        return cls(CellKind.SHARK, breed=breed, energy=energy)

    @property
    def is_fish(self) -> bool:
        return self.kind == CellKind.FISH

    @property
    def is_shark(self) -> bool:
        return self.kind == CellKind.SHARK
