"""
Update rules: the fate of a single creature for one chronon.

Each rule reads ONLY the previous grid and writes ONLY into the next
grid. The previous grid is shared by every rule call in a step and never
mutated, so calls can run from several workers at once as long as each
worker has its own next grid.

Write-conflict policy inside one next grid:
- Fish never overwrite: the first writer of a cell wins
- A moving fish whose destination is already taken stays put
- A shark always takes its own destination cell
- Children are only ever placed into empty cells

Reproduction requires an actual move. A creature that stays in place
keeps accumulating its breed counter and breeds on its next move.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

from watorsim.core.creature import Creature

if TYPE_CHECKING:
    from watorsim.core.config import WorldConfig
    from watorsim.core.grid import Grid
    from watorsim.core.rng import RandomSource


def update_fish(
    x: int,
    y: int,
    fish: Creature,
    prev: "Grid",
    nxt: "Grid",
    config: "WorldConfig",
    rng: "RandomSource",
) -> None:
    """
    Move (and possibly breed) the fish at (x, y).

    Args:
        x, y: Fish position in the previous grid
        fish: The fish as stored in the previous grid
        prev: Previous grid (read-only)
        nxt: Next grid under construction
        config: Breed thresholds
        rng: Source for choosing among free neighbors
    """
    origin = (x, y)
    breed = fish.breed + 1

    empties = prev.empty_neighbors(x, y)
    if not empties:
        nxt.put_if_empty(x, y, Creature.fish(breed), origin)
        return

    dx, dy = empties[rng.randrange(len(empties))]

    # Somebody else already moved there this step
    if not nxt.is_empty(dx, dy):
        nxt.put_if_empty(x, y, Creature.fish(breed), origin)
        return

    if breed >= config.fish_breed:
        nxt.put_if_empty(x, y, Creature.fish(0), origin)
        nxt.put(dx, dy, Creature.fish(0), origin)
    else:
        nxt.put(dx, dy, Creature.fish(breed), origin)


def update_shark(
    x: int,
    y: int,
    shark: Creature,
    prev: "Grid",
    nxt: "Grid",
    config: "WorldConfig",
    rng: "RandomSource",
) -> None:
    """
    Starve, hunt, move and possibly breed the shark at (x, y).

    Adjacent fish take priority over empty water. Eating resets energy to
    config.starve. A shark whose energy drops to 0 disappears without
    writing anything.

    Args:
        x, y: Shark position in the previous grid
        shark: The shark as stored in the previous grid
        prev: Previous grid (read-only)
        nxt: Next grid under construction
        config: Breed and starve thresholds
        rng: Source for choosing among candidate neighbors
    """
    energy = shark.energy - 1
    if energy <= 0:
        return

    breed = shark.breed + 1
    dest = (x, y)
    ate = False

    prey = prev.fish_neighbors(x, y)
    if prey:
        dest = prey[rng.randrange(len(prey))]
        ate = True
    else:
        empties = prev.empty_neighbors(x, y)
        if empties:
            dest = empties[rng.randrange(len(empties))]

    if ate:
        energy = config.starve
        nxt.mark_eaten(*dest)
    elif dest != (x, y) and not nxt.is_empty(*dest):
        dest = (x, y)

    moved = dest != (x, y)
    if moved and breed >= config.shark_breed:
        nxt.put_if_empty(x, y, Creature.shark(config.starve), (x, y))
        breed = 0

    nxt.put(dest[0], dest[1], Creature.shark(energy, breed), (x, y))
