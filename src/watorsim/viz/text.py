"""
ANSI text rendering of the grid.

Fish are a green 'f', sharks a red 'S', empty water a blue '.'.
"""

from __future__ import annotations
import os
import sys
from typing import TYPE_CHECKING, TextIO

import numpy as np

from watorsim.core.creature import CellKind

if TYPE_CHECKING:
    from watorsim.core.world import World


RESET = "\033[0m"
BLUE = "\033[34m"
GREEN = "\033[32m"
RED = "\033[31m"

GLYPHS = {
    CellKind.EMPTY: f"{BLUE}.{RESET}",
    CellKind.FISH: f"{GREEN}f{RESET}",
    CellKind.SHARK: f"{RED}S{RESET}",
}

PLAIN_GLYPHS = {
    CellKind.EMPTY: ".",
    CellKind.FISH: "f",
    CellKind.SHARK: "S",
}


def render_text(source: "World | np.ndarray", color: bool = True) -> str:
    """
    Render the grid as text, one line per row, cells separated by spaces.

    Args:
        source: A World or a [y, x] kind array
        color: Wrap glyphs in ANSI color codes
    """
    kinds = source if isinstance(source, np.ndarray) else source.snapshot()
    glyphs = GLYPHS if color else PLAIN_GLYPHS
    lines = []
    for row in kinds:
        lines.append(" ".join(glyphs[CellKind(int(k))] for k in row) + " ")
    return "\n".join(lines)


def print_frame(world: "World", stream: TextIO | None = None, clear: bool = True) -> None:
    """Print a step header, the counts and the colored grid."""
    stream = stream if stream is not None else sys.stdout
    if clear:
        clear_screen(stream)
    fish, sharks = world.count()
    print(f"Step {world.chronon}", file=stream)
    print(f"Fish={fish}  Sharks={sharks}", file=stream)
    print(render_text(world), file=stream)


def clear_screen(stream: TextIO | None = None) -> None:
    """Clear the terminal: 'cls' on Windows, ANSI escapes elsewhere."""
    stream = stream if stream is not None else sys.stdout
    if os.name == "nt" and stream is sys.stdout:
        os.system("cls")
    else:
        stream.write("\033[2J\033[H")
