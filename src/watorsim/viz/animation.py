"""
Graphical renderer: an animated matplotlib window.

Each animation frame advances the world one chronon and redraws the
grid with a HUD line showing the step and both populations. The
animation stops once the requested number of steps has run.
"""

from __future__ import annotations
import logging
from typing import TYPE_CHECKING, Callable

import matplotlib.pyplot as plt
from matplotlib.animation import FuncAnimation

from watorsim.viz.fields import CMAP_OCEAN, NORM_OCEAN, WATER_COLOR

if TYPE_CHECKING:
    from watorsim.core.world import World

logger = logging.getLogger(__name__)


def hud_text(world: "World", steps: int) -> str:
    fish, sharks = world.count()
    return f"Step: {world.chronon} / {steps}   Fish: {fish}   Sharks: {sharks}"


def animate_world(
    world: "World",
    steps: int,
    interval_ms: int = 66,
    on_step: Callable[["World"], None] | None = None,
    figsize: tuple[float, float] = (6, 6.4),
) -> FuncAnimation:
    """
    Build an animation that steps the world once per frame.

    Args:
        world: World to advance (mutated by the animation)
        steps: Total chronons to run
        interval_ms: Delay between frames
        on_step: Called with the world after every chronon (stats hooks)
        figsize: Window size in inches

    Returns:
        The FuncAnimation (keep a reference while it runs)
    """
    fig, ax = plt.subplots(figsize=figsize)
    fig.patch.set_facecolor(WATER_COLOR)
    ax.set_axis_off()

    image = ax.imshow(world.snapshot(), cmap=CMAP_OCEAN, norm=NORM_OCEAN, interpolation="nearest")
    hud = ax.set_title(hud_text(world, steps), color="white", loc="left", fontsize=10)

    def redraw():
        image.set_data(world.snapshot())
        hud.set_text(hud_text(world, steps))
        return image, hud

    def update(_frame: int):
        world.advance()
        if on_step is not None:
            on_step(world)
        return redraw()

    return FuncAnimation(
        fig,
        update,
        frames=steps,
        init_func=redraw,
        interval=interval_ms,
        blit=False,
        repeat=False,
    )


def run_graphics(
    world: "World",
    steps: int,
    interval_ms: int = 66,
    on_step: Callable[["World"], None] | None = None,
) -> FuncAnimation:
    """Open a window and animate until steps are done or the window closes."""
    logger.info("Opening graphics window (%dx%d grid)", world.size, world.size)
    anim = animate_world(world, steps, interval_ms=interval_ms, on_step=on_step)
    manager = plt.gcf().canvas.manager
    if manager is not None:
        manager.set_window_title("Wa-Tor Simulation")
    plt.show()
    return anim
