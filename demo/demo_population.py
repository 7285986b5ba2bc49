"""
Demo: Predator-Prey Oscillations in Wa-Tor.

The demo:
1. Builds a 60x60 ocean with mostly fish and a few sharks
2. Runs 400 chronons, recording both populations
3. Detects oscillation peaks in each trajectory
4. Plots the final grid, species densities and the trajectories
"""

import matplotlib.pyplot as plt
from pathlib import Path

from watorsim.core import World, WorldConfig
from watorsim.analysis import PopulationHistory
from watorsim.viz import plot_population, plot_world_summary, save_figure


def main():
    """Run the population oscillation demo."""
    print("=" * 60)
    print("Wa-Tor Population Oscillations")
    print("=" * 60)

    print("\n1. Setting up the ocean...")
    config = WorldConfig(
        num_fish=1200,
        num_shark=150,
        fish_breed=3,
        shark_breed=8,
        starve=4,
        grid_size=60,
    )
    world = World(config, seed=42)

    print(f"   Grid size: {config.grid_size}x{config.grid_size}")
    print(f"   Fish: {config.num_fish}, breed every {config.fish_breed} chronons")
    print(f"   Sharks: {config.num_shark}, breed every {config.shark_breed}, starve after {config.starve}")

    print("\n2. Running simulation...")
    n_chronons = 400
    history = PopulationHistory()
    for i in range(n_chronons):
        history.record(world)
        world.step()
        if (i + 1) % 100 == 0:
            fish, sharks = world.count()
            print(f"   Chronon {i + 1}: fish={fish}, sharks={sharks}")
        if world.is_extinct():
            print(f"   Both species extinct at chronon {world.chronon}")
            break

    print("\n3. Detecting oscillations...")
    peaks = history.peaks()
    print(f"   Fish peaks:  {len(peaks['fish'])} at chronons {peaks['fish'].tolist()[:8]}")
    print(f"   Shark peaks: {len(peaks['sharks'])} at chronons {peaks['sharks'].tolist()[:8]}")

    print("\n4. Creating visualization...")
    output_dir = Path("output")
    output_dir.mkdir(exist_ok=True)

    fig = plot_world_summary(world, history)
    output_path = output_dir / "wator_summary.png"
    save_figure(fig, output_path)
    print(f"   Saved to: {output_path}")

    fig, _ = plot_population(history, title="Fish and sharks over time", show_peaks=True)
    output_path = output_dir / "wator_population.png"
    save_figure(fig, output_path)
    print(f"   Saved to: {output_path}")

    plt.show()

    print("\n" + "=" * 60)
    print("Demo complete!")
    print("=" * 60)

    return history


if __name__ == "__main__":
    main()
