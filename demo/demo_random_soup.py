"""
Demo: Random soup settling down.

A random initial state (each cell alive with probability 1/2) quickly
loses most of its population and settles into still lifes, oscillators
and the odd glider. The run stops early if the grid dies out or starts
repeating exactly.
"""

from pathlib import Path

import numpy as np
import matplotlib.pyplot as plt

from lifesim.core import Grid, LifeRunner, RunnerConfig, random_seed
from lifesim.analysis import population_density
from lifesim.viz import plot_grid, plot_population, save_figure


def main():
    """Run the random soup demo."""
    rows, cols = 64, 64
    density = 0.5
    n_generations = 500

    rng = np.random.default_rng(seed=42)  # For reproducibility

    print("=" * 60)
    print("Random Soup")
    print("=" * 60)

    grid = Grid(rows, cols, random_seed(density, rng))
    print(f"\n1. Setup:")
    print(f"   Grid: {rows}x{cols}")
    print(f"   Initial density: {population_density(grid):.3f}")

    output_dir = Path("output")
    output_dir.mkdir(exist_ok=True)
    fig, _ = plot_grid(grid)
    save_figure(fig, output_dir / "soup_initial.png")
    plt.close(fig)

    print(f"\n2. Running up to {n_generations} generations...")
    runner = LifeRunner(
        grid,
        RunnerConfig(stop_on_extinction=True, stop_on_cycle=True),
    )
    stats = runner.run(n_generations)

    print(f"   Generations run: {stats['generations_run']}")
    print(f"   Final population: {stats['population']}")
    print(f"   Min / max population: {stats['min_population']} / {stats['max_population']}")
    print(f"   Final density: {population_density(grid):.3f}")
    if stats["extinct"]:
        print("   Outcome: extinct")
    elif stats["cycle_period"] is not None:
        print(f"   Outcome: cycle of period {stats['cycle_period']}")
    else:
        print("   Outcome: still evolving")

    fig, _ = plot_grid(grid)
    save_figure(fig, output_dir / "soup_final.png")
    plt.close(fig)

    fig, _ = plot_population(runner.population_history)
    save_figure(fig, output_dir / "soup_population.png")
    plt.close(fig)

    print(f"\nSaved figures to {output_dir}/")
    print("=" * 60)


if __name__ == "__main__":
    main()
