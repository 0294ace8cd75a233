"""
Demo: A glider crossing the torus.

The glider is the smallest spaceship: every 4 generations it reappears
one cell down and one cell right. On a toroidal grid it never hits a wall;
after 4 * N generations on an N×N grid it returns to where it started.

The demo:
1. Places a glider on a small grid
2. Steps through one full period and shows each phase
3. Measures the displacement after each period
4. Runs until the glider wraps back to its starting position
"""

from pathlib import Path

import matplotlib.pyplot as plt

from lifesim.core import Grid, LifeRunner, RunnerConfig
from lifesim.patterns import GLIDER, place_pattern
from lifesim.analysis import shift_equivalent
from lifesim.viz import plot_generations, plot_population, save_figure


def main():
    """Run the glider demo."""
    print("=" * 60)
    print("Glider on a Torus")
    print("=" * 60)

    n = 8
    grid = Grid(n, n, place_pattern(GLIDER, n, n, row=0, col=0))
    start = grid.to_array()

    print(f"\n1. Setup:")
    print(f"   Grid: {n}x{n}")
    print(f"   Pattern: {GLIDER.name}, period={GLIDER.period}, "
          f"displacement={GLIDER.displacement}")

    # One full period, phase by phase
    print("\n2. One period:")
    runner = LifeRunner(grid, RunnerConfig(record_history=True))
    runner.run(GLIDER.period)
    for t, pop in enumerate(runner.population_history):
        print(f"   t={t}: population={pop}")

    shift = shift_equivalent(start, grid.to_array())
    print(f"   Shift after {GLIDER.period} generations: {shift}")

    # Full lap around the torus
    print("\n3. Running until the glider wraps around...")
    stats = runner.run(GLIDER.period * n - GLIDER.period)
    back_home = shift_equivalent(start, grid.to_array()) == (0, 0)
    print(f"   Generation: {stats['generation']}")
    print(f"   Back at start: {back_home}")
    print(f"   Detected cycle period: {stats['cycle_period']}")

    output_dir = Path("output")
    output_dir.mkdir(exist_ok=True)

    fig = plot_generations(runner.history[: GLIDER.period + 1])
    save_figure(fig, output_dir / "glider_phases.png")
    plt.close(fig)

    fig, _ = plot_population(runner.population_history, title="Glider population")
    save_figure(fig, output_dir / "glider_population.png")
    plt.close(fig)

    print(f"\nSaved figures to {output_dir}/")
    print("=" * 60)


if __name__ == "__main__":
    main()
