"""Unit tests for visualization helpers."""

import matplotlib
matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np
import pytest

from lifesim.core import Grid
from lifesim.viz import plot_cells, plot_grid, plot_generations, plot_population, save_figure


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


class TestPlotGrid:

    def test_default_title(self, glider_grid):
        fig, ax = plot_grid(glider_grid)
        assert ax.get_title() == "Generation 0 (population 5)"

    def test_uses_existing_axes(self, glider_grid):
        fig, ax = plt.subplots()
        fig2, ax2 = plot_grid(glider_grid, title="custom", ax=ax)
        assert fig2 is fig
        assert ax2 is ax
        assert ax.get_title() == "custom"

    def test_image_matches_cells(self, glider_grid):
        _, ax = plot_cells(glider_grid.to_array(), gridlines=True)
        image = ax.get_images()[0].get_array()
        assert np.array_equal(np.asarray(image), glider_grid.to_array().astype(np.uint8))


class TestPlotGenerations:

    def test_one_panel_per_state(self):
        states = [np.zeros((3, 3), dtype=bool) for _ in range(3)]
        fig = plot_generations(states)
        assert len(fig.axes) == 3
        assert fig.axes[2].get_title() == "t=2"

    def test_single_state(self):
        fig = plot_generations([np.ones((2, 2), dtype=bool)])
        assert len(fig.axes) == 1

    def test_empty_raises(self):
        with pytest.raises(ValueError):
            plot_generations([])


class TestPlotPopulation:

    def test_line_data(self):
        _, ax = plot_population([5, 4, 4, 3])
        line = ax.get_lines()[0]
        assert list(line.get_ydata()) == [5, 4, 4, 3]


def test_save_figure(tmp_path, empty_grid):
    fig, _ = plot_grid(empty_grid)
    path = tmp_path / "grid.png"
    save_figure(fig, path)
    assert path.exists()
