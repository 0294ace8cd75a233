"""Unit tests for seed functions."""

import numpy as np
import pytest

from lifesim.core import Grid
from lifesim.core.seeds import all_dead, random_seed, from_sequence, from_live_cells


class TestAllDead:

    def test_empty_grid(self):
        grid = Grid(4, 4, all_dead())
        assert grid.population() == 0


class TestRandomSeed:
    """Tests for the random seed."""

    def test_density_zero(self, rng):
        grid = Grid(10, 10, random_seed(0.0, rng))
        assert grid.population() == 0

    def test_density_one(self, rng):
        grid = Grid(10, 10, random_seed(1.0, rng))
        assert grid.population() == 100

    def test_default_density_is_half(self, rng):
        grid = Grid(100, 100, random_seed(rng=rng))
        assert np.isclose(grid.population() / 10_000, 0.5, atol=0.03)

    def test_reproducible(self):
        a = Grid(20, 20, random_seed(0.3, np.random.default_rng(7)))
        b = Grid(20, 20, random_seed(0.3, np.random.default_rng(7)))
        assert a == b

    @pytest.mark.parametrize("density", [-0.1, 1.5])
    def test_density_out_of_range(self, density):
        with pytest.raises(ValueError, match="density"):
            random_seed(density)

    def test_without_rng(self):
        grid = Grid(5, 5, random_seed(1.0))
        assert grid.population() == 25


class TestFromSequence:

    def test_reads_by_index(self):
        grid = Grid(2, 3, from_sequence([0, 1, 1, 0, 0, 1]))
        assert grid.cells() == [False, True, True, False, False, True]

    def test_sequence_copied(self):
        values = [True, False, False, False]
        seed = from_sequence(values)
        values[1] = True
        assert Grid(2, 2, seed).population() == 1


class TestFromLiveCells:

    def test_alive_exactly_at_coords(self):
        live = [(0, 1), (2, 3)]
        grid = Grid(3, 4, from_live_cells(live, cols=4))
        assert grid.population() == 2
        assert grid.is_alive(0, 1)
        assert grid.is_alive(2, 3)
        assert not grid.is_alive(1, 1)

    def test_column_past_edge_wraps(self):
        grid = Grid(3, 4, from_live_cells([(0, 4)], cols=4))
        assert grid.is_alive(0, 0)
        assert not grid.is_alive(1, 0)
        assert grid.population() == 1

    def test_negative_column_wraps_within_row(self):
        grid = Grid(3, 4, from_live_cells([(1, -1)], cols=4))
        assert grid.is_alive(1, 3)
        assert not grid.is_alive(0, 3)

    def test_rows_wrap_when_height_given(self):
        grid = Grid(3, 4, from_live_cells([(3, 1), (-1, 2)], cols=4, rows=3))
        assert grid.is_alive(0, 1)
        assert grid.is_alive(2, 2)
        assert grid.population() == 2
