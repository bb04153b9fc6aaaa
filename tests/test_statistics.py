"""Tests for material layout statistics."""

import numpy as np
import pytest

from phononic_fdtd import MaterialType, WaveGrid, identify_materials, lattice_statistics, paint


class TestLatticeStatistics:
    def test_uniform_air(self, small_grid):
        stats = lattice_statistics(small_grid.velocity_map)

        assert stats.n_samples == 100
        assert stats.mean_speed == pytest.approx(343.0)
        assert stats.min_speed == pytest.approx(343.0)
        assert stats.contrast == pytest.approx(1.0)
        assert stats.filling_fraction == 0.0

    def test_steel_inclusion(self, small_grid):
        paint(small_grid, 10, 10, MaterialType.STEEL, brush_size=3)

        stats = lattice_statistics(small_grid.velocity_map, stride=1)

        assert stats.n_samples == 400
        assert stats.max_speed == pytest.approx(5960.0)
        assert stats.min_speed == pytest.approx(343.0)
        assert stats.contrast == pytest.approx(5960.0 / 343.0)
        assert stats.filling_fraction == pytest.approx(9 / 400)

    def test_accepts_2d_map(self, small_grid):
        flat = lattice_statistics(small_grid.velocity_map, stride=1)
        square = lattice_statistics(small_grid.as_2d(small_grid.velocity_map), stride=1)
        assert flat == square

    def test_reference_speed(self):
        grid = WaveGrid(size=10, default_material=MaterialType.WATER)
        paint(grid, 5, 5, MaterialType.AIR)

        stats = lattice_statistics(grid.velocity_map, reference_speed=1481.0, stride=1)

        assert stats.filling_fraction == pytest.approx(1 / 100)

    def test_tolerance_treats_custom_as_distinct(self, small_grid):
        paint(small_grid, 4, 4, MaterialType.CUSTOM)
        assert lattice_statistics(small_grid.velocity_map, stride=1).filling_fraction > 0
        assert (
            lattice_statistics(small_grid.velocity_map, tolerance=50.0, stride=1).filling_fraction
            == 0.0
        )

    def test_rejects_zero_stride(self, small_grid):
        with pytest.raises(ValueError, match="stride"):
            lattice_statistics(small_grid.velocity_map, stride=0)

    def test_rejects_empty_map(self):
        with pytest.raises(ValueError, match="empty"):
            lattice_statistics(np.array([], dtype=np.float32))


class TestIdentifyMaterials:
    def test_catalog_indices(self, small_grid):
        paint(small_grid, 2, 2, MaterialType.WATER)
        paint(small_grid, 5, 5, MaterialType.STEEL)
        paint(small_grid, 8, 8, MaterialType.CUSTOM)

        ids = identify_materials(small_grid.as_2d(small_grid.velocity_map))

        assert ids.shape == (20, 20)
        assert ids.dtype == np.int8
        assert ids[0, 0] == 0
        assert ids[2, 2] == 1
        assert ids[5, 5] == 2
        assert ids[8, 8] == 3

    def test_unknown_speed(self):
        velocity = np.array([343.0**2, 4700.0**2], dtype=np.float32)
        np.testing.assert_array_equal(identify_materials(velocity), [0, -1])
