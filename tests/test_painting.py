"""Tests for material map editing.

Tests verify:
- Brush footprint and clipping at the grid edges
- Painting touches only the velocity map
- Idempotence
- Lattice tiling
"""

import numpy as np
import pytest

from phononic_fdtd import MaterialType, WaveGrid, paint, paint_lattice

AIR_C2 = 343.0**2
STEEL_C2 = 5960.0**2


def painted_cells(grid):
    return np.flatnonzero(grid.velocity_map != np.float32(AIR_C2))


class TestPaint:
    def test_brush_one_paints_single_cell(self, small_grid):
        paint(small_grid, 7, 4, MaterialType.STEEL, brush_size=1)

        changed = painted_cells(small_grid)
        np.testing.assert_array_equal(changed, [4 * 20 + 7])
        assert small_grid.velocity_map[4 * 20 + 7] == STEEL_C2

    @pytest.mark.parametrize("brush_size", [1, 2, 3, 4, 5, 8])
    def test_brush_footprint(self, medium_grid, brush_size):
        paint(medium_grid, 30, 30, MaterialType.STEEL, brush_size=brush_size)

        r = brush_size // 2
        assert painted_cells(medium_grid).size == (2 * r + 1) ** 2

        velocity = medium_grid.as_2d(medium_grid.velocity_map)
        assert np.all(velocity[30 - r : 31 + r, 30 - r : 31 + r] == STEEL_C2)

    def test_corner_is_clipped(self, small_grid):
        paint(small_grid, 0, 0, MaterialType.WATER, brush_size=5)

        # Half-width 2: only the 3x3 in-grid quadrant remains
        assert painted_cells(small_grid).size == 9

    def test_far_edge_is_clipped(self, small_grid):
        paint(small_grid, 19, 10, MaterialType.WATER, brush_size=5)
        assert painted_cells(small_grid).size == 3 * 5

    def test_center_outside_grid_is_silent(self, small_grid):
        paint(small_grid, -10, 50, MaterialType.STEEL, brush_size=3)
        assert painted_cells(small_grid).size == 0

    def test_center_just_outside_reaches_in(self, small_grid):
        paint(small_grid, -1, 5, MaterialType.STEEL, brush_size=3)
        # Column 0, rows 4..6
        assert painted_cells(small_grid).size == 3

    def test_fields_and_damping_untouched(self, small_grid):
        small_grid.field_current[:] = 0.5
        small_grid.field_previous[:] = -0.5
        damping_before = small_grid.damping_map.copy()

        paint(small_grid, 10, 10, MaterialType.STEEL, brush_size=7)

        np.testing.assert_array_equal(small_grid.field_current, 0.5)
        np.testing.assert_array_equal(small_grid.field_previous, -0.5)
        np.testing.assert_array_equal(small_grid.damping_map, damping_before)

    def test_idempotent(self, medium_grid):
        paint(medium_grid, 20, 25, MaterialType.CUSTOM, brush_size=5)
        first = medium_grid.velocity_map.copy()

        paint(medium_grid, 20, 25, MaterialType.CUSTOM, brush_size=5)

        np.testing.assert_array_equal(medium_grid.velocity_map, first)

    def test_overwrites_previous_material(self, small_grid):
        paint(small_grid, 10, 10, MaterialType.STEEL, brush_size=3)
        paint(small_grid, 10, 10, MaterialType.WATER, brush_size=1)

        assert small_grid.velocity_map[10 * 20 + 10] == 1481.0**2
        assert small_grid.velocity_map[10 * 20 + 11] == STEEL_C2

    def test_returns_none(self, small_grid):
        assert paint(small_grid, 1, 1, "steel") is None

    def test_rejects_empty_brush(self, small_grid):
        with pytest.raises(ValueError, match="brush_size"):
            paint(small_grid, 5, 5, MaterialType.STEEL, brush_size=0)


class TestPaintLattice:
    def test_centres_follow_period(self):
        grid = WaveGrid(size=40)
        centers = paint_lattice(grid, MaterialType.STEEL, period=10, inclusion_size=3)

        assert centers[:4] == [(5, 5), (15, 5), (25, 5), (35, 5)]
        assert len(centers) == 16
        assert painted_cells(grid).size == 16 * 9

    def test_region_bounds(self):
        grid = WaveGrid(size=60)
        centers = paint_lattice(
            grid,
            MaterialType.WATER,
            period=8,
            inclusion_size=1,
            start=(20, 10),
            stop=(40, 50),
            offset=(0, 0),
        )

        xs = {x for x, _ in centers}
        ys = {y for _, y in centers}
        assert xs == {20, 28, 36}
        assert ys == {10, 18, 26, 34, 42}
        assert painted_cells(grid).size == len(centers)

    def test_empty_region(self):
        grid = WaveGrid(size=30)
        centers = paint_lattice(
            grid, MaterialType.STEEL, period=5, inclusion_size=3, start=(25, 0), stop=(20, 30)
        )
        assert centers == []
        assert painted_cells(grid).size == 0

    def test_rejects_zero_period(self, small_grid):
        with pytest.raises(ValueError, match="period"):
            paint_lattice(small_grid, MaterialType.STEEL, period=0, inclusion_size=3)
