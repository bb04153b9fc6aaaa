"""Material map editing for phononic lattice layouts.

Painting writes a material's squared sound speed into the grid's velocity
map. It never touches the field arrays or the damping map, so a layout can be
edited live between solver steps: a paint lands on the very next step.

Functions:
    paint: Square brush dab centred on one cell
    paint_lattice: Periodic array of square inclusions (a unit-cell tiling)

Example:
    >>> from phononic_fdtd.core.grid import WaveGrid
    >>> from phononic_fdtd.materials import MaterialType
    >>> grid = WaveGrid(size=120)
    >>> paint(grid, 40, 60, MaterialType.STEEL, brush_size=5)
    >>> centers = paint_lattice(grid, MaterialType.STEEL, period=12,
    ...                         inclusion_size=5, start=(40, 20), stop=(90, 100))
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from phononic_fdtd.materials import Material, MaterialType, get_material

if TYPE_CHECKING:
    from phononic_fdtd.core.grid import WaveGrid


def paint(
    grid: WaveGrid,
    center_x: int,
    center_y: int,
    material: MaterialType | Material | str,
    brush_size: int = 1,
) -> None:
    """Set the velocity map to ``c²`` in a square brush around a cell.

    The brush covers a square of half-width ``brush_size // 2`` centred on
    ``(center_x, center_y)``. Cells falling outside the grid are skipped
    silently, including when the centre itself is outside. Painting the same
    region with the same material twice has no further effect.

    Args:
        grid: Grid whose velocity map is edited in place
        center_x: Brush centre column
        center_y: Brush centre row
        material: Material to paint
        brush_size: Brush width in cells (a brush of 1 paints one cell)

    Raises:
        ValueError: If ``brush_size`` is less than 1
    """
    if brush_size < 1:
        raise ValueError(f"brush_size must be at least 1, got {brush_size}")

    c2 = get_material(material).velocity_squared
    r = int(brush_size) // 2
    size = grid.size

    x0 = max(center_x - r, 0)
    x1 = min(center_x + r, size - 1)
    y0 = max(center_y - r, 0)
    y1 = min(center_y + r, size - 1)
    if x0 > x1 or y0 > y1:
        return

    grid.as_2d(grid.velocity_map)[y0 : y1 + 1, x0 : x1 + 1] = c2


def paint_lattice(
    grid: WaveGrid,
    material: MaterialType | Material | str,
    period: int,
    inclusion_size: int,
    start: tuple[int, int] | None = None,
    stop: tuple[int, int] | None = None,
    offset: tuple[int, int] | None = None,
) -> list[tuple[int, int]]:
    """Paint a square lattice of inclusions.

    Inclusion centres sit at ``start + offset + k * period`` along each axis
    for every ``k`` that keeps the centre inside ``[start, stop)``. Each
    inclusion is one :func:`paint` dab of width ``inclusion_size``.

    Args:
        grid: Grid whose velocity map is edited in place
        material: Inclusion material
        period: Lattice constant in cells
        inclusion_size: Inclusion width in cells
        start: First cell ``(x, y)`` of the lattice region (default: (0, 0))
        stop: End cell ``(x, y)``, exclusive (default: (size, size))
        offset: Shift of the first centre from ``start``
            (default: half a period on both axes)

    Returns:
        List of inclusion centres ``(x, y)`` in painting order

    Raises:
        ValueError: If ``period`` is less than 1
    """
    if period < 1:
        raise ValueError(f"period must be at least 1, got {period}")

    x_start, y_start = start if start is not None else (0, 0)
    x_stop, y_stop = stop if stop is not None else (grid.size, grid.size)
    x_off, y_off = offset if offset is not None else (period // 2, period // 2)

    centers = [
        (x, y)
        for y in range(y_start + y_off, y_stop, period)
        for x in range(x_start + x_off, x_stop, period)
    ]
    for x, y in centers:
        paint(grid, x, y, material, inclusion_size)
    return centers
