"""
Absorbing edge treatment for the 2D wave solver.

The solver approximates an open domain with a lossy layer ("sponge") along
the four edges: every cell within ``padding`` cells of a side multiplies its
new field value by a damping factor below one each step. The factor grows
linearly from the outer edge to the layer's inner face:

    factor(d) = max(floor, 1 - strength * (padding - d) / padding)

where ``d`` is the distance in cells to the nearest side. Interior cells keep
a factor of 1.0.

This is not a perfectly matched layer. It damps outgoing energy progressively
rather than modelling a radiation condition, so some reflection from the
layer's inner face remains, especially at low frequencies.

Example:
    >>> from phononic_fdtd.core.grid import WaveGrid
    >>> grid = WaveGrid(size=60)
    >>> AbsorbingLayer(padding=15).apply(grid)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

if TYPE_CHECKING:
    from phononic_fdtd.core.grid import WaveGrid


def edge_distance(size: int) -> NDArray[np.int64]:
    """Distance in cells from each cell to the nearest grid side.

    Args:
        size: Grid side length in cells

    Returns:
        ``(size, size)`` integer array indexed ``[y, x]``
    """
    coords = np.arange(size)
    to_side = np.minimum(coords, size - 1 - coords)
    return np.minimum(to_side[:, np.newaxis], to_side[np.newaxis, :])


@dataclass
class AbsorbingLayer:
    """Lossy damping layer along all four domain edges.

    Args:
        padding: Layer thickness in cells (default: 10). Zero disables the
            layer.
        strength: Attenuation at the outermost ring relative to the layer's
            inner face (default: 0.1)
        floor: Lower bound for any damping factor (default: 0.8)

    Example:
        >>> layer = AbsorbingLayer(padding=10)
        >>> profile = layer.profile(120)
        >>> float(profile[60, 60])
        1.0
    """

    padding: int = 10
    strength: float = 0.1
    floor: float = 0.8

    def __post_init__(self):
        if self.padding < 0:
            raise ValueError(f"padding must be non-negative, got {self.padding}")
        if not 0.0 < self.floor <= 1.0:
            raise ValueError(f"floor must be in (0, 1], got {self.floor}")

    def profile(self, size: int) -> NDArray[np.float64]:
        """Damping factor for every cell of a ``size`` × ``size`` grid.

        Args:
            size: Grid side length in cells

        Returns:
            ``(size, size)`` array indexed ``[y, x]``, 1.0 outside the layer
        """
        factors = np.ones((size, size), dtype=np.float64)
        if self.padding == 0:
            return factors

        dist = edge_distance(size)
        in_layer = dist < self.padding
        ramp = 1.0 - self.strength * (self.padding - dist[in_layer]) / self.padding
        factors[in_layer] = np.maximum(self.floor, ramp)
        return factors

    def layer_mask(self, size: int) -> NDArray[np.bool_]:
        """Boolean mask of cells inside the layer, indexed ``[y, x]``."""
        return edge_distance(size) < self.padding

    def apply(self, grid: WaveGrid) -> None:
        """Write the layer's factors into ``grid.damping_map``.

        Only cells inside the layer are written; interior cells keep
        whatever factor they already hold (1.0 after a material reset).
        """
        if self.padding == 0:
            return
        mask = self.layer_mask(grid.size).ravel()
        grid.damping_map[mask] = self.profile(grid.size).ravel()[mask]


def apply_boundary(grid: WaveGrid, padding: int = 10) -> None:
    """Replace the absorbing edge layer of ``grid``.

    Resets the whole damping map to 1.0 before writing the new layer, so
    cells outside a thinner layer are undamped again. The layer is stored
    as ``grid.boundary`` and is re-applied by :meth:`WaveGrid.reset_material`.

    Args:
        grid: Grid whose damping map is updated in place
        padding: Layer thickness in cells
    """
    layer = AbsorbingLayer(padding=padding)
    grid.boundary = layer
    grid.damping_map.fill(1.0)
    layer.apply(grid)
