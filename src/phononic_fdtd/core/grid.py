"""
Grid state for 2D scalar wave simulation.

A :class:`WaveGrid` owns every array describing the simulation domain, a
square of ``size`` × ``size`` cells stored as flat row-major arrays
(``idx = y * size + x``):

    field_current   amplitude at the present time level
    field_previous  amplitude at the prior time level
    velocity_map    squared local sound speed c² (m²/s²)
    damping_map     per-cell multiplicative damping factor in (0, 1]

The two field levels live in a fixed arena of three buffers (current,
previous, scratch). The solver writes the next time level into the scratch
buffer and then calls :meth:`WaveGrid.rotate`, which only permutes buffer
indices. Nothing is reallocated after construction, but a reference taken
from ``field_current`` names the previous level after one rotation and the
scratch buffer after two, so a renderer must re-read ``field_current``
every frame.

The grid is the single source of truth: the solver and the material editor
both mutate it in place.

Example:
    >>> from phononic_fdtd.core.grid import WaveGrid
    >>> from phononic_fdtd.materials import MaterialType
    >>> grid = WaveGrid(size=100)
    >>> grid.state
    <GridState.QUIESCENT: 'quiescent'>
    >>> grid.reset_material(MaterialType.WATER)
    >>> float(grid.velocity_map[0]) == 1481.0**2
    True
"""

from __future__ import annotations

from enum import Enum

import numpy as np
from numpy.typing import DTypeLike, NDArray

from phononic_fdtd.boundaries import AbsorbingLayer
from phononic_fdtd.materials import Material, MaterialType, get_material

GRID_SIZE = 120
"""Default grid side length in cells."""


class GridState(Enum):
    """Coarse simulation state derived from the field arrays.

    There is no diverged state: numerical blow-up only shows up as field
    magnitudes outside the expected physical range.
    """

    QUIESCENT = "quiescent"
    PROPAGATING = "propagating"


class WaveGrid:
    """Square simulation domain with double-buffered wave fields.

    Args:
        size: Side length in cells (must be a positive integer)
        default_material: Material filling the domain initially
            (default: air)
        padding: Thickness of the absorbing edge layer in cells (default: 10)
        dtype: Floating point type of all arrays (default: float32)

    Attributes:
        size: Side length in cells
        velocity_map: Flat array of c² per cell
        damping_map: Flat array of damping factors per cell
        boundary: The absorbing layer re-applied on material reset

    Raises:
        ValueError: If ``size`` is not a positive integer
    """

    def __init__(
        self,
        size: int = GRID_SIZE,
        default_material: MaterialType | Material | str = MaterialType.AIR,
        padding: int = 10,
        dtype: DTypeLike = np.float32,
    ):
        if isinstance(size, bool) or not isinstance(size, (int, np.integer)):
            raise ValueError(f"size must be an integer, got {size!r}")
        if size <= 0:
            raise ValueError(f"size must be positive, got {size}")

        self.size = int(size)
        self.dtype = np.dtype(dtype)
        n = self.size * self.size

        # Field arena: current, previous and scratch time levels
        self._buffers = [np.zeros(n, dtype=self.dtype) for _ in range(3)]
        self._current = 0
        self._previous = 1
        self._scratch = 2

        self.velocity_map = np.empty(n, dtype=self.dtype)
        self.damping_map = np.ones(n, dtype=self.dtype)

        self.boundary = AbsorbingLayer(padding=padding)
        self.reset_material(default_material)

    @classmethod
    def create(cls, size: int, **kwargs) -> WaveGrid:
        """Allocate a grid of the given size (see :class:`WaveGrid`)."""
        return cls(size=size, **kwargs)

    @property
    def field_current(self) -> NDArray[np.floating]:
        """Amplitude at the present time level."""
        return self._buffers[self._current]

    @property
    def field_previous(self) -> NDArray[np.floating]:
        """Amplitude at the prior time level."""
        return self._buffers[self._previous]

    @property
    def next_buffer(self) -> NDArray[np.floating]:
        """Scratch buffer receiving the next time level.

        Never aliases :attr:`field_current` or :attr:`field_previous`.
        """
        return self._buffers[self._scratch]

    @property
    def num_cells(self) -> int:
        """Total number of cells."""
        return self.size * self.size

    @property
    def state(self) -> GridState:
        """QUIESCENT when both field levels are zero, PROPAGATING otherwise."""
        if np.any(self.field_current) or np.any(self.field_previous):
            return GridState.PROPAGATING
        return GridState.QUIESCENT

    def rotate(self) -> None:
        """Cycle time levels: previous <- current, current <- next.

        The old previous buffer becomes the new scratch buffer.
        """
        self._previous, self._current, self._scratch = (
            self._current,
            self._scratch,
            self._previous,
        )

    def reset_fields(self) -> None:
        """Zero both field levels without touching the material map."""
        for buffer in self._buffers:
            buffer.fill(0)

    def reset_material(self, material: MaterialType | Material | str) -> None:
        """Fill the domain uniformly with one material.

        Sets every velocity map entry to the material's c², resets the
        damping map to 1.0 and re-applies the absorbing edge layer. Field
        arrays are left untouched.

        Args:
            material: Catalog identifier or material instance
        """
        c2 = get_material(material).velocity_squared
        self.velocity_map.fill(c2)
        self.damping_map.fill(1.0)
        self.boundary.apply(self)

    def index(self, x: int, y: int) -> int:
        """Linear index of grid cell ``(x, y)``.

        Raises:
            IndexError: If the cell lies outside the grid
        """
        if not (0 <= x < self.size and 0 <= y < self.size):
            raise IndexError(f"Cell ({x}, {y}) outside {self.size}x{self.size} grid")
        return y * self.size + x

    def cell_at(self, x_norm: float, y_norm: float) -> tuple[int, int]:
        """Grid cell nearest a normalized position.

        Maps ``v`` in [0, 1] to ``floor(v * (size - 1))`` on each axis.

        Raises:
            ValueError: If either coordinate is outside [0, 1]
        """
        for name, value in (("x", x_norm), ("y", y_norm)):
            if not 0.0 <= value <= 1.0:
                raise ValueError(
                    f"Normalized {name} position must be in [0, 1], got {value}"
                )
        x = int(np.floor(x_norm * (self.size - 1)))
        y = int(np.floor(y_norm * (self.size - 1)))
        return x, y

    def as_2d(self, array: NDArray[np.floating]) -> NDArray[np.floating]:
        """Reshape one of the grid's flat arrays to a ``[y, x]`` view."""
        return array.reshape(self.size, self.size)

    def __repr__(self) -> str:
        return (
            f"WaveGrid(size={self.size}, padding={self.boundary.padding}, "
            f"state={self.state.value})"
        )
