"""2D Finite-Difference Time-Domain (FDTD) scalar wave solver.

This module advances a scalar pressure field over a heterogeneous medium
whose local sound speed is painted into the grid's velocity map. It is the
explicit, centered, second-order discretization of

    ∂²u/∂t² = c(x, y)² ∇²u

on a uniform 5-point stencil:

    lap    = u[i+1] + u[i-1] + u[i+size] + u[i-size] - 4 u[i]
    u_next = (2 u[i] - u_prev[i] + c²[i] (dt/dx)² lap) * damping[i]

The multiplicative damping pass approximates boundary absorption (see
:mod:`phononic_fdtd.boundaries`).

Source:
    The driven cell is a *hard* source: before every sweep its value is
    overwritten with ``amplitude * sin(2π f t)``, so energy arriving from
    elsewhere is discarded there instead of being reflected.

Stability: c·Δt/Δx < 1/√2 (CFL condition for the 2D 5-point stencil)

    The solver does not enforce this bound. The default ``DX``/``DT`` pair is
    stable for air and the custom medium but not for water or steel; use
    :func:`max_stable_dt` to choose a compatible timestep, or
    :meth:`WaveSolver.stability_report` to inspect the live material map.

Example:
    >>> from phononic_fdtd import WaveSolver, MaterialType
    >>> solver = WaveSolver(size=120)
    >>> solver.paint(60, 60, MaterialType.CUSTOM, brush_size=9)
    >>> for n in range(1, 101):
    ...     field = solver.step(2000.0, 1.0, 0.1, 0.5, n * solver.dt)
    >>> solver.grid.state
    <GridState.PROPAGATING: 'propagating'>
"""

from __future__ import annotations

import math
import warnings
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np
from numpy.typing import DTypeLike, NDArray

from phononic_fdtd.geometry.painting import paint
from phononic_fdtd.materials import MATERIALS, Material, MaterialType, get_material

from .grid import GRID_SIZE, WaveGrid

if TYPE_CHECKING:
    from phononic_fdtd.config import SimulationConfig

DX = 0.01
"""Default cell size in meters (1 cm per cell)."""

DT = 5e-6
"""Default timestep in seconds."""

CFL_LIMIT_2D = 1.0 / math.sqrt(2.0)
"""Courant number bound for the 2D 5-point stencil."""


def courant_number(speed: float, dt: float = DT, dx: float = DX) -> float:
    """Courant number c·Δt/Δx.

    Args:
        speed: Sound speed in m/s
        dt: Timestep in seconds
        dx: Cell size in meters

    Returns:
        Dimensionless Courant number
    """
    return speed * dt / dx


def max_stable_dt(
    materials: Mapping[MaterialType, Material] | Iterable[Material] | Material = MATERIALS,
    dx: float = DX,
    courant: float = CFL_LIMIT_2D,
) -> float:
    """Largest timestep that keeps every given material below the CFL bound.

    Args:
        materials: Material catalog mapping, iterable of materials, or a single
            material (default: the full catalog)
        dx: Cell size in meters
        courant: Target Courant number (default: the 2D stability limit).
            Pass a smaller value for a safety margin.

    Returns:
        Timestep in seconds, ``courant * dx / c_max``

    Example:
        >>> from phononic_fdtd.materials import AIR, WATER
        >>> max_stable_dt([AIR], dx=0.01) > DT
        True
        >>> max_stable_dt([AIR, WATER], dx=0.01) > DT
        False
    """
    if isinstance(materials, Material):
        candidates = [materials]
    elif isinstance(materials, Mapping):
        candidates = list(materials.values())
    else:
        candidates = list(materials)
    if not candidates:
        raise ValueError("At least one material is required")

    c_max = max(material.speed_of_sound for material in candidates)
    return courant * dx / c_max


@dataclass
class SineSource:
    """Continuous sinusoidal point source at a normalized position.

    Args:
        frequency: Drive frequency in Hz
        amplitude: Peak amplitude (dimensionless, default: 1.0)
        x: Normalized horizontal position in [0, 1] (default: 0.5)
        y: Normalized vertical position in [0, 1] (default: 0.5)
    """

    frequency: float
    amplitude: float = 1.0
    x: float = 0.5
    y: float = 0.5

    def __post_init__(self):
        for name, value in (("x", self.x), ("y", self.y)):
            if not 0.0 <= value <= 1.0:
                raise ValueError(
                    f"Source {name} position must be in [0, 1], got {value}"
                )

    def value(self, t: float) -> float:
        """Source amplitude at time ``t`` in seconds."""
        return self.amplitude * math.sin(2.0 * math.pi * self.frequency * t)

    def cell(self, size: int) -> tuple[int, int]:
        """Grid cell ``(x, y)`` driven on a grid of side ``size``."""
        return (
            int(math.floor(self.x * (size - 1))),
            int(math.floor(self.y * (size - 1))),
        )


class WaveSolver:
    """2D scalar wave FDTD solver over a paintable material map.

    Args:
        size: Grid side length in cells (default: 120)
        dx: Cell size in meters (default: 0.01)
        dt: Timestep in seconds (default: 5e-6). Not checked against the
            CFL bound.
        default_material: Initial uniform material (default: air)
        padding: Absorbing edge layer thickness in cells (default: 10)
        dtype: Field and map storage type (default: float32)

    Attributes:
        grid: The shared :class:`WaveGrid`
        dx: Cell size in meters
        dt: Timestep in seconds

    Example:
        >>> solver = WaveSolver(size=80)
        >>> source = SineSource(frequency=1500.0, x=0.2, y=0.5)
        >>> solver.run(200, source)
        >>> solver.step_count
        200
    """

    def __init__(
        self,
        size: int = GRID_SIZE,
        dx: float = DX,
        dt: float = DT,
        default_material: MaterialType | Material | str = MaterialType.AIR,
        padding: int = 10,
        dtype: DTypeLike = np.float32,
    ):
        if dx <= 0:
            raise ValueError(f"dx must be positive, got {dx}")
        if dt <= 0:
            raise ValueError(f"dt must be positive, got {dt}")

        self.grid = WaveGrid(
            size=size,
            default_material=default_material,
            padding=padding,
            dtype=dtype,
        )
        self.dx = dx
        self.dt = dt

        # (dt/dx)² multiplies c² in the stencil update
        self._coeff = (dt / dx) ** 2

        self._step_count = 0
        self._time = 0.0

    @classmethod
    def from_config(cls, config: SimulationConfig, **kwargs) -> WaveSolver:
        """Create a solver sized by ``config.grid_resolution``."""
        return cls(size=config.grid_resolution, **kwargs)

    @property
    def size(self) -> int:
        """Grid side length in cells."""
        return self.grid.size

    @property
    def time(self) -> float:
        """Source time of the most recent step in seconds."""
        return self._time

    @property
    def step_count(self) -> int:
        """Number of steps taken since construction or :meth:`reset`."""
        return self._step_count

    @property
    def field_current(self) -> NDArray[np.floating]:
        return self.grid.field_current

    @property
    def field_previous(self) -> NDArray[np.floating]:
        return self.grid.field_previous

    @property
    def velocity_map(self) -> NDArray[np.floating]:
        return self.grid.velocity_map

    @property
    def damping_map(self) -> NDArray[np.floating]:
        return self.grid.damping_map

    def inject_source(
        self,
        source_freq: float,
        source_amp: float,
        source_x_norm: float,
        source_y_norm: float,
        elapsed_time: float,
    ) -> int:
        """Overwrite the driven cell of the current field (hard source).

        Args:
            source_freq: Frequency in Hz
            source_amp: Amplitude
            source_x_norm: Normalized x position in [0, 1]
            source_y_norm: Normalized y position in [0, 1]
            elapsed_time: Simulated time in seconds

        Returns:
            Linear index of the driven cell
        """
        x, y = self.grid.cell_at(source_x_norm, source_y_norm)
        idx = y * self.size + x
        self.grid.field_current[idx] = source_amp * math.sin(
            2.0 * math.pi * source_freq * elapsed_time
        )
        return idx

    def step(
        self,
        source_freq: float,
        source_amp: float,
        source_x_norm: float,
        source_y_norm: float,
        elapsed_time: float,
    ) -> NDArray[np.floating]:
        """Advance the field by one timestep.

        The source is injected into the current level first, then every
        interior cell is updated from the current and previous levels into
        the scratch buffer. The outermost ring of the new level is zero, as
        the stencil is undefined there. Finally the buffers rotate.

        Args:
            source_freq: Frequency in Hz
            source_amp: Amplitude
            source_x_norm: Normalized x position in [0, 1]
            source_y_norm: Normalized y position in [0, 1]
            elapsed_time: Simulated time in seconds passed to the source

        Returns:
            The new current field (flat, length size²). This is the grid's
            live buffer, not a copy.
        """
        self.inject_source(
            source_freq, source_amp, source_x_norm, source_y_norm, elapsed_time
        )

        grid = self.grid
        u = grid.as_2d(grid.field_current)
        u_prev = grid.as_2d(grid.field_previous)
        u_next = grid.as_2d(grid.next_buffer)
        c2 = grid.as_2d(grid.velocity_map)
        damp = grid.as_2d(grid.damping_map)

        center = u[1:-1, 1:-1]
        laplacian = (
            u[1:-1, 2:] + u[1:-1, :-2] + u[2:, 1:-1] + u[:-2, 1:-1] - 4.0 * center
        )
        np.multiply(
            2.0 * center - u_prev[1:-1, 1:-1] + c2[1:-1, 1:-1] * self._coeff * laplacian,
            damp[1:-1, 1:-1],
            out=u_next[1:-1, 1:-1],
        )

        # Edge ring is never swept
        u_next[0, :] = 0.0
        u_next[-1, :] = 0.0
        u_next[:, 0] = 0.0
        u_next[:, -1] = 0.0

        grid.rotate()
        self._step_count += 1
        self._time = elapsed_time
        return grid.field_current

    def run(
        self,
        n_steps: int,
        source: SineSource,
        progress: bool = False,
        callback: Callable[[int], None] | None = None,
    ) -> None:
        """Drive the solver for ``n_steps`` steps with a sinusoidal source.

        Each step injects at ``time + dt``, continuing the clock from the
        previous step.

        Args:
            n_steps: Number of steps
            source: Source parameters
            progress: If True, show a tqdm progress bar
            callback: Function called after each step with the step count
        """
        if not self.is_stable():
            report = self.stability_report()
            warnings.warn(
                f"Courant number {report['courant_number']:.3f} exceeds the 2D "
                f"stability limit {CFL_LIMIT_2D:.3f} for c = "
                f"{report['max_speed']:.0f} m/s; the field will diverge. "
                f"Use dt <= {report['max_stable_dt']:.3e} s.",
                UserWarning,
                stacklevel=2,
            )

        if progress:
            from tqdm import tqdm

            iterator = tqdm(range(n_steps), desc="FDTD simulation")
        else:
            iterator = range(n_steps)

        for _ in iterator:
            self.step(
                source.frequency,
                source.amplitude,
                source.x,
                source.y,
                self._time + self.dt,
            )
            if callback:
                callback(self._step_count)

    def run_frame(self, config: SimulationConfig) -> NDArray[np.floating]:
        """Advance one rendered frame: ``config.steps_per_frame`` steps.

        Returns:
            The current field after the frame
        """
        self.run(config.steps_per_frame, config.source)
        return self.grid.field_current

    def paint(
        self,
        x: int,
        y: int,
        material: MaterialType | Material | str,
        brush_size: int = 1,
    ) -> None:
        """Paint a material into the velocity map (see :func:`paint`)."""
        paint(self.grid, x, y, material, brush_size)

    def reset_fields(self) -> None:
        """Zero both field levels, keeping the painted material map."""
        self.grid.reset_fields()

    def reset_material(self, material: MaterialType | Material | str) -> None:
        """Fill the domain with one material and rebuild the edge layer."""
        self.grid.reset_material(material)

    def reset(self) -> None:
        """Zero the fields and restart the clock."""
        self.grid.reset_fields()
        self._step_count = 0
        self._time = 0.0

    def max_amplitude(self) -> float:
        """Largest absolute value in the current field."""
        return float(np.max(np.abs(self.grid.field_current)))

    def max_speed(self) -> float:
        """Fastest sound speed present in the velocity map in m/s."""
        return float(np.sqrt(np.max(self.grid.velocity_map)))

    def courant_number(self) -> float:
        """Courant number of the fastest cell in the live material map."""
        return courant_number(self.max_speed(), self.dt, self.dx)

    def is_stable(self) -> bool:
        """Whether the live material map satisfies the CFL bound."""
        return self.courant_number() < CFL_LIMIT_2D

    def stability_report(self) -> dict:
        """CFL diagnostic for the current material map.

        Returns:
            Dict with keys:
            - max_speed: Fastest sound speed in the map (m/s)
            - courant_number: c_max·dt/dx
            - limit: The 2D stability bound (1/√2)
            - max_stable_dt: Largest stable timestep for this map and dx
            - stable: Whether the current dt is below the bound
        """
        c_max = self.max_speed()
        number = courant_number(c_max, self.dt, self.dx)
        return {
            "max_speed": c_max,
            "courant_number": number,
            "limit": CFL_LIMIT_2D,
            "max_stable_dt": CFL_LIMIT_2D * self.dx / c_max,
            "stable": number < CFL_LIMIT_2D,
        }

    def __repr__(self) -> str:
        return (
            f"WaveSolver(size={self.size}, dx={self.dx:g}, dt={self.dt:g}, "
            f"steps={self._step_count})"
        )
