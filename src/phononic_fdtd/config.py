"""Simulation parameters owned by the driver.

:class:`SimulationConfig` collects the knobs a front end exposes: source
frequency, amplitude and position, playback speed and grid resolution. The
solver reads the source parameters every step; playback speed only decides
how many steps make up one rendered frame; grid resolution is consulted once
when the solver is built.

Example:
    >>> config = SimulationConfig(frequency=1500.0)
    >>> config.steps_per_frame
    3
    >>> faster = config.update(simulation_speed=2.0)
    >>> faster.steps_per_frame
    10
"""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass, replace

from phononic_fdtd.core.grid import GRID_SIZE
from phononic_fdtd.core.solver import SineSource

STEPS_PER_SPEED_UNIT = 5
"""Solver steps per rendered frame at a playback speed of 1.0."""


@dataclass(frozen=True)
class SimulationConfig:
    """Driver-side simulation parameters.

    Args:
        frequency: Source frequency in Hz (default: 2000)
        amplitude: Source amplitude (default: 1.0)
        source_x: Normalized source x position in [0, 1] (default: 0.1)
        source_y: Normalized source y position in [0, 1] (default: 0.5)
        simulation_speed: Playback multiplier (default: 0.5)
        damping: Reserved. The stencil takes its damping from the absorbing
            edge layer and never reads this value.
        grid_resolution: Grid side length in cells (default: 120)
    """

    frequency: float = 2000.0
    amplitude: float = 1.0
    source_x: float = 0.1
    source_y: float = 0.5
    simulation_speed: float = 0.5
    damping: float = 0.98
    grid_resolution: int = GRID_SIZE

    def __post_init__(self):
        if self.frequency <= 0:
            raise ValueError(f"frequency must be positive, got {self.frequency}")
        if self.simulation_speed <= 0:
            raise ValueError(
                f"simulation_speed must be positive, got {self.simulation_speed}"
            )
        if self.grid_resolution <= 0:
            raise ValueError(
                f"grid_resolution must be positive, got {self.grid_resolution}"
            )
        for name in ("source_x", "source_y"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must be in [0, 1], got {value}")

    @property
    def steps_per_frame(self) -> int:
        """Solver steps per rendered frame, ``ceil(speed * 5)``."""
        return math.ceil(self.simulation_speed * STEPS_PER_SPEED_UNIT)

    @property
    def source(self) -> SineSource:
        """Source parameters as a :class:`SineSource`."""
        return SineSource(
            frequency=self.frequency,
            amplitude=self.amplitude,
            x=self.source_x,
            y=self.source_y,
        )

    def update(self, **changes) -> SimulationConfig:
        """Return a copy with some fields changed.

        Raises:
            TypeError: If a key is not a config field
            ValueError: If the merged config is invalid
        """
        return replace(self, **changes)

    def to_dict(self) -> dict:
        """Plain dict of all fields."""
        return asdict(self)
