"""Material definitions for the 2D wave solver.

A material is a small immutable record of acoustic properties. Only the
speed of sound enters the finite-difference update (as c² in the velocity
map); density and display color are carried for consumers such as the
renderer and the lattice statistics.

Example:
    >>> from phononic_fdtd.materials import Material
    >>> brass = Material(name="Brass", speed_of_sound=4700.0, density=8500.0)
    >>> brass.velocity_squared
    22090000.0
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class MaterialType(Enum):
    """Identifier of a catalog material.

    The set is closed: every identifier has an entry in
    :data:`phononic_fdtd.materials.MATERIALS`.
    """

    AIR = "AIR"
    WATER = "WATER"
    STEEL = "STEEL"
    CUSTOM = "CUSTOM"


@dataclass(frozen=True)
class Material:
    """Non-dispersive acoustic material.

    Args:
        name: Human-readable name
        speed_of_sound: Sound speed in m/s (must be positive)
        density: Density in kg/m³ (must be positive). Not used by the
            scalar wave update; kept for interface compatibility.
        color: Display color as a hex string

    Attributes:
        velocity_squared: c² in m²/s², the value written to the velocity map
    """

    name: str
    speed_of_sound: float
    density: float = 1.0
    color: str = "#000000"

    def __post_init__(self):
        if self.speed_of_sound <= 0:
            raise ValueError(
                f"speed_of_sound must be positive, got {self.speed_of_sound}"
            )
        if self.density <= 0:
            raise ValueError(f"density must be positive, got {self.density}")

    @property
    def velocity_squared(self) -> float:
        """Squared sound speed in m²/s²."""
        return float(self.speed_of_sound) ** 2

    def __repr__(self) -> str:
        return (
            f"Material(name='{self.name}', c={self.speed_of_sound:.1f} m/s, "
            f"rho={self.density:.3g} kg/m³)"
        )
