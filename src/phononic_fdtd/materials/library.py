"""Material catalog for phononic lattice painting.

The catalog is fixed at import time and covers the media a user can paint
into the domain:

- Air: background medium
- Water: moderate-contrast inclusion
- Steel: high-contrast scatterer
- Custom: slow "metamaterial" inclusion (slower than air)

    >>> from phononic_fdtd.materials import STEEL, material_sound_speed
    >>> material_sound_speed("steel")
    5960.0
"""

from __future__ import annotations

from .base import Material, MaterialType

AIR = Material(
    name="Air",
    speed_of_sound=343.0,
    density=1.225,
    color="#0f172a",
)
"""Air at standard conditions."""

WATER = Material(
    name="Water",
    speed_of_sound=1481.0,
    density=997.0,
    color="#0ea5e9",
)
"""Fresh water."""

STEEL = Material(
    name="Steel",
    speed_of_sound=5960.0,
    density=7850.0,
    color="#94a3b8",
)
"""Structural steel (longitudinal speed).

Unstable with the default ``dx``/``dt`` pair; see
:func:`phononic_fdtd.core.solver.max_stable_dt`.
"""

CUSTOM = Material(
    name="Metamaterial",
    speed_of_sound=300.0,
    density=1000.0,
    color="#d946ef",
)
"""User-defined slow medium."""

MATERIALS: dict[MaterialType, Material] = {
    MaterialType.AIR: AIR,
    MaterialType.WATER: WATER,
    MaterialType.STEEL: STEEL,
    MaterialType.CUSTOM: CUSTOM,
}


def list_materials() -> list[str]:
    """List catalog identifiers.

    Returns:
        Identifier strings in catalog order
    """
    return [material_type.value for material_type in MATERIALS]


def get_material(material: MaterialType | Material | str) -> Material:
    """Resolve a material reference to a :class:`Material`.

    Args:
        material: A ``MaterialType``, a ``Material`` (returned unchanged), or
            an identifier string such as ``"steel"`` (case-insensitive)

    Returns:
        The catalog material

    Raises:
        KeyError: If the identifier is not in the catalog
    """
    if isinstance(material, Material):
        return material
    if isinstance(material, MaterialType):
        return MATERIALS[material]
    try:
        return MATERIALS[MaterialType(str(material).upper())]
    except ValueError:
        raise KeyError(
            f"Unknown material '{material}'. Available: {list_materials()}"
        ) from None


def material_sound_speed(material: MaterialType | Material | str) -> float:
    """Speed of sound of a material in m/s (always positive)."""
    return float(get_material(material).speed_of_sound)
