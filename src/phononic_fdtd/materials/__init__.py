"""Acoustic material catalog.

Material Types:
    - MaterialType: Closed set of catalog identifiers
    - Material: Immutable record of acoustic properties

Example:
    >>> from phononic_fdtd.materials import MaterialType, get_material, list_materials
    >>> get_material(MaterialType.WATER).speed_of_sound
    1481.0
    >>> list_materials()
    ['AIR', 'WATER', 'STEEL', 'CUSTOM']
"""

from .base import Material, MaterialType
from .library import (
    AIR,
    CUSTOM,
    MATERIALS,
    STEEL,
    WATER,
    get_material,
    list_materials,
    material_sound_speed,
)

__all__ = [
    "Material",
    "MaterialType",
    "AIR",
    "WATER",
    "STEEL",
    "CUSTOM",
    "MATERIALS",
    "get_material",
    "list_materials",
    "material_sound_speed",
]
