"""Tests for the material catalog.

Tests verify:
- Catalog contents and positivity
- Identifier resolution
- Material validation
"""

import pytest

from phononic_fdtd.materials import (
    AIR,
    CUSTOM,
    MATERIALS,
    STEEL,
    WATER,
    Material,
    MaterialType,
    get_material,
    list_materials,
    material_sound_speed,
)


class TestCatalog:
    def test_every_identifier_has_material(self):
        """The closed identifier set maps onto the catalog."""
        assert set(MATERIALS) == set(MaterialType)

    def test_sound_speeds(self):
        assert AIR.speed_of_sound == 343.0
        assert WATER.speed_of_sound == 1481.0
        assert STEEL.speed_of_sound == 5960.0
        assert CUSTOM.speed_of_sound == 300.0

    def test_all_properties_positive(self):
        for material in MATERIALS.values():
            assert material.speed_of_sound > 0
            assert material.density > 0

    def test_display_colors(self):
        assert AIR.color == "#0f172a"
        assert STEEL.color == "#94a3b8"

    def test_custom_is_named_metamaterial(self):
        assert CUSTOM.name == "Metamaterial"

    def test_list_materials(self):
        assert list_materials() == ["AIR", "WATER", "STEEL", "CUSTOM"]


class TestLookup:
    def test_get_by_type(self):
        assert get_material(MaterialType.STEEL) is STEEL

    def test_get_by_string_case_insensitive(self):
        assert get_material("water") is WATER
        assert get_material("Water") is WATER

    def test_material_passes_through(self):
        brass = Material(name="Brass", speed_of_sound=4700.0, density=8500.0)
        assert get_material(brass) is brass

    def test_unknown_identifier(self):
        with pytest.raises(KeyError, match="Unknown material"):
            get_material("unobtainium")

    def test_material_sound_speed(self):
        assert material_sound_speed(MaterialType.AIR) == 343.0
        assert material_sound_speed("steel") == 5960.0


class TestMaterial:
    def test_velocity_squared(self):
        assert AIR.velocity_squared == pytest.approx(343.0**2)

    def test_is_immutable(self):
        with pytest.raises(AttributeError):
            AIR.speed_of_sound = 100.0

    @pytest.mark.parametrize("speed", [0.0, -343.0])
    def test_rejects_non_positive_speed(self, speed):
        with pytest.raises(ValueError, match="speed_of_sound"):
            Material(name="bad", speed_of_sound=speed)

    def test_rejects_non_positive_density(self):
        with pytest.raises(ValueError, match="density"):
            Material(name="bad", speed_of_sound=343.0, density=0.0)
