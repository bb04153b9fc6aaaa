"""Material layout editing for the velocity map."""

from .painting import paint, paint_lattice

__all__ = [
    "paint",
    "paint_lattice",
]
