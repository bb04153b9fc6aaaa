"""Read-only analysis of material layouts."""

from phononic_fdtd.analysis.statistics import (
    LatticeStatistics,
    identify_materials,
    lattice_statistics,
)

__all__ = [
    "LatticeStatistics",
    "lattice_statistics",
    "identify_materials",
]
