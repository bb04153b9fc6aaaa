"""
Phononic FDTD - 2D acoustic wave propagation through painted lattices.

Main exports:
- WaveSolver: 2D scalar wave FDTD solver
- WaveGrid: Grid state (fields, velocity map, damping map)
- SineSource: Continuous hard point source
- AbsorbingLayer: Lossy edge layer
- paint, paint_lattice: Material map editing
- CommandQueue: Single-writer command queue for multi-threaded front ends
- SimulationConfig: Driver-side parameters
- Materials: Acoustic material catalog
"""

from phononic_fdtd.analysis import LatticeStatistics, identify_materials, lattice_statistics
from phononic_fdtd.boundaries import AbsorbingLayer, apply_boundary
from phononic_fdtd.config import SimulationConfig
from phononic_fdtd.core.commands import (
    CommandQueue,
    PaintCommand,
    ResetFieldsCommand,
    ResetMaterialCommand,
    StepCommand,
)
from phononic_fdtd.core.grid import GRID_SIZE, GridState, WaveGrid
from phononic_fdtd.core.solver import (
    CFL_LIMIT_2D,
    DT,
    DX,
    SineSource,
    WaveSolver,
    courant_number,
    max_stable_dt,
)
from phononic_fdtd.geometry import paint, paint_lattice
from phononic_fdtd.materials import (
    MATERIALS,
    Material,
    MaterialType,
    get_material,
    material_sound_speed,
)

# Submodules for more specific imports
from . import analysis, boundaries, geometry, materials

__version__ = "0.1.0"

__all__ = [
    # Core solver
    "WaveSolver",
    "WaveGrid",
    "GridState",
    "SineSource",
    "courant_number",
    "max_stable_dt",
    "GRID_SIZE",
    "DX",
    "DT",
    "CFL_LIMIT_2D",
    # Concurrency
    "CommandQueue",
    "PaintCommand",
    "StepCommand",
    "ResetFieldsCommand",
    "ResetMaterialCommand",
    # Boundaries
    "AbsorbingLayer",
    "apply_boundary",
    # Geometry
    "paint",
    "paint_lattice",
    # Materials
    "Material",
    "MaterialType",
    "MATERIALS",
    "get_material",
    "material_sound_speed",
    # Config
    "SimulationConfig",
    # Analysis
    "LatticeStatistics",
    "lattice_statistics",
    "identify_materials",
    # Submodules
    "materials",
    "geometry",
    "boundaries",
    "analysis",
]
