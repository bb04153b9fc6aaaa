"""Core FDTD solver components."""

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

__all__ = [
    "WaveGrid",
    "GridState",
    "WaveSolver",
    "SineSource",
    "CommandQueue",
    "PaintCommand",
    "StepCommand",
    "ResetFieldsCommand",
    "ResetMaterialCommand",
    "courant_number",
    "max_stable_dt",
    "GRID_SIZE",
    "DX",
    "DT",
    "CFL_LIMIT_2D",
]
