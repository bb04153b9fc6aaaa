"""Boundary treatments for FDTD simulations."""

from phononic_fdtd.boundaries._boundaries import (
    AbsorbingLayer,
    apply_boundary,
    edge_distance,
)

__all__ = [
    "AbsorbingLayer",
    "apply_boundary",
    "edge_distance",
]
