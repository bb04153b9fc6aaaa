"""
Coarse statistics of a painted material layout.

These summarize the velocity map for consumers such as a transmission
estimate or a layout legend: sound speed range, contrast and the fraction of
cells that differ from the background medium. They are read-only views of
the layout and say nothing about the wave field.

Typical usage:
    >>> stats = lattice_statistics(solver.velocity_map)
    >>> print(f"fill {stats.filling_fraction:.0%}, contrast {stats.contrast:.1f}")
"""

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from phononic_fdtd.materials import AIR, MATERIALS


@dataclass(frozen=True)
class LatticeStatistics:
    """Summary of a velocity map.

    Attributes:
        mean_speed: Mean sound speed over sampled cells (m/s)
        min_speed: Slowest sampled sound speed (m/s)
        max_speed: Fastest sampled sound speed (m/s)
        contrast: max_speed / min_speed
        filling_fraction: Fraction of sampled cells differing from the
            reference speed by more than the tolerance
        n_samples: Number of cells sampled
    """

    mean_speed: float
    min_speed: float
    max_speed: float
    contrast: float
    filling_fraction: float
    n_samples: int


def lattice_statistics(
    velocity_map: NDArray[np.floating],
    reference_speed: float = AIR.speed_of_sound,
    tolerance: float = 10.0,
    stride: int = 4,
) -> LatticeStatistics:
    """Summarize a velocity map (values are c²).

    Args:
        velocity_map: Flat or 2D array of squared sound speeds
        reference_speed: Background speed in m/s (default: air)
        tolerance: Speed difference in m/s above which a cell counts as
            filled (default: 10)
        stride: Sample every ``stride``-th cell of the flattened map
            (default: 4)

    Returns:
        LatticeStatistics for the sampled cells

    Raises:
        ValueError: If the map is empty or stride is less than 1
    """
    if stride < 1:
        raise ValueError(f"stride must be at least 1, got {stride}")
    samples = np.ravel(velocity_map)[::stride]
    if samples.size == 0:
        raise ValueError("velocity_map is empty")

    speeds = np.sqrt(samples.astype(np.float64))
    min_speed = float(speeds.min())
    max_speed = float(speeds.max())
    filled = np.abs(speeds - reference_speed) > tolerance

    return LatticeStatistics(
        mean_speed=float(speeds.mean()),
        min_speed=min_speed,
        max_speed=max_speed,
        contrast=max_speed / min_speed,
        filling_fraction=float(filled.mean()),
        n_samples=int(speeds.size),
    )


def identify_materials(
    velocity_map: NDArray[np.floating],
    tolerance: float = 10.0,
) -> NDArray[np.int8]:
    """Map each cell back to a catalog material.

    Args:
        velocity_map: Flat or 2D array of squared sound speeds
        tolerance: Maximum speed difference in m/s for a match

    Returns:
        Array of the same shape holding the index of the matching material
        in ``list(MATERIALS)``, or -1 where no catalog material is within
        the tolerance
    """
    speeds = np.sqrt(np.asarray(velocity_map, dtype=np.float64))
    catalog = np.array([m.speed_of_sound for m in MATERIALS.values()])

    diff = np.abs(speeds[..., np.newaxis] - catalog)
    nearest = np.argmin(diff, axis=-1).astype(np.int8)
    nearest[np.min(diff, axis=-1) > tolerance] = -1
    return nearest
