"""Shared fixtures for the phononic-fdtd test suite."""

import pytest

from phononic_fdtd import WaveGrid, WaveSolver


@pytest.fixture
def small_grid():
    """Air-filled 20x20 grid with the default absorbing layer."""
    return WaveGrid(size=20)


@pytest.fixture
def medium_grid():
    """Air-filled 60x60 grid with the default absorbing layer."""
    return WaveGrid(size=60)


@pytest.fixture
def small_solver():
    """20x20 solver at the default dx/dt."""
    return WaveSolver(size=20)


@pytest.fixture
def medium_solver():
    """60x60 solver at the default dx/dt."""
    return WaveSolver(size=60)
