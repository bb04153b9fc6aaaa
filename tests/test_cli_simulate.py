"""Tests for the phononic-simulate command-line tool."""

import io

from click.testing import CliRunner
from rich.console import Console

from phononic_fdtd import WaveSolver
from phononic_fdtd.cli.progress import SimulationProgress
from phononic_fdtd.cli.simulate import main


def run_cli(*args):
    runner = CliRunner()
    return runner.invoke(main, list(args))


def test_dry_run():
    result = run_cli("--size", "40", "--dry-run")

    assert result.exit_code == 0, result.output
    assert "Dry run - simulation not executed" in result.output
    assert "40 × 40" in result.output
    assert "Simulation complete" not in result.output


def test_small_run():
    result = run_cli("--size", "30", "--steps", "20", "--padding", "5", "--no-progress")

    assert result.exit_code == 0, result.output
    assert "Simulation complete!" in result.output
    assert "Steps: 20" in result.output


def test_run_with_progress_bar():
    result = run_cli("--size", "24", "--steps", "10", "--padding", "4", "--progress")

    assert result.exit_code == 0, result.output
    assert "Simulation complete!" in result.output


def test_custom_lattice_is_stable():
    result = run_cli(
        "--size", "50",
        "--steps", "50",
        "--lattice", "custom",
        "--period", "8",
        "--inclusion", "3",
        "--no-progress",
        "--verbose",
    )

    assert result.exit_code == 0, result.output
    assert "custom inclusions" in result.output
    assert "CFL bound" not in result.output
    assert "Simulation complete!" in result.output


def test_steel_lattice_reports_instability():
    result = run_cli(
        "--size", "30",
        "--steps", "200",
        "--lattice", "STEEL",
        "--period", "6",
        "--inclusion", "3",
        "--padding", "4",
        "--no-progress",
    )

    assert result.exit_code == 0, result.output
    assert "UNSTABLE" in result.output
    assert "CFL bound" in result.output
    assert "Field diverged" in result.output


def test_steel_dry_run_with_small_dt_is_stable():
    result = run_cli("--size", "30", "--lattice", "steel", "--dt", "1e-6", "--dry-run")

    assert result.exit_code == 0, result.output
    assert "UNSTABLE" not in result.output


def test_invalid_size():
    result = run_cli("--size", "0", "--dry-run")

    assert result.exit_code == 1
    assert "Invalid configuration" in result.output


def test_invalid_source_position():
    result = run_cli("--source-x", "1.5", "--dry-run")

    assert result.exit_code == 1
    assert "source_x" in result.output


def test_unknown_material():
    result = run_cli("--lattice", "gold", "--dry-run")
    assert result.exit_code == 2


def test_version():
    result = run_cli("--version")

    assert result.exit_code == 0
    assert "0.1.0" in result.output


def test_progress_stats_show_peak_memory():
    solver = WaveSolver(size=10, padding=2)
    with SimulationProgress(Console(file=io.StringIO()), solver, num_steps=1) as bar:
        solver.step(1000.0, 1.0, 0.5, 0.5, solver.dt)
        bar.update(solver.step_count)
        stats = bar.progress.tasks[0].fields["stats"]

    assert bar.peak_memory > 0
    assert "peak:" in stats
