"""Command-line tool for headless lattice simulations.

The phononic-simulate CLI builds a solver, optionally paints a periodic
lattice of inclusions between the source and the far edge, drives the
source for a number of steps and reports the stability of the layout and
the resulting peak amplitude.
"""

import sys
import time
import warnings

import click
import numpy as np
from rich.console import Console

from phononic_fdtd.analysis import lattice_statistics
from phononic_fdtd.config import SimulationConfig
from phononic_fdtd.core.solver import DT, DX, WaveSolver
from phononic_fdtd.geometry import paint_lattice
from phononic_fdtd.materials import list_materials

from .progress import SimulationProgress, format_time, print_lattice_info, print_simulation_info

console = Console()

MATERIAL_CHOICE = click.Choice(list_materials(), case_sensitive=False)


@click.command()
@click.option("--size", type=int, default=120, show_default=True, help="Grid side length in cells")
@click.option("--frequency", "-f", type=float, default=2000.0, show_default=True, help="Source frequency (Hz)")
@click.option("--amplitude", type=float, default=1.0, show_default=True, help="Source amplitude")
@click.option("--source-x", type=float, default=0.1, show_default=True, help="Normalized source x position")
@click.option("--source-y", type=float, default=0.5, show_default=True, help="Normalized source y position")
@click.option("--steps", "-n", type=int, default=1000, show_default=True, help="Number of timesteps")
@click.option("--dx", type=float, default=DX, show_default=True, help="Cell size (m)")
@click.option("--dt", type=float, default=DT, show_default=True, help="Timestep (s)")
@click.option("--background", type=MATERIAL_CHOICE, default="AIR", show_default=True, help="Background material")
@click.option("--lattice", type=MATERIAL_CHOICE, default=None, help="Inclusion material (no lattice if omitted)")
@click.option("--period", type=int, default=12, show_default=True, help="Lattice constant (cells)")
@click.option("--inclusion", type=int, default=5, show_default=True, help="Inclusion width (cells)")
@click.option("--padding", type=int, default=10, show_default=True, help="Absorbing layer thickness (cells)")
@click.option("--progress/--no-progress", default=True, help="Show a progress bar")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output with debug info")
@click.option("--dry-run", is_flag=True, help="Validate parameters without stepping")
@click.version_option(version="0.1.0", prog_name="phononic-simulate")
def main(
    size: int,
    frequency: float,
    amplitude: float,
    source_x: float,
    source_y: float,
    steps: int,
    dx: float,
    dt: float,
    background: str,
    lattice: str | None,
    period: int,
    inclusion: int,
    padding: int,
    progress: bool,
    verbose: bool,
    dry_run: bool,
):
    """Drive a sinusoidal point source through a painted lattice.

    Example:

    \b
        phononic-simulate --lattice steel --dt 1e-6 --steps 2000
    """
    try:
        config = SimulationConfig(
            frequency=frequency,
            amplitude=amplitude,
            source_x=source_x,
            source_y=source_y,
            grid_resolution=size,
        )
        solver = WaveSolver.from_config(
            config, dx=dx, dt=dt, default_material=background, padding=padding
        )
    except ValueError as e:
        console.print(f"\n[bold red]Invalid configuration:[/bold red] {e}")
        sys.exit(1)

    console.print("\n[bold]Phononic lattice simulation[/bold]", style="blue")
    console.print("─" * 60)

    if lattice is not None:
        # Lattice fills the band between the source and the far absorbing layer
        source_cell_x, _ = config.source.cell(solver.size)
        start = (min(source_cell_x + period, solver.size), padding)
        stop = (solver.size - padding, solver.size - padding)
        try:
            centers = paint_lattice(
                solver.grid, lattice, period, inclusion, start=start, stop=stop
            )
        except ValueError as e:
            console.print(f"\n[bold red]Invalid lattice:[/bold red] {e}")
            sys.exit(1)
        if verbose:
            console.print(f"Painted {len(centers)} {lattice.lower()} inclusions")

    print_simulation_info(console, solver, steps)
    print_lattice_info(console, lattice_statistics(solver.velocity_map))

    if not solver.is_stable():
        console.print(
            "[yellow]Warning:[/yellow] layout violates the CFL bound; "
            "the field is expected to diverge"
        )

    if dry_run:
        console.print("[yellow]Dry run - simulation not executed[/yellow]")
        return

    start_time = time.time()
    try:
        with warnings.catch_warnings(), np.errstate(over="ignore", invalid="ignore"):
            # Instability was already reported above
            warnings.simplefilter("ignore", UserWarning)
            if progress:
                with SimulationProgress(console, solver, steps) as bar:
                    solver.run(steps, config.source, callback=bar.update)
            else:
                solver.run(steps, config.source)
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted by user[/yellow]")
        sys.exit(130)
    runtime = time.time() - start_time

    peak = solver.max_amplitude()
    console.print("─" * 60)
    if np.isfinite(peak):
        console.print("✓ [bold green]Simulation complete![/bold green]")
    else:
        console.print("✗ [bold red]Field diverged[/bold red]")
    console.print(f"  Steps: {solver.step_count} (t = {solver.time:.3e} s)")
    console.print(f"  Peak amplitude: {peak:.4g}")
    console.print(f"  Runtime: {format_time(runtime)}")

    if runtime > 0:
        throughput = steps * solver.grid.num_cells / runtime / 1e6
        console.print(f"  Average throughput: {throughput:.1f} Mcells/s")


if __name__ == "__main__":
    main()
