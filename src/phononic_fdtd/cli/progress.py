"""Progress display for headless lattice simulations.

Provides a rich terminal progress bar with:
- Percentage and ETA
- Computational throughput (Mcells/s)
- Memory usage
"""

import time
from typing import TYPE_CHECKING

import psutil
from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
    TimeRemainingColumn,
)
from rich.table import Table

if TYPE_CHECKING:
    from phononic_fdtd.analysis import LatticeStatistics
    from phononic_fdtd.core.solver import WaveSolver


def format_time(seconds: float) -> str:
    """Format time duration for display.

    Args:
        seconds: Duration in seconds

    Returns:
        Formatted string like "1m 23s" or "2h 15m"
    """
    if seconds < 60:
        return f"{seconds:.0f}s"
    elif seconds < 3600:
        minutes = int(seconds // 60)
        secs = int(seconds % 60)
        return f"{minutes}m {secs:02d}s"
    else:
        hours = int(seconds // 3600)
        minutes = int((seconds % 3600) // 60)
        return f"{hours}h {minutes:02d}m"


class SimulationProgress:
    """Real-time progress bar for :meth:`WaveSolver.run`.

    Example:
        >>> with SimulationProgress(console, solver, num_steps) as progress:
        ...     solver.run(num_steps, source, callback=progress.update)
    """

    def __init__(
        self,
        console: Console,
        solver: "WaveSolver",
        num_steps: int,
        update_interval: float = 0.1,
    ):
        self.console = console
        self.solver = solver
        self.num_steps = num_steps
        self.update_interval = update_interval

        self.start_time = time.time()
        self.last_update = 0.0
        self.peak_memory = 0.0
        self._first_step = solver.step_count

        self.progress = Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            TaskProgressColumn(),
            TimeElapsedColumn(),
            TextColumn("•"),
            TimeRemainingColumn(),
            TextColumn("{task.fields[stats]}", style="dim"),
            console=console,
        )
        self.task = self.progress.add_task("Stepping", total=num_steps, stats="")
        self.progress.start()
        self._finished = False

    def update(self, step_count: int) -> None:
        """Advance the bar to the solver's step count (rate limited)."""
        steps_done = step_count - self._first_step
        current_time = time.time()
        if (
            current_time - self.last_update < self.update_interval
            and steps_done < self.num_steps
        ):
            return

        elapsed = current_time - self.start_time
        if elapsed > 0 and steps_done > 0:
            throughput = steps_done * self.solver.grid.num_cells / elapsed / 1e6
        else:
            throughput = 0.0

        memory = psutil.Process().memory_info().rss / (1024**2)  # MB
        self.peak_memory = max(self.peak_memory, memory)

        self.progress.update(
            self.task,
            completed=steps_done,
            stats=(
                f"{throughput:.1f} Mcells/s | {memory:.0f} MB "
                f"(peak: {self.peak_memory:.0f} MB)"
            ),
        )
        self.last_update = current_time

    def finish(self) -> None:
        """Stop the progress bar (safe to call more than once)."""
        if self._finished:
            return
        self.progress.stop()
        self._finished = True

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.finish()


def print_simulation_info(console: Console, solver: "WaveSolver", num_steps: int) -> None:
    """Print simulation parameters before running.

    Args:
        console: Rich console instance
        solver: Solver to describe
        num_steps: Number of timesteps to run
    """
    report = solver.stability_report()

    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Parameter", style="cyan")
    table.add_column("Value", style="white")

    table.add_row("Grid", f"{solver.size} × {solver.size} ({solver.grid.num_cells} cells)")
    table.add_row("Resolution", f"{solver.dx * 1e3:.2f} mm")
    table.add_row("Timestep", f"{solver.dt:.2e} s")
    table.add_row("Duration", f"{num_steps} steps ({num_steps * solver.dt:.2e} s)")
    table.add_row("Absorbing layer", f"{solver.grid.boundary.padding} cells")

    courant = f"{report['courant_number']:.3f} (limit {report['limit']:.3f})"
    if report["stable"]:
        table.add_row("Courant number", f"[green]{courant}[/green]")
    else:
        table.add_row("Courant number", f"[bold red]{courant} UNSTABLE[/bold red]")
        table.add_row("Max stable dt", f"{report['max_stable_dt']:.2e} s")

    console.print(table)
    console.print()


def print_lattice_info(console: Console, stats: "LatticeStatistics") -> None:
    """Print velocity map statistics."""
    table = Table(title="Material layout", show_header=False, box=None, padding=(0, 2))
    table.add_column("Quantity", style="cyan")
    table.add_column("Value", style="white")

    table.add_row("Sound speed", f"{stats.min_speed:.0f}–{stats.max_speed:.0f} m/s")
    table.add_row("Mean speed", f"{stats.mean_speed:.0f} m/s")
    table.add_row("Contrast", f"{stats.contrast:.2f}")
    table.add_row("Filling fraction", f"{stats.filling_fraction:.1%}")

    console.print(table)
    console.print()
