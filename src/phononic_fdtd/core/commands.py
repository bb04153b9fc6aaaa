"""Single-writer command queue for sharing a solver across threads.

The solver and the material editor mutate the grid without locking, which is
only safe while one thread does all the writing. When painting originates on
another thread (a UI event loop, a network handler), submit the edits as
commands instead and let the thread that owns the solver apply them:

    >>> solver = WaveSolver(size=100)
    >>> queue = CommandQueue(solver)
    >>> queue.submit(PaintCommand(x=50, y=50, material=MaterialType.STEEL))
    >>> queue.submit(StepCommand(frequency=2000.0, elapsed_time=solver.dt))
    >>> queue.process_pending()
    2

Commands are applied strictly in submission order, so a paint submitted
between two steps takes effect on the second one.
"""

from __future__ import annotations

import queue
import threading
from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

from phononic_fdtd.materials import Material, MaterialType

if TYPE_CHECKING:
    from .solver import WaveSolver


@dataclass(frozen=True)
class PaintCommand:
    """Paint ``material`` with a square brush centred on cell ``(x, y)``."""

    x: int
    y: int
    material: MaterialType | Material | str
    brush_size: int = 1


@dataclass(frozen=True)
class StepCommand:
    """Advance the solver one step with the given source parameters."""

    frequency: float
    elapsed_time: float
    amplitude: float = 1.0
    source_x: float = 0.5
    source_y: float = 0.5


@dataclass(frozen=True)
class ResetFieldsCommand:
    """Zero the wave fields, keeping the material map."""


@dataclass(frozen=True)
class ResetMaterialCommand:
    """Fill the domain with one material."""

    material: MaterialType | Material | str


Command = Union[PaintCommand, StepCommand, ResetFieldsCommand, ResetMaterialCommand]


class CommandQueue:
    """FIFO of grid commands consumed by a single owning thread.

    :meth:`submit` may be called from any thread. :meth:`process_pending`
    may only be called from one thread: the first thread to call it becomes
    the owner.

    Args:
        solver: The solver all commands are applied to
    """

    def __init__(self, solver: WaveSolver):
        self.solver = solver
        self._queue: queue.SimpleQueue[Command] = queue.SimpleQueue()
        self._owner: int | None = None
        self._owner_lock = threading.Lock()

    def submit(self, command: Command) -> None:
        """Enqueue a command for the owning thread."""
        self._queue.put(command)

    def pending(self) -> int:
        """Approximate number of commands waiting."""
        return self._queue.qsize()

    def process_pending(self, max_commands: int | None = None) -> int:
        """Apply queued commands in submission order.

        Args:
            max_commands: Stop after this many commands (default: drain)

        Returns:
            Number of commands applied

        Raises:
            RuntimeError: If called from a thread other than the owner
            TypeError: If an unknown command type was submitted
        """
        thread_id = threading.get_ident()
        with self._owner_lock:
            if self._owner is None:
                self._owner = thread_id
            owner = self._owner
        if owner != thread_id:
            raise RuntimeError(
                "CommandQueue.process_pending called from a non-owning thread"
            )

        applied = 0
        while max_commands is None or applied < max_commands:
            try:
                command = self._queue.get_nowait()
            except queue.Empty:
                break
            self._apply(command)
            applied += 1
        return applied

    def _apply(self, command: Command) -> None:
        solver = self.solver
        if isinstance(command, StepCommand):
            solver.step(
                command.frequency,
                command.amplitude,
                command.source_x,
                command.source_y,
                command.elapsed_time,
            )
        elif isinstance(command, PaintCommand):
            solver.paint(command.x, command.y, command.material, command.brush_size)
        elif isinstance(command, ResetFieldsCommand):
            solver.reset_fields()
        elif isinstance(command, ResetMaterialCommand):
            solver.reset_material(command.material)
        else:
            raise TypeError(f"Unknown command type: {type(command).__name__}")
