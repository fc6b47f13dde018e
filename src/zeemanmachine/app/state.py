from __future__ import annotations

from dataclasses import dataclass, fields, replace

from PySide6.QtCore import QObject, Signal

from zeemanmachine.config import DEFAULT_SETTINGS, SolverSettings
from zeemanmachine.model.geometry_primitives import Vector2
from zeemanmachine.model.machine import Machine
from zeemanmachine.solvers.updater import MachineUpdater


@dataclass(frozen=True)
class DisplayOptions:
    """
    UI toggles.

    Attributes:
        pointer_locked: Pointer events are ignored, the pointer stays put.
        show_elastics: Draw the two elastics.
        show_potential: Show the potential-vs-angle curve.
        show_grid: Draw model-space grid lines behind the machine.
    """
    pointer_locked: bool = False
    show_elastics: bool = True
    show_potential: bool = True
    show_grid: bool = False

    @classmethod
    def names(cls) -> list[str]:
        return [f.name for f in fields(cls)]


class Store(QObject):
    """Central state store with signals for view/panel sync."""
    machine_changed = Signal(object)
    options_changed = Signal(object)

    def __init__(self, settings: SolverSettings = DEFAULT_SETTINGS) -> None:
        super().__init__()
        self.updater = MachineUpdater(settings=settings)
        self.options = DisplayOptions()

    @property
    def machine(self) -> Machine:
        return self.updater.machine

    def move_pointer(self, pointer: Vector2) -> bool:
        """Feed a pointer event (model coordinates). Returns False if ignored."""
        if self.options.pointer_locked:
            return False
        self.machine_changed.emit(self.updater.move_pointer(pointer))
        return True

    def set_option(self, name: str, value: bool) -> None:
        if name not in DisplayOptions.names():
            raise ValueError(f"Unknown display option '{name}'.")
        if getattr(self.options, name) == value:
            return
        self.options = replace(self.options, **{name: value})
        self.options_changed.emit(self.options)

    def reset(self) -> None:
        self.machine_changed.emit(self.updater.reset())
