from __future__ import annotations

import math

from PySide6.QtWidgets import (
    QCheckBox, QFormLayout, QGroupBox, QLabel, QPushButton, QVBoxLayout, QWidget
)

from zeemanmachine.app.state import DisplayOptions, Store
from zeemanmachine.app.ui.panels.base import BasePanel
from zeemanmachine.model.machine import Machine
from zeemanmachine.model.potential import elastic_length, potential

OPTION_LABELS = {
    "pointer_locked": "Lock pointer",
    "show_elastics": "Show elastics",
    "show_potential": "Show potential curve",
    "show_grid": "Show grid",
}


class OptionsPanel(BasePanel):
    """Display toggles and a read-out of the current machine state."""

    def __init__(self, store: Store, parent: QWidget | None = None) -> None:
        super().__init__(store, parent)

        layout = QVBoxLayout(self)

        # ---- Toggles ----
        toggles = QGroupBox("Display", self)
        toggles_layout = QVBoxLayout(toggles)
        self.checkboxes: dict[str, QCheckBox] = {}
        for name in DisplayOptions.names():
            checkbox = QCheckBox(OPTION_LABELS[name], toggles)
            checkbox.toggled.connect(lambda checked, n=name: self.store.set_option(n, checked))
            toggles_layout.addWidget(checkbox)
            self.checkboxes[name] = checkbox
        layout.addWidget(toggles)

        # ---- State read-out ----
        readout = QGroupBox("State", self)
        form = QFormLayout(readout)
        self.lbl_theta = QLabel("-")
        self.lbl_pointer = QLabel("-")
        self.lbl_energy = QLabel("-")
        self.lbl_elastics = QLabel("-")
        form.addRow("Angle θ", self.lbl_theta)
        form.addRow("Pointer", self.lbl_pointer)
        form.addRow("Potential", self.lbl_energy)
        form.addRow("Elastic lengths", self.lbl_elastics)
        layout.addWidget(readout)

        self.btn_reset = QPushButton("Reset", self)
        self.btn_reset.clicked.connect(lambda: self.store.reset())
        layout.addWidget(self.btn_reset)
        layout.addStretch()

        store.machine_changed.connect(self.update_machine)
        store.options_changed.connect(self.apply_options)
        self.update_machine(store.machine)
        self.apply_options(store.options)

    def update_machine(self, machine: Machine) -> None:
        self.lbl_theta.setText(f"{math.degrees(machine.theta):.2f}°")
        self.lbl_pointer.setText(f"({machine.pointer.x:.2f}, {machine.pointer.y:.2f})")
        self.lbl_energy.setText(f"{potential(machine):.4f}")
        la = elastic_length(machine.anchor, machine.theta)
        lb = elastic_length(machine.pointer, machine.theta)
        self.lbl_elastics.setText(f"{la:.3f} / {lb:.3f}")

    def apply_options(self, options: DisplayOptions) -> None:
        for name, checkbox in self.checkboxes.items():
            checkbox.blockSignals(True)
            checkbox.setChecked(getattr(options, name))
            checkbox.blockSignals(False)
