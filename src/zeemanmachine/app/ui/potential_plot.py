"""Potential energy against disc angle for the current anchor and pointer."""
from __future__ import annotations

import numpy as np
import pyqtgraph as pg
from PySide6.QtWidgets import QWidget, QVBoxLayout

from zeemanmachine.app.state import DisplayOptions, Store
from zeemanmachine.model.machine import Machine
from zeemanmachine.model.potential import potential, potential_curve


class PotentialPlot(QWidget):
    """pyqtgraph curve V(θ) with a marker at the current disc angle."""

    def __init__(self, store: Store, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.store = store

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.plot_widget = pg.PlotWidget()
        self.plot_widget.showGrid(x=True, y=True, alpha=0.3)
        self.plot_widget.setLabel("bottom", "Disc angle θ (°)")
        self.plot_widget.setLabel("left", "Potential V")
        self.plot_widget.setXRange(0, 360, padding=0.02)
        layout.addWidget(self.plot_widget)

        self._curve = self.plot_widget.plot(pen=pg.mkPen("#1F77B4", width=2))
        self._marker = pg.ScatterPlotItem(size=10, brush=pg.mkBrush("#D62728"))
        self.plot_widget.addItem(self._marker)

        store.machine_changed.connect(self.update_machine)
        store.options_changed.connect(self.apply_options)
        self.update_machine(store.machine)
        self.apply_options(store.options)

    def update_machine(self, machine: Machine) -> None:
        thetas, energies = potential_curve(machine)
        self._curve.setData(np.degrees(thetas), energies)
        self._marker.setData([np.degrees(machine.theta)], [potential(machine)])

    def apply_options(self, options: DisplayOptions) -> None:
        self.setVisible(options.show_potential)
