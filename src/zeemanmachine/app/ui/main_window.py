from __future__ import annotations

import logging

from PySide6.QtCore import Qt, QSettings
from PySide6.QtWidgets import QMainWindow, QSplitter, QStatusBar, QVBoxLayout, QWidget

from zeemanmachine.app.application import VISIBLE_APP_NAME
from zeemanmachine.app.state import DisplayOptions, Store
from zeemanmachine.app.ui.machine_view import MachineView
from zeemanmachine.app.ui.panels.options import OptionsPanel
from zeemanmachine.app.ui.potential_plot import PotentialPlot
from zeemanmachine.model.machine import Machine

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, store: Store | None = None) -> None:
        super().__init__()
        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(1200, 800)

        # Global store
        self.store = store or Store()

        # ---- Central: options | (machine / potential) ----
        split = QSplitter(Qt.Orientation.Horizontal, self)
        split.setChildrenCollapsible(False)

        self.options_panel = OptionsPanel(self.store, parent=split)

        right = QWidget(split)
        v = QVBoxLayout(right)
        v.setContentsMargins(0, 0, 0, 0)
        self.machine_view = MachineView(self.store, parent=right)
        self.potential_plot = PotentialPlot(self.store, parent=right)
        v.addWidget(self.machine_view, 3)
        v.addWidget(self.potential_plot, 1)

        split.addWidget(self.options_panel)
        split.addWidget(right)
        split.setStretchFactor(0, 0)
        split.setStretchFactor(1, 1)
        self.setCentralWidget(split)

        self.setStatusBar(QStatusBar(self))
        self.store.machine_changed.connect(self._update_status)
        self._update_status(self.store.machine)

        self._load_options()

    def closeEvent(self, event) -> None:
        self._save_options()
        super().closeEvent(event)

    def _update_status(self, machine: Machine) -> None:
        updater = self.store.updater
        self.statusBar().showMessage(
            f"θ = {machine.theta:.4f} rad  |  tracked: {updater.tracked}  stuck: {updater.stuck}"
        )

    # ---------- Persisted display options ----------

    def _load_options(self) -> None:
        settings = QSettings()
        defaults = DisplayOptions()
        for name in DisplayOptions.names():
            value = settings.value(f"display/{name}", getattr(defaults, name), type=bool)
            self.store.set_option(name, bool(value))
        logger.info("Display options loaded.")

    def _save_options(self) -> None:
        settings = QSettings()
        for name in DisplayOptions.names():
            settings.setValue(f"display/{name}", getattr(self.store.options, name))
