"""
Application Initialization
==========================
This module constructs the store and the main window and starts the Qt event
loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Sets up logging.
2. Instantiates the global store (machine state + display options).
3. Passes the store into the main window so views and panels share it.
"""
import logging
import sys

import pyqtgraph as pg

from zeemanmachine.app.application import create_app
from zeemanmachine.app.state import Store
from zeemanmachine.app.ui.main_window import MainWindow
from zeemanmachine.logging_config import setup_logging

pg.setConfigOption("background", "w")
pg.setConfigOption("foreground", "k")


def main() -> None:
    # Use logging.DEBUG to see stuck/non-converged updates
    setup_logging(level=logging.INFO)

    app = create_app()

    store = Store()
    window = MainWindow(store)
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
