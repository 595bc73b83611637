"""
Application Initialization
==========================
This module constructs the MVC (Model-View-Controller) pieces and starts
the Qt Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Configures logging from the environment.
2. Instantiates the shared state (ClassCountState).
3. Instantiates the Main Window (View), which attaches the controller.
"""
import logging
import sys

import pyqtgraph as pg
from PySide6.QtWidgets import QApplication

from losscurve.config import APP_FONT_POINT_SIZE, WINDOW_TITLE, get_log_file, get_log_level
from losscurve.logging_config import setup_logging
from losscurve.model.state import ClassCountState
from losscurve.view.main_window import MainWindow

logger = logging.getLogger(__name__)


def create_app() -> QApplication:
    """Create and configure the QApplication instance (reuses an existing one)."""
    pg.setConfigOption("background", "w")
    pg.setConfigOption("foreground", "k")
    pg.setConfigOptions(antialias=True)

    app = QApplication.instance() or QApplication(sys.argv)
    app.setApplicationName(WINDOW_TITLE)

    font = app.font()
    font.setPointSize(APP_FONT_POINT_SIZE)
    app.setFont(font)
    return app


def main() -> int:
    """Main entry point for the application."""
    setup_logging(level=get_log_level(), log_file=get_log_file())

    app = create_app()
    state = ClassCountState()
    window = MainWindow(state)
    window.show()
    logger.info(f"Window shown with N={state.num_classes}")

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
