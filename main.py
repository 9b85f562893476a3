# main.py
"""
Design Consts showcase - PyQt6 desktop application.

Entry point for the application.
"""
from __future__ import annotations

import logging
import sys

from design_consts.logging_setup import setup_logging


def main() -> None:
    """Main entry point for the showcase application."""
    # Initialize logging once for the whole app
    setup_logging(debug="--debug" in sys.argv)
    logger = logging.getLogger(__name__)
    logger.info("Starting Design Consts showcase")

    from PyQt6.QtWidgets import QApplication

    app = QApplication(sys.argv)
    app.setApplicationName("Design Consts")
    app.setStyle("Fusion")

    from design_consts.config import Config
    config = Config()

    from showcase_qt.main_window import ShowcaseWindow
    window = ShowcaseWindow(config)
    window.show()

    logger.info("Application ready")
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
