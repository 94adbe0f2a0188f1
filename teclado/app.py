"""Application entry point for the ABNT2 on-screen keyboard demo."""

import logging
import sys

from PySide6.QtWidgets import QApplication

from teclado.core.settings import load_settings
from teclado.ui.main_window import MainWindow


def configure_logging(level: str = "INFO") -> None:
    """Configure application-wide logging with a standard format."""
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def run() -> None:
    """Load settings, build the window and start the Qt event loop."""
    settings = load_settings()
    configure_logging(settings.log_level)

    app = QApplication(sys.argv)
    app.setApplicationName("Teclado")
    app.setApplicationDisplayName("Teclado ABNT2")

    window = MainWindow(settings=settings)
    window.show()
    logging.info("Keyboard ready (log level %s)", settings.log_level)

    sys.exit(app.exec())


if __name__ == "__main__":
    run()
