"""Allow running FocusTimer as a module: python -m focustimer."""

import logging
import sys

from PyQt6.QtWidgets import QApplication

from .app import FocusTimerApp
from .settings import load_settings


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Configure logging for the application."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    return logging.getLogger("focustimer")


def main() -> None:
    settings = load_settings()
    logger = setup_logging(settings.log_level)

    app = QApplication(sys.argv)
    app.setApplicationName("FocusTimer")
    app.setOrganizationName("FocusTimer")

    window = FocusTimerApp(settings)
    window.show()
    logger.info("FocusTimer ready")

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
