# -*- coding: utf-8 -*-
"""Application entry point."""

from __future__ import annotations

import logging
import sys
import traceback
from pathlib import Path

from PyQt6.QtWidgets import QApplication, QMessageBox

from yamltodo.config import ConfigError, get_default_config, load_config
from yamltodo.constants import APP_NAME
from yamltodo.gui.main_window import MainWindow
from yamltodo.utils.logger import setup_session_logging


def global_exception_handler(exc_type, exc_value, exc_traceback):
    """Log fatal errors and keep a copy in logs/LAST_CRASH.log."""
    error_msg = "".join(traceback.format_exception(exc_type, exc_value, exc_traceback))
    logging.getLogger().critical("FATAL CRASH:\n%s", error_msg)

    crash_path = Path.cwd() / "logs" / "LAST_CRASH.log"
    try:
        crash_path.parent.mkdir(parents=True, exist_ok=True)
        crash_path.write_text(error_msg, encoding="utf-8")
    except OSError:
        logging.getLogger().exception("Could not write crash report to %s", crash_path)

    if QApplication.instance():
        QMessageBox.critical(None, "Application Crash", f"A fatal error occurred.\nDetails saved to: {crash_path}")

    sys.__excepthook__(exc_type, exc_value, exc_traceback)


def main() -> int:
    """Start the GUI application."""
    sys.excepthook = global_exception_handler
    session_log_path = setup_session_logging(Path.cwd(), APP_NAME)
    logger = logging.getLogger(__name__)
    app = QApplication(sys.argv)
    if session_log_path is not None:
        logger.info("Session log file: %s", session_log_path)

    try:
        settings = load_config()
    except (ConfigError, ValueError) as exc:
        logger.error("Invalid settings, falling back to defaults: %s", exc)
        QMessageBox.warning(None, "Settings", f"settings.json is invalid and was ignored:\n{exc}")
        settings = get_default_config()

    # Command-line argument wins over the configured file.
    startup_file: Path | None = None
    if len(sys.argv) > 1:
        startup_file = Path(sys.argv[1])
    else:
        candidate = Path(settings["todo_file"])
        if candidate.exists():
            startup_file = candidate
            logger.info("Auto-loading configured to-do file: %s", startup_file)

    window = MainWindow(settings=settings)
    if startup_file is not None:
        window.load_file(startup_file)
    window.show()

    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
