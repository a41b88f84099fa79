"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

from raychess.settings import AppSettings

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

_LOGGER = logging.getLogger(__name__)


def _configure_application(app: QApplication) -> None:
    """Apply app-wide settings."""
    app.setApplicationName("raychess")
    app.setStyle("Fusion")


def run_application(settings: AppSettings, argv: list[str] | None = None) -> int:
    """Create and run the Qt board window."""
    from PyQt6.QtWidgets import QApplication

    from raychess.game.engine import GameEngine
    from raychess.ui.board_window import BoardWindow

    app = QApplication(sys.argv if argv is None else argv)
    _configure_application(app)

    window = BoardWindow(GameEngine(), settings)
    window.show()
    _LOGGER.debug("Board window shown")

    return app.exec()
