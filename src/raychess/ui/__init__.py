"""Front ends: terminal renderer, command loop and the Qt board window.

The Qt modules import PyQt6 at import time; import them directly
(``raychess.ui.board_window``) only when the ``gui`` extra is installed.
"""

from raychess.ui.command_loop import CommandLoop, ExitRequested
from raychess.ui.i18n import LANGUAGES, Strings, set_language, t
from raychess.ui.terminal import TerminalRenderer

__all__ = [
    "CommandLoop",
    "ExitRequested",
    "LANGUAGES",
    "Strings",
    "TerminalRenderer",
    "set_language",
    "t",
]
