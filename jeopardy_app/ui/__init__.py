"""Qt UI components for the trivia board application."""

from .board_window import BoardWindow, SessionBridge
from .dialog_helpers import show_error, show_info
from .settings_dialog import SettingsDialog

__all__ = [
    "BoardWindow",
    "SessionBridge",
    "SettingsDialog",
    "show_error",
    "show_info",
]
