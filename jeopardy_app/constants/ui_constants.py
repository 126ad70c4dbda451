"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "JeopardyQt"
DEFAULT_BOARD_FONT_SIZE: int = 14

RESTART_BUTTON_TEXT: str = "Restart Game"
START_BUTTON_TEXT: str = "Start Game"
SETTINGS_BUTTON_TEXT: str = "Settings"
ABOUT_BUTTON_TEXT: str = "About"
HELP_BUTTON_TEXT: str = "Help"

LOADING_MESSAGE: str = "Loading…"
IDLE_MESSAGE: str = "Press \"Start Game\" to draw a board."
FAILED_MESSAGE_TEMPLATE: str = "Could not load a board: {reason}\nPress \"Restart Game\" to try again."
