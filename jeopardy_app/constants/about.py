"""Static metadata describing JeopardyQt."""

APP_NAME = "JeopardyQt"
APP_VERSION = "0.1"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "JeopardyQt is a desktop trivia board built with Qt. "
    "It pulls random categories from the Jeopardy category service and lets you "
    "reveal each clue's question and answer by clicking on its cell."
)

HELP_TEXT = (
    "Click a \"?\" cell to show its question. Click it again to show the answer.\n\n"
    "Use \"Restart Game\" to draw a fresh set of categories. Start the app with "
    "--offline to play from the bundled clue set without network access."
)
