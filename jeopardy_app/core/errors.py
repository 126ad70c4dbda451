"""Exceptions raised while assembling and playing a trivia board."""

from __future__ import annotations


class JeopardyError(Exception):
    """Base class for every error raised by the trivia board core."""


class InvalidSampleSize(JeopardyError):
    """Raised when more items are requested than the source holds."""

    def __init__(self, requested: int, available: int) -> None:
        super().__init__(f"Cannot sample {requested} item(s) from a pool of {available}.")
        self.requested = requested
        self.available = available


class InsufficientClues(JeopardyError):
    """Raised when a fetched category cannot fill a full board column."""

    def __init__(self, title: str, available: int, required: int) -> None:
        super().__init__(
            f"Category '{title}' has {available} usable clue(s); {required} are required."
        )
        self.title = title
        self.available = available
        self.required = required


class IndexOutOfRange(JeopardyError, IndexError):
    """Raised when a board coordinate does not address a rendered cell."""

    def __init__(self, category_index: int, clue_index: int) -> None:
        super().__init__(f"No clue at coordinate ({category_index}, {clue_index}).")
        self.category_index = category_index
        self.clue_index = clue_index


class InvalidCategoryData(JeopardyError):
    """Raised when the category service returns data the board cannot use."""


class RemoteServiceUnavailable(JeopardyError):
    """Raised on transport-level failures talking to the category service."""


class SessionStartFailed(JeopardyError):
    """Raised when a game could not be started; the cause is chained."""
