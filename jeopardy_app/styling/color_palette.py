"""Color palette for JeopardyQt supporting light and dark themes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class Theme(Enum):
    """Application theme options."""
    LIGHT = auto()
    DARK = auto()


@dataclass(frozen=True)
class ThemeColors:
    """Color definitions for a specific theme."""
    light: str
    dark: str

    def get(self, theme: Theme) -> str:
        """Get color value for the specified theme."""
        return self.light if theme == Theme.LIGHT else self.dark


class ColorPalette:
    """Centralized color definitions for the application."""

    TEXT_PRIMARY = ThemeColors(
        light="#000000",      # Black
        dark="#F5F5F5"        # WhiteSmoke
    )

    BACKGROUND_PRIMARY = ThemeColors(
        light="#FFFFFF",      # White
        dark="#1E1E1E"        # Dark Gray
    )

    ERROR = ThemeColors(
        light="#D13438",      # Red
        dark="#FF6B6B"        # Light Red
    )

    BORDER_PRIMARY = ThemeColors(
        light="#D1D1D1",      # Gray
        dark="#555555"        # Dark Gray
    )

    BUTTON_SECONDARY_BG = ThemeColors(
        light="#F5F5F5",      # WhiteSmoke
        dark="#3A3A3A"        # Dark Gray
    )

    BUTTON_HOVER_BG = ThemeColors(
        light="#E8E8E8",      # Light Gray
        dark="#4A4A4A"        # Medium Gray
    )

    # Board colors keep the television look in both themes
    BOARD_BACKGROUND = ThemeColors(
        light="#060CE9",      # Jeopardy blue
        dark="#060CE9"
    )

    BOARD_GRID_LINE = ThemeColors(
        light="#000000",
        dark="#000000"
    )

    BOARD_HEADER_TEXT = ThemeColors(
        light="#FFFFFF",
        dark="#FFFFFF"
    )

    BOARD_CELL_TEXT = ThemeColors(
        light="#FFCC00",      # Gold
        dark="#FFCC00"
    )

    BOARD_REVEALED_TEXT = ThemeColors(
        light="#FFFFFF",
        dark="#FFFFFF"
    )
