"""Centralized styles and font definitions for the application."""

from .color_palette import ColorPalette, Theme

class Styles:
    """Helper class to generate Qt stylesheets based on the current theme."""

    @staticmethod
    def get_main_window_style(theme: Theme = Theme.LIGHT) -> str:
        return f"""
            QMainWindow {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
            }}
            QWidget {{
                font-family: 'Segoe UI', 'Roboto', sans-serif;
                font-size: 14px;
            }}
            QPushButton {{
                background-color: {ColorPalette.BUTTON_SECONDARY_BG.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 4px;
                padding: 6px 12px;
            }}
            QPushButton:hover {{
                background-color: {ColorPalette.BUTTON_HOVER_BG.get(theme)};
            }}
            QPushButton:disabled {{
                color: {ColorPalette.BORDER_PRIMARY.get(theme)};
            }}
        """

    @staticmethod
    def get_board_style(theme: Theme = Theme.LIGHT) -> str:
        return f"background-color: {ColorPalette.BOARD_GRID_LINE.get(theme)};"

    @staticmethod
    def get_category_header_style(font_size: int, theme: Theme = Theme.LIGHT) -> str:
        return (
            f"background-color: {ColorPalette.BOARD_BACKGROUND.get(theme)};"
            f"color: {ColorPalette.BOARD_HEADER_TEXT.get(theme)};"
            f"font-size: {font_size}pt; font-weight: bold; padding: 8px;"
        )

    @staticmethod
    def get_clue_cell_style(font_size: int, revealed: bool, theme: Theme = Theme.LIGHT) -> str:
        text_color = (
            ColorPalette.BOARD_REVEALED_TEXT if revealed else ColorPalette.BOARD_CELL_TEXT
        ).get(theme)
        weight = "normal" if revealed else "bold"
        return (
            f"background-color: {ColorPalette.BOARD_BACKGROUND.get(theme)};"
            f"color: {text_color};"
            f"font-size: {font_size}pt; font-weight: {weight}; padding: 6px;"
        )

    @staticmethod
    def get_status_style(is_error: bool = False, theme: Theme = Theme.LIGHT) -> str:
        color = ColorPalette.ERROR if is_error else ColorPalette.TEXT_PRIMARY
        return f"font-size: 16pt; font-weight: bold; color: {color.get(theme)};"
