"""Component drawing the category/clue grid."""

from __future__ import annotations

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QMouseEvent
from PySide6.QtWidgets import QGridLayout, QLabel, QSizePolicy, QWidget

from jeopardy_app.constants.board_constants import HIDDEN_CELL_TEXT
from jeopardy_app.constants.ui_constants import DEFAULT_BOARD_FONT_SIZE
from jeopardy_app.core.category_set import CategorySet
from jeopardy_app.core.clue_state import ClueStateMachine
from jeopardy_app.core.clue_text_renderer import renderer
from jeopardy_app.core.models import RevealState
from jeopardy_app.styling.styles import Styles


class ClueCell(QLabel):
    """Clickable label showing ``?``, a question or an answer."""

    activated = Signal(int, int)

    def __init__(self, category_index: int, clue_index: int, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.category_index = category_index
        self.clue_index = clue_index
        self.setAlignment(Qt.AlignCenter)
        self.setWordWrap(True)
        self.setTextFormat(Qt.RichText)
        self.setCursor(Qt.PointingHandCursor)
        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)

    def mousePressEvent(self, event: QMouseEvent) -> None:
        if event.button() == Qt.LeftButton:
            self.activated.emit(self.category_index, self.clue_index)
        super().mousePressEvent(event)


class BoardGrid(QWidget):
    """UI component rendering one :class:`CategorySet` as a table of cells.

    Cells only report ``(category_index, clue_index)`` through
    :attr:`cell_activated`; the session decides what the cell shows next.
    """

    cell_activated = Signal(int, int)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._font_size: int = DEFAULT_BOARD_FONT_SIZE
        self._headers: list[QLabel] = []
        self._cells: dict[tuple[int, int], ClueCell] = {}
        self._category_set: CategorySet | None = None

        self._layout = QGridLayout()
        self._layout.setSpacing(3)
        self._layout.setContentsMargins(3, 3, 3, 3)
        self.setLayout(self._layout)
        self.setStyleSheet(Styles.get_board_style())

    def show_category_set(self, category_set: CategorySet) -> None:
        """Rebuild the grid for a freshly built board."""
        self.clear()
        self._category_set = category_set
        for category_index, category in enumerate(category_set):
            header = QLabel(renderer.render_fragment(category.title.upper()), self)
            header.setTextFormat(Qt.RichText)
            header.setAlignment(Qt.AlignCenter)
            header.setWordWrap(True)
            header.setStyleSheet(Styles.get_category_header_style(self._font_size))
            self._layout.addWidget(header, 0, category_index)
            self._headers.append(header)

            for clue_index in range(len(category.clues)):
                cell = ClueCell(category_index, clue_index, self)
                cell.activated.connect(self.cell_activated)
                self._cells[(category_index, clue_index)] = cell
                self._layout.addWidget(cell, clue_index + 1, category_index)
                self.update_cell(category_index, clue_index)

    def cell_at(self, category_index: int, clue_index: int) -> ClueCell | None:
        return self._cells.get((category_index, clue_index))

    def update_cell(self, category_index: int, clue_index: int) -> None:
        """Repaint a single cell from the reveal state of its clue."""
        cell = self.cell_at(category_index, clue_index)
        if cell is None or self._category_set is None:
            return
        clue = self._category_set.clue_at(category_index, clue_index)
        revealed = clue.reveal_state is not RevealState.HIDDEN
        if revealed:
            cell.setText(renderer.render_fragment(ClueStateMachine.display_text(clue)))
        else:
            cell.setText(HIDDEN_CELL_TEXT)
        cell.setStyleSheet(Styles.get_clue_cell_style(self._font_size, revealed))
        cell.setProperty("revealed", revealed)

    def clear(self) -> None:
        for widget in [*self._headers, *self._cells.values()]:
            self._layout.removeWidget(widget)
            widget.deleteLater()
        self._category_set = None
        self._headers = []
        self._cells = {}

    def apply_font_size(self, font_size: int) -> None:
        self._font_size = font_size
        for header in self._headers:
            header.setStyleSheet(Styles.get_category_header_style(font_size))
        for cell in self._cells.values():
            cell.setStyleSheet(Styles.get_clue_cell_style(font_size, bool(cell.property("revealed"))))
