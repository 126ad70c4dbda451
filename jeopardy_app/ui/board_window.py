"""Qt main window presenting the trivia board."""

from __future__ import annotations

from PySide6.QtCore import QObject, Qt, Signal
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from jeopardy_app.constants.about import (
    APP_ABOUT_TEXT,
    APP_LICENSE,
    APP_NAME,
    APP_VERSION,
    HELP_TEXT,
)
from jeopardy_app.constants.ui_constants import (
    ABOUT_BUTTON_TEXT,
    DEFAULT_BOARD_FONT_SIZE,
    FAILED_MESSAGE_TEMPLATE,
    HELP_BUTTON_TEXT,
    IDLE_MESSAGE,
    LOADING_MESSAGE,
    RESTART_BUTTON_TEXT,
    SETTINGS_BUTTON_TEXT,
    START_BUTTON_TEXT,
    WINDOW_TITLE,
)
from jeopardy_app.core.category_set import CategorySet
from jeopardy_app.core.errors import SessionStartFailed
from jeopardy_app.core.models import SessionState
from jeopardy_app.core.services.game_session import GameSessionController
from jeopardy_app.styling.styles import Styles
from jeopardy_app.ui.components.board_grid import BoardGrid
from jeopardy_app.ui.dialog_helpers import show_error, show_info
from jeopardy_app.ui.settings_dialog import SettingsDialog

_STATUS_PAGE = 0
_BOARD_PAGE = 1


class SessionBridge(QObject):
    """Presenter handed to the session.

    The session calls back from its loader thread. The bridge only emits
    signals, which Qt queues onto the GUI thread before any widget is touched.
    """

    state_changed = Signal(object, object)
    board_ready = Signal(object)

    def on_session_state_changed(
        self, state: SessionState, error: SessionStartFailed | None
    ) -> None:
        self.state_changed.emit(state, error)

    def render(self, category_set: CategorySet) -> None:
        self.board_ready.emit(category_set)


class BoardWindow(QMainWindow):
    """Main window showing the board, its status and the game controls."""

    def __init__(self, controller: GameSessionController, seed: int | None = None) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)
        self.resize(1100, 700)

        self.controller = controller
        self._board_font_size: int = DEFAULT_BOARD_FONT_SIZE
        self._seed = seed

        self._build_ui()
        self.session_bridge = SessionBridge(self)
        self.session_bridge.state_changed.connect(self._apply_session_state)
        self.session_bridge.board_ready.connect(self._show_board)
        self.controller.attach_presenter(self.session_bridge)
        self.setStyleSheet(Styles.get_main_window_style())

    def _build_ui(self) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)

        root_layout = QVBoxLayout()
        central_widget.setLayout(root_layout)

        button_row = QHBoxLayout()

        self.restart_button = QPushButton(START_BUTTON_TEXT, self)
        self.restart_button.clicked.connect(self._handle_restart)
        button_row.addWidget(self.restart_button)

        button_row.addStretch()

        self.settings_button = QPushButton(SETTINGS_BUTTON_TEXT, self)
        self.settings_button.clicked.connect(self._handle_settings)
        button_row.addWidget(self.settings_button)

        self.help_button = QPushButton(HELP_BUTTON_TEXT, self)
        self.help_button.clicked.connect(self._handle_help)
        button_row.addWidget(self.help_button)

        self.about_button = QPushButton(ABOUT_BUTTON_TEXT, self)
        self.about_button.clicked.connect(self._handle_about)
        button_row.addWidget(self.about_button)

        root_layout.addLayout(button_row)

        self.page_stack = QStackedWidget(self)

        self.status_label = QLabel(IDLE_MESSAGE, self)
        self.status_label.setAlignment(Qt.AlignCenter)
        self.status_label.setWordWrap(True)
        self.status_label.setStyleSheet(Styles.get_status_style())
        self.page_stack.addWidget(self.status_label)

        self.board_grid = BoardGrid(self)
        self.board_grid.cell_activated.connect(self._handle_cell_activated)
        self.page_stack.addWidget(self.board_grid)

        root_layout.addWidget(self.page_stack, stretch=1)
        self.page_stack.setCurrentIndex(_STATUS_PAGE)

    def start_game(self) -> None:
        self.controller.on_restart_requested()

    def _apply_session_state(self, state: SessionState, error: SessionStartFailed | None) -> None:
        if state is SessionState.LOADING:
            self.board_grid.clear()
            self.status_label.setText(LOADING_MESSAGE)
            self.status_label.setStyleSheet(Styles.get_status_style())
            self.page_stack.setCurrentIndex(_STATUS_PAGE)
            self.restart_button.setEnabled(False)
        elif state is SessionState.READY:
            self.page_stack.setCurrentIndex(_BOARD_PAGE)
            self.restart_button.setText(RESTART_BUTTON_TEXT)
            self.restart_button.setEnabled(True)
        elif state is SessionState.FAILED:
            self.board_grid.clear()
            reason = str(error.__cause__ or error) if error is not None else "unknown error"
            self.status_label.setText(FAILED_MESSAGE_TEMPLATE.format(reason=reason))
            self.status_label.setStyleSheet(Styles.get_status_style(is_error=True))
            self.page_stack.setCurrentIndex(_STATUS_PAGE)
            self.restart_button.setText(RESTART_BUTTON_TEXT)
            self.restart_button.setEnabled(True)
            show_error(self, "Could not load board", reason)

    def _show_board(self, category_set: CategorySet) -> None:
        self.board_grid.show_category_set(category_set)

    def _handle_cell_activated(self, category_index: int, clue_index: int) -> None:
        if self.controller.on_cell_activated(category_index, clue_index) is not None:
            self.board_grid.update_cell(category_index, clue_index)

    def _handle_restart(self) -> None:
        self.controller.on_restart_requested()

    def _handle_settings(self) -> None:
        dialog = SettingsDialog(self, self._board_font_size, self._seed)
        if dialog.exec():
            self._board_font_size = dialog.get_board_font_size()
            self._seed = dialog.get_seed()
            self.controller.set_seed(self._seed)
            self.board_grid.apply_font_size(self._board_font_size)

    def _handle_help(self) -> None:
        show_info(self, f"{APP_NAME} Help", HELP_TEXT)

    def _handle_about(self) -> None:
        details = (
            f"{APP_NAME} v{APP_VERSION}\n"
            f"License: {APP_LICENSE}\n\n"
            f"{APP_ABOUT_TEXT}"
        )
        show_info(self, f"About {APP_NAME}", details)
