"""Settings dialog for configuring JeopardyQt preferences."""

from __future__ import annotations

from PySide6.QtWidgets import (
    QCheckBox,
    QDialog,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSpinBox,
    QVBoxLayout,
)

_MAX_SEED = 2_147_483_647


class SettingsDialog(QDialog):
    """Dialog for configuring board font size and the random seed."""

    def __init__(
        self,
        parent=None,
        board_font_size: int = 14,
        seed: int | None = None,
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle("Settings")
        self.setModal(True)
        self.setMinimumWidth(400)

        self._board_font_size = board_font_size
        self._seed = seed

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        board_group = QGroupBox("Board")
        board_layout = QVBoxLayout()
        board_group.setLayout(board_layout)

        font_row = QHBoxLayout()
        font_label = QLabel("Board Font Size (titles, clues):")
        font_label.setToolTip("Font size for category titles and clue cells")
        self.font_spinbox = QSpinBox()
        self.font_spinbox.setRange(8, 32)
        self.font_spinbox.setValue(self._board_font_size)
        self.font_spinbox.setSuffix(" pt")
        font_row.addWidget(font_label)
        font_row.addStretch()
        font_row.addWidget(self.font_spinbox)
        board_layout.addLayout(font_row)

        layout.addWidget(board_group)

        random_group = QGroupBox("Randomness")
        random_layout = QVBoxLayout()
        random_group.setLayout(random_layout)

        self.fixed_seed_checkbox = QCheckBox("Use a fixed random seed")
        self.fixed_seed_checkbox.setToolTip(
            "With a fixed seed the boards drawn after applying it repeat from run to run, "
            "as long as the category service returns the same data."
        )
        self.fixed_seed_checkbox.setChecked(self._seed is not None)
        random_layout.addWidget(self.fixed_seed_checkbox)

        seed_row = QHBoxLayout()
        seed_label = QLabel("Seed:")
        self.seed_spinbox = QSpinBox()
        self.seed_spinbox.setRange(0, _MAX_SEED)
        self.seed_spinbox.setValue(self._seed or 0)
        self.seed_spinbox.setEnabled(self._seed is not None)
        self.fixed_seed_checkbox.toggled.connect(self.seed_spinbox.setEnabled)
        seed_row.addWidget(seed_label)
        seed_row.addStretch()
        seed_row.addWidget(self.seed_spinbox)
        random_layout.addLayout(seed_row)

        layout.addWidget(random_group)

        button_row = QHBoxLayout()
        button_row.addStretch()

        self.cancel_button = QPushButton("Cancel")
        self.cancel_button.clicked.connect(self.reject)  # type: ignore[arg-type]
        button_row.addWidget(self.cancel_button)

        self.apply_button = QPushButton("Apply")
        self.apply_button.clicked.connect(self.accept)  # type: ignore[arg-type]
        self.apply_button.setDefault(True)
        button_row.addWidget(self.apply_button)

        layout.addLayout(button_row)

    def get_board_font_size(self) -> int:
        """Get the selected board font size."""
        return self.font_spinbox.value()

    def get_seed(self) -> int | None:
        """Get the fixed seed, or None for a fresh random draw each game."""
        if not self.fixed_seed_checkbox.isChecked():
            return None
        return self.seed_spinbox.value()
