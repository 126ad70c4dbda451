"""Tests for the board grid widget."""

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtWidgets import QApplication

from jeopardy_app.core.category_set import CategorySet
from jeopardy_app.core.clue_state import ClueStateMachine
from jeopardy_app.core.models import Category, Clue
from jeopardy_app.ui.components.board_grid import BoardGrid


@pytest.fixture(scope="module")
def qapp():
    return QApplication.instance() or QApplication([])


@pytest.fixture
def board():
    clues = (
        Clue(question="?", answer="The only punctuation mark that is a question"),
        Clue(question="M*A*S*H star", answer="?"),
    )
    return CategorySet([Category(title="punctuation", clues=clues)])


class TestBoardGrid:
    def test_new_board_shows_hidden_cells(self, qapp, board):
        grid = BoardGrid()
        grid.show_category_set(board)

        for clue_index in range(2):
            cell = grid.cell_at(0, clue_index)
            assert cell.text() == "?"
            assert cell.property("revealed") is False

    def test_question_mark_question_is_styled_revealed(self, qapp, board):
        grid = BoardGrid()
        grid.show_category_set(board)

        ClueStateMachine.advance(board.clue_at(0, 0))
        grid.update_cell(0, 0)

        cell = grid.cell_at(0, 0)
        assert cell.text() == "?"
        assert cell.property("revealed") is True
        assert grid.cell_at(0, 1).property("revealed") is False

    def test_question_mark_answer_stays_revealed(self, qapp, board):
        grid = BoardGrid()
        grid.show_category_set(board)
        clue = board.clue_at(0, 1)

        ClueStateMachine.advance(clue)
        grid.update_cell(0, 1)
        assert grid.cell_at(0, 1).text() == "M*A*S*H star"

        ClueStateMachine.advance(clue)
        grid.update_cell(0, 1)
        assert grid.cell_at(0, 1).text() == "?"
        assert grid.cell_at(0, 1).property("revealed") is True

    def test_clear_forgets_the_board(self, qapp, board):
        grid = BoardGrid()
        grid.show_category_set(board)
        grid.clear()

        assert grid.cell_at(0, 0) is None
        grid.update_cell(0, 0)
