"""Reveal-state transitions for a single clue."""

from __future__ import annotations

from jeopardy_app.constants.board_constants import HIDDEN_CELL_TEXT
from jeopardy_app.core.models import Clue, RevealState

_NEXT_STATE: dict[RevealState, RevealState] = {
    RevealState.HIDDEN: RevealState.QUESTION,
    RevealState.QUESTION: RevealState.ANSWER,
    RevealState.ANSWER: RevealState.ANSWER,
}


class ClueStateMachine:
    """Moves a clue through ``HIDDEN -> QUESTION -> ANSWER``.

    The machine only ever touches the clue it is handed, so every cell can be
    driven and tested on its own. ``ANSWER`` is terminal: advancing it again
    leaves the clue unchanged and re-displays the answer.
    """

    @staticmethod
    def advance(clue: Clue) -> str:
        """Advance ``clue`` one step and return the text the cell should show."""
        clue.reveal_state = _NEXT_STATE[clue.reveal_state]
        return ClueStateMachine.display_text(clue)

    @staticmethod
    def display_text(clue: Clue) -> str:
        if clue.reveal_state is RevealState.HIDDEN:
            return HIDDEN_CELL_TEXT
        if clue.reveal_state is RevealState.QUESTION:
            return clue.question
        return clue.answer
