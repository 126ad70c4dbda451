"""Board dimensions and cell texts shared by core and UI layers."""

NUM_CATEGORIES: int = 6
CLUES_PER_CATEGORY: int = 5
HIDDEN_CELL_TEXT: str = "?"
