"""Plain-text rendering of the forest grid.

Symbol tables for the console views. Renderers only read cell states
through the forest's accessors and never mutate the grid.
"""

from typing import Literal

from .cell import CellState

RenderStyle = Literal["letters", "emoji"]

# ============================================================================
# CELL STATE SYMBOLS
# ============================================================================

LETTER_SYMBOLS: dict[CellState, str] = {
    CellState.Alive: "T",       # tree
    CellState.Burning: "F",     # fire
    CellState.Burned: "A",      # ash
}

EMOJI_SYMBOLS: dict[CellState, str] = {
    CellState.Alive: "🌲",
    CellState.Burning: "🔥",
    CellState.Burned: "⬛",
}

STYLES: dict[str, dict[CellState, str]] = {
    "letters": LETTER_SYMBOLS,
    "emoji": EMOJI_SYMBOLS,
}


def render_grid(forest, style: RenderStyle = "letters") -> str:
    """
    Render the forest as text, one line per row.

    Args:
        forest: The Forest to render
        style: "letters" (space separated T/F/A) or "emoji"

    Returns:
        The rendered grid, each row terminated by a newline
    """
    try:
        symbols = STYLES[style]
    except KeyError:
        raise ValueError(f"Unknown render style: {style}") from None

    separator = " " if style == "letters" else ""
    height, width = forest.dimensions()
    lines = []
    for row in range(height):
        lines.append(
            separator.join(symbols[forest.cell_at(row, col).state] for col in range(width))
        )
    return "\n".join(lines) + "\n"
