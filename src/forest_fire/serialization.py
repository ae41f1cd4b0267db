"""Transport snapshot of the simulation state."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

from .cell import CellState

# Closed token set used when cell states leave the process
STATE_TOKENS: dict[CellState, str] = {
    CellState.Alive: "TREE",
    CellState.Burning: "FIRE",
    CellState.Burned: "ASH",
}


@dataclass(frozen=True)
class ForestState:
    """Grid of state tokens together with the step counter."""

    grid: tuple[tuple[str, ...], ...]
    step: int
    complete: bool

    @classmethod
    def capture(cls, forest, step: int, complete: bool) -> ForestState:
        height, width = forest.dimensions()
        grid = tuple(
            tuple(STATE_TOKENS[forest.cell_at(row, col).state] for col in range(width))
            for row in range(height)
        )
        return cls(grid=grid, step=step, complete=complete)

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["grid"] = [list(row) for row in self.grid]
        return data
