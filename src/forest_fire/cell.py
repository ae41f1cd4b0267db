"""Forest cell agent implementation for fire spread simulation."""

from enum import Enum

from mesa import Agent


class CellState(Enum):
    """Possible states of a forest cell.

    Transitions only ever go Alive -> Burning -> Burned.
    """
    Alive = 0
    Burning = 1
    Burned = 2


class ForestCell(Agent):
    """Agent representing a single cell in the forest grid."""

    def __init__(self, model, row: int, col: int, state: CellState = CellState.Alive):
        """
        Initialize a forest cell.

        Args:
            model: The Forest instance this cell belongs to
            row: Row index of the cell
            col: Column index of the cell
            state: Initial CellState of the cell
        """
        super().__init__(model)
        self._row = row
        self._col = col
        self.state = state
        self.next_state = state

    @property
    def row(self) -> int:
        return self._row

    @property
    def col(self) -> int:
        return self._col

    @property
    def coordinates(self) -> tuple[int, int]:
        return self._row, self._col

    def is_burnable(self) -> bool:
        """
        Check if the cell can catch fire.

        Returns:
            True if the cell has not burned and is not burning
        """
        return self.state == CellState.Alive

    def step(self):
        """
        Calculate the next state of this cell and its neighbours.

        A burning cell burns out and makes one ignition attempt on every
        orthogonal neighbour that is still alive. Only `state` is read and
        only `next_state` is written, so every cell sees the same snapshot.
        """
        if self.state != CellState.Burning:
            return

        self.next_state = CellState.Burned
        probability = self.model.propagation_probability
        for neighbour in self.model.orthogonal_neighbours(self._row, self._col):
            if not neighbour.is_burnable():
                continue
            if self.model.random_source.random() < probability:
                neighbour.next_state = CellState.Burning

    def advance(self):
        """
        Apply the next state calculated in step().

        This two-phase update ensures all cells calculate their next state
        before any state changes are applied.
        """
        self.state = self.next_state

    def __str__(self) -> str:
        return f"Cell ({self._row}, {self._col}): {self.state.name}"
