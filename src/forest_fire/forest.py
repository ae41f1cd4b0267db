"""Forest grid model: the per-step fire propagation rule."""

import logging
from collections.abc import Iterable, Iterator
from typing import Protocol

import numpy as np
from mesa import Model
from mesa.space import SingleGrid

from .cell import CellState, ForestCell
from .config import is_index, require_positive_int, validate_probability
from .errors import ConfigurationError
from .render import render_grid

logger = logging.getLogger(__name__)

# north, east, south, west as (d_row, d_col)
ORTHOGONAL_DIRECTIONS = ((-1, 0), (0, 1), (1, 0), (0, -1))


class RandomSource(Protocol):
    """Anything that yields uniform floats in [0, 1), e.g. random.Random."""

    def random(self) -> float: ...


class Forest(Model):
    """Rectangular grid of forest cells through which fire spreads."""

    def __init__(
        self,
        height: int,
        width: int,
        propagation_probability: float,
        *,
        seed: int | None = None,
        random_source: RandomSource | None = None,
    ):
        """
        Initialize a forest where every cell is alive.

        Args:
            height: Number of rows
            width: Number of columns
            propagation_probability: Chance that a burning cell ignites one
                alive orthogonal neighbour during a step
            seed: Seed for mesa's per-model random generator
            random_source: Optional replacement for the model's random
                generator; any object with a `random()` method

        Raises:
            ConfigurationError: If a dimension is not a positive integer or
                the probability lies outside [0, 1]
        """
        height = require_positive_int("height", height)
        width = require_positive_int("width", width)
        propagation_probability = validate_probability(propagation_probability)

        if is_index(seed):
            seed = int(seed)

        super().__init__(seed=seed)
        self.height = height
        self.width = width
        self.propagation_probability = propagation_probability
        self.random_source = random_source if random_source is not None else self.random

        # mesa grids are indexed (x, y), i.e. (col, row)
        self.grid = SingleGrid(width, height, torus=False)
        for row in range(height):
            for col in range(width):
                self.grid.place_agent(ForestCell(self, row, col), (col, row))

    def dimensions(self) -> tuple[int, int]:
        """Return (height, width)."""
        return self.height, self.width

    def in_bounds(self, row: int, col: int) -> bool:
        return not self.grid.out_of_bounds((col, row))

    def cell_at(self, row: int, col: int) -> ForestCell:
        """
        Return the cell at (row, col).

        Raises:
            IndexError: If the coordinates lie outside the grid
        """
        if not self.in_bounds(row, col):
            raise IndexError(
                f"Cell ({row}, {col}) is outside the {self.height}x{self.width} forest"
            )
        return self.grid[col][row]

    def cells(self) -> Iterator[ForestCell]:
        """Iterate over all cells in row-major order."""
        for row in range(self.height):
            for col in range(self.width):
                yield self.grid[col][row]

    def orthogonal_neighbours(self, row: int, col: int) -> list[ForestCell]:
        """Return the in-bounds north, east, south and west neighbours."""
        neighbours = []
        for d_row, d_col in ORTHOGONAL_DIRECTIONS:
            n_row, n_col = row + d_row, col + d_col
            if self.in_bounds(n_row, n_col):
                neighbours.append(self.grid[n_col][n_row])
        return neighbours

    def ignite(self, coordinates: Iterable[tuple[int, int]]) -> None:
        """
        Set the cells at the given (row, col) coordinates on fire.

        All coordinates are checked before any cell changes.

        Raises:
            ConfigurationError: If a coordinate is malformed or outside the grid
        """
        targets = []
        for position in coordinates:
            try:
                row, col = position
            except (TypeError, ValueError):
                raise ConfigurationError(f"Invalid fire position format: {position!r}") from None
            if not (is_index(row) and is_index(col)):
                raise ConfigurationError(f"Invalid fire position format: {position!r}")
            if not self.in_bounds(row, col):
                raise ConfigurationError(
                    f"Initial fire position ({row},{col}) is outside the forest"
                )
            targets.append(self.grid[int(col)][int(row)])

        for cell in targets:
            cell.state = CellState.Burning
            cell.next_state = CellState.Burning

    def simulate_step(self) -> bool:
        """
        Advance the whole forest by one synchronous step.

        Phase 1 lets every burning cell (row-major order) compute its own
        and its neighbours' next states from the current snapshot; phase 2
        applies them all at once.

        Returns:
            True if any cell is still burning afterwards
        """
        burning = [cell for cell in self.cells() if cell.state == CellState.Burning]

        # Phase 1: Calculate next states
        for cell in burning:
            cell.step()

        # Phase 2: Apply next states
        for cell in self.cells():
            cell.advance()

        still_burning = self.count(CellState.Burning)
        logger.debug(f"Step burned out {len(burning)} cells, {still_burning} now burning")
        return still_burning > 0

    def has_burning_cells(self) -> bool:
        return any(cell.state == CellState.Burning for cell in self.cells())

    def count(self, state: CellState) -> int:
        """Number of cells currently in `state`."""
        return sum(1 for cell in self.cells() if cell.state == state)

    def as_array(self) -> np.ndarray:
        """Return a (height, width) int8 array of CellState values."""
        arr = np.empty((self.height, self.width), dtype=np.int8)
        for cell in self.cells():
            arr[cell.row, cell.col] = cell.state.value
        return arr

    def __str__(self) -> str:
        return render_grid(self)
