"""
Forest Fire Simulation using Cellular Automata.

A probabilistic cellular automaton in which fire spreads from burning
cells to their orthogonal neighbours, one synchronous step at a time.
"""

from .cell import ForestCell, CellState
from .config import SimulationConfig, load_config, parse_positions
from .engine import SimulationEngine
from .errors import ConfigurationError
from .forest import Forest, RandomSource
from .render import render_grid
from .serialization import ForestState, STATE_TOKENS

__version__ = "0.1.0"

__all__ = [
    "ForestCell",
    "CellState",
    "Forest",
    "RandomSource",
    "SimulationConfig",
    "load_config",
    "parse_positions",
    "SimulationEngine",
    "ConfigurationError",
    "ForestState",
    "STATE_TOKENS",
    "render_grid",
]
