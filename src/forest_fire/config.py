"""
Configuration loading and validation for the forest fire simulation.

Parameters live in a frozen dataclass so adapters can read them but only
the engine swaps them. They can be built in code or read from a
Java-style ``.properties`` file::

    forest.height=10
    forest.width=10
    fire.propagation.probability=0.5
    fire.initial.positions=0,0;5,5
    simulation.seed=42
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, replace
from pathlib import Path

import numpy as np

from .errors import ConfigurationError

logger = logging.getLogger(__name__)

HEIGHT_KEY = "forest.height"
WIDTH_KEY = "forest.width"
PROBABILITY_KEY = "fire.propagation.probability"
POSITIONS_KEY = "fire.initial.positions"
SEED_KEY = "simulation.seed"

Position = tuple[int, int]


def is_index(value) -> bool:
    """True for ints (numpy ints included) but not bools."""
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool)


def require_positive_int(name: str, value) -> int:
    if not is_index(value):
        raise ConfigurationError(f"Forest {name} must be an integer, got {value!r}")
    if value <= 0:
        raise ConfigurationError(f"Forest {name} must be positive, got {value}")
    return int(value)


def validate_probability(value) -> float:
    """Return `value` as a float, or raise if it is not a probability."""
    if isinstance(value, bool) or not isinstance(value, (int, float, np.integer, np.floating)):
        raise ConfigurationError(f"Fire propagation probability must be a number, got {value!r}")
    value = float(value)
    if math.isnan(value) or not 0.0 <= value <= 1.0:
        raise ConfigurationError(f"Fire propagation probability must be between 0 and 1, got {value}")
    return value


@dataclass(frozen=True)
class SimulationConfig:
    """Validated parameters used to build a forest."""

    height: int = 10
    width: int = 10
    propagation_probability: float = 0.5
    ignition_points: tuple[Position, ...] = ((0, 0),)
    seed: int | None = None

    def __post_init__(self):
        # Normalize so that lists of lists compare equal to tuples of tuples
        object.__setattr__(self, "ignition_points", _normalize_points(self.ignition_points))
        if is_index(self.seed):
            object.__setattr__(self, "seed", int(self.seed))

    def validate(self) -> SimulationConfig:
        """
        Check every parameter.

        Returns:
            self, so calls can be chained

        Raises:
            ConfigurationError: On non-positive dimensions, a probability
                outside [0, 1], a bad seed, or ignition points outside
                the forest
        """
        require_positive_int("height", self.height)
        require_positive_int("width", self.width)
        validate_probability(self.propagation_probability)
        if self.seed is not None and not is_index(self.seed):
            raise ConfigurationError(f"Simulation seed must be an integer, got {self.seed!r}")

        for row, col in self.ignition_points:
            if not (0 <= row < self.height and 0 <= col < self.width):
                raise ConfigurationError(
                    f"Initial fire position ({row},{col}) is outside the forest"
                )
        return self

    def with_updates(self, **changes) -> SimulationConfig:
        """Return a validated copy with the given fields replaced."""
        return replace(self, **changes).validate()

    @classmethod
    def from_properties(cls, properties: Mapping[str, str]) -> SimulationConfig:
        """
        Build a config from raw key-value strings.

        Missing keys fall back to the dataclass defaults.

        Raises:
            ConfigurationError: If a value cannot be parsed or is out of range
        """
        defaults = cls()
        height = _parse_int(properties, HEIGHT_KEY, defaults.height)
        width = _parse_int(properties, WIDTH_KEY, defaults.width)

        probability = defaults.propagation_probability
        if PROBABILITY_KEY in properties:
            raw = properties[PROBABILITY_KEY].strip()
            try:
                probability = float(raw)
            except ValueError:
                raise ConfigurationError(f"Invalid value for {PROBABILITY_KEY}: {raw!r}") from None

        points = defaults.ignition_points
        if POSITIONS_KEY in properties:
            points = parse_positions(properties[POSITIONS_KEY])

        seed = _parse_int(properties, SEED_KEY, defaults.seed)

        return cls(
            height=height,
            width=width,
            propagation_probability=probability,
            ignition_points=points,
            seed=seed,
        ).validate()


def _parse_int(properties: Mapping[str, str], key: str, default: int | None) -> int | None:
    if key not in properties:
        return default
    raw = properties[key].strip()
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"Invalid value for {key}: {raw!r}") from None


def _normalize_points(points: Iterable) -> tuple[Position, ...]:
    """Turn ignition points into a de-duplicated tuple of int pairs."""
    if isinstance(points, (str, bytes)):
        raise ConfigurationError(f"Ignition points must be (row, col) pairs, got {points!r}")
    try:
        items = list(points)
    except TypeError:
        raise ConfigurationError(f"Ignition points must be iterable, got {points!r}") from None

    normalized: dict[Position, None] = {}
    for position in items:
        try:
            row, col = position
        except (TypeError, ValueError):
            raise ConfigurationError(f"Invalid fire position format: {position!r}") from None
        if not (is_index(row) and is_index(col)):
            raise ConfigurationError(f"Invalid fire position format: {position!r}")
        normalized[(int(row), int(col))] = None
    return tuple(normalized)


def parse_positions(text: str) -> tuple[Position, ...]:
    """
    Parse positions in the "row1,col1;row2,col2" format.

    An empty string means no ignition points. Unlike a lenient parser,
    every non-empty entry must be exactly two integers.

    Raises:
        ConfigurationError: If any entry is malformed
    """
    positions = []
    for entry in text.split(";"):
        entry = entry.strip()
        if not entry:
            continue
        parts = entry.split(",")
        if len(parts) != 2:
            raise ConfigurationError(f"Invalid fire position format: {entry}")
        try:
            positions.append((int(parts[0].strip()), int(parts[1].strip())))
        except ValueError:
            raise ConfigurationError(f"Invalid fire position format: {entry}") from None
    return _normalize_points(positions)


def read_properties(path: Path | str) -> dict[str, str]:
    """
    Read a ``.properties`` file into a dict.

    Supports ``key=value`` and ``key: value`` lines; lines starting with
    ``#`` or ``!`` and blank lines are ignored.
    """
    properties = {}
    with open(path, "r", encoding="utf-8") as f:
        for lineno, line in enumerate(f, start=1):
            line = line.strip()
            if not line or line[0] in "#!":
                continue
            separators = [i for i in (line.find("="), line.find(":")) if i != -1]
            if not separators:
                raise ConfigurationError(f"{path}:{lineno}: expected 'key=value', got {line!r}")
            split_at = min(separators)
            key = line[:split_at].strip()
            properties[key] = line[split_at + 1:].strip()
    return properties


def load_config(path: Path | str) -> SimulationConfig:
    """
    Load and validate a simulation config from a ``.properties`` file.

    Raises:
        OSError: If the file cannot be read
        ConfigurationError: If the file holds invalid values
    """
    properties = read_properties(path)
    config = SimulationConfig.from_properties(properties)
    logger.info(
        f"Loaded configuration from {path}: {config.height}x{config.width}, "
        f"p={config.propagation_probability}, {len(config.ignition_points)} ignition points"
    )
    return config
