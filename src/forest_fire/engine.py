"""Simulation engine: configuration, stepping and completion of a fire run."""

import logging

from .config import SimulationConfig
from .forest import Forest, RandomSource
from .serialization import ForestState

logger = logging.getLogger(__name__)


class SimulationEngine:
    """Drives one Forest from ignition until no cell is burning.

    The engine is single-threaded and holds no locks; an adapter serving
    several callers must serialize access to it.
    """

    def __init__(
        self,
        config: SimulationConfig | None = None,
        *,
        random_source: RandomSource | None = None,
    ):
        """
        Create an engine and initialize it with `config`.

        Args:
            config: Parameters to start from; defaults to SimulationConfig()
            random_source: Optional random generator shared by every forest
                this engine builds. Without it each forest uses mesa's
                generator seeded from `config.seed`.

        Raises:
            ConfigurationError: If the config is invalid
        """
        self._random_source = random_source
        self._config: SimulationConfig | None = None
        self._forest: Forest | None = None
        self._step_count = 0
        self._running = False
        self.initialize(config if config is not None else SimulationConfig())

    @property
    def config(self) -> SimulationConfig:
        return self._config

    @property
    def forest(self) -> Forest:
        return self._forest

    @property
    def step_count(self) -> int:
        return self._step_count

    @property
    def is_running(self) -> bool:
        return self._running

    def initialize(self, config: SimulationConfig) -> None:
        """
        Build a fresh forest from `config` and ignite its starting points.

        Nothing on the engine changes unless the whole build succeeds.

        Raises:
            ConfigurationError: If the config is invalid
        """
        config = config.validate()
        forest = Forest(
            config.height,
            config.width,
            config.propagation_probability,
            seed=config.seed,
            random_source=self._random_source,
        )
        forest.ignite(config.ignition_points)

        self._config = config
        self._forest = forest
        self._step_count = 0
        self._running = forest.has_burning_cells()
        logger.info(
            f"Initialized {config.height}x{config.width} forest, "
            f"p={config.propagation_probability}, {len(config.ignition_points)} ignition points"
        )
        if not self._running:
            logger.info("No cells burning after initialization, simulation already complete")

    def reconfigure(self, config: SimulationConfig) -> None:
        """Replace the current config and forest; see initialize()."""
        self.initialize(config)
        logger.info("Simulation reconfigured")

    def reset(self) -> None:
        """Rebuild the forest from the current config."""
        self.initialize(self._config)

    def step(self) -> bool:
        """
        Execute a single step of the simulation.

        Returns:
            True if the simulation is still running, False once no cell burns.
            A completed simulation is left untouched.
        """
        if not self._running:
            return False

        self._running = self._forest.simulate_step()
        self._step_count += 1
        logger.debug(f"Step {self._step_count} done, running={self._running}")

        if not self._running:
            logger.info(f"Simulation complete after {self._step_count} steps")
        return self._running

    def run_to_completion(self) -> int:
        """
        Step until no cell is burning.

        Returns:
            The final step count
        """
        while self._running:
            self.step()
        return self._step_count

    def state(self) -> ForestState:
        """Snapshot of the grid for presentation or transport."""
        return ForestState.capture(self._forest, self._step_count, not self._running)
