#!/usr/bin/env python3
"""Main script to run the fire spread simulation from a properties file.

Usage:
    python scripts/run_simulation.py [config/simulation.properties]
"""

import logging
import sys
from pathlib import Path

# Add the src directory to the Python path
project_root = Path(__file__).parent.parent
src_path = project_root / "src"
sys.path.insert(0, str(src_path))

from forest_fire import ConfigurationError, SimulationEngine, load_config, render_grid

DEFAULT_CONFIG_PATH = project_root / "config" / "simulation.properties"
MAX_STEPS = 500


def main() -> int:
    """Run the fire spread simulation."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    config_path = Path(sys.argv[1]) if len(sys.argv) > 1 else DEFAULT_CONFIG_PATH

    try:
        engine = SimulationEngine(load_config(config_path))
    except OSError as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        print(f"Please ensure the configuration file exists at: {config_path}", file=sys.stderr)
        return 1
    except ConfigurationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2

    print("--- INITIAL STATE (AFTER IGNITION) ---")
    print(render_grid(engine.forest, "emoji"))

    # Main simulation loop
    while engine.is_running and engine.step_count < MAX_STEPS:
        engine.step()
        print(f"\n--- STEP {engine.step_count} ---")
        print(render_grid(engine.forest, "emoji"))

    if not engine.is_running:
        print("\nFire has been extinguished.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
