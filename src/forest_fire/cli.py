"""
Command-line interface for the forest fire simulation.

Commands:
- forest-fire run: Step a simulation to completion and print the grid
- forest-fire interactive: Menu-driven stepping, running and resetting
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Optional

import click

from .config import SimulationConfig, load_config, parse_positions
from .engine import SimulationEngine
from .errors import ConfigurationError
from .render import STYLES, render_grid

logger = logging.getLogger(__name__)


def _setup_logging(verbose: bool, quiet: bool) -> None:
    if quiet:
        log_level = logging.ERROR
    elif verbose:
        log_level = logging.DEBUG
    else:
        log_level = logging.WARNING

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True,
    )


def _build_engine(
    config_path: Optional[Path],
    height: Optional[int],
    width: Optional[int],
    probability: Optional[float],
    ignite: Optional[str],
    seed: Optional[int],
) -> SimulationEngine:
    """Load the config, apply CLI overrides and build an engine."""
    try:
        config = load_config(config_path) if config_path is not None else SimulationConfig()

        overrides = {}
        if height is not None:
            overrides["height"] = height
        if width is not None:
            overrides["width"] = width
        if probability is not None:
            overrides["propagation_probability"] = probability
        if ignite is not None:
            overrides["ignition_points"] = parse_positions(ignite)
        if seed is not None:
            overrides["seed"] = seed
        if overrides:
            config = config.with_updates(**overrides)

        return SimulationEngine(config)
    except OSError as e:
        click.echo(f"Error loading configuration: {e}", err=True)
        sys.exit(1)
    except ConfigurationError as e:
        click.echo(f"Invalid configuration: {e}", err=True)
        sys.exit(2)


def config_options(func):
    """Options shared by every command that builds an engine."""
    options = [
        click.option("--config", "-c", "config_path",
                     type=click.Path(path_type=Path), default=None,
                     help="Path to a .properties configuration file"),
        click.option("--height", type=int, default=None, help="Forest height (rows)"),
        click.option("--width", type=int, default=None, help="Forest width (columns)"),
        click.option("--probability", "-p", type=float, default=None,
                     help="Fire propagation probability in [0, 1]"),
        click.option("--ignite", type=str, default=None,
                     help='Ignition points, e.g. "0,0;5,5"'),
        click.option("--seed", type=int, default=None, help="Random seed"),
        click.option("--style", type=click.Choice(sorted(STYLES)), default="letters",
                     help="Grid rendering style"),
        click.option("--verbose", "-v", is_flag=True, help="Verbose output"),
        click.option("--quiet", "-q", is_flag=True, help="Only print errors"),
    ]
    for option in reversed(options):
        func = option(func)
    return func


# =============================================================================
# Main CLI Group
# =============================================================================

@click.group()
@click.version_option(package_name="forest-fire-simulation")
def main():
    """Forest fire simulation on a probabilistic cellular automaton."""
    pass


# =============================================================================
# Run Command
# =============================================================================

@main.command("run")
@config_options
@click.option("--max-steps", type=click.IntRange(min=0), default=None,
              help="Stop after this many steps even if fire remains")
@click.option("--show/--no-show", default=True, help="Print the grid after every step")
@click.option("--json", "as_json", is_flag=True, help="Print the final state as JSON")
def run_command(
    config_path, height, width, probability, ignite, seed, style, verbose, quiet,
    max_steps, show, as_json,
):
    """Run a simulation until no cell is burning."""
    _setup_logging(verbose, quiet)
    engine = _build_engine(config_path, height, width, probability, ignite, seed)

    if show and not as_json:
        click.echo("--- INITIAL STATE ---")
        click.echo(render_grid(engine.forest, style))

    while engine.is_running:
        if max_steps is not None and engine.step_count >= max_steps:
            logger.warning(f"Stopped after {max_steps} steps with fire still burning")
            break
        engine.step()
        if show and not as_json:
            click.echo(f"--- STEP {engine.step_count} ---")
            click.echo(render_grid(engine.forest, style))

    if as_json:
        click.echo(json.dumps(engine.state().to_dict()))
    elif engine.is_running:
        click.echo(f"Simulation paused after {engine.step_count} steps.")
    else:
        click.echo(f"Simulation complete after {engine.step_count} steps.")
        click.echo("No more cells are on fire.")


# =============================================================================
# Interactive Command
# =============================================================================

MENU = """
Options:
1. Run single step
2. Run to completion
3. Reset simulation
4. Exit"""


@main.command("interactive")
@config_options
def interactive_command(
    config_path, height, width, probability, ignite, seed, style, verbose, quiet,
):
    """Step, run and reset a simulation from a menu."""
    _setup_logging(verbose, quiet)
    engine = _build_engine(config_path, height, width, probability, ignite, seed)

    click.echo("Forest Fire Simulation")
    click.echo("=" * 22)

    while True:
        click.echo(f"\nForest state (step {engine.step_count}):")
        click.echo(render_grid(engine.forest, style))
        click.echo(MENU)
        choice = click.prompt("Enter your choice", type=str).strip()

        if choice == "1":
            if engine.step():
                click.echo(f"Step {engine.step_count} completed.")
            else:
                click.echo(f"Simulation complete after {engine.step_count} steps.")
                click.echo("No more cells are on fire.")
        elif choice == "2":
            steps = engine.run_to_completion()
            click.echo(f"Simulation complete after {steps} steps.")
            click.echo("No more cells are on fire.")
        elif choice == "3":
            engine.reset()
            click.echo("Simulation reset to initial state.")
        elif choice == "4":
            break
        else:
            click.echo("Invalid choice. Please try again.")

    click.echo("Simulation ended.")


if __name__ == "__main__":
    main()
