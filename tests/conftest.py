import sys
from pathlib import Path

import pytest


def pytest_configure() -> None:
    """Ensure `src/` is on sys.path so tests can import `forest_fire.*`.

    This repo uses the common `src/` layout but is not necessarily installed as a package
    in the active environment.
    """

    project_root = Path(__file__).resolve().parents[1]
    src_dir = project_root / "src"
    if str(src_dir) not in sys.path:
        sys.path.insert(0, str(src_dir))


class ScriptedRandom:
    """Random source returning a fixed sequence of values and counting draws."""

    def __init__(self, values, repeat_last: bool = False):
        self.values = list(values)
        self.repeat_last = repeat_last
        self.draws = 0

    def random(self) -> float:
        if self.draws < len(self.values):
            value = self.values[self.draws]
        elif self.repeat_last and self.values:
            value = self.values[-1]
        else:
            raise AssertionError(f"Unexpected random draw #{self.draws + 1}")
        self.draws += 1
        return value


@pytest.fixture
def scripted_random():
    """Factory for scripted random sources."""
    return ScriptedRandom


@pytest.fixture
def project_root() -> Path:
    return Path(__file__).resolve().parents[1]
