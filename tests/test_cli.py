"""Tests for the command-line interface."""

import json

import pytest
from click.testing import CliRunner
from forest_fire.cli import main


@pytest.fixture
def runner():
    return CliRunner()


CENTRE = ["--height", "3", "--width", "3", "-p", "1", "--ignite", "1,1"]


class TestRunCommand:
    """Test cases for `forest-fire run`."""

    def test_run_to_completion(self, runner):
        result = runner.invoke(main, ["run", *CENTRE])
        assert result.exit_code == 0, result.output
        assert "--- INITIAL STATE ---" in result.output
        assert "--- STEP 3 ---" in result.output
        assert "Simulation complete after 3 steps." in result.output

    def test_no_show(self, runner):
        result = runner.invoke(main, ["run", *CENTRE, "--no-show"])
        assert result.exit_code == 0
        assert "STEP" not in result.output
        assert "Simulation complete after 3 steps." in result.output

    def test_json_output(self, runner):
        result = runner.invoke(main, ["run", *CENTRE, "--json", "-q"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert data["step"] == 3
        assert data["complete"] is True
        assert data["grid"] == [["ASH"] * 3] * 3

    def test_max_steps(self, runner):
        result = runner.invoke(main, ["run", *CENTRE, "--max-steps", "1", "--no-show", "-q"])
        assert result.exit_code == 0
        assert "Simulation paused after 1 steps." in result.output

    def test_emoji_style(self, runner):
        result = runner.invoke(main, ["run", *CENTRE, "--style", "emoji"])
        assert result.exit_code == 0
        assert "🔥" in result.output

    def test_config_file(self, runner, tmp_path):
        path = tmp_path / "sim.properties"
        path.write_text("forest.height=1\nforest.width=1\nfire.initial.positions=0,0\n")
        result = runner.invoke(main, ["run", "--config", str(path), "--no-show"])
        assert result.exit_code == 0, result.output
        assert "Simulation complete after 1 steps." in result.output

    def test_missing_config_file(self, runner, tmp_path):
        result = runner.invoke(main, ["run", "--config", str(tmp_path / "nope.properties")])
        assert result.exit_code == 1
        assert "Error loading configuration" in result.output

    @pytest.mark.parametrize("args", [
        ["--height=-1"],
        ["--probability", "1.5"],
        ["--height", "2", "--width", "2", "--ignite", "5,5"],
        ["--ignite", "1;2"],
    ])
    def test_invalid_configuration(self, runner, args):
        result = runner.invoke(main, ["run", *args])
        assert result.exit_code == 2
        assert "Invalid configuration" in result.output


class TestInteractiveCommand:
    """Test cases for `forest-fire interactive`."""

    def test_menu_session(self, runner):
        result = runner.invoke(main, ["interactive", *CENTRE], input="1\n2\n3\n9\n4\n")
        assert result.exit_code == 0, result.output
        assert "Step 1 completed." in result.output
        assert "Simulation complete after 3 steps." in result.output
        assert "Simulation reset to initial state." in result.output
        assert "Invalid choice. Please try again." in result.output
        assert result.output.rstrip().endswith("Simulation ended.")

    def test_step_after_completion(self, runner):
        result = runner.invoke(
            main, ["interactive", "--height", "1", "--width", "1", "--ignite", "0,0"],
            input="1\n1\n4\n",
        )
        assert result.exit_code == 0
        assert result.output.count("Simulation complete after 1 steps.") == 2
