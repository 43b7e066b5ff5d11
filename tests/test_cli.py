"""Tests for CLI commands."""

import asyncio
import json

import click
import httpx
import pytest
from click.testing import CliRunner

from fittrack.cli import main
from fittrack.clients import Dashboard, FitnessTrackerClient
from fittrack.commands.base import format_table
from fittrack.commands.dashboard import render_dashboard
from fittrack.commands.workouts import parse_exercise_spec
from fittrack.exceptions import StoreError


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def invoke(runner, data_dir):
    """Invoke the CLI against the temporary data directory."""

    def _invoke(*args, **kwargs):
        return runner.invoke(main, ["--data-dir", str(data_dir), *args], **kwargs)

    return _invoke


class TestParseExerciseSpec:
    """Tests for parse_exercise_spec."""

    def test_full_spec(self):
        entry = parse_exercise_spec("Squats:3:10:62.5")
        assert (entry.name, entry.sets, entry.reps, entry.weight) == ("Squats", 3, 10, 62.5)

    def test_name_only(self):
        entry = parse_exercise_spec("Plank")
        assert entry.to_dict() == {"name": "Plank"}

    def test_invalid(self):
        for spec in ("Squats:three", ":3:10", "Squats:1:2:3:4"):
            with pytest.raises(click.BadParameter):
                parse_exercise_spec(spec)


class TestCommands:
    """Tests for the command workflow."""

    def test_requires_init(self, invoke):
        result = invoke("workouts", "list")

        assert result.exit_code == 1
        assert "fittrack init" in result.output

    def test_init(self, invoke, data_dir):
        result = invoke("init")

        assert result.exit_code == 0
        assert "10 exercises" in result.output
        assert len(json.loads((data_dir / "exercises.json").read_text())) == 10

        again = invoke("init")
        assert "already exist" in again.output

    def test_exercises(self, invoke):
        invoke("init")

        added = invoke("exercises", "add", "Burpees", "--category", "core")
        listed = invoke("exercises", "list")

        assert "ID: 11" in added.output
        assert "Burpees" in listed.output
        assert "core" in listed.output

    def test_workout_lifecycle(self, invoke, data_dir):
        invoke("init")

        added = invoke(
            "workouts", "add", "--date", "2024-01-01",
            "-e", "Squats:3:10:60", "-e", "Squats:1:5", "--calories", "300",
        )
        assert added.exit_code == 0
        assert "Logged workout 1" in added.output

        stored = json.loads((data_dir / "workouts.json").read_text())
        assert stored[0]["exercises"][0] == {"name": "Squats", "sets": 3, "reps": 10, "weight": 60.0}
        assert "createdAt" in stored[0]

        shown = invoke("workouts", "show", "1")
        assert "2024-01-01" in shown.output
        assert "1,800.0" in shown.output

        edited = invoke("workouts", "edit", "1", "--notes", "heavy")
        assert edited.exit_code == 0
        assert json.loads((data_dir / "workouts.json").read_text())[0]["notes"] == "heavy"

        stats = invoke("stats", "--weekly")
        assert "Most frequent:        Squats (2x)" in stats.output
        assert "Week 01" in stats.output

        deleted = invoke("workouts", "delete", "1", "--yes")
        assert deleted.exit_code == 0

        missing = invoke("workouts", "show", "1")
        assert missing.exit_code == 1
        assert "not found" in missing.output

    def test_delete_confirmation_declined(self, invoke):
        invoke("init")
        invoke("workouts", "add", "--date", "2024-01-01")

        result = invoke("workouts", "delete", "1", input="n\n")

        assert "Cancelled" in result.output
        assert "2024-01-01" in invoke("workouts", "list").output

    def test_write_failure_is_reported(self, invoke, data_dir):
        """Test a workouts file that cannot be replaced gives an error, not a traceback."""
        invoke("init")
        workouts_file = data_dir / "workouts.json"
        workouts_file.unlink()
        workouts_file.mkdir()

        result = invoke("workouts", "add", "--date", "2024-01-01")

        assert result.exit_code == 1
        assert "Could not log workout" in result.output
        assert "Failed to write workouts" in result.output
        assert not isinstance(result.exception, StoreError)

    def test_blank_exercise_name_rejected(self, invoke, data_dir):
        invoke("init")

        result = invoke("exercises", "add", "  ")

        assert result.exit_code == 1
        assert "name is required" in result.output
        assert len(json.loads((data_dir / "exercises.json").read_text())) == 10

    def test_stats_empty(self, invoke):
        invoke("init")
        assert "No workouts logged yet" in invoke("stats").output


class TestDashboardCommand:
    """Tests for the terminal dashboard rendering."""

    def test_render(self, capsys):
        def handler(request):
            if request.url.path == "/api/exercises":
                return httpx.Response(200, json=[])
            return httpx.Response(200, json=[
                {"id": 1, "date": "2024-01-01", "name": "Legs", "exercises": [], "calories": 300},
            ])

        board = Dashboard(FitnessTrackerClient("http://t", transport=httpx.MockTransport(handler)))
        asyncio.run(board.load())

        render_dashboard(board)
        output = capsys.readouterr().out

        assert "Legs" in output
        assert "Week 01" in output
        assert "300" in output

    def test_unreachable_server_is_soft(self, invoke):
        result = invoke("dashboard", "--url", "http://127.0.0.1:9")

        assert result.exit_code == 0
        assert "Failed to load workouts" in result.output
        assert "No data" in result.output


def test_format_table():
    table = format_table(["A", "Name"], [["1", "Squats"]])
    assert table.splitlines() == ["A  Name", "-  ------", "1  Squats"]
    assert format_table(["A"], []) == ""
