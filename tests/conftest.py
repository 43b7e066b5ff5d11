"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient

from fittrack.db import JsonStore, init_store
from fittrack.models.workout import ExerciseEntry, Workout
from fittrack.web import create_app


@pytest.fixture
def data_dir(tmp_path):
    """Temporary data directory (not initialized)."""
    return tmp_path / "data"


@pytest.fixture
def store(data_dir):
    """Store initialized with the default exercise catalog."""
    store = JsonStore(data_dir)
    init_store(store)
    return store


@pytest.fixture
def api(data_dir):
    """Test client for an app backed by a fresh data directory."""
    with TestClient(create_app(data_dir)) as client:
        yield client


@pytest.fixture
def sample_workouts():
    """A small log spanning two ISO weeks."""
    return [
        Workout(
            id=1,
            date="2024-01-01",
            name="Legs",
            calories=300,
            exercises=[
                ExerciseEntry(name="Squats", sets=3, reps=10, weight=60),
                ExerciseEntry(name="Lunges", sets=3, reps=12, weight=20),
            ],
        ),
        Workout(
            id=2,
            date="2024-01-03",
            name="Push",
            calories=250,
            exercises=[
                ExerciseEntry(name="Squats", sets=5, reps=5, weight=80),
                ExerciseEntry(name="Push-ups", sets=3, reps=15, weight=0),
            ],
        ),
        Workout(
            id=3,
            date="2024-01-10",
            exercises=[ExerciseEntry(name="Plank", sets=3, reps=1)],
        ),
    ]
