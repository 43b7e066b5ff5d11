"""Storage layer for fittrack."""

from .engine import get_data_dir, get_store, init_store
from .repositories import ExerciseRepository, WorkoutRepository
from .store import EXERCISES, WORKOUTS, JsonStore

__all__ = [
    "EXERCISES",
    "ExerciseRepository",
    "get_data_dir",
    "get_store",
    "init_store",
    "JsonStore",
    "WORKOUTS",
    "WorkoutRepository",
]
