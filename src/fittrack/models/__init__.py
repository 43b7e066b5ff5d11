"""Data models for fittrack."""

from .exercises import DEFAULT_EXERCISES, Category, Exercise
from .workout import ExerciseEntry, Workout

__all__ = [
    "Category",
    "DEFAULT_EXERCISES",
    "Exercise",
    "ExerciseEntry",
    "Workout",
]
