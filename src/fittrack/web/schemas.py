"""Request schemas for the JSON API.

Only presence and the shape of ``exercises`` are checked. Entry fields are
stored as sent; statistics treat missing or non-numeric values as zero.
"""

from typing import Any

from pydantic import BaseModel, Field

from ..models.exercises import DEFAULT_CATEGORY, DEFAULT_EQUIPMENT, Exercise
from ..models.workout import ExerciseEntry, Workout


def to_entries(exercises: list) -> list[ExerciseEntry]:
    """Build entries from request items, skipping items that are not objects."""
    return [ExerciseEntry.from_dict(e) for e in exercises if isinstance(e, dict)]


class ExerciseCreate(BaseModel):
    """Body of ``POST /api/exercises``."""

    name: str = Field(min_length=1)
    category: str | None = None
    equipment: str | None = None

    def to_exercise(self) -> Exercise:
        return Exercise(
            name=self.name,
            category=self.category or DEFAULT_CATEGORY,
            equipment=self.equipment or DEFAULT_EQUIPMENT,
        )


class WorkoutCreate(BaseModel):
    """Body of ``POST /api/workouts``."""

    date: str = Field(min_length=1)
    exercises: list[Any]
    notes: str | None = None
    name: str | None = None
    duration: Any = None
    calories: Any = None

    def to_workout(self) -> Workout:
        return Workout(
            date=self.date,
            exercises=to_entries(self.exercises),
            notes=self.notes or "",
            name=self.name or None,
            duration=self.duration,
            calories=self.calories,
        )


class WorkoutUpdate(BaseModel):
    """Body of ``PUT /api/workouts/{id}``; every field is optional."""

    date: str | None = None
    exercises: list[Any] | None = None
    notes: str | None = None
    name: str | None = None
    duration: Any = None
    calories: Any = None

    def to_changes(self) -> dict:
        """Storage-keyed changes; None means leave the field unchanged."""
        return {
            "date": self.date or None,
            "exercises": (
                [e.to_dict() for e in to_entries(self.exercises)]
                if self.exercises is not None
                else None
            ),
            "notes": self.notes,
            "name": self.name,
            "duration": self.duration,
            "calories": self.calories,
        }
