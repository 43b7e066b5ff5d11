"""Data access layer for fittrack."""

import asyncio

from ..exceptions import ValidationError
from ..models.exercises import Exercise
from ..models.workout import Workout
from .store import EXERCISES, WORKOUTS, JsonStore, utc_timestamp


class ExerciseRepository:
    """Repository for the exercise catalog."""

    def __init__(self, store: JsonStore):
        self.store = store

    async def list_all(self) -> list[Exercise]:
        """List all exercises in catalog order."""
        records = await asyncio.to_thread(self.store.list_all, EXERCISES)
        return [Exercise.from_dict(r) for r in records if r.get("name")]

    async def create(self, exercise: Exercise) -> Exercise:
        """Add an exercise to the catalog.

        Raises:
            ValidationError: If the exercise has no name
        """
        if not exercise.name or not exercise.name.strip():
            raise ValidationError("Exercise name is required")
        data = exercise.to_dict()
        data.pop("id", None)
        record = await asyncio.to_thread(self.store.insert, EXERCISES, data)
        return Exercise.from_dict(record)


class WorkoutRepository:
    """Repository for logged workouts."""

    def __init__(self, store: JsonStore):
        self.store = store

    async def list_all(self) -> list[Workout]:
        """List all workouts in insertion order."""
        records = await asyncio.to_thread(self.store.list_all, WORKOUTS)
        return [Workout.from_dict(r) for r in records]

    async def get(self, workout_id: int) -> Workout:
        """Get a workout by ID.

        Raises:
            RecordNotFoundError: If no workout has this ID
        """
        record = await asyncio.to_thread(self.store.find_by_id, WORKOUTS, workout_id)
        return Workout.from_dict(record)

    async def create(self, workout: Workout) -> Workout:
        """Log a new workout, stamping ``createdAt``.

        Raises:
            ValidationError: If the workout has no date
        """
        if not workout.date:
            raise ValidationError("Workout date is required")
        data = workout.to_dict()
        data.pop("id", None)
        data.pop("updatedAt", None)
        data["createdAt"] = utc_timestamp()
        record = await asyncio.to_thread(self.store.insert, WORKOUTS, data)
        return Workout.from_dict(record)

    async def update(self, workout_id: int, changes: dict) -> Workout:
        """Merge changes into a workout.

        ``changes`` uses the storage keys; None values leave fields untouched.

        Raises:
            RecordNotFoundError: If no workout has this ID
        """
        record = await asyncio.to_thread(
            self.store.update, WORKOUTS, workout_id, changes
        )
        return Workout.from_dict(record)

    async def delete(self, workout_id: int) -> Workout:
        """Delete a workout and return it.

        Raises:
            RecordNotFoundError: If no workout has this ID
        """
        record = await asyncio.to_thread(self.store.remove, WORKOUTS, workout_id)
        return Workout.from_dict(record)
