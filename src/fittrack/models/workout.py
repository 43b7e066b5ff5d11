"""Workout log models."""

from dataclasses import dataclass, field
from typing import Any

ENTRY_FIELDS = ("name", "sets", "reps", "weight")


@dataclass
class ExerciseEntry:
    """One exercise performed within a workout.

    The name is not checked against the exercise catalog. Numeric fields are
    kept exactly as logged (possibly missing); statistics treat missing values
    as zero.
    """

    name: str | None = None
    sets: Any = None
    reps: Any = None
    weight: Any = None
    extra: dict = field(default_factory=dict)

    @property
    def volume(self) -> float:
        """Training volume (sets x reps x weight) with missing values as 0."""
        return as_number(self.sets) * as_number(self.reps) * as_number(self.weight)

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        data = dict(self.extra)
        for key in ENTRY_FIELDS:
            value = getattr(self, key)
            if value is not None:
                data[key] = value
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "ExerciseEntry":
        """Create from dictionary."""
        return cls(
            name=data.get("name"),
            sets=data.get("sets"),
            reps=data.get("reps"),
            weight=data.get("weight"),
            extra={k: v for k, v in data.items() if k not in ENTRY_FIELDS},
        )


@dataclass
class Workout:
    """A logged training session.

    ``created_at``/``updated_at`` are kept as the ISO-8601 strings found on
    disk so records round-trip unchanged. ``name``, ``duration`` (minutes) and
    ``calories`` are optional and only written when set.
    """

    date: str
    exercises: list[ExerciseEntry] = field(default_factory=list)
    notes: str = ""
    name: str | None = None
    duration: int | None = None
    calories: int | None = None
    created_at: str | None = None
    updated_at: str | None = None
    id: int | None = None

    @property
    def volume(self) -> float:
        """Total training volume of this workout."""
        return sum(entry.volume for entry in self.exercises)

    def to_dict(self) -> dict:
        """Convert to dictionary using the wire/storage keys."""
        data: dict[str, Any] = {}
        if self.id is not None:
            data["id"] = self.id
        data["date"] = self.date
        if self.name is not None:
            data["name"] = self.name
        data["exercises"] = [entry.to_dict() for entry in self.exercises]
        data["notes"] = self.notes
        if self.duration is not None:
            data["duration"] = self.duration
        if self.calories is not None:
            data["calories"] = self.calories
        if self.created_at is not None:
            data["createdAt"] = self.created_at
        if self.updated_at is not None:
            data["updatedAt"] = self.updated_at
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "Workout":
        """Create from dictionary.

        Older records may lack ``notes``, ``updatedAt`` or ``exercises``.
        """
        exercises = data.get("exercises") or []
        return cls(
            id=data.get("id"),
            date=data.get("date", ""),
            exercises=[
                ExerciseEntry.from_dict(e) for e in exercises if isinstance(e, dict)
            ],
            notes=data.get("notes") or "",
            name=data.get("name"),
            duration=data.get("duration"),
            calories=data.get("calories"),
            created_at=data.get("createdAt"),
            updated_at=data.get("updatedAt"),
        )


def as_number(value: Any) -> float:
    """Coerce a logged numeric field, treating missing or junk values as 0."""
    if value is None or isinstance(value, bool):
        return 0
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0
