"""Exercise catalog definitions."""

from dataclasses import dataclass
from enum import Enum


class Category(str, Enum):
    """Body area an exercise trains."""

    CHEST = "chest"
    LEGS = "legs"
    BACK = "back"
    SHOULDERS = "shoulders"
    ARMS = "arms"
    CORE = "core"
    OTHER = "other"


DEFAULT_CATEGORY = Category.OTHER.value
DEFAULT_EQUIPMENT = "unknown"


@dataclass
class Exercise:
    """An entry in the exercise catalog.

    Category and equipment are free-form strings; the ``Category`` enum only
    names the values used by the seed catalog.
    """

    name: str
    category: str = DEFAULT_CATEGORY
    equipment: str = DEFAULT_EQUIPMENT
    id: int | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        data = {
            "name": self.name,
            "category": self.category,
            "equipment": self.equipment,
        }
        if self.id is not None:
            data = {"id": self.id, **data}
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "Exercise":
        """Create from dictionary."""
        return cls(
            id=data.get("id"),
            name=data["name"],
            category=data.get("category") or DEFAULT_CATEGORY,
            equipment=data.get("equipment") or DEFAULT_EQUIPMENT,
        )


# Catalog written on first run
DEFAULT_EXERCISES = [
    Exercise(id=1, name="Push-ups", category=Category.CHEST.value, equipment="bodyweight"),
    Exercise(id=2, name="Squats", category=Category.LEGS.value, equipment="bodyweight"),
    Exercise(id=3, name="Pull-ups", category=Category.BACK.value, equipment="pull-up bar"),
    Exercise(id=4, name="Bench Press", category=Category.CHEST.value, equipment="barbell"),
    Exercise(id=5, name="Deadlift", category=Category.BACK.value, equipment="barbell"),
    Exercise(id=6, name="Shoulder Press", category=Category.SHOULDERS.value, equipment="dumbbells"),
    Exercise(id=7, name="Bicep Curls", category=Category.ARMS.value, equipment="dumbbells"),
    Exercise(id=8, name="Tricep Dips", category=Category.ARMS.value, equipment="bodyweight"),
    Exercise(id=9, name="Lunges", category=Category.LEGS.value, equipment="bodyweight"),
    Exercise(id=10, name="Plank", category=Category.CORE.value, equipment="bodyweight"),
]
