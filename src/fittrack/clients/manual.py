"""Interactive workout entry."""

from datetime import date

import questionary
from questionary import Style

from ..models.exercises import Exercise
from ..models.workout import ExerciseEntry, Workout

custom_style = Style(
    [
        ("qmark", "fg:#007bff bold"),
        ("question", "bold"),
        ("answer", "fg:#28a745 bold"),
        ("pointer", "fg:#007bff bold"),
        ("highlighted", "fg:#007bff bold"),
        ("instruction", ""),
        ("text", ""),
    ]
)

DONE = "__done__"


def _is_date(text: str) -> bool | str:
    try:
        date.fromisoformat(text)
    except ValueError:
        return "Use the YYYY-MM-DD format"
    return True


def _is_number(text: str) -> bool | str:
    if not text:
        return True
    try:
        float(text)
    except ValueError:
        return "Enter a number"
    return True


def _to_int(text: str) -> int | None:
    return int(float(text)) if text else None


class ManualWorkoutClient:
    """Questionnaire for logging a workout from the terminal."""

    async def collect_workout(self, exercises: list[Exercise]) -> Workout | None:
        """Ask for the workout details and its exercises.

        Returns None if the user aborts (Ctrl+C).
        """
        workout_date = await questionary.text(
            "Workout date (YYYY-MM-DD):",
            default=date.today().isoformat(),
            validate=_is_date,
            style=custom_style,
        ).ask_async()
        if workout_date is None:
            return None

        name = await questionary.text("Workout name:", style=custom_style).ask_async()
        duration = await questionary.text(
            "Duration in minutes:", validate=_is_number, style=custom_style
        ).ask_async()
        calories = await questionary.text(
            "Calories burned:", validate=_is_number, style=custom_style
        ).ask_async()

        entries = []
        while True:
            choice = await questionary.select(
                "Add an exercise:",
                choices=[questionary.Choice("Done", DONE)]
                + [questionary.Choice(e.name, e.name) for e in exercises],
                style=custom_style,
            ).ask_async()
            if choice in (None, DONE):
                break

            sets = await questionary.text("  Sets:", validate=_is_number, style=custom_style).ask_async()
            reps = await questionary.text("  Reps:", validate=_is_number, style=custom_style).ask_async()
            weight = await questionary.text("  Weight:", validate=_is_number, style=custom_style).ask_async()
            entries.append(
                ExerciseEntry(
                    name=choice,
                    sets=_to_int(sets or ""),
                    reps=_to_int(reps or ""),
                    weight=float(weight) if weight else None,
                )
            )

        notes = await questionary.text("Notes:", style=custom_style).ask_async()

        return Workout(
            date=workout_date,
            exercises=entries,
            notes=notes or "",
            name=name or None,
            duration=_to_int(duration or ""),
            calories=_to_int(calories or ""),
        )
