"""Workout statistics.

Pure functions over a snapshot of the workout log. Anything that depends on
the current day takes ``today`` explicitly so results are reproducible; when
omitted the local date is used.

Weeks follow ISO-8601 (``date.isocalendar()``), both for chart bucketing and
for the ``YYYY-Www`` week keys.
"""

import math
from collections import Counter
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta

from ..models.workout import Workout, as_number

NO_DATA_LABEL = "No data"


@dataclass
class ExerciseFrequency:
    """The most logged exercise and how often it appears."""

    name: str
    count: int

    def to_dict(self) -> dict:
        return {"name": self.name, "count": self.count}


@dataclass
class WeeklySeries:
    """Per-week aggregates as parallel sequences, ready for charting."""

    keys: list[str] = field(default_factory=list)
    labels: list[str] = field(default_factory=list)
    workouts: list[int] = field(default_factory=list)
    calories: list[float] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "labels": self.labels,
            "workouts": self.workouts,
            "calories": self.calories,
        }


@dataclass
class WorkoutStats:
    """Aggregates served by ``/api/stats``."""

    total_workouts: int
    total_exercises: int
    total_weight: float
    average_workouts_per_week: float
    most_frequent_exercise: ExerciseFrequency | None

    def to_dict(self) -> dict:
        """Convert to dictionary using the wire keys."""
        return {
            "totalWorkouts": self.total_workouts,
            "totalExercises": self.total_exercises,
            "totalWeight": self.total_weight,
            "averageWorkoutsPerWeek": self.average_workouts_per_week,
            "mostFrequentExercise": (
                self.most_frequent_exercise.to_dict()
                if self.most_frequent_exercise
                else None
            ),
        }


def parse_workout_date(value) -> date | None:
    """Parse a workout date into a local calendar date.

    Accepts ``YYYY-MM-DD`` or a full ISO-8601 timestamp (a trailing ``Z`` is
    allowed). Timezone-aware timestamps are converted to local time first.
    Returns None for anything unparseable.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        return value
    elif isinstance(value, str) and value:
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
    else:
        return None

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone()
    return parsed.date()


def _dated(workouts: list[Workout]) -> list[tuple[date, Workout]]:
    dated = []
    for workout in workouts:
        day = parse_workout_date(workout.date)
        if day is not None:
            dated.append((day, workout))
    return dated


def total_workouts(workouts: list[Workout]) -> int:
    return len(workouts)


def total_exercises(workouts: list[Workout]) -> int:
    """Count logged exercise entries across all workouts."""
    return sum(len(w.exercises) for w in workouts)


def total_volume(workouts: list[Workout]) -> float:
    """Sum of sets x reps x weight over every entry.

    Missing or non-numeric fields count as 0, so an incomplete entry
    contributes nothing instead of poisoning the total.
    """
    return sum(w.volume for w in workouts)


def total_calories(workouts: list[Workout]) -> float:
    return sum(as_number(w.calories) for w in workouts)


def average_workouts_per_week(workouts: list[Workout]) -> float:
    """Average workouts per week between the first and last workout.

    The span is rounded up to whole weeks and is never less than one week.
    Workouts with unparseable dates still count but do not affect the span.
    """
    if not workouts:
        return 0

    days = sorted(day for day, _ in _dated(workouts))
    weeks = 1
    if days:
        weeks = max(1, math.ceil((days[-1] - days[0]).days / 7))

    return round(len(workouts) / weeks, 2)


def most_frequent_exercise(workouts: list[Workout]) -> ExerciseFrequency | None:
    """Find the exercise name logged most often.

    Ties go to the name encountered first. Returns None when nothing has been
    logged.
    """
    counts: Counter[str] = Counter()
    for workout in workouts:
        for entry in workout.exercises:
            if entry.name:
                counts[entry.name] += 1

    if not counts:
        return None

    # Counter keeps first-insertion order and max() returns the first maximum
    name = max(counts, key=counts.__getitem__)
    return ExerciseFrequency(name=name, count=counts[name])


def week_key(day: date) -> str:
    """ISO-8601 week key, e.g. ``2024-W01``."""
    iso_year, iso_week, _ = day.isocalendar()
    return f"{iso_year}-W{iso_week:02d}"


def weekly_series(workouts: list[Workout]) -> WeeklySeries:
    """Bucket workouts by ISO week, sorted by week key.

    Empty input (or no parseable dates) yields one placeholder bucket.
    """
    buckets: dict[str, dict] = {}
    for day, workout in _dated(workouts):
        bucket = buckets.setdefault(week_key(day), {"workouts": 0, "calories": 0})
        bucket["workouts"] += 1
        bucket["calories"] += as_number(workout.calories)

    if not buckets:
        return WeeklySeries(
            keys=[], labels=[NO_DATA_LABEL], workouts=[0], calories=[0]
        )

    keys = sorted(buckets)
    years = {key.split("-W")[0] for key in keys}

    labels = []
    for key in keys:
        year, week = key.split("-W")
        labels.append(f"{year} Week {week}" if len(years) > 1 else f"Week {week}")

    return WeeklySeries(
        keys=keys,
        labels=labels,
        workouts=[buckets[k]["workouts"] for k in keys],
        calories=[buckets[k]["calories"] for k in keys],
    )


def current_streak(workouts: list[Workout], today: date | None = None) -> int:
    """Count consecutive training days ending today or yesterday.

    Multiple workouts on one day count once. If the latest workout is older
    than yesterday the streak is 0. After that every earlier day must follow
    the previous one with no gap; one missed day ends the streak. Future
    dates are ignored.
    """
    today = today or date.today()
    days = sorted(
        {day for day, _ in _dated(workouts) if day <= today}, reverse=True
    )
    if not days or (today - days[0]).days > 1:
        return 0

    streak = 1
    for previous, day in zip(days, days[1:]):
        if (previous - day).days != 1:
            break
        streak += 1
    return streak


def week_start(today: date | None = None) -> date:
    """Most recent Sunday (today if today is Sunday)."""
    today = today or date.today()
    return today - timedelta(days=(today.weekday() + 1) % 7)


def this_week_workouts(workouts: list[Workout], today: date | None = None) -> list[Workout]:
    """Workouts dated on or after the most recent Sunday."""
    start = week_start(today)
    return [workout for day, workout in _dated(workouts) if day >= start]


def recent_workouts(workouts: list[Workout], limit: int = 5) -> list[Workout]:
    """Latest workouts by date, newest first.

    Workouts with unparseable dates sort last.
    """
    ordered = sorted(
        workouts,
        key=lambda w: parse_workout_date(w.date) or date.min,
        reverse=True,
    )
    return ordered[:limit]


def compute_stats(workouts: list[Workout]) -> WorkoutStats:
    """Compute the summary statistics for a workout log."""
    return WorkoutStats(
        total_workouts=total_workouts(workouts),
        total_exercises=total_exercises(workouts),
        total_weight=total_volume(workouts),
        average_workouts_per_week=average_workouts_per_week(workouts),
        most_frequent_exercise=most_frequent_exercise(workouts),
    )
