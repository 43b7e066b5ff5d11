"""Dashboard view data built from the statistics engine."""

from dataclasses import dataclass, field
from datetime import date

from ..models.workout import Workout
from . import statistics

RECENT_LIMIT = 5


@dataclass
class DashboardSummary:
    """Values shown on the dashboard summary cards."""

    total_workouts: int
    week_workouts: int
    current_streak: int
    total_calories: float

    def to_dict(self) -> dict:
        return {
            "totalWorkouts": self.total_workouts,
            "weekWorkouts": self.week_workouts,
            "currentStreak": self.current_streak,
            "totalCalories": self.total_calories,
        }


@dataclass
class DashboardData:
    """Everything the dashboard page renders."""

    summary: DashboardSummary
    recent: list[Workout] = field(default_factory=list)
    chart: statistics.WeeklySeries = field(default_factory=statistics.WeeklySeries)

    def to_dict(self) -> dict:
        return {
            "summary": self.summary.to_dict(),
            "recentWorkouts": [w.to_dict() for w in self.recent],
            "chart": self.chart.to_dict(),
        }


def build_summary(workouts: list[Workout], today: date | None = None) -> DashboardSummary:
    """Compute the summary cards for a workout log."""
    return DashboardSummary(
        total_workouts=statistics.total_workouts(workouts),
        week_workouts=len(statistics.this_week_workouts(workouts, today)),
        current_streak=statistics.current_streak(workouts, today),
        total_calories=statistics.total_calories(workouts),
    )


def build_dashboard(workouts: list[Workout], today: date | None = None) -> DashboardData:
    """Compute all dashboard data for a workout log."""
    return DashboardData(
        summary=build_summary(workouts, today),
        recent=statistics.recent_workouts(workouts, RECENT_LIMIT),
        chart=statistics.weekly_series(workouts),
    )
