"""Services for fittrack."""

from .dashboard import DashboardData, DashboardSummary, build_dashboard, build_summary
from .statistics import ExerciseFrequency, WeeklySeries, WorkoutStats, compute_stats

__all__ = [
    "build_dashboard",
    "build_summary",
    "compute_stats",
    "DashboardData",
    "DashboardSummary",
    "ExerciseFrequency",
    "WeeklySeries",
    "WorkoutStats",
]
