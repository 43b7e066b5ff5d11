"""CLI commands for fittrack."""

from .dashboard import dashboard
from .exercises import exercises
from .init import init
from .serve import serve
from .stats import stats
from .workouts import workouts

__all__ = [
    "dashboard",
    "exercises",
    "init",
    "serve",
    "stats",
    "workouts",
]
