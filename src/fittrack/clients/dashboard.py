"""Client-side dashboard state.

Mirrors what the browser page shows: it loads the catalog and workout log
from the API, then derives the summary cards, recent list and weekly chart
locally through the shared statistics engine so a freshly logged workout is
reflected without another round trip.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum

from ..exceptions import APIError
from ..models.exercises import Exercise
from ..models.workout import Workout
from ..services import dashboard as dashboard_service
from ..services import statistics
from .api import FitnessTrackerClient

logger = logging.getLogger(__name__)

TABS = ("dashboard", "workouts", "progress")


class NotificationLevel(str, Enum):
    SUCCESS = "success"
    ERROR = "error"
    INFO = "info"


@dataclass
class Notification:
    """A transient message for the user."""

    message: str
    level: NotificationLevel = NotificationLevel.INFO
    created_at: datetime = field(default_factory=datetime.now)


class Dashboard:
    """Dashboard backed by a ``FitnessTrackerClient``."""

    def __init__(self, client: FitnessTrackerClient):
        self.client = client
        self.exercises: list[Exercise] = []
        self.workouts: list[Workout] = []
        self.notifications: list[Notification] = []
        self.active_tab = "dashboard"
        self.workout_form_visible = False

    async def load(self) -> None:
        """Fetch exercises and workouts.

        The two requests run concurrently. A failed request leaves its list
        empty and adds an error notification instead of raising.
        """
        exercises, workouts = await asyncio.gather(
            self.client.get_exercises(),
            self.client.get_workouts(),
            return_exceptions=True,
        )

        if isinstance(exercises, APIError):
            logger.warning("Failed to load exercises: %s", exercises)
            self.exercises = []
            self.notify("Failed to load exercises", NotificationLevel.ERROR)
        elif isinstance(exercises, BaseException):
            raise exercises
        else:
            self.exercises = exercises

        if isinstance(workouts, APIError):
            logger.warning("Failed to load workouts: %s", workouts)
            self.workouts = []
            self.notify("Failed to load workouts", NotificationLevel.ERROR)
        elif isinstance(workouts, BaseException):
            raise workouts
        else:
            self.workouts = workouts

    def notify(self, message: str, level: NotificationLevel = NotificationLevel.INFO) -> None:
        self.notifications.append(Notification(message, level))

    def navigate(self, tab: str) -> None:
        """Switch the active tab."""
        if tab not in TABS:
            raise ValueError(f"Unknown tab: {tab}")
        self.active_tab = tab

    def show_workout_form(self) -> None:
        self.workout_form_visible = True

    def hide_workout_form(self) -> None:
        self.workout_form_visible = False

    async def log_workout(self, workout: Workout) -> Workout | None:
        """Save a workout through the API and add it to the local log.

        Returns the saved workout, or None if the API rejected it.
        """
        try:
            saved = await self.client.create_workout(workout)
        except APIError as e:
            logger.warning("Failed to save workout: %s", e)
            self.notify("Failed to save workout", NotificationLevel.ERROR)
            return None

        self.workouts.append(saved)
        self.hide_workout_form()
        self.notify("Workout saved successfully!", NotificationLevel.SUCCESS)
        return saved

    def summary(self, today: date | None = None) -> dashboard_service.DashboardSummary:
        return dashboard_service.build_summary(self.workouts, today)

    def recent(self) -> list[Workout]:
        return statistics.recent_workouts(self.workouts, dashboard_service.RECENT_LIMIT)

    def all_workouts(self) -> list[Workout]:
        """Full workout list, newest first."""
        return statistics.recent_workouts(self.workouts, limit=len(self.workouts))

    def chart(self) -> statistics.WeeklySeries:
        return statistics.weekly_series(self.workouts)
