"""Clients for a running fittrack server."""

from .api import FitnessTrackerClient
from .dashboard import Dashboard, Notification, NotificationLevel

__all__ = [
    "Dashboard",
    "FitnessTrackerClient",
    "Notification",
    "NotificationLevel",
]
