"""Data directory setup and initialization."""

import os
from pathlib import Path

from ..models.exercises import DEFAULT_EXERCISES
from .store import JsonStore

DATA_DIR_ENV = "FITTRACK_DATA_DIR"


def get_data_dir(data_dir: Path | str | None = None) -> Path:
    """Get the data directory path.

    Resolution order: explicit argument, ``FITTRACK_DATA_DIR``, ``./data``.
    """
    if data_dir is None:
        data_dir = os.environ.get(DATA_DIR_ENV) or Path.cwd() / "data"
    return Path(data_dir)


def get_store(data_dir: Path | str | None = None) -> JsonStore:
    """Create a store over the resolved data directory."""
    return JsonStore(get_data_dir(data_dir))


def init_store(store: JsonStore) -> bool:
    """Run first-run setup, seeding the default exercise catalog.

    Returns:
        True if any collection file was created
    """
    return store.initialize([exercise.to_dict() for exercise in DEFAULT_EXERCISES])
