"""Flat-file JSON record store."""

import json
import logging
import os
import tempfile
from datetime import datetime, timezone
from pathlib import Path

from ..exceptions import RecordNotFoundError, StoreError

logger = logging.getLogger(__name__)

EXERCISES = "exercises"
WORKOUTS = "workouts"
COLLECTIONS = (EXERCISES, WORKOUTS)


def utc_timestamp() -> str:
    """Current time as an ISO-8601 UTC timestamp with millisecond precision."""
    now = datetime.now(timezone.utc).isoformat(timespec="milliseconds")
    return now.replace("+00:00", "Z")


class JsonStore:
    """Stores each collection as a JSON array in ``<data_dir>/<collection>.json``.

    Every mutation reads the whole collection, changes it in memory and
    rewrites the whole file. The rewrite goes through a temporary file and
    ``os.replace`` so a reader never sees a half-written file. There is no
    locking: two concurrent writers can still lose one another's update.
    """

    def __init__(self, data_dir: Path):
        self.data_dir = Path(data_dir)

    def path_for(self, collection: str) -> Path:
        """Get the file backing a collection."""
        if collection not in COLLECTIONS:
            raise ValueError(f"Unknown collection: {collection}")
        return self.data_dir / f"{collection}.json"

    def initialize(self, seed_exercises: list[dict] | None = None) -> bool:
        """Create the data directory and any missing collection files.

        Args:
            seed_exercises: Records written to a missing exercises file

        Returns:
            True if any file was created
        """
        self.data_dir.mkdir(parents=True, exist_ok=True)
        created = False

        exercises_path = self.path_for(EXERCISES)
        if not exercises_path.exists():
            self._write(EXERCISES, list(seed_exercises or []))
            logger.info("Seeded exercise catalog at %s", exercises_path)
            created = True

        workouts_path = self.path_for(WORKOUTS)
        if not workouts_path.exists():
            self._write(WORKOUTS, [])
            logger.info("Created empty workout log at %s", workouts_path)
            created = True

        return created

    def list_all(self, collection: str) -> list[dict]:
        """Read a whole collection.

        A missing, unreadable or corrupt file reads as an empty collection.
        """
        path = self.path_for(collection)
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            logger.warning("Collection file %s does not exist", path)
            return []
        except (OSError, ValueError) as e:
            logger.warning("Error reading %s: %s", path, e)
            return []

        if not isinstance(data, list):
            logger.warning("Collection file %s does not hold a JSON array", path)
            return []
        return [record for record in data if isinstance(record, dict)]

    def insert(self, collection: str, partial: dict) -> dict:
        """Append a record, assigning the next id."""
        records = self.list_all(collection)
        record = {"id": self._next_id(records), **partial}
        records.append(record)
        self._write(collection, records)
        logger.debug("Inserted %s record %s", collection, record["id"])
        return record

    def find_by_id(self, collection: str, record_id: int) -> dict:
        """Get a record by id."""
        records = self.list_all(collection)
        return records[self._index_of(collection, records, record_id)]

    def update(self, collection: str, record_id: int, partial: dict) -> dict:
        """Shallow-merge ``partial`` into a record and stamp ``updatedAt``.

        Keys whose value is None are ignored, so absent fields keep their
        prior values. The id itself cannot be changed.
        """
        records = self.list_all(collection)
        index = self._index_of(collection, records, record_id)

        changes = {k: v for k, v in partial.items() if v is not None and k != "id"}
        record = {**records[index], **changes, "updatedAt": utc_timestamp()}
        records[index] = record
        self._write(collection, records)
        logger.debug("Updated %s record %s", collection, record_id)
        return record

    def remove(self, collection: str, record_id: int) -> dict:
        """Delete a record and return it."""
        records = self.list_all(collection)
        index = self._index_of(collection, records, record_id)
        record = records.pop(index)
        self._write(collection, records)
        logger.debug("Removed %s record %s", collection, record_id)
        return record

    def _index_of(self, collection: str, records: list[dict], record_id: int) -> int:
        for i, record in enumerate(records):
            if record.get("id") == record_id:
                return i
        raise RecordNotFoundError(collection, record_id)

    @staticmethod
    def _next_id(records: list[dict]) -> int:
        ids = [r["id"] for r in records if isinstance(r.get("id"), int)]
        return max(ids) + 1 if ids else 1

    def _write(self, collection: str, records: list[dict]) -> None:
        path = self.path_for(collection)
        try:
            fd, tmp_name = tempfile.mkstemp(
                dir=path.parent, prefix=f".{collection}.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(records, f, indent=2)
                os.replace(tmp_name, path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            logger.error("Error writing %s: %s", path, e)
            raise StoreError(f"Failed to write {collection}") from e
