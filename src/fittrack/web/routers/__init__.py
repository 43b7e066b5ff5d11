"""API and page routers."""

from fastapi import Request

from ...db.store import JsonStore
from ...exceptions import RecordNotFoundError


def store_from(request: Request) -> JsonStore:
    """Get the record store from app state."""
    return request.app.state.store


def parse_id(collection: str, value: str) -> int:
    """Parse a path id; ids that are not integers match no record."""
    try:
        return int(value)
    except ValueError:
        raise RecordNotFoundError(collection, value)
