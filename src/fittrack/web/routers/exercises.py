"""Exercise catalog routes."""

import logging

from fastapi import APIRouter, Request

from ...db.repositories import ExerciseRepository
from ..schemas import ExerciseCreate
from . import store_from

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/exercises", tags=["exercises"])


@router.get("")
async def list_exercises(request: Request):
    """List the exercise catalog."""
    repo = ExerciseRepository(store_from(request))
    exercises = await repo.list_all()
    return [e.to_dict() for e in exercises]


@router.post("", status_code=201)
async def create_exercise(request: Request, body: ExerciseCreate):
    """Add an exercise to the catalog."""
    repo = ExerciseRepository(store_from(request))
    exercise = await repo.create(body.to_exercise())
    logger.info("Added exercise %s (%s)", exercise.id, exercise.name)
    return exercise.to_dict()
