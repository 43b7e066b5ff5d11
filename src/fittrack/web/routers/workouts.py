"""Workout log routes."""

import logging

from fastapi import APIRouter, Request

from ...db.repositories import WorkoutRepository
from ...db.store import WORKOUTS
from ..schemas import WorkoutCreate, WorkoutUpdate
from . import parse_id, store_from

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/workouts", tags=["workouts"])


@router.get("")
async def list_workouts(request: Request):
    """List all workouts."""
    repo = WorkoutRepository(store_from(request))
    workouts = await repo.list_all()
    return [w.to_dict() for w in workouts]


@router.post("", status_code=201)
async def create_workout(request: Request, body: WorkoutCreate):
    """Log a new workout."""
    repo = WorkoutRepository(store_from(request))
    workout = await repo.create(body.to_workout())
    logger.info("Logged workout %s on %s", workout.id, workout.date)
    return workout.to_dict()


@router.get("/{workout_id}")
async def get_workout(request: Request, workout_id: str):
    """Get a single workout."""
    repo = WorkoutRepository(store_from(request))
    workout = await repo.get(parse_id(WORKOUTS, workout_id))
    return workout.to_dict()


@router.put("/{workout_id}")
async def update_workout(request: Request, workout_id: str, body: WorkoutUpdate):
    """Update a workout. Fields left out of the body keep their values."""
    repo = WorkoutRepository(store_from(request))
    workout = await repo.update(parse_id(WORKOUTS, workout_id), body.to_changes())
    logger.info("Updated workout %s", workout_id)
    return workout.to_dict()


@router.delete("/{workout_id}")
async def delete_workout(request: Request, workout_id: str):
    """Delete a workout."""
    repo = WorkoutRepository(store_from(request))
    workout = await repo.delete(parse_id(WORKOUTS, workout_id))
    logger.info("Deleted workout %s", workout_id)
    return {"message": "Workout deleted successfully", "workout": workout.to_dict()}
