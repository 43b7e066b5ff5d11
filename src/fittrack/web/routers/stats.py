"""Statistics routes."""

from fastapi import APIRouter, Request

from ...db.repositories import WorkoutRepository
from ...services.statistics import compute_stats, weekly_series
from . import store_from

router = APIRouter(prefix="/api/stats", tags=["stats"])


@router.get("")
async def get_stats(request: Request):
    """Summary statistics over the whole workout log."""
    workouts = await WorkoutRepository(store_from(request)).list_all()
    return compute_stats(workouts).to_dict()


@router.get("/weekly")
async def get_weekly_stats(request: Request):
    """Workouts and calories per ISO week, for charting."""
    workouts = await WorkoutRepository(store_from(request)).list_all()
    return weekly_series(workouts).to_dict()
