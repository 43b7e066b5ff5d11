"""Dashboard page and data routes."""

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from ...db.repositories import ExerciseRepository, WorkoutRepository
from ...services.dashboard import build_dashboard
from ...services.statistics import recent_workouts
from . import store_from

router = APIRouter(tags=["dashboard"])


def get_templates(request: Request):
    """Get templates from app state."""
    return request.app.state.templates


@router.get("/", response_class=HTMLResponse)
async def dashboard_page(request: Request):
    """Dashboard with summary cards, workout lists and progress chart."""
    templates = get_templates(request)
    store = store_from(request)

    exercises = await ExerciseRepository(store).list_all()
    workouts = await WorkoutRepository(store).list_all()
    data = build_dashboard(workouts)

    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "dashboard": data,
            "all_workouts": recent_workouts(workouts, limit=len(workouts)),
            "exercises": exercises,
        },
    )


@router.get("/api/dashboard")
async def dashboard_data(request: Request):
    """Dashboard data as JSON, for refreshing the page after a change."""
    workouts = await WorkoutRepository(store_from(request)).list_all()
    return build_dashboard(workouts).to_dict()
