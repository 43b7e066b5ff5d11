"""Exercise catalog commands."""

import click

from ..db import ExerciseRepository
from ..exceptions import FitTrackError
from ..models.exercises import Exercise
from .base import async_command, echo_error, echo_info, echo_success, ensure_initialized, format_table


@click.group()
def exercises():
    """Manage the exercise catalog."""
    pass


@exercises.command(name="list")
@click.pass_context
@async_command
async def list_exercises(ctx: click.Context):
    """List all exercises in the catalog."""
    repo = ExerciseRepository(ensure_initialized(ctx))
    catalog = await repo.list_all()

    if not catalog:
        echo_info("The exercise catalog is empty.")
        return

    rows = [[str(e.id), e.name, e.category, e.equipment] for e in catalog]
    click.echo(format_table(["ID", "Name", "Category", "Equipment"], rows))


@exercises.command(name="add")
@click.argument("name")
@click.option("--category", "-c", default=None, help="Body area, e.g. chest or legs")
@click.option("--equipment", "-e", default=None, help="Equipment needed")
@click.pass_context
@async_command
async def add_exercise(ctx: click.Context, name: str, category: str | None, equipment: str | None):
    """Add an exercise to the catalog."""
    repo = ExerciseRepository(ensure_initialized(ctx))
    exercise = Exercise(name=name)
    if category:
        exercise.category = category
    if equipment:
        exercise.equipment = equipment

    try:
        exercise = await repo.create(exercise)
    except FitTrackError as e:
        echo_error(f"Could not add exercise: {e}")
        ctx.exit(1)

    echo_success(f"Added exercise {exercise.name} (ID: {exercise.id})")
