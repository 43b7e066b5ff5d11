"""Workout log commands."""

from datetime import date

import click

from ..db import ExerciseRepository, WorkoutRepository
from ..exceptions import FitTrackError, RecordNotFoundError
from ..models.workout import ExerciseEntry, Workout
from ..services.statistics import recent_workouts
from .base import (
    async_command,
    echo_error,
    echo_info,
    echo_success,
    echo_warning,
    ensure_initialized,
    format_table,
)


def parse_exercise_spec(spec: str) -> ExerciseEntry:
    """Parse ``NAME[:SETS[:REPS[:WEIGHT]]]`` into an entry.

    Raises:
        click.BadParameter: If a numeric part is not a number
    """
    name, *numbers = [part.strip() for part in spec.split(":")]
    if not name:
        raise click.BadParameter(f"missing exercise name in '{spec}'")
    if len(numbers) > 3:
        raise click.BadParameter(f"too many fields in '{spec}'")

    values = []
    for part, cast in zip(numbers, (int, int, float)):
        try:
            values.append(cast(part) if part else None)
        except ValueError:
            raise click.BadParameter(f"'{part}' is not a number in '{spec}'")
    values += [None] * (3 - len(values))

    sets, reps, weight = values
    return ExerciseEntry(name=name, sets=sets, reps=reps, weight=weight)


def _print_workout(workout: Workout) -> None:
    click.echo()
    click.echo("=" * 50)
    click.echo(f"Workout {workout.id}: {workout.name or 'Workout'} on {workout.date}")
    click.echo("=" * 50)
    if workout.duration is not None:
        click.echo(f"Duration: {workout.duration} min")
    if workout.calories is not None:
        click.echo(f"Calories: {workout.calories}")
    if workout.notes:
        click.echo(f"Notes: {workout.notes}")
    click.echo(f"Created: {workout.created_at or 'N/A'}")
    if workout.updated_at:
        click.echo(f"Updated: {workout.updated_at}")

    if workout.exercises:
        click.echo()
        rows = [
            [e.name or "?", str(e.sets or 0), str(e.reps or 0), str(e.weight or 0), f"{e.volume:,.1f}"]
            for e in workout.exercises
        ]
        click.echo(format_table(["Exercise", "Sets", "Reps", "Weight", "Volume"], rows))


@click.group()
def workouts():
    """Log, view and delete workouts."""
    pass


@workouts.command(name="list")
@click.option("--limit", "-n", type=int, default=None, help="Only show the N most recent")
@click.pass_context
@async_command
async def list_workouts(ctx: click.Context, limit: int | None):
    """List workouts, newest first."""
    all_workouts = await WorkoutRepository(ensure_initialized(ctx)).list_all()

    if not all_workouts:
        echo_info("No workouts logged yet. Add one with 'fittrack workouts add'")
        return

    shown = recent_workouts(all_workouts, limit=limit or len(all_workouts))
    rows = [
        [
            str(w.id),
            w.date,
            (w.name or "Workout")[:30],
            str(len(w.exercises)),
            f"{w.volume:,.0f}",
        ]
        for w in shown
    ]

    click.echo()
    click.echo(format_table(["ID", "Date", "Name", "Exercises", "Volume"], rows))
    click.echo()
    click.echo(f"Total: {len(all_workouts)} workout(s)")


@workouts.command()
@click.argument("workout_id", type=int)
@click.pass_context
@async_command
async def show(ctx: click.Context, workout_id: int):
    """Show details of a workout."""
    repo = WorkoutRepository(ensure_initialized(ctx))
    try:
        workout = await repo.get(workout_id)
    except RecordNotFoundError:
        echo_error(f"Workout ID {workout_id} not found")
        ctx.exit(1)

    _print_workout(workout)


@workouts.command()
@click.option("--date", "-d", "workout_date", default=None, help="Date (YYYY-MM-DD), default today")
@click.option(
    "--exercise",
    "-e",
    "exercise_specs",
    multiple=True,
    help="Exercise as NAME:SETS:REPS:WEIGHT (repeatable)",
)
@click.option("--name", default=None, help="Workout name")
@click.option("--duration", type=int, default=None, help="Duration in minutes")
@click.option("--calories", type=int, default=None, help="Calories burned")
@click.option("--notes", default="", help="Free-form notes")
@click.pass_context
@async_command
async def add(
    ctx: click.Context,
    workout_date: str | None,
    exercise_specs: tuple[str, ...],
    name: str | None,
    duration: int | None,
    calories: int | None,
    notes: str,
):
    """Log a workout.

    Examples:

        fittrack workouts add -e "Squats:3:10:60" -e "Plank" --notes "Leg day"
    """
    store = ensure_initialized(ctx)
    entries = [parse_exercise_spec(spec) for spec in exercise_specs]

    workout = Workout(
        date=workout_date or date.today().isoformat(),
        exercises=entries,
        notes=notes,
        name=name,
        duration=duration,
        calories=calories,
    )
    try:
        workout = await WorkoutRepository(store).create(workout)
    except FitTrackError as e:
        echo_error(f"Could not log workout: {e}")
        ctx.exit(1)

    echo_success(f"Logged workout {workout.id} on {workout.date}")


@workouts.command()
@click.pass_context
@async_command
async def log(ctx: click.Context):
    """Log a workout interactively."""
    from ..clients.manual import ManualWorkoutClient

    store = ensure_initialized(ctx)
    catalog = await ExerciseRepository(store).list_all()

    workout = await ManualWorkoutClient().collect_workout(catalog)
    if workout is None:
        echo_warning("Cancelled, nothing logged")
        return

    try:
        workout = await WorkoutRepository(store).create(workout)
    except FitTrackError as e:
        echo_error(f"Could not log workout: {e}")
        ctx.exit(1)

    echo_success(f"Logged workout {workout.id} with {len(workout.exercises)} exercise(s)")


@workouts.command()
@click.argument("workout_id", type=int)
@click.option("--date", "-d", "workout_date", default=None, help="New date (YYYY-MM-DD)")
@click.option("--notes", default=None, help="New notes")
@click.option("--name", default=None, help="New workout name")
@click.option("--exercise", "-e", "exercise_specs", multiple=True, help="Replace exercises")
@click.pass_context
@async_command
async def edit(
    ctx: click.Context,
    workout_id: int,
    workout_date: str | None,
    notes: str | None,
    name: str | None,
    exercise_specs: tuple[str, ...],
):
    """Change fields of a workout. Options left out keep their values."""
    changes = {
        "date": workout_date,
        "notes": notes,
        "name": name,
        "exercises": (
            [parse_exercise_spec(s).to_dict() for s in exercise_specs]
            if exercise_specs
            else None
        ),
    }

    repo = WorkoutRepository(ensure_initialized(ctx))
    try:
        workout = await repo.update(workout_id, changes)
    except RecordNotFoundError:
        echo_error(f"Workout ID {workout_id} not found")
        ctx.exit(1)
    except FitTrackError as e:
        echo_error(f"Could not update workout {workout_id}: {e}")
        ctx.exit(1)

    echo_success(f"Updated workout {workout.id}")


@workouts.command()
@click.argument("workout_id", type=int)
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation")
@click.pass_context
@async_command
async def delete(ctx: click.Context, workout_id: int, yes: bool):
    """Delete a workout."""
    repo = WorkoutRepository(ensure_initialized(ctx))

    if not yes and not click.confirm(f"Delete workout {workout_id}?"):
        echo_info("Cancelled")
        return

    try:
        workout = await repo.delete(workout_id)
    except RecordNotFoundError:
        echo_error(f"Workout ID {workout_id} not found")
        ctx.exit(1)
    except FitTrackError as e:
        echo_error(f"Could not delete workout {workout_id}: {e}")
        ctx.exit(1)

    echo_success(f"Deleted workout {workout.id} ({workout.date})")
