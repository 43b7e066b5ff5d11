"""Workout statistics command."""

import click

from ..db import WorkoutRepository
from ..services.dashboard import build_summary
from ..services.statistics import compute_stats, weekly_series
from .base import async_command, echo_info, ensure_initialized, format_table


@click.command()
@click.option("--weekly", "-w", is_flag=True, help="Also show workouts and calories per week")
@click.pass_context
@async_command
async def stats(ctx: click.Context, weekly: bool):
    """Show summary statistics for the workout log."""
    workouts = await WorkoutRepository(ensure_initialized(ctx)).list_all()

    if not workouts:
        echo_info("No workouts logged yet.")
        return

    result = compute_stats(workouts)
    summary = build_summary(workouts)

    click.echo()
    click.echo(click.style("Workout Statistics", bold=True))
    click.echo("=" * 40)
    click.echo(f"Total workouts:       {result.total_workouts}")
    click.echo(f"This week:            {summary.week_workouts}")
    click.echo(f"Current streak:       {summary.current_streak} day(s)")
    click.echo(f"Exercises logged:     {result.total_exercises}")
    click.echo(f"Total volume:         {result.total_weight:,.1f}")
    click.echo(f"Total calories:       {summary.total_calories:,.0f}")
    click.echo(f"Workouts per week:    {result.average_workouts_per_week}")
    if result.most_frequent_exercise:
        top = result.most_frequent_exercise
        click.echo(f"Most frequent:        {top.name} ({top.count}x)")

    if weekly:
        series = weekly_series(workouts)
        rows = [
            [label, str(count), f"{calories:,.0f}"]
            for label, count, calories in zip(series.labels, series.workouts, series.calories)
        ]
        click.echo()
        click.echo(format_table(["Week", "Workouts", "Calories"], rows))
