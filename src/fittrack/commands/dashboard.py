"""Terminal dashboard command."""

import click

from ..clients import Dashboard, FitnessTrackerClient, NotificationLevel
from .base import async_command, echo_error, echo_info, echo_success, format_table

LEVEL_ECHO = {
    NotificationLevel.SUCCESS: echo_success,
    NotificationLevel.ERROR: echo_error,
    NotificationLevel.INFO: echo_info,
}


def render_dashboard(board: Dashboard) -> None:
    """Print summary cards, recent workouts and the weekly table."""
    for note in board.notifications:
        LEVEL_ECHO[note.level](note.message)

    summary = board.summary()
    click.echo()
    click.echo(click.style("Dashboard", bold=True))
    click.echo("=" * 50)
    click.echo(
        format_table(
            ["Total workouts", "This week", "Streak", "Calories"],
            [[
                str(summary.total_workouts),
                str(summary.week_workouts),
                f"{summary.current_streak} day(s)",
                f"{summary.total_calories:,.0f}",
            ]],
        )
    )

    click.echo()
    click.echo(click.style("Recent workouts", bold=True))
    recent = board.recent()
    if not recent:
        click.echo("No workouts recorded yet. Start by logging your first workout!")
    else:
        rows = [
            [w.date, w.name or "Workout", f"{w.duration or 0} min", f"{w.calories or 0} cal"]
            for w in recent
        ]
        click.echo(format_table(["Date", "Name", "Duration", "Calories"], rows))

    click.echo()
    click.echo(click.style("Progress", bold=True))
    chart = board.chart()
    rows = [
        [label, str(count), f"{calories:,.0f}"]
        for label, count, calories in zip(chart.labels, chart.workouts, chart.calories)
    ]
    click.echo(format_table(["Week", "Workouts", "Calories"], rows))


@click.command()
@click.option("--url", "-u", default=None, help="Server URL (default: $FITTRACK_API_URL or http://127.0.0.1:3000)")
@async_command
async def dashboard(url: str | None):
    """Show the dashboard of a running fittrack server."""
    board = Dashboard(FitnessTrackerClient(url))
    await board.load()
    render_dashboard(board)
