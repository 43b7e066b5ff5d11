"""CLI entry point for fittrack."""

import logging

import click

from . import __version__
from .commands import dashboard, exercises, init, serve, stats, workouts
from .db.engine import DATA_DIR_ENV


@click.group()
@click.version_option(version=__version__, prog_name="fittrack")
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False),
    envvar=DATA_DIR_ENV,
    default=None,
    help="Directory holding exercises.json and workouts.json (default: ./data)",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, data_dir: str | None, verbose: bool):
    """fittrack: personal fitness tracker.

    Log workouts, see summary statistics and follow your weekly progress
    from the terminal or the web dashboard.

    Example usage:

        # Create the data files
        fittrack init

        # Log a workout
        fittrack workouts add -e "Squats:3:10:60" -e "Push-ups:3:15:0"

        # See your statistics
        fittrack stats --weekly

        # Start the web dashboard on port 3000
        fittrack serve
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.ensure_object(dict)
    ctx.obj["data_dir"] = data_dir


# Register commands
main.add_command(init)
main.add_command(exercises)
main.add_command(workouts)
main.add_command(stats)
main.add_command(dashboard)
main.add_command(serve)


def run():
    """Run the CLI."""
    main()


if __name__ == "__main__":
    run()
