"""Initialize data directory command."""

import click

from ..db import EXERCISES, init_store
from ..exceptions import StoreError
from .base import echo_error, echo_info, echo_success, store_from_context


@click.command()
@click.pass_context
def init(ctx: click.Context):
    """Initialize the fittrack data directory.

    Creates exercises.json with the default exercise catalog and an empty
    workouts.json. Existing files are left untouched.
    """
    store = store_from_context(ctx)
    echo_info(f"Initializing fittrack in {store.data_dir}")

    try:
        created = init_store(store)
    except (StoreError, OSError) as e:
        echo_error(f"Could not initialize {store.data_dir}: {e}")
        ctx.exit(1)

    if created:
        count = len(store.list_all(EXERCISES))
        echo_success(f"Data files created ({count} exercises in catalog)")
    else:
        echo_info("Data files already exist, nothing to do")

    click.echo()
    click.echo("Next steps:")
    click.echo("  fittrack workouts log     # Log a workout interactively")
    click.echo("  fittrack serve            # Open the dashboard in your browser")
