"""Shared CLI utilities."""

import asyncio
from functools import wraps

import click

from ..db import EXERCISES, WORKOUTS, JsonStore, get_store


def async_command(f):
    """Decorator to run async Click commands."""

    @wraps(f)
    def wrapper(*args, **kwargs):
        return asyncio.run(f(*args, **kwargs))

    return wrapper


def store_from_context(ctx: click.Context) -> JsonStore:
    """Get the store for the data directory chosen on the command line."""
    obj = ctx.find_object(dict) or {}
    return get_store(obj.get("data_dir"))


def ensure_initialized(ctx: click.Context) -> JsonStore:
    """Ensure the data directory is initialized and return its store."""
    store = store_from_context(ctx)
    if not all(store.path_for(c).exists() for c in (EXERCISES, WORKOUTS)):
        click.echo(
            click.style("Error: ", fg="red")
            + f"No data found in {store.data_dir}. Run 'fittrack init' first."
        )
        ctx.exit(1)
    return store


def echo_success(message: str) -> None:
    """Print a success message."""
    click.echo(click.style("[OK] ", fg="green") + message)


def echo_error(message: str) -> None:
    """Print an error message."""
    click.echo(click.style("[ERROR] ", fg="red") + message)


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(click.style("[INFO] ", fg="blue") + message)


def echo_warning(message: str) -> None:
    """Print a warning message."""
    click.echo(click.style("[WARN] ", fg="yellow") + message)


def format_table(headers: list[str], rows: list[list[str]], padding: int = 2) -> str:
    """Format data as a simple table."""
    if not rows:
        return ""

    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(str(cell)))

    lines = ["".join(h.ljust(widths[i] + padding) for i, h in enumerate(headers))]
    lines.append("".join("-" * w + " " * padding for w in widths))
    for row in rows:
        lines.append(
            "".join(str(cell).ljust(widths[i] + padding) for i, cell in enumerate(row))
        )

    return "\n".join(line.rstrip() for line in lines)
