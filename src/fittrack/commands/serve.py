"""Web server command."""

import os

import click

from ..db.engine import DATA_DIR_ENV
from .base import store_from_context


@click.command()
@click.option("--host", default="127.0.0.1", envvar="HOST", show_default=True, help="Host to bind to")
@click.option("--port", "-p", default=3000, type=int, envvar="PORT", show_default=True, help="Port to bind to")
@click.option("--reload", is_flag=True, help="Enable auto-reload for development")
@click.pass_context
def serve(ctx: click.Context, host: str, port: int, reload: bool):
    """Start the web server.

    Serves the dashboard at / and the JSON API under /api. The port can also
    be set with the PORT environment variable.

    Examples:

        # Start on default port (3000)
        fittrack serve

        # Expose to network (all interfaces)
        fittrack serve --host 0.0.0.0 --port 8080
    """
    import uvicorn

    from ..web import create_app

    store = store_from_context(ctx)
    # The reloader imports the app factory in a fresh process
    os.environ[DATA_DIR_ENV] = str(store.data_dir)

    click.echo()
    click.echo(click.style("Starting fittrack server...", fg="green"))
    click.echo()
    click.echo(f"  Dashboard: http://{host}:{port}")
    click.echo(f"  API:       http://{host}:{port}/api")
    click.echo(f"  Data:      {store.data_dir}")
    click.echo()
    click.echo("Press Ctrl+C to stop the server.")
    click.echo()

    uvicorn.run(
        "fittrack.web:create_app" if reload else create_app(store.data_dir),
        host=host,
        port=port,
        reload=reload,
        factory=reload,
    )
