"""FastAPI application for the fittrack dashboard and API."""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from starlette.exceptions import HTTPException as StarletteHTTPException

from .. import __version__
from ..db.engine import get_store, init_store
from ..exceptions import RecordNotFoundError, StoreError, ValidationError
from .routers import dashboard, exercises, stats, workouts

logger = logging.getLogger(__name__)

# Template and static file paths
TEMPLATES_DIR = Path(__file__).parent / "templates"
STATIC_DIR = Path(__file__).parent / "static"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler - runs on startup and shutdown."""
    # Startup: create data files on first run
    if init_store(app.state.store):
        logger.info("Initialized data directory %s", app.state.store.data_dir)
    yield


def create_app(data_dir: Path | str | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        data_dir: Directory holding the JSON collections. Falls back to
            ``FITTRACK_DATA_DIR`` and then ``./data``.
    """
    app = FastAPI(
        title="fittrack",
        description="Personal fitness tracker",
        version=__version__,
        lifespan=lifespan,
    )

    app.state.store = get_store(data_dir)
    app.state.templates = Jinja2Templates(directory=TEMPLATES_DIR)

    # Mount static files
    if STATIC_DIR.exists():
        app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

    _register_error_handlers(app)

    # Include routers
    app.include_router(exercises.router)
    app.include_router(workouts.router)
    app.include_router(stats.router)
    app.include_router(dashboard.router)

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    return app


def _validation_message(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        loc = ".".join(str(p) for p in error.get("loc", ()) if p != "body")
        parts.append(f"{loc}: {error.get('msg')}" if loc else str(error.get("msg")))
    return "Invalid request: " + "; ".join(parts)


def _register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def validation_error(request: Request, exc: RequestValidationError):
        message = _validation_message(exc)
        logger.info("Rejected %s %s: %s", request.method, request.url.path, message)
        return JSONResponse(status_code=400, content={"error": message})

    @app.exception_handler(ValidationError)
    async def invalid_record(request: Request, exc: ValidationError):
        logger.info("Rejected %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=400, content={"error": f"Invalid request: {exc}"})

    @app.exception_handler(RecordNotFoundError)
    async def not_found(request: Request, exc: RecordNotFoundError):
        logger.info("%s %s: %s", request.method, request.url.path, exc)
        noun = exc.collection.rstrip("s").capitalize()
        return JSONResponse(status_code=404, content={"error": f"{noun} not found"})

    @app.exception_handler(StoreError)
    async def store_error(request: Request, exc: StoreError):
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=500, content={"error": "Failed to save data"})

    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404:
            return JSONResponse(status_code=404, content={"error": "Route not found"})
        return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})

    @app.exception_handler(Exception)
    async def unhandled_error(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"error": "Something went wrong!"})
