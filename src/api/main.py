"""Main FastAPI application entry point."""

from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from catalogue.presentation import router as catalogue_router
from iam.presentation import router as iam_router
from infrastructure.database import DatabaseConnectionError
from infrastructure.database.dependencies import (
    close_database_connections,
    get_write_session,
    init_database,
)
from infrastructure.logging import configure_logging
from infrastructure.observability import DefaultStartupProbe
from infrastructure.settings import get_auth_settings, get_settings
from infrastructure.version import __version__
from ordering.presentation import router as ordering_router

BANNER = "🌿 Agrofix API is up and running!"


@asynccontextmanager
async def agrofix_lifespan(app: FastAPI):
    """Application lifespan context.

    Manages:
    - Logging configuration
    - Database reachability check (fatal if it fails)
    - Engine disposal on shutdown
    """
    settings = get_settings()
    configure_logging(debug=settings.debug)
    probe = DefaultStartupProbe()
    probe.application_starting(app_name=settings.app_name, version=__version__)

    if get_auth_settings().uses_insecure_default_secret:
        probe.insecure_jwt_secret()

    try:
        await init_database()
    except DatabaseConnectionError as e:
        probe.database_unavailable(error=str(e))
        raise
    probe.database_ready()

    yield

    await close_database_connections()
    probe.application_stopped()


app = FastAPI(
    title="Agrofix API",
    description="Marketplace backend for produce listings and stock-safe ordering",
    version=__version__,
    lifespan=agrofix_lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_allowed_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed request bodies as 400 with a readable message."""
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"] if part != "body")
        problems.append(f"{location}: {error['msg']}" if location else error["msg"])

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "; ".join(problems) or "Invalid request"},
    )


# Include bounded context routes
app.include_router(iam_router)
app.include_router(catalogue_router)
app.include_router(ordering_router)


@app.get("/", response_class=PlainTextResponse)
def root() -> str:
    """Service banner."""
    return BANNER


@app.get("/health")
def health():
    """Basic health check endpoint."""
    return {"status": "ok"}


@app.get("/health/db")
async def health_db(
    session: Annotated[AsyncSession, Depends(get_write_session)],
) -> dict:
    """Check database connection health."""
    try:
        await session.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        return {
            "status": "error",
            "connected": False,
            "error": type(e).__name__,
        }
    return {"status": "ok", "connected": True}


def run() -> None:
    """Serve the application with uvicorn (console script entry point)."""
    import uvicorn

    settings = get_settings()
    uvicorn.run("main:app", host=settings.host, port=settings.port)
