"""
Edit File Lines Backend - FastAPI Application Entry Point
"""

from __future__ import annotations

import argparse
import asyncio
import contextlib
import logging
import sys
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Sequence

from fastapi import FastAPI

from routers import tools
from services.config_manager import ConfigManager
from services.edit_service import EditService
from services.logging_setup import configure_logging
from services.path_guard import PathGuard, expand_home
from services.state_manager import PendingEditStore

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager - startup and shutdown logic"""
    logger.info("Starting Edit File Lines Backend...")
    logger.info("Allowed directories: %s", app.state.edit_service.path_guard.allowed_directories)
    sweeper = asyncio.create_task(app.state.edit_service.store.run_sweeper())

    yield

    logger.info("Shutting down Edit File Lines Backend...")
    sweeper.cancel()
    with contextlib.suppress(asyncio.CancelledError):
        await sweeper


def create_app(
    allowed_directories: Sequence[str],
    store: PendingEditStore | None = None,
) -> FastAPI:
    """Build the application around its own store and path guard"""
    app = FastAPI(
        title="Edit File Lines Backend",
        description="Line-based file editing tools with diff preview and approval",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.edit_service = EditService(
        path_guard=PathGuard(allowed_directories),
        store=store if store is not None else PendingEditStore(),
    )

    app.include_router(tools.router, prefix="/api/tools", tags=["tools"])

    @app.get("/health")
    async def health_check():
        """Health check endpoint"""
        return {"status": "healthy", "service": "edit-file-lines-backend"}

    return app


def check_directories(directories: Sequence[str]) -> list[str]:
    """Return a problem description for every directory that cannot be served"""
    problems = []
    for directory in directories:
        path = Path(expand_home(directory))
        if not path.exists():
            problems.append(f"Error accessing directory {directory}: does not exist")
        elif not path.is_dir():
            problems.append(f"Error: {directory} is not a directory")
    return problems


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="edit-file-lines",
        description="Serve line-based edit tools restricted to the allowed directories.",
    )
    parser.add_argument("directories", nargs="*", metavar="allowed-directory")
    parser.add_argument("--host", default=None)
    parser.add_argument("--port", type=int, default=None)
    parser.add_argument("--log-level", default=None)
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    config_manager = ConfigManager.get_instance()
    config = config_manager.get_config()

    configure_logging(args.log_level or config.get("logLevel", "INFO"))

    directories = config_manager.allowed_directories(args.directories)
    if not directories:
        print(
            "Usage: edit-file-lines <allowed-directory> [additional-directories...]",
            file=sys.stderr,
        )
        return 1

    problems = check_directories(directories)
    if problems:
        for problem in problems:
            print(problem, file=sys.stderr)
        return 1

    import uvicorn

    server = config.get("server", {})
    try:
        uvicorn.run(
            create_app(directories),
            host=args.host or server.get("host", "127.0.0.1"),
            port=args.port or server.get("port", 8000),
            log_config=None,
        )
    except Exception:
        logger.exception("Fatal error running server")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
