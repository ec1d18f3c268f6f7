from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from hive_board import __version__
from hive_board.api.board import router as board_router
from hive_board.api.health import router as health_router
from hive_board.config import Settings, settings
from hive_board.game.view import BoardContext
from hive_board.geometry.errors import GeometryError

logging.basicConfig(level=settings.log_level)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    context = app.state.board_context
    logger.info("Starting up hive board server...")
    logger.info(
        f"Screen layout {context.screen_layout}, world layout {context.world_layout}"
    )

    yield

    logger.info("Hive board server shutdown complete")


async def geometry_error_handler(request: Request, exc: GeometryError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"detail": exc.message})


def create_app(app_settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    app_settings = app_settings or settings
    app = FastAPI(
        title="hive-board",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[app_settings.frontend_url],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Render configuration shared by every request
    app.state.settings = app_settings
    app.state.board_context = BoardContext.from_settings(app_settings)

    app.add_exception_handler(GeometryError, geometry_error_handler)

    app.include_router(board_router, prefix="/api/v1")
    app.include_router(health_router)

    return app


app = create_app()
