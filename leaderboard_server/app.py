"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from leaderboard_server.config import Config
from leaderboard_server.errors import LeaderboardError, MethodNotSupported, StaticFileError
from leaderboard_server.api import router, static_router
from leaderboard_server.api.dependencies import LeaderboardState
from leaderboard_server.services import RateLimiter, ScoreStore, StaticFiles
from leaderboard_server.storage import JsonFileStorage

logger = logging.getLogger(__name__)


async def leaderboard_error_handler(request: Request, exc: LeaderboardError) -> JSONResponse:
    return JSONResponse(
        exc.to_dict(),
        status_code=exc.status_code,
        headers={"Cache-Control": "no-store"},
    )


async def static_file_error_handler(request: Request, exc: StaticFileError) -> PlainTextResponse:
    return PlainTextResponse(exc.detail, status_code=exc.status_code)


async def method_not_allowed_handler(request: Request, exc: StarletteHTTPException):
    """Render router-level 405s in the same shape as the rest of the API."""
    if exc.status_code != 405:
        return await http_exception_handler(request, exc)
    
    headers = dict(exc.headers or {})
    if request.scope["path"].startswith("/leaderboard"):
        headers["Cache-Control"] = "no-store"
        return JSONResponse(MethodNotSupported().to_dict(), status_code=405, headers=headers)
    return PlainTextResponse("Method not allowed", status_code=405, headers=headers)


def create_app(
    config: Config | None = None,
    limiter: RateLimiter | None = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.
    
    The leaderboard is loaded from disk here, once per application, and the
    resulting state is attached to ``app.state`` for the routes to use.
    
    Args:
        config: Application configuration. If None, loads from environment.
        limiter: Rate limiter to use. If None, a default one is created.
        
    Returns:
        Configured FastAPI application
    """
    if config is None:
        config = Config.from_env()
    
    store = ScoreStore(JsonFileStorage(config.data_file))
    store.load()
    state = LeaderboardState(
        store=store,
        limiter=limiter if limiter is not None else RateLimiter(),
        static_files=StaticFiles(config.public_root),
    )
    
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler for startup/shutdown."""
        # Startup
        logger.info(f"Jetpack Voice Hero server running on http://localhost:{config.port}")
        logger.info(f"Leaderboard endpoint: http://localhost:{config.port}/leaderboard")
        logger.info(f"Serving static files from {state.static_files.root}")
        
        yield
        
        # Shutdown
        logger.info("Shutting down...")
    
    app = FastAPI(
        title="Jetpack Voice Hero Leaderboard",
        description="Static game assets and a flat-file leaderboard",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.leaderboard = state
    
    app.add_exception_handler(LeaderboardError, leaderboard_error_handler)
    app.add_exception_handler(StaticFileError, static_file_error_handler)
    app.add_exception_handler(StarletteHTTPException, method_not_allowed_handler)
    
    # Include API routes
    app.include_router(router)
    
    # Static catch-all goes last so it never shadows the routes above
    app.include_router(static_router)
    
    return app
