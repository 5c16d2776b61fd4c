"""Catch-all routes serving the game's static assets."""

from fastapi import APIRouter, Depends
from fastapi.responses import FileResponse

from leaderboard_server.services import StaticFiles, content_type
from .dependencies import get_static_files

static_router = APIRouter()


@static_router.api_route("/{path:path}", methods=["GET", "HEAD"], include_in_schema=False)
async def serve_static(
    path: str,
    static_files: StaticFiles = Depends(get_static_files),
) -> FileResponse:
    """Serve a file from the static root. HEAD responses carry headers only."""
    target = static_files.resolve("/" + path)
    return FileResponse(target, media_type=content_type(target))

