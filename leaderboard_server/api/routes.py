"""API routes for the leaderboard."""

import json
import logging
from typing import Any

from fastapi import APIRouter, Depends, Request, Response

from leaderboard_server.errors import MalformedInput, MethodNotSupported, RateLimited
from leaderboard_server.models import ErrorBody, ScoreEntry, SubmitResult
from leaderboard_server.services import (
    RateLimiter,
    ScoreStore,
    client_id,
    coerce_score,
    is_valid_name,
    is_valid_score,
    normalize_name,
)
from .dependencies import get_rate_limiter, get_store

logger = logging.getLogger(__name__)

TOP_ENTRIES = 20
MAX_BODY_BYTES = 5000
NO_STORE = "no-store"

# Prefix match: /leaderboard, /leaderboard/, /leaderboard/anything
LEADERBOARD_PATH = "/leaderboard{suffix:path}"

router = APIRouter()


async def read_json_body(request: Request, limit: int = MAX_BODY_BYTES) -> Any:
    """
    Read and decode a JSON request body, refusing bodies over ``limit`` bytes.
    
    An empty body decodes as an empty object.
    
    Raises:
        MalformedInput: If the body is too large or is not valid JSON
    """
    body = bytearray()
    async for chunk in request.stream():
        body.extend(chunk)
        if len(body) > limit:
            raise MalformedInput("Payload too large", reason="payload_too_large")
    
    if not body:
        return {}
    try:
        return json.loads(body)
    except ValueError as e:
        raise MalformedInput() from e


@router.get(LEADERBOARD_PATH, response_model=list[ScoreEntry])
async def get_leaderboard(
    response: Response,
    store: ScoreStore = Depends(get_store),
) -> list[ScoreEntry]:
    """
    Get the top of the leaderboard.
    
    Returns at most 20 entries, best score first.
    """
    response.headers["Cache-Control"] = NO_STORE
    return store.top(TOP_ENTRIES)


@router.post(
    LEADERBOARD_PATH,
    response_model=SubmitResult,
    status_code=201,
    responses={
        400: {"model": ErrorBody, "description": "Malformed body, name or score"},
        429: {"model": ErrorBody, "description": "Too many submissions from this client"},
        500: {"model": ErrorBody, "description": "Score could not be saved"},
    },
)
async def submit_score(
    request: Request,
    response: Response,
    store: ScoreStore = Depends(get_store),
    limiter: RateLimiter = Depends(get_rate_limiter),
) -> SubmitResult:
    """
    Submit a score.
    
    Body: {"name": str, "score": int}, at most 5000 bytes.
    """
    peer = request.client.host if request.client else None
    client = client_id(request.headers, peer)
    if limiter.is_rate_limited(client):
        raise RateLimited()
    
    body = await read_json_body(request)
    if not isinstance(body, dict):
        body = {}
    
    raw_name = body.get("name")
    raw_score = body.get("score")
    if not is_valid_name(raw_name):
        logger.info(f"Rejected submission from {client}: invalid name")
        raise MalformedInput("Invalid name or score", reason="invalid_name")
    if not is_valid_score(raw_score):
        logger.info(f"Rejected submission from {client}: invalid score")
        raise MalformedInput("Invalid name or score", reason="invalid_score")
    
    entry = ScoreEntry(name=normalize_name(raw_name), score=coerce_score(raw_score))
    store.submit(entry)
    logger.info(f"Accepted score {entry.score} for {entry.name!r} from {client}")
    
    response.headers["Cache-Control"] = NO_STORE
    return SubmitResult(ok=True)


# HEAD would otherwise fall through to the static catch-all; other methods get
# their 405 from the router
@router.api_route(LEADERBOARD_PATH, methods=["HEAD"], include_in_schema=False)
async def leaderboard_method_not_allowed() -> None:
    raise MethodNotSupported()
