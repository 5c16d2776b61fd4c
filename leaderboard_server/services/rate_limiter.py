"""Sliding-window rate limiting for leaderboard submissions."""

import logging
import time
from collections import OrderedDict
from typing import Callable, Mapping, Optional

logger = logging.getLogger(__name__)

WINDOW_MS = 60_000
MAX_SUBMISSIONS_PER_WINDOW = 20
MAX_TRACKED_CLIENTS = 10_000
UNKNOWN_CLIENT = "unknown"


def _now_ms() -> int:
    return int(time.time() * 1000)


def client_id(headers: Mapping[str, str], peer: Optional[str]) -> str:
    """
    Derive the rate-limit key for a request.
    
    Uses the first X-Forwarded-For entry when present, else the peer address.
    Requests with neither share the "unknown" bucket.
    """
    forwarded = headers.get("x-forwarded-for")
    if forwarded:
        first = forwarded.split(",")[0].strip()
        if first:
            return first
    if peer:
        return peer
    logger.debug("Request has no client address, using shared bucket")
    return UNKNOWN_CLIENT


class RateLimiter:
    """
    Per-client sliding-window submission counter.
    
    Each check records the submission before counting it, so the
    (limit + 1)-th submission inside any trailing window is limited.
    
    Clients are kept in least-recently-active order. Stale clients are swept
    out once per ``sweep_interval_ms``, and at most ``max_clients`` keys are
    tracked at any time.
    """

    def __init__(
        self,
        limit: int = MAX_SUBMISSIONS_PER_WINDOW,
        window_ms: int = WINDOW_MS,
        max_clients: int = MAX_TRACKED_CLIENTS,
        sweep_interval_ms: Optional[int] = None,
        clock: Callable[[], int] = _now_ms,
    ):
        self.limit = limit
        self.window_ms = window_ms
        self.max_clients = max_clients
        self.sweep_interval_ms = sweep_interval_ms if sweep_interval_ms is not None else window_ms
        self.clock = clock
        self._hits: OrderedDict[str, list[int]] = OrderedDict()
        self._last_sweep = clock()

    def __len__(self) -> int:
        return len(self._hits)

    def hits(self, client: str) -> list[int]:
        """Timestamps currently recorded for a client."""
        return list(self._hits.get(client, []))

    def is_rate_limited(self, client: str) -> bool:
        """Record a submission for ``client`` and report whether it is over the limit."""
        now = self.clock()
        if now - self._last_sweep >= self.sweep_interval_ms:
            self.sweep(now)
        
        cutoff = now - self.window_ms
        recent = [t for t in self._hits.get(client, []) if t > cutoff]
        recent.append(now)
        self._hits[client] = recent
        self._hits.move_to_end(client)
        
        while len(self._hits) > self.max_clients:
            evicted, _ = self._hits.popitem(last=False)
            logger.debug(f"Evicted least recently active client {evicted}")
        
        limited = len(recent) > self.limit
        if limited:
            logger.warning(f"Rate limited {client}: {len(recent)} submissions in window")
        return limited

    def sweep(self, now: Optional[int] = None) -> int:
        """
        Drop clients with no submissions inside the current window.
        
        Returns:
            Number of clients removed
        """
        if now is None:
            now = self.clock()
        cutoff = now - self.window_ms
        stale = [client for client, hits in self._hits.items() if not hits or hits[-1] <= cutoff]
        for client in stale:
            del self._hits[client]
        self._last_sweep = now
        if stale:
            logger.debug(f"Swept {len(stale)} idle clients from rate limiter")
        return len(stale)
