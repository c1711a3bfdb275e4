"""Response cache and security headers"""

import logging
import threading
import time
from collections import OrderedDict
from typing import Callable, Optional, Tuple

from fastapi import Request

from .config import server_config

logger = logging.getLogger(__name__)


class ResponseCache:
    """Simple in-memory TTL cache for rendered SVG bodies.

    Oldest entries are evicted once ``max_entries`` is reached. All access
    goes through one lock since endpoints run in the worker threadpool.
    """

    def __init__(
        self,
        max_entries: int = 1024,
        enabled: bool = True,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.max_entries = max_entries
        self.enabled = enabled
        self._clock = clock
        self._entries: "OrderedDict[str, Tuple[float, str]]" = OrderedDict()
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[str]:
        if not self.enabled:
            return None
        now = self._clock()
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            expires_at, body = entry
            if expires_at <= now:
                del self._entries[key]
                return None
            logger.debug(f"[cache] hit {key}")
            return body

    def set(self, key: str, body: str, ttl_seconds: float) -> None:
        if not self.enabled or ttl_seconds <= 0:
            return
        expires_at = self._clock() + ttl_seconds
        with self._lock:
            self._entries.pop(key, None)
            self._entries[key] = (expires_at, body)
            while len(self._entries) > self.max_entries:
                self._entries.popitem(last=False)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


def cache_from_config() -> ResponseCache:
    return ResponseCache(
        max_entries=server_config.get("cache.max_entries", 1024),
        enabled=server_config.get("cache.enabled", True),
    )


async def security_headers_middleware(request: Request, call_next):
    """Add security headers to responses"""
    response = await call_next(request)

    if server_config.get("security.security_headers.enabled", True):
        response.headers["X-Content-Type-Options"] = server_config.get(
            "security.security_headers.x_content_type_options", "nosniff"
        )
        # SVG images may carry inline styles but never load anything
        response.headers["Content-Security-Policy"] = server_config.get(
            "security.security_headers.content_security_policy",
            "default-src 'none'; style-src 'unsafe-inline'",
        )
        response.headers["Referrer-Policy"] = server_config.get(
            "security.security_headers.referrer_policy", "no-referrer"
        )

        # Remove server information
        if "server" in response.headers:
            del response.headers["server"]

    return response
