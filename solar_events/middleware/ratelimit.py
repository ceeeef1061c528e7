import os
import time
from collections import defaultdict
from typing import DefaultDict, List

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

WINDOW_SECONDS = 60

_counters: DefaultDict[str, List[float]] = defaultdict(list)


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Sliding one-minute window per API key (or client host)."""

    async def dispatch(self, request: Request, call_next):
        if os.getenv("RATE_LIMIT_ENABLED", "false").lower() != "true":
            return await call_next(request)

        client = request.client.host if request.client else "anonymous"
        key = getattr(request.state, "api_key", None) or client
        limit = int(os.getenv("RATE_LIMIT_PER_MINUTE", "60"))
        now = time.time()

        window = [t for t in _counters[key] if t > now - WINDOW_SECONDS]
        window.append(now)
        _counters[key] = window

        if len(window) > limit:
            return JSONResponse({"detail": "Rate limit exceeded"}, status_code=429)

        return await call_next(request)
