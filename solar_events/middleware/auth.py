import logging
import os

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)

OPEN_PATHS = {"/", "/__health"}


class APIKeyMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        # Health and CORS preflight never require a key
        if request.url.path in OPEN_PATHS or request.method == "OPTIONS":
            return await call_next(request)

        if os.getenv("AUTH_ENABLED", "false").lower() != "true":
            return await call_next(request)

        keys = {k.strip() for k in os.getenv("API_KEYS", "").split(",") if k.strip()}
        auth = request.headers.get("Authorization", "")
        if not auth.startswith("Bearer "):
            return JSONResponse({"detail": "Missing API key"}, status_code=401)
        token = auth[len("Bearer "):].strip()
        if token not in keys:
            logger.warning("Rejected API key on %s", request.url.path)
            return JSONResponse({"detail": "Invalid API key"}, status_code=403)

        request.state.api_key = token
        return await call_next(request)
