from __future__ import annotations

from fastapi import Request
from fastapi.responses import JSONResponse
from packages.shared.schemas.checkout_v1 import CheckoutErrorV1
from services.api.app.logging_utils import checkout_logger
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp


class OriginGuardMiddleware(BaseHTTPMiddleware):
    """Reject browser requests from origins outside the allow-list.

    CORSMiddleware only withholds the allow-origin header for simple requests, so the
    handler would still run. Requests without an Origin header are not browser
    cross-origin calls and pass through.
    """

    def __init__(self, app: ASGIApp, allowed_origins: list[str]) -> None:
        super().__init__(app)
        self._allowed_origins = frozenset(allowed_origins)

    async def dispatch(self, request: Request, call_next):
        origin = request.headers.get("origin")
        if origin is not None and origin not in self._allowed_origins:
            checkout_logger.warning(
                "Rejected %s %s from origin %s", request.method, request.url.path, origin
            )
            return JSONResponse(
                status_code=403,
                content=CheckoutErrorV1(error="Origin not allowed").model_dump(),
            )
        return await call_next(request)
