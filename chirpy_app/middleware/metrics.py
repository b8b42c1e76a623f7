"""
Hit counting for the static file server.

Unlike app.add_middleware, this wraps one ASGI app (the StaticFiles mount
under /app), so API and admin requests are never counted.
"""

import logging

from starlette.types import ASGIApp, Receive, Scope, Send

from chirpy_app.services.metrics import HitCounter

logger = logging.getLogger(__name__)


class MetricsMiddleware:
    """Count each HTTP request, then pass it to the wrapped app unchanged."""

    def __init__(self, app: ASGIApp, counter: HitCounter):
        self.app = app
        self.counter = counter

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http":
            hits = self.counter.increment()
            logger.debug("Hit %d counted for: %s", hits, scope.get("path"))
        await self.app(scope, receive, send)
