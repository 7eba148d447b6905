"""Reject every request that arrives without the host's identity header."""
from __future__ import annotations

import logging

from starlette.datastructures import Headers
from starlette.responses import PlainTextResponse
from starlette.types import ASGIApp, Receive, Scope, Send

from read_receipts.application.ports.auth import IdentityResolver

logger = logging.getLogger(__name__)

NOT_AUTHORIZED = "Not authorized"


class IdentityGateMiddleware:
    """Wraps the whole router, so unmatched paths are gated too.

    The resolved ``Principal`` is placed on ``request.state.principal``.
    """

    def __init__(self, app: ASGIApp, resolver: IdentityResolver) -> None:
        self.app = app
        self._resolver = resolver

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        principal = self._resolver.resolve(Headers(scope=scope))
        if principal is None:
            logger.debug("Rejected unauthenticated %s %s", scope["method"], scope["path"])
            response = PlainTextResponse(NOT_AUTHORIZED, status_code=401)
            await response(scope, receive, send)
            return

        scope.setdefault("state", {})["principal"] = principal
        await self.app(scope, receive, send)
