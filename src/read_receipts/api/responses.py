from __future__ import annotations

import logging

from starlette.responses import PlainTextResponse
from starlette.types import Message, Receive, Scope, Send

logger = logging.getLogger(__name__)


class GuardedPlainTextResponse(PlainTextResponse):
    """Plain-text response that reports a failed write.

    If the status line never went out, a 500 carrying the error text is sent
    in its place; otherwise the failure is only logged, since a response is
    written at most once.
    """

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        started = False

        async def tracking_send(message: Message) -> None:
            nonlocal started
            await send(message)
            if message["type"] == "http.response.start":
                started = True

        try:
            await super().__call__(scope, receive, tracking_send)
        except OSError as exc:
            logger.error("Failed to write response", extra={"error": str(exc)})
            if started:
                return
            fallback = PlainTextResponse(str(exc), status_code=500)
            await fallback(scope, receive, send)
