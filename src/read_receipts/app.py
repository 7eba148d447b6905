from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request, Response
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from read_receipts.api.middleware.access_log import AccessLogMiddleware
from read_receipts.api.middleware.identity_gate import IdentityGateMiddleware
from read_receipts.api.middleware.request_id import RequestIdMiddleware
from read_receipts.api.v1.routers import probe, read_state
from read_receipts.application.exceptions import StoreError, ValidationError
from read_receipts.application.ports.store import KeyValueStore
from read_receipts.config import settings
from read_receipts.infrastructure.identity.header_resolver import HeaderIdentityResolver
from read_receipts.infrastructure.store.factory import build_store

logger = logging.getLogger(__name__)


def _lifespan(store: KeyValueStore | None):
    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """Startup / shutdown lifecycle."""
        if store is not None:
            app.state.store = store
            yield
            return

        app.state.store = await build_store(settings)
        logger.info("Key/value store ready backend=%s", settings.STORE_BACKEND)
        try:
            yield
        finally:
            await app.state.store.close()

    return lifespan


def create_app(store: KeyValueStore | None = None) -> FastAPI:
    """Build the plugin's request dispatcher.

    A caller-supplied ``store`` is used as-is and left open on shutdown;
    otherwise one is built from settings for the lifetime of the app.
    """
    app = FastAPI(
        title="Read Receipts Plugin",
        version="0.1.0",
        lifespan=_lifespan(store),
        redirect_slashes=False,
        openapi_url=None,
        docs_url=None,
        redoc_url=None,
    )
    if store is not None:
        app.state.store = store

    app.add_middleware(
        IdentityGateMiddleware,
        resolver=HeaderIdentityResolver(settings.IDENTITY_HEADER),
    )
    app.add_middleware(AccessLogMiddleware)
    app.add_middleware(RequestIdMiddleware)

    _register_exception_handlers(app)

    app.include_router(read_state.router)
    app.include_router(probe.router)

    return app


def _register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(StarletteHTTPException)
    async def _http(_req: Request, exc: StarletteHTTPException) -> Response:
        # Unknown path and unknown method on a known path are both "no route".
        if exc.status_code in (404, 405):
            return Response(status_code=404)
        return PlainTextResponse(str(exc.detail), status_code=exc.status_code)

    @app.exception_handler(ValidationError)
    async def _validation(_req: Request, exc: ValidationError) -> Response:
        return PlainTextResponse(exc.detail, status_code=400)

    @app.exception_handler(StoreError)
    async def _store(req: Request, exc: StoreError) -> Response:
        logger.error(
            "Store operation failed",
            extra={"error": exc.detail, "path": req.url.path},
        )
        return PlainTextResponse(exc.detail, status_code=500)
