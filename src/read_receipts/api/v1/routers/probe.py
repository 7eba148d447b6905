from __future__ import annotations

from fastapi import APIRouter

from read_receipts.api.responses import GuardedPlainTextResponse

GREETING = b"Hello, world!"

router = APIRouter(prefix="/api/v1", tags=["probe"])


@router.get("/hello", response_class=GuardedPlainTextResponse)
async def hello() -> GuardedPlainTextResponse:
    return GuardedPlainTextResponse(GREETING)
