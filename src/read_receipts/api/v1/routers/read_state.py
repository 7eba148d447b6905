from __future__ import annotations

from fastapi import APIRouter, Query, Response

from read_receipts.api.deps import CurrentPrincipal, StoreDep
from read_receipts.api.v1.schemas.read_state import IsReadResponse
from read_receipts.services import read_state_service

router = APIRouter(tags=["read-state"])


@router.post("/read", response_class=Response)
async def mark_read(
    principal: CurrentPrincipal,
    store: StoreDep,
    post_id: str = Query(""),
) -> Response:
    await read_state_service.mark_read(post_id, principal.user_id, store)
    return Response(status_code=200)


@router.get("/isread", response_model=IsReadResponse)
async def is_read(
    principal: CurrentPrincipal,
    store: StoreDep,
    post_id: str = Query(""),
) -> IsReadResponse:
    read = await read_state_service.is_read(post_id, principal.user_id, store)
    return IsReadResponse(read=read)
