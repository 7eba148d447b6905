"""FastAPI dependency injection helpers."""
from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from read_receipts.application.dto.principal import Principal
from read_receipts.application.ports.store import KeyValueStore


def get_store(request: Request) -> KeyValueStore:
    return request.app.state.store


StoreDep = Annotated[KeyValueStore, Depends(get_store)]


def get_current_principal(request: Request) -> Principal:
    """Set by IdentityGateMiddleware before any route runs."""
    return request.state.principal


CurrentPrincipal = Annotated[Principal, Depends(get_current_principal)]
