from __future__ import annotations

from pydantic import BaseModel


class IsReadResponse(BaseModel):
    read: bool
