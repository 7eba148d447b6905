from __future__ import annotations

from typing import Mapping

from read_receipts.application.dto.principal import Principal
from read_receipts.domain.value_objects.ids import UserId


class HeaderIdentityResolver:
    """Read the caller's user id from the header the host injects."""

    def __init__(self, header: str) -> None:
        self._header = header

    def resolve(self, headers: Mapping[str, str]) -> Principal | None:
        user_id = headers.get(self._header) or ""
        if not user_id.strip():
            return None
        return Principal(user_id=UserId(user_id))
