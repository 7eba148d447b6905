from __future__ import annotations

from typing import Mapping, Protocol

from read_receipts.application.dto.principal import Principal


class IdentityResolver(Protocol):
    def resolve(self, headers: Mapping[str, str]) -> Principal | None: ...
