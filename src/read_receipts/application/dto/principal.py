from __future__ import annotations

from dataclasses import dataclass

from read_receipts.domain.value_objects.ids import UserId


@dataclass(frozen=True, slots=True)
class Principal:
    """Caller identity injected by the host platform."""

    user_id: UserId
