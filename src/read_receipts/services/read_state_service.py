from __future__ import annotations

from read_receipts.application.exceptions import ValidationError
from read_receipts.application.ports.store import KeyValueStore
from read_receipts.domain.entities.read_marker import MARKER_VALUE, ReadMarker
from read_receipts.domain.value_objects.ids import PostId, UserId


def _marker(post_id: str, user_id: str) -> ReadMarker:
    if not post_id:
        raise ValidationError("post_id is required")
    if not user_id:
        raise ValidationError("user_id is required")
    return ReadMarker(post_id=PostId(post_id), user_id=UserId(user_id))


async def mark_read(post_id: str, user_id: str, store: KeyValueStore) -> None:
    """Record that ``user_id`` has read ``post_id``. Idempotent."""
    marker = _marker(post_id, user_id)
    await store.put(marker.storage_key, MARKER_VALUE)


async def is_read(post_id: str, user_id: str, store: KeyValueStore) -> bool:
    marker = _marker(post_id, user_id)
    return await store.get(marker.storage_key) is not None
