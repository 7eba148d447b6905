from __future__ import annotations

from dataclasses import dataclass

from read_receipts.domain.value_objects.ids import PostId, UserId

KEY_PREFIX = "read"
MARKER_VALUE = b"1"


@dataclass(frozen=True, slots=True)
class ReadMarker:
    """The fact that a user has read a post. Exists or doesn't; never mutated."""

    post_id: PostId
    user_id: UserId

    @property
    def storage_key(self) -> str:
        """Stable, collision-free key for the (post, user) pair.

        Identifiers are opaque and may contain any separator, so the post id
        is length-prefixed to keep the encoding injective.
        """
        return f"{KEY_PREFIX}:{len(self.post_id)}:{self.post_id}:{self.user_id}"
