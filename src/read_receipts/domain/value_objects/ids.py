from __future__ import annotations

from typing import NewType

PostId = NewType("PostId", str)
UserId = NewType("UserId", str)
