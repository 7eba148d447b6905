from __future__ import annotations

from sqlalchemy import LargeBinary, String
from sqlalchemy.orm import Mapped, mapped_column

from read_receipts.infrastructure.db.base import Base


class PluginKeyValueModel(Base):
    """Mirrors the host platform's per-plugin key/value table."""

    __tablename__ = "plugin_key_values"

    plugin_id: Mapped[str] = mapped_column(String(190), primary_key=True)
    pkey: Mapped[str] = mapped_column(String(150), primary_key=True)
    pvalue: Mapped[bytes | None] = mapped_column(LargeBinary, nullable=True)
