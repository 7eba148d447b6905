"""Import all models so metadata.create_all can discover them via Base.metadata."""
from read_receipts.infrastructure.db.models.plugin_key_value import PluginKeyValueModel

__all__ = [
    "PluginKeyValueModel",
]
