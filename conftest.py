"""Root conftest: pins test settings before read_receipts.config is imported."""
from __future__ import annotations

import os
from pathlib import Path

os.environ.setdefault("STORE_BACKEND", "memory")
os.environ.setdefault("IDENTITY_HEADER", "Mattermost-User-ID")

_env_test = Path(__file__).resolve().parent / ".env.test"
if _env_test.exists():
    for line in _env_test.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        key, _, value = line.partition("=")
        os.environ.setdefault(key.strip(), value.strip())
