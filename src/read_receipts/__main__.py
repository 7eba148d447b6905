"""Entrypoint: python -m read_receipts"""
from __future__ import annotations

import uvicorn

from read_receipts.config import settings
from read_receipts.logging_config import configure_logging


def main() -> None:
    configure_logging(settings.LOG_LEVEL)
    uvicorn.run(
        "read_receipts.app:create_app",
        factory=True,
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
