from __future__ import annotations

from typing import Literal

from pydantic import ConfigDict
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    PLUGIN_ID: str = "com.mattermost.read-receipts"
    IDENTITY_HEADER: str = "Mattermost-User-ID"

    STORE_BACKEND: Literal["memory", "redis", "sql"] = "memory"

    REDIS_URL: str = "redis://localhost:6379/0"
    KV_NAMESPACE: str = "read-receipts"

    DATABASE_URL: str = "postgresql+asyncpg://localhost:5432/mattermost"
    DB_POOL_SIZE: int = 5
    DB_MAX_OVERFLOW: int = 10
    DB_POOL_RECYCLE: int = 300

    HOST: str = "0.0.0.0"
    PORT: int = 8000
    LOG_LEVEL: str = "INFO"

    model_config = ConfigDict(
        env_file=".env",
        extra="ignore",
    )


settings = Settings()
