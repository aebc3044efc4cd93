from __future__ import annotations

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    database_url: str
    log_level: str = "INFO"
    environment: str = "dev"
    # Identity is resolved upstream (API gateway); these headers carry the result.
    caller_id_header: str = "X-Caller-Id"
    caller_role_header: str = "X-Caller-Role"
    # CORS
    cors_allow_origins: str = "*"
    # Notifications
    notification_provider: str = "logging"  # logging | webhook
    notification_webhook_url: str | None = None
    notification_timeout_seconds: float = 10.0

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    @field_validator("database_url")
    @classmethod
    def ensure_asyncpg_scheme(cls, value: str) -> str:
        if value.startswith("postgres://"):
            return value.replace("postgres://", "postgresql+asyncpg://", 1)
        if value.startswith("postgresql://") and "+" not in value.split("://", 1)[0]:
            return value.replace("postgresql://", "postgresql+asyncpg://", 1)
        return value

    @field_validator("notification_provider")
    @classmethod
    def check_provider(cls, value: str) -> str:
        value = value.lower()
        if value not in {"logging", "webhook"}:
            raise ValueError("notification_provider must be 'logging' or 'webhook'")
        return value

    @property
    def cors_allow_origins_list(self) -> list[str]:
        """Convert cors_allow_origins string to list"""
        return [v.strip() for v in self.cors_allow_origins.split(",") if v.strip()]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
