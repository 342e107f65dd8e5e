# app/core/config.py
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    APP_NAME: str = "TicketFlow"
    APP_DESC: str = "Session-backed ticket tracking with FastAPI"
    APP_VERSION: str = "1.0.0"
    LOG_LEVEL: str = "INFO"

    # CORS origins, comma separated
    CORS_ORIGINS: str = "*"

    # Sessions live in process memory, keyed by this cookie
    SESSION_COOKIE_NAME: str = "ticketflow_session"
    SESSION_COOKIE_SECURE: bool = False
    SESSION_TTL_SECONDS: int = Field(default=86400, gt=0)
    SESSION_MAX_COUNT: int = Field(default=10000, gt=0)

    PASSWORD_MIN_LENGTH: int = Field(default=6, ge=1)
    BCRYPT_ROUNDS: int = Field(default=12, ge=4, le=31)

    # Pydantic v2 style config
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()


__all__ = ["Settings", "get_settings"]
