from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Process-wide configuration, read once at startup and never reloaded."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Database
    database_url: str

    # Security
    secret_key: str
    jwt_algorithm: str = "HS256"
    jwt_access_token_expire_days: int = 7

    # App
    environment: str = "development"
    debug: bool = False
    app_name: str = "myFlix"
    app_version: str = "0.1.0"
    log_level: str = "INFO"

    # CORS — use JSON array in .env: CORS_ORIGINS=["http://localhost:1234"]
    cors_origins: list[str] = ["*"]

    @field_validator("secret_key")
    @classmethod
    def secret_key_strong(cls, v: str) -> str:
        if len(v) < 16:
            raise ValueError("SECRET_KEY must be at least 16 characters")
        return v

    @property
    def is_development(self) -> bool:
        return self.environment == "development"


@lru_cache
def get_settings() -> Settings:
    return Settings()
