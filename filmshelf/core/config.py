from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="allow",
    )

    APP_NAME: str = "Filmshelf"
    APP_ENV: Literal["development", "production"] = "production"
    PORT: int = 3000
    LOG_LEVEL: str = "INFO"

    # Remote movie collection service
    BACKEND_URL: str = "http://localhost:8000"
    REQUEST_TIMEOUT_SECONDS: float = 10.0
    CONNECTION_CHECK_PATH: str = "/test"


settings = Settings()
