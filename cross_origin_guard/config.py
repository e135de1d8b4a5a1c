from typing import List
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # App
    APP_NAME: str = "Cross-Origin Guard"
    APP_ENV: str = "dev"
    APP_PORT: int = 8000
    LOG_LEVEL: str = "INFO"

    # Origins whose requests are always accepted, e.g. ["https://app.example.com"]
    # (JSON list in .env). Also used as the CORS allow-list.
    TRUSTED_ORIGINS: List[str] = Field(default_factory=list)

    # Regex fragments for paths that skip the cross-origin check (webhooks etc.)
    INSECURE_BYPASS_PATTERNS: List[str] = Field(default_factory=list)

    TRUSTED_HOSTS: list[str] = ["127.0.0.1", "localhost"]

    # Meta
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

settings = Settings()
