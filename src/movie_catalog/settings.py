from pathlib import Path
from typing import Literal, List

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


ENV_FILE = Path(".env")


class Settings(BaseSettings):

    # ---- app/runtime ----
    env: Literal["dev", "staging", "prod"] = "dev"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        "INFO", validation_alias=AliasChoices("LOG_LEVEL", "APP_LOG_LEVEL")
    )

    # ---- API server configuration ----
    host: str = "0.0.0.0"
    port: int = Field(8080, validation_alias=AliasChoices("PORT", "APP_PORT"))
    cors_origins: List[str] = ["*"]  # Allowed CORS origins (restrict in prod)

    model_config = SettingsConfigDict(
        env_file = ENV_FILE,
        env_prefix="APP_",      # APP_ENV, APP_HOST, APP_CORS_ORIGINS; PORT and LOG_LEVEL also unprefixed
        extra = "ignore"
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, v):
        return v.upper() if isinstance(v, str) else v


def get_settings() -> Settings:
    """Read settings from the environment and the optional .env file."""
    return Settings()


def env_file_present() -> bool:
    return ENV_FILE.exists()
