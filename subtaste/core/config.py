from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

from subtaste.core.version import __version__


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="allow",
    )

    APP_ENV: Literal["development", "production"] = "production"
    LOG_LEVEL: str = "INFO"

    # Built-in taxonomy used when the engine is constructed without one
    DEFAULT_TAXONOMY: str = "constellations"
    # Optional JSON taxonomy file; takes precedence over DEFAULT_TAXONOMY
    TAXONOMY_PATH: str | None = None

    # Thread pool size for batch evaluation
    BATCH_MAX_WORKERS: int = 4


settings = Settings()

APP_VERSION = __version__
