"""Application settings, read from the environment."""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

PROJECT_ROOT = Path(__file__).resolve().parents[2]
ENV_FILES = [PROJECT_ROOT / ".env", ".env"]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=ENV_FILES, extra="ignore")

    # Storage
    DATABASE_PATH: Path = PROJECT_ROOT / "data" / "exercise_tracker.db"
    DATABASE_POOL_SIZE: int = 4
    DATABASE_TIMEOUT: float = 5.0  # seconds to wait on a locked database

    # HTTP
    HOST: str = "127.0.0.1"
    PORT: int = 3000
    CORS_ORIGINS: list[str] = ["*"]

    LOG_LEVEL: str = "INFO"


def get_settings() -> Settings:
    """Build settings from the current environment."""
    return Settings()
