# This project was developed with assistance from AI tools.
"""
Application configuration.

All settings read from environment variables with sensible local dev defaults.
Group related settings together; each group becomes a section future PRs extend.
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve project root .env regardless of CWD
_PROJECT_ROOT = Path(__file__).resolve().parents[2]
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Application settings -- single source of truth for env-driven config."""

    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # -- App --
    APP_NAME: str = "loan-support"
    DEBUG: bool = False
    API_PREFIX: str = "/api/v1"

    # -- CORS --
    ALLOWED_HOSTS: list[str] = ["http://localhost:5173"]

    # -- Ingestion --
    DEFAULT_DOCUMENTS_PATH: str = Field(
        default="app/data/documents",
        description="Directory ingested when the request does not name one.",
    )

    # -- Chat --
    DEFAULT_TOP_K: int = Field(
        default=5,
        description="Number of passages requested when the client omits top_k.",
    )

    # -- Simulated latency (placeholder pipelines) --
    SIMULATE_LATENCY: bool = Field(
        default=True,
        description="Delay placeholder responses to mimic real processing. Set False for tests.",
    )
    INGEST_DELAY_MS: int = Field(default=1000, ge=0)
    RESPONSE_DELAY_MIN_MS: int = Field(default=500, ge=0)
    RESPONSE_DELAY_MAX_MS: int = Field(default=1500, ge=0)


settings = Settings()
