# This project was developed with assistance from AI tools.
"""Local settings store for the API client.

Persists the API base URL and bearer token as JSON in the user's config
directory. Callers load a ``ClientSettings`` once and pass it explicitly to
``LoanSupportClient``; nothing here is consulted implicitly at request time.
"""

import json
import logging
import os
from pathlib import Path

from pydantic import BaseModel, ValidationError

logger = logging.getLogger(__name__)

DEFAULT_API_BASE = "http://localhost:5000"
SETTINGS_FILE_ENV = "LOAN_SUPPORT_SETTINGS_FILE"


class ClientSettings(BaseModel):
    """Connection settings for the loan support API."""

    api_base: str = DEFAULT_API_BASE
    bearer_token: str = ""


def settings_path() -> Path:
    """Return the settings file location, honoring ``LOAN_SUPPORT_SETTINGS_FILE``."""
    override = os.environ.get(SETTINGS_FILE_ENV)
    if override:
        return Path(override).expanduser()
    config_home = os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config"
    return Path(config_home) / "loan-support" / "settings.json"


def get_settings(path: Path | None = None) -> ClientSettings:
    """Load stored settings, falling back to defaults for anything unset.

    An empty stored ``api_base`` also falls back to the default.
    """
    path = path or settings_path()
    if not path.exists():
        return ClientSettings()

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        stored = ClientSettings.model_validate(data)
    except (json.JSONDecodeError, UnicodeDecodeError, OSError, ValidationError):
        logger.warning("Ignoring unreadable settings file %s", path, exc_info=True)
        return ClientSettings()

    if not stored.api_base:
        stored.api_base = DEFAULT_API_BASE
    return stored


def save_settings(
    *,
    api_base: str | None = None,
    bearer_token: str | None = None,
    path: Path | None = None,
) -> ClientSettings:
    """Persist the given fields. Fields passed as None keep their stored value."""
    path = path or settings_path()
    current = get_settings(path)
    updates = {}
    if api_base is not None:
        updates["api_base"] = api_base
    if bearer_token is not None:
        updates["bearer_token"] = bearer_token
    merged = current.model_copy(update=updates)

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(merged.model_dump(), indent=2), encoding="utf-8")
    logger.debug("Saved settings to %s", path)
    return merged


def clear_settings(path: Path | None = None) -> None:
    """Remove stored settings so defaults apply again."""
    path = path or settings_path()
    path.unlink(missing_ok=True)
