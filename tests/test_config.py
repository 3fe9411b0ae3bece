# This project was developed with assistance from AI tools.
"""Tests for configuration management."""

import pytest
from pydantic import ValidationError

from loan_support.core.config import Settings


def test_default_values():
    settings = Settings(_env_file=None)
    assert settings.APP_NAME == "loan-support"
    assert settings.API_PREFIX == "/api/v1"
    assert settings.DEFAULT_DOCUMENTS_PATH == "app/data/documents"
    assert settings.DEFAULT_TOP_K == 5
    assert settings.SIMULATE_LATENCY is True
    assert settings.INGEST_DELAY_MS == 1000
    assert (settings.RESPONSE_DELAY_MIN_MS, settings.RESPONSE_DELAY_MAX_MS) == (500, 1500)


def test_from_env(monkeypatch):
    monkeypatch.setenv("SIMULATE_LATENCY", "false")
    monkeypatch.setenv("INGEST_DELAY_MS", "10")
    monkeypatch.setenv("ALLOWED_HOSTS", '["http://ui.example"]')
    settings = Settings(_env_file=None)
    assert settings.SIMULATE_LATENCY is False
    assert settings.INGEST_DELAY_MS == 10
    assert settings.ALLOWED_HOSTS == ["http://ui.example"]


def test_negative_delay_rejected(monkeypatch):
    monkeypatch.setenv("INGEST_DELAY_MS", "-1")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)
