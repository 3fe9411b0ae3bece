# This project was developed with assistance from AI tools.
"""Shared fixtures.

The app from ``loan_support.main`` is a module singleton; tests that change
``settings`` use ``monkeypatch`` so values are restored afterwards.
"""

import pytest
from fastapi.testclient import TestClient

from loan_support.core.config import settings
from loan_support.main import app


@pytest.fixture(autouse=True)
def _no_latency(monkeypatch):
    """Placeholder pipelines respond immediately under test."""
    monkeypatch.setattr(settings, "SIMULATE_LATENCY", False)


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def settings_file(tmp_path, monkeypatch):
    """Point the client settings store at a temp file."""
    path = tmp_path / "settings.json"
    monkeypatch.setenv("LOAN_SUPPORT_SETTINGS_FILE", str(path))
    return path
