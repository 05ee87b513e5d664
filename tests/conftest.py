"""Shared pytest fixtures."""

import pytest

from license_scanner.common.config import Settings, reset_settings

_SETTINGS_ENV_VARS = (
    "SCAN_SESSIONS_TABLE",
    "STRUCTURED_CONFIDENCE",
    "BEST_EFFORT_CONFIDENCE",
    "ENABLE_BEST_EFFORT",
    "ENABLE_AUDIT_TRAIL",
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Run every test against default settings."""
    for name in _SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def settings():
    return Settings(
        table_name="test-scan-sessions",
        structured_confidence=0.95,
        best_effort_confidence=0.60,
        enable_best_effort=True,
        enable_audit_trail=False,
    )
