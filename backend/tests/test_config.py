"""
Tests for settings loading and validation.
"""

import pytest
from pydantic import ValidationError

from seatlock.core.config import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("TOTAL_SEATS", raising=False)
    monkeypatch.delenv("LOCK_TIMEOUT_MS", raising=False)
    settings = Settings(_env_file=None)
    assert settings.TOTAL_SEATS == 20
    assert settings.LOCK_TIMEOUT_MS == 60_000


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("TOTAL_SEATS", "50")
    monkeypatch.setenv("LOCK_TIMEOUT_MS", "30000")
    settings = Settings(_env_file=None)
    assert settings.TOTAL_SEATS == 50
    assert settings.LOCK_TIMEOUT_MS == 30_000


@pytest.mark.parametrize("name,value", [
    ("TOTAL_SEATS", "0"),
    ("TOTAL_SEATS", "-4"),
    ("TOTAL_SEATS", "many"),
    ("LOCK_TIMEOUT_MS", "0"),
])
def test_invalid_values_fail_fast(monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(ValidationError):
        Settings(_env_file=None)
