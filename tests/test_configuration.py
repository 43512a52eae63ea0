"""Mini README: Tests for the settings model."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from marina.configuration import MarinaSettings


def test_defaults_match_stock_behaviour() -> None:
    """Defaults should give 120 boats and WARNING logging."""

    settings = MarinaSettings()

    assert settings.max_boats == 120
    assert settings.log_level == "WARNING"


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    """MARINA_ variables should override the defaults."""

    monkeypatch.setenv("MARINA_MAX_BOATS", "5")
    monkeypatch.setenv("MARINA_LOG_LEVEL", "debug")

    settings = MarinaSettings()

    assert settings.max_boats == 5
    assert settings.log_level == "DEBUG"


def test_invalid_values_are_rejected() -> None:
    """A zero capacity or unknown log level should fail validation."""

    with pytest.raises(ValidationError):
        MarinaSettings(max_boats=0)
    with pytest.raises(ValidationError):
        MarinaSettings(log_level="chatty")
