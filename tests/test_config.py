"""Tests for environment-driven settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from quorumkit.config import Settings, get_settings


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    """Defaults apply when nothing is configured."""
    for name in ("QUORUMKIT_QUORUM_SIZE", "QUORUMKIT_QUORUM_RATIO", "QUORUMKIT_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    settings = get_settings()
    assert settings.quorum_size == 2
    assert settings.quorum_ratio == pytest.approx(2 / 3)
    assert settings.log_level == "WARNING"


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    """Prefixed environment variables override the defaults."""
    monkeypatch.setenv("QUORUMKIT_QUORUM_SIZE", "5")
    monkeypatch.setenv("QUORUMKIT_QUORUM_RATIO", "0.5")
    monkeypatch.setenv("quorumkit_log_level", "debug")
    settings = get_settings()
    assert settings.quorum_size == 5
    assert settings.quorum_ratio == 0.5
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize(
    "kwargs",
    [
        {"quorum_size": 0},
        {"quorum_size": -2},
        {"quorum_ratio": 0.0},
        {"quorum_ratio": 1.2},
        {"log_level": "LOUD"},
    ],
)
def test_invalid_values_are_rejected(kwargs: dict) -> None:
    """Validators reject unusable configuration."""
    with pytest.raises(ValidationError):
        Settings(**kwargs)
