"""
Settings loading.
"""

import pytest
from pydantic import ValidationError

from sleeper_trade_finder.config import Settings


def test_engine_defaults():
    settings = Settings()
    assert settings.max_opportunities == 50
    assert settings.per_opponent_quota == 3
    assert settings.pick_years == 3
    assert settings.pick_rounds == 4


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("TRADE_FINDER_MAX_OPPORTUNITIES", "20")
    monkeypatch.setenv("TRADE_FINDER_LOG_LEVEL", "debug")

    settings = Settings()

    assert settings.max_opportunities == 20
    assert settings.log_level == "DEBUG"


def test_unknown_log_level_is_rejected():
    with pytest.raises(ValidationError):
        Settings(log_level="chatty")
