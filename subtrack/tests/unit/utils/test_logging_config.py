from __future__ import annotations

import logging

from subtrack.utils.logging import apply_gui_preferences, configure_root, env_level, env_requests_debug


def test_env_level_overrides_settings_toggle(monkeypatch) -> None:
    monkeypatch.setenv("SUBTRACK_LOG_LEVEL", "warning")
    monkeypatch.delenv("SUBTRACK_DEBUG", raising=False)
    assert apply_gui_preferences(True) == logging.WARNING
    assert env_requests_debug() is False


def test_numeric_and_unknown_levels(monkeypatch) -> None:
    monkeypatch.setenv("SUBTRACK_LOG_LEVEL", "10")
    assert env_level() == logging.DEBUG
    monkeypatch.setenv("SUBTRACK_LOG_LEVEL", "bogus")
    assert env_level() == logging.INFO


def test_debug_flag(monkeypatch) -> None:
    monkeypatch.delenv("SUBTRACK_LOG_LEVEL", raising=False)
    monkeypatch.setenv("SUBTRACK_DEBUG", "on")
    assert env_requests_debug() is True
    assert configure_root(False) == logging.DEBUG


def test_settings_toggle_without_env(monkeypatch) -> None:
    monkeypatch.delenv("SUBTRACK_LOG_LEVEL", raising=False)
    monkeypatch.delenv("SUBTRACK_DEBUG", raising=False)
    assert env_level() is None
    assert apply_gui_preferences(False) == logging.INFO
    assert configure_root(True) == logging.DEBUG
    assert logging.getLogger().level == logging.DEBUG
