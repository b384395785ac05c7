from __future__ import annotations

from datetime import date

import pytest

from subtrack.viewmodels.display_format import (
    amount_input_text,
    format_amount,
    format_date,
    format_row_amount,
)
from subtrack.viewmodels.settings_vm import SettingsVM


def test_format_amount() -> None:
    assert format_amount(0) == "$0"
    assert format_amount(9.99) == "$9.99"
    assert format_amount(100) == "$100.00"
    assert format_row_amount(0) == "$0.00"
    assert format_amount(5, "€") == "€5.00"


def test_format_date() -> None:
    assert format_date(date(2025, 11, 7)) == "Nov 7, 2025"
    assert format_date(date(2026, 1, 21)) == "Jan 21, 2026"


def test_amount_input_text() -> None:
    assert amount_input_text(100) == "100.0"
    assert amount_input_text(9.99) == "9.99"


def test_settings_apply_and_roundtrip(monkeypatch) -> None:
    monkeypatch.delenv("SUBTRACK_LOG_LEVEL", raising=False)
    monkeypatch.delenv("SUBTRACK_DEBUG", raising=False)
    assert SettingsVM().to_dict() == {
        "currency_symbol": "$",
        "seed_demo_data": True,
        "debug_logging": False,
    }

    vm = SettingsVM()
    vm.apply_dict({"currency_symbol": " € ", "seed_demo_data": "no", "debug_logging": "yes"})

    assert vm.currency_symbol == "€"
    assert vm.seed_demo_data is False
    assert vm.debug_logging is True
    assert vm.to_dict() == {"currency_symbol": "€", "seed_demo_data": False, "debug_logging": True}


def test_settings_rejects_unknown_keys_and_bad_types() -> None:
    vm = SettingsVM()
    with pytest.raises(ValueError):
        vm.apply_dict({"theme": "dark"})
    with pytest.raises(ValueError):
        vm.apply_dict({"currency_symbol": 5})
    with pytest.raises(ValueError):
        vm.apply_dict(["currency_symbol"])  # type: ignore[arg-type]


def test_debug_logging_defaults_from_env(monkeypatch) -> None:
    monkeypatch.setenv("SUBTRACK_DEBUG", "1")
    assert SettingsVM().debug_logging is True
