from __future__ import annotations

from datetime import date

import pytest

from subtrack.domain import CATEGORIES, FREQUENCIES, SERVICES, InvalidDraft
from subtrack.tests.unit.viewmodels.helpers import FIXED_DAY, fixed_today, make_demo_store
from subtrack.viewmodels.create_subscription_vm import CreateSubscriptionVM
from subtrack.viewmodels.subscription_form import parse_amount


def _vm():
    store = make_demo_store()
    return store, CreateSubscriptionVM(store, today=fixed_today)


def test_defaults() -> None:
    _, vm = _vm()
    assert vm.service is None
    assert vm.category == CATEGORIES[0]
    assert vm.frequency == FREQUENCIES[0]
    assert vm.amount == 0
    assert vm.start_date == FIXED_DAY
    assert vm.is_active is False
    assert vm.formatted_amount == "$0"
    assert vm.formatted_date == "Nov 7, 2025"
    assert vm.service_label == "Choose a service"


def test_can_commit_requires_only_a_service() -> None:
    _, vm = _vm()
    vm.set_category(CATEGORIES[3])
    vm.set_frequency(FREQUENCIES[2])
    vm.set_amount_from_text("42")
    vm.set_active(True)
    assert vm.can_commit() is False

    vm.set_service(SERVICES[4])
    assert vm.can_commit() is True


def test_commit_appends_new_subscription() -> None:
    store, vm = _vm()
    prior_ids = {s.id for s in store.all()}

    vm.set_service(SERVICES[0])
    vm.set_amount_from_text("9.99")
    created = vm.commit()

    assert len(store) == 5
    last = store.all()[-1]
    assert last is created
    assert last.service.name == "Netflix"
    assert last.amount == 9.99
    assert last.id not in prior_ids


def test_commit_without_service_raises_and_leaves_store() -> None:
    store, vm = _vm()
    before = store.all()
    with pytest.raises(InvalidDraft) as excinfo:
        vm.commit()
    assert excinfo.value.code == "INVALID_DRAFT"
    assert store.all() == before


def test_draft_is_kept_after_commit_and_second_commit_gets_new_id() -> None:
    store, vm = _vm()
    vm.set_service(SERVICES[1])
    first = vm.commit()
    assert vm.service == SERVICES[1]
    second = vm.commit()
    assert first.id != second.id
    assert len(store) == 6


@pytest.mark.parametrize("text", ["abc", "", "  ", "-5", "nan", "inf", "1_000", "1,5"])
def test_unparsable_amount_text_is_ignored(text: str) -> None:
    _, vm = _vm()
    vm.set_amount_from_text(text)
    assert vm.amount == 0

    vm.set_amount_from_text("12")
    vm.set_amount_from_text(text)
    assert vm.amount == 12.0


def test_amount_text_is_cleared_after_update() -> None:
    _, vm = _vm()
    vm.amount_text = "7"
    vm.set_amount_from_text("7")
    assert vm.amount_text == ""
    assert vm.formatted_amount == "$7.00"


def test_reset_restores_defaults() -> None:
    _, vm = _vm()
    vm.set_service(SERVICES[2])
    vm.set_category(CATEGORIES[1])
    vm.set_frequency(FREQUENCIES[1])
    vm.set_start_date(date(2026, 1, 1))
    vm.set_amount_from_text("3")
    vm.set_active(True)

    vm.reset()

    assert vm.service is None
    assert vm.category == CATEGORIES[0]
    assert vm.frequency == FREQUENCIES[0]
    assert vm.start_date == FIXED_DAY
    assert vm.amount == 0
    assert vm.is_active is False


def test_parse_amount() -> None:
    assert parse_amount(" 3.50 ") == 3.5
    assert parse_amount("0") == 0.0
    assert parse_amount("1e2") == 100.0
    assert parse_amount("abc") is None
