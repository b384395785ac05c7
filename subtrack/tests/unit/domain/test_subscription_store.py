from __future__ import annotations

from datetime import date
from typing import List

import pytest

from subtrack.domain import (
    CATEGORIES,
    FREQUENCIES,
    SERVICES,
    DuplicateSubscriptionId,
    IndexOutOfRange,
    Subscription,
    SubscriptionStore,
    demo_subscriptions,
)
from subtrack.domain.subscription_store import Snapshot

DAY = date(2025, 11, 7)


def _make(amount: float = 5.0, service_idx: int = 0) -> Subscription:
    return Subscription(
        service=SERVICES[service_idx],
        category=CATEGORIES[0],
        frequency=FREQUENCIES[0],
        amount=amount,
        start_date=DAY,
    )


def _store() -> SubscriptionStore:
    return SubscriptionStore(demo_subscriptions(DAY))


def test_append_adds_to_end_and_notifies() -> None:
    store = _store()
    seen: List[Snapshot] = []
    store.subscribe(seen.append)
    new = _make(12.5)

    store.append(new)

    assert len(store) == 5
    assert store.all()[-1] == new
    assert len(seen) == 1
    assert seen[0][-1] is new


def test_replace_then_read_returns_written_value() -> None:
    store = _store()
    for index in range(len(store)):
        replacement = _make(float(index), service_idx=index)
        store.replace(index, replacement)
        assert store.all()[index] == replacement


def test_replace_out_of_range_raises_and_keeps_store() -> None:
    store = _store()
    before = store.all()
    calls: List[Snapshot] = []
    store.subscribe(calls.append)

    with pytest.raises(IndexOutOfRange) as excinfo:
        store.replace(4, _make())

    assert excinfo.value.code == "INDEX_OUT_OF_RANGE"
    assert store.all() == before
    assert calls == []


def test_negative_index_is_out_of_range() -> None:
    store = _store()
    with pytest.raises(IndexOutOfRange):
        store.remove_at(-1)
    with pytest.raises(IndexError):
        store.replace(-1, _make())


def test_remove_at_shrinks_by_one_and_keeps_order() -> None:
    store = _store()
    before = store.all()

    removed = store.remove_at(1)

    after = store.all()
    assert removed == before[1]
    assert len(after) == len(before) - 1
    assert after == before[:1] + before[2:]


def test_remove_at_out_of_range_raises() -> None:
    store = SubscriptionStore()
    with pytest.raises(IndexOutOfRange):
        store.remove_at(0)


def test_all_returns_snapshot_not_live_list() -> None:
    store = _store()
    snapshot = store.all()
    store.remove_at(0)
    assert len(snapshot) == 4
    assert isinstance(snapshot, tuple)


def test_unsubscribe_stops_notifications_and_is_idempotent() -> None:
    store = _store()
    calls: List[Snapshot] = []
    unsubscribe = store.subscribe(calls.append)

    store.remove_at(0)
    unsubscribe()
    unsubscribe()
    store.remove_at(0)

    assert len(calls) == 1


def test_observers_run_in_registration_order_after_mutation() -> None:
    store = _store()
    order: List[str] = []

    def first(snapshot: Snapshot) -> None:
        order.append(f"first:{len(snapshot)}:{len(store)}")

    def second(snapshot: Snapshot) -> None:
        order.append(f"second:{len(snapshot)}")

    store.subscribe(first)
    store.subscribe(second)
    store.append(_make())

    assert order == ["first:5:5", "second:5"]


def test_duplicate_ids_are_rejected() -> None:
    store = _store()
    existing = store.all()[0]

    with pytest.raises(DuplicateSubscriptionId):
        store.append(existing)
    with pytest.raises(DuplicateSubscriptionId):
        store.replace(1, existing)

    # Replacing a subscription in its own slot keeps the id.
    store.replace(0, existing)
    assert len(store) == 4


def test_index_of_tracks_shifts() -> None:
    store = _store()
    third = store.all()[2]
    assert store.index_of(third.id) == 2
    store.remove_at(0)
    assert store.index_of(third.id) == 1
    store.remove_at(1)
    assert store.index_of(third.id) is None


class _Tagged:
    """Callable observers that all compare equal to each other."""

    def __init__(self, tag: str, seen: List[str]) -> None:
        self.tag = tag
        self.seen = seen

    def __call__(self, snapshot: Snapshot) -> None:
        self.seen.append(self.tag)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, _Tagged)

    __hash__ = object.__hash__


def test_unsubscribe_removes_its_own_registration_among_equal_observers() -> None:
    store = _store()
    seen: List[str] = []
    store.subscribe(_Tagged("first", seen))
    unsubscribe_second = store.subscribe(_Tagged("second", seen))

    unsubscribe_second()
    store.remove_at(0)
    assert seen == ["first"]

    unsubscribe_second()
    store.remove_at(0)
    assert seen == ["first", "first"]
