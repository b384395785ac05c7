from __future__ import annotations

from datetime import date

from subtrack.domain import SubscriptionStore, demo_subscriptions

FIXED_DAY = date(2025, 11, 7)


def fixed_today() -> date:
    return FIXED_DAY


def make_demo_store() -> SubscriptionStore:
    return SubscriptionStore(demo_subscriptions(FIXED_DAY))


__all__ = ["FIXED_DAY", "fixed_today", "make_demo_store"]
