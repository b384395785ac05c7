"""Domain package exports for catalog values, subscriptions, and the store."""

from .catalog import (
    CATEGORIES,
    FREQUENCIES,
    SERVICES,
    demo_subscriptions,
    filter_by_name,
)
from .entities import Category, Frequency, Service, Subscription, SubscriptionId
from .errors import (
    DuplicateSubscriptionId,
    IndexOutOfRange,
    InvalidDraft,
    SubscriptionError,
)
from .subscription_store import SubscriptionStore

__all__ = [
    "CATEGORIES",
    "Category",
    "DuplicateSubscriptionId",
    "FREQUENCIES",
    "Frequency",
    "IndexOutOfRange",
    "InvalidDraft",
    "SERVICES",
    "Service",
    "Subscription",
    "SubscriptionError",
    "SubscriptionId",
    "SubscriptionStore",
    "demo_subscriptions",
    "filter_by_name",
]
