from __future__ import annotations

"""Domain value objects shared by the store, the workflows, and the views."""

import math
from dataclasses import dataclass, field
from datetime import date
from uuid import UUID, uuid4

SubscriptionId = UUID


@dataclass(frozen=True)
class Service:
    """Billable service a subscription is paid to."""

    id: int
    """Stable catalog identifier used for equality in pickers."""

    name: str
    icon: str

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValueError("Service name must be a non-empty string.")


@dataclass(frozen=True)
class Category:
    """Bookkeeping category of a payment."""

    id: int
    name: str
    icon: str

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValueError("Category name must be a non-empty string.")


@dataclass(frozen=True)
class Frequency:
    """Billing cadence."""

    id: int
    name: str

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValueError("Frequency name must be a non-empty string.")


@dataclass(frozen=True)
class Subscription:
    """Recurring payment tracked by the store.

    Catalog values are embedded by value; a later change to a catalog list
    never reaches subscriptions that were already written. Instances are
    frozen, so an edit always produces a new object that replaces the old
    one at its index.
    """

    service: Service
    category: Category
    frequency: Frequency
    amount: float
    start_date: date
    is_active: bool = False
    id: SubscriptionId = field(default_factory=uuid4)
    """Assigned once at creation and carried through every edit."""

    def __post_init__(self) -> None:
        if isinstance(self.amount, bool) or not isinstance(self.amount, (int, float)):
            raise TypeError("Subscription amount must be numeric.")
        amount = float(self.amount)
        if not math.isfinite(amount) or amount < 0.0:
            raise ValueError("Subscription amount must be a finite, non-negative number.")
        object.__setattr__(self, "amount", amount)
        if not isinstance(self.start_date, date):
            raise TypeError("Subscription start_date requires a date instance.")


__all__ = ["Category", "Frequency", "Service", "Subscription", "SubscriptionId"]
