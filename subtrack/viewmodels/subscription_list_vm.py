"""List projection of ``SubscriptionStore`` for the home screen.

Call context:
    ``WebRuntime`` builds one instance per application context and re-renders
    the list whenever ``on_changed`` fires.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional

from ..domain import Subscription, SubscriptionId, SubscriptionStore
from ..domain.subscription_store import Snapshot
from .display_format import format_date, format_row_amount

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class SubscriptionRow:
    """Display row model consumed by the list widget."""

    subscription_id: SubscriptionId
    service: str
    icon: str
    category: str
    frequency: str
    start_date: str
    amount: str
    is_active: bool


class SubscriptionListVM:
    """Exposes store entries as rows and routes swipe deletes back to the store."""

    empty_message = "No Subscription found"

    def __init__(
        self,
        store: SubscriptionStore,
        *,
        currency_symbol: str = "$",
        on_changed: Optional[Callable[[List[SubscriptionRow]], None]] = None,
    ) -> None:
        self._store = store
        self.currency_symbol = currency_symbol
        self.on_changed = on_changed
        self._unsubscribe = store.subscribe(self._on_store_changed)

    def rows(self) -> List[SubscriptionRow]:
        return [self._to_row(item) for item in self._store.all()]

    @property
    def is_empty(self) -> bool:
        return len(self._store) == 0

    def index_for(self, subscription_id: SubscriptionId) -> Optional[int]:
        """Resolve a row id to its current store position."""
        return self._store.index_of(subscription_id)

    def delete(self, subscription_id: SubscriptionId) -> bool:
        """Remove the row with ``subscription_id``; False when it is already gone."""
        index = self._store.index_of(subscription_id)
        if index is None:
            LOGGER.debug("Delete skipped, %s no longer listed", subscription_id)
            return False
        self._store.remove_at(index)
        return True

    def close(self) -> None:
        self._unsubscribe()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _on_store_changed(self, snapshot: Snapshot) -> None:
        if self.on_changed:
            self.on_changed([self._to_row(item) for item in snapshot])

    def _to_row(self, item: Subscription) -> SubscriptionRow:
        return SubscriptionRow(
            subscription_id=item.id,
            service=item.service.name,
            icon=item.service.icon,
            category=item.category.name,
            frequency=item.frequency.name,
            start_date=format_date(item.start_date),
            amount=format_row_amount(item.amount, self.currency_symbol),
            is_active=item.is_active,
        )


__all__ = ["SubscriptionListVM", "SubscriptionRow"]
