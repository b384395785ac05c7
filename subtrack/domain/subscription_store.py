from __future__ import annotations

import logging
import threading
from typing import Callable, Iterable, List, Optional, Tuple

from .entities import Subscription, SubscriptionId
from .errors import DuplicateSubscriptionId, IndexOutOfRange

Snapshot = Tuple[Subscription, ...]
StoreObserver = Callable[[Snapshot], None]
Unsubscribe = Callable[[], None]


class SubscriptionStore:
    """
    Ordered, observable collection of active subscriptions.

    The store is the only writer of the underlying list. ``append``,
    ``replace`` and ``remove_at`` each complete the mutation, then call every
    registered observer synchronously with a fresh snapshot. Observers never
    see a partially written sequence.

    One instance is created by the application context and handed to the
    workflows and list views that need it.
    """

    def __init__(self, subscriptions: Optional[Iterable[Subscription]] = None) -> None:
        self._log = logging.getLogger(__name__)
        self._lock = threading.RLock()
        self._items: List[Subscription] = []
        self._observers: List[StoreObserver] = []
        for subscription in subscriptions or ():
            self._check_unique(subscription, skip_index=None)
            self._items.append(subscription)

    # ------------------------------------------------------------------ #
    # Reads
    # ------------------------------------------------------------------ #
    def all(self) -> Snapshot:
        """Return the current ordered sequence as an immutable snapshot."""
        with self._lock:
            return tuple(self._items)

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def is_valid_index(self, index: int) -> bool:
        with self._lock:
            return 0 <= index < len(self._items)

    def get(self, index: int) -> Subscription:
        with self._lock:
            self._require_index(index)
            return self._items[index]

    def index_of(self, subscription_id: SubscriptionId) -> Optional[int]:
        """Return the current position of ``subscription_id`` or None."""
        with self._lock:
            for position, item in enumerate(self._items):
                if item.id == subscription_id:
                    return position
        return None

    # ------------------------------------------------------------------ #
    # Mutators
    # ------------------------------------------------------------------ #
    def append(self, subscription: Subscription) -> None:
        with self._lock:
            self._check_unique(subscription, skip_index=None)
            self._items.append(subscription)
            snapshot = tuple(self._items)
        self._log.debug("Appended subscription %s (%s)", subscription.id, subscription.service.name)
        self._notify(snapshot)

    def replace(self, index: int, subscription: Subscription) -> None:
        with self._lock:
            self._require_index(index)
            self._check_unique(subscription, skip_index=index)
            self._items[index] = subscription
            snapshot = tuple(self._items)
        self._log.debug("Replaced subscription at %d with %s", index, subscription.id)
        self._notify(snapshot)

    def remove_at(self, index: int) -> Subscription:
        with self._lock:
            self._require_index(index)
            removed = self._items.pop(index)
            snapshot = tuple(self._items)
        self._log.debug("Removed subscription %s from %d", removed.id, index)
        self._notify(snapshot)
        return removed

    # ------------------------------------------------------------------ #
    # Observers
    # ------------------------------------------------------------------ #
    def subscribe(self, callback: StoreObserver) -> Unsubscribe:
        """Register ``callback`` for change notifications.

        Returns a handle that removes the callback again; calling it more
        than once is harmless.
        """
        with self._lock:
            self._observers.append(callback)

        active = True

        def unsubscribe() -> None:
            nonlocal active
            with self._lock:
                if not active:
                    return
                active = False
                # Each handle removes only its own registration (by identity).
                for position, registered in enumerate(self._observers):
                    if registered is callback:
                        del self._observers[position]
                        return

        return unsubscribe

    def _notify(self, snapshot: Snapshot) -> None:
        with self._lock:
            observers = list(self._observers)
        for callback in observers:
            callback(snapshot)

    # ------------------------------------------------------------------ #
    # Internal helpers
    # ------------------------------------------------------------------ #
    def _require_index(self, index: int) -> None:
        if isinstance(index, bool) or not isinstance(index, int):
            raise TypeError("Store index must be an integer.")
        if not 0 <= index < len(self._items):
            raise IndexOutOfRange(index, len(self._items))

    def _check_unique(self, subscription: Subscription, *, skip_index: Optional[int]) -> None:
        for position, item in enumerate(self._items):
            if position != skip_index and item.id == subscription.id:
                raise DuplicateSubscriptionId(subscription.id)


__all__ = ["Snapshot", "StoreObserver", "SubscriptionStore", "Unsubscribe"]
