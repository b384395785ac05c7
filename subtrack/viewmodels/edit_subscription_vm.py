from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from ..domain import InvalidDraft, Subscription, SubscriptionId, SubscriptionStore
from .display_format import amount_input_text
from .subscription_form import Clock, SubscriptionFormVM

LOGGER = logging.getLogger(__name__)


class EditSubscriptionVM(SubscriptionFormVM):
    """Draft bound to one store position; ``commit`` replaces that position.

    The tracked index can go stale while the list is changing underneath the
    form (a row deleted while its editor is opening). ``load`` then keeps the
    previous draft and ``can_commit`` turns False instead of raising.
    """

    def __init__(
        self,
        store: SubscriptionStore,
        index: int,
        *,
        today: Clock = date.today,
        currency_symbol: str = "$",
    ) -> None:
        super().__init__(store, today=today, currency_symbol=currency_symbol)
        self._index = index
        self._subscription_id: Optional[SubscriptionId] = None
        self.load(index)

    @property
    def index(self) -> int:
        return self._index

    @property
    def subscription_id(self) -> Optional[SubscriptionId]:
        """Id of the subscription currently loaded into the draft."""
        return self._subscription_id

    def load(self, index: int) -> None:
        if not self.store.is_valid_index(index):
            LOGGER.debug("Edit load skipped, index %s out of range", index)
            return
        subscription = self.store.get(index)
        self._subscription_id = subscription.id
        self.service = subscription.service
        self.category = subscription.category
        self.frequency = subscription.frequency
        self.amount = subscription.amount
        self.start_date = subscription.start_date
        self.is_active = subscription.is_active
        self.amount_text = amount_input_text(subscription.amount)

    def set_index(self, new_index: int) -> None:
        if new_index != self._index:
            self._index = new_index
            self.load(new_index)

    def retarget(self, new_index: int) -> None:
        """Follow the loaded row to ``new_index`` after a shift; the draft is kept."""
        self._index = new_index

    def can_commit(self) -> bool:
        return (
            self.service is not None
            and self._subscription_id is not None
            and self.store.is_valid_index(self._index)
        )

    def commit(self) -> Subscription:
        if self.service is None:
            raise InvalidDraft("Choose a service before saving.")
        if not self.can_commit():
            raise InvalidDraft("Nothing to save: the subscription is no longer in the list.")
        assert self.service is not None and self._subscription_id is not None
        subscription = Subscription(
            id=self._subscription_id,
            service=self.service,
            category=self.category,
            frequency=self.frequency,
            amount=self.amount,
            start_date=self.start_date,
            is_active=self.is_active,
        )
        self.store.replace(self._index, subscription)
        LOGGER.info("Updated subscription %s at %d", subscription.id, self._index)
        return subscription


__all__ = ["EditSubscriptionVM"]
