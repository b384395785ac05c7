from __future__ import annotations

import logging

from ..domain import CATEGORIES, FREQUENCIES, InvalidDraft, Subscription
from .subscription_form import SubscriptionFormVM

LOGGER = logging.getLogger(__name__)


class CreateSubscriptionVM(SubscriptionFormVM):
    """Draft for one new subscription; ``commit`` appends it to the store.

    The draft is left as-is after a commit. Views drop the instance when the
    form closes, or call ``reset`` to start over.
    """

    def commit(self) -> Subscription:
        if not self.can_commit():
            raise InvalidDraft("Choose a service before saving.")
        assert self.service is not None
        subscription = Subscription(
            service=self.service,
            category=self.category,
            frequency=self.frequency,
            amount=self.amount,
            start_date=self.start_date,
            is_active=self.is_active,
        )
        self.store.append(subscription)
        LOGGER.info("Created subscription %s for %s", subscription.id, subscription.service.name)
        return subscription

    def reset(self) -> None:
        self.service = None
        self.category = CATEGORIES[0]
        self.frequency = FREQUENCIES[0]
        self.amount = 0.0
        self.start_date = self._today()
        self.is_active = False
        self.amount_text = ""


__all__ = ["CreateSubscriptionVM"]
