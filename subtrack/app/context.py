"""Composition root that owns the subscription store for one app run.

The web runtime creates a single ``AppContext`` at startup and asks it for
workflows and list views. Nothing else constructs a ``SubscriptionStore``, so
every collaborator sees the same list and the list dies with the context.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from ..domain import SubscriptionStore, demo_subscriptions
from ..viewmodels.create_subscription_vm import CreateSubscriptionVM
from ..viewmodels.edit_subscription_vm import EditSubscriptionVM
from ..viewmodels.settings_vm import SettingsVM
from ..viewmodels.subscription_form import Clock
from ..viewmodels.subscription_list_vm import SubscriptionListVM


class AppContext:
    """Create the store from settings and hand it to viewmodels.

    Call chain:
        ``subtrack.web_ui.runtime.WebRuntime`` builds one instance and calls
        ``create_workflow``/``edit_workflow`` when a form opens.
    """

    def __init__(
        self,
        settings_vm: Optional[SettingsVM] = None,
        *,
        today: Clock = date.today,
        store: Optional[SubscriptionStore] = None,
    ) -> None:
        """Initialize the context.

        Args:
            settings_vm: Settings state; defaults are used when omitted.
            today: Clock used for default start dates and demo seeding.
            store: Pre-built store, mainly for tests. When omitted a store is
                built and, if ``seed_demo_data`` is set, seeded with demo rows.
        """
        self._log = logging.getLogger(__name__)
        self.settings_vm = settings_vm or SettingsVM()
        self.today = today
        if store is None:
            seed = demo_subscriptions(today()) if self.settings_vm.seed_demo_data else []
            store = SubscriptionStore(seed)
            self._log.info("Subscription store ready with %d entries", len(store))
        self.store = store

    @property
    def currency_symbol(self) -> str:
        return self.settings_vm.currency_symbol

    def create_workflow(self) -> CreateSubscriptionVM:
        return CreateSubscriptionVM(
            self.store,
            today=self.today,
            currency_symbol=self.currency_symbol,
        )

    def edit_workflow(self, index: int) -> EditSubscriptionVM:
        return EditSubscriptionVM(
            self.store,
            index,
            today=self.today,
            currency_symbol=self.currency_symbol,
        )

    def list_vm(self) -> SubscriptionListVM:
        return SubscriptionListVM(self.store, currency_symbol=self.currency_symbol)


__all__ = ["AppContext"]
