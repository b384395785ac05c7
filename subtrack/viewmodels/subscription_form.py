"""Shared draft state for the create and edit subscription forms.

Call context:
    ``CreateSubscriptionVM`` and ``EditSubscriptionVM`` derive from
    ``SubscriptionFormVM``; they differ only in how a draft is loaded and
    where ``commit`` writes it.
"""

from __future__ import annotations

import logging
import math
from datetime import date
from typing import Callable, Optional

from ..domain import CATEGORIES, FREQUENCIES, Category, Frequency, Service, SubscriptionStore
from .display_format import format_amount, format_date

LOGGER = logging.getLogger(__name__)

Clock = Callable[[], date]


def parse_amount(text: str) -> Optional[float]:
    """Parse entry text into a finite, non-negative amount or return None."""
    if not isinstance(text, str):
        return None
    cleaned = text.strip()
    if not cleaned or "_" in cleaned:
        return None
    try:
        value = float(cleaned)
    except ValueError:
        return None
    if not math.isfinite(value) or value < 0.0:
        return None
    return value


class SubscriptionFormVM:
    """Draft fields and setters common to both subscription workflows."""

    def __init__(
        self,
        store: SubscriptionStore,
        *,
        today: Clock = date.today,
        currency_symbol: str = "$",
    ) -> None:
        self.store = store
        self._today = today
        self.currency_symbol = currency_symbol

        self.service: Optional[Service] = None
        self.category: Category = CATEGORIES[0]
        self.frequency: Frequency = FREQUENCIES[0]
        self.amount: float = 0.0
        self.start_date: date = today()
        self.is_active: bool = False
        self.amount_text: str = ""

    # ---- Field setters (called by views and sheets) ----
    def set_service(self, service: Service) -> None:
        self.service = service

    def set_category(self, category: Category) -> None:
        self.category = category

    def set_frequency(self, frequency: Frequency) -> None:
        self.frequency = frequency

    def set_start_date(self, start_date: date) -> None:
        self.start_date = start_date

    def set_active(self, active: bool) -> None:
        self.is_active = bool(active)

    def set_amount_from_text(self, text: str) -> None:
        """Update ``amount`` from entry text; unparsable text is dropped silently."""
        value = parse_amount(text)
        if value is None:
            LOGGER.debug("Ignoring amount text %r", text)
        else:
            self.amount = value
        self.amount_text = ""

    def reset_amount_input(self) -> None:
        self.amount_text = ""

    # ---- Display ----
    @property
    def formatted_amount(self) -> str:
        return format_amount(self.amount, self.currency_symbol)

    @property
    def formatted_date(self) -> str:
        return format_date(self.start_date)

    @property
    def service_label(self) -> str:
        return self.service.name if self.service else "Choose a service"

    def can_commit(self) -> bool:
        return self.service is not None


__all__ = ["Clock", "SubscriptionFormVM", "parse_amount"]
