"""Picker sheets for catalog values, the start date, and the amount entry.

Each sheet keeps a local highlight apart from the caller's committed value.
``confirm`` hands the highlight back through ``on_done``; ``dismiss`` drops it.
Neither path touches the store.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Callable, Generic, List, Optional, Sequence, TypeVar

from ..domain import CATEGORIES, FREQUENCIES, SERVICES, Category, Frequency, Service, filter_by_name
from ..domain.catalog import CatalogEntry
from .subscription_form import Clock, SubscriptionFormVM

EntryT = TypeVar("EntryT", bound=CatalogEntry)


@dataclass
class PickerSheetVM(Generic[EntryT]):
    """Single-choice picker over one catalog list."""

    title: str
    entries: Sequence[EntryT]
    on_done: Optional[Callable[[EntryT], None]] = None

    highlighted: Optional[EntryT] = None
    is_open: bool = False

    def open(self, current: Optional[EntryT] = None) -> None:
        self.highlighted = current
        self.is_open = True

    def highlight(self, entry: EntryT) -> None:
        self.highlighted = entry

    def is_highlighted(self, entry: EntryT) -> bool:
        return self.highlighted is not None and self.highlighted.id == entry.id

    def visible_entries(self) -> List[EntryT]:
        return list(self.entries)

    def confirm(self) -> Optional[EntryT]:
        """Report the highlight to ``on_done`` and close; no highlight is a no-op."""
        chosen = self.highlighted
        if chosen is not None and self.on_done:
            self.on_done(chosen)
        self._close()
        return chosen

    def dismiss(self) -> None:
        self._close()

    def _close(self) -> None:
        self.highlighted = None
        self.is_open = False


@dataclass
class ServiceSheetVM(PickerSheetVM[Service]):
    """Service picker with a name filter."""

    title: str = "Services"
    entries: Sequence[Service] = SERVICES
    filter_text: str = ""
    empty_message: str = "No services found"
    empty_hint: str = "Try searching for something else"

    def set_filter(self, text: str) -> None:
        self.filter_text = text or ""

    def filtered(self) -> List[Service]:
        return filter_by_name(self.entries, self.filter_text)

    def visible_entries(self) -> List[Service]:
        return self.filtered()

    @property
    def is_empty_result(self) -> bool:
        return not self.filtered()

    def _close(self) -> None:
        super()._close()
        self.filter_text = ""


def category_sheet(on_done: Optional[Callable[[Category], None]] = None) -> PickerSheetVM[Category]:
    return PickerSheetVM(title="Category", entries=CATEGORIES, on_done=on_done)


def frequency_sheet(on_done: Optional[Callable[[Frequency], None]] = None) -> PickerSheetVM[Frequency]:
    return PickerSheetVM(title="Frequency", entries=FREQUENCIES, on_done=on_done)


@dataclass
class DateSheetVM:
    """Start date picker limited to today or later."""

    on_done: Optional[Callable[[date], None]] = None
    today: Clock = date.today

    highlighted: Optional[date] = None
    is_open: bool = False

    @property
    def min_date(self) -> date:
        return self.today()

    def open(self, current: Optional[date] = None) -> None:
        self.highlighted = current if current is not None and current >= self.min_date else self.min_date
        self.is_open = True

    def highlight(self, day: date) -> bool:
        """Highlight ``day``; past dates are refused and the prior value kept."""
        if day < self.min_date:
            return False
        self.highlighted = day
        return True

    def confirm(self) -> Optional[date]:
        chosen = self.highlighted
        if chosen is not None and self.on_done:
            self.on_done(chosen)
        self.dismiss()
        return chosen

    def dismiss(self) -> None:
        self.highlighted = None
        self.is_open = False


@dataclass
class AmountSheetVM:
    """Amount entry bound to one workflow's amount field."""

    form: SubscriptionFormVM
    text: str = ""
    is_open: bool = False

    def open(self) -> None:
        self.text = self.form.amount_text
        self.is_open = True

    def set_text(self, text: str) -> None:
        self.text = text or ""

    def confirm(self) -> float:
        self.form.set_amount_from_text(self.text)
        self._close()
        return self.form.amount

    def dismiss(self) -> None:
        self.form.reset_amount_input()
        self._close()

    def _close(self) -> None:
        self.text = ""
        self.is_open = False


__all__ = [
    "AmountSheetVM",
    "DateSheetVM",
    "PickerSheetVM",
    "ServiceSheetVM",
    "category_sheet",
    "frequency_sheet",
]
