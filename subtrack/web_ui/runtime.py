"""NiceGUI runtime orchestration for subtrack.

This module composes the application context and viewmodels for the web
page. It holds which form and which sheet are open; it does not render.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Callable, Dict, List, Mapping, Optional, Union

from subtrack.app.context import AppContext
from subtrack.domain import SubscriptionId
from subtrack.utils.logging import apply_gui_preferences
from subtrack.viewmodels.create_subscription_vm import CreateSubscriptionVM
from subtrack.viewmodels.edit_subscription_vm import EditSubscriptionVM
from subtrack.viewmodels.selection_vm import (
    AmountSheetVM,
    DateSheetVM,
    PickerSheetVM,
    ServiceSheetVM,
    category_sheet,
    frequency_sheet,
)
from subtrack.viewmodels.settings_vm import SettingsVM
from subtrack.viewmodels.subscription_form import Clock
from subtrack.viewmodels.subscription_list_vm import SubscriptionListVM, SubscriptionRow


LOGGER = logging.getLogger(__name__)

SHEET_KINDS = ("service", "category", "frequency", "date", "amount")

FormVM = Union[CreateSubscriptionVM, EditSubscriptionVM]
SheetVM = Union[PickerSheetVM, ServiceSheetVM, DateSheetVM, AmountSheetVM]
RowsListener = Callable[[List[SubscriptionRow]], None]


class WebRuntime:
    """Orchestration state used by NiceGUI views."""

    def __init__(
        self,
        settings_vm: Optional[SettingsVM] = None,
        *,
        today: Clock = date.today,
        context: Optional[AppContext] = None,
    ) -> None:
        self.status_message = "Ready."
        self.context = context or AppContext(settings_vm, today=today)
        self.list_vm: SubscriptionListVM = self.context.list_vm()
        self.list_vm.on_changed = self._broadcast_rows
        self._row_listeners: List[RowsListener] = []
        self.form: Optional[FormVM] = None
        self.sheet: Optional[SheetVM] = None
        self.sheet_kind: Optional[str] = None

    # ------------------------------------------------------------------
    # Basic projections
    # ------------------------------------------------------------------
    def rows(self) -> List[SubscriptionRow]:
        return self.list_vm.rows()

    def settings_payload(self) -> Dict[str, Any]:
        return self.context.settings_vm.to_dict()

    @property
    def is_editing(self) -> bool:
        return isinstance(self.form, EditSubscriptionVM)

    @property
    def form_title(self) -> str:
        return "Update Subscription" if self.is_editing else "Create Subscription"

    def apply_settings(self, payload: Mapping[str, Any]) -> None:
        """Apply settings from the page; invalid payloads raise ``ValueError``."""
        settings = self.context.settings_vm
        settings.apply_dict(payload)
        level = apply_gui_preferences(settings.debug_logging)
        symbol = settings.currency_symbol
        self.list_vm.currency_symbol = symbol
        if self.form is not None:
            self.form.currency_symbol = symbol
        LOGGER.debug("Settings applied (currency=%r, log level=%s)", symbol, logging.getLevelName(level))
        self.status_message = "Settings applied."
        self._broadcast_rows(self.rows())

    # ------------------------------------------------------------------
    # Row listeners, one per open page
    # ------------------------------------------------------------------
    def watch_rows(self, listener: RowsListener) -> Callable[[], None]:
        """Call ``listener`` with fresh rows after every store change."""
        self._row_listeners.append(listener)

        def unwatch() -> None:
            for position, registered in enumerate(self._row_listeners):
                if registered is listener:
                    del self._row_listeners[position]
                    return

        return unwatch

    def _broadcast_rows(self, rows: List[SubscriptionRow]) -> None:
        for listener in list(self._row_listeners):
            listener(rows)

    # ------------------------------------------------------------------
    # Form workflows
    # ------------------------------------------------------------------
    def begin_create(self) -> CreateSubscriptionVM:
        self.close_sheet()
        form = self.context.create_workflow()
        self.form = form
        return form

    def begin_edit(self, subscription_id: SubscriptionId) -> Optional[EditSubscriptionVM]:
        self.close_sheet()
        index = self.list_vm.index_for(subscription_id)
        if index is None:
            self.status_message = "Subscription no longer exists."
            return None
        form = self.context.edit_workflow(index)
        self.form = form
        return form

    def save(self) -> None:
        """Commit the open form; errors propagate to the page for display."""
        form = self._require_form()
        subscription = form.commit()
        verb = "Updated" if self.is_editing else "Added"
        self.status_message = f"{verb} {subscription.service.name}."
        self.close_sheet()
        self.form = None

    def cancel(self) -> None:
        self.close_sheet()
        self.form = None

    def delete(self, subscription_id: SubscriptionId) -> bool:
        removed = self.list_vm.delete(subscription_id)
        self.status_message = "Subscription deleted." if removed else "Subscription no longer exists."
        if removed and isinstance(self.form, EditSubscriptionVM):
            # Rows after the deleted one shift up; follow the edited row.
            edited_id = self.form.subscription_id
            index = self.list_vm.index_for(edited_id) if edited_id is not None else None
            if index is None:
                self.form = None
            else:
                self.form.retarget(index)
        return removed

    # ------------------------------------------------------------------
    # Sheets
    # ------------------------------------------------------------------
    def open_sheet(self, kind: str) -> SheetVM:
        form = self._require_form()
        if kind not in SHEET_KINDS:
            raise ValueError(f"Unknown sheet: {kind}")
        sheet: SheetVM
        if kind == "service":
            sheet = ServiceSheetVM(on_done=form.set_service)
            sheet.open(form.service)
        elif kind == "category":
            sheet = category_sheet(on_done=form.set_category)
            sheet.open(form.category)
        elif kind == "frequency":
            sheet = frequency_sheet(on_done=form.set_frequency)
            sheet.open(form.frequency)
        elif kind == "date":
            sheet = DateSheetVM(on_done=form.set_start_date, today=self.context.today)
            sheet.open(form.start_date)
        else:
            sheet = AmountSheetVM(form=form)
            sheet.open()
        self.sheet = sheet
        self.sheet_kind = kind
        return sheet

    def confirm_sheet(self) -> None:
        if self.sheet is not None:
            self.sheet.confirm()
        self.sheet = None
        self.sheet_kind = None

    def close_sheet(self) -> None:
        if self.sheet is not None:
            self.sheet.dismiss()
        self.sheet = None
        self.sheet_kind = None

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _require_form(self) -> FormVM:
        if self.form is None:
            raise ValueError("No subscription form is open.")
        return self.form


__all__ = ["SHEET_KINDS", "WebRuntime"]
