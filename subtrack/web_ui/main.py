"""NiceGUI entrypoint for the subtrack web runtime."""

from __future__ import annotations

import argparse
import os
from datetime import date
from typing import Any, Callable, Dict

from nicegui import ui

from subtrack.domain import SubscriptionError
from subtrack.utils.logging import configure_root
from subtrack.viewmodels.selection_vm import (
    AmountSheetVM,
    DateSheetVM,
    PickerSheetVM,
    ServiceSheetVM,
)
from subtrack.web_ui.runtime import WebRuntime


def _install_theme() -> None:
    """Install global CSS tokens for the web runtime."""
    ui.add_head_html(
        """
<style>
:root {
  --subtrack-card: rgba(255, 255, 255, 0.92);
  --subtrack-border: #d8dee9;
  --subtrack-accent: #1d4f91;
  --subtrack-muted: #5b6475;
}
body { background: #f4f6fb; }
.subtrack-page { max-width: 720px; margin: 0 auto; padding: 14px; }
.subtrack-card {
  background: var(--subtrack-card);
  border: 1px solid var(--subtrack-border);
  border-radius: 14px;
}
.subtrack-muted { color: var(--subtrack-muted); }
</style>
        """
    )


def _notify_error(exc: Exception) -> None:
    """Render exceptions as concise NiceGUI toasts."""
    ui.notify(str(exc), color="negative", close_button="OK")


def _build_ui(runtime: WebRuntime) -> None:
    """Register the NiceGUI pages for the runtime."""

    @ui.page("/")
    def index() -> None:
        @ui.refreshable
        def render_status() -> None:
            with ui.row().classes("w-full justify-between items-center subtrack-card p-3 q-mb-sm"):
                ui.label("Subscriptions").classes("text-h5")
                ui.label(runtime.status_message).classes("text-caption subtrack-muted")

        @ui.refreshable
        def render_list() -> None:
            rows = runtime.rows()
            if not rows:
                ui.label(runtime.list_vm.empty_message).classes("text-subtitle1 subtrack-muted q-pa-md")
                return
            with ui.column().classes("w-full q-gutter-sm"):
                for row in rows:
                    with ui.card().classes("subtrack-card w-full q-pa-sm"):
                        with ui.row().classes("w-full items-center justify-between"):
                            with ui.column().classes("q-gutter-none"):
                                ui.label(row.service).classes("text-subtitle1")
                                ui.label(f"{row.category} • {row.frequency}").classes("subtrack-muted")
                                ui.label(row.start_date).classes("text-caption subtrack-muted")
                            with ui.column().classes("items-end"):
                                ui.label(row.amount).classes("text-subtitle1")
                                if not row.is_active:
                                    ui.badge("Inactive", color="grey")
                                with ui.row():
                                    ui.button(
                                        "Update",
                                        on_click=lambda _, sid=row.subscription_id: begin_edit(sid),
                                    ).props("dense flat")
                                    ui.button(
                                        "Delete",
                                        color="negative",
                                        on_click=lambda _, sid=row.subscription_id: delete(sid),
                                    ).props("dense flat")

        @ui.refreshable
        def render_form() -> None:
            form = runtime.form
            if form is None:
                ui.button("Create Subscription", on_click=begin_create, color="primary")
                return
            with ui.card().classes("subtrack-card w-full q-pa-md"):
                with ui.row().classes("w-full items-center justify-between"):
                    ui.button("Cancel", on_click=cancel).props("flat")
                    ui.label(runtime.form_title).classes("text-h6")
                    save_button = ui.button("Save", on_click=save, color="primary")
                    if not form.can_commit():
                        save_button.disable()
                _form_row("Name", form.service_label, lambda: open_sheet("service"))
                _form_row("Amount", form.formatted_amount, lambda: open_sheet("amount"))
                _form_row("Category", form.category.name, lambda: open_sheet("category"))
                _form_row("Start Date", form.formatted_date, lambda: open_sheet("date"))
                _form_row("Frequency", form.frequency.name, lambda: open_sheet("frequency"))
                ui.switch("Active", value=form.is_active, on_change=lambda e: form.set_active(bool(e.value)))
            render_sheet()

        def _form_row(label: str, value: str, on_click: Callable[[], None]) -> None:
            with ui.row().classes("w-full items-center justify-between"):
                ui.label(label).classes("subtrack-muted")
                ui.button(value, on_click=on_click).props("flat no-caps")

        def render_sheet() -> None:
            sheet = runtime.sheet
            if sheet is None:
                return
            with ui.card().classes("subtrack-card w-full q-pa-md q-mt-sm"):
                if isinstance(sheet, AmountSheetVM):
                    ui.label("Enter Amount").classes("text-subtitle1")
                    ui.input(
                        label="Amount",
                        value=sheet.text,
                        on_change=lambda e: sheet.set_text(str(e.value or "")),
                    ).props("outlined dense inputmode=decimal")
                elif isinstance(sheet, DateSheetVM):
                    ui.label("Start Date").classes("text-subtitle1")
                    minimum = sheet.min_date.strftime("%Y/%m/%d")
                    ui.date(
                        value=(sheet.highlighted or sheet.min_date).isoformat(),
                        on_change=lambda e: _highlight_date(sheet, e.value),
                    ).props(f':options="d => d >= \'{minimum}\'"')
                elif isinstance(sheet, PickerSheetVM):
                    ui.label(sheet.title).classes("text-subtitle1")
                    if isinstance(sheet, ServiceSheetVM):
                        ui.input(
                            label="Search",
                            value=sheet.filter_text,
                            on_change=lambda e: on_filter(sheet, e.value),
                        ).props("outlined dense clearable")
                        if sheet.is_empty_result:
                            ui.label(sheet.empty_message).classes("text-subtitle2")
                            ui.label(sheet.empty_hint).classes("text-caption subtrack-muted")
                    for entry in sheet.visible_entries():
                        marker = "✓ " if sheet.is_highlighted(entry) else ""
                        ui.button(
                            f"{marker}{entry.name}",
                            on_click=lambda _, e=entry: on_highlight(sheet, e),
                        ).props("flat no-caps align=left").classes("w-full")
                with ui.row().classes("w-full justify-end"):
                    ui.button("Close", on_click=close_sheet).props("flat")
                    ui.button("Done", on_click=confirm_sheet, color="primary")

        def _highlight_date(sheet: DateSheetVM, value: Any) -> None:
            if not value:
                return
            if not sheet.highlight(date.fromisoformat(str(value).replace("/", "-"))):
                ui.notify("Start date cannot be in the past.", color="warning")

        def _invoke(action: Callable[[], Any], *refreshers: Callable[[], None]) -> None:
            try:
                action()
            except (SubscriptionError, ValueError) as exc:
                _notify_error(exc)
                render_status.refresh()
                return
            for refresh in refreshers:
                refresh()

        def begin_create() -> None:
            _invoke(runtime.begin_create, render_form.refresh)

        def begin_edit(subscription_id: Any) -> None:
            _invoke(lambda: runtime.begin_edit(subscription_id), render_form.refresh, render_status.refresh)

        def save() -> None:
            _invoke(runtime.save, render_form.refresh, render_status.refresh)

        def cancel() -> None:
            _invoke(runtime.cancel, render_form.refresh)

        def delete(subscription_id: Any) -> None:
            _invoke(
                lambda: runtime.delete(subscription_id),
                render_form.refresh,
                render_status.refresh,
            )

        def open_sheet(kind: str) -> None:
            _invoke(lambda: runtime.open_sheet(kind), render_form.refresh)

        def confirm_sheet() -> None:
            _invoke(runtime.confirm_sheet, render_form.refresh)

        def close_sheet() -> None:
            _invoke(runtime.close_sheet, render_form.refresh)

        def render_settings() -> None:
            payload = runtime.settings_payload()
            with ui.expansion("Settings", icon="settings").classes("subtrack-card w-full q-mb-sm"):
                with ui.row().classes("w-full items-center q-pa-sm"):
                    symbol = ui.input(label="Currency symbol", value=payload["currency_symbol"]).props(
                        "outlined dense"
                    )
                    debug = ui.switch("Debug logging", value=payload["debug_logging"])
                    ui.button(
                        "Apply",
                        on_click=lambda: apply_settings(
                            {"currency_symbol": symbol.value or "", "debug_logging": bool(debug.value)}
                        ),
                    ).props("flat")

        def apply_settings(payload: Dict[str, Any]) -> None:
            _invoke(lambda: runtime.apply_settings(payload), render_form.refresh, render_status.refresh)

        def on_filter(sheet: ServiceSheetVM, value: Any) -> None:
            sheet.set_filter(str(value or ""))
            render_form.refresh()

        def on_highlight(sheet: PickerSheetVM, entry: Any) -> None:
            sheet.highlight(entry)
            render_form.refresh()

        with ui.column().classes("subtrack-page w-full"):
            render_status()
            render_settings()
            render_form()
            render_list()

        unwatch = runtime.watch_rows(lambda _rows: render_list.refresh())
        ui.context.client.on_disconnect(unwatch)


def _parse_args() -> argparse.Namespace:
    """Parse CLI args for web runtime startup."""
    parser = argparse.ArgumentParser(description="Run the subtrack NiceGUI web UI.")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8080)
    parser.add_argument("--reload", action="store_true")
    parser.add_argument("--smoke-test", action="store_true")
    return parser.parse_args()


def main() -> None:
    """CLI entrypoint for the NiceGUI runtime."""
    args = _parse_args()
    runtime = WebRuntime()
    configure_root(runtime.context.settings_vm.debug_logging)
    if args.smoke_test:
        print("web-smoke-ok", len(runtime.rows()))
        return
    _install_theme()
    _build_ui(runtime)
    ui.run(
        host=args.host,
        port=args.port,
        title="Subscriptions",
        reload=args.reload,
        show=False,
        storage_secret=os.environ.get("SUBTRACK_WEB_STORAGE_SECRET", "subtrack-web-ui-secret"),
    )


if __name__ in {"__main__", "__mp_main__"}:
    main()
