from __future__ import annotations

from nicegui import ui

from todocache.styles import C_BTN_DANGER, C_BTN_SEC, C_CARD, C_SECTION_TITLE


class DialogConfirmation:
    """Yes/no question as a modal dialog. Closing it counts as "no"."""

    def __init__(self, title: str = "Bitte bestätigen") -> None:
        self._title = title

    async def confirm(self, message: str) -> bool:
        with ui.dialog() as dialog, ui.card().classes(f"{C_CARD} p-4 gap-3"):
            ui.label(self._title).classes(C_SECTION_TITLE)
            ui.label(message).classes("text-sm text-slate-700")
            with ui.row().classes("justify-end w-full gap-2"):
                ui.button("Abbrechen", on_click=lambda: dialog.submit(False)).classes(C_BTN_SEC)
                ui.button("OK", on_click=lambda: dialog.submit(True)).classes(C_BTN_DANGER)
        try:
            result = await dialog
        finally:
            dialog.delete()
        return result is True
