from __future__ import annotations

from nicegui import ui

from todocache.styles import STYLE_STATUS, STYLE_STATUS_ERROR


class LabelStatusReporter:
    """Writes status text into a label and clears it after ``clear_after_s``.

    Every message gets its own one-shot timer, so an older timer may clear a
    newer message. Timers are created inside ``host``.
    """

    def __init__(self, label: ui.label, host: ui.element, clear_after_s: float = 3.0) -> None:
        self._label = label
        self._host = host
        self._clear_after_s = clear_after_s

    def report(self, text: str, is_error: bool = False) -> None:
        self._label.set_text(text)
        self._label.classes(replace=STYLE_STATUS_ERROR if is_error else STYLE_STATUS)
        with self._host:
            ui.timer(self._clear_after_s, self._clear, once=True)

    def _clear(self) -> None:
        self._label.set_text("")
        self._label.classes(replace=STYLE_STATUS)
