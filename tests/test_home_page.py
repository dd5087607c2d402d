from __future__ import annotations

import asyncio

import pytest
from nicegui import app, ui
from nicegui.testing import User

from todocache.config import Settings
from todocache.domain.todo.entities.todo import Todo
from todocache.infrastructure.data.repositories.key_value_todo_repository import (
    KeyValueTodoRepository,
)
from todocache.presentation.ui.pages.home import render_home
from todocache.presentation.ui.status import LabelStatusReporter

pytestmark = pytest.mark.nicegui_main_file("")


def _register_home(todos: list[Todo], status_clear_seconds: float = 3.0) -> None:
    @ui.page("/")
    def index() -> None:
        KeyValueTodoRepository(app.storage.user).save(todos)
        render_home(app.storage.user, Settings(status_clear_seconds=status_clear_seconds))


async def test_delete_last_todo_shows_empty_indicator(user: User) -> None:
    _register_home([Todo(id="1", title="Einkaufen")], status_clear_seconds=0.5)
    await user.open("/")
    await user.should_see("Einkaufen")
    await user.should_not_see("Keine Todos gespeichert.")

    user.find("Löschen").click()
    await user.should_see("OK")
    user.find("OK").click()

    await user.should_see("Keine Todos gespeichert.")
    await user.should_see("Todo gelöscht.")
    await user.should_not_see("Einkaufen")

    await asyncio.sleep(0.8)
    await user.should_not_see("Todo gelöscht.")


async def test_cancelled_delete_keeps_row(user: User) -> None:
    _register_home([Todo(id="1", title="Einkaufen")])
    await user.open("/")

    user.find("Löschen").click()
    await user.should_see("Abbrechen")
    user.find("Abbrechen").click()

    await user.should_see("Einkaufen")
    await user.should_not_see("Keine Todos gespeichert.")


async def test_toggle_button_flips_label(user: User) -> None:
    _register_home([Todo(id="1", title="Einkaufen", completed=False)])
    await user.open("/")
    await user.should_see("Als erledigt markieren")

    user.find("Als erledigt markieren").click()

    await user.should_see("Als offen markieren")
    await user.should_not_see("Als erledigt markieren")

    user.find("Als offen markieren").click()

    await user.should_see("Als erledigt markieren")


async def test_empty_storage_shows_indicator(user: User) -> None:
    _register_home([])
    await user.open("/")

    await user.should_see("Keine Todos gespeichert.")
    await user.should_not_see("Löschen")


async def test_older_status_timer_clears_newer_message(user: User) -> None:
    labels: dict[str, ui.label] = {}

    @ui.page("/")
    def index() -> None:
        with ui.row() as host:
            labels["status"] = ui.label("")
        reporter = LabelStatusReporter(labels["status"], host, clear_after_s=1.0)
        ui.button("erste", on_click=lambda: reporter.report("erste Meldung"))
        ui.button("zweite", on_click=lambda: reporter.report("zweite Meldung", is_error=True))

    await user.open("/")
    user.find("erste").click()
    await asyncio.sleep(0.5)
    user.find("zweite").click()
    await user.should_see("zweite Meldung")
    assert "text-rose-700" in labels["status"].classes

    # the first timer fires at 1.0s, the second one would only at 1.5s
    await asyncio.sleep(0.75)
    assert labels["status"].text == ""
    assert "text-rose-700" not in labels["status"].classes
