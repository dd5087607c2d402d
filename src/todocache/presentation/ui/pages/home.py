from __future__ import annotations

from typing import Any, MutableMapping

from nicegui import ui

from todocache.composition_root import create_app_container
from todocache.config import Settings
from todocache.presentation.ui.dialogs import DialogConfirmation
from todocache.presentation.ui.status import LabelStatusReporter
from todocache.presentation.ui.viewmodels.todo_viewmodel import todos_to_viewmodels
from todocache.styles import (
    APP_HEAD_CSS,
    C_BTN_DANGER,
    C_BTN_GHOST,
    C_BTN_PRIM,
    C_BTN_SEC,
    C_CARD,
    C_CONTAINER,
    C_PAGE_TITLE,
    C_SECTION_TITLE,
    STYLE_STATUS,
    STYLE_TEXT_SUBTLE,
    STYLE_TODO_ROW,
)


def render_home(store: MutableMapping[str, Any], settings: Settings) -> None:
    ui.add_head_html(APP_HEAD_CSS)

    with ui.column().classes(C_CONTAINER):
        ui.label("Todo-Liste").classes(C_PAGE_TITLE)

        with ui.row().classes("w-full items-center") as status_row:
            status_label = ui.label("").classes(STYLE_STATUS)

        container = create_app_container(
            store,
            settings,
            status=LabelStatusReporter(status_label, status_row, settings.status_clear_seconds),
            confirmation=DialogConfirmation(),
        )
        controller = container.controller
        query = container.list_todos_query

        with ui.row().classes("w-full gap-2"):
            ui.button("Von API laden & speichern", icon="cloud_download", on_click=controller.fetch_and_store).classes(
                C_BTN_PRIM
            )
            ui.button("Gespeicherte anzeigen", icon="refresh", on_click=controller.render).classes(C_BTN_SEC)
            ui.button("Alle löschen", icon="delete_sweep", on_click=controller.clear_all).classes(C_BTN_DANGER)

        with ui.card().classes(f"{C_CARD} p-4 w-full gap-2"):
            ui.label("Gespeicherte Todos").classes(C_SECTION_TITLE)
            empty_label = ui.label("Keine Todos gespeichert.").classes(STYLE_TEXT_SUBTLE)

            @ui.refreshable
            def todo_list() -> None:
                todos = todos_to_viewmodels(query.execute())
                empty_label.set_visibility(not todos)
                if not todos:
                    return
                with ui.column().classes("w-full gap-0"):
                    for todo in todos:
                        with ui.row().classes(STYLE_TODO_ROW):
                            with ui.row().classes("items-center gap-2 flex-1"):
                                ui.checkbox(
                                    value=todo["completed"],
                                    on_change=lambda e, todo_id=todo["id"]: controller.toggle_completed(
                                        todo_id, e.value
                                    ),
                                )
                                ui.label(todo["title"]).classes(todo["title_classes"])
                            with ui.row().classes("items-center gap-2"):
                                ui.button(
                                    todo["toggle_label"],
                                    on_click=lambda _, todo_id=todo["id"], target=todo["toggle_target"]: (
                                        controller.toggle_completed(todo_id, target)
                                    ),
                                ).classes(C_BTN_GHOST)
                                ui.button(
                                    todo["delete_label"],
                                    on_click=lambda _, todo_id=todo["id"]: controller.delete_todo(todo_id),
                                ).classes(C_BTN_DANGER)

            todo_list()

    controller.on_change = todo_list.refresh
