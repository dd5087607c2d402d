from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from todocache.domain.todo.entities.todo import Todo
from todocache.styles import STYLE_TODO_TITLE, STYLE_TODO_TITLE_DONE

LABEL_MARK_COMPLETE = "Als erledigt markieren"
LABEL_MARK_INCOMPLETE = "Als offen markieren"
LABEL_DELETE = "Löschen"


def todo_to_viewmodel(todo: Todo) -> dict[str, Any]:
    return {
        "id": todo.id,
        "title": todo.title,
        "completed": todo.completed,
        "title_classes": STYLE_TODO_TITLE_DONE if todo.completed else STYLE_TODO_TITLE,
        # the button flips the state, so it names the opposite one
        "toggle_label": LABEL_MARK_INCOMPLETE if todo.completed else LABEL_MARK_COMPLETE,
        "toggle_target": not todo.completed,
        "delete_label": LABEL_DELETE,
    }


def todos_to_viewmodels(todos: Iterable[Todo]) -> list[dict[str, Any]]:
    return [todo_to_viewmodel(todo) for todo in todos]
