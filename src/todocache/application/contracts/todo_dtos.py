from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from todocache.domain.todo.entities.todo import normalize_todo_id


@dataclass(frozen=True)
class ToggleTodoRequest:
    todo_id: str
    completed: bool

    @classmethod
    def create(cls, todo_id: Any, completed: Any) -> "ToggleTodoRequest":
        return cls(todo_id=normalize_todo_id(todo_id), completed=bool(completed))


@dataclass(frozen=True)
class DeleteTodoRequest:
    todo_id: str

    @classmethod
    def create(cls, todo_id: Any) -> "DeleteTodoRequest":
        return cls(todo_id=normalize_todo_id(todo_id))
