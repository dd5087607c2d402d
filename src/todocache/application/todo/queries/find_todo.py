from __future__ import annotations

from typing import Any

from todocache.domain.todo.entities.todo import Todo, normalize_todo_id
from todocache.domain.todo.repositories.todo_repository import TodoRepository


class FindTodoQuery:
    def __init__(self, repository: TodoRepository) -> None:
        self._repository = repository

    def execute(self, todo_id: Any) -> Todo | None:
        wanted = normalize_todo_id(todo_id)
        return next((todo for todo in self._repository.load() if todo.id == wanted), None)
