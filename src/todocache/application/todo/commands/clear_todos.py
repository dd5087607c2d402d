from __future__ import annotations

from todocache.domain.todo.repositories.todo_repository import TodoRepository


class ClearTodosCommand:
    def __init__(self, repository: TodoRepository) -> None:
        self._repository = repository

    def execute(self) -> None:
        self._repository.clear()
