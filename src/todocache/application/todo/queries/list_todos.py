from __future__ import annotations

from todocache.domain.todo.entities.todo import Todo
from todocache.domain.todo.repositories.todo_repository import TodoRepository


class ListTodosQuery:
    def __init__(self, repository: TodoRepository) -> None:
        self._repository = repository

    def execute(self) -> list[Todo]:
        return self._repository.load()
