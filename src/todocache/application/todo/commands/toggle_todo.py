from __future__ import annotations

from dataclasses import replace

from todocache.application.contracts.todo_dtos import ToggleTodoRequest
from todocache.domain.todo.entities.todo import Todo
from todocache.domain.todo.exceptions.todo_exceptions import TodoNotFoundError
from todocache.domain.todo.repositories.todo_repository import TodoRepository


class ToggleTodoCommand:
    def __init__(self, repository: TodoRepository) -> None:
        self._repository = repository

    def execute(self, request: ToggleTodoRequest) -> Todo:
        todos = self._repository.load()
        for index, todo in enumerate(todos):
            if todo.id == request.todo_id:
                updated = replace(todo, completed=bool(request.completed))
                todos[index] = updated
                self._repository.save(todos)
                return updated
        raise TodoNotFoundError(request.todo_id)
