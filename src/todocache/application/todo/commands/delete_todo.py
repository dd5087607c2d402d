from __future__ import annotations

from todocache.application.contracts.todo_dtos import DeleteTodoRequest
from todocache.domain.todo.entities.todo import Todo
from todocache.domain.todo.exceptions.todo_exceptions import TodoNotFoundError
from todocache.domain.todo.repositories.todo_repository import TodoRepository


class DeleteTodoCommand:
    def __init__(self, repository: TodoRepository) -> None:
        self._repository = repository

    def execute(self, request: DeleteTodoRequest) -> Todo:
        todos = self._repository.load()
        for index, todo in enumerate(todos):
            if todo.id == request.todo_id:
                # only the first match goes, duplicates stay
                del todos[index]
                self._repository.save(todos)
                return todo
        raise TodoNotFoundError(request.todo_id)
