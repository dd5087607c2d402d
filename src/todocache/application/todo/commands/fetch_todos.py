from __future__ import annotations

import logging
from typing import Any, Iterable

from todocache.domain.todo.entities.todo import Todo
from todocache.domain.todo.exceptions.todo_exceptions import TodoFetchError
from todocache.domain.todo.repositories.todo_repository import TodoRepository
from todocache.infrastructure.api.todo_api_client import TodoApiClient

logger = logging.getLogger(__name__)

DEFAULT_FETCH_LIMIT = 20


def project_remote_todos(items: Iterable[Any], limit: int = DEFAULT_FETCH_LIMIT) -> list[Todo]:
    todos: list[Todo] = []
    for index, item in enumerate(items):
        if index >= limit:
            break
        if not isinstance(item, dict):
            raise TodoFetchError(f"Eintrag {index} ist kein Objekt")
        todos.append(Todo.from_mapping(item))
    return todos


class FetchTodosCommand:
    def __init__(
        self,
        api_client: TodoApiClient,
        repository: TodoRepository,
        limit: int = DEFAULT_FETCH_LIMIT,
    ) -> None:
        if limit < 0:
            raise ValueError("limit must not be negative")
        self._api_client = api_client
        self._repository = repository
        self._limit = limit

    async def execute(self) -> list[Todo]:
        items = await self._api_client.fetch_all()
        todos = project_remote_todos(items, self._limit)
        # replaces whatever was stored before, no merge
        self._repository.save(todos)
        logger.info("Stored %d of %d fetched todos", len(todos), len(items))
        return todos
