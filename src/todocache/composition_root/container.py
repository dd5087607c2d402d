from __future__ import annotations

from dataclasses import dataclass
from typing import Any, MutableMapping

import httpx

from todocache.application.contracts.ports import StatusReporter, UserConfirmation
from todocache.application.todo.commands.clear_todos import ClearTodosCommand
from todocache.application.todo.commands.delete_todo import DeleteTodoCommand
from todocache.application.todo.commands.fetch_todos import FetchTodosCommand
from todocache.application.todo.commands.toggle_todo import ToggleTodoCommand
from todocache.application.todo.queries.find_todo import FindTodoQuery
from todocache.application.todo.queries.list_todos import ListTodosQuery
from todocache.config import Settings
from todocache.infrastructure.api.todo_api_client import TodoApiClient
from todocache.infrastructure.data.repositories.key_value_todo_repository import (
    KeyValueTodoRepository,
)
from todocache.presentation.controllers.todo_controller import TodoController


@dataclass(frozen=True)
class AppContainer:
    repository: KeyValueTodoRepository
    api_client: TodoApiClient
    fetch_todos_command: FetchTodosCommand
    toggle_todo_command: ToggleTodoCommand
    delete_todo_command: DeleteTodoCommand
    clear_todos_command: ClearTodosCommand
    list_todos_query: ListTodosQuery
    find_todo_query: FindTodoQuery
    controller: TodoController


def create_app_container(
    store: MutableMapping[str, Any],
    settings: Settings,
    status: StatusReporter,
    confirmation: UserConfirmation,
    http_client: httpx.AsyncClient | None = None,
) -> AppContainer:
    repository = KeyValueTodoRepository(store, key=settings.storage_key)
    api_client = TodoApiClient(settings.api_url, timeout_s=settings.http_timeout_s, client=http_client)

    fetch_command = FetchTodosCommand(api_client, repository, limit=settings.fetch_limit)
    toggle_command = ToggleTodoCommand(repository)
    delete_command = DeleteTodoCommand(repository)
    clear_command = ClearTodosCommand(repository)
    find_query = FindTodoQuery(repository)

    controller = TodoController(
        fetch_command=fetch_command,
        toggle_command=toggle_command,
        delete_command=delete_command,
        clear_command=clear_command,
        find_query=find_query,
        confirmation=confirmation,
        status=status,
    )

    return AppContainer(
        repository=repository,
        api_client=api_client,
        fetch_todos_command=fetch_command,
        toggle_todo_command=toggle_command,
        delete_todo_command=delete_command,
        clear_todos_command=clear_command,
        list_todos_query=ListTodosQuery(repository),
        find_todo_query=find_query,
        controller=controller,
    )
