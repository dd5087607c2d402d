from __future__ import annotations

import logging
from typing import Any, Callable

from todocache.application.contracts.ports import StatusReporter, UserConfirmation
from todocache.application.contracts.todo_dtos import DeleteTodoRequest, ToggleTodoRequest
from todocache.application.todo.commands.clear_todos import ClearTodosCommand
from todocache.application.todo.commands.delete_todo import DeleteTodoCommand
from todocache.application.todo.commands.fetch_todos import FetchTodosCommand
from todocache.application.todo.commands.toggle_todo import ToggleTodoCommand
from todocache.application.todo.queries.find_todo import FindTodoQuery
from todocache.domain.todo.exceptions.todo_exceptions import (
    TodoFetchError,
    TodoNotFoundError,
    TodoStorageError,
)

logger = logging.getLogger(__name__)

MSG_FETCHING = "Todos werden von der API geladen..."
MSG_FETCH_FAILED = "Todos konnten nicht geladen werden: {error}"
MSG_SAVED = "Die ersten {count} Todos wurden gespeichert."
MSG_STORAGE_FAILED = "Speichern fehlgeschlagen: {error}"
MSG_NOT_FOUND = "Todo nicht gefunden"
MSG_DELETED = "Todo gelöscht."
MSG_CLEARED = "Gespeicherte Todos gelöscht."
CONFIRM_DELETE = "Dieses Todo löschen?"
CONFIRM_CLEAR = "Alle gespeicherten Todos löschen?"


class TodoController:
    """Wires page events to commands. ``on_change`` re-renders the list."""

    def __init__(
        self,
        fetch_command: FetchTodosCommand,
        toggle_command: ToggleTodoCommand,
        delete_command: DeleteTodoCommand,
        clear_command: ClearTodosCommand,
        find_query: FindTodoQuery,
        confirmation: UserConfirmation,
        status: StatusReporter,
        on_change: Callable[[], Any] | None = None,
    ) -> None:
        self._fetch_command = fetch_command
        self._toggle_command = toggle_command
        self._delete_command = delete_command
        self._clear_command = clear_command
        self._find_query = find_query
        self._confirmation = confirmation
        self._status = status
        self.on_change = on_change

    def render(self) -> None:
        if self.on_change is not None:
            self.on_change()

    async def fetch_and_store(self) -> bool:
        self._status.report(MSG_FETCHING)
        try:
            todos = await self._fetch_command.execute()
        except TodoFetchError as exc:
            logger.exception("Fetching todos failed")
            self._status.report(MSG_FETCH_FAILED.format(error=exc), is_error=True)
            return False
        except TodoStorageError as exc:
            self._report_storage_failure(exc)
            return False
        self._status.report(MSG_SAVED.format(count=len(todos)))
        self.render()
        return True

    def toggle_completed(self, todo_id: Any, completed: Any) -> bool:
        try:
            self._toggle_command.execute(ToggleTodoRequest.create(todo_id, completed))
        except TodoNotFoundError:
            logger.info("Toggle skipped, todo %r not found", todo_id)
            self._status.report(MSG_NOT_FOUND, is_error=True)
            return False
        except TodoStorageError as exc:
            self._report_storage_failure(exc)
            return False
        self.render()
        return True

    async def delete_todo(self, todo_id: Any) -> bool:
        if self._find_query.execute(todo_id) is None:
            self._status.report(MSG_NOT_FOUND, is_error=True)
            return False
        if not await self._confirmation.confirm(CONFIRM_DELETE):
            return False
        try:
            self._delete_command.execute(DeleteTodoRequest.create(todo_id))
        except TodoNotFoundError:
            # removed elsewhere while the dialog was open
            self._status.report(MSG_NOT_FOUND, is_error=True)
            self.render()
            return False
        except TodoStorageError as exc:
            self._report_storage_failure(exc)
            return False
        self._status.report(MSG_DELETED)
        self.render()
        return True

    async def clear_all(self) -> bool:
        if not await self._confirmation.confirm(CONFIRM_CLEAR):
            return False
        try:
            self._clear_command.execute()
        except TodoStorageError as exc:
            self._report_storage_failure(exc)
            return False
        self._status.report(MSG_CLEARED)
        self.render()
        return True

    def _report_storage_failure(self, exc: TodoStorageError) -> None:
        logger.exception("Writing todos to storage failed")
        self._status.report(MSG_STORAGE_FAILED.format(error=exc.__cause__ or exc), is_error=True)
