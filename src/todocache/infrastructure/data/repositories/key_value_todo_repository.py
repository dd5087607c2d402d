from __future__ import annotations

import json
import logging
from typing import Any, Iterable, MutableMapping

from todocache.domain.todo.entities.todo import Todo
from todocache.domain.todo.exceptions.todo_exceptions import TodoStorageError
from todocache.domain.todo.repositories.todo_repository import TodoRepository

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "todos"


class KeyValueTodoRepository(TodoRepository):
    """Stores the whole todo list as one JSON string under a single key.

    ``store`` is any mutable mapping; in the app it is NiceGUI's
    ``app.storage.user``, which is scoped to the browser.
    """

    def __init__(self, store: MutableMapping[str, Any], key: str = DEFAULT_STORAGE_KEY) -> None:
        self._store = store
        self._key = key

    @property
    def key(self) -> str:
        return self._key

    def save(self, todos: Iterable[Todo]) -> None:
        payload = [todo.to_dict() for todo in todos]
        raw = json.dumps(payload, ensure_ascii=False)
        try:
            self._store[self._key] = raw
        except Exception as exc:
            raise TodoStorageError(f"Todos konnten nicht gespeichert werden: {exc}") from exc

    def load(self) -> list[Todo]:
        raw = self._store.get(self._key)
        if not raw:
            return []
        try:
            data = json.loads(raw)
        except (TypeError, ValueError) as exc:
            logger.warning("Failed to parse stored todos under '%s': %s", self._key, exc)
            return []
        if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
            logger.warning("Stored todos under '%s' are not a list of objects", self._key)
            return []
        return [Todo.from_mapping(item) for item in data]

    def clear(self) -> None:
        try:
            self._store.pop(self._key, None)
        except Exception as exc:
            raise TodoStorageError(f"Todos konnten nicht entfernt werden: {exc}") from exc
