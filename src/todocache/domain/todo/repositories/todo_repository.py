from __future__ import annotations

from typing import Iterable, Protocol, runtime_checkable

from todocache.domain.todo.entities.todo import Todo


@runtime_checkable
class TodoRepository(Protocol):
    """Persistence port for the cached todo list."""

    def save(self, todos: Iterable[Todo]) -> None:
        ...

    def load(self) -> list[Todo]:
        ...

    def clear(self) -> None:
        ...
