from __future__ import annotations

from pathlib import Path
import sys

import pytest

pytest_plugins = ["nicegui.testing.user_plugin"]

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from todocache.domain.todo.entities.todo import Todo
from todocache.infrastructure.data.repositories.key_value_todo_repository import (
    KeyValueTodoRepository,
)


class RecordingStatus:
    def __init__(self) -> None:
        self.messages: list[tuple[str, bool]] = []

    def report(self, text: str, is_error: bool = False) -> None:
        self.messages.append((text, is_error))

    @property
    def last(self) -> tuple[str, bool] | None:
        return self.messages[-1] if self.messages else None


class StaticConfirmation:
    def __init__(self, answer: bool = True) -> None:
        self.answer = answer
        self.questions: list[str] = []

    async def confirm(self, message: str) -> bool:
        self.questions.append(message)
        return self.answer


class RenderCounter:
    def __init__(self) -> None:
        self.calls = 0

    def __call__(self) -> None:
        self.calls += 1


@pytest.fixture()
def store() -> dict:
    return {}


@pytest.fixture()
def repo(store: dict) -> KeyValueTodoRepository:
    return KeyValueTodoRepository(store)


@pytest.fixture()
def sample_todos() -> list[Todo]:
    return [
        Todo(id="1", title="Einkaufen", completed=False),
        Todo(id="2", title="Rechnung senden", completed=True),
        Todo(id="3", title="Follow-up", completed=False),
    ]


@pytest.fixture()
def status() -> RecordingStatus:
    return RecordingStatus()


@pytest.fixture()
def confirmation() -> StaticConfirmation:
    return StaticConfirmation(answer=True)


@pytest.fixture()
def render_counter() -> RenderCounter:
    return RenderCounter()


class FullStore(dict):
    def __setitem__(self, key, value) -> None:
        raise OSError("storage full")

    def pop(self, key, default=None):
        raise OSError("storage locked")
