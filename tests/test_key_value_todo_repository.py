from __future__ import annotations

import json
import logging

import pytest

from conftest import FullStore
from todocache.domain.todo.entities.todo import Todo
from todocache.domain.todo.exceptions.todo_exceptions import TodoStorageError
from todocache.domain.todo.repositories.todo_repository import TodoRepository
from todocache.infrastructure.data.repositories.key_value_todo_repository import (
    KeyValueTodoRepository,
)


def test_repository_satisfies_protocol(repo) -> None:
    assert isinstance(repo, TodoRepository)


def test_save_then_load_returns_same_list(repo, sample_todos) -> None:
    repo.save(sample_todos)

    assert repo.load() == sample_todos


def test_save_writes_json_under_key(store, repo, sample_todos) -> None:
    repo.save(sample_todos[:1])

    assert json.loads(store["todos"]) == [{"id": "1", "title": "Einkaufen", "completed": False}]


def test_save_overwrites_previous_value(repo, sample_todos) -> None:
    repo.save(sample_todos)
    repo.save(sample_todos[2:])

    assert repo.load() == sample_todos[2:]


def test_load_missing_key_is_empty(repo) -> None:
    assert repo.load() == []


def test_load_empty_string_is_empty(store, repo) -> None:
    store["todos"] = ""

    assert repo.load() == []


def test_load_corrupt_value_is_empty_and_logged(store, repo, caplog) -> None:
    store["todos"] = "{not json"

    with caplog.at_level(logging.WARNING):
        assert repo.load() == []

    assert "Failed to parse stored todos" in caplog.text


def test_load_wrong_shape_is_empty(store, repo) -> None:
    store["todos"] = json.dumps({"id": 1})
    assert repo.load() == []

    store["todos"] = json.dumps([1, 2, 3])
    assert repo.load() == []


def test_load_normalizes_numeric_ids(store, repo) -> None:
    store["todos"] = json.dumps([{"id": 7, "title": "A", "completed": 0}])

    assert repo.load() == [Todo(id="7", title="A", completed=False)]


def test_clear_removes_key(store, repo, sample_todos) -> None:
    repo.save(sample_todos)
    repo.clear()

    assert "todos" not in store
    assert repo.load() == []


def test_clear_without_data_is_noop(store, repo) -> None:
    repo.clear()

    assert store == {}


def test_custom_key(store, sample_todos) -> None:
    repo = KeyValueTodoRepository(store, key="cache")
    repo.save(sample_todos)

    assert "cache" in store
    assert "todos" not in store


def test_save_failure_raises_storage_error(sample_todos) -> None:
    repo = KeyValueTodoRepository(FullStore())

    with pytest.raises(TodoStorageError) as exc_info:
        repo.save(sample_todos)

    assert isinstance(exc_info.value.__cause__, OSError)


def test_clear_failure_raises_storage_error() -> None:
    with pytest.raises(TodoStorageError):
        KeyValueTodoRepository(FullStore()).clear()
