from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Mapping


def normalize_todo_id(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


@dataclass(frozen=True)
class Todo:
    id: str
    title: str
    completed: bool = False

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Todo":
        title = data.get("title")
        return cls(
            id=normalize_todo_id(data.get("id")),
            title=str(title) if title else "",
            completed=bool(data.get("completed")),
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
