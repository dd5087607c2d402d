from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class UserConfirmation(Protocol):
    """Asks the user a yes/no question. Resolves to ``True`` only on an explicit yes."""

    async def confirm(self, message: str) -> bool:
        ...


@runtime_checkable
class StatusReporter(Protocol):
    """Shows a short, self-expiring status message."""

    def report(self, text: str, is_error: bool = False) -> None:
        ...
