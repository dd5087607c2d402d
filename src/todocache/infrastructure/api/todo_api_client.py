from __future__ import annotations

import logging
from typing import Any

import httpx

from todocache.domain.todo.exceptions.todo_exceptions import TodoFetchError

logger = logging.getLogger(__name__)


class TodoApiClient:
    """Reads the remote todo collection with a single GET."""

    def __init__(
        self,
        url: str,
        timeout_s: float | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        url = (url or "").strip()
        if not url:
            raise ValueError("Missing url")
        self._url = url
        self._timeout_s = timeout_s
        self._client = client

    @property
    def url(self) -> str:
        return self._url

    async def fetch_all(self) -> list[Any]:
        logger.info("Fetching todos from %s", self._url)
        try:
            if self._client is not None:
                resp = await self._client.get(self._url)
            else:
                async with httpx.AsyncClient(timeout=self._timeout_s) as client:
                    resp = await client.get(self._url)
            resp.raise_for_status()
            data = resp.json()
        except httpx.HTTPStatusError as exc:
            raise TodoFetchError(f"HTTP {exc.response.status_code}") from exc
        except httpx.HTTPError as exc:
            raise TodoFetchError(str(exc) or type(exc).__name__) from exc
        except ValueError as exc:
            raise TodoFetchError("Antwort ist kein gültiges JSON") from exc

        if not isinstance(data, list):
            raise TodoFetchError("Antwort ist keine Liste")
        logger.debug("Received %d todos", len(data))
        return data
