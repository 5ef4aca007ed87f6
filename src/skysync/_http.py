"""HTTP transports shared by the Open-Meteo and Nominatim clients.

Every failure leaves this module as a :class:`~skysync.exceptions.SkySyncError`:
transport problems, error statuses and bodies that are not JSON alike.
"""

from __future__ import annotations

import contextlib
from collections.abc import Iterator
from typing import Any

import httpx

from skysync.exceptions import (
    SkySyncAPIError,
    SkySyncConnectionError,
    SkySyncDecodeError,
    SkySyncTimeoutError,
)

DEFAULT_TIMEOUT = 30.0

Params = list[tuple[str, str]]


@contextlib.contextmanager
def _translate_errors(endpoint: str) -> Iterator[None]:
    """Re-raise httpx failures as client exceptions."""
    try:
        yield
    except httpx.TimeoutException as exc:
        raise SkySyncTimeoutError(f"{endpoint}: {exc}") from exc
    except httpx.HTTPError as exc:
        # ConnectError, ReadError, RemoteProtocolError, too many redirects...
        raise SkySyncConnectionError(f"{endpoint}: {type(exc).__name__}: {exc}") from exc


def _error_message(response: httpx.Response) -> str:
    """Pull the upstream's own explanation out of an error response.

    Open-Meteo answers ``{"error": true, "reason": "..."}``; Nominatim uses
    ``{"error": {"message": "..."}}`` or a plain ``{"error": "..."}``.
    """
    try:
        body = response.json()
    except ValueError:
        return response.text
    if isinstance(body, dict):
        if isinstance(body.get("reason"), str):
            return body["reason"]
        error = body.get("error")
        if isinstance(error, dict) and isinstance(error.get("message"), str):
            return error["message"]
        if isinstance(error, str):
            return error
    return response.text


def _decode(response: httpx.Response) -> Any:
    """Check the status and return the parsed JSON body."""
    if response.is_error:
        raise SkySyncAPIError(
            status_code=response.status_code,
            message=_error_message(response),
        )
    try:
        return response.json()
    except ValueError as exc:
        raise SkySyncDecodeError(
            response.status_code, response.headers.get("content-type"),
        ) from exc


def _client_options(
    base_url: str, timeout: float, headers: dict[str, str] | None,
) -> dict[str, Any]:
    merged = {"Accept": "application/json"}
    merged.update(headers or {})
    return {"base_url": base_url, "timeout": timeout, "headers": merged}


class SyncTransport:
    """Blocking transport over a pooled ``httpx.Client``."""

    def __init__(
        self,
        base_url: str,
        timeout: float = DEFAULT_TIMEOUT,
        headers: dict[str, str] | None = None,
    ) -> None:
        self._client = httpx.Client(**_client_options(base_url, timeout, headers))

    def get(self, endpoint: str, params: Params) -> Any:
        with _translate_errors(endpoint):
            response = self._client.get(endpoint, params=params)
        return _decode(response)

    def close(self) -> None:
        self._client.close()


class AsyncTransport:
    """Non-blocking transport over a pooled ``httpx.AsyncClient``."""

    def __init__(
        self,
        base_url: str,
        timeout: float = DEFAULT_TIMEOUT,
        headers: dict[str, str] | None = None,
    ) -> None:
        self._client = httpx.AsyncClient(**_client_options(base_url, timeout, headers))

    async def get(self, endpoint: str, params: Params) -> Any:
        with _translate_errors(endpoint):
            response = await self._client.get(endpoint, params=params)
        return _decode(response)

    async def close(self) -> None:
        await self._client.aclose()
