"""Low-level HTTP transport layer wrapping httpx."""

from __future__ import annotations

import contextlib
from collections.abc import Iterator
from typing import Any

import httpx

from jolpica_f1.exceptions import (
    JolpicaAPIError,
    JolpicaConnectionError,
    JolpicaRateLimitError,
    JolpicaTimeoutError,
    JolpicaTransportError,
    JolpicaValidationError,
)

DEFAULT_BASE_URL = "https://api.jolpi.ca/ergast/f1"
DEFAULT_TIMEOUT = 30.0

_HEADERS = {"Accept": "application/json"}

# Connect failures and connection resets mid-request.
_CONNECTION_ERRORS = (httpx.ConnectError, httpx.ReadError, httpx.RemoteProtocolError)


@contextlib.contextmanager
def _translate_errors() -> Iterator[None]:
    """Re-raise httpx transport failures as client exceptions."""
    try:
        yield
    except _CONNECTION_ERRORS as exc:
        raise JolpicaConnectionError(str(exc)) from exc
    except httpx.TimeoutException as exc:
        raise JolpicaTimeoutError(str(exc)) from exc
    except httpx.TransportError as exc:
        raise JolpicaTransportError(str(exc)) from exc


def _handle_response(response: httpx.Response) -> dict[str, Any]:
    """Validate response status and return the parsed JSON envelope."""
    if response.status_code == 429:
        raise JolpicaRateLimitError(response.status_code, response.text or "Too Many Requests")
    if response.status_code >= 400:
        raise JolpicaAPIError(response.status_code, response.text)
    try:
        return response.json()  # type: ignore[no-any-return]
    except ValueError as exc:
        raise JolpicaValidationError(f"Response body is not JSON: {exc}") from exc


class SyncTransport:
    """Synchronous HTTP transport using httpx.Client."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._client = httpx.Client(base_url=base_url, timeout=timeout, headers=_HEADERS)

    def get(self, endpoint: str) -> dict[str, Any]:
        with _translate_errors():
            response = self._client.get(endpoint)
        return _handle_response(response)

    def close(self) -> None:
        self._client.close()


class AsyncTransport:
    """Asynchronous HTTP transport using httpx.AsyncClient."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._client = httpx.AsyncClient(base_url=base_url, timeout=timeout, headers=_HEADERS)

    async def get(self, endpoint: str) -> dict[str, Any]:
        with _translate_errors():
            response = await self._client.get(endpoint)
        return _handle_response(response)

    async def close(self) -> None:
        await self._client.aclose()
