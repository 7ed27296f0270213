"""Internal HTTP session management and response decoding."""

from __future__ import annotations

import json
import logging
import platform
from typing import Any, Callable, Optional, TypeVar

import httpx

from what3words import __version__
from what3words.exceptions import ApiError, DecodeError, HttpError, NetworkError

logger = logging.getLogger(__name__)

T = TypeVar("T")

API_KEY_HEADER = "X-Api-Key"
WRAPPER_HEADER = "X-W3W-Wrapper"

_NETWORK_ERRORS = (httpx.NetworkError, httpx.TimeoutException)


def wrapper_id() -> str:
    """Identify this library to the API, e.g. ``what3words-python/1.0.0 (Linux)``."""
    return f"what3words-python/{__version__} ({platform.system() or 'unknown'})"


def build_headers(api_key: str, extra: dict[str, str]) -> dict[str, str]:
    headers = dict(extra)
    headers[WRAPPER_HEADER] = wrapper_id()
    headers[API_KEY_HEADER] = api_key
    return headers


def translate_error(url: str, exc: httpx.HTTPError) -> Exception:
    """Map an httpx failure onto the what3words exception hierarchy."""
    if isinstance(exc, _NETWORK_ERRORS):
        return NetworkError(url, str(exc) or type(exc).__name__)
    return HttpError(url, str(exc) or type(exc).__name__)


def decode(
    response: httpx.Response, parse: Callable[[dict], T]
) -> Optional[T]:
    """
    Turn *response* into a model via *parse*, or raise.

    Non-2xx responses become ApiError when the body carries the API's
    ``{"error": {"code", "message"}}`` payload and HttpError otherwise.
    An empty 2xx body decodes to None.
    """
    url = str(response.request.url)

    if not response.is_success:
        raise _error_from(response, url)

    if not response.content:
        return None

    try:
        payload: Any = response.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise DecodeError(url, f"body is not JSON ({exc})") from exc

    try:
        return parse(payload)
    except (AttributeError, KeyError, TypeError, ValueError) as exc:
        raise DecodeError(url, f"unexpected payload shape ({exc!r})") from exc


def _error_from(response: httpx.Response, url: str) -> Exception:
    status = response.status_code
    try:
        err = response.json()["error"]
        return ApiError(str(err["code"]), str(err["message"]), status)
    except (ValueError, KeyError, TypeError):
        return HttpError(url, f"status {status}", status_code=status)


class _SyncSession:
    """
    Owns a lazily-created ``httpx.Client``.

    Holding one client open across requests reuses the connection pool
    instead of paying for a new TLS handshake per call.
    """

    def __init__(
        self,
        base_url: str,
        headers: dict[str, str],
        timeout: float,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.headers = headers
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.Client | None = None

    def get_client(self) -> httpx.Client:
        """Return an open client, creating one if needed."""
        if self._client is None:
            self._client = httpx.Client(
                timeout=self._timeout, transport=self._transport
            )
        return self._client

    def get(
        self,
        path: str,
        params: Optional[dict[str, str]],
        parse: Callable[[dict], T],
    ) -> Optional[T]:
        url = f"{self.base_url}/{path}"
        logger.debug("GET %s %s", url, params or {})
        try:
            response = self.get_client().get(
                url, params=params, headers=self.headers
            )
        except httpx.HTTPError as exc:
            raise translate_error(url, exc) from exc
        return decode(response, parse)

    def close(self) -> None:
        """Close the client if open."""
        if self._client is not None:
            self._client.close()
            self._client = None


class _AsyncSession:
    """The ``httpx.AsyncClient`` counterpart of _SyncSession."""

    def __init__(
        self,
        base_url: str,
        headers: dict[str, str],
        timeout: float,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.headers = headers
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    def get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport
            )
        return self._client

    async def get(
        self,
        path: str,
        params: Optional[dict[str, str]],
        parse: Callable[[dict], T],
    ) -> Optional[T]:
        url = f"{self.base_url}/{path}"
        logger.debug("GET %s %s", url, params or {})
        try:
            response = await self.get_client().get(
                url, params=params, headers=self.headers
            )
        except httpx.HTTPError as exc:
            raise translate_error(url, exc) from exc
        return decode(response, parse)

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None
