"""What3words clients — the main entry points for the library."""

from __future__ import annotations

import logging
from typing import Callable, Optional, Union

import httpx

from what3words import validation
from what3words._http import _AsyncSession, _SyncSession, build_headers
from what3words.exceptions import What3wordsError
from what3words.models import (
    Address,
    AddressCheck,
    AutosuggestResult,
    AvailableLanguages,
    FeatureCollection,
    GridSection,
)
from what3words.options import (
    Autosuggest,
    AutosuggestSelection,
    BoundingBox,
    ConvertTo3wa,
    ConvertToCoordinates,
    Format,
)

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.what3words.com/v3"
_DEFAULT_TIMEOUT = 10.0

# (endpoint path, query params, parser)
_Request = tuple[str, Optional[dict], Callable[[dict], object]]


def _ignore(_payload: dict) -> None:
    return None


def _formatted(params: dict, format: Union[Format, str]) -> dict:
    params["format"] = Format(format).value
    return params


def _parser(format: Union[Format, str], json_parser: Callable[[dict], object]):
    if Format(format) is Format.JSON:
        return json_parser
    return FeatureCollection.from_dict


def _convert_to_3wa(options: ConvertTo3wa, format: Union[Format, str]) -> _Request:
    parser = _parser(format, Address.from_dict)
    return "convert-to-3wa", _formatted(options.to_params(), format), parser


def _convert_to_coordinates(
    options: ConvertToCoordinates, format: Union[Format, str]
) -> _Request:
    parser = _parser(format, Address.from_dict)
    return "convert-to-coordinates", _formatted(options.to_params(), format), parser


def _grid_section(bounding_box: BoundingBox, format: Union[Format, str]) -> _Request:
    parser = _parser(format, GridSection.from_dict)
    params = _formatted({"bounding-box": bounding_box.to_param()}, format)
    return "grid-section", params, parser


def _as_options(options: Union[Autosuggest, str]) -> Autosuggest:
    return Autosuggest(options) if isinstance(options, str) else options


def _suggestion_matches(text: str, result: Optional[AutosuggestResult]) -> AddressCheck:
    best = result.best if result is not None else None
    if best is not None and best.words == text.strip():
        return AddressCheck.CONFIRMED
    return AddressCheck.NOT_AN_ADDRESS


class _AddressHelpers:
    """Offline 3wa recognition, shared by both clients."""

    @staticmethod
    def is_possible_address(text: str) -> bool:
        return validation.is_possible_address(text)

    @staticmethod
    def did_you_mean(text: str) -> bool:
        return validation.did_you_mean(text)

    @staticmethod
    def find_possible_addresses(text: str) -> list[str]:
        return validation.find_possible_addresses(text)


class What3words(_AddressHelpers):
    """
    Blocking client for the what3words v3 API.

    The underlying ``httpx.Client`` is opened on first use; close it with
    ``close()`` or by using the client as a context manager.
    """

    def __init__(
        self,
        api_key: str,
        host: str = DEFAULT_API_URL,
        headers: Optional[dict[str, str]] = None,
        timeout: float = _DEFAULT_TIMEOUT,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self._session = _SyncSession(
            host, build_headers(api_key, headers or {}), timeout, transport
        )

    @property
    def host(self) -> str:
        return self._session.base_url

    @property
    def headers(self) -> dict[str, str]:
        return self._session.headers

    def header(self, name: str, value: str) -> What3words:
        """Send an extra header with every request. Returns self."""
        self._session.headers[name] = value
        return self

    def hostname(self, host: str) -> What3words:
        """Point the client at another API host. Returns self."""
        self._session.base_url = host.rstrip("/")
        return self

    # ── API endpoints ─────────────────────────────────────────────

    def convert_to_3wa(
        self, options: ConvertTo3wa, format: Union[Format, str] = Format.JSON
    ) -> Union[Address, FeatureCollection]:
        return self._session.get(*_convert_to_3wa(options, format))

    def convert_to_coordinates(
        self,
        options: ConvertToCoordinates,
        format: Union[Format, str] = Format.JSON,
    ) -> Union[Address, FeatureCollection]:
        return self._session.get(*_convert_to_coordinates(options, format))

    def available_languages(self) -> AvailableLanguages:
        return self._session.get(
            "available-languages", None, AvailableLanguages.from_dict
        )

    def grid_section(
        self, bounding_box: BoundingBox, format: Union[Format, str] = Format.JSON
    ) -> Union[GridSection, FeatureCollection]:
        return self._session.get(*_grid_section(bounding_box, format))

    def autosuggest(self, options: Union[Autosuggest, str]) -> AutosuggestResult:
        return self._session.get(
            "autosuggest",
            _as_options(options).to_params(),
            AutosuggestResult.from_dict,
        )

    def autosuggest_with_coordinates(
        self, options: Union[Autosuggest, str]
    ) -> AutosuggestResult:
        return self._session.get(
            "autosuggest-with-coordinates",
            _as_options(options).to_params(),
            AutosuggestResult.from_dict,
        )

    def autosuggest_selection(self, selection: AutosuggestSelection) -> None:
        self._session.get("autosuggest-selection", selection.to_params(), _ignore)

    # ── Address confirmation ──────────────────────────────────────

    def confirm_address(self, text: str) -> AddressCheck:
        """
        Check *text* against the API, keeping lookup failures distinct.

        No request is made unless *text* passes is_possible_address.
        """
        if not validation.is_possible_address(text):
            return AddressCheck.NOT_AN_ADDRESS
        try:
            result = self.autosuggest(Autosuggest(text, n_result=1))
        except What3wordsError as exc:
            logger.warning("Could not confirm %r: %s", text, exc)
            return AddressCheck.LOOKUP_FAILED
        return _suggestion_matches(text, result)

    def is_valid_address(self, text: str) -> bool:
        """
        Return True if *text* is a real three word address.

        A failed lookup also returns False; use confirm_address to tell
        the two apart.
        """
        return self.confirm_address(text) is AddressCheck.CONFIRMED

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> What3words:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()


class AsyncWhat3words(_AddressHelpers):
    """Asynchronous twin of What3words, backed by ``httpx.AsyncClient``."""

    def __init__(
        self,
        api_key: str,
        host: str = DEFAULT_API_URL,
        headers: Optional[dict[str, str]] = None,
        timeout: float = _DEFAULT_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._session = _AsyncSession(
            host, build_headers(api_key, headers or {}), timeout, transport
        )

    @property
    def host(self) -> str:
        return self._session.base_url

    @property
    def headers(self) -> dict[str, str]:
        return self._session.headers

    def header(self, name: str, value: str) -> AsyncWhat3words:
        self._session.headers[name] = value
        return self

    def hostname(self, host: str) -> AsyncWhat3words:
        self._session.base_url = host.rstrip("/")
        return self

    # ── API endpoints ─────────────────────────────────────────────

    async def convert_to_3wa(
        self, options: ConvertTo3wa, format: Union[Format, str] = Format.JSON
    ) -> Union[Address, FeatureCollection]:
        return await self._session.get(*_convert_to_3wa(options, format))

    async def convert_to_coordinates(
        self,
        options: ConvertToCoordinates,
        format: Union[Format, str] = Format.JSON,
    ) -> Union[Address, FeatureCollection]:
        return await self._session.get(*_convert_to_coordinates(options, format))

    async def available_languages(self) -> AvailableLanguages:
        return await self._session.get(
            "available-languages", None, AvailableLanguages.from_dict
        )

    async def grid_section(
        self, bounding_box: BoundingBox, format: Union[Format, str] = Format.JSON
    ) -> Union[GridSection, FeatureCollection]:
        return await self._session.get(*_grid_section(bounding_box, format))

    async def autosuggest(
        self, options: Union[Autosuggest, str]
    ) -> AutosuggestResult:
        return await self._session.get(
            "autosuggest",
            _as_options(options).to_params(),
            AutosuggestResult.from_dict,
        )

    async def autosuggest_with_coordinates(
        self, options: Union[Autosuggest, str]
    ) -> AutosuggestResult:
        return await self._session.get(
            "autosuggest-with-coordinates",
            _as_options(options).to_params(),
            AutosuggestResult.from_dict,
        )

    async def autosuggest_selection(self, selection: AutosuggestSelection) -> None:
        await self._session.get(
            "autosuggest-selection", selection.to_params(), _ignore
        )

    # ── Address confirmation ──────────────────────────────────────

    async def confirm_address(self, text: str) -> AddressCheck:
        if not validation.is_possible_address(text):
            return AddressCheck.NOT_AN_ADDRESS
        try:
            result = await self.autosuggest(Autosuggest(text, n_result=1))
        except What3wordsError as exc:
            logger.warning("Could not confirm %r: %s", text, exc)
            return AddressCheck.LOOKUP_FAILED
        return _suggestion_matches(text, result)

    async def is_valid_address(self, text: str) -> bool:
        return await self.confirm_address(text) is AddressCheck.CONFIRMED

    async def aclose(self) -> None:
        await self._session.aclose()

    async def __aenter__(self) -> AsyncWhat3words:
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.aclose()
