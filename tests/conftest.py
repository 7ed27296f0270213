"""Shared test fixtures — canned API payloads behind a mocked transport."""

from __future__ import annotations

from typing import Optional

import httpx
import pytest

API_KEY = "TEST_API_KEY"
BASE_URL = "https://api.test/v3"

ADDRESS = {
    "country": "GB",
    "square": {
        "southwest": {"lng": -0.203607, "lat": 51.521241},
        "northeast": {"lng": -0.203575, "lat": 51.521261},
    },
    "nearestPlace": "Bayswater, London",
    "coordinates": {"lng": -0.203586, "lat": 51.521251},
    "words": "filled.count.soap",
    "language": "en",
    "map": "https://w3w.co/filled.count.soap",
}

ADDRESS_GEOJSON = {
    "type": "FeatureCollection",
    "features": [
        {
            "bbox": [-0.203607, 51.521241, -0.203575, 51.521261],
            "geometry": {"coordinates": [-0.203586, 51.521251], "type": "Point"},
            "type": "Feature",
            "properties": {
                "country": "GB",
                "nearestPlace": "Bayswater, London",
                "words": "filled.count.soap",
                "language": "en",
                "map": "https://w3w.co/filled.count.soap",
            },
        }
    ],
}

SUGGESTIONS = {
    "suggestions": [
        {
            "country": "GB",
            "nearestPlace": "Bayswater, London",
            "words": "filled.count.soap",
            "rank": 1,
            "language": "en",
        }
    ]
}

LANGUAGES = {
    "languages": [
        {"nativeName": "English", "code": "en", "name": "English"},
        {"nativeName": "Français", "code": "fr", "name": "French"},
    ]
}

GRID_SECTION = {
    "lines": [
        {
            "start": {"lng": 0.116126, "lat": 52.207988},
            "end": {"lng": 0.11754, "lat": 52.208867},
        }
    ]
}


class FakeAPI:
    """
    Serves canned responses keyed by endpoint name and records every
    request it receives, so tests can assert on what was sent.
    """

    def __init__(self):
        self._routes: dict[str, tuple[int, Optional[dict], bytes]] = {}
        self._failures: dict[str, Exception] = {}
        self.requests: list[httpx.Request] = []

    def add(
        self,
        endpoint: str,
        json: Optional[dict] = None,
        status: int = 200,
        content: bytes = b"",
    ) -> None:
        self._routes[endpoint] = (status, json, content)

    def fail(self, endpoint: str, exc: Exception) -> None:
        self._failures[endpoint] = exc

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        endpoint = request.url.path.rsplit("/", 1)[-1]
        if endpoint in self._failures:
            raise self._failures[endpoint]
        if endpoint not in self._routes:
            return httpx.Response(
                404,
                json={"error": {"code": "NotFound", "message": "no route"}},
            )
        status, body, content = self._routes[endpoint]
        if body is not None:
            return httpx.Response(status, json=body)
        return httpx.Response(status, content=content)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture()
def api() -> FakeAPI:
    """A fake API with the usual endpoints wired up."""
    fake = FakeAPI()
    fake.add("convert-to-3wa", ADDRESS)
    fake.add("convert-to-coordinates", ADDRESS)
    fake.add("autosuggest", SUGGESTIONS)
    fake.add("autosuggest-with-coordinates", SUGGESTIONS)
    fake.add("autosuggest-selection")
    fake.add("available-languages", LANGUAGES)
    fake.add("grid-section", GRID_SECTION)
    return fake


@pytest.fixture()
def client(api: FakeAPI):
    """A blocking client talking to the fake API."""
    from what3words import What3words

    c = What3words(API_KEY, host=BASE_URL, transport=api.transport)
    yield c
    c.close()


@pytest.fixture()
def async_client(api: FakeAPI):
    """An async client talking to the fake API; close it inside the test."""
    from what3words import AsyncWhat3words

    return AsyncWhat3words(API_KEY, host=BASE_URL, transport=api.transport)
