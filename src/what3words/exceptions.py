"""Custom exception hierarchy for what3words."""

from __future__ import annotations

from typing import Optional


class What3wordsError(Exception):
    """Base exception for all what3words errors."""


class NetworkError(What3wordsError):
    """The API host could not be reached, or the request timed out."""

    def __init__(self, url: str, detail: str):
        self.url = url
        super().__init__(f"Network error calling {url}: {detail}")


class HttpError(What3wordsError):
    """The request failed at the HTTP level without a usable error body."""

    def __init__(self, url: str, detail: str, status_code: Optional[int] = None):
        self.url = url
        self.status_code = status_code
        super().__init__(f"HTTP error calling {url}: {detail}")


class ApiError(What3wordsError):
    """The API answered with an error payload, e.g. BadWords or InvalidKey."""

    def __init__(self, code: str, message: str, status_code: int):
        self.code = code
        self.message = message
        self.status_code = status_code
        super().__init__(f"What3words error: {code} - {message}")


class DecodeError(What3wordsError):
    """A successful response body did not match the expected shape."""

    def __init__(self, url: str, detail: str):
        self.url = url
        super().__init__(f"Could not decode response from {url}: {detail}")
