"""Request options for the what3words endpoints.

Each option object renders itself as the API's kebab-case query parameters
via ``to_params()``; options left as None are not sent.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional, Sequence

from what3words.models import Coordinates, Suggestion


class Format(str, Enum):
    """Response shape for endpoints that support both."""

    JSON = "json"
    GEOJSON = "geojson"


def _bool_param(value: bool) -> str:
    return "true" if value else "false"


@dataclass(frozen=True)
class ConvertTo3wa:
    """Options for convert-to-3wa."""

    lat: float
    lng: float
    language: Optional[str] = None
    locale: Optional[str] = None

    def to_params(self) -> dict[str, str]:
        params = {"coordinates": f"{self.lat},{self.lng}"}
        if self.language is not None:
            params["language"] = self.language
        if self.locale is not None:
            params["locale"] = self.locale
        return params


@dataclass(frozen=True)
class ConvertToCoordinates:
    """Options for convert-to-coordinates."""

    words: str
    locale: Optional[str] = None

    def to_params(self) -> dict[str, str]:
        params = {"words": self.words}
        if self.locale is not None:
            params["locale"] = self.locale
        return params


@dataclass(frozen=True)
class BoundingBox:
    """A south-west / north-east rectangle, used by grid-section and clipping."""

    sw_lat: float
    sw_lng: float
    ne_lat: float
    ne_lng: float

    def to_param(self) -> str:
        return f"{self.sw_lat},{self.sw_lng},{self.ne_lat},{self.ne_lng}"


@dataclass(frozen=True)
class Autosuggest:
    """
    Options for autosuggest and autosuggest-with-coordinates.

    Only *input* is required. Clipping options restrict where suggestions
    may come from; *focus* biases ranking towards a point.
    """

    input: str
    n_result: Optional[int] = None
    focus: Optional[Coordinates] = None
    n_focus_result: Optional[int] = None
    clip_to_country: Sequence[str] = field(default_factory=tuple)
    clip_to_bounding_box: Optional[BoundingBox] = None
    clip_to_circle: Optional[tuple[Coordinates, float]] = None
    clip_to_polygon: Sequence[Coordinates] = field(default_factory=tuple)
    input_type: Optional[str] = None
    language: Optional[str] = None
    prefer_land: Optional[bool] = None
    locale: Optional[str] = None

    def with_input(self, text: str) -> Autosuggest:
        """Return a copy of these options searching for *text* instead."""
        return replace(self, input=text)

    def to_params(self) -> dict[str, str]:
        params = {"input": self.input}
        if self.n_result is not None:
            params["n-result"] = str(self.n_result)
        if self.focus is not None:
            params["focus"] = self.focus.to_param()
        if self.n_focus_result is not None:
            params["n-focus-result"] = str(self.n_focus_result)
        if self.clip_to_country:
            params["clip-to-country"] = ",".join(self.clip_to_country)
        if self.clip_to_bounding_box is not None:
            params["clip-to-bounding-box"] = self.clip_to_bounding_box.to_param()
        if self.clip_to_circle is not None:
            centre, radius_km = self.clip_to_circle
            params["clip-to-circle"] = f"{centre.to_param()},{radius_km}"
        if self.clip_to_polygon:
            params["clip-to-polygon"] = ",".join(
                point.to_param() for point in self.clip_to_polygon
            )
        if self.input_type is not None:
            params["input-type"] = self.input_type
        if self.language is not None:
            params["language"] = self.language
        if self.prefer_land is not None:
            params["prefer-land"] = _bool_param(self.prefer_land)
        if self.locale is not None:
            params["locale"] = self.locale
        return params


@dataclass(frozen=True)
class AutosuggestSelection:
    """
    Report which suggestion a user picked for *raw_input*.

    Pass the same Autosuggest *options* that produced the suggestion so the
    API can attribute the selection correctly.
    """

    raw_input: str
    suggestion: Suggestion
    options: Optional[Autosuggest] = None

    def to_params(self) -> dict[str, str]:
        params: dict[str, str] = {}
        if self.options is not None:
            params.update(self.options.to_params())
            params.pop("input", None)
        params.update(
            {
                "raw-input": self.raw_input,
                "selection": self.suggestion.words,
                "rank": str(self.suggestion.rank),
                "source-api": "text",
            }
        )
        return params
