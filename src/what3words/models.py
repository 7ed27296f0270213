"""Typed response models for what3words."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


@dataclass(frozen=True)
class Coordinates:
    """A WGS84 point."""

    lat: float
    lng: float

    @classmethod
    def from_dict(cls, data: dict) -> Coordinates:
        return cls(lat=float(data["lat"]), lng=float(data["lng"]))

    def to_param(self) -> str:
        """Render as the API's ``lat,lng`` query form."""
        return f"{self.lat},{self.lng}"

    def to_dict(self) -> dict:
        return {"lat": self.lat, "lng": self.lng}


@dataclass(frozen=True)
class Square:
    """The 3m x 3m grid square an address names."""

    southwest: Coordinates
    northeast: Coordinates

    @classmethod
    def from_dict(cls, data: dict) -> Square:
        return cls(
            southwest=Coordinates.from_dict(data["southwest"]),
            northeast=Coordinates.from_dict(data["northeast"]),
        )

    def to_dict(self) -> dict:
        return {
            "southwest": self.southwest.to_dict(),
            "northeast": self.northeast.to_dict(),
        }


@dataclass(frozen=True)
class Address:
    """Result of convert-to-3wa / convert-to-coordinates in JSON format."""

    words: str
    country: str
    nearest_place: str
    language: str
    coordinates: Coordinates
    square: Square
    map: str
    locale: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> Address:
        return cls(
            words=data["words"],
            country=data["country"],
            nearest_place=data["nearestPlace"],
            language=data["language"],
            coordinates=Coordinates.from_dict(data["coordinates"]),
            square=Square.from_dict(data["square"]),
            map=data["map"],
            locale=data.get("locale"),
        )

    def to_dict(self) -> dict:
        """Convert to a plain dictionary (useful for JSON serialisation)."""
        out = {
            "words": self.words,
            "country": self.country,
            "nearestPlace": self.nearest_place,
            "language": self.language,
            "coordinates": self.coordinates.to_dict(),
            "square": self.square.to_dict(),
            "map": self.map,
        }
        if self.locale is not None:
            out["locale"] = self.locale
        return out


@dataclass(frozen=True)
class Suggestion:
    """One ranked autosuggest candidate."""

    words: str
    country: str
    nearest_place: str
    rank: int
    language: str
    distance_to_focus_km: Optional[float] = None
    square: Optional[Square] = None
    coordinates: Optional[Coordinates] = None
    map: Optional[str] = None
    locale: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> Suggestion:
        square = data.get("square")
        coords = data.get("coordinates")
        return cls(
            words=data["words"],
            country=data["country"],
            nearest_place=data["nearestPlace"],
            rank=int(data["rank"]),
            language=data["language"],
            distance_to_focus_km=data.get("distanceToFocusKm"),
            square=Square.from_dict(square) if square else None,
            coordinates=Coordinates.from_dict(coords) if coords else None,
            map=data.get("map"),
            locale=data.get("locale"),
        )

    def to_dict(self) -> dict:
        out: dict[str, Any] = {
            "words": self.words,
            "country": self.country,
            "nearestPlace": self.nearest_place,
            "rank": self.rank,
            "language": self.language,
        }
        optional = {
            "distanceToFocusKm": self.distance_to_focus_km,
            "square": self.square.to_dict() if self.square else None,
            "coordinates": self.coordinates.to_dict() if self.coordinates else None,
            "map": self.map,
            "locale": self.locale,
        }
        out.update((k, v) for k, v in optional.items() if v is not None)
        return out


@dataclass(frozen=True)
class AutosuggestResult:
    """Response of autosuggest and autosuggest-with-coordinates."""

    suggestions: tuple[Suggestion, ...] = ()

    @classmethod
    def from_dict(cls, data: dict) -> AutosuggestResult:
        return cls(
            suggestions=tuple(
                Suggestion.from_dict(s) for s in data["suggestions"]
            )
        )

    @property
    def best(self) -> Optional[Suggestion]:
        """The top-ranked suggestion, or None when there are none."""
        return self.suggestions[0] if self.suggestions else None

    def to_dict(self) -> dict:
        return {"suggestions": [s.to_dict() for s in self.suggestions]}


@dataclass(frozen=True)
class Language:
    code: str
    name: str
    native_name: str
    locales: tuple[Language, ...] = ()

    @classmethod
    def from_dict(cls, data: dict) -> Language:
        return cls(
            code=data["code"],
            name=data["name"],
            native_name=data["nativeName"],
            locales=tuple(
                Language.from_dict(loc) for loc in data.get("locales", [])
            ),
        )

    def to_dict(self) -> dict:
        out: dict[str, Any] = {
            "code": self.code,
            "name": self.name,
            "nativeName": self.native_name,
        }
        if self.locales:
            out["locales"] = [loc.to_dict() for loc in self.locales]
        return out


@dataclass(frozen=True)
class AvailableLanguages:
    languages: tuple[Language, ...] = ()

    @classmethod
    def from_dict(cls, data: dict) -> AvailableLanguages:
        return cls(
            languages=tuple(Language.from_dict(lang) for lang in data["languages"])
        )

    def to_dict(self) -> dict:
        return {"languages": [lang.to_dict() for lang in self.languages]}


@dataclass(frozen=True)
class Line:
    start: Coordinates
    end: Coordinates

    @classmethod
    def from_dict(cls, data: dict) -> Line:
        return cls(
            start=Coordinates.from_dict(data["start"]),
            end=Coordinates.from_dict(data["end"]),
        )

    def to_dict(self) -> dict:
        return {"start": self.start.to_dict(), "end": self.end.to_dict()}


@dataclass(frozen=True)
class GridSection:
    """Grid lines inside a bounding box, JSON format."""

    lines: tuple[Line, ...] = ()

    @classmethod
    def from_dict(cls, data: dict) -> GridSection:
        return cls(lines=tuple(Line.from_dict(line) for line in data["lines"]))

    def to_dict(self) -> dict:
        return {"lines": [line.to_dict() for line in self.lines]}


@dataclass(frozen=True)
class Feature:
    """A single GeoJSON feature; geometry and properties are kept raw."""

    geometry: dict
    properties: dict
    type: str = "Feature"
    bbox: Optional[tuple[float, ...]] = None

    @classmethod
    def from_dict(cls, data: dict) -> Feature:
        bbox = data.get("bbox")
        return cls(
            geometry=dict(data["geometry"]),
            properties=dict(data.get("properties") or {}),
            type=data.get("type", "Feature"),
            bbox=tuple(bbox) if bbox is not None else None,
        )

    def to_dict(self) -> dict:
        out: dict[str, Any] = {
            "type": self.type,
            "geometry": dict(self.geometry),
            "properties": dict(self.properties),
        }
        if self.bbox is not None:
            out["bbox"] = list(self.bbox)
        return out


@dataclass(frozen=True)
class FeatureCollection:
    """Any endpoint's response in GeoJSON format."""

    features: tuple[Feature, ...] = ()
    type: str = "FeatureCollection"
    bbox: Optional[tuple[float, ...]] = None
    raw: dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @classmethod
    def from_dict(cls, data: dict) -> FeatureCollection:
        bbox = data.get("bbox")
        return cls(
            features=tuple(Feature.from_dict(f) for f in data["features"]),
            type=data.get("type", "FeatureCollection"),
            bbox=tuple(bbox) if bbox is not None else None,
            raw=dict(data),
        )

    def to_dict(self) -> dict:
        """The GeoJSON document as received, or rebuilt from the features."""
        if self.raw:
            return dict(self.raw)
        out: dict[str, Any] = {
            "type": self.type,
            "features": [f.to_dict() for f in self.features],
        }
        if self.bbox is not None:
            out["bbox"] = list(self.bbox)
        return out


class AddressCheck(Enum):
    """Outcome of confirming a candidate address against the API."""

    CONFIRMED = "confirmed"
    NOT_AN_ADDRESS = "not_an_address"
    LOOKUP_FAILED = "lookup_failed"
