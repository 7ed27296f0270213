"""Tests for what3words.models and what3words.options."""

import pytest

from conftest import ADDRESS, ADDRESS_GEOJSON, GRID_SECTION, LANGUAGES, SUGGESTIONS
from what3words.models import (
    Address,
    AutosuggestResult,
    AvailableLanguages,
    Coordinates,
    Feature,
    FeatureCollection,
    GridSection,
    Language,
    Suggestion,
)
from what3words.options import (
    Autosuggest,
    AutosuggestSelection,
    BoundingBox,
    ConvertTo3wa,
    ConvertToCoordinates,
)


class TestAddress:
    def test_from_dict(self):
        address = Address.from_dict(ADDRESS)
        assert address.words == "filled.count.soap"
        assert address.coordinates == Coordinates(51.521251, -0.203586)
        assert address.square.southwest.lat == 51.521241
        assert address.locale is None

    def test_to_dict_round_trips_api_keys(self):
        assert Address.from_dict(ADDRESS).to_dict() == ADDRESS

    def test_missing_field_raises(self):
        with pytest.raises(KeyError):
            Address.from_dict({"words": "filled.count.soap"})


class TestSuggestions:
    def test_optional_fields_default_to_none(self):
        suggestion = Suggestion.from_dict(SUGGESTIONS["suggestions"][0])
        assert suggestion.rank == 1
        assert suggestion.square is None
        assert suggestion.coordinates is None
        assert suggestion.distance_to_focus_km is None

    def test_with_coordinates(self):
        data = dict(
            SUGGESTIONS["suggestions"][0],
            coordinates={"lat": 51.521251, "lng": -0.203586},
            square=ADDRESS["square"],
            distanceToFocusKm=3,
        )
        suggestion = Suggestion.from_dict(data)
        assert suggestion.coordinates.lng == -0.203586
        assert suggestion.square.northeast.lng == -0.203575
        assert suggestion.distance_to_focus_km == 3

    def test_best(self):
        assert AutosuggestResult.from_dict(SUGGESTIONS).best.words == (
            "filled.count.soap"
        )
        assert AutosuggestResult.from_dict({"suggestions": []}).best is None


class TestLanguages:
    def test_available_languages(self):
        langs = AvailableLanguages.from_dict(LANGUAGES)
        assert langs.languages[0] == Language("en", "English", "English")

    def test_locales(self):
        lang = Language.from_dict(
            {
                "code": "mn",
                "name": "Mongolian",
                "nativeName": "Монгол",
                "locales": [
                    {"code": "mn_la", "name": "Mongolian (Latin)", "nativeName": "Монгол (Латинаар)"},
                ],
            }
        )
        assert lang.locales[0].code == "mn_la"


class TestFeatureCollection:
    def test_from_dict(self):
        fc = FeatureCollection.from_dict(ADDRESS_GEOJSON)
        assert fc.type == "FeatureCollection"
        assert fc.features[0].geometry["type"] == "Point"
        assert fc.features[0].bbox == (-0.203607, 51.521241, -0.203575, 51.521261)
        assert fc.raw == ADDRESS_GEOJSON


class TestToDict:
    def test_autosuggest_result(self):
        assert AutosuggestResult.from_dict(SUGGESTIONS).to_dict() == SUGGESTIONS

    def test_suggestion_optional_fields(self):
        data = dict(
            SUGGESTIONS["suggestions"][0],
            coordinates={"lat": 51.521251, "lng": -0.203586},
            distanceToFocusKm=3,
        )
        assert Suggestion.from_dict(data).to_dict() == data

    def test_available_languages(self):
        assert AvailableLanguages.from_dict(LANGUAGES).to_dict() == LANGUAGES

    def test_grid_section(self):
        assert GridSection.from_dict(GRID_SECTION).to_dict() == GRID_SECTION

    def test_feature_collection_without_raw(self):
        feature = Feature(
            geometry={"type": "Point", "coordinates": [-0.203586, 51.521251]},
            properties={"words": "filled.count.soap"},
        )
        assert FeatureCollection(features=(feature,)).to_dict() == {
            "type": "FeatureCollection",
            "features": [
                {
                    "type": "Feature",
                    "geometry": {
                        "type": "Point",
                        "coordinates": [-0.203586, 51.521251],
                    },
                    "properties": {"words": "filled.count.soap"},
                }
            ],
        }


class TestOptions:
    def test_convert_to_3wa(self):
        assert ConvertTo3wa(51.5, -0.19, locale="mn_la").to_params() == {
            "coordinates": "51.5,-0.19",
            "locale": "mn_la",
        }

    def test_convert_to_coordinates(self):
        assert ConvertToCoordinates("filled.count.soap").to_params() == {
            "words": "filled.count.soap"
        }

    def test_bounding_box(self):
        bbox = BoundingBox(52.207988, 0.116126, 52.208867, 0.11754)
        assert bbox.to_param() == "52.207988,0.116126,52.208867,0.11754"

    def test_autosuggest_minimal(self):
        assert Autosuggest("filled.count.so").to_params() == {
            "input": "filled.count.so"
        }

    def test_autosuggest_full(self):
        options = Autosuggest(
            "filled.count.so",
            n_result=3,
            focus=Coordinates(51.520847, -0.195521),
            n_focus_result=1,
            clip_to_country=["GB"],
            clip_to_bounding_box=BoundingBox(51.0, -1.0, 52.0, 0.0),
            clip_to_circle=(Coordinates(51.5, -0.1), 10),
            clip_to_polygon=[
                Coordinates(51.0, -1.0),
                Coordinates(52.0, -1.0),
                Coordinates(51.0, -1.0),
            ],
            input_type="text",
            language="en",
            prefer_land=False,
            locale="en",
        )
        assert options.to_params() == {
            "input": "filled.count.so",
            "n-result": "3",
            "focus": "51.520847,-0.195521",
            "n-focus-result": "1",
            "clip-to-country": "GB",
            "clip-to-bounding-box": "51.0,-1.0,52.0,0.0",
            "clip-to-circle": "51.5,-0.1,10",
            "clip-to-polygon": "51.0,-1.0,52.0,-1.0,51.0,-1.0",
            "input-type": "text",
            "language": "en",
            "prefer-land": "false",
            "locale": "en",
        }

    def test_with_input_keeps_other_options(self):
        options = Autosuggest("a.b.c", n_result=2).with_input("d.e.f")
        assert options.input == "d.e.f"
        assert options.n_result == 2

    def test_selection(self):
        suggestion = Suggestion.from_dict(SUGGESTIONS["suggestions"][0])
        selection = AutosuggestSelection(
            "f.f.f", suggestion, options=Autosuggest("f.f.f", clip_to_country=["GB"])
        )
        assert selection.to_params() == {
            "raw-input": "f.f.f",
            "selection": "filled.count.soap",
            "rank": "1",
            "source-api": "text",
            "clip-to-country": "GB",
        }
