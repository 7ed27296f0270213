"""what3words — recognise, validate and resolve three word addresses."""

__version__ = "1.0.0"

from what3words.client import DEFAULT_API_URL, AsyncWhat3words, What3words
from what3words.exceptions import (
    ApiError,
    DecodeError,
    HttpError,
    NetworkError,
    What3wordsError,
)
from what3words.models import (
    Address,
    AddressCheck,
    AutosuggestResult,
    AvailableLanguages,
    Coordinates,
    Feature,
    FeatureCollection,
    GridSection,
    Language,
    Line,
    Square,
    Suggestion,
)
from what3words.options import (
    Autosuggest,
    AutosuggestSelection,
    BoundingBox,
    ConvertTo3wa,
    ConvertToCoordinates,
    Format,
)
from what3words.validation import (
    did_you_mean,
    dotted_address,
    find_possible_addresses,
    is_possible_address,
)

__all__ = [
    "What3words",
    "AsyncWhat3words",
    "DEFAULT_API_URL",
    "is_possible_address",
    "did_you_mean",
    "dotted_address",
    "find_possible_addresses",
    "Address",
    "AddressCheck",
    "AutosuggestResult",
    "AvailableLanguages",
    "Coordinates",
    "Feature",
    "FeatureCollection",
    "GridSection",
    "Language",
    "Line",
    "Square",
    "Suggestion",
    "Autosuggest",
    "AutosuggestSelection",
    "BoundingBox",
    "ConvertTo3wa",
    "ConvertToCoordinates",
    "Format",
    "What3wordsError",
    "NetworkError",
    "HttpError",
    "ApiError",
    "DecodeError",
]
