"""Domain enums — pure Python, no external dependencies."""

from enum import Enum


class SuggestionMode(str, Enum):
    REMOTE = "remote"
    LOCAL = "local"


class ProbeFailure(str, Enum):
    TIMEOUT = "timeout"
    NO_CONNECTION = "no_connection"
    SERVER_ERROR = "server_error"
    HTTP_ERROR = "http_error"
    UNKNOWN = "unknown"


class IconCategory(str, Enum):
    TOURIST_ATTRACTION = "tourist_attraction"
    ESTABLISHMENT = "establishment"
    NATURAL_FEATURE = "natural_feature"
    PLACE_OF_WORSHIP = "place_of_worship"
    PARK = "park"
    MUSEUM = "museum"
    LOCALITY = "locality"
    LOCATION = "location"

    @property
    def icon_name(self) -> str:
        """Glyph name in the app's outline icon set."""
        return _ICON_NAMES[self]


_ICON_NAMES: dict[IconCategory, str] = {
    IconCategory.TOURIST_ATTRACTION: "camera-outline",
    IconCategory.ESTABLISHMENT: "business-outline",
    IconCategory.NATURAL_FEATURE: "leaf-outline",
    IconCategory.PLACE_OF_WORSHIP: "library-outline",
    IconCategory.PARK: "tree-outline",
    IconCategory.MUSEUM: "library-outline",
    IconCategory.LOCALITY: "location-outline",
    IconCategory.LOCATION: "location-outline",
}
