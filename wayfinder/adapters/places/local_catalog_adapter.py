"""Local catalog adapter — offline SuggestionProvider over a fixed set of places."""

from __future__ import annotations

from wayfinder.application.ports.suggestion_provider import SuggestionProvider
from wayfinder.domain.entities.place_suggestion import PlaceSuggestion
from wayfinder.domain.value_objects.suggestion_result import SuggestionResult

# Well-known Sri Lankan destinations, in display order
LOCAL_CATALOG: tuple[PlaceSuggestion, ...] = (
    PlaceSuggestion(
        id="1", description="Galle Fort, Galle, Sri Lanka",
        primary_label="Galle Fort", secondary_label="Galle, Sri Lanka",
        type_tags=("tourist_attraction", "establishment"),
    ),
    PlaceSuggestion(
        id="2", description="Sigiriya Rock Fortress, Dambulla, Sri Lanka",
        primary_label="Sigiriya Rock Fortress", secondary_label="Dambulla, Sri Lanka",
        type_tags=("tourist_attraction", "establishment"),
    ),
    PlaceSuggestion(
        id="3", description="Temple of the Sacred Tooth Relic, Kandy, Sri Lanka",
        primary_label="Temple of the Sacred Tooth Relic", secondary_label="Kandy, Sri Lanka",
        type_tags=("place_of_worship", "tourist_attraction"),
    ),
    PlaceSuggestion(
        id="4", description="Ella Rock, Ella, Sri Lanka",
        primary_label="Ella Rock", secondary_label="Ella, Sri Lanka",
        type_tags=("natural_feature", "tourist_attraction"),
    ),
    PlaceSuggestion(
        id="5", description="Yala National Park, Tissamaharama, Sri Lanka",
        primary_label="Yala National Park", secondary_label="Tissamaharama, Sri Lanka",
        type_tags=("park", "tourist_attraction"),
    ),
    PlaceSuggestion(
        id="6", description="Pinnawala Elephant Orphanage, Kegalle, Sri Lanka",
        primary_label="Pinnawala Elephant Orphanage", secondary_label="Kegalle, Sri Lanka",
        type_tags=("tourist_attraction", "establishment"),
    ),
    PlaceSuggestion(
        id="7", description="Nuwara Eliya, Central Province, Sri Lanka",
        primary_label="Nuwara Eliya", secondary_label="Central Province, Sri Lanka",
        type_tags=("locality", "political"),
    ),
    PlaceSuggestion(
        id="8", description="Mirissa Beach, Mirissa, Sri Lanka",
        primary_label="Mirissa Beach", secondary_label="Mirissa, Sri Lanka",
        type_tags=("natural_feature", "establishment"),
    ),
    PlaceSuggestion(
        id="9", description="Adam's Peak, Ratnapura, Sri Lanka",
        primary_label="Adam's Peak", secondary_label="Ratnapura, Sri Lanka",
        type_tags=("natural_feature", "establishment"),
    ),
    PlaceSuggestion(
        id="10", description="Colombo National Museum, Colombo, Sri Lanka",
        primary_label="Colombo National Museum", secondary_label="Colombo, Sri Lanka",
        type_tags=("museum", "tourist_attraction"),
    ),
    PlaceSuggestion(
        id="11", description="Bentota Beach, Bentota, Sri Lanka",
        primary_label="Bentota Beach", secondary_label="Bentota, Sri Lanka",
        type_tags=("natural_feature", "establishment"),
    ),
    PlaceSuggestion(
        id="12", description="Polonnaruwa Ancient City, Polonnaruwa, Sri Lanka",
        primary_label="Polonnaruwa Ancient City", secondary_label="Polonnaruwa, Sri Lanka",
        type_tags=("tourist_attraction", "establishment"),
    ),
)


class LocalCatalogAdapter(SuggestionProvider):
    """Substring search over a static catalog; no I/O, cannot fail."""

    def __init__(self, catalog: tuple[PlaceSuggestion, ...] = LOCAL_CATALOG):
        self._catalog = catalog

    async def suggest(self, query: str) -> SuggestionResult:
        return SuggestionResult.of(self.search(query))

    def search(self, query: str) -> list[PlaceSuggestion]:
        """Case-insensitive hit on either the description or the primary label."""
        needle = query.lower()
        return [
            place for place in self._catalog
            if needle in place.description.lower() or needle in place.primary_label.lower()
        ]
