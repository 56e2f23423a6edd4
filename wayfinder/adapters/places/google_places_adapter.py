"""Google Places Autocomplete adapter — implements SuggestionProvider."""

from __future__ import annotations

import logging

import httpx

from wayfinder.application.ports.suggestion_provider import SuggestionProvider
from wayfinder.config import PLACES_API_KEY_PLACEHOLDER, settings
from wayfinder.domain.entities.place_suggestion import PlaceSuggestion
from wayfinder.domain.value_objects.suggestion_result import SuggestionResult

logger = logging.getLogger(__name__)

AUTOCOMPLETE_PATH = "/autocomplete/json"


class GooglePlacesAdapter(SuggestionProvider):
    """Google Places Autocomplete implementation of SuggestionProvider."""

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        place_types: str | None = None,
        components: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._api_key = settings.google_places_api_key if api_key is None else api_key
        self._base_url = (base_url or settings.places_base_url).rstrip("/")
        self._place_types = place_types or settings.places_types
        self._components = components or settings.places_components
        self._timeout = timeout or settings.places_timeout_s
        self._transport = transport

    @property
    def autocomplete_url(self) -> str:
        return f"{self._base_url}{AUTOCOMPLETE_PATH}"

    async def suggest(self, query: str) -> SuggestionResult:
        """Fetch autocomplete predictions for ``query``.

        Non-OK statuses (ZERO_RESULTS, OVER_QUERY_LIMIT, ...) and any
        network or parse failure produce an empty result. A missing or
        placeholder API key is reported as a configuration error instead,
        without touching the network.
        """
        key = (self._api_key or "").strip()
        if not key or key == PLACES_API_KEY_PLACEHOLDER:
            return SuggestionResult.configuration_error(
                "GOOGLE_PLACES_API_KEY",
                "Google Places API key is not configured",
            )

        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.get(
                    self.autocomplete_url,
                    params={
                        "input": query,
                        "types": self._place_types,
                        "components": self._components,
                        "key": key,
                    },
                    timeout=self._timeout,
                )
                response.raise_for_status()
                data = response.json()

            status = data.get("status")
            if status != "OK":
                logger.info("Google Places returned %s for '%s'", status, query)
                return SuggestionResult.empty()

            suggestions = [self._map_prediction(p) for p in data.get("predictions") or []]
            logger.info("Google Places resolved '%s' → %d predictions", query, len(suggestions))
            return SuggestionResult.of(suggestions)

        except Exception:
            logger.exception("Google Places API error for '%s'", query)
            return SuggestionResult.empty()

    @staticmethod
    def _map_prediction(prediction: dict) -> PlaceSuggestion:
        """Normalize one provider prediction.

        Labels come from ``structured_formatting``; when the provider omits
        it, the description is split at its first comma instead.
        """
        description = prediction["description"]
        formatting = prediction.get("structured_formatting")
        if formatting:
            primary = formatting.get("main_text") or description
            secondary = formatting.get("secondary_text") or ""
        else:
            primary, _, secondary = description.partition(",")
            primary, secondary = primary.strip(), secondary.strip()

        return PlaceSuggestion(
            id=prediction["place_id"],
            description=description,
            primary_label=primary,
            secondary_label=secondary,
            type_tags=tuple(prediction.get("types") or ()),
        )
