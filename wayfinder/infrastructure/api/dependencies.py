"""FastAPI dependency injection — wires adapters into use cases."""

from __future__ import annotations

import logging

from wayfinder.adapters.places.google_places_adapter import GooglePlacesAdapter
from wayfinder.adapters.places.local_catalog_adapter import LocalCatalogAdapter
from wayfinder.adapters.probe.httpx_probe import HttpxLivenessProbe
from wayfinder.application.use_cases.endpoint_session import EndpointSession
from wayfinder.application.use_cases.resolve_endpoint import ResolveEndpointUseCase
from wayfinder.application.use_cases.resolve_suggestions import ResolveSuggestionsUseCase
from wayfinder.config import settings
from wayfinder.domain.value_objects.enums import SuggestionMode

logger = logging.getLogger(__name__)

# Singleton adapters (stateless)
_suggestion_providers = {
    SuggestionMode.REMOTE: GooglePlacesAdapter(),
    SuggestionMode.LOCAL: LocalCatalogAdapter(),
}
_default_mode = settings.default_suggestion_mode
logger.info("Default suggestion mode: %s", _default_mode.value)

_endpoint_session = EndpointSession(
    resolver=ResolveEndpointUseCase(probe=HttpxLivenessProbe()),
    config=settings.endpoint_probe_config(),
)


def get_resolve_suggestions_uc() -> ResolveSuggestionsUseCase:
    return ResolveSuggestionsUseCase(providers=_suggestion_providers, default_mode=_default_mode)


def get_endpoint_session() -> EndpointSession:
    return _endpoint_session


def get_settings():
    return settings
