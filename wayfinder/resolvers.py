"""Function surface for callers that do not want to wire use cases themselves.

    base_url = await resolve_endpoint(["192.168.8.142", "localhost"], "health", 2000, "localhost")
    result = await resolve_suggestions("Galle", SuggestionMode.LOCAL)
    icon = classify(["museum", "tourist_attraction"])
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from wayfinder.adapters.places.google_places_adapter import GooglePlacesAdapter
from wayfinder.adapters.places.local_catalog_adapter import LocalCatalogAdapter
from wayfinder.adapters.probe.httpx_probe import HttpxLivenessProbe
from wayfinder.application.ports.liveness_probe import LivenessProbePort
from wayfinder.application.ports.suggestion_provider import SuggestionProvider
from wayfinder.application.use_cases.resolve_endpoint import ResolveEndpointUseCase
from wayfinder.application.use_cases.resolve_suggestions import ResolveSuggestionsUseCase
from wayfinder.domain.policies.icon_classifier import classify
from wayfinder.domain.value_objects.endpoint import (
    DEFAULT_PORT,
    DEFAULT_PROBE_PATH,
    DEFAULT_PROBE_TIMEOUT_MS,
    EndpointProbeConfig,
)
from wayfinder.domain.value_objects.enums import SuggestionMode
from wayfinder.domain.value_objects.suggestion_result import SuggestionResult

__all__ = ["classify", "default_providers", "resolve_endpoint", "resolve_suggestions"]


async def resolve_endpoint(
    candidates: Sequence[str],
    probe_path: str = DEFAULT_PROBE_PATH,
    timeout_ms: int = DEFAULT_PROBE_TIMEOUT_MS,
    fallback: str = "localhost",
    *,
    port: int = DEFAULT_PORT,
    secure: bool = False,
    probe: LivenessProbePort | None = None,
) -> str:
    """Return the base URL of the first reachable candidate, or of the fallback."""
    config = EndpointProbeConfig(
        candidates=tuple(candidates),
        fallback=fallback,
        probe_path=probe_path,
        timeout_ms=timeout_ms,
        port=port,
        secure=secure,
    )
    resolved = await ResolveEndpointUseCase(probe or HttpxLivenessProbe()).execute(config)
    return resolved.base_url


def default_providers() -> dict[SuggestionMode, SuggestionProvider]:
    return {
        SuggestionMode.REMOTE: GooglePlacesAdapter(),
        SuggestionMode.LOCAL: LocalCatalogAdapter(),
    }


async def resolve_suggestions(
    query: str,
    mode: SuggestionMode,
    *,
    providers: Mapping[SuggestionMode, SuggestionProvider] | None = None,
) -> SuggestionResult:
    use_case = ResolveSuggestionsUseCase(default_providers() if providers is None else providers)
    return await use_case.execute(query, mode)
