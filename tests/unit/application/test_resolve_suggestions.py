"""Tests for ResolveSuggestionsUseCase with in-memory providers."""

from __future__ import annotations

import pytest

from wayfinder.adapters.places.local_catalog_adapter import LocalCatalogAdapter
from wayfinder.application.use_cases.resolve_suggestions import ResolveSuggestionsUseCase
from wayfinder.domain.entities.place_suggestion import PlaceSuggestion
from wayfinder.domain.value_objects.enums import SuggestionMode
from wayfinder.domain.value_objects.suggestion_result import SuggestionResult
from wayfinder.resolvers import resolve_suggestions

PLACE = PlaceSuggestion(
    id="ChIJ1", description="Galle Fort, Galle, Sri Lanka",
    primary_label="Galle Fort", secondary_label="Galle, Sri Lanka",
    type_tags=("tourist_attraction",),
)


@pytest.fixture
def providers(make_provider):
    return {
        SuggestionMode.REMOTE: make_provider(SuggestionResult.of([PLACE])),
        SuggestionMode.LOCAL: make_provider(SuggestionResult.of([PLACE])),
    }


@pytest.mark.asyncio
@pytest.mark.parametrize("mode", list(SuggestionMode))
@pytest.mark.parametrize("query", ["", "G", "Ga", "  "])
async def test_short_query_is_empty_without_provider_call(providers, mode, query):
    use_case = ResolveSuggestionsUseCase(providers)
    result = await use_case.execute(query, mode)

    assert list(result) == []
    assert result.is_configuration_error is False
    assert providers[SuggestionMode.REMOTE].queries == []
    assert providers[SuggestionMode.LOCAL].queries == []


@pytest.mark.asyncio
async def test_three_characters_reach_the_provider(providers):
    use_case = ResolveSuggestionsUseCase(providers)
    result = await use_case.execute("Gal", SuggestionMode.REMOTE)

    assert list(result) == [PLACE]
    assert providers[SuggestionMode.REMOTE].queries == ["Gal"]
    assert providers[SuggestionMode.LOCAL].queries == []


@pytest.mark.asyncio
async def test_default_mode_used_when_omitted(providers):
    use_case = ResolveSuggestionsUseCase(providers, default_mode=SuggestionMode.LOCAL)
    await use_case.execute("Galle")

    assert providers[SuggestionMode.LOCAL].queries == ["Galle"]
    assert use_case.default_mode == SuggestionMode.LOCAL


@pytest.mark.asyncio
async def test_configuration_error_passes_through(make_provider):
    misconfigured = make_provider(SuggestionResult.configuration_error("GOOGLE_PLACES_API_KEY", "missing"))
    use_case = ResolveSuggestionsUseCase({SuggestionMode.REMOTE: misconfigured})

    result = await use_case.execute("Galle", SuggestionMode.REMOTE)

    assert result.is_configuration_error
    assert result.error.setting == "GOOGLE_PLACES_API_KEY"


@pytest.mark.asyncio
async def test_missing_provider_raises(make_provider):
    use_case = ResolveSuggestionsUseCase({SuggestionMode.LOCAL: make_provider()})
    with pytest.raises(ValueError):
        await use_case.execute("Galle", SuggestionMode.REMOTE)


@pytest.mark.asyncio
async def test_local_mode_is_idempotent():
    providers = {SuggestionMode.LOCAL: LocalCatalogAdapter()}
    first = await resolve_suggestions("Galle", SuggestionMode.LOCAL, providers=providers)
    second = await resolve_suggestions("Galle", SuggestionMode.LOCAL, providers=providers)

    assert first == second
    assert [s.primary_label for s in first] == [s.primary_label for s in second]
    assert len(first) > 0


@pytest.mark.asyncio
async def test_resolve_suggestions_default_providers_local():
    result = await resolve_suggestions("Sigiriya", SuggestionMode.LOCAL)
    assert [s.primary_label for s in result] == ["Sigiriya Rock Fortress"]


@pytest.mark.asyncio
async def test_resolve_suggestions_short_query_local():
    result = await resolve_suggestions("Si", SuggestionMode.LOCAL)
    assert len(result) == 0


@pytest.mark.asyncio
async def test_short_query_is_empty_even_without_provider_for_mode(make_provider):
    use_case = ResolveSuggestionsUseCase({SuggestionMode.LOCAL: make_provider()})
    result = await use_case.execute("Ga", SuggestionMode.REMOTE)
    assert list(result) == []


@pytest.mark.asyncio
async def test_explicit_empty_providers_are_not_replaced_by_defaults():
    with pytest.raises(ValueError):
        await resolve_suggestions("Galle", SuggestionMode.LOCAL, providers={})
