"""ResolveSuggestionsUseCase — validate the query, then delegate to the selected provider."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from wayfinder.application.ports.suggestion_provider import SuggestionProvider
from wayfinder.domain.policies.query_policy import is_searchable
from wayfinder.domain.value_objects.enums import SuggestionMode
from wayfinder.domain.value_objects.suggestion_result import SuggestionResult

logger = logging.getLogger(__name__)


class ResolveSuggestionsUseCase:
    """Mode-agnostic entry point over the remote and local suggestion providers."""

    def __init__(
        self,
        providers: Mapping[SuggestionMode, SuggestionProvider],
        default_mode: SuggestionMode = SuggestionMode.LOCAL,
    ):
        self._providers = dict(providers)
        self._default_mode = default_mode

    @property
    def default_mode(self) -> SuggestionMode:
        return self._default_mode

    async def execute(self, query: str, mode: SuggestionMode | None = None) -> SuggestionResult:
        """Resolve suggestions for ``query``.

        Args:
            query: raw text from the search field.
            mode: provider to use; the configured default when omitted.

        Returns:
            SuggestionResult, empty for queries below the minimum length.

        Raises:
            ValueError: if no provider is registered for the mode and the
                query is long enough to search.
        """
        mode = mode or self._default_mode
        if not is_searchable(query):
            return SuggestionResult.empty()

        provider = self._providers.get(mode)
        if provider is None:
            raise ValueError(f"No suggestion provider registered for mode '{mode.value}'")

        result = await provider.suggest(query)
        if result.is_configuration_error:
            logger.error("Suggestion provider '%s' is misconfigured: %s", mode.value, result.error)
        else:
            logger.debug("Query '%s' (%s) → %d suggestions", query, mode.value, len(result))
        return result
