"""Port interface for place suggestion providers (remote service or local catalog)."""

from abc import ABC, abstractmethod

from wayfinder.domain.value_objects.suggestion_result import SuggestionResult


class SuggestionProvider(ABC):
    @abstractmethod
    async def suggest(self, query: str) -> SuggestionResult:
        """Return suggestions for an already-validated query.

        Providers fail soft: only a configuration problem is reported as an
        error variant, everything else yields an empty result.
        """
        ...
