"""SuggestionResult — suggestions, or a configuration error that must stay visible.

Every other failure (network, parse, non-OK provider status) is collapsed
into an empty result by the providers themselves.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from wayfinder.domain.entities.place_suggestion import PlaceSuggestion
from wayfinder.domain.errors import ConfigurationError


@dataclass(frozen=True)
class SuggestionResult:
    suggestions: tuple[PlaceSuggestion, ...] = field(default_factory=tuple)
    error: ConfigurationError | None = None

    @classmethod
    def of(cls, suggestions: Iterable[PlaceSuggestion]) -> SuggestionResult:
        return cls(suggestions=tuple(suggestions))

    @classmethod
    def empty(cls) -> SuggestionResult:
        return cls()

    @classmethod
    def configuration_error(cls, setting: str, message: str) -> SuggestionResult:
        return cls(error=ConfigurationError(setting, message))

    @property
    def is_configuration_error(self) -> bool:
        return self.error is not None

    def raise_for_error(self) -> SuggestionResult:
        """Raise the configuration error if present, else return self."""
        if self.error is not None:
            raise self.error
        return self

    def __iter__(self) -> Iterator[PlaceSuggestion]:
        return iter(self.suggestions)

    def __len__(self) -> int:
        return len(self.suggestions)

    def __bool__(self) -> bool:
        # The error variant stays truthy so `result or fallback` cannot hide it
        return bool(self.suggestions) or self.error is not None
