"""PlaceSuggestion entity — one normalized autocomplete candidate."""

from dataclasses import dataclass, field

from wayfinder.domain.policies.icon_classifier import classify
from wayfinder.domain.value_objects.enums import IconCategory


@dataclass(frozen=True)
class PlaceSuggestion:
    id: str
    description: str
    primary_label: str
    secondary_label: str
    type_tags: tuple[str, ...] = field(default_factory=tuple)

    @property
    def icon(self) -> IconCategory:
        return classify(self.type_tags)
