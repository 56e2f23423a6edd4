"""IconClassifier — map place type tags to a single display icon category."""

from __future__ import annotations

from collections.abc import Iterable

from wayfinder.domain.value_objects.enums import IconCategory

# Evaluated top to bottom; the first tag present wins.
ICON_PRIORITY: tuple[tuple[str, IconCategory], ...] = (
    ("tourist_attraction", IconCategory.TOURIST_ATTRACTION),
    ("establishment", IconCategory.ESTABLISHMENT),
    ("natural_feature", IconCategory.NATURAL_FEATURE),
    ("place_of_worship", IconCategory.PLACE_OF_WORSHIP),
    ("park", IconCategory.PARK),
    ("museum", IconCategory.MUSEUM),
    ("locality", IconCategory.LOCALITY),
)


def classify(type_tags: Iterable[str]) -> IconCategory:
    """Pick the icon category for a set of provider type tags.

    Only the priority table's order matters, never the order of the input.
    Tags that match nothing (e.g. "political", "geocode") fall through to
    the generic location category.
    """
    tags = set(type_tags)
    for tag, category in ICON_PRIORITY:
        if tag in tags:
            return category
    return IconCategory.LOCATION
