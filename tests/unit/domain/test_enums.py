"""Tests for domain enums."""

from wayfinder.domain.value_objects.enums import IconCategory, ProbeFailure, SuggestionMode


def test_suggestion_mode_values():
    assert SuggestionMode.REMOTE.value == "remote"
    assert SuggestionMode.LOCAL.value == "local"
    assert SuggestionMode("local") is SuggestionMode.LOCAL


def test_icon_category_count():
    assert len(IconCategory) == 8


def test_icon_names():
    assert IconCategory.TOURIST_ATTRACTION.icon_name == "camera-outline"
    assert IconCategory.ESTABLISHMENT.icon_name == "business-outline"
    assert IconCategory.NATURAL_FEATURE.icon_name == "leaf-outline"
    assert IconCategory.PARK.icon_name == "tree-outline"
    assert IconCategory.LOCATION.icon_name == "location-outline"


def test_worship_and_museum_share_an_icon():
    assert IconCategory.PLACE_OF_WORSHIP.icon_name == IconCategory.MUSEUM.icon_name == "library-outline"


def test_probe_failure_values():
    assert {f.value for f in ProbeFailure} == {
        "timeout", "no_connection", "server_error", "http_error", "unknown",
    }
