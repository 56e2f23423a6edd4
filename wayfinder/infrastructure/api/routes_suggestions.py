"""Location suggestion and icon endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from wayfinder.application.use_cases.resolve_suggestions import ResolveSuggestionsUseCase
from wayfinder.config import Settings
from wayfinder.domain.entities.place_suggestion import PlaceSuggestion
from wayfinder.domain.policies.icon_classifier import classify
from wayfinder.domain.value_objects.enums import SuggestionMode
from wayfinder.infrastructure.api.dependencies import get_resolve_suggestions_uc, get_settings

logger = logging.getLogger(__name__)

router = APIRouter(tags=["suggestions"])


@router.get("/suggestions")
async def search_suggestions(
    q: str = Query(default=""),
    mode: SuggestionMode | None = Query(default=None),
    use_case: ResolveSuggestionsUseCase = Depends(get_resolve_suggestions_uc),
    app_settings: Settings = Depends(get_settings),
):
    """Autocomplete a free-text location query.

    A misconfigured provider is reported as 503 outside production so it is
    noticed before shipping; in production the search box just gets nothing.
    """
    effective_mode = mode or use_case.default_mode
    result = await use_case.execute(q, effective_mode)

    if result.is_configuration_error:
        if not app_settings.is_production:
            raise HTTPException(
                status_code=503,
                detail={"error": "configuration", "setting": result.error.setting, "message": result.error.message},
            )
        logger.error("Returning empty suggestions in production: %s", result.error)

    suggestions = [_serialize_suggestion(s) for s in result]
    return {
        "query": q,
        "mode": effective_mode.value,
        "total": len(suggestions),
        "suggestions": suggestions,
    }


@router.get("/icon")
async def icon_for_types(types: list[str] = Query(default=[])):
    category = classify(types)
    return {"icon": category.value, "icon_name": category.icon_name}


def _serialize_suggestion(s: PlaceSuggestion) -> dict:
    icon = s.icon
    return {
        "id": s.id,
        "description": s.description,
        "primary_label": s.primary_label,
        "secondary_label": s.secondary_label,
        "type_tags": list(s.type_tags),
        "icon": icon.value,
        "icon_name": icon.icon_name,
    }
