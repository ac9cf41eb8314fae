"""
Chromalens personalization endpoints.
Usage tracking, favorites, color of the day and mood palettes.
"""
from typing import List

from fastapi import APIRouter, HTTPException, Query
from loguru import logger

from app.schemas import (
    DailyColorResponse, PreferencesResponse, TrackUsageRequest, UsageStatsResponse,
)
from app.services.personalization import MOOD_PALETTES, get_personalization

router = APIRouter(prefix="/v1/personalization", tags=["personalization"])


@router.post("/track", response_model=UsageStatsResponse, summary="Track color usage")
def track_usage(body: TrackUsageRequest) -> UsageStatsResponse:
    tracker = get_personalization()
    if not tracker.track_color_usage(body.color):
        raise HTTPException(status_code=400, detail=f"Invalid color: {body.color!r}")

    logger.debug(f"Tracked usage of {body.color}")
    return UsageStatsResponse(**tracker.get_usage_stats())


@router.get("/stats", response_model=UsageStatsResponse, summary="Usage statistics")
def usage_stats() -> UsageStatsResponse:
    return UsageStatsResponse(**get_personalization().get_usage_stats())


@router.get("/favorites", response_model=List[str], summary="Most used colors")
def favorites(limit: int = Query(10, ge=1, le=100)) -> List[str]:
    return get_personalization().get_favorite_colors(limit)


@router.get("/daily", response_model=DailyColorResponse, summary="Color of the day")
def daily_color() -> DailyColorResponse:
    return DailyColorResponse(**get_personalization().get_daily_color())


@router.get("/moods", response_model=List[str], summary="Available moods")
def moods() -> List[str]:
    return list(MOOD_PALETTES)


@router.get("/moods/{mood}", response_model=List[str], summary="Mood palette")
def mood_colors(mood: str) -> List[str]:
    return get_personalization().get_mood_colors(mood)


@router.get("/preferences", response_model=PreferencesResponse, summary="Preference analysis")
def preferences() -> PreferencesResponse:
    analysis = get_personalization().analyze_preferences()
    if analysis is None:
        raise HTTPException(status_code=404, detail="No color usage tracked yet")
    return PreferencesResponse(**analysis)
