"""
Enrichment API endpoints (external providers, read-only).
"""

from __future__ import annotations

from fastapi import APIRouter, Query

from . import schemas, service

router = APIRouter()


@router.get("/clima")
async def get_weather(
    lat: float | None = Query(default=None, ge=-90, le=90),
    lon: float | None = Query(default=None, ge=-180, le=180),
) -> schemas.WeatherResponse:
    return await service.lookup_weather(lat, lon)


@router.get("/fotos")
async def get_photo(
    query: str | None = Query(default=None, max_length=200),
) -> schemas.PhotoResponse:
    return await service.lookup_photo(query)
