"""
OpenWeather HTTP client helpers.

Used endpoint:
- GET /data/2.5/weather?lat=..&lon=..&units=metric&lang=pt_br
  -> {"weather": [{"description": ...}], "main": {...}, "wind": {...}, "name": ...}
"""

from __future__ import annotations

from typing import Any

import httpx

from . import errors, settings
from .http import json_body, provider_error, response_details

PROVIDER = "OpenWeather"
UNITS = "metric"
LANG = "pt_br"


async def current_weather(
    *,
    latitude: float,
    longitude: float,
    api_key: str | None = None,
    base_url: str | None = None,
    timeout_s: float | None = None,
) -> dict[str, Any]:
    """
    Fetch the raw current-weather payload for a coordinate pair.
    """
    api_key = api_key if api_key is not None else settings.openweather_api_key()
    if not api_key:
        raise errors.ExternalServiceError(
            "OPENWEATHER_API_KEY não configurada.",
            status_code=503,
        )

    params = {
        "lat": latitude,
        "lon": longitude,
        "appid": api_key,
        "units": UNITS,
        "lang": LANG,
    }

    try:
        async with httpx.AsyncClient(
            base_url=(base_url or settings.openweather_base_url()).rstrip("/"),
            timeout=timeout_s if timeout_s is not None else settings.external_timeout_s(),
        ) as client:
            resp = await client.get("/data/2.5/weather", params=params)
    except httpx.HTTPError as exc:
        raise provider_error(PROVIDER, exc) from exc

    if resp.status_code != 200:
        raise errors.ExternalServiceError(
            "Falha ao obter dados climáticos. Verifique a chave da API ou as coordenadas.",
            status_code=resp.status_code,
            details=response_details(resp),
        )

    data = json_body(PROVIDER, resp)
    if not isinstance(data, dict):
        raise errors.ExternalServiceError(
            "OpenWeather retornou uma resposta inesperada.",
            status_code=502,
            details=data,
        )
    return data
