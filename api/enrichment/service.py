"""
Enrichment lookups (weather by coordinates, photo by search term).

Provider payloads are reduced to the few fields the catalog stores or shows.
Nothing here writes to the database; callers decide what to persist.
"""

from __future__ import annotations

from typing import Any

from core import errors, openweather, unsplash

from . import schemas

DEFAULT_PHOTO_DESCRIPTION = "Sem descrição"


def _to_weather_response(data: dict[str, Any]) -> schemas.WeatherResponse:
    conditions = data.get("weather") or [{}]
    main = data.get("main") or {}
    wind = data.get("wind") or {}
    return schemas.WeatherResponse(
        clima_descricao=conditions[0].get("description"),
        temperatura=main.get("temp"),
        sensacao_termica=main.get("feels_like"),
        temp_min=main.get("temp_min"),
        temp_max=main.get("temp_max"),
        pressao=main.get("pressure"),
        umidade=main.get("humidity"),
        vento_velocidade=wind.get("speed"),
        local=data.get("name"),
    )


def _to_photo_response(photo: dict[str, Any]) -> schemas.PhotoResponse:
    user = photo.get("user") or {}
    foto_url = (photo.get("urls") or {}).get("regular")
    fotografo_nome = user.get("name")
    fotografo_perfil = (user.get("links") or {}).get("html")
    if not (foto_url and fotografo_nome and fotografo_perfil):
        raise errors.ExternalServiceError(
            "Unsplash retornou uma foto sem URL ou sem dados do fotógrafo.",
            status_code=502,
            details=photo,
        )
    return schemas.PhotoResponse(
        foto_url=str(foto_url),
        foto_descricao=photo.get("alt_description") or photo.get("description") or DEFAULT_PHOTO_DESCRIPTION,
        fotografo_nome=str(fotografo_nome),
        fotografo_perfil=str(fotografo_perfil),
    )


async def lookup_weather(latitude: float | None, longitude: float | None) -> schemas.WeatherResponse:
    if latitude is None or longitude is None:
        raise errors.ValidationError("Parâmetros 'lat' e 'lon' são obrigatórios.")
    data = await openweather.current_weather(latitude=latitude, longitude=longitude)
    return _to_weather_response(data)


async def lookup_photo(search_term: str | None) -> schemas.PhotoResponse:
    term = (search_term or "").strip()
    if not term:
        raise errors.ValidationError("O parâmetro 'query' (termo de busca) é obrigatório.")

    results = await unsplash.search_photos(term, per_page=1)
    if not results:
        raise errors.NotFoundError(f'Nenhuma foto encontrada para "{term}".')
    return _to_photo_response(results[0])
