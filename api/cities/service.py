"""
City business logic.
"""

from __future__ import annotations

import logging

from core import errors
from core.db import Database
from core.payloads import changed_fields, to_columns
from enrichment import service as enrichment_service

from . import repository, schemas

REQUIRED_FIELDS = ("id_pais", "nome")

NOT_FOUND_MESSAGE = "Cidade não encontrada."

logger = logging.getLogger(__name__)


def _to_response(row: dict) -> schemas.CityResponse:
    return schemas.CityResponse.model_validate(row)


async def get_city(db: Database, city_id: int) -> schemas.CityResponse:
    row = await repository.get_city(db, city_id)
    if row is None:
        raise errors.NotFoundError(NOT_FOUND_MESSAGE)
    return _to_response(row)


async def create_city(db: Database, payload: schemas.CityCreate) -> schemas.CityResponse:
    city_id = await repository.insert_city(db, to_columns(payload.model_dump()))
    return await get_city(db, city_id)


async def list_cities(db: Database, *, name_filter: str = "") -> list[schemas.CityResponse]:
    rows = await repository.list_cities(db, name_filter=name_filter.strip())
    return [_to_response(row) for row in rows]


async def update_city(
    db: Database,
    city_id: int,
    payload: schemas.CityUpdate,
) -> schemas.CityResponse:
    fields = changed_fields(payload, required=REQUIRED_FIELDS)
    return await apply_update(db, city_id, fields)


async def apply_update(db: Database, city_id: int, fields: dict) -> schemas.CityResponse:
    updated = await repository.update_city(db, city_id, fields)
    if not updated:
        raise errors.NotFoundError(NOT_FOUND_MESSAGE)
    return await get_city(db, city_id)


async def delete_city(db: Database, city_id: int) -> None:
    deleted = await repository.delete_city(db, city_id)
    if not deleted:
        raise errors.NotFoundError(NOT_FOUND_MESSAGE)


async def refresh_weather(db: Database, city_id: int) -> schemas.CityResponse:
    """
    Fetch current weather for the city's coordinates and store the snapshot.
    """
    city = await get_city(db, city_id)
    if city.latitude is None or city.longitude is None:
        raise errors.ValidationError(
            f"A cidade {city.nome} não possui dados de Latitude e Longitude cadastrados."
        )

    snapshot = await enrichment_service.lookup_weather(city.latitude, city.longitude)
    updated = await apply_update(
        db,
        city_id,
        {
            "clima_descricao": snapshot.clima_descricao,
            "temperatura": snapshot.temperatura,
            "umidade": snapshot.umidade,
            "vento_velocidade": snapshot.vento_velocidade,
        },
    )
    logger.info("weather_snapshot_stored city_id=%s place=%s", city_id, snapshot.local)
    return updated
