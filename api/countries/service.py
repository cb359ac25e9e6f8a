"""
Country business logic.
"""

from __future__ import annotations

from core import errors
from core.db import Database
from core.payloads import changed_fields, to_columns

from . import repository, schemas

REQUIRED_FIELDS = ("id_continente", "nome", "populacao_total", "idioma_oficial", "moeda")

NOT_FOUND_MESSAGE = "País não encontrado."


def _to_response(row: dict) -> schemas.CountryResponse:
    return schemas.CountryResponse.model_validate(row)


async def get_country(db: Database, country_id: int) -> schemas.CountryResponse:
    row = await repository.get_country(db, country_id)
    if row is None:
        raise errors.NotFoundError(NOT_FOUND_MESSAGE)
    return _to_response(row)


async def create_country(db: Database, payload: schemas.CountryCreate) -> schemas.CountryResponse:
    """
    Insert a country and return it with its continent embedded.

    An unknown `id_continente` surfaces as InvalidReferenceError.
    """
    country_id = await repository.insert_country(db, to_columns(payload.model_dump()))
    return await get_country(db, country_id)


async def list_countries(db: Database, *, name_filter: str = "") -> list[schemas.CountryResponse]:
    rows = await repository.list_countries(db, name_filter=name_filter.strip())
    return [_to_response(row) for row in rows]


async def update_country(
    db: Database,
    country_id: int,
    payload: schemas.CountryUpdate,
) -> schemas.CountryResponse:
    fields = changed_fields(payload, required=REQUIRED_FIELDS)
    return await apply_update(db, country_id, fields)


async def apply_update(db: Database, country_id: int, fields: dict) -> schemas.CountryResponse:
    """
    Write already-validated columns and re-read the joined row.
    """
    updated = await repository.update_country(db, country_id, fields)
    if not updated:
        raise errors.NotFoundError(NOT_FOUND_MESSAGE)
    return await get_country(db, country_id)


async def delete_country(db: Database, country_id: int) -> None:
    deleted = await repository.delete_country(db, country_id)
    if not deleted:
        raise errors.NotFoundError(NOT_FOUND_MESSAGE)
