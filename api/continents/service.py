"""
Continent business logic.
"""

from __future__ import annotations

from core import errors
from core.db import Database
from core.payloads import changed_fields, to_columns

from . import repository, schemas

REQUIRED_FIELDS = ("nome", "descricao")

NOT_FOUND_MESSAGE = "Continente não encontrado."


def _to_response(row: dict) -> schemas.ContinentResponse:
    return schemas.ContinentResponse.model_validate(row)


async def create_continent(db: Database, payload: schemas.ContinentCreate) -> schemas.ContinentResponse:
    row = await repository.insert_continent(db, to_columns(payload.model_dump()))
    return _to_response(row)


async def list_continents(db: Database, *, name_filter: str = "") -> list[schemas.ContinentResponse]:
    rows = await repository.list_continents(db, name_filter=name_filter.strip())
    return [_to_response(row) for row in rows]


async def get_continent(db: Database, continent_id: int) -> schemas.ContinentResponse:
    row = await repository.get_continent(db, continent_id)
    if row is None:
        raise errors.NotFoundError(NOT_FOUND_MESSAGE)
    return _to_response(row)


async def update_continent(
    db: Database,
    continent_id: int,
    payload: schemas.ContinentUpdate,
) -> schemas.ContinentResponse:
    fields = changed_fields(payload, required=REQUIRED_FIELDS)
    row = await repository.update_continent(db, continent_id, fields)
    if row is None:
        raise errors.NotFoundError(NOT_FOUND_MESSAGE)
    return _to_response(row)


async def delete_continent(db: Database, continent_id: int) -> None:
    # A continent with countries raises ConflictError from the FK check.
    deleted = await repository.delete_continent(db, continent_id)
    if not deleted:
        raise errors.NotFoundError(NOT_FOUND_MESSAGE)
