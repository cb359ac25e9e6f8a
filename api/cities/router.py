"""
City API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Response, status

from core.db import Database, get_db
from enrichment import workflow

from . import schemas, service

router = APIRouter()


@router.post("/cidades", status_code=status.HTTP_201_CREATED)
async def create_city(
    payload: schemas.CityCreate,
    response: Response,
    db: Database = Depends(get_db),
) -> schemas.CityResponse:
    city = await service.create_city(db, payload)

    async def persist(photo: dict) -> schemas.CityResponse:
        return await service.apply_update(db, city.id, photo)

    city, outcome = await workflow.attach_photo(
        city,
        kind="cidade",
        entity_id=city.id,
        search_term=city.nome,
        persist=persist,
        already_has_photo=bool(payload.foto_url),
    )
    response.headers[workflow.PHOTO_HEADER] = outcome.value
    return city


@router.get("/cidades")
async def list_cities(
    nome: str = Query(default="", max_length=200),
    db: Database = Depends(get_db),
) -> list[schemas.CityResponse]:
    return await service.list_cities(db, name_filter=nome)


@router.get("/cidades/{city_id}")
async def get_city(
    city_id: int,
    db: Database = Depends(get_db),
) -> schemas.CityResponse:
    return await service.get_city(db, city_id)


@router.put("/cidades/{city_id}")
async def update_city(
    city_id: int,
    payload: schemas.CityUpdate,
    db: Database = Depends(get_db),
) -> schemas.CityResponse:
    return await service.update_city(db, city_id, payload)


@router.delete("/cidades/{city_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_city(
    city_id: int,
    db: Database = Depends(get_db),
) -> Response:
    await service.delete_city(db, city_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/cidades/{city_id}/clima")
async def refresh_city_weather(
    city_id: int,
    db: Database = Depends(get_db),
) -> schemas.CityResponse:
    """
    Look up current weather for the city and store it on the record.
    """
    return await service.refresh_weather(db, city_id)
