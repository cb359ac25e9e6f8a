"""
Country API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Response, status

from core.db import Database, get_db
from enrichment import workflow

from . import schemas, service

router = APIRouter()


@router.post("/paises", status_code=status.HTTP_201_CREATED)
async def create_country(
    payload: schemas.CountryCreate,
    response: Response,
    db: Database = Depends(get_db),
) -> schemas.CountryResponse:
    """
    Create a country, then try to attach a photo of it.

    The photo step is best-effort; see `enrichment.workflow`.
    """
    country = await service.create_country(db, payload)

    async def persist(photo: dict) -> schemas.CountryResponse:
        return await service.apply_update(db, country.id, photo)

    country, outcome = await workflow.attach_photo(
        country,
        kind="pais",
        entity_id=country.id,
        search_term=country.nome,
        persist=persist,
        already_has_photo=bool(payload.foto_url),
    )
    response.headers[workflow.PHOTO_HEADER] = outcome.value
    return country


@router.get("/paises")
async def list_countries(
    nome: str = Query(default="", max_length=200),
    db: Database = Depends(get_db),
) -> list[schemas.CountryResponse]:
    return await service.list_countries(db, name_filter=nome)


@router.get("/paises/{country_id}")
async def get_country(
    country_id: int,
    db: Database = Depends(get_db),
) -> schemas.CountryResponse:
    return await service.get_country(db, country_id)


@router.put("/paises/{country_id}")
async def update_country(
    country_id: int,
    payload: schemas.CountryUpdate,
    db: Database = Depends(get_db),
) -> schemas.CountryResponse:
    return await service.update_country(db, country_id, payload)


@router.delete("/paises/{country_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_country(
    country_id: int,
    db: Database = Depends(get_db),
) -> Response:
    await service.delete_country(db, country_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
