"""
Continent API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Response, status

from core.db import Database, get_db

from . import schemas, service

router = APIRouter()


@router.post("/continentes", status_code=status.HTTP_201_CREATED)
async def create_continent(
    payload: schemas.ContinentCreate,
    db: Database = Depends(get_db),
) -> schemas.ContinentResponse:
    return await service.create_continent(db, payload)


@router.get("/continentes")
async def list_continents(
    nome: str = Query(default="", max_length=200),
    db: Database = Depends(get_db),
) -> list[schemas.ContinentResponse]:
    """
    All continents ordered by name; `nome` narrows to a substring match.
    """
    return await service.list_continents(db, name_filter=nome)


@router.get("/continentes/{continent_id}")
async def get_continent(
    continent_id: int,
    db: Database = Depends(get_db),
) -> schemas.ContinentResponse:
    return await service.get_continent(db, continent_id)


@router.put("/continentes/{continent_id}")
async def update_continent(
    continent_id: int,
    payload: schemas.ContinentUpdate,
    db: Database = Depends(get_db),
) -> schemas.ContinentResponse:
    return await service.update_continent(db, continent_id, payload)


@router.delete("/continentes/{continent_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_continent(
    continent_id: int,
    db: Database = Depends(get_db),
) -> Response:
    await service.delete_continent(db, continent_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
