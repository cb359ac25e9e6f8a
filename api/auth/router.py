"""
Auth API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from core.db import Database, get_db

from . import schemas, service

router = APIRouter()


@router.post("/cadastro", status_code=status.HTTP_201_CREATED)
async def register(
    payload: schemas.RegisterRequest,
    db: Database = Depends(get_db),
) -> schemas.UserResponse:
    return await service.register(db, payload)


@router.post("/login")
async def login(
    payload: schemas.LoginRequest,
    db: Database = Depends(get_db),
) -> schemas.LoginResponse:
    return await service.login(db, payload)
