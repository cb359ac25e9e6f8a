"""
Auth business logic.
"""

from __future__ import annotations

import logging

from core import errors
from core.db import Database

from . import repository, schemas, security

logger = logging.getLogger(__name__)


async def register(db: Database, payload: schemas.RegisterRequest) -> schemas.UserResponse:
    existing = await repository.get_user_by_email(db, payload.email)
    if existing is not None:
        raise errors.ConflictError("Este email já está cadastrado.")

    password_hash = security.hash_password(payload.senha)
    # A concurrent registration still hits the unique index -> ConflictError.
    user_row = await repository.create_user(
        db,
        nome=payload.nome,
        email=payload.email,
        password_hash=password_hash,
    )
    logger.info("user_registered user_id=%s", user_row["id"])
    return schemas.UserResponse(
        id=int(user_row["id"]),
        nome=str(user_row["nome"]),
        email=str(user_row["email"]),
    )


async def login(db: Database, payload: schemas.LoginRequest) -> schemas.LoginResponse:
    user_row = await repository.get_user_by_email(db, payload.email)
    if user_row is None:
        raise errors.NotFoundError("Usuário não encontrado.")

    is_valid = security.verify_password(payload.senha, str(user_row.get("senha") or ""))
    if not is_valid:
        logger.info("login_rejected user_id=%s", user_row["id"])
        raise errors.AuthError("Senha incorreta.")

    return schemas.LoginResponse(id=int(user_row["id"]), nome=str(user_row["nome"]))
