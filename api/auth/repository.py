"""
Auth persistence helpers.
"""

from __future__ import annotations

from core.db import Database, ViolationMessages

MESSAGES = ViolationMessages(duplicate="Este email já está cadastrado.")


def normalize_email(email: str) -> str:
    return (email or "").strip().lower()


async def create_user(db: Database, *, nome: str, email: str, password_hash: str) -> dict:
    row = await db.fetch_one(
        """
        INSERT INTO usuario (nome, email, senha)
        VALUES ($1, $2, $3)
        RETURNING id, nome, email
        """,
        nome,
        normalize_email(email),
        password_hash,
        messages=MESSAGES,
    )
    if row is None:
        raise RuntimeError("Failed to create user.")
    return row


async def get_user_by_email(db: Database, email: str) -> dict | None:
    return await db.fetch_one(
        """
        SELECT id, nome, email, senha
        FROM usuario
        WHERE lower(email) = lower($1)
        """,
        normalize_email(email),
    )
