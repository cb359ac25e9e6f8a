"""
Continent persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from core.db import Database, ViolationMessages, set_clause

MESSAGES = ViolationMessages(
    duplicate="Já existe um continente com este nome.",
    still_referenced="Não é possível excluir o continente pois ele possui países cadastrados.",
    invalid_value="Valor inválido para um dos campos do continente.",
)

_COLUMNS = "id, nome, descricao, area_km2, numero_paises, populacao_total"


async def insert_continent(db: Database, fields: dict[str, Any]) -> dict[str, Any]:
    row = await db.fetch_one(
        f"""
        INSERT INTO continente (nome, descricao, area_km2, numero_paises, populacao_total)
        VALUES ($1, $2, $3, $4, $5)
        RETURNING {_COLUMNS}
        """,
        fields["nome"],
        fields["descricao"],
        fields.get("area_km2"),
        fields.get("numero_paises"),
        fields.get("populacao_total"),
        messages=MESSAGES,
    )
    if row is None:
        raise RuntimeError("Failed to insert continent.")
    return row


async def list_continents(db: Database, *, name_filter: str = "") -> list[dict[str, Any]]:
    return await db.fetch_all(
        f"""
        SELECT {_COLUMNS}
        FROM continente
        WHERE $1 = '' OR nome ILIKE ('%' || $1 || '%')
        ORDER BY nome ASC
        """,
        name_filter,
    )


async def get_continent(db: Database, continent_id: int) -> dict[str, Any] | None:
    return await db.fetch_one(
        f"""
        SELECT {_COLUMNS}
        FROM continente
        WHERE id = $1
        """,
        continent_id,
    )


async def update_continent(db: Database, continent_id: int, fields: dict[str, Any]) -> dict[str, Any] | None:
    """
    Apply a partial update. Returns None when no row has `continent_id`.
    """
    assignments, values = set_clause(fields, start=2)
    return await db.fetch_one(
        f"""
        UPDATE continente
        SET {assignments}
        WHERE id = $1
        RETURNING {_COLUMNS}
        """,
        continent_id,
        *values,
        messages=MESSAGES,
    )


async def delete_continent(db: Database, continent_id: int) -> bool:
    deleted = await db.execute(
        """
        DELETE FROM continente
        WHERE id = $1
        """,
        continent_id,
        messages=MESSAGES,
    )
    return deleted > 0
