"""
Country persistence (raw SQL).

Reads always join the owning continent so callers can embed it.
"""

from __future__ import annotations

from typing import Any

from core.db import Database, ViolationMessages, set_clause

MESSAGES = ViolationMessages(
    duplicate="Já existe um país com este nome.",
    still_referenced="Não é possível excluir o país pois ele possui cidades cadastradas.",
    missing_reference="O ID do continente fornecido não existe.",
    invalid_value="Valor inválido para um dos campos do país.",
)

_SELECT = """
    SELECT
      p.id,
      p.id_continente,
      p.nome,
      p.populacao_total,
      p.idioma_oficial,
      p.moeda,
      p.foto_url,
      p.foto_descricao,
      p.fotografo_nome,
      p.fotografo_perfil,
      c.nome AS continente_nome
    FROM pais p
    JOIN continente c ON c.id = p.id_continente
"""


def nest(row: dict[str, Any]) -> dict[str, Any]:
    """
    Fold the joined continent columns into `continente: {id, nome}`.
    """
    country = dict(row)
    continent_name = country.pop("continente_nome")
    country["continente"] = {"id": country["id_continente"], "nome": continent_name}
    return country


async def insert_country(db: Database, fields: dict[str, Any]) -> int:
    row = await db.fetch_one(
        """
        INSERT INTO pais (
          id_continente, nome, populacao_total, idioma_oficial, moeda,
          foto_url, foto_descricao, fotografo_nome, fotografo_perfil
        )
        VALUES ($1, $2, $3, $4, $5, $6, $7, $8, $9)
        RETURNING id
        """,
        fields["id_continente"],
        fields["nome"],
        fields["populacao_total"],
        fields["idioma_oficial"],
        fields["moeda"],
        fields.get("foto_url"),
        fields.get("foto_descricao"),
        fields.get("fotografo_nome"),
        fields.get("fotografo_perfil"),
        messages=MESSAGES,
    )
    if row is None:
        raise RuntimeError("Failed to insert country.")
    return int(row["id"])


async def list_countries(db: Database, *, name_filter: str = "") -> list[dict[str, Any]]:
    rows = await db.fetch_all(
        _SELECT
        + """
        WHERE $1 = '' OR p.nome ILIKE ('%' || $1 || '%')
        ORDER BY p.nome ASC
        """,
        name_filter,
    )
    return [nest(row) for row in rows]


async def get_country(db: Database, country_id: int) -> dict[str, Any] | None:
    row = await db.fetch_one(_SELECT + " WHERE p.id = $1", country_id)
    return nest(row) if row is not None else None


async def update_country(db: Database, country_id: int, fields: dict[str, Any]) -> bool:
    """
    Apply a partial update. Returns False when no row has `country_id`.
    """
    assignments, values = set_clause(fields, start=2)
    row = await db.fetch_one(
        f"""
        UPDATE pais
        SET {assignments}
        WHERE id = $1
        RETURNING id
        """,
        country_id,
        *values,
        messages=MESSAGES,
    )
    return row is not None


async def delete_country(db: Database, country_id: int) -> bool:
    deleted = await db.execute(
        """
        DELETE FROM pais
        WHERE id = $1
        """,
        country_id,
        messages=MESSAGES,
    )
    return deleted > 0
