"""
City persistence (raw SQL).

Reads join country and continent so a city carries both levels of parents.
"""

from __future__ import annotations

from typing import Any

from core.db import Database, ViolationMessages, set_clause

MESSAGES = ViolationMessages(
    duplicate="Já existe uma cidade com este nome no banco de dados.",
    missing_reference="O ID do país fornecido não existe.",
    invalid_value="Valor inválido para um dos campos da cidade.",
)

_CITY_COLUMNS = (
    "id_pais",
    "nome",
    "populacao_total",
    "latitude",
    "longitude",
    "foto_url",
    "foto_descricao",
    "fotografo_nome",
    "fotografo_perfil",
    "clima_descricao",
    "temperatura",
    "umidade",
    "vento_velocidade",
)

_SELECT = """
    SELECT
      ci.id,
      ci.id_pais,
      ci.nome,
      ci.populacao_total,
      ci.latitude,
      ci.longitude,
      ci.foto_url,
      ci.foto_descricao,
      ci.fotografo_nome,
      ci.fotografo_perfil,
      ci.clima_descricao,
      ci.temperatura,
      ci.umidade,
      ci.vento_velocidade,
      p.nome AS pais_nome,
      p.idioma_oficial AS pais_idioma_oficial,
      p.moeda AS pais_moeda,
      p.id_continente AS pais_id_continente,
      c.nome AS continente_nome
    FROM cidade ci
    JOIN pais p ON p.id = ci.id_pais
    JOIN continente c ON c.id = p.id_continente
"""


def nest(row: dict[str, Any]) -> dict[str, Any]:
    """
    Fold joined columns into `pais: {..., continente: {id, nome}}`.
    """
    city = dict(row)
    continent_id = city.pop("pais_id_continente")
    city["pais"] = {
        "id": city["id_pais"],
        "nome": city.pop("pais_nome"),
        "idioma_oficial": city.pop("pais_idioma_oficial"),
        "moeda": city.pop("pais_moeda"),
        "id_continente": continent_id,
        "continente": {"id": continent_id, "nome": city.pop("continente_nome")},
    }
    return city


async def insert_city(db: Database, fields: dict[str, Any]) -> int:
    placeholders = ", ".join(f"${i}" for i in range(1, len(_CITY_COLUMNS) + 1))
    row = await db.fetch_one(
        f"""
        INSERT INTO cidade ({", ".join(_CITY_COLUMNS)})
        VALUES ({placeholders})
        RETURNING id
        """,
        *(fields.get(column) for column in _CITY_COLUMNS),
        messages=MESSAGES,
    )
    if row is None:
        raise RuntimeError("Failed to insert city.")
    return int(row["id"])


async def list_cities(db: Database, *, name_filter: str = "") -> list[dict[str, Any]]:
    rows = await db.fetch_all(
        _SELECT
        + """
        WHERE $1 = '' OR ci.nome ILIKE ('%' || $1 || '%')
        ORDER BY ci.nome ASC
        """,
        name_filter,
    )
    return [nest(row) for row in rows]


async def get_city(db: Database, city_id: int) -> dict[str, Any] | None:
    row = await db.fetch_one(_SELECT + " WHERE ci.id = $1", city_id)
    return nest(row) if row is not None else None


async def update_city(db: Database, city_id: int, fields: dict[str, Any]) -> bool:
    """
    Apply a partial update. Returns False when no row has `city_id`.
    """
    assignments, values = set_clause(fields, start=2)
    row = await db.fetch_one(
        f"""
        UPDATE cidade
        SET {assignments}
        WHERE id = $1
        RETURNING id
        """,
        city_id,
        *values,
        messages=MESSAGES,
    )
    return row is not None


async def delete_city(db: Database, city_id: int) -> bool:
    deleted = await db.execute(
        """
        DELETE FROM cidade
        WHERE id = $1
        """,
        city_id,
        messages=MESSAGES,
    )
    return deleted > 0
