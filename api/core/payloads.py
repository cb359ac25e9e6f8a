"""
Helpers turning validated request models into column/value maps.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel

from . import errors
from .numbers import to_db

BIG_INT_COLUMNS = frozenset({"populacao_total"})


def to_columns(fields: dict[str, Any]) -> dict[str, Any]:
    """
    Convert Python values to what asyncpg binds for each column.
    """
    return {
        column: to_db(value) if column in BIG_INT_COLUMNS else value
        for column, value in fields.items()
    }


def changed_fields(payload: BaseModel, *, required: Iterable[str] = ()) -> dict[str, Any]:
    """
    Fields present in an update body, ready for `set_clause`.

    Only keys the client actually sent are kept; explicit nulls on required
    columns are refused here instead of tripping NOT NULL in the database.
    """
    fields = payload.model_dump(exclude_unset=True)
    if not fields:
        raise errors.ValidationError("Nenhum dado para atualizar fornecido.")

    nulled = sorted(name for name in required if name in fields and fields[name] is None)
    if nulled:
        raise errors.ValidationError(
            f"Campos obrigatórios não podem ser nulos: {', '.join(nulled)}."
        )
    return to_columns(fields)
