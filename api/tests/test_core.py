from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

import asyncpg
import pytest
from fastapi import status
from pydantic import BaseModel

from core import errors
from core.db import Database, ViolationMessages, _affected_rows, classify, set_clause
from core.numbers import Population, parse_big_int

MESSAGES = ViolationMessages(
    duplicate="dup",
    still_referenced="has children",
    missing_reference="no parent",
    invalid_value="bad value",
)


class _PopulationModel(BaseModel):
    populacao_total: Population | None = None


def test_classify_unique_violation():
    exc = asyncpg.UniqueViolationError('duplicate key value violates unique constraint "pais_nome_key"')

    result = classify(exc, MESSAGES)

    assert isinstance(result, errors.ConflictError)
    assert result.message == "dup"


def test_classify_delete_of_referenced_row():
    exc = asyncpg.ForeignKeyViolationError(
        'update or delete on table "continente" violates foreign key constraint '
        '"pais_id_continente_fkey" on table "pais"'
    )

    result = classify(exc, MESSAGES)

    assert isinstance(result, errors.ConflictError)
    assert result.message == "has children"


def test_classify_dangling_reference():
    exc = asyncpg.ForeignKeyViolationError(
        'insert or update on table "pais" violates foreign key constraint "pais_id_continente_fkey"'
    )

    result = classify(exc, MESSAGES)

    assert isinstance(result, errors.InvalidReferenceError)
    assert result.status_code == 400


def test_classify_not_null_is_validation():
    exc = asyncpg.NotNullViolationError('null value in column "nome" violates not-null constraint')

    assert isinstance(classify(exc, MESSAGES), errors.ValidationError)


def test_classify_leaves_other_errors_alone():
    assert classify(asyncpg.UndefinedTableError('relation "pais" does not exist'), MESSAGES) is None


@pytest.mark.asyncio
async def test_fetch_one_translates_constraint_errors():
    db = Database("postgresql://unused")
    db._pool = MagicMock()
    db._pool.fetchrow = AsyncMock(side_effect=asyncpg.UniqueViolationError("duplicate key"))

    with pytest.raises(errors.ConflictError) as exc:
        await db.fetch_one("INSERT INTO continente ...", "América", messages=MESSAGES)

    assert exc.value.message == "dup"
    assert isinstance(exc.value.__cause__, asyncpg.UniqueViolationError)


@pytest.mark.asyncio
async def test_execute_reraises_unclassified_errors():
    db = Database("postgresql://unused")
    db._pool = MagicMock()
    db._pool.execute = AsyncMock(side_effect=asyncpg.UndefinedTableError("missing table"))

    with pytest.raises(asyncpg.UndefinedTableError):
        await db.execute("DELETE FROM nowhere")


@pytest.mark.asyncio
async def test_execute_returns_affected_rows():
    db = Database("postgresql://unused")
    db._pool = MagicMock()
    db._pool.execute = AsyncMock(return_value="DELETE 1")

    assert await db.execute("DELETE FROM cidade WHERE id = $1", 3) == 1


def test_pool_must_be_initialized():
    with pytest.raises(RuntimeError):
        Database("postgresql://unused").pool()


def test_affected_rows_parses_command_tags():
    assert _affected_rows("UPDATE 3") == 3
    assert _affected_rows("INSERT 0 1") == 1
    assert _affected_rows("CREATE TABLE") == 0


def test_set_clause_numbers_placeholders_from_start():
    clause, values = set_clause({"nome": "Peru", "moeda": "Sol"}, start=2)

    assert clause == "nome = $2, moeda = $3"
    assert values == ["Peru", "Sol"]


def test_set_clause_requires_fields():
    with pytest.raises(ValueError):
        set_clause({})


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("12345678901234567", 12345678901234567),
        (" 215000000 ", 215000000),
        (215000000, 215000000),
        (Decimal("9007199254740993"), 9007199254740993),
        (1000.0, 1000),
    ],
)
def test_parse_big_int_accepts(raw, expected):
    assert parse_big_int(raw) == expected


@pytest.mark.parametrize("raw", [True, "12.5", "abc", 1.5, 2.0**60, Decimal("1.5"), None])
def test_parse_big_int_rejects(raw):
    with pytest.raises(ValueError):
        parse_big_int(raw)


def test_population_serializes_as_string_in_json_only():
    model = _PopulationModel(populacao_total="98765432109876543210")

    assert model.model_dump() == {"populacao_total": 98765432109876543210}
    assert model.model_dump_json() == '{"populacao_total":"98765432109876543210"}'


def test_population_must_not_be_negative():
    with pytest.raises(ValueError):
        _PopulationModel(populacao_total="-5")


@pytest.mark.asyncio
async def test_cors_allows_configured_origin(client):
    response = await client.options(
        "/continentes",
        headers={
            "Origin": "http://localhost:5173",
            "Access-Control-Request-Method": "DELETE",
        },
    )

    assert response.status_code == status.HTTP_200_OK
    assert response.headers["access-control-allow-origin"] == "http://localhost:5173"
    assert response.headers["access-control-allow-credentials"] == "true"


@pytest.mark.asyncio
async def test_cors_rejects_other_origins(client):
    response = await client.options(
        "/continentes",
        headers={
            "Origin": "http://evil.example",
            "Access-Control-Request-Method": "GET",
        },
    )

    assert "access-control-allow-origin" not in response.headers


@pytest.mark.asyncio
async def test_unknown_route_uses_error_envelope(client):
    response = await client.get("/planetas")

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json() == {"error": "Not Found"}


@pytest.mark.asyncio
async def test_wrong_method_uses_error_envelope(client):
    response = await client.patch("/continentes")

    assert response.status_code == status.HTTP_405_METHOD_NOT_ALLOWED
    assert response.json() == {"error": "Method Not Allowed"}
    assert "allow" in response.headers
