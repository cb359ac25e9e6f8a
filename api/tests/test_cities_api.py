from decimal import Decimal
from unittest.mock import AsyncMock, patch

import pytest
from fastapi import status

from cities import repository as city_repository
from core import errors

RECIFE = {
    "id_pais": 1,
    "nome": "Recife",
    "populacao_total": "1488920",
    "latitude": -8.0476,
    "longitude": -34.877,
}


@pytest.mark.asyncio
async def test_create_city_nests_country_and_continent(client, mock_db, row_factory):
    mock_db.fetch_one.side_effect = [{"id": 1}, row_factory("city")]

    response = await client.post("/cidades", json=RECIFE)

    assert response.status_code == status.HTTP_201_CREATED
    body = response.json()
    assert body["populacao_total"] == "1488920"
    assert body["pais"] == {
        "id": 1,
        "nome": "Brasil",
        "idioma_oficial": "Português",
        "moeda": "Real",
        "id_continente": 1,
        "continente": {"id": 1, "nome": "América"},
    }
    insert_sql, *insert_args = mock_db.fetch_one.await_args_list[0].args
    assert "INSERT INTO cidade" in insert_sql
    assert insert_args[:5] == [1, "Recife", Decimal("1488920"), -8.0476, -34.877]


@pytest.mark.parametrize("missing", ["id_pais", "nome", "populacao_total", "latitude", "longitude"])
@pytest.mark.asyncio
async def test_create_city_requires_fields(client, mock_db, missing):
    payload = {k: v for k, v in RECIFE.items() if k != missing}

    response = await client.post("/cidades", json=payload)

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    mock_db.fetch_one.assert_not_awaited()


@pytest.mark.asyncio
async def test_create_city_latitude_out_of_range(client, mock_db):
    response = await client.post("/cidades", json={**RECIFE, "latitude": 120})

    assert response.status_code == status.HTTP_400_BAD_REQUEST


@pytest.mark.asyncio
async def test_create_city_unknown_country(client, mock_db):
    mock_db.fetch_one.side_effect = errors.InvalidReferenceError(city_repository.MESSAGES.missing_reference)

    response = await client.post("/cidades", json={**RECIFE, "id_pais": 50})

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["error"] == "O ID do país fornecido não existe."


@pytest.mark.asyncio
async def test_create_city_duplicate(client, mock_db):
    mock_db.fetch_one.side_effect = errors.ConflictError(city_repository.MESSAGES.duplicate)

    response = await client.post("/cidades", json=RECIFE)

    assert response.status_code == status.HTTP_409_CONFLICT


@pytest.mark.asyncio
async def test_list_cities(client, mock_db, row_factory):
    mock_db.fetch_all.return_value = [
        row_factory("city", id=2, nome="Olinda", populacao_total=None, latitude=None, longitude=None),
        row_factory("city"),
    ]

    response = await client.get("/cidades")

    assert response.status_code == status.HTTP_200_OK
    body = response.json()
    assert [c["nome"] for c in body] == ["Olinda", "Recife"]
    assert body[0]["populacao_total"] is None
    assert body[1]["pais"]["continente"]["nome"] == "América"


@pytest.mark.asyncio
async def test_update_city_partial(client, mock_db, row_factory):
    mock_db.fetch_one.side_effect = [{"id": 1}, row_factory("city", nome="Recife Antigo")]

    response = await client.put("/cidades/1", json={"nome": "Recife Antigo"})

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["nome"] == "Recife Antigo"
    update_sql = mock_db.fetch_one.await_args_list[0].args[0]
    assert "SET nome = $2" in update_sql


@pytest.mark.asyncio
async def test_update_city_not_found(client, mock_db):
    mock_db.fetch_one.return_value = None

    response = await client.put("/cidades/9", json={"nome": "X"})

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json()["error"] == "Cidade não encontrada."


@pytest.mark.asyncio
async def test_delete_city(client, mock_db):
    mock_db.execute.return_value = 1

    response = await client.delete("/cidades/1")

    assert response.status_code == status.HTTP_204_NO_CONTENT


@pytest.mark.asyncio
async def test_refresh_city_weather_persists_snapshot(client, mock_db, row_factory, openweather_payload):
    stored = row_factory(
        "city",
        clima_descricao="céu limpo",
        temperatura=29.5,
        umidade=70,
        vento_velocidade=4.6,
    )
    mock_db.fetch_one.side_effect = [row_factory("city"), {"id": 1}, stored]

    with patch(
        "core.openweather.current_weather",
        new_callable=AsyncMock,
        return_value=openweather_payload,
    ) as weather:
        response = await client.post("/cidades/1/clima")

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["clima_descricao"] == "céu limpo"
    weather.assert_awaited_once_with(latitude=-8.0476, longitude=-34.877)

    update_sql, *update_args = mock_db.fetch_one.await_args_list[1].args
    assert "clima_descricao = $2" in update_sql
    assert update_args == [1, "céu limpo", 29.5, 70, 4.6]


@pytest.mark.asyncio
async def test_refresh_city_weather_without_coordinates(client, mock_db, row_factory):
    mock_db.fetch_one.return_value = row_factory("city", latitude=None, longitude=None)

    with patch("core.openweather.current_weather", new_callable=AsyncMock) as weather:
        response = await client.post("/cidades/1/clima")

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    weather.assert_not_awaited()
