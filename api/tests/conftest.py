from decimal import Decimal
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from core.db import Database, get_db
from main import app


@pytest_asyncio.fixture
async def client():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def lenient_client():
    # Lets the generic 500 handler answer instead of re-raising into the test.
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def mock_db():
    return AsyncMock(spec=Database)


@pytest.fixture(autouse=True)
def override_db_dependency(mock_db):
    def _override():
        return mock_db
    app.dependency_overrides[get_db] = _override
    yield
    app.dependency_overrides.clear()


@pytest.fixture(autouse=True)
def photo_enrichment_off(monkeypatch):
    monkeypatch.delenv("UNSPLASH_ACCESS_KEY", raising=False)
    monkeypatch.delenv("PHOTO_ENRICHMENT", raising=False)


@pytest.fixture
def row_factory():
    """
    Raw rows as asyncpg would hand them back (NUMERIC -> Decimal).
    """
    def _create_row(row_type: str, **overrides):
        if row_type == "continent":
            row = {
                "id": 1,
                "nome": "América",
                "descricao": "Continente americano",
                "area_km2": 42549000.0,
                "numero_paises": 35,
                "populacao_total": Decimal("1002000000"),
            }
        elif row_type == "country":
            row = {
                "id": 1,
                "id_continente": 1,
                "nome": "Brasil",
                "populacao_total": Decimal("215000000"),
                "idioma_oficial": "Português",
                "moeda": "Real",
                "foto_url": None,
                "foto_descricao": None,
                "fotografo_nome": None,
                "fotografo_perfil": None,
                "continente_nome": "América",
            }
        elif row_type == "city":
            row = {
                "id": 1,
                "id_pais": 1,
                "nome": "Recife",
                "populacao_total": Decimal("1488920"),
                "latitude": -8.0476,
                "longitude": -34.877,
                "foto_url": None,
                "foto_descricao": None,
                "fotografo_nome": None,
                "fotografo_perfil": None,
                "clima_descricao": None,
                "temperatura": None,
                "umidade": None,
                "vento_velocidade": None,
                "pais_nome": "Brasil",
                "pais_idioma_oficial": "Português",
                "pais_moeda": "Real",
                "pais_id_continente": 1,
                "continente_nome": "América",
            }
        elif row_type == "user":
            row = {
                "id": 1,
                "nome": "Ana",
                "email": "ana@example.com",
                "senha": "",
            }
        else:
            return None
        row.update(overrides)
        return row

    return _create_row


@pytest.fixture
def unsplash_photo():
    return {
        "id": "abc123",
        "alt_description": "Cristo Redentor ao entardecer",
        "description": None,
        "urls": {"regular": "https://images.unsplash.com/photo-abc123"},
        "user": {
            "name": "Maria Fotógrafa",
            "links": {"html": "https://unsplash.com/@maria"},
        },
    }


@pytest.fixture
def openweather_payload():
    return {
        "weather": [{"description": "céu limpo"}],
        "main": {
            "temp": 29.5,
            "feels_like": 32.1,
            "temp_min": 28.0,
            "temp_max": 30.2,
            "pressure": 1012,
            "humidity": 70,
        },
        "wind": {"speed": 4.6},
        "name": "Recife",
    }
