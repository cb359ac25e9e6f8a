"""
City API schemas (request/response models).
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from continents.schemas import ContinentRef
from core.numbers import Population


class CityCreate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    id_pais: int = Field(..., ge=1)
    nome: str = Field(..., min_length=1, max_length=200)
    populacao_total: Population
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    foto_url: str | None = None
    foto_descricao: str | None = None
    fotografo_nome: str | None = None
    fotografo_perfil: str | None = None
    clima_descricao: str | None = None
    temperatura: float | None = None
    umidade: int | None = Field(default=None, ge=0, le=100)
    vento_velocidade: float | None = Field(default=None, ge=0)


class CityUpdate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")

    id_pais: int | None = Field(default=None, ge=1)
    nome: str | None = Field(default=None, min_length=1, max_length=200)
    populacao_total: Population | None = None
    latitude: float | None = Field(default=None, ge=-90, le=90)
    longitude: float | None = Field(default=None, ge=-180, le=180)
    foto_url: str | None = None
    foto_descricao: str | None = None
    fotografo_nome: str | None = None
    fotografo_perfil: str | None = None
    clima_descricao: str | None = None
    temperatura: float | None = None
    umidade: int | None = Field(default=None, ge=0, le=100)
    vento_velocidade: float | None = Field(default=None, ge=0)


class CountrySummary(BaseModel):
    id: int
    nome: str
    idioma_oficial: str
    moeda: str
    id_continente: int
    continente: ContinentRef


class CityResponse(BaseModel):
    id: int
    id_pais: int
    nome: str
    populacao_total: Population | None = None
    latitude: float | None = None
    longitude: float | None = None
    foto_url: str | None = None
    foto_descricao: str | None = None
    fotografo_nome: str | None = None
    fotografo_perfil: str | None = None
    clima_descricao: str | None = None
    temperatura: float | None = None
    umidade: int | None = None
    vento_velocidade: float | None = None
    pais: CountrySummary
