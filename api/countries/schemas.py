"""
Country API schemas (request/response models).
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from continents.schemas import ContinentRef
from core.numbers import Population


class CountryCreate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    id_continente: int = Field(..., ge=1)
    nome: str = Field(..., min_length=1, max_length=200)
    populacao_total: Population
    idioma_oficial: str = Field(..., min_length=1, max_length=120)
    moeda: str = Field(..., min_length=1, max_length=120)
    foto_url: str | None = None
    foto_descricao: str | None = None
    fotografo_nome: str | None = None
    fotografo_perfil: str | None = None


class CountryUpdate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")

    id_continente: int | None = Field(default=None, ge=1)
    nome: str | None = Field(default=None, min_length=1, max_length=200)
    populacao_total: Population | None = None
    idioma_oficial: str | None = Field(default=None, min_length=1, max_length=120)
    moeda: str | None = Field(default=None, min_length=1, max_length=120)
    foto_url: str | None = None
    foto_descricao: str | None = None
    fotografo_nome: str | None = None
    fotografo_perfil: str | None = None


class CountryResponse(BaseModel):
    id: int
    id_continente: int
    nome: str
    populacao_total: Population
    idioma_oficial: str
    moeda: str
    foto_url: str | None = None
    foto_descricao: str | None = None
    fotografo_nome: str | None = None
    fotografo_perfil: str | None = None
    continente: ContinentRef
