"""
Continent API schemas (request/response models).
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from core.numbers import Population


class ContinentCreate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    nome: str = Field(..., min_length=1, max_length=200)
    descricao: str = Field(..., min_length=1)
    area_km2: float | None = Field(default=None, ge=0)
    numero_paises: int | None = Field(default=None, ge=0)
    populacao_total: Population | None = None


class ContinentUpdate(BaseModel):
    # Unknown keys are rejected: field names double as column names.
    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")

    nome: str | None = Field(default=None, min_length=1, max_length=200)
    descricao: str | None = Field(default=None, min_length=1)
    area_km2: float | None = Field(default=None, ge=0)
    numero_paises: int | None = Field(default=None, ge=0)
    populacao_total: Population | None = None


class ContinentRef(BaseModel):
    id: int
    nome: str


class ContinentResponse(BaseModel):
    id: int
    nome: str
    descricao: str
    area_km2: float | None = None
    numero_paises: int | None = None
    populacao_total: Population | None = None
