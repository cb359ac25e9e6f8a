"""
Enrichment API schemas.
"""

from __future__ import annotations

from pydantic import BaseModel


class WeatherResponse(BaseModel):
    clima_descricao: str | None = None
    temperatura: float | None = None
    sensacao_termica: float | None = None
    temp_min: float | None = None
    temp_max: float | None = None
    pressao: float | None = None
    umidade: int | None = None
    vento_velocidade: float | None = None
    local: str | None = None


class PhotoResponse(BaseModel):
    foto_url: str
    foto_descricao: str
    fotografo_nome: str
    fotografo_perfil: str
