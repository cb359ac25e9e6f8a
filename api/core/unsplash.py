"""
Unsplash HTTP client helpers.

Used endpoint:
- GET /search/photos?query=..&per_page=1  -> {"total": n, "results": [photo, ...]}
"""

from __future__ import annotations

from typing import Any

import httpx

from . import errors, settings
from .http import json_body, provider_error, response_details

PROVIDER = "Unsplash"


async def search_photos(
    query: str,
    *,
    per_page: int = 1,
    access_key: str | None = None,
    base_url: str | None = None,
    timeout_s: float | None = None,
) -> list[dict[str, Any]]:
    """
    Return the raw `results` list of a photo search.
    """
    access_key = access_key if access_key is not None else settings.unsplash_access_key()
    if not access_key:
        raise errors.ExternalServiceError(
            "UNSPLASH_ACCESS_KEY não configurada.",
            status_code=503,
        )

    try:
        async with httpx.AsyncClient(
            base_url=(base_url or settings.unsplash_base_url()).rstrip("/"),
            timeout=timeout_s if timeout_s is not None else settings.external_timeout_s(),
            headers={"Authorization": f"Client-ID {access_key}", "Accept-Version": "v1"},
        ) as client:
            resp = await client.get(
                "/search/photos",
                params={"query": query, "per_page": per_page},
            )
    except httpx.HTTPError as exc:
        raise provider_error(PROVIDER, exc) from exc

    if resp.status_code != 200:
        raise errors.ExternalServiceError(
            "Falha ao obter dados do Unsplash.",
            status_code=resp.status_code,
            details=response_details(resp),
        )

    data = json_body(PROVIDER, resp)
    results = data.get("results") if isinstance(data, dict) else None
    if not isinstance(results, list):
        raise errors.ExternalServiceError(
            "Unsplash retornou uma resposta inesperada.",
            status_code=502,
            details=data,
        )
    return results
