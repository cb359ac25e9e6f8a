"""
Shared failure handling for third-party HTTP providers.
"""

from __future__ import annotations

from typing import Any

import httpx

from . import errors


def response_details(resp: httpx.Response) -> Any:
    # Avoid dumping huge bodies; keep JSON when the provider sent some.
    try:
        return resp.json()
    except ValueError:
        return resp.text[:500]


def provider_error(provider: str, exc: httpx.HTTPError) -> errors.ExternalServiceError:
    """
    Turn a transport-level failure into an ExternalServiceError.

    Timeouts map to 504, anything else that never produced a response to 502.
    """
    if isinstance(exc, httpx.TimeoutException):
        return errors.ExternalServiceError(
            f"{provider} não respondeu dentro do tempo limite.",
            status_code=504,
            details={"reason": type(exc).__name__},
        )
    return errors.ExternalServiceError(
        f"Falha de comunicação com {provider}.",
        status_code=502,
        details={"reason": type(exc).__name__, "message": str(exc)[:300]},
    )


def json_body(provider: str, resp: httpx.Response) -> Any:
    """
    Decode a successful provider response, treating a non-JSON body as a bad gateway.
    """
    try:
        return resp.json()
    except ValueError as exc:
        raise errors.ExternalServiceError(
            f"{provider} retornou uma resposta inválida.",
            status_code=502,
            details=resp.text[:500],
        ) from exc
