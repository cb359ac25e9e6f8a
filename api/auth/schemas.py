"""
Auth API schemas (request/response models).
"""

from __future__ import annotations

from typing import Annotated

from pydantic import AfterValidator, BaseModel, Field, StringConstraints

# bcrypt only looks at the first 72 bytes of the encoded password.
BCRYPT_MAX_BYTES = 72


def _fits_bcrypt(value: str) -> str:
    if len(value.encode("utf-8")) > BCRYPT_MAX_BYTES:
        raise ValueError(f"A senha não pode ter mais de {BCRYPT_MAX_BYTES} bytes.")
    return value


# Passwords are taken verbatim: surrounding whitespace is part of the secret.
Password = Annotated[str, Field(min_length=1), AfterValidator(_fits_bcrypt)]
Email = Annotated[str, StringConstraints(strip_whitespace=True, min_length=3, max_length=320)]


class RegisterRequest(BaseModel):
    nome: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=200)]
    email: Email
    senha: Password


class LoginRequest(BaseModel):
    email: Email
    senha: Password


class UserResponse(BaseModel):
    id: int
    nome: str
    email: str


class LoginResponse(BaseModel):
    # Identity only: no hash, no token.
    id: int
    nome: str
