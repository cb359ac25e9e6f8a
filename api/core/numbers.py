"""
Arbitrary-precision integers on the wire.

Population counts can exceed 2**53, which JavaScript clients cannot hold in
a JSON number. `Population` accepts digit strings (and safe JSON integers) on
input and always serializes back to a decimal string.
"""

from __future__ import annotations

import re
from decimal import Decimal
from typing import Annotated, Any

from pydantic import AfterValidator, BeforeValidator, PlainSerializer, WithJsonSchema

MAX_SAFE_FLOAT_INT = 2**53

_DIGITS = re.compile(r"[+-]?\d+")


def parse_big_int(value: Any) -> int:
    if isinstance(value, bool):
        raise ValueError("expected an integer, got a boolean")

    if isinstance(value, int):
        return value

    if isinstance(value, str):
        raw = value.strip().replace("_", "")
        if not _DIGITS.fullmatch(raw):
            raise ValueError("expected a string of decimal digits")
        return int(raw)

    if isinstance(value, Decimal):
        if value != value.to_integral_value():
            raise ValueError("expected an integral value")
        return int(value)

    if isinstance(value, float):
        # Beyond 2**53 the float has already lost digits; refuse to guess.
        if not value.is_integer() or abs(value) >= MAX_SAFE_FLOAT_INT:
            raise ValueError("send large integers as decimal strings")
        return int(value)

    raise ValueError("expected an integer or a string of decimal digits")


def _non_negative(value: int) -> int:
    if value < 0:
        raise ValueError("must not be negative")
    return value


def to_db(value: int | None) -> Decimal | None:
    """
    asyncpg binds NUMERIC parameters from Decimal.
    """
    if value is None:
        return None
    return Decimal(value)


_AS_DECIMAL_STRING = PlainSerializer(lambda v: str(v), return_type=str, when_used="json")

Population = Annotated[
    int,
    BeforeValidator(parse_big_int),
    AfterValidator(_non_negative),
    _AS_DECIMAL_STRING,
    WithJsonSchema({"type": "string", "pattern": r"^\d+$"}),
]
