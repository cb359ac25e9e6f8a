"""
Async database access (raw SQL) using asyncpg.

`Database` owns the connection pool. FastAPI opens it on startup, keeps it on
`app.state.db` and closes it on shutdown (see `api/main.py`). Routes receive
it through the `get_db` dependency and hand it to services explicitly.

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...

Integrity errors raised by PostgreSQL are translated here, once, into the
application error taxonomy (`core.errors`).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import asyncpg
from fastapi import Request

from . import errors, settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ViolationMessages:
    """
    Entity-specific wording for constraint violations.
    """

    duplicate: str = "Registro duplicado."
    still_referenced: str = "Registro possui dependentes e não pode ser alterado."
    missing_reference: str = "Registro referenciado não existe."
    invalid_value: str = "Valor inválido para um dos campos."


DEFAULT_MESSAGES = ViolationMessages()


def _sanitize_database_url(url: str) -> str:
    parts = urlsplit(url)
    if not parts.query:
        return url

    params = [(k, v) for (k, v) in parse_qsl(parts.query, keep_blank_values=True) if k != "sslmode"]
    query = urlencode(params)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


def database_url() -> str:
    url = settings.database_url()
    if not url:
        raise RuntimeError("DATABASE_URL is not set.")
    return _sanitize_database_url(url)


def _affected_rows(status: str) -> int:
    # Command tags look like "UPDATE 3", "DELETE 0" or "INSERT 0 1".
    try:
        return int(status.rsplit(" ", 1)[-1])
    except (ValueError, IndexError):
        return 0


def set_clause(fields: dict[str, Any], *, start: int = 1) -> tuple[str, list[Any]]:
    """
    Build `col_a = $1, col_b = $2` for a partial UPDATE.

    Column names must come from a validated schema, never from raw input.
    """
    if not fields:
        raise ValueError("set_clause() needs at least one field.")
    parts = [f"{column} = ${i}" for i, column in enumerate(fields, start=start)]
    return ", ".join(parts), list(fields.values())


def classify(exc: asyncpg.PostgresError, messages: ViolationMessages) -> errors.AppError | None:
    """
    Map a PostgreSQL error to the application taxonomy.

    Returns None for errors that are not constraint violations; those stay
    internal failures.
    """
    if isinstance(exc, asyncpg.UniqueViolationError):
        return errors.ConflictError(messages.duplicate)

    if isinstance(exc, asyncpg.ForeignKeyViolationError):
        # "update or delete on table X ... on table Y": a child still points at X.
        # "insert or update on table Y ...": Y points at a parent that is missing.
        message = (getattr(exc, "message", None) or str(exc)).lower()
        if message.startswith("update or delete"):
            return errors.ConflictError(messages.still_referenced)
        return errors.InvalidReferenceError(messages.missing_reference)

    if isinstance(
        exc,
        (asyncpg.NotNullViolationError, asyncpg.CheckViolationError, asyncpg.DataError),
    ):
        return errors.ValidationError(messages.invalid_value)

    return None


class Database:
    def __init__(
        self,
        dsn: str,
        *,
        min_size: int = 1,
        max_size: int = 10,
        command_timeout: float = 30,
    ) -> None:
        self.dsn = dsn
        self.min_size = min_size
        self.max_size = max_size
        self.command_timeout = command_timeout
        self._pool: asyncpg.Pool | None = None

    @classmethod
    def from_env(cls) -> Database:
        return cls(
            database_url(),
            min_size=settings.db_pool_min_size(),
            max_size=settings.db_pool_max_size(),
            command_timeout=settings.db_command_timeout_s(),
        )

    async def init_pool(self) -> None:
        if self._pool is not None:
            return None
        self._pool = await asyncpg.create_pool(
            dsn=self.dsn,
            min_size=self.min_size,
            max_size=self.max_size,
            command_timeout=self.command_timeout,
        )
        logger.info("db_pool_opened min_size=%s max_size=%s", self.min_size, self.max_size)

    async def close_pool(self) -> None:
        if self._pool is None:
            return None
        await self._pool.close()
        self._pool = None
        logger.info("db_pool_closed")

    def pool(self) -> asyncpg.Pool:
        if self._pool is None:
            raise RuntimeError("DB pool is not initialized. Call init_pool() on startup.")
        return self._pool

    async def apply_schema(self, path: str | Path) -> None:
        sql = Path(path).read_text(encoding="utf-8")
        await self.pool().execute(sql)
        logger.info("db_schema_applied path=%s", path)

    async def fetch_one(
        self,
        sql: str,
        *args: Any,
        messages: ViolationMessages = DEFAULT_MESSAGES,
    ) -> dict[str, Any] | None:
        """
        Run a query and return a single row as a dict (or None).
        """
        try:
            row = await self.pool().fetchrow(sql, *args)
        except asyncpg.PostgresError as exc:
            _raise_classified(exc, messages)
            raise
        return dict(row) if row is not None else None

    async def fetch_all(
        self,
        sql: str,
        *args: Any,
        messages: ViolationMessages = DEFAULT_MESSAGES,
    ) -> list[dict[str, Any]]:
        """
        Run a query and return all rows as a list of dicts.
        """
        try:
            rows = await self.pool().fetch(sql, *args)
        except asyncpg.PostgresError as exc:
            _raise_classified(exc, messages)
            raise
        return [dict(r) for r in rows]

    async def execute(
        self,
        sql: str,
        *args: Any,
        messages: ViolationMessages = DEFAULT_MESSAGES,
    ) -> int:
        """
        Run a statement (INSERT/UPDATE/DELETE/DDL) and return the affected row count.
        """
        try:
            status = await self.pool().execute(sql, *args)
        except asyncpg.PostgresError as exc:
            _raise_classified(exc, messages)
            raise
        return _affected_rows(status)


def _raise_classified(exc: asyncpg.PostgresError, messages: ViolationMessages) -> None:
    classified = classify(exc, messages)
    if classified is None:
        return None
    logger.info(
        "db_constraint_violation sqlstate=%s mapped_to=%s",
        getattr(exc, "sqlstate", None),
        type(classified).__name__,
    )
    raise classified from exc


def get_db(request: Request) -> Database:
    """
    FastAPI dependency returning the process-wide Database.
    """
    db = getattr(request.app.state, "db", None)
    if db is None:
        raise RuntimeError("Database is not attached to the application.")
    return db
