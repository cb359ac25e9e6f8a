"""
Photo enrichment after create (two-step write, no compensation).

Step 1 inserts the entity and is the request's real outcome. Step 2 looks
up a photo by the entity name and writes the four photo columns with a
separate UPDATE. If step 2 fails the entity stays as inserted, without a
photo; nothing is rolled back and nothing is retried. The caller reports
the outcome through the `X-Photo-Enrichment` response header.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from enum import Enum
from typing import TypeVar

from core import errors, settings

from . import service

logger = logging.getLogger(__name__)

PHOTO_HEADER = "X-Photo-Enrichment"

T = TypeVar("T")


class PhotoOutcome(str, Enum):
    APPLIED = "applied"
    SKIPPED = "skipped"
    FAILED = "failed"


async def attach_photo(
    entity: T,
    *,
    kind: str,
    entity_id: int,
    search_term: str,
    persist: Callable[[dict], Awaitable[T]],
    already_has_photo: bool = False,
) -> tuple[T, PhotoOutcome]:
    """
    Best-effort photo lookup + persist for a freshly created entity.

    Returns the updated entity on success, otherwise the original one.
    Never raises.
    """
    if already_has_photo or not settings.photo_enrichment_enabled():
        return entity, PhotoOutcome.SKIPPED

    try:
        photo = await service.lookup_photo(search_term)
        updated = await persist(photo.model_dump())
    except errors.AppError as exc:
        logger.warning(
            "photo_enrichment_failed entity=%s id=%s status=%s reason=%s",
            kind,
            entity_id,
            exc.status_code,
            exc.message,
        )
        return entity, PhotoOutcome.FAILED
    except Exception:
        # Unexpected failures must not turn a successful create into a 500.
        logger.exception("photo_enrichment_failed entity=%s id=%s", kind, entity_id)
        return entity, PhotoOutcome.FAILED

    logger.info("photo_enrichment_applied entity=%s id=%s", kind, entity_id)
    return updated, PhotoOutcome.APPLIED
