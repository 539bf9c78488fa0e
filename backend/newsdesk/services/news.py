"""
News Service

Merge engine for partial updates and the projector behind the listing.
The pure functions here carry all the decision logic; ``find_and_merge``
is the only piece that touches the store.
"""
from dataclasses import replace
from typing import List, Sequence

import structlog

from newsdesk.core.exceptions import NewsNotFoundError
from newsdesk.db.store import NewsStore
from newsdesk.schemas import NewsPatch, NewsRecord, NewsView

logger = structlog.get_logger()


def apply_partial_update(existing: NewsRecord, patch: NewsPatch) -> NewsRecord:
    """
    Merge ``patch`` into ``existing``.

    Each field is replaced only when the patch carries a non-empty value.
    The id is never touched.
    """
    changes = {}
    if patch.title:
        changes["title"] = patch.title
    if patch.content:
        changes["content"] = patch.content
    return replace(existing, **changes)


async def find_and_merge(store: NewsStore, news_id: int, patch: NewsPatch) -> NewsRecord:
    """
    Load a record, merge the patch and persist the result.

    Raises NewsNotFoundError when the id is absent (nothing is written) and
    lets StorageError from the store propagate. No retries.
    """
    existing = await store.get(news_id)
    if existing is None:
        raise NewsNotFoundError(news_id)

    merged = apply_partial_update(existing, patch)
    saved = await store.upsert(merged)

    logger.info(
        "News updated",
        news_id=news_id,
        title_changed=saved.title != existing.title,
        content_changed=saved.content != existing.content,
    )
    return saved


def project(records: Sequence[NewsRecord]) -> List[NewsView]:
    """Map records to their external views, preserving order."""
    return [
        NewsView(id=record.id, title=record.title, content=record.content)
        for record in records
    ]
