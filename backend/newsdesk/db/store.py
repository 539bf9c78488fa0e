"""
News Record Store

Keyed storage for news records. The service layer depends on the
``NewsStore`` interface only; ``SqlNewsStore`` is the SQLAlchemy-backed
implementation used by the running application.
"""
import asyncio
from abc import ABC, abstractmethod
from typing import Awaitable, List, Optional, TypeVar

import structlog
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from newsdesk.core.exceptions import StorageError
from newsdesk.models.news import News
from newsdesk.schemas import NewsRecord

logger = structlog.get_logger()

T = TypeVar("T")


class NewsStore(ABC):
    """Persistence contract consumed by the service layer."""

    @abstractmethod
    async def get(self, news_id: int) -> Optional[NewsRecord]:
        """Return the record with ``news_id`` or None if there is none."""

    @abstractmethod
    async def get_all(self) -> List[NewsRecord]:
        """Return every record, ordered by id. Empty list when there are none."""

    @abstractmethod
    async def upsert(self, record: NewsRecord) -> NewsRecord:
        """Replace the whole row matching ``record.id``, inserting it if absent."""


def _to_record(row: News) -> NewsRecord:
    return NewsRecord(id=row.id, title=row.title or "", content=row.content or "")


class SqlNewsStore(NewsStore):
    """
    NewsStore over an async SQLAlchemy session factory.

    Each call runs in its own session and transaction. Driver errors and
    timeouts surface as StorageError; a failed upsert is rolled back so the
    stored row is left untouched.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        timeout_seconds: float = 10.0,
    ):
        self._session_factory = session_factory
        self._timeout_seconds = timeout_seconds

    async def _bounded(self, operation: str, awaitable: Awaitable[T]) -> T:
        try:
            return await asyncio.wait_for(awaitable, timeout=self._timeout_seconds)
        except asyncio.TimeoutError as e:
            logger.error("Store call timed out", operation=operation, timeout=self._timeout_seconds)
            raise StorageError(f"{operation} timed out") from e
        except SQLAlchemyError as e:
            logger.error("Store call failed", operation=operation, error=str(e))
            raise StorageError(f"{operation} failed") from e

    async def get(self, news_id: int) -> Optional[NewsRecord]:
        return await self._bounded("get", self._get(news_id))

    async def get_all(self) -> List[NewsRecord]:
        return await self._bounded("get_all", self._get_all())

    async def upsert(self, record: NewsRecord) -> NewsRecord:
        return await self._bounded("upsert", self._upsert(record))

    async def _get(self, news_id: int) -> Optional[NewsRecord]:
        async with self._session_factory() as session:
            row = await session.get(News, news_id)
            return _to_record(row) if row is not None else None

    async def _get_all(self) -> List[NewsRecord]:
        async with self._session_factory() as session:
            result = await session.execute(select(News).order_by(News.id.asc()))
            return [_to_record(row) for row in result.scalars().all()]

    async def _upsert(self, record: NewsRecord) -> NewsRecord:
        async with self._session_factory() as session:
            async with session.begin():
                row = await session.merge(
                    News(id=record.id, title=record.title, content=record.content)
                )
            return _to_record(row)
