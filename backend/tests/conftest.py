from __future__ import annotations

import pytest

from newsdesk.config import Settings
from newsdesk.core.exceptions import StorageError
from newsdesk.db.store import NewsStore
from newsdesk.schemas import NewsRecord


class FakeNewsStore(NewsStore):
    """Dict-backed store that records every upsert."""

    def __init__(self, records=()) -> None:
        self.rows = {record.id: record for record in records}
        self.upserts: list[NewsRecord] = []

    async def get(self, news_id):
        return self.rows.get(news_id)

    async def get_all(self):
        return [self.rows[key] for key in sorted(self.rows)]

    async def upsert(self, record):
        self.upserts.append(record)
        self.rows[record.id] = record
        return record


class BrokenReadStore(FakeNewsStore):
    async def get(self, news_id):
        raise StorageError("get failed")

    async def get_all(self):
        raise StorageError("get_all failed")


class BrokenWriteStore(FakeNewsStore):
    async def upsert(self, record):
        raise StorageError("upsert failed")


@pytest.fixture
def settings() -> Settings:
    return Settings(
        APP_ENV="test",
        DATABASE_URL="sqlite+aiosqlite:///:memory:",
        LOG_FORMAT="console",
        LOG_LEVEL="WARNING",
    )


@pytest.fixture
def sqlite_settings(tmp_path) -> Settings:
    return Settings(
        APP_ENV="test",
        DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'news.db'}",
        LOG_FORMAT="console",
        LOG_LEVEL="WARNING",
        STORE_TIMEOUT_SECONDS=5,
    )
