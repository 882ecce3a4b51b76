from unittest.mock import MagicMock

import httpx
import pytest

from app import create_app
from app.config import ClubConfig
from app.exceptions import RemoteStoreError
from app.models.schedule import ScheduleEntry
from app.remote.notion_store import NotionScheduleStore
from app.storage.leader_store import LeaderStore
from app.storage.schedule_store import LocalScheduleStore


class FakeRemoteStore:
    """In-memory remote store with per-date failure injection."""

    def __init__(self, entries=None):
        self.pages: dict[str, ScheduleEntry] = {}
        # Pages with a date but no usable title, hidden from query()
        self.untitled: dict[str, str] = {}
        self.fail_dates: set[str] = set()
        self.calls: list[tuple] = []
        self._next_id = 1
        self.seed(entries or [])

    def seed(self, entries):
        for entry in entries:
            self._insert(entry)

    def seed_untitled(self, date):
        page_id = f"page-{self._next_id}"
        self._next_id += 1
        self.untitled[page_id] = date
        return page_id

    def _insert(self, entry: ScheduleEntry) -> str:
        page_id = f"page-{self._next_id}"
        self._next_id += 1
        self.pages[page_id] = entry.model_copy(update={"page_id": page_id})
        return page_id

    def query(self, sort_property=None, direction="descending"):
        self.calls.append(("query", direction))
        entries = sorted(
            self.pages.values(), key=lambda e: e.date, reverse=direction == "descending"
        )
        return [e.model_copy() for e in entries]

    def page_ids_by_date(self):
        self.calls.append(("page_ids_by_date",))
        page_ids = {date: page_id for page_id, date in self.untitled.items()}
        for page_id, entry in self.pages.items():
            page_ids.setdefault(entry.date, page_id)
        return page_ids

    def create(self, entry):
        self.calls.append(("create", entry.date))
        if entry.date in self.fail_dates:
            raise RemoteStoreError(f"create failed for {entry.date}")
        return self._insert(entry)

    def update(self, page_id, fields):
        self.calls.append(("update", page_id, dict(fields)))
        if page_id in self.untitled:
            self.pages[page_id] = ScheduleEntry(
                page_id=page_id, **{"date": self.untitled.pop(page_id), **fields}
            )
            return
        entry = self.pages[page_id]
        if entry.date in self.fail_dates:
            raise RemoteStoreError(f"update failed for {entry.date}")
        self.pages[page_id] = entry.model_copy(update=fields)

    def property_types(self):
        return {"书名": "title", "排期": "date", "领读人": "rich_text", "主持人": "rich_text"}


@pytest.fixture
def make_entry():
    """Factory for schedule entries."""

    def _make(date, book="第1期 测试书", leader=None, host=None, **kwargs):
        return ScheduleEntry(
            date=date, book_name=book, leader_name=leader, host_name=host, **kwargs
        )

    return _make


@pytest.fixture
def config(tmp_path):
    """Config pointing at a temporary data directory."""
    return ClubConfig(
        notion_api_key="secret_test",
        notion_database_id="db-test",
        data_dir=tmp_path / "config",
        log_dir=tmp_path / "logs",
    )


@pytest.fixture
def local_store(config):
    return LocalScheduleStore(config.schedule_path)


@pytest.fixture
def leader_store(config):
    return LeaderStore(config.leaders_path)


@pytest.fixture
def remote_store():
    return FakeRemoteStore()


@pytest.fixture
def app(config, remote_store):
    """Create and configure a Flask app for testing."""
    app = create_app(config, remote_store=remote_store)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def offline_notion_store():
    """Notion store whose every request fails to connect."""
    client = MagicMock()
    offline = httpx.ConnectError("offline")
    client.databases.retrieve.side_effect = offline
    client.data_sources.query.side_effect = offline
    client.data_sources.retrieve.side_effect = offline
    client.pages.create.side_effect = offline
    client.pages.update.side_effect = offline
    return NotionScheduleStore(client, "db-1")
