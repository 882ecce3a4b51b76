"""Tests for the Notion-backed remote store."""

from unittest.mock import MagicMock

import httpx
import pytest
from notion_client.errors import RequestTimeoutError

from app.config import ClubConfig, NotionPropertyMap
from app.exceptions import ConfigurationError, RemoteStoreError
from app.models.schedule import ScheduleEntry
from app.remote.notion_store import NotionScheduleStore, entry_to_properties, page_to_entry

PROPS = NotionPropertyMap()


def _rich(text):
    return [{"plain_text": text}] if text else []


def _page(page_id, title, date, leader=None, host=None):
    return {
        "id": page_id,
        "properties": {
            "书名": {"type": "title", "title": _rich(title)},
            "排期": {"type": "date", "date": {"start": date} if date else None},
            "领读人": {"type": "rich_text", "rich_text": _rich(leader)},
            "主持人": {"type": "rich_text", "rich_text": _rich(host)},
        },
    }


@pytest.fixture
def client():
    client = MagicMock()
    client.databases.retrieve.return_value = {
        "id": "db-1",
        "data_sources": [{"id": "ds-1", "name": "书单"}],
    }
    return client


@pytest.fixture
def store(client):
    return NotionScheduleStore(client, "db-1", PROPS)


def test_page_to_entry():
    entry = page_to_entry(_page("p1", "第4期 活着", "2024-03-02", "张三", "李四"), PROPS)

    assert entry.date == "2024-03-02"
    assert entry.book_name == "第4期 活着"
    assert entry.leader_name == "张三"
    assert entry.host_name == "李四"
    assert entry.period == 4
    assert entry.page_id == "p1"


def test_page_to_entry_missing_assignments_use_placeholder():
    entry = page_to_entry(_page("p1", "活着", "2024-03-02"), PROPS)

    assert entry.leader_name == "未指定"
    assert entry.host_name == "未指定"


@pytest.mark.parametrize(
    "page",
    [
        _page("p1", "", "2024-03-02"),
        _page("p2", "活着", None),
        _page("p3", "活着", "someday"),
        {"id": "p4"},
    ],
)
def test_page_to_entry_skips_invalid_pages(page, caplog):
    assert page_to_entry(page, PROPS) is None
    assert "Skipping Notion page" in caplog.text


def test_entry_to_properties_drops_placeholder():
    entry = ScheduleEntry(date="2024-03-02", book_name="活着", leader_name="未指定")

    props = entry_to_properties(entry, PROPS)

    assert props["书名"]["title"][0]["text"]["content"] == "活着"
    assert props["排期"] == {"date": {"start": "2024-03-02"}}
    assert props["领读人"] == {"rich_text": []}
    assert props["主持人"] == {"rich_text": []}


def test_database_url_is_normalised(client):
    store = NotionScheduleStore(
        client, "https://www.notion.so/Booklist-0123456789abcdef0123456789abcdef"
    )
    assert store.database_id == "01234567-89ab-cdef-0123-456789abcdef"


def test_data_source_resolved_once(store, client):
    assert store.data_source_id == "ds-1"
    assert store.data_source_id == "ds-1"
    client.databases.retrieve.assert_called_once_with(database_id="db-1")


def test_query_pages_through_results(store, client):
    client.data_sources.query.side_effect = [
        {"results": [_page("p1", "B", "2024-02-01")], "has_more": True, "next_cursor": "c1"},
        {"results": [_page("p2", "A", "2024-01-01"), _page("p3", "", "2024-01-08")], "has_more": False},
    ]

    entries = store.query()

    assert [e.page_id for e in entries] == ["p1", "p2"]
    first, second = client.data_sources.query.call_args_list
    assert first.kwargs == {
        "data_source_id": "ds-1",
        "sorts": [{"property": "排期", "direction": "descending"}],
    }
    assert second.kwargs["start_cursor"] == "c1"


def test_find_by_date(store, client):
    client.data_sources.query.return_value = {
        "results": [_page("p1", "活着", "2024-03-02")],
        "has_more": False,
    }

    entry = store.find_by_date("2024-03-02")

    assert entry.page_id == "p1"
    assert client.data_sources.query.call_args.kwargs["filter"] == {
        "property": "排期",
        "date": {"equals": "2024-03-02"},
    }


def test_create(store, client):
    client.pages.create.return_value = {"id": "new-page"}
    entry = ScheduleEntry(date="2024-03-02", book_name="活着", leader_name="张三")

    assert store.create(entry) == "new-page"
    kwargs = client.pages.create.call_args.kwargs
    assert kwargs["parent"] == {"type": "data_source_id", "data_source_id": "ds-1"}
    assert kwargs["properties"]["领读人"]["rich_text"][0]["text"]["content"] == "张三"


def test_update_assignment_fields(store, client):
    store.update("p1", {"leader_name": "张三", "hostName": None})

    client.pages.update.assert_called_once_with(
        page_id="p1",
        properties={
            "领读人": {"rich_text": [{"type": "text", "text": {"content": "张三"}}]},
            "主持人": {"rich_text": []},
        },
    )


def test_update_rejects_unknown_field(store, client):
    with pytest.raises(ValueError):
        store.update("p1", {"period": 3})
    client.pages.update.assert_not_called()


def test_api_errors_become_remote_store_errors(store, client):
    client.pages.create.side_effect = RequestTimeoutError()

    with pytest.raises(RemoteStoreError):
        store.create(ScheduleEntry(date="2024-03-02", book_name="活着"))


def test_connection_errors_become_remote_store_errors(store, client):
    client.data_sources.query.side_effect = httpx.ConnectError("offline")

    with pytest.raises(RemoteStoreError, match="offline"):
        store.query()


def test_connection_error_resolving_data_source(offline_notion_store):
    with pytest.raises(RemoteStoreError):
        offline_notion_store.data_source_id


def test_property_types(store, client):
    client.data_sources.retrieve.return_value = {
        "properties": {"书名": {"type": "title"}, "排期": {"type": "date"}}
    }

    assert store.property_types() == {"书名": "title", "排期": "date"}
    client.data_sources.retrieve.assert_called_once_with(data_source_id="ds-1")


def test_from_config_requires_credentials():
    with pytest.raises(ConfigurationError):
        NotionScheduleStore.from_config(ClubConfig())


def test_from_config(monkeypatch):
    created = {}

    class FakeClient:
        def __init__(self, auth):
            created["auth"] = auth

    monkeypatch.setattr("app.remote.notion_store.Client", FakeClient)
    config = ClubConfig(notion_api_key="secret", notion_database_id="db-9")

    store = NotionScheduleStore.from_config(config)

    assert created["auth"] == "secret"
    assert store.database_id == "db-9"


def test_page_ids_by_date_includes_untitled_pages(store, client):
    client.data_sources.query.return_value = {
        "results": [
            _page("p1", "", "2024-03-02"),
            _page("p2", "活着", "2024-03-02"),
            _page("p3", "无日期", None),
            _page("p4", "A", "2024-02-24"),
        ],
        "has_more": False,
    }

    assert store.page_ids_by_date() == {"2024-03-02": "p1", "2024-02-24": "p4"}
