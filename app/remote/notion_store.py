"""Notion-backed remote schedule store."""

import logging
from typing import Any

import httpx
from notion_client import Client
from notion_client.errors import HTTPResponseError, RequestTimeoutError

from app.config import ClubConfig, NotionPropertyMap
from app.constants import UNSPECIFIED
from app.exceptions import RemoteStoreError
from app.models.schedule import ScheduleEntry
from app.remote.base import SortDirection
from app.utils import normalize_notion_id, parse_schedule_date

logger = logging.getLogger(__name__)

# Entry field name (or its JSON alias) -> NotionPropertyMap attribute
_FIELD_PROPERTIES = {
    "book_name": "title",
    "bookName": "title",
    "date": "date",
    "leader_name": "leader",
    "leaderName": "leader",
    "host_name": "host",
    "hostName": "host",
}


def _plain_text(items: list[dict] | None) -> str:
    """Concatenate plain_text of a title/rich_text array."""
    if not items:
        return ""
    return "".join(
        item.get("plain_text") or item.get("text", {}).get("content", "")
        for item in items
    ).strip()


def _text(content: str | None) -> list[dict]:
    if not content:
        return []
    return [{"type": "text", "text": {"content": content}}]


def page_to_entry(page: dict, properties: NotionPropertyMap) -> ScheduleEntry | None:
    """Normalise a Notion page into a ScheduleEntry.

    This is the only place that knows the shape of a Notion page. Pages
    missing a title or date, or with an unparseable date, are skipped.

    Returns:
        The entry, or None if the page is not a valid schedule record
    """
    props = page.get("properties") or {}

    book_name = _plain_text((props.get(properties.title) or {}).get("title"))
    date_value = (props.get(properties.date) or {}).get("date") or {}
    date = date_value.get("start") or ""
    leader = _plain_text((props.get(properties.leader) or {}).get("rich_text"))
    host = _plain_text((props.get(properties.host) or {}).get("rich_text"))

    if not book_name or not date:
        logger.warning(
            f"Skipping Notion page {page.get('id')}: missing required field "
            f"(bookName={book_name!r}, date={date!r})"
        )
        return None

    try:
        parse_schedule_date(date)
    except ValueError:
        logger.warning(f"Skipping Notion page {page.get('id')}: invalid date {date!r}")
        return None

    return ScheduleEntry(
        date=date,
        book_name=book_name,
        leader_name=leader or UNSPECIFIED,
        host_name=host or UNSPECIFIED,
        page_id=page.get("id"),
    )


def entry_to_properties(
    entry: ScheduleEntry, properties: NotionPropertyMap
) -> dict[str, Any]:
    """Build the Notion property payload for a full entry."""
    return {
        properties.title: {"title": _text(entry.book_name)},
        properties.date: {"date": {"start": entry.date}},
        properties.leader: {"rich_text": _text(_assigned(entry.leader_name))},
        properties.host: {"rich_text": _text(_assigned(entry.host_name))},
    }


def _assigned(name: str | None) -> str | None:
    """Drop the placeholder so Notion stores an empty field."""
    if name is None or name == UNSPECIFIED:
        return None
    return name


class NotionScheduleStore:
    """Schedule entries stored as pages of a Notion database.

    Every query goes to the API; nothing is cached except the data source
    id resolved from the database id.
    """

    def __init__(
        self,
        client: Client,
        database_id: str,
        properties: NotionPropertyMap | None = None,
    ):
        """
        Initialize store.

        Args:
            client: Authenticated notion_client.Client
            database_id: Database id or Notion URL
            properties: Property names backing each entry field
        """
        self.client = client
        self.database_id = normalize_notion_id(database_id)
        self.properties = properties or NotionPropertyMap()
        self._data_source_id: str | None = None

    @classmethod
    def from_config(cls, config: ClubConfig) -> "NotionScheduleStore":
        """Create a store from configuration.

        Raises:
            ConfigurationError: If Notion credentials are missing
        """
        config.require_notion()
        client = Client(auth=config.notion_api_key)
        return cls(client, config.notion_database_id, config.notion_properties)

    def _call(self, fn, **kwargs):
        """Invoke a client method, translating API and transport errors."""
        try:
            return fn(**kwargs)
        except (HTTPResponseError, RequestTimeoutError) as e:
            raise RemoteStoreError(f"Notion API request failed: {e}") from e
        except httpx.HTTPError as e:
            raise RemoteStoreError(f"Could not reach Notion: {e}") from e

    @property
    def data_source_id(self) -> str:
        """Data source backing the database (resolved once)."""
        if self._data_source_id is None:
            db = self._call(self.client.databases.retrieve, database_id=self.database_id)
            sources = db.get("data_sources") or []
            self._data_source_id = sources[0]["id"] if sources else self.database_id
            logger.debug(f"Resolved data source {self._data_source_id}")
        return self._data_source_id

    def _query_pages(self, **kwargs) -> list[dict]:
        """Page through all query results."""
        pages, cursor = [], None
        while True:
            params = {"data_source_id": self.data_source_id, **kwargs}
            if cursor:
                params["start_cursor"] = cursor
            response = self._call(self.client.data_sources.query, **params)
            pages.extend(response.get("results", []))
            if not response.get("has_more"):
                break
            cursor = response.get("next_cursor")
        return pages

    def query(
        self, sort_property: str | None = None, direction: SortDirection = "descending"
    ) -> list[ScheduleEntry]:
        """Fetch all entries sorted by sort_property (the date by default)."""
        sort_property = sort_property or self.properties.date
        pages = self._query_pages(
            sorts=[{"property": sort_property, "direction": direction}]
        )
        entries = [
            entry
            for entry in (page_to_entry(page, self.properties) for page in pages)
            if entry is not None
        ]
        logger.info(f"Fetched {len(entries)} entries from Notion ({len(pages)} pages)")
        return entries

    def page_ids_by_date(self) -> dict[str, str]:
        """Map each date to the id of the first page holding it.

        Reads the raw date property of every page, so pages that
        page_to_entry would skip (no title, say) are still matched.
        """
        pages = self._query_pages(
            sorts=[{"property": self.properties.date, "direction": "descending"}]
        )
        page_ids: dict[str, str] = {}
        for page in pages:
            props = page.get("properties") or {}
            date_value = (props.get(self.properties.date) or {}).get("date") or {}
            start = date_value.get("start")
            if start and page.get("id"):
                page_ids.setdefault(start, page["id"])
        return page_ids

    def find_by_date(self, date: str) -> ScheduleEntry | None:
        """First remote entry whose date equals date."""
        pages = self._query_pages(
            filter={"property": self.properties.date, "date": {"equals": date}}
        )
        for page in pages:
            entry = page_to_entry(page, self.properties)
            if entry is not None and entry.date == date:
                return entry
        return None

    def create(self, entry: ScheduleEntry) -> str:
        """Create a page for entry and return its id."""
        page = self._call(
            self.client.pages.create,
            parent={"type": "data_source_id", "data_source_id": self.data_source_id},
            properties=entry_to_properties(entry, self.properties),
        )
        logger.info(f"Created Notion page {page['id']} for {entry.date}")
        return page["id"]

    def update(self, page_id: str, fields: dict[str, Any]) -> None:
        """Overwrite entry fields on a page.

        Args:
            page_id: Notion page id
            fields: Entry field names (or JSON aliases) to new values

        Raises:
            ValueError: If a field name is not a schedule field
        """
        payload = {}
        for field, value in fields.items():
            if field not in _FIELD_PROPERTIES:
                raise ValueError(f"Unknown schedule field: {field}")
            target = _FIELD_PROPERTIES[field]
            name = getattr(self.properties, target)
            if target == "title":
                payload[name] = {"title": _text(value)}
            elif target == "date":
                payload[name] = {"date": {"start": value}}
            else:
                payload[name] = {"rich_text": _text(_assigned(value))}

        self._call(self.client.pages.update, page_id=page_id, properties=payload)
        logger.info(f"Updated Notion page {page_id}: {', '.join(fields)}")

    def property_types(self) -> dict[str, str]:
        """Schema of the data source as {property name: type}."""
        source = self._call(
            self.client.data_sources.retrieve, data_source_id=self.data_source_id
        )
        return {
            name: prop.get("type", "unknown")
            for name, prop in (source.get("properties") or {}).items()
        }
