"""Utility functions for bookclub-sync."""

import re
from datetime import date, datetime, timezone

from app.constants import PERIOD_PATTERN, UNSPECIFIED


def extract_period(book_name: str | None) -> int | None:
    """Extract the period number embedded in a book title.

    Args:
        book_name: Book title, e.g. "第12期 百年孤独"

    Returns:
        The period number, or None if the title has no "第N期" marker
    """
    if not book_name:
        return None
    match = PERIOD_PATTERN.search(book_name)
    return int(match.group(1)) if match else None


def is_unspecified(value: str | None) -> bool:
    """True for None, blank strings and the Notion placeholder."""
    return value is None or not value.strip() or value.strip() == UNSPECIFIED


def names_differ(a: str | None, b: str | None) -> bool:
    """Compare two leader/host names.

    Unspecified on both sides counts as equal. Unspecified against a
    real name is a difference.
    """
    if is_unspecified(a) and is_unspecified(b):
        return False
    if is_unspecified(a) or is_unspecified(b):
        return True
    return a.strip() != b.strip()


def parse_schedule_date(value: str) -> date:
    """Parse the calendar date of a schedule date string.

    Accepts plain dates ("2024-01-01") and Notion datetimes
    ("2024-01-01T19:30:00.000+08:00").

    Raises:
        ValueError: If the string does not start with a valid ISO date
    """
    return date.fromisoformat(value.strip()[:10])


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def normalize_notion_id(raw_id: str | None) -> str | None:
    """Turn a Notion URL or bare 32-char hex id into a dashed UUID.

    Ids that are already dashed (or unrecognised) are returned unchanged.
    """
    if not raw_id:
        return raw_id
    cleaned = raw_id.split("?")[0].split("#")[0]
    if cleaned.startswith("http") or re.fullmatch(r"[a-f0-9]{32}", cleaned):
        # The id is the trailing 32 hex chars of the last path segment
        segment = cleaned.rstrip("/").rsplit("/", 1)[-1].replace("-", "")
        match = re.search(r"([a-f0-9]{32})$", segment)
        if match:
            h = match.group(1)
            return f"{h[:8]}-{h[8:12]}-{h[12:16]}-{h[16:20]}-{h[20:]}"
    return raw_id
