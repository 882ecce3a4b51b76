"""Schedule models with Pydantic v2 validation."""

import json
import logging
from datetime import datetime
from typing import Any, Iterable, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from app.utils import extract_period, parse_schedule_date, utc_now

logger = logging.getLogger(__name__)


class ScheduleEntry(BaseModel):
    """One scheduled book-club session.

    Serialised with the camelCase keys used by the JSON file and the HTTP
    API (bookName, leaderName, hostName). The remote page id is kept in
    memory only.
    """

    date: str
    book_name: str = Field(alias="bookName")
    leader_name: Optional[str] = Field(default=None, alias="leaderName")
    host_name: Optional[str] = Field(default=None, alias="hostName")
    period: Optional[int] = None
    page_id: Optional[str] = Field(default=None, exclude=True)

    @field_validator("date", mode="before")
    @classmethod
    def validate_date(cls, v):
        """Require a string that starts with a valid ISO date."""
        if not isinstance(v, str) or not v.strip():
            raise ValueError("date is required")
        try:
            parse_schedule_date(v)
        except ValueError:
            raise ValueError(f"Invalid date format: {v}")
        return v.strip()

    @field_validator("book_name")
    @classmethod
    def validate_book_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("bookName is required")
        return v.strip()

    @field_validator("leader_name", "host_name", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v.strip() if isinstance(v, str) else v

    @field_validator("period", mode="before")
    @classmethod
    def convert_period(cls, v):
        """Accept numeric strings, treat blanks as unset."""
        if v is None or (isinstance(v, str) and not v.strip()):
            return None
        return v

    @model_validator(mode="after")
    def derive_period(self):
        """Fill period from a "第N期" marker in the title when not given."""
        if self.period is None:
            self.period = extract_period(self.book_name)
        return self

    def to_record(self) -> dict[str, Any]:
        """Dict in the on-disk/API shape (camelCase, no None values)."""
        return self.model_dump(by_alias=True, exclude_none=True)

    class Config:
        """Pydantic config."""

        populate_by_name = True


class Schedule(BaseModel):
    """Local schedule document: entries plus the time of the last save."""

    last_updated: datetime = Field(default_factory=utc_now, alias="lastUpdated")
    schedule: list[ScheduleEntry] = Field(default_factory=list)

    class Config:
        """Pydantic config."""

        populate_by_name = True

    def to_dict(self) -> dict[str, Any]:
        """Convert to the on-disk/API shape."""
        return {
            "lastUpdated": self.last_updated.isoformat(),
            "schedule": [entry.to_record() for entry in self.schedule],
        }

    def to_json(self) -> str:
        """Serialise as pretty-printed JSON (2-space indent)."""
        return json.dumps(self.to_dict(), indent=2, ensure_ascii=False)


def parse_entries(records: Iterable[Any]) -> list[ScheduleEntry]:
    """Build ScheduleEntry models from raw records, skipping malformed ones.

    Records missing a date or book name, or with an unparseable date, are
    logged and dropped rather than failing the whole batch.

    Args:
        records: Raw dicts (camelCase or snake_case keys) or ScheduleEntry objects

    Returns:
        Valid entries in input order
    """
    entries = []
    for index, record in enumerate(records):
        if isinstance(record, ScheduleEntry):
            entries.append(record)
            continue
        if not isinstance(record, dict):
            logger.warning(f"Skipping malformed schedule record #{index}: {record!r}")
            continue
        try:
            entries.append(ScheduleEntry.model_validate(record))
        except ValidationError as e:
            errors = "; ".join(err["msg"] for err in e.errors())
            logger.warning(
                f"Skipping invalid schedule record #{index} "
                f"(date={record.get('date')!r}, bookName={record.get('bookName')!r}): {errors}"
            )
    return entries
