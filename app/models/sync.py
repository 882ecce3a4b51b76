"""Synchronisation report models."""

from typing import Literal, Optional

from pydantic import BaseModel, Field, computed_field

SyncStatus = Literal["created", "updated", "error"]


class SyncResult(BaseModel):
    """Outcome of a single remote create/update."""

    date: str
    status: SyncStatus
    page_id: Optional[str] = None
    message: Optional[str] = None


class SyncReport(BaseModel):
    """Per-entry results of a synchronisation run."""

    results: list[SyncResult] = Field(default_factory=list)
    refreshed_local: bool = False

    @computed_field
    @property
    def created(self) -> int:
        return sum(1 for r in self.results if r.status == "created")

    @computed_field
    @property
    def updated(self) -> int:
        return sum(1 for r in self.results if r.status == "updated")

    @computed_field
    @property
    def failed(self) -> int:
        return sum(1 for r in self.results if r.status == "error")

    @property
    def errors(self) -> list[SyncResult]:
        return [r for r in self.results if r.status == "error"]

    def to_dict(self) -> dict:
        """Convert to the JSON shape served by the HTTP API."""
        return {
            "results": [
                {
                    "date": r.date,
                    "status": r.status,
                    **({"id": r.page_id} if r.page_id else {}),
                    **({"message": r.message} if r.message else {}),
                }
                for r in self.results
            ],
            "totalCreated": self.created,
            "totalUpdated": self.updated,
            "totalErrors": self.failed,
        }
