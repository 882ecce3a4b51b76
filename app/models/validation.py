"""Validation report model."""

from pydantic import BaseModel, Field, computed_field

from app.models.schedule import ScheduleEntry


class ValidationReport(BaseModel):
    """Problems found in a local schedule. Never mutates the schedule."""

    invalid_leaders: list[ScheduleEntry] = Field(default_factory=list)
    invalid_hosts: list[ScheduleEntry] = Field(default_factory=list)
    duplicate_dates: dict[str, list[ScheduleEntry]] = Field(default_factory=dict)

    @computed_field
    @property
    def is_valid(self) -> bool:
        return not (self.invalid_leaders or self.invalid_hosts or self.duplicate_dates)

    def to_dict(self) -> dict:
        """Convert to the JSON shape served by the HTTP API."""
        return {
            "isValid": self.is_valid,
            "invalidLeaders": [e.to_record() for e in self.invalid_leaders],
            "invalidHosts": [e.to_record() for e in self.invalid_hosts],
            "duplicateDates": {
                d: [e.to_record() for e in entries]
                for d, entries in self.duplicate_dates.items()
            },
        }
