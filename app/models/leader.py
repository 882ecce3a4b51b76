"""Leader roster models."""

from pydantic import BaseModel, Field, field_validator


class Leader(BaseModel):
    """A discussion leader. Leaders flagged is_host may also host sessions."""

    name: str
    title: str = ""
    intro: str = ""
    is_host: bool = Field(default=False, alias="isHost")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("name is required")
        return v.strip()

    class Config:
        """Pydantic config."""

        populate_by_name = True


class LeaderRoster(BaseModel):
    """All known leaders, keyed by name (leaders.json)."""

    leaders: dict[str, Leader] = Field(default_factory=dict)

    def leader_names(self) -> set[str]:
        return set(self.leaders)

    def host_names(self) -> set[str]:
        return {name for name, leader in self.leaders.items() if leader.is_host}
