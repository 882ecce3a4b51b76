"""File-backed leader roster."""

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from app.exceptions import DuplicateLeaderError, LeaderNotFoundError, StorageError
from app.models.leader import Leader, LeaderRoster

logger = logging.getLogger(__name__)


class LeaderStore:
    """CRUD over leaders.json: {"leaders": {name: {...}}}."""

    def __init__(self, path: Path):
        self.path = path

    def load(self) -> LeaderRoster:
        """Load the roster. A missing file is an empty roster.

        Raises:
            StorageError: If the file exists but cannot be parsed
        """
        if not self.path.exists():
            logger.info(f"Leaders file {self.path} does not exist, starting empty")
            return LeaderRoster()

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
            return LeaderRoster.model_validate(data)
        except (OSError, json.JSONDecodeError, ValidationError) as e:
            logger.error(f"Failed to read leaders file {self.path}: {e}")
            raise StorageError(f"Failed to read leaders file {self.path}: {e}") from e

    def save(self, roster: LeaderRoster) -> None:
        """Write the roster (2-space indent).

        Raises:
            StorageError: If the file cannot be written
        """
        data = roster.model_dump(by_alias=True)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
        except OSError as e:
            logger.error(f"Failed to write leaders file {self.path}: {e}")
            raise StorageError(f"Failed to write leaders file {self.path}: {e}") from e

    def list(self) -> list[Leader]:
        return list(self.load().leaders.values())

    def get(self, name: str) -> Leader:
        """
        Raises:
            LeaderNotFoundError: If the leader is not in the roster
        """
        roster = self.load()
        if name not in roster.leaders:
            raise LeaderNotFoundError(f"Leader '{name}' not found")
        return roster.leaders[name]

    def add(self, leader: Leader) -> Leader:
        """
        Raises:
            DuplicateLeaderError: If a leader with the same name exists
        """
        roster = self.load()
        if leader.name in roster.leaders:
            raise DuplicateLeaderError(f"Leader '{leader.name}' already exists")
        roster.leaders[leader.name] = leader
        self.save(roster)
        return leader

    def update(self, name: str, leader: Leader) -> Leader:
        """Replace a leader. Renaming moves the roster key.

        Raises:
            LeaderNotFoundError: If no leader is stored under name
            DuplicateLeaderError: If renaming onto an existing leader
        """
        roster = self.load()
        if name not in roster.leaders:
            raise LeaderNotFoundError(f"Leader '{name}' not found")
        if leader.name != name and leader.name in roster.leaders:
            raise DuplicateLeaderError(f"Leader '{leader.name}' already exists")
        del roster.leaders[name]
        roster.leaders[leader.name] = leader
        self.save(roster)
        return leader

    def delete(self, name: str) -> None:
        """
        Raises:
            LeaderNotFoundError: If the leader is not in the roster
        """
        roster = self.load()
        if name not in roster.leaders:
            raise LeaderNotFoundError(f"Leader '{name}' not found")
        del roster.leaders[name]
        self.save(roster)
