"""Configuration for bookclub sync."""

import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from app.constants import (
    LEADERS_FILENAME,
    NOTION_DATE_PROPERTY,
    NOTION_HOST_PROPERTY,
    NOTION_LEADER_PROPERTY,
    NOTION_TITLE_PROPERTY,
    SCHEDULE_FILENAME,
)
from app.exceptions import ConfigurationError


class NotionPropertyMap(BaseModel):
    """Names of the Notion database properties backing each entry field."""

    title: str = Field(default=NOTION_TITLE_PROPERTY)
    date: str = Field(default=NOTION_DATE_PROPERTY)
    leader: str = Field(default=NOTION_LEADER_PROPERTY)
    host: str = Field(default=NOTION_HOST_PROPERTY)


class ClubConfig(BaseModel):
    """Application configuration with Pydantic validation.

    Built once at process start and handed to the CLI context and the
    Flask app factory.
    """

    # Notion
    notion_api_key: str | None = None
    notion_database_id: str | None = None
    notion_database_name: str = Field(default="书单")
    notion_properties: NotionPropertyMap = Field(default_factory=NotionPropertyMap)

    # Storage paths
    data_dir: Path = Field(default=Path("config"))
    log_dir: Path = Field(default=Path("logs"))

    # File naming
    schedule_filename: str = Field(default=SCHEDULE_FILENAME)
    leaders_filename: str = Field(default=LEADERS_FILENAME)
    log_filename: str = Field(default="bookclub_sync.log")

    # HTTP server
    backend_port: int = Field(default=3001, ge=1, le=65535)

    # Skip Notion entirely and work on the local files only
    local_only: bool = False

    @property
    def schedule_path(self) -> Path:
        return self.data_dir / self.schedule_filename

    @property
    def leaders_path(self) -> Path:
        return self.data_dir / self.leaders_filename

    @property
    def notion_enabled(self) -> bool:
        """True when Notion credentials are present and local-only mode is off."""
        return (
            not self.local_only
            and bool(self.notion_api_key)
            and bool(self.notion_database_id)
        )

    def require_notion(self) -> None:
        """Raise ConfigurationError if Notion cannot be used.

        Raises:
            ConfigurationError: If running local-only or credentials are missing
        """
        if self.local_only:
            raise ConfigurationError(
                "Running in local-only mode, Notion is not available"
            )
        missing = []
        if not self.notion_api_key:
            missing.append("NOTION_API_KEY")
        if not self.notion_database_id:
            missing.append("NOTION_BOOKLIST_DATABASE_ID")
        if missing:
            raise ConfigurationError(
                f"Missing required environment variables: {', '.join(missing)}"
            )

    @classmethod
    def from_env(cls) -> "ClubConfig":
        """Load configuration from environment variables and .env file."""
        load_dotenv()

        config_dict = {}

        # Notion
        if "NOTION_API_KEY" in os.environ:
            config_dict["notion_api_key"] = os.environ["NOTION_API_KEY"]
        if "NOTION_BOOKLIST_DATABASE_ID" in os.environ:
            config_dict["notion_database_id"] = os.environ[
                "NOTION_BOOKLIST_DATABASE_ID"
            ]
        if "NOTION_BOOKLIST_NAME" in os.environ:
            config_dict["notion_database_name"] = os.environ["NOTION_BOOKLIST_NAME"]

        # Storage paths
        if "DATA_DIR" in os.environ:
            config_dict["data_dir"] = Path(os.environ["DATA_DIR"])
        if "LOG_DIR" in os.environ:
            config_dict["log_dir"] = Path(os.environ["LOG_DIR"])

        # File naming
        if "SCHEDULE_FILENAME" in os.environ:
            config_dict["schedule_filename"] = os.environ["SCHEDULE_FILENAME"]
        if "LEADERS_FILENAME" in os.environ:
            config_dict["leaders_filename"] = os.environ["LEADERS_FILENAME"]
        if "LOG_FILENAME" in os.environ:
            config_dict["log_filename"] = os.environ["LOG_FILENAME"]

        # HTTP server
        port = os.environ.get("BACKEND_PORT") or os.environ.get("PORT")
        if port:
            try:
                config_dict["backend_port"] = int(port)
            except ValueError:
                pass  # Keep default if invalid

        if "LOCAL_ONLY" in os.environ:
            config_dict["local_only"] = os.environ["LOCAL_ONLY"].lower() in (
                "1",
                "true",
                "yes",
            )

        return cls(**config_dict)
