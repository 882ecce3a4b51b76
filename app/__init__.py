import logging

from flask import Flask, jsonify
from pydantic import ValidationError

from .config import ClubConfig
from .exceptions import (
    ConfigurationError,
    DuplicateDateError,
    DuplicateLeaderError,
    DuplicatePeriodError,
    LeaderNotFoundError,
    RemoteStoreError,
    ScheduleError,
    ScheduleNotFoundError,
)
from .processing.synchronizer import Synchronizer
from .remote.base import RemoteScheduleStore
from .remote.notion_store import NotionScheduleStore
from .routes import create_leaders_blueprint, create_schedules_blueprint
from .storage.leader_store import LeaderStore
from .storage.schedule_store import LocalScheduleStore

logger = logging.getLogger(__name__)


def create_app(
    config: ClubConfig | None = None,
    remote_store: RemoteScheduleStore | None = None,
):
    """Create the HTTP API.

    Args:
        config: Application config (loaded from the environment if None)
        remote_store: Remote store to sync with. Built from config when
            Notion is configured; without one the API runs local-only.
    """
    config = config or ClubConfig.from_env()
    app = Flask(__name__)

    local_store = LocalScheduleStore(config.schedule_path)
    leader_store = LeaderStore(config.leaders_path)

    if remote_store is None and config.notion_enabled:
        remote_store = NotionScheduleStore.from_config(config)
    if remote_store is None:
        logger.warning("Running in local-only mode: Notion sync is unavailable")

    synchronizer = Synchronizer(local_store, remote_store) if remote_store else None

    app.register_blueprint(create_leaders_blueprint(leader_store), url_prefix="/api/leaders")
    app.register_blueprint(
        create_schedules_blueprint(local_store, leader_store, synchronizer),
        url_prefix="/api/schedules",
    )

    @app.errorhandler(ValidationError)
    def invalid_payload(e):
        errors = [
            {"field": ".".join(str(p) for p in err["loc"]), "message": err["msg"]}
            for err in e.errors()
        ]
        return jsonify({"error": "Invalid request body", "details": errors}), 400

    @app.errorhandler(ScheduleError)
    def schedule_error(e):
        if isinstance(e, (ScheduleNotFoundError, LeaderNotFoundError)):
            status = 404
        elif isinstance(
            e,
            (DuplicateDateError, DuplicatePeriodError, DuplicateLeaderError, ConfigurationError),
        ):
            status = 400
        elif isinstance(e, RemoteStoreError):
            status = 502
        else:
            status = 500
        if status >= 500:
            logger.error(f"Request failed: {e}")
        return jsonify({"error": str(e)}), status

    @app.route("/health", methods=["GET"])
    def health():
        return jsonify({"status": "ok", "notion": synchronizer is not None})

    return app
