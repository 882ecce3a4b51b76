"""Schedule CRUD, diff and sync endpoints."""

import logging

from flask import Blueprint, jsonify, request

from app.exceptions import ConfigurationError
from app.models.schedule import ScheduleEntry
from app.processing.reconciler import diff
from app.processing.synchronizer import Synchronizer
from app.processing.validator import validate_schedule
from app.storage.leader_store import LeaderStore
from app.storage.schedule_store import LocalScheduleStore

logger = logging.getLogger(__name__)


def create_schedules_blueprint(
    local_store: LocalScheduleStore,
    leader_store: LeaderStore,
    synchronizer: Synchronizer | None,
) -> Blueprint:
    """Build the /api/schedules blueprint.

    Args:
        local_store: Local schedule file
        leader_store: Roster used by /validate
        synchronizer: None when running local-only
    """
    bp = Blueprint("schedules", __name__)

    def require_synchronizer() -> Synchronizer:
        if synchronizer is None:
            raise ConfigurationError(
                "Notion sync is not available in local-only mode. "
                "Set NOTION_API_KEY and NOTION_BOOKLIST_DATABASE_ID."
            )
        return synchronizer

    @bp.route("", methods=["GET"])
    def list_schedules():
        """Local schedule document."""
        return jsonify(local_store.load().to_dict())

    @bp.route("", methods=["POST"])
    def create_schedule():
        entry = ScheduleEntry.model_validate(request.get_json(force=True))
        local_store.add(entry)
        return jsonify(entry.to_record()), 201

    @bp.route("/<date>", methods=["PUT"])
    def update_schedule(date):
        entry = ScheduleEntry.model_validate(request.get_json(force=True))
        local_store.update(date, entry)
        return jsonify(entry.to_record())

    @bp.route("/<date>", methods=["DELETE"])
    def delete_schedule(date):
        local_store.delete(date)
        return "", 204

    @bp.route("/validate", methods=["GET"])
    def validate():
        report = validate_schedule(local_store.entries(), leader_store.load())
        return jsonify(report.to_dict())

    @bp.route("/diff", methods=["GET"])
    def schedule_diff():
        sync = require_synchronizer()
        result = diff(local_store.entries(), sync.remote_store.query())
        return jsonify(result.to_dict())

    @bp.route("/sync", methods=["POST"])
    def sync_to_remote():
        """Write local entries to Notion.

        Body (optional): {"mode": "upsert" | "push", "refreshLocal": bool}.
        "upsert" writes every local entry, "push" only the diff.
        """
        sync = require_synchronizer()
        body = request.get_json(silent=True) or {}
        mode = body.get("mode", "upsert")

        if mode == "upsert":
            report = sync.upsert_all()
        elif mode == "push":
            report = sync.push_local_to_remote(
                sync.compute_diff(), refresh_local=bool(body.get("refreshLocal"))
            )
        else:
            return jsonify({"error": f"Unknown sync mode: {mode}"}), 400

        return jsonify({"message": "Sync finished", **report.to_dict()})

    @bp.route("/pull", methods=["POST"])
    def pull_from_remote():
        """Overwrite the local schedule with Notion. Requires {"confirm": true}."""
        sync = require_synchronizer()
        body = request.get_json(silent=True) or {}
        if body.get("confirm") is not True:
            return (
                jsonify(
                    {"error": "Pulling overwrites the local schedule, send {\"confirm\": true}"}
                ),
                400,
            )
        schedule = sync.pull_remote_to_local()
        return jsonify(schedule.to_dict())

    return bp
