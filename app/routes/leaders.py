"""Leader CRUD endpoints."""

from flask import Blueprint, jsonify, request

from app.models.leader import Leader
from app.storage.leader_store import LeaderStore


def create_leaders_blueprint(leader_store: LeaderStore) -> Blueprint:
    """Build the /api/leaders blueprint."""
    bp = Blueprint("leaders", __name__)

    @bp.route("", methods=["GET"])
    def list_leaders():
        return jsonify(leader_store.load().model_dump(by_alias=True))

    @bp.route("", methods=["POST"])
    def create_leader():
        leader = Leader.model_validate(request.get_json(force=True))
        leader_store.add(leader)
        return jsonify(leader.model_dump(by_alias=True)), 201

    @bp.route("/<name>", methods=["PUT"])
    def update_leader(name):
        leader = Leader.model_validate(request.get_json(force=True))
        leader_store.update(name, leader)
        return jsonify(leader.model_dump(by_alias=True))

    @bp.route("/<name>", methods=["DELETE"])
    def delete_leader(name):
        leader_store.delete(name)
        return "", 204

    return bp
