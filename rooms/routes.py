# rooms/routes.py
from flask import Blueprint, current_app, jsonify

from extensions import db
from rooms.service import RoomService
from utils.http import json_body

rooms_bp = Blueprint("rooms", __name__, url_prefix="/api/rooms")


def _room_service():
    return RoomService(db.session, max_code_attempts=current_app.config["ROOM_CODE_MAX_ATTEMPTS"])


# ✅ Create a room
@rooms_bp.route("", methods=["POST"])
def create_room():
    data = json_body()
    room = _room_service().create_room(data.get("name"))
    return jsonify(room.to_dict()), 201


# ✅ Join a room by its shareable code
@rooms_bp.route("/join", methods=["POST"])
def join_room():
    data = json_body()
    room, member = _room_service().join_room(data.get("code"), data.get("memberName"))
    return jsonify({"room": room.to_dict(), "member": member.to_dict()}), 201


@rooms_bp.route("/<room_id>", methods=["GET"])
def get_room(room_id):
    """
    Room detail: members (join order), expenses (newest first) and balance.
    """
    detail = _room_service().get_room_detail(room_id)
    return jsonify({
        "room": detail["room"].to_dict(),
        "members": [m.to_dict() for m in detail["members"]],
        "expenses": [e.to_dict() for e in detail["expenses"]],
        "balance": detail["balance"].to_dict(),
    }), 200


@rooms_bp.route("/<room_id>/balance", methods=["GET"])
def get_balance(room_id):
    balance = _room_service().get_balance(room_id)
    return jsonify(balance.to_dict()), 200
