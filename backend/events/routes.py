from __future__ import annotations

from flask import Blueprint, request, jsonify
from flask_jwt_extended import jwt_required
from pydantic import ValidationError

from auth.tokens import current_user_id
from errors import ErrorKind, status_only

from .ledger import sum_events
from .schemas import FinancialEventSchema
from .services import insert_event, list_events


events_bp = Blueprint("events", __name__, url_prefix="/financial-events")


@events_bp.route("", methods=["POST"])
@jwt_required()
def create_event():
    try:
        data = FinancialEventSchema.model_validate(request.get_json(silent=True) or {})
    except ValidationError:
        return status_only(ErrorKind.VALIDATION.status)

    insert_event(current_user_id(), data.value, data.type)

    return status_only(201)


@events_bp.route("", methods=["GET"])
@jwt_required()
def get_events():
    events = list_events(current_user_id())
    return jsonify([e.to_dict() for e in events]), 200


@events_bp.route("/sum", methods=["GET"])
@jwt_required()
def get_sum():
    events = list_events(current_user_id())
    return jsonify({"sum": float(sum_events(events))}), 200
