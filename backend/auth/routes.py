# backend/auth/routes.py

from flask import Blueprint, request, jsonify
from pydantic import ValidationError

from auth.schemas import SignUpSchema, SignInSchema
from auth.services import sign_up as sign_up_user, sign_in as sign_in_user
from errors import ErrorKind, status_only

auth_bp = Blueprint("auth", __name__)


@auth_bp.route("/sign-up", methods=["POST"])
def sign_up():

    try:
        data = SignUpSchema.model_validate(request.get_json(silent=True) or {})
    except ValidationError:
        return status_only(ErrorKind.VALIDATION.status)

    _, error = sign_up_user(data)

    if error:
        return status_only(error.status)

    return status_only(201)


@auth_bp.route("/sign-in", methods=["POST"])
def sign_in():

    try:
        data = SignInSchema.model_validate(request.get_json(silent=True) or {})
    except ValidationError:
        return status_only(ErrorKind.VALIDATION.status)

    token, error = sign_in_user(data)

    if error:
        return status_only(error.status)

    return jsonify({"response": token}), 200
