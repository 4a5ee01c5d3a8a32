from flask import Blueprint, request, jsonify
from flask_jwt_extended import (
    create_access_token,
    create_refresh_token,
    get_jwt_identity,
    jwt_required,
)

from postfeed.routes.responses import error_response
from postfeed.services import auth_service


auth_bp = Blueprint("auth", __name__)


@auth_bp.route("/register", methods=["POST"])
def register():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"error": "Invalid JSON body"}), 400

    result = auth_service.add_user(data)
    if not result.is_successful:
        return error_response(result)
    return jsonify({"message": result.value}), 201


@auth_bp.route("/login", methods=["POST"])
def login():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"error": "Invalid JSON body"}), 400

    status = auth_service.authorize(data)
    if status != auth_service.OK:
        return jsonify({"error": status}), 401

    login = data["login"].strip()
    return jsonify({
        "message": status,
        "access_token": create_access_token(identity=login),
        "refresh_token": create_refresh_token(identity=login),
    }), 200


@auth_bp.route("/refresh", methods=["POST"])
@jwt_required(refresh=True)
def refresh_token():
    login = get_jwt_identity()
    return jsonify({"access_token": create_access_token(identity=login)}), 200
