from flask import Blueprint, request, jsonify
from flask_jwt_extended import jwt_required, get_jwt_identity

from postfeed.routes.responses import error_response
from postfeed.services import post_service

post_bp = Blueprint("posts", __name__)


@post_bp.route("/posts", methods=["POST"])
@jwt_required()
def create_post():
    login = get_jwt_identity()

    content_type = (request.content_type or "").lower()
    files = []

    if "multipart/form-data" in content_type:
        post_model = {"text": request.form.get("text")}
        files = request.files.getlist("images")
    else:
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            return jsonify({"error": "Invalid JSON body"}), 400
        post_model = {"text": data.get("text")}
        if "images" in data:
            post_model["images"] = data["images"]

    post_model["login"] = login
    result = post_service.submit_post(post_model, files)
    if not result.is_successful:
        return error_response(result)
    return jsonify({"message": result.value}), 201
