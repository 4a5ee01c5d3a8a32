from flask import Blueprint, jsonify

from postfeed.services import auth_service


secret_question_bp = Blueprint("secret_questions", __name__)


@secret_question_bp.route("/secret-questions", methods=["GET"])
def list_secret_questions():
    return jsonify({"questions": auth_service.list_secret_questions()}), 200
