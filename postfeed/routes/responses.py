from flask import jsonify

from postfeed.results import ErrorKind


STATUS_BY_KIND = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.CONFLICT: 409,
    ErrorKind.STORE: 500,
    ErrorKind.MEDIA_UNAVAILABLE: 503,
}


def error_response(result):
    return jsonify({"error": result.message}), STATUS_BY_KIND.get(result.kind, 400)
