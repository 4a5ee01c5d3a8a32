import logging

from flask import Blueprint, request

from postfeed.extensions.extensions import ma
from postfeed.models.feed_model import PostWithDateModel
from postfeed.schemas.feed_schema import PostWithDateModelSchema
from postfeed.services import feed_service

logger = logging.getLogger(__name__)

content_bp = Blueprint("content", __name__)

_start_time_field = ma.DateTime()


def _parse_start_time(raw):
    if raw is None or not raw.strip():
        return None
    return _start_time_field.deserialize(raw.strip())


@content_bp.route("", methods=["GET"])
def get_content():
    # the feed never reports errors to the client; it degrades to an empty page
    try:
        page = feed_service.get_page(_parse_start_time(request.args.get("startTime")))
    except Exception:
        logger.exception("Feed request failed, returning empty page")
        page = PostWithDateModel()

    return PostWithDateModelSchema().dump(page), 200
