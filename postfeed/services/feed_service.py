"""Reverse-chronological feed pages keyed by a timestamp cursor.

A page holds at most ``FEED_PAGE_SIZE`` posts strictly older than the cursor,
newest first. ``eldest_date`` of a page is the cursor of the next one; page
dates are timezone-aware UTC so they survive the trip through a client.
"""
import logging
from datetime import datetime, timedelta, timezone

from flask import current_app

from postfeed.models.feed_model import PostModel, PostWithDateModel
from postfeed.repositories import post_image_repository, post_repository, user_repository

logger = logging.getLogger(__name__)


def is_no_cursor(cursor) -> bool:
    if cursor is None:
        return True
    return cursor.replace(tzinfo=None) == datetime.min


def normalize_cursor(cursor: datetime, utc_offset_hours: float) -> datetime:
    """Convert a cursor to the naive UTC form posts are stored in.

    Cursors without timezone information are read as wall-clock time at
    ``utc_offset_hours``.
    """
    if cursor.tzinfo is None:
        cursor = cursor.replace(tzinfo=timezone(timedelta(hours=utc_offset_hours)))
    return cursor.astimezone(timezone.utc).replace(tzinfo=None)


def get_page(cursor=None, page_size: int | None = None) -> PostWithDateModel:
    if page_size is None:
        page_size = current_app.config["FEED_PAGE_SIZE"]

    before = None
    if not is_no_cursor(cursor):
        before = normalize_cursor(
            cursor,
            current_app.config["FEED_CURSOR_UTC_OFFSET_HOURS"],
        )

    posts = post_repository.get_latest_posts(page_size, before=before)
    if not posts:
        return PostWithDateModel()

    author_ids = {post.author_id for post in posts}
    user_by_id = {user.id: user for user in user_repository.get_by_ids(author_ids)}
    images_by_post_id = post_image_repository.group_image_names_by_post(
        [post.id for post in posts]
    )

    post_models = []
    for post in posts:
        author = user_by_id.get(post.author_id)
        if author is None:
            logger.warning(
                "Post %s dropped from feed: author %s not found",
                post.id,
                post.author_id,
            )
            continue

        post_models.append(
            PostModel(
                id=post.id,
                author_name=author.login,
                author_avatar=author.avatar,
                likes_count=post.likes_count,
                comments_count=post.comments_count,
                text=post.text,
                date=post.date.replace(tzinfo=timezone.utc),
                images=list(images_by_post_id.get(post.id, [])),
            )
        )

    if not post_models:
        return PostWithDateModel()

    post_models.sort(key=lambda p: p.date, reverse=True)
    return PostWithDateModel(
        post_models=post_models,
        eldest_date=post_models[-1].date,
    )
