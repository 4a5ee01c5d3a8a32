from postfeed.db import db
from postfeed.models.post_model import Post


def get_latest_posts(limit: int, before=None):
    query = Post.query
    if before is not None:
        query = query.filter(Post.date < before)

    return (
        query
        .order_by(Post.date.desc(), Post.id.desc())
        .limit(limit)
        .all()
    )


def add_post(post: Post):
    db.session.add(post)
    db.session.flush()
    return post
