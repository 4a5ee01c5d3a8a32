from datetime import datetime

from postfeed.db import db


class Post(db.Model):
    __tablename__ = "posts"

    id = db.Column(db.Integer, primary_key=True)
    author_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False)
    text = db.Column(db.Text, nullable=False)
    # naive UTC
    date = db.Column(db.DateTime, default=datetime.utcnow, nullable=False, index=True)
    likes_count = db.Column(db.Integer, default=0, nullable=False)
    comments_count = db.Column(db.Integer, default=0, nullable=False)

    images = db.relationship(
        "PostImage",
        backref="post",
        lazy="select",
        order_by="PostImage.id",
        cascade="all, delete-orphan"
    )
