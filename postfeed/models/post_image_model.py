from postfeed.db import db


class PostImage(db.Model):
    __tablename__ = "post_images"

    id = db.Column(db.Integer, primary_key=True)
    related_post_id = db.Column(
        db.Integer,
        db.ForeignKey("posts.id"),
        nullable=False
    )
    name = db.Column(db.String(255), nullable=False)
