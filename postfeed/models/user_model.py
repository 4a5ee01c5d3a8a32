from postfeed.db import db


class User(db.Model):
    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)
    login = db.Column(db.String(80), unique=True, nullable=False)
    # hash of the raw password concatenated with password_salt
    password = db.Column(db.String(64), nullable=False)
    password_salt = db.Column(db.String(64), nullable=False)
    secret_question_id = db.Column(
        db.Integer,
        db.ForeignKey("secret_questions.id"),
        nullable=False
    )
    avatar = db.Column(db.String(255), nullable=True)
