from postfeed.db import db


class SecretQuestion(db.Model):
    __tablename__ = "secret_questions"

    id = db.Column(db.Integer, primary_key=True)
    question = db.Column(db.String(255), unique=True, nullable=False)
