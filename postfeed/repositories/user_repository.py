from postfeed.db import db
from postfeed.models.user_model import User


def get_by_login(login: str):
    return User.query.filter(User.login == login).first()


def get_by_ids(user_ids):
    if not user_ids:
        return []
    return User.query.filter(User.id.in_(user_ids)).all()


def create_user(user: User):
    db.session.add(user)
    db.session.commit()
    return user
