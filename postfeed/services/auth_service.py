import hmac
import logging
from datetime import datetime

from sqlalchemy.exc import SQLAlchemyError

from postfeed.db import db
from postfeed.repositories import secret_question_repository, user_repository
from postfeed.results import OK, ErrorKind, Result, describe_store_error
from postfeed.services import validation
from postfeed.services.hasher import hasher

logger = logging.getLogger(__name__)

NO_SUCH_USER = "No such user exists"
ADD_USER_FAILED = "Failed to add user. Reason: {}"


def add_user(user_model) -> Result:
    creation_result = validation.create_and_validate_user(user_model)
    if not creation_result.is_successful:
        logger.info("User rejected: %s", creation_result.message)
        return Result.failed(
            ADD_USER_FAILED.format(creation_result.message),
            ErrorKind.VALIDATION,
        )

    user = creation_result.value
    if user_repository.get_by_login(user.login):
        return Result.failed(
            ADD_USER_FAILED.format("login is already in use"),
            ErrorKind.CONFLICT,
        )

    secret_question = secret_question_repository.get_by_question(
        user_model.get("secretQuestion")
    )
    if not secret_question:
        return Result.failed(
            ADD_USER_FAILED.format("no such secret question exists"),
            ErrorKind.NOT_FOUND,
        )

    login = user.login
    user.secret_question_id = secret_question.id
    user.password_salt = hasher.hash(str(datetime.now()))
    user.password = hasher.hash(user.password + user.password_salt)

    try:
        user_repository.create_user(user)
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.exception("Failed to store user %s", login)
        return Result.failed(
            ADD_USER_FAILED.format(describe_store_error(e)),
            ErrorKind.STORE,
        )

    logger.info("User %s registered", login)
    return Result.ok(OK)


def authorize(user_model) -> str:
    login = user_model.get("login")
    password = user_model.get("password")
    if not isinstance(login, str) or not isinstance(password, str):
        return NO_SUCH_USER

    # logins are stored stripped
    user = user_repository.get_by_login(login.strip())
    if not user:
        return NO_SUCH_USER

    # same answer for unknown login and wrong password
    supplied_hash = hasher.hash(password + user.password_salt)
    return OK if hmac.compare_digest(supplied_hash, user.password) else NO_SUCH_USER


def list_secret_questions():
    return secret_question_repository.list_questions()
