import logging

from sqlalchemy.exc import SQLAlchemyError

from postfeed.db import db
from postfeed.models.post_image_model import PostImage
from postfeed.repositories import post_repository, user_repository
from postfeed.results import OK, ErrorKind, Result, describe_store_error
from postfeed.schemas.post_schema import MAX_POST_IMAGES
from postfeed.services import media_service, validation

logger = logging.getLogger(__name__)

ADD_POST_FAILED = "Failed to add post. Reason: {}"


def submit_post(post_model, files=None) -> Result:
    creation_result = validation.create_and_validate_post(post_model)
    if not creation_result.is_successful:
        logger.info("Post rejected: %s", creation_result.message)
        return Result.failed(
            ADD_POST_FAILED.format(creation_result.message),
            ErrorKind.VALIDATION,
        )

    post = creation_result.value
    files = files or []
    if len(post.images) + len(files) > MAX_POST_IMAGES:
        return Result.failed(
            ADD_POST_FAILED.format(f"Maximum {MAX_POST_IMAGES} images allowed."),
            ErrorKind.VALIDATION,
        )

    try:
        media_service.validate_image_files(files)
    except ValueError as e:
        return Result.failed(ADD_POST_FAILED.format(str(e)), ErrorKind.VALIDATION)

    author = user_repository.get_by_login(post_model.get("login"))
    if not author:
        return Result.failed(
            ADD_POST_FAILED.format("no corresponding user"),
            ErrorKind.NOT_FOUND,
        )

    login = author.login
    post.author_id = author.id
    try:
        post_repository.add_post(post)
        if files:
            for object_name in media_service.store_post_images(post.id, files):
                post.images.append(PostImage(name=object_name))
        db.session.commit()
    except media_service.MediaStorageError:
        db.session.rollback()
        logger.exception("Image upload failed for post by %s", login)
        return Result.failed(
            ADD_POST_FAILED.format("media storage is unavailable"),
            ErrorKind.MEDIA_UNAVAILABLE,
        )
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.exception("Failed to store post by %s", login)
        return Result.failed(
            ADD_POST_FAILED.format(describe_store_error(e)),
            ErrorKind.STORE,
        )

    logger.info("Post %s added by %s", post.id, login)
    return Result.ok(OK)
