import uuid

from flask import current_app

from postfeed.extensions.minio_client import get_minio_client


ALLOWED_IMAGE_MIME_TYPES = {
    "image/jpeg",
    "image/png",
    "image/webp",
}

_EXTENSIONS = {
    "image/jpeg": "jpeg",
    "image/png": "png",
    "image/webp": "webp",
}

PART_SIZE = 10 * 1024 * 1024


class MediaStorageError(Exception):
    pass


def validate_image_files(files):
    for file in files:
        if not getattr(file, "filename", ""):
            raise ValueError("Image file is required")

        mimetype = getattr(file, "mimetype", None) or ""
        if mimetype not in ALLOWED_IMAGE_MIME_TYPES:
            raise ValueError(f"Unsupported media type: {mimetype}")


def _get_stream_and_length(file_storage):
    stream = getattr(file_storage, "stream", file_storage)
    try:
        stream.seek(0, 2)
        length = stream.tell()
        stream.seek(0)
        return stream, length
    except (AttributeError, OSError):
        return stream, -1


def store_post_images(post_id: int, files) -> list[str]:
    """Upload image files for a post and return their object names in order."""
    bucket = current_app.config["MINIO_BUCKET"]
    object_names = []

    try:
        minio = get_minio_client()
        for file in files:
            object_name = f"posts/{post_id}/{uuid.uuid4()}.{_EXTENSIONS[file.mimetype]}"
            stream, length = _get_stream_and_length(file)
            upload_kwargs = {
                "bucket_name": bucket,
                "object_name": object_name,
                "data": stream,
                "length": length,
                "content_type": file.mimetype,
            }
            if length == -1:
                upload_kwargs["part_size"] = PART_SIZE

            minio.put_object(**upload_kwargs)
            object_names.append(object_name)
    except Exception as e:
        raise MediaStorageError("Media storage is unavailable") from e

    return object_names
