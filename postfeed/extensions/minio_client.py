"""MinIO client for post images.

Clients are cached per connection settings. The configured bucket is created
when a client is first built, so uploads can assume it exists.
"""
import urllib3
from threading import Lock

from flask import current_app
from minio import Minio


_clients = {}
_clients_lock = Lock()


def _connection_key(config):
    return (
        config["MINIO_ENDPOINT"],
        config["MINIO_ACCESS_KEY"],
        config["MINIO_SECRET_KEY"],
        config["MINIO_SECURE"],
        config["MINIO_BUCKET"],
    )


def _build_client(config) -> Minio:
    pool = urllib3.PoolManager(
        timeout=urllib3.Timeout(
            connect=config["MINIO_CONNECT_TIMEOUT"],
            read=config["MINIO_READ_TIMEOUT"],
        ),
        retries=False,
        maxsize=config.get("MINIO_HTTP_POOL_MAXSIZE", 32),
    )
    return Minio(
        config["MINIO_ENDPOINT"],
        access_key=config["MINIO_ACCESS_KEY"],
        secret_key=config["MINIO_SECRET_KEY"],
        secure=config["MINIO_SECURE"],
        http_client=pool,
    )


def get_minio_client() -> Minio:
    config = current_app.config
    key = _connection_key(config)

    with _clients_lock:
        client = _clients.get(key)
        if client is None:
            client = _build_client(config)
            bucket = config["MINIO_BUCKET"]
            if not client.bucket_exists(bucket):
                client.make_bucket(bucket)
            # cached only once the bucket is known to exist
            _clients[key] = client
        return client


def reset_clients():
    with _clients_lock:
        _clients.clear()
